# materials/material.py
from typing import TYPE_CHECKING, Optional, Tuple
from core.ray import Ray
from core.vector import Color, Vector3

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses implement scatter(); emissive
    materials also override emitted().
    """
    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=None) -> Optional[Tuple[Color, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray), or None when the
        material absorbs the ray.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """Self-emitted radiance; black for everything but lights."""
        return BLACK
