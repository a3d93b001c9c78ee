# src/materials/dielectric.py
import math
import random
from typing import TYPE_CHECKING, Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract, schlick
from materials.material import Material

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

class Dielectric(Material):
    """Clear refractive material (glass, water) with index ``ref_idx``."""
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=None) -> Tuple[Color, Ray]:
        rng = rng if rng is not None else random
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        etai_over_etat = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection: no refracted direction exists.
        if etai_over_etat * sin_theta > 1.0:
            direction = reflect(unit_direction, rec.normal)
        elif rng.random() < schlick(cos_theta, etai_over_etat):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, etai_over_etat)

        return attenuation, Ray(rec.p, direction, ray_in.time)
