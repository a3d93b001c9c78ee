# materials/metal.py
from typing import TYPE_CHECKING, Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import clamp, reflect, random_in_unit_sphere
from materials.material import Material
from materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

class Metal(Material):
    """
    Metal material: mirror reflection blurred by ``fuzz`` (clamped to
    [0, 1]), with optional texture support for the tint.
    """
    def __init__(self, albedo: Union[Color, Texture], fuzz: float = 0.0):
        self.albedo = as_texture(albedo)
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=None) -> Optional[Tuple[Color, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo.value(rec.u, rec.v, rec.p), scattered

        return None  # Absorb the ray if it does not scatter forward
