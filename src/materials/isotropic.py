# materials/isotropic.py
from typing import TYPE_CHECKING, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from materials.material import Material
from materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

class Isotropic(Material):
    """Phase function of a participating medium: scatters in any direction."""
    def __init__(self, albedo: Union[Color, Texture]):
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=None) -> Tuple[Color, Ray]:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return self.albedo.value(rec.u, rec.v, rec.p), scattered
