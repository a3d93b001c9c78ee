# materials/lambertian.py

from typing import TYPE_CHECKING, Tuple, Union
from core.ray import Ray
from core.vector import Color
from core.utils import random_unit_vector
from materials.material import Material
from materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        # Store either a solid color or a texture.
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=None) -> Tuple[Color, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters; returns (attenuation, scattered_ray).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.albedo.value(rec.u, rec.v, rec.p)
        return attenuation, scattered
