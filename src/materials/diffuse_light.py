# materials/diffuse_light.py
from typing import TYPE_CHECKING, Optional, Tuple, Union
from core.ray import Ray
from core.vector import Color, Vector3
from materials.material import Material
from materials.textures import Texture, as_texture

if TYPE_CHECKING:
    from geometry.hittable import HitRecord

class DiffuseLight(Material):
    """
    Area light. Radiance comes from ``emit``, so a texture gives a
    patterned light; nothing is ever scattered.
    """
    def __init__(self, emit: Union[Color, Texture]):
        self.emit = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: "HitRecord", rng=None) -> Optional[Tuple[Color, Ray]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        return self.emit.value(u, v, p)
