# renderer/integrator.py
"""
Recursive Monte-Carlo radiance estimate along a ray.

Each bounce adds the surface's emission and, if the material scatters,
the attenuated radiance gathered along the scattered ray. Recursion stops
after ``depth`` bounces (contributing black), which bounds both the bias
and the stack depth.
"""
import math
from typing import Callable, Union
from core.ray import Ray
from core.utils import T_MIN
from core.vector import Color
from geometry.hittable import Hittable

Background = Union[Color, Callable[[Ray], Color]]

BLACK = Color(0.0, 0.0, 0.0)


def sky_gradient(ray: Ray) -> Color:
    """Blend from white at the horizon to light blue overhead."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Color(1.0, 1.0, 1.0) * (1.0 - t) + Color(0.5, 0.7, 1.0) * t


def ray_color(ray: Ray, background: Background, world: Hittable, depth: int, rng=None) -> Color:
    """
    Radiance arriving along ``ray``.

    ``background`` is returned unchanged for rays that escape the scene; it
    may also be a callable evaluated on the escaping ray.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf, rng)
    if rec is None:
        return background(ray) if callable(background) else background

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    attenuation, scattered = scatter
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1, rng)
