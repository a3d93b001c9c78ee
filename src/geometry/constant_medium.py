# geometry/constant_medium.py
import math
import random
from typing import Optional
from core.aabb import AABB
from core.config import MEDIUM_EXIT_OFFSET
from core.errors import SceneConstructionError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic


class ConstantMedium(Hittable):
    """
    Homogeneous participating medium (fog, smoke) filling ``boundary``.

    A ray crossing the medium scatters after a free path drawn from an
    exponential distribution with rate ``density``; if that path is longer
    than the chord through the boundary the ray passes through untouched.
    The boundary must be convex.
    """
    def __init__(self, boundary: Hittable, density: float, albedo):
        if density <= 0:
            raise SceneConstructionError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rng = rng if rng is not None else random

        rec1 = self.boundary.hit(ray, -math.inf, math.inf, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + MEDIUM_EXIT_OFFSET, math.inf, rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, t_min)
        t_exit = min(rec2.t, t_max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0:
            t_enter = 0.0

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - random() lies in (0, 1], keeping log() finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        rec = HitRecord()
        rec.t = t_enter + hit_distance / ray_length
        rec.p = ray.at(rec.t)
        # Volumetric scattering has no surface orientation.
        rec.normal = Vector3(1, 0, 0)
        rec.front_face = True
        rec.material = self.phase_function
        return rec

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)
