# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Where and how a ray met a surface. ``normal`` is stored facing the
    incoming ray; ``front_face`` says whether that is also the geometric
    outward normal.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, u: float = 0.0, v: float = 0.0,
                 front_face: bool = True, material=None):
        self.p = p
        self.normal = normal
        self.t = t
        self.u = u          # texture coordinates in [0, 1]
        self.v = v
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """Orient ``outward_normal`` against ``ray`` and remember which side was hit."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p}, normal={self.normal}, "
                f"u={self.u}, v={self.v}, front_face={self.front_face})")

class Hittable:
    """
    Interface shared by primitives, wrappers and aggregates.

    ``hit`` returns the nearest intersection with ``t_min < t < t_max`` or
    None; ``rng`` is only consulted by stochastic objects such as media.
    ``bounding_box`` returns None for objects without finite bounds.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError(f"{type(self).__name__} does not implement hit()")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        raise NotImplementedError(f"{type(self).__name__} does not implement bounding_box()")
