# geometry/rect.py
from typing import Optional
from core.aabb import AABB
from core.config import RECT_THICKNESS
from core.errors import SceneConstructionError
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord


class AxisAlignedRect(Hittable):
    """
    A rectangle lying in the plane ``axis k == const``, spanning
    ``[a0, a1]`` along the first free axis and ``[b0, b1]`` along the
    second. Subclasses fix which axes those are.
    """
    axis_a = 0
    axis_b = 1
    axis_k = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if a1 < a0 or b1 < b0:
            raise SceneConstructionError(
                f"{type(self).__name__} extents are inverted: [{a0}, {a1}] x [{b0}, {b1}]")
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def _vector(self, a: float, b: float, k: float) -> Vector3:
        coords = [0.0, 0.0, 0.0]
        coords[self.axis_a] = a
        coords[self.axis_b] = b
        coords[self.axis_k] = k
        return Vector3(*coords)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        d = ray.direction[self.axis_k]
        if d == 0.0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis_k]) / d
        if t < t_min or t > t_max:
            return None
        a = ray.origin[self.axis_a] + t * ray.direction[self.axis_a]
        b = ray.origin[self.axis_b] + t * ray.direction[self.axis_b]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.u = (a - self.a0) / (self.a1 - self.a0) if self.a1 != self.a0 else 0.0
        rec.v = (b - self.b0) / (self.b1 - self.b0) if self.b1 != self.b0 else 0.0
        rec.t = t
        rec.set_face_normal(ray, self._vector(0.0, 0.0, 1.0))
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # Pad the fixed axis so the box never has zero thickness.
        return AABB(self._vector(self.a0, self.b0, self.k - RECT_THICKNESS),
                    self._vector(self.a1, self.b1, self.k + RECT_THICKNESS))


class XYRect(AxisAlignedRect):
    axis_a, axis_b, axis_k = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)


class XZRect(AxisAlignedRect):
    axis_a, axis_b, axis_k = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)


class YZRect(AxisAlignedRect):
    axis_a, axis_b, axis_k = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
