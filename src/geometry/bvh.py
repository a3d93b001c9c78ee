# src/geometry/bvh.py
import logging
import random
from typing import List, Optional, Sequence
from core.aabb import AABB
from core.errors import SceneConstructionError
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

# Seed used for split axes when the caller passes no rng.
DEFAULT_BVH_SEED = 0


def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise SceneConstructionError(f"No bounding box for {obj!r} in BVH construction")
    return box


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over ``objects[start:end]``.

    Leaves are the primitives themselves: a one-object span puts that object
    on both sides. Each split picks an axis from ``rng``, orders the span by
    the minimum corner of each box along it (a stable sort, so ties keep
    their input order) and halves it. The slice of ``objects`` is reordered
    in place.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 0.0, rng=None):
        object_span = end - start
        if object_span <= 0:
            raise SceneConstructionError("Cannot build a BVH over an empty collection")
        if rng is None:
            rng = random.Random(DEFAULT_BVH_SEED)

        axis = rng.randint(0, 2)
        def key(obj):
            return _box_of(obj, time0, time1).minimum[axis]

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = sorted(objects[start:end], key=key)
            self.left = first
            self.right = second
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        if self.right is self.left:
            return hit_left

        # Anything on the right must now beat the left hit.
        hit_right = self.right.hit(ray, t_min, hit_left.t if hit_left else t_max, rng)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float, time1: float) -> AABB:
        return self.box


def _count_nodes(node: Hittable) -> int:
    if not isinstance(node, BVHNode):
        return 0
    if node.right is node.left:
        return 1 + _count_nodes(node.left)
    return 1 + _count_nodes(node.left) + _count_nodes(node.right)


def build_bvh(primitives: Sequence[Hittable], time0: float = 0.0, time1: float = 0.0,
              rng=None) -> BVHNode:
    """
    Build a BVH over ``primitives`` (any iterable of Hittables, including a
    HittableList). The input sequence itself is not reordered.

    Raises SceneConstructionError for an empty input or a primitive
    without a bounding box.
    """
    objects = list(primitives)
    if not objects:
        raise SceneConstructionError("Cannot build a BVH over an empty collection")
    root = BVHNode(objects, 0, len(objects), time0, time1, rng)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built BVH over %d primitives with %d nodes, root box %s",
                     len(objects), _count_nodes(root), root.box)
    return root
