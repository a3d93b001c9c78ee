"""
Hittable scene graph: primitives, composites, transform wrappers and the
bounding volume hierarchy.
"""
from geometry.hittable import HitRecord, Hittable
from geometry.sphere import MovingSphere, Sphere, get_sphere_uv
from geometry.rect import AxisAlignedRect, XYRect, XZRect, YZRect
from geometry.transforms import FlipFace, RotateY, Translate
from geometry.box import Box
from geometry.constant_medium import ConstantMedium
from geometry.world import HittableList
from geometry.bvh import BVHNode, build_bvh

__all__ = [
    "HitRecord",
    "Hittable",
    "Sphere",
    "MovingSphere",
    "get_sphere_uv",
    "AxisAlignedRect",
    "XYRect",
    "XZRect",
    "YZRect",
    "FlipFace",
    "Translate",
    "RotateY",
    "Box",
    "ConstantMedium",
    "HittableList",
    "BVHNode",
    "build_bvh",
]
