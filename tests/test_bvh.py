"""Unit tests for BVH construction and traversal."""

import math
import random

import pytest

from core.errors import SceneConstructionError
from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import BVHNode, build_bvh
from geometry.hittable import Hittable
from geometry.rect import XYRect, XZRect
from geometry.sphere import MovingSphere, Sphere
from geometry.transforms import RotateY
from geometry.world import HittableList


def _random_point(rng, spread):
    return Vector3(rng.uniform(-spread, spread), rng.uniform(-spread, spread),
                   rng.uniform(-spread, spread))


def _random_scene(rng, count=60):
    objects = []
    for i in range(count):
        kind = i % 4
        center = _random_point(rng, 10)
        tag = f"obj{i}"
        if kind == 0:
            objects.append(Sphere(center, rng.uniform(0.2, 1.0), tag))
        elif kind == 1:
            objects.append(MovingSphere(center, center + _random_point(rng, 1), 0.0, 1.0,
                                        rng.uniform(0.2, 1.0), tag))
        elif kind == 2:
            objects.append(XYRect(center.x, center.x + 1, center.y, center.y + 1, center.z, tag))
        else:
            objects.append(XZRect(center.x, center.x + 1, center.z, center.z + 1, center.y, tag))
    return objects


def _leaves(node):
    if not isinstance(node, BVHNode):
        return [node]
    if node.right is node.left:
        return _leaves(node.left)
    return _leaves(node.left) + _leaves(node.right)


class NoBox(Hittable):
    def hit(self, ray, t_min, t_max, rng=None):
        return None

    def bounding_box(self, time0, time1):
        return None


class TestBVH:
    """Tests for BVHNode and build_bvh."""

    def test_matches_linear_scan(self):
        rng = random.Random(2024)
        objects = _random_scene(rng)
        linear = HittableList(objects)
        bvh = build_bvh(objects, 0.0, 1.0, rng=random.Random(3))

        hits = 0
        for _ in range(500):
            ray = Ray(_random_point(rng, 15), _random_point(rng, 1), rng.random())
            expected = linear.hit(ray, 0.001, math.inf)
            actual = bvh.hit(ray, 0.001, math.inf)
            if expected is None:
                assert actual is None
                continue
            hits += 1
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)
            assert actual.material == expected.material
        assert hits > 0

    def test_respects_interval(self):
        bvh = build_bvh([Sphere(Vector3(0, 0, -5), 1, "near"), Sphere(Vector3(0, 0, -10), 1, "far")])
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert bvh.hit(ray, 0.001, math.inf).material == "near"
        assert bvh.hit(ray, 7.0, math.inf).material == "far"
        assert bvh.hit(ray, 0.001, 3.0) is None

    def test_input_not_reordered(self):
        objects = _random_scene(random.Random(1), count=20)
        before = list(objects)
        build_bvh(objects)
        assert objects == before

    def test_accepts_hittable_list(self):
        world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, "a")])
        bvh = build_bvh(world)
        assert bvh.hit(Ray(Vector3(), Vector3(0, 0, -1)), 0.001, math.inf).material == "a"

    def test_single_object_on_both_sides(self):
        sphere = Sphere(Vector3(0, 0, 0), 1, None)
        node = build_bvh([sphere])
        assert node.left is sphere
        assert node.right is sphere
        assert node.box == sphere.bounding_box(0, 0)

    def test_two_objects_sorted_along_axis(self):
        # Same ordering on every axis, so the result does not depend on the axis drawn.
        low = Sphere(Vector3(0, 0, 0), 1, None)
        high = Sphere(Vector3(5, 5, 5), 1, None)
        node = build_bvh([high, low])
        assert node.left is low
        assert node.right is high

    def test_root_box_contains_every_primitive(self):
        objects = _random_scene(random.Random(8))
        root = build_bvh(objects, 0.0, 1.0)
        for obj in objects:
            box = obj.bounding_box(0.0, 1.0)
            for a in range(3):
                assert root.box.minimum[a] <= box.minimum[a]
                assert root.box.maximum[a] >= box.maximum[a]

    def test_leaves_cover_every_primitive(self):
        objects = _random_scene(random.Random(4), count=17)
        root = build_bvh(objects)
        leaves = _leaves(root)
        assert len(leaves) == len(objects)
        assert set(map(id, leaves)) == set(map(id, objects))

    def test_same_seed_same_tree(self):
        objects = _random_scene(random.Random(6))
        first = _leaves(build_bvh(objects, rng=random.Random(11)))
        second = _leaves(build_bvh(objects, rng=random.Random(11)))
        assert [id(o) for o in first] == [id(o) for o in second]

    def test_default_rng_is_deterministic(self):
        objects = _random_scene(random.Random(6))
        first = _leaves(build_bvh(objects))
        second = _leaves(build_bvh(objects))
        assert [id(o) for o in first] == [id(o) for o in second]

    def test_empty_input_rejected(self):
        with pytest.raises(SceneConstructionError):
            build_bvh([])
        with pytest.raises(SceneConstructionError):
            BVHNode([], 0, 0)

    def test_rotated_moving_object_over_wider_shutter(self):
        # The box must cover the motion across the interval the tree is built for.
        moving = MovingSphere(Vector3(0, 0, 0), Vector3(10, 0, 0), 0.0, 1.0, 1.0, "moving")
        objects = [RotateY(moving, 0), Sphere(Vector3(-5, 0, 0), 1.0, "still")]
        linear = HittableList(objects)
        bvh = build_bvh(objects, 0.0, 2.0)
        ray = Ray(Vector3(20, 0, -5), Vector3(0, 0, 1), 2.0)
        expected = linear.hit(ray, 0.001, math.inf)
        actual = bvh.hit(ray, 0.001, math.inf)
        assert expected is not None
        assert actual is not None
        assert actual.t == pytest.approx(expected.t)
        assert actual.material == "moving"

    def test_missing_bounding_box_rejected(self):
        with pytest.raises(SceneConstructionError):
            build_bvh([Sphere(Vector3(), 1, None), NoBox()])

    def test_construction_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_bvh([])
