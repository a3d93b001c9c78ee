"""Unit tests for axis-aligned rectangles, boxes and face flipping."""

import math

import pytest

from conftest import assert_vec_close
from core.errors import SceneConstructionError
from core.ray import Ray
from core.vector import Vector3
from geometry.box import Box
from geometry.rect import XYRect, XZRect, YZRect
from geometry.transforms import FlipFace


class TestRectangles:
    """Tests for XYRect, XZRect and YZRect."""

    def test_xy_rect_hit(self):
        rect = XYRect(0, 2, 0, 1, -1, "mat")
        rec = rect.hit(Ray(Vector3(1, 0.5, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert rec.u == pytest.approx(0.5)
        assert rec.v == pytest.approx(0.5)
        assert_vec_close(rec.p, Vector3(1, 0.5, -1))
        assert rec.front_face
        assert_vec_close(rec.normal, Vector3(0, 0, 1))
        assert rec.material == "mat"

    def test_xy_rect_back_face_from_negative_side(self):
        rect = XYRect(0, 1, 0, 1, 0, None)
        rec = rect.hit(Ray(Vector3(0.5, 0.5, -3), Vector3(0, 0, 1)), 0.001, math.inf)
        assert not rec.front_face
        assert_vec_close(rec.normal, Vector3(0, 0, -1))

    def test_xz_rect_uv_and_normal(self):
        rect = XZRect(0, 4, 0, 2, 3, None)
        rec = rect.hit(Ray(Vector3(1, 0, 1.5), Vector3(0, 1, 0)), 0.001, math.inf)
        assert rec.t == pytest.approx(3.0)
        assert rec.u == pytest.approx(0.25)
        assert rec.v == pytest.approx(0.75)
        assert_vec_close(rec.normal, Vector3(0, -1, 0))
        assert not rec.front_face

    def test_yz_rect_hit(self):
        rect = YZRect(0, 1, 0, 1, 5, None)
        rec = rect.hit(Ray(Vector3(0, 0.25, 0.5), Vector3(1, 0, 0)), 0.001, math.inf)
        assert rec.t == pytest.approx(5.0)
        assert rec.u == pytest.approx(0.25)
        assert rec.v == pytest.approx(0.5)

    def test_miss_outside_extent(self):
        rect = XYRect(0, 2, 0, 1, -1, None)
        assert rect.hit(Ray(Vector3(3, 0.5, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self):
        rect = XYRect(0, 2, 0, 1, 0, None)
        assert rect.hit(Ray(Vector3(-1, 0.5, 0), Vector3(1, 0, 0)), 0.001, math.inf) is None

    def test_outside_interval(self):
        rect = XYRect(0, 2, 0, 1, -1, None)
        assert rect.hit(Ray(Vector3(1, 0.5, 0), Vector3(0, 0, -1)), 0.001, 0.5) is None

    def test_bounding_box_is_padded(self):
        box = XZRect(0, 1, 2, 3, 4, None).bounding_box(0, 1)
        assert box.minimum.y < 4 < box.maximum.y
        assert box.maximum.y - box.minimum.y == pytest.approx(0.0002)
        assert (box.minimum.x, box.maximum.x) == (0, 1)
        assert (box.minimum.z, box.maximum.z) == (2, 3)

    def test_inverted_extent_rejected(self):
        with pytest.raises(SceneConstructionError):
            XYRect(1, 0, 0, 1, 0, None)


class TestFlipFace:
    """Tests for FlipFace."""

    def test_inverts_front_face_only(self):
        rect = XYRect(0, 1, 0, 1, 0, None)
        ray = Ray(Vector3(0.5, 0.5, 3), Vector3(0, 0, -1))
        plain = rect.hit(ray, 0.001, math.inf)
        flipped = FlipFace(rect).hit(ray, 0.001, math.inf)
        assert flipped.front_face is (not plain.front_face)
        assert_vec_close(flipped.normal, plain.normal)
        assert flipped.t == plain.t

    def test_miss_passes_through(self):
        rect = XYRect(0, 1, 0, 1, 0, None)
        assert FlipFace(rect).hit(Ray(Vector3(5, 5, 3), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_bounding_box_delegates(self):
        rect = XYRect(0, 1, 0, 1, 0, None)
        assert FlipFace(rect).bounding_box(0, 1) == rect.bounding_box(0, 1)


class TestBox:
    """Tests for the six-sided Box."""

    def make(self):
        return Box(Vector3(0, 0, 0), Vector3(1, 1, 1), "mat")

    @pytest.mark.parametrize("origin, direction, expected_normal", [
        (Vector3(0.5, 0.5, -1), Vector3(0, 0, 1), Vector3(0, 0, -1)),
        (Vector3(0.5, 0.5, 2), Vector3(0, 0, -1), Vector3(0, 0, 1)),
        (Vector3(0.5, -1, 0.5), Vector3(0, 1, 0), Vector3(0, -1, 0)),
        (Vector3(0.5, 2, 0.5), Vector3(0, -1, 0), Vector3(0, 1, 0)),
        (Vector3(-1, 0.5, 0.5), Vector3(1, 0, 0), Vector3(-1, 0, 0)),
        (Vector3(2, 0.5, 0.5), Vector3(-1, 0, 0), Vector3(1, 0, 0)),
    ])
    def test_outside_hits_are_front_faces(self, origin, direction, expected_normal):
        rec = self.make().hit(Ray(origin, direction), 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert rec.front_face
        assert_vec_close(rec.normal, expected_normal)
        assert rec.material == "mat"

    @pytest.mark.parametrize("direction", [
        Vector3(0, 0, 1), Vector3(0, 0, -1), Vector3(0, 1, 0),
        Vector3(0, -1, 0), Vector3(1, 0, 0), Vector3(-1, 0, 0),
    ])
    def test_inside_hits_are_back_faces(self, direction):
        rec = self.make().hit(Ray(Vector3(0.5, 0.5, 0.5), direction), 0.001, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert not rec.front_face
        assert rec.normal.dot(direction) < 0

    def test_nearest_face_wins(self):
        rec = self.make().hit(Ray(Vector3(0.5, 0.5, -1), Vector3(0, 0, 1)), 0.001, math.inf)
        assert rec.p.z == pytest.approx(0.0)

    def test_bounding_box_encloses_corners(self):
        box = self.make().bounding_box(0, 1)
        assert box.minimum.x <= 0 and box.maximum.x >= 1
        assert box.minimum.y <= 0 and box.maximum.y >= 1
        assert box.minimum.z <= 0 and box.maximum.z >= 1

    def test_inverted_corners_rejected(self):
        with pytest.raises(SceneConstructionError):
            Box(Vector3(1, 0, 0), Vector3(0, 1, 1), None)
