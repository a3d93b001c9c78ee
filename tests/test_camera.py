"""Unit tests for the thin-lens camera."""

import pytest

from camera.camera import Camera
from conftest import assert_vec_close
from core.vector import Vector3


def _pinhole(**kwargs):
    params = dict(vfov=90.0, aspect_ratio=2.0, focus_dist=1.0)
    params.update(kwargs)
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), **params)


class TestCamera:
    """Tests for Camera."""

    def test_center_ray_points_at_target(self):
        ray = _pinhole().get_ray(0.5, 0.5)
        assert_vec_close(ray.origin, Vector3(0, 0, 0))
        assert_vec_close(ray.direction, Vector3(0, 0, -1))

    @pytest.mark.parametrize("s, t, expected", [
        (0.0, 0.0, Vector3(-2, -1, -1)),
        (1.0, 1.0, Vector3(2, 1, -1)),
        (1.0, 0.0, Vector3(2, -1, -1)),
    ])
    def test_viewport_corners(self, s, t, expected):
        assert_vec_close(_pinhole().get_ray(s, t).direction, expected)

    def test_orthonormal_basis(self):
        cam = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20.0, 16 / 9)
        for axis in (cam.u, cam.v, cam.w):
            assert axis.length() == pytest.approx(1.0)
        assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
        assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
        assert cam.v.dot(cam.w) == pytest.approx(0.0, abs=1e-12)

    def test_static_shutter_uses_time0(self, rng):
        assert _pinhole(time0=0.4, time1=0.4).get_ray(0.5, 0.5, rng).time == 0.4

    def test_shutter_time_sampled_in_interval(self, rng):
        cam = _pinhole(time0=0.2, time1=0.7)
        times = [cam.get_ray(0.5, 0.5, rng).time for _ in range(200)]
        assert all(0.2 <= t <= 0.7 for t in times)
        assert len(set(times)) > 1

    def test_aperture_rays_converge_on_focus_plane(self, rng):
        cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0),
                     90.0, 2.0, aperture=0.5, focus_dist=3.0)
        target = None
        for _ in range(50):
            ray = cam.get_ray(0.3, 0.6, rng)
            assert (ray.origin - cam.lookfrom).length() <= 0.25 + 1e-9
            assert ray.origin.z == pytest.approx(0.0)
            if target is None:
                target = ray.at(1.0)
            assert_vec_close(ray.at(1.0), target, tol=1e-9)
