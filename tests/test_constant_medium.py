"""Unit tests for the homogeneous participating medium."""

import math
import random

import pytest

from core.errors import SceneConstructionError
from core.ray import Ray
from core.vector import Vector3
from geometry.constant_medium import ConstantMedium
from geometry.sphere import Sphere
from materials.isotropic import Isotropic


class TestConstantMedium:
    """Tests for ConstantMedium."""

    def test_hit_probability_follows_beer_lambert(self):
        # Chord of 10000 units at density 1e-4 gives an optical depth of 1.
        medium = ConstantMedium(Sphere(Vector3(0, 0, 0), 5000, None), 0.0001, Vector3(1, 1, 1))
        ray = Ray(Vector3(0, 0, -6000), Vector3(0, 0, 1))
        rng = random.Random(99)
        trials = 2000
        hits = 0
        for _ in range(trials):
            rec = medium.hit(ray, 0.001, math.inf, rng)
            if rec is not None:
                hits += 1
                assert 1000 <= rec.t <= 11000
        assert hits / trials == pytest.approx(1 - math.exp(-1), abs=0.05)

    def test_dense_medium_scatters_near_entry(self, rng):
        medium = ConstantMedium(Sphere(Vector3(0, 0, 0), 1, None), 1e6, Vector3(0.2, 0.4, 0.6))
        rec = medium.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf, rng)
        assert rec is not None
        assert rec.t == pytest.approx(4.0, abs=1e-3)
        assert isinstance(rec.material, Isotropic)
        assert rec.material is medium.phase_function
        assert rec.front_face
        assert rec.normal.x == 1 and rec.normal.y == 0 and rec.normal.z == 0

    def test_ray_starting_inside(self, rng):
        medium = ConstantMedium(Sphere(Vector3(0, 0, 0), 1, None), 1e6, Vector3(1, 1, 1))
        rec = medium.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 0.001, math.inf, rng)
        assert rec is not None
        assert 0.0 <= rec.t < 0.01

    def test_miss_boundary(self, rng):
        medium = ConstantMedium(Sphere(Vector3(0, 0, 0), 1, None), 1e6, Vector3(1, 1, 1))
        assert medium.hit(Ray(Vector3(5, 0, -5), Vector3(0, 0, 1)), 0.001, math.inf, rng) is None

    def test_medium_behind_ray(self, rng):
        medium = ConstantMedium(Sphere(Vector3(0, 0, 0), 1, None), 1e6, Vector3(1, 1, 1))
        assert medium.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, 1)), 0.001, math.inf, rng) is None

    def test_respects_t_max(self, rng):
        medium = ConstantMedium(Sphere(Vector3(0, 0, 0), 1, None), 1e6, Vector3(1, 1, 1))
        assert medium.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), 0.001, 3.0, rng) is None

    def test_bounding_box_is_boundary_box(self):
        boundary = Sphere(Vector3(1, 2, 3), 2, None)
        medium = ConstantMedium(boundary, 0.5, Vector3(1, 1, 1))
        assert medium.bounding_box(0, 1) == boundary.bounding_box(0, 1)

    @pytest.mark.parametrize("density", [0, -1.0])
    def test_invalid_density(self, density):
        with pytest.raises(SceneConstructionError):
            ConstantMedium(Sphere(Vector3(0, 0, 0), 1, None), density, Vector3(1, 1, 1))
