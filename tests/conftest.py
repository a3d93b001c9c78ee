"""Shared fixtures for the tracer tests."""

import random

import pytest

from core.vector import Vector3


@pytest.fixture
def rng():
    """A fixed-seed random source so sampled tests are reproducible."""
    return random.Random(1234)


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-6):
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)


class RecordingMaterial:
    """Material stub that records scatter calls and never scatters."""

    def __init__(self):
        self.calls = 0

    def emitted(self, u, v, p):
        return Vector3(0, 0, 0)

    def scatter(self, ray_in, rec, rng=None):
        self.calls += 1
        return None
