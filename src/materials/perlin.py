# materials/perlin.py
import math
from typing import Optional
import numpy as np
from numba import njit
from core.vector import Vector3

POINT_COUNT = 256


@njit
def _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    # Gradient noise with Hermite-smoothed trilinear interpolation.
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = (perm_x[(i + di) & 255]
                       ^ perm_y[(j + dj) & 255]
                       ^ perm_z[(k + dk) & 255])
                dot = (ranvec[idx, 0] * (u - di)
                       + ranvec[idx, 1] * (v - dj)
                       + ranvec[idx, 2] * (w - dk))
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum


@njit
def _turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Perlin gradient noise over a 256-entry lattice. The random unit
    gradients and the three axis permutations are drawn once from ``rng``
    (a numpy Generator) at construction.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = np.random.default_rng()
        vectors = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(vectors, axis=1, keepdims=True)
        norms[norms == 0.0] = 1.0
        self.ranvec = np.ascontiguousarray(vectors / norms, dtype=np.float64)
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        """Smooth noise in roughly [-1, 1]."""
        return _perlin_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                             float(p.x), float(p.y), float(p.z))

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of ``depth`` octaves of |noise|, halving weight per octave."""
        return _turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                           float(p.x), float(p.y), float(p.z), depth)
