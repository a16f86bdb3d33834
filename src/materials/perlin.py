# materials/perlin.py
import math
import numpy as np
from numba import njit
from core.vector import Vector3

POINT_COUNT = 256

@njit
def _perlin_noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)
    n = perm_x.shape[0]

    # Hermite smoothing of the fractional parts.
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = perm_x[(i + di) % n] ^ perm_y[(j + dj) % n] ^ perm_z[(k + dk) % n]
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                weight = (gx * (u - di) + gy * (v - dj) + gz * (w - dk))
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * weight)
    return accum

@njit
def _perlin_turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
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
    Gradient (Perlin) noise over a lattice of random unit vectors.

    The lattice is built once from `seed`, after which `noise` and
    `turbulence` are pure functions safe to call from any thread.
    """
    def __init__(self, seed: int = 0, point_count: int = POINT_COUNT):
        gen = np.random.default_rng(seed)
        vecs = gen.uniform(-1.0, 1.0, size=(point_count, 3))
        norms = np.linalg.norm(vecs, axis=1, keepdims=True)
        norms[norms == 0.0] = 1.0
        self.ranvec = np.ascontiguousarray(vecs / norms, dtype=np.float64)
        self.perm_x = gen.permutation(point_count).astype(np.int64)
        self.perm_y = gen.permutation(point_count).astype(np.int64)
        self.perm_z = gen.permutation(point_count).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        """Noise value in roughly [-1, 1]."""
        return _perlin_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                             float(p.x), float(p.y), float(p.z))

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves of noise, each at twice the frequency and half the weight."""
        return _perlin_turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                  float(p.x), float(p.y), float(p.z), depth)
