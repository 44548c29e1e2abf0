# materials/perlin.py
import math
from typing import Optional
import numpy as np
from pathtracer.core.vector import Vector3

POINT_COUNT = 256

class Perlin:
    """
    Gradient noise over R^3 using random unit vectors at lattice points and
    Hermite-smoothed trilinear interpolation.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        vectors = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        norms = np.linalg.norm(vectors, axis=1, keepdims=True)
        # Guard the (practically impossible) all-zero draw.
        norms[norms == 0] = 1.0
        self.ran_vec = vectors / norms
        self.perm_x = rng.permutation(POINT_COUNT)
        self.perm_y = rng.permutation(POINT_COUNT)
        self.perm_z = rng.permutation(POINT_COUNT)

    def noise(self, p: Vector3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        # Hermite cubic to round off the interpolation.
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in range(2):
            px = self.perm_x[(i + di) & 255]
            wx = di * uu + (1 - di) * (1 - uu)
            for dj in range(2):
                py = self.perm_y[(j + dj) & 255]
                wy = dj * vv + (1 - dj) * (1 - vv)
                for dk in range(2):
                    gradient = self.ran_vec[px ^ py ^ self.perm_z[(k + dk) & 255]]
                    wz = dk * ww + (1 - dk) * (1 - ww)
                    weight = ((u - di) * gradient[0] +
                              (v - dj) * gradient[1] +
                              (w - dk) * gradient[2])
                    accum += wx * wy * wz * weight
        return float(accum)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """
        Sum of noise octaves with halving weights.
        """
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)
