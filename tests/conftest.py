"""Pytest configuration for path tracer tests.

Provides seeded random contexts and a few small scenes shared across test
modules.
"""

import random

import numpy as np
import pytest

from pathtracer.core.vector import Color, Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


class SequenceRng:
    """Stand-in random context that replays fixed values.

    Only the methods the renderer calls are provided.
    """

    def __init__(self, values):
        self.values = list(values)

    def _next(self):
        return self.values.pop(0)

    def random(self):
        return self._next()

    def uniform(self, a, b):
        return self._next()


@pytest.fixture
def rng():
    """A seeded random context so scattering tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def np_rng():
    return np.random.default_rng(1234)


@pytest.fixture
def white_diffuse():
    return Lambertian(Color(1.0, 1.0, 1.0))


@pytest.fixture
def two_sphere_world(white_diffuse):
    """Small sphere in front of the origin resting on a large ground sphere."""
    return HittableList([
        Sphere(Vector3(0, 0, -1), 0.5, white_diffuse),
        Sphere(Vector3(0, -100.5, -1), 100, white_diffuse),
    ])
