"""Unit tests for vectors, rays and axis-aligned bounding boxes."""

import random

import pytest

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import (
    clamp,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    schlick,
)
from pathtracer.core.vector import Vector3


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert tuple(a + b) == (5, 7, 9)
        assert tuple(b - a) == (3, 3, 3)
        assert tuple(-a) == (-1, -2, -3)
        assert tuple(a * 2) == (2, 4, 6)
        assert tuple(2 * a) == (2, 4, 6)
        assert tuple(a * b) == (4, 10, 18)
        assert tuple(b / 2) == (2, 2.5, 3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert tuple(x.cross(y)) == (0, 0, 1)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        with pytest.raises(IndexError):
            v[3]

    def test_normalize(self):
        v = Vector3(3, 0, 4).normalize()
        assert v.length() == pytest.approx(1.0)
        assert tuple(Vector3(0, 0, 0).normalize()) == (0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(0, 0, 1e-3).near_zero()


class TestRay:
    """Tests for Ray evaluation."""

    def test_at(self):
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -2), 0.5)
        assert tuple(ray.at(1.5)) == (1, 1, -2)
        assert ray.time == 0.5

    def test_default_time(self):
        assert Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)).time == 0.0


class TestSamplingHelpers:
    """Tests for random sampling and optics helpers."""

    def test_random_points_in_bounds(self):
        rng = random.Random(3)
        for _ in range(200):
            assert random_in_unit_sphere(rng).length_squared() < 1.0
            disk = random_in_unit_disk(rng)
            assert disk.z == 0
            assert disk.length_squared() < 1.0
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_reflect(self):
        reflected = reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
        assert tuple(reflected) == (1, 1, 0)

    def test_refract_same_medium_is_straight(self):
        d = Vector3(1, -1, 0).normalize()
        out = refract(d, Vector3(0, 1, 0), 1.0)
        assert tuple(out) == pytest.approx(tuple(d))

    def test_schlick_normal_incidence(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)

    def test_clamp(self):
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.5, 0, 1) == 0.5


class TestAABB:
    """Tests for the slab test and box union."""

    def test_surrounding_box_contains_both(self):
        rng = random.Random(11)
        for _ in range(50):
            boxes = []
            for _ in range(2):
                lo = Vector3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
                hi = lo + Vector3(rng.uniform(0, 3), rng.uniform(0, 3), rng.uniform(0, 3))
                boxes.append(AABB(lo, hi))
            a, b = boxes
            result = AABB.surrounding_box(a, b)
            for axis in range(3):
                assert result.minimum[axis] <= min(a.minimum[axis], b.minimum[axis])
                assert result.maximum[axis] >= max(a.maximum[axis], b.maximum[axis])

    def test_hit_and_miss(self):
        box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        toward = Ray(Vector3(0.2, 0.3, 5), Vector3(0.01, -0.02, -1))
        away = Ray(Vector3(0.2, 0.3, 5), Vector3(0, 0, 1))
        assert box.hit(toward, 0.001, float("inf"))
        assert not box.hit(away, 0.001, float("inf"))

    def test_interval_limits_hit(self):
        box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        # Box spans t in [4, 6].
        assert not box.hit(ray, 0.001, 3.0)
        assert not box.hit(ray, 7.0, 10.0)
        assert box.hit(ray, 0.001, 4.5)

    def test_axis_aligned_ray_with_zero_components(self):
        """Zero direction components must not raise and must respect the slabs."""
        box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        inside_slab = Ray(Vector3(0.5, -0.5, 5), Vector3(0, 0, -1))
        outside_slab = Ray(Vector3(2, 0, 5), Vector3(0, 0, -1))
        negative_zero = Ray(Vector3(0.5, 0.5, 5), Vector3(-0.0, -0.0, -1))
        assert box.hit(inside_slab, 0.001, float("inf"))
        assert not box.hit(outside_slab, 0.001, float("inf"))
        assert box.hit(negative_zero, 0.001, float("inf"))
