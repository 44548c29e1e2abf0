"""Tests for HittableList aggregation and BVH construction/traversal."""

import logging
import math
import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BoundingBoxError, BVHNode, box_compare
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.rect import XZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.geometry.world import HittableList

INF = math.inf


class Unbounded(Hittable):
    """An object that reports no bounding box and is never hit."""

    def hit(self, ray, t_min, t_max, rng=None):
        return None

    def bounding_box(self, time0, time1):
        return None


def _mixed_primitives(rng, material, count=40):
    objects = []
    for i in range(count):
        center = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        kind = i % 4
        if kind == 0:
            objects.append(Sphere(center, rng.uniform(0.2, 1.5), material))
        elif kind == 1:
            objects.append(MovingSphere(center, center + Vector3(0, 0.5, 0), 0.0, 1.0,
                                        rng.uniform(0.2, 1.0), material))
        elif kind == 2:
            size = Vector3(rng.uniform(0.2, 2), rng.uniform(0.2, 2), rng.uniform(0.2, 2))
            objects.append(Translate(RotateY(Box(Vector3(0, 0, 0), size, material),
                                             rng.uniform(0, 360)), center))
        else:
            objects.append(XZRect(center.x, center.x + 1, center.z, center.z + 1, center.y, material))
    return objects


class TestHittableList:
    """Tests for the linear aggregate."""

    def test_closest_hit_wins_regardless_of_order(self, white_diffuse):
        near = Sphere(Vector3(0, 0, -2), 0.5, white_diffuse)
        far = Sphere(Vector3(0, 0, -6), 0.5, white_diffuse)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        for objects in ([near, far], [far, near]):
            rec = HittableList(objects).hit(ray, 0.001, INF)
            assert rec.t == pytest.approx(1.5)

    def test_empty_list(self):
        world = HittableList()
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0.001, INF) is None
        assert world.bounding_box(0, 1) is None

    def test_bounding_box_union(self, white_diffuse):
        world = HittableList([
            Sphere(Vector3(0, 0, 0), 1, white_diffuse),
            Sphere(Vector3(5, 0, 0), 1, white_diffuse),
        ])
        box = world.bounding_box(0, 1)
        assert tuple(box.minimum) == (-1, -1, -1)
        assert tuple(box.maximum) == (6, 1, 1)

    def test_unbounded_member_makes_list_unbounded(self, white_diffuse):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1, white_diffuse), Unbounded()])
        assert world.bounding_box(0, 1) is None

    def test_add_and_clear(self, white_diffuse):
        world = HittableList()
        world.add(Sphere(Vector3(0, 0, 0), 1, white_diffuse))
        assert len(world) == 1
        world.clear()
        assert len(world) == 0


class TestBVHConstruction:
    """Tests for building the hierarchy."""

    def test_single_object_is_both_children(self, white_diffuse, rng):
        sphere = Sphere(Vector3(0, 0, 0), 1, white_diffuse)
        node = BVHNode([sphere], 0, 1, rng=rng)
        assert node.left is sphere
        assert node.right is sphere
        assert tuple(node.bounding_box(0, 1).minimum) == (-1, -1, -1)

    def test_two_objects_ordered_by_minimum(self, white_diffuse, rng):
        near = Sphere(Vector3(0, 0, 0), 1, white_diffuse)
        far = Sphere(Vector3(5, 5, 5), 1, white_diffuse)
        node = BVHNode([far, near], 0, 2, rng=rng)
        assert node.left is near
        assert node.right is far

    def test_tie_keeps_original_order(self, white_diffuse, rng):
        first = Sphere(Vector3(0, 0, 0), 1, white_diffuse)
        second = Sphere(Vector3(0, 0, 0), 1, white_diffuse)
        node = BVHNode([first, second], 0, 2, rng=rng)
        assert node.left is first
        assert node.right is second

    def test_sort_is_limited_to_range(self, white_diffuse, rng):
        objects = [Sphere(Vector3(10 - i, 10 - i, 10 - i), 0.5, white_diffuse) for i in range(6)]
        outside = [objects[0], objects[5]]
        BVHNode(objects, 1, 5, rng=rng)
        assert [objects[0], objects[5]] == outside

    def test_node_box_encloses_children(self, white_diffuse, rng):
        objects = _mixed_primitives(rng, white_diffuse)
        node = BVHNode(list(objects), 0, len(objects), rng=rng)
        box = node.bounding_box(0, 1)
        for obj in objects:
            child = obj.bounding_box(0, 1)
            for axis in range(3):
                assert box.minimum[axis] <= child.minimum[axis]
                assert box.maximum[axis] >= child.maximum[axis]

    def test_empty_range_raises(self):
        with pytest.raises(ValueError):
            BVHNode([], 0, 0)

    def test_missing_generator_raises(self, white_diffuse):
        spheres = [Sphere(Vector3(0, 0, 0), 1, white_diffuse), Sphere(Vector3(3, 0, 0), 1, white_diffuse)]
        with pytest.raises(ValueError, match="random generator"):
            BVHNode(spheres, 0, 2)
        with pytest.raises(ValueError, match="random generator"):
            HittableList(spheres).build_bvh()

    def test_unbounded_object_raises(self, white_diffuse, rng):
        with pytest.raises(BoundingBoxError):
            BVHNode([Unbounded()], 0, 1, rng=rng)
        with pytest.raises(BoundingBoxError):
            BVHNode([Sphere(Vector3(0, 0, 0), 1, white_diffuse), Unbounded()], 0, 2, rng=rng)

    def test_comparator_falls_back_to_equal(self, white_diffuse, caplog):
        sphere = Sphere(Vector3(0, 0, 0), 1, white_diffuse)
        with caplog.at_level(logging.WARNING, logger="pathtracer.geometry.bvh"):
            assert box_compare(sphere, Unbounded(), 0) == 0
        assert "No bounding box" in caplog.text

    def test_from_list_keeps_list_order(self, white_diffuse, rng):
        objects = [Sphere(Vector3(9 - i, 0, 0), 0.5, white_diffuse) for i in range(5)]
        world = HittableList(objects)
        BVHNode.from_list(world, 0, 1, rng)
        assert world.objects == objects


class TestBVHTraversal:
    """The BVH must find exactly what a linear scan finds."""

    def test_matches_linear_scan(self, white_diffuse):
        rng = random.Random(2024)
        objects = _mixed_primitives(rng, white_diffuse, count=60)
        linear = HittableList(objects)
        tree = BVHNode.from_list(linear, 0.0, 1.0, rng)

        hits = 0
        for _ in range(400):
            origin = Vector3(rng.uniform(-15, 15), rng.uniform(-15, 15), rng.uniform(-15, 15))
            ray = Ray(origin, random_unit_vector(rng), rng.random())
            expected = linear.hit(ray, 0.001, INF)
            actual = tree.hit(ray, 0.001, INF)
            if expected is None:
                assert actual is None
                continue
            hits += 1
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)
            assert tuple(actual.p) == pytest.approx(tuple(expected.p))
            assert tuple(actual.normal) == pytest.approx(tuple(expected.normal))
        assert hits > 0

    def test_build_bvh_on_list(self, two_sphere_world, rng):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        before = two_sphere_world.hit(ray, 0.001, INF)
        two_sphere_world.build_bvh(rng=rng)
        assert two_sphere_world.bvh_root is not None
        after = two_sphere_world.hit(ray, 0.001, INF)
        assert after.t == pytest.approx(before.t)

    def test_box_miss_prunes(self, white_diffuse, rng):
        node = BVHNode([Sphere(Vector3(0, 0, -5), 1, white_diffuse),
                        Sphere(Vector3(3, 0, -5), 1, white_diffuse)], 0, 2, rng=rng)
        assert node.hit(Ray(Vector3(0, 10, 0), Vector3(0, 0, -1)), 0.001, INF) is None
