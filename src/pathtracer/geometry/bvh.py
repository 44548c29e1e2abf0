# geometry/bvh.py
import functools
import logging
from typing import List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BoundingBoxError(ValueError):
    """Raised when a BVH is built over an object that has no bounding box."""

def box_compare(a: Hittable, b: Hittable, axis: int) -> int:
    """
    Orders two objects by the minimum corner of their boxes along axis.

    Objects without a box compare equal to everything, so an unbounded
    object keeps an arbitrary position in the sort.
    """
    box_a = a.bounding_box(0.0, 0.0)
    box_b = b.bounding_box(0.0, 0.0)
    if box_a is None or box_b is None:
        logger.warning("No bounding box while ordering %r and %r", a, b)
        return 0
    if box_a.minimum[axis] < box_b.minimum[axis]:
        return -1
    if box_a.minimum[axis] > box_b.minimum[axis]:
        return 1
    return 0

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over objects[start:end].

    Each node splits on a randomly chosen axis. A single object is stored as
    both children, so every node has exactly two.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0, rng=None):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("Cannot build a BVH node over an empty range.")

        if rng is None:
            raise ValueError("BVH construction needs a random generator for the split axis.")
        axis = rng.randint(0, 2)
        comparator = functools.partial(box_compare, axis=axis)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            if comparator(objects[start], objects[start + 1]) <= 0:
                self.left = objects[start]
                self.right = objects[start + 1]
            else:
                self.left = objects[start + 1]
                self.right = objects[start]
        else:
            objects[start:end] = sorted(objects[start:end],
                                        key=functools.cmp_to_key(comparator))
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)

        box_left = self.left.bounding_box(time0, time1)
        box_right = self.right.bounding_box(time0, time1)
        if box_left is None or box_right is None:
            missing = self.left if box_left is None else self.right
            raise BoundingBoxError(f"No bounding box in BVH node constructor for {missing!r}")
        self.box = AABB.surrounding_box(box_left, box_right)

    @classmethod
    def from_list(cls, hittable_list, time0: float = 0.0, time1: float = 1.0,
                  rng=None) -> "BVHNode":
        """
        Builds a tree over a copy of the list's members; the list keeps its
        insertion order.
        """
        objects = list(hittable_list.objects)
        return cls(objects, 0, len(objects), time0, time1, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max, rng)
        # Only accept right-hand hits closer than the left one.
        if hit_left is not None:
            t_max = hit_left.t
        hit_right = self.right.hit(ray, t_min, t_max, rng)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box
