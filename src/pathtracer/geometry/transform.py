# geometry/transform.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Instance of another object moved by a fixed offset.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.obj.hit(moved, t_min, t_max, rng)
        if rec is None:
            return None

        # The normal is unchanged by a translation; front_face carries over.
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = self.obj.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

class RotateY(Hittable):
    """
    Instance of another object rotated about the Y axis by angle degrees.

    The box is the axis-aligned envelope of the eight rotated corners of the
    inner box, computed once.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.obj = obj
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box(obj.bounding_box(0.0, 1.0))

    def _rotated_box(self, box: Optional[AABB]) -> Optional[AABB]:
        if box is None:
            return None

        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for x in (box.minimum.x, box.maximum.x):
            for y in (box.minimum.y, box.maximum.y):
                for z in (box.minimum.z, box.maximum.z):
                    new_x = self.cos_theta * x + self.sin_theta * z
                    new_z = -self.sin_theta * x + self.cos_theta * z
                    for c, value in enumerate((new_x, y, new_z)):
                        lo[c] = min(lo[c], value)
                        hi[c] = max(hi[c], value)
        return AABB(Vector3(*lo), Vector3(*hi))

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.obj.hit(rotated, t_min, t_max, rng)
        if rec is None:
            return None

        # The inner record is already oriented against the rotated ray.
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.box
