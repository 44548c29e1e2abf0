# geometry/rect.py
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half thickness given to the flat axis so rectangles have a usable box.
RECT_PADDING = 1e-4

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane coordinate[k_axis] == k, spanning
    [a0, a1] along a_axis and [b0, b1] along b_axis.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        if self.a0 == self.a1 or self.b0 == self.b1:
            # Zero-area rectangle.
            return None
        d = ray.direction[self.k_axis]
        if d == 0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.k_axis]) / d
        if t < t_min or t > t_max:
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.uv = UV((a - self.a0) / (self.a1 - self.a0),
                    (b - self.b0) / (self.b1 - self.b0))
        rec.t = t
        rec.set_face_normal(ray, self._outward_normal())
        rec.material = self.material
        rec.p = ray.at(t)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.a_axis], hi[self.a_axis] = self.a0, self.a1
        lo[self.b_axis], hi[self.b_axis] = self.b0, self.b1
        lo[self.k_axis], hi[self.k_axis] = self.k - RECT_PADDING, self.k + RECT_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

    def _outward_normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.k_axis] = 1.0
        return Vector3(*n)

class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k."""
    a_axis, b_axis, k_axis = 0, 1, 2

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k."""
    a_axis, b_axis, k_axis = 0, 2, 1

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k."""
    a_axis, b_axis, k_axis = 1, 2, 0

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
