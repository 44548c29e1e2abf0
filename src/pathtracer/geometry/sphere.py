# geometry/sphere.py
import math
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Vector3) -> UV:
    """
    Maps a point on the unit sphere to texture coordinates.

    u is the angle around the Y axis measured from X=-1, v the angle from
    Y=-1 to Y=+1, both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

def _solve_sphere(ray: Ray, center: Vector3, radius: float,
                  t_min: float, t_max: float) -> Optional[float]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    # A point sphere or a zero-length direction has no surface to hit.
    if a == 0 or radius == 0:
        return None
    half_b = oc.dot(ray.direction)
    c = oc.length_squared() - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root

def _sphere_record(ray: Ray, root: float, center: Vector3, radius: float,
                   material) -> HitRecord:
    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    # Dividing by a signed radius flips the normal for hollow spheres.
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.uv = get_sphere_uv(outward_normal)
    rec.material = material
    return rec

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        root = _solve_sphere(ray, self.center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _sphere_record(ray, root, self.center, self.radius, self.material)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1 at
    time1. Rays sample the center at their own time, producing motion blur.
    """
    def __init__(self, center0: Vector3, center1: Vector3,
                 time0: float, time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        fraction = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * fraction

    def hit(self, ray: Ray, t_min: float, t_max: float, rng=None) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = _solve_sphere(ray, center, self.radius, t_min, t_max)
        if root is None:
            return None
        return _sphere_record(ray, root, center, self.radius, self.material)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        c0 = self.center(time0)
        c1 = self.center(time1)
        box0 = AABB(c0 - offset, c0 + offset)
        box1 = AABB(c1 - offset, c1 + offset)
        return AABB.surrounding_box(box0, box1)
