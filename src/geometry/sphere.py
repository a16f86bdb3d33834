# geometry/sphere.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.onb import ONB
from core.ray import Ray
from core.utils import RAY_EPSILON, random_to_sphere
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

def sphere_uv(p: Vector3):
    """
    Texture coordinates of a point p on the unit sphere centered at the origin.
    u runs around the y axis starting from x = -1, v from y = -1 to y = +1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

def _hit_sphere(center: Vector3, radius: float, material, ray: Ray,
                ray_t: Interval) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    if a == 0.0:
        return None
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if not ray_t.contains(root):
        root = (-half_b + sqrt_disc) / a
        if not ray_t.contains(root):
            return None

    rec = HitRecord()
    rec.t = root
    rec.p = ray.at(rec.t)
    # A negative radius flips the normal inwards (hollow spheres).
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = sphere_uv(outward_normal)
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

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        return _hit_sphere(self.center, self.radius, self.material, ray, ray_t)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def pdf_value(self, origin: Vector3, direction: Vector3, rng=None) -> float:
        if self.hit(Ray(origin, direction), Interval(RAY_EPSILON, math.inf)) is None:
            return 0.0
        distance_squared = (self.center - origin).length_squared()
        cos_theta_max = math.sqrt(max(0.0, 1.0 - self.radius * self.radius / distance_squared))
        solid_angle = 2 * math.pi * (1.0 - cos_theta_max)
        if solid_angle <= 0.0:
            return 0.0
        return 1.0 / solid_angle

    def random(self, origin: Vector3, rng) -> Vector3:
        direction = self.center - origin
        distance_squared = direction.length_squared()
        if distance_squared == 0.0:
            return Vector3(0.0, 1.0, 0.0)
        uvw = ONB(direction)
        return uvw.local(random_to_sphere(rng, self.radius, distance_squared))

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Rays sample it at their own time, producing motion blur.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float,
                 time1: float, radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        s = (time - self.time0) / (self.time1 - self.time0)
        return self.center0 + (self.center1 - self.center0) * s

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        return _hit_sphere(self.center(ray.time), self.radius, self.material, ray, ray_t)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - offset, c0 + offset),
                                    AABB(c1 - offset, c1 + offset))

    def __repr__(self) -> str:
        return f"MovingSphere({self.center0} -> {self.center1}, {self.radius})"
