# geometry/rect.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.utils import RAY_EPSILON
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in a plane perpendicular to one of the coordinate axes.

    The rectangle spans [a0, a1] x [b0, b1] over the two in-plane axes and
    sits at coordinate k on the remaining axis. Subclasses fix the axes.
    """
    a_axis = 0
    b_axis = 1
    k_axis = 2

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0, self.a1 = min(a0, a1), max(a0, a1)
        self.b0, self.b1 = min(b0, b1), max(b0, b1)
        self.k = k
        self.material = material
        n = [0.0, 0.0, 0.0]
        n[self.k_axis] = 1.0
        self.normal = Vector3(*n)

    def _point(self, a: float, b: float, k: float) -> Vector3:
        p = [0.0, 0.0, 0.0]
        p[self.a_axis] = a
        p[self.b_axis] = b
        p[self.k_axis] = k
        return Vector3(*p)

    def area(self) -> float:
        return (self.a1 - self.a0) * (self.b1 - self.b0)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        dk = ray.direction[self.k_axis]
        if dk == 0.0:
            return None
        t = (self.k - ray.origin[self.k_axis]) / dk
        if not ray_t.contains(t):
            return None

        a = ray.origin[self.a_axis] + t * ray.direction[self.a_axis]
        b = ray.origin[self.b_axis] + t * ray.direction[self.b_axis]
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.u = (a - self.a0) / (self.a1 - self.a0) if self.a1 > self.a0 else 0.0
        rec.v = (b - self.b0) / (self.b1 - self.b0) if self.b1 > self.b0 else 0.0
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return AABB(self._point(self.a0, self.b0, self.k),
                    self._point(self.a1, self.b1, self.k)).pad()

    def pdf_value(self, origin: Vector3, direction: Vector3, rng=None) -> float:
        rec = self.hit(Ray(origin, direction), Interval(RAY_EPSILON, math.inf))
        if rec is None:
            return 0.0
        area = self.area()
        length_squared = direction.length_squared()
        distance_squared = rec.t * rec.t * length_squared
        cosine = abs(direction.dot(rec.normal)) / math.sqrt(length_squared)
        if cosine == 0.0 or area == 0.0:
            return 0.0
        return distance_squared / (cosine * area)

    def random(self, origin: Vector3, rng) -> Vector3:
        point = self._point(rng.uniform(self.a0, self.a1),
                            rng.uniform(self.b0, self.b1),
                            self.k)
        return (point - origin).normalize()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, "
                f"{self.b1}, k={self.k})")

class XYRect(AxisAlignedRect):
    a_axis, b_axis, k_axis = 0, 1, 2

class XZRect(AxisAlignedRect):
    a_axis, b_axis, k_axis = 0, 2, 1

class YZRect(AxisAlignedRect):
    a_axis, b_axis, k_axis = 1, 2, 0
