# geometry/transform.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Moves the wrapped object by `offset`.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(moved, ray_t, rng)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        # The wrapped object already oriented the normal against the ray;
        # recover its outward normal before re-deriving front_face.
        outward = rec.normal if rec.front_face else -rec.normal
        rec.set_face_normal(moved, outward)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = self.object.bounding_box(time0, time1)
        if box is None:
            return None
        return box.translate(self.offset)

    def pdf_value(self, origin: Vector3, direction: Vector3, rng=None) -> float:
        return self.object.pdf_value(origin - self.offset, direction, rng)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.object.random(origin - self.offset, rng)

class RotateY(Hittable):
    """
    Rotates the wrapped object by `angle` degrees around the y axis.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        self.angle = angle
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box()

    def _to_object(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def _rotated_box(self) -> Optional[AABB]:
        box = self.object.bounding_box(0.0, 1.0)
        if box is None:
            return None
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for x in (box.minimum.x, box.maximum.x):
            for y in (box.minimum.y, box.maximum.y):
                for z in (box.minimum.z, box.maximum.z):
                    corner = self._to_world(Vector3(x, y, z))
                    for c in range(3):
                        lo[c] = min(lo[c], corner[c])
                        hi[c] = max(hi[c], corner[c])
        return AABB(Vector3(*lo), Vector3(*hi))

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated, ray_t, rng)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        outward = rec.normal if rec.front_face else -rec.normal
        rec.set_face_normal(ray, self._to_world(outward))
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.box

    def pdf_value(self, origin: Vector3, direction: Vector3, rng=None) -> float:
        return self.object.pdf_value(self._to_object(origin), self._to_object(direction), rng)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self._to_world(self.object.random(self._to_object(origin), rng))

class FlipFace(Hittable):
    """
    Inverts front_face of the wrapped object, turning e.g. a one-sided light
    towards the other side. The normal is left untouched.
    """
    def __init__(self, obj: Hittable):
        self.object = obj

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        rec = self.object.hit(ray, ray_t, rng)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.object.bounding_box(time0, time1)

    def pdf_value(self, origin: Vector3, direction: Vector3, rng=None) -> float:
        return self.object.pdf_value(origin, direction, rng)

    def random(self, origin: Vector3, rng) -> Vector3:
        return self.object.random(origin, rng)
