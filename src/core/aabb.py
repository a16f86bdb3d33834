# src/core/aabb.py
import math
from core.interval import Interval
from core.vector import Vector3

# Minimum thickness given to flat boxes (e.g. axis-aligned rectangles).
AABB_PADDING = 1e-4

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: for each axis, find intersection intervals.
        t_min = ray_t.min
        t_max = ray_t.max
        for a in range(3):
            origin = ray.origin[a]
            direction = ray.direction[a]
            if direction == 0.0:
                # Parallel to the slab: either always inside it or never.
                if origin < self.minimum[a] or origin > self.maximum[a]:
                    return False
                continue
            invD = 1.0 / direction
            t0 = (self.minimum[a] - origin) * invD
            t1 = (self.maximum[a] - origin) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min or math.isnan(t_min) or math.isnan(t_max):
                return False
        return True

    def centroid(self, axis: int) -> float:
        return (self.minimum[axis] + self.maximum[axis]) * 0.5

    def pad(self) -> "AABB":
        """
        Returns a box where no side is thinner than AABB_PADDING.
        """
        lo = [self.minimum.x, self.minimum.y, self.minimum.z]
        hi = [self.maximum.x, self.maximum.y, self.maximum.z]
        for a in range(3):
            if hi[a] - lo[a] < AABB_PADDING:
                lo[a] -= AABB_PADDING / 2
                hi[a] += AABB_PADDING / 2
        return AABB(Vector3(*lo), Vector3(*hi))

    def contains_box(self, other: "AABB") -> bool:
        return all(
            self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
            for a in range(3)
        )

    def translate(self, offset: Vector3) -> "AABB":
        return AABB(self.minimum + offset, self.maximum + offset)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum}, {self.maximum})"
