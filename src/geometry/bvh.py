# src/geometry/bvh.py
import random
from typing import List, Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a list of hittables.

    At every level one axis is drawn from `rng`, the objects are sorted by
    the centroid of their bounding boxes along that axis and split at the
    middle. The split axis depends only on `rng`, so a given object order
    and seed always yields the same tree.
    """
    def __init__(self, objects: List[Hittable], time0: float = 0.0, time1: float = 1.0,
                 rng: Optional[random.Random] = None, start: int = 0, end: Optional[int] = None):
        if rng is None:
            rng = random.Random(0)
        if end is None:
            end = len(objects)
        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        axis = rng.randint(0, 2)
        self.axis = axis

        def centroid(obj):
            return _box_of(obj, time0, time1).centroid(axis)

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if centroid(second) < centroid(first):
                first, second = second, first
            self.left, self.right = first, second
        else:
            # Sort by centroid along the chosen axis and split at the midpoint.
            objects[start:end] = sorted(objects[start:end], key=centroid)
            mid = start + object_span // 2
            self.left = BVHNode(objects, time0, time1, rng, start, mid)
            self.right = BVHNode(objects, time0, time1, rng, mid, end)

        self.is_leaf = object_span <= 2
        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t, rng)

        # A hit on the left bounds the search on the right.
        right_t = ray_t.with_max(hit_left.t) if hit_left is not None else ray_t
        hit_right = None
        if self.right is not self.left:
            hit_right = self.right.hit(ray, right_t, rng)

        # Return the closer hit
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

    def __repr__(self) -> str:
        return f"BVHNode(axis={self.axis}, box={self.box})"

def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box for {obj!r} in BVH construction")
    return box
