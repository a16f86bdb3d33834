# src/geometry/world.py
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from camera.camera import Camera
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.bvh import BVHNode
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects, intersected by a linear closest-hit scan.
    Also used as the set of lights sampled by the integrator.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, ray_t.with_max(closest_so_far), rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(time0, time1)
            if obj_box is None:
                return None
            box = obj_box if box is None else AABB.surrounding_box(box, obj_box)
        return box

    def pdf_value(self, origin: Vector3, direction: Vector3, rng=None) -> float:
        if not self.objects:
            return 0.0
        weight = 1.0 / len(self.objects)
        return sum(weight * obj.pdf_value(origin, direction, rng) for obj in self.objects)

    def random(self, origin: Vector3, rng) -> Vector3:
        if not self.objects:
            return Vector3(1.0, 0.0, 0.0)
        return self.objects[rng.randrange(len(self.objects))].random(origin, rng)

def build_world(objects: List[Hittable], use_bvh: bool = True,
                bvh_seed: int = 0, time0: float = 0.0, time1: float = 1.0) -> Hittable:
    """
    Wraps scene objects into the root hittable, either a BVH or a flat list.
    """
    start = time.perf_counter()
    if use_bvh and objects:
        world = BVHNode(list(objects), time0, time1, rng=random.Random(bvh_seed))
        kind = "BVH"
    else:
        world = HittableList(objects)
        kind = "HittableList"
    logger.info("Built %s over %d objects in %.3f s", kind, len(objects),
                time.perf_counter() - start)
    return world

@dataclass
class Scene:
    """
    Everything the renderer needs besides the render configuration: the root
    hittable, the lights to importance-sample, the background and the camera.
    """
    world: Hittable
    camera: Camera
    background: Callable[[Ray], Vector3]
    lights: HittableList = field(default_factory=HittableList)
    name: str = "scene"
