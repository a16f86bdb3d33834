# geometry/constant_medium.py
import math
from typing import Optional, Union
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

# Gap used to find the exit point after the entry point of the boundary.
MIN_THICKNESS = 1e-4

class ConstantMedium(Hittable):
    """
    Volume of constant density (smoke, fog) filling a convex boundary.

    A ray passing through the volume scatters after a random free path
    drawn from an exponential distribution, so the "hit" lands at a random
    interior point rather than on the boundary surface.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        self.boundary = boundary
        self.density = density
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if rng is None:
            raise ValueError("ConstantMedium.hit needs a random generator")

        rec1 = self.boundary.hit(ray, Interval.UNIVERSE, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, Interval(rec1.t + MIN_THICKNESS, math.inf), rng)
        if rec2 is None:
            return None

        t0 = max(rec1.t, ray_t.min)
        t1 = min(rec2.t, ray_t.max)
        if t0 >= t1:
            return None
        t0 = max(t0, 0.0)

        ray_length = ray.direction.length()
        if ray_length == 0.0:
            return None
        distance_inside_boundary = (t1 - t0) * ray_length
        # 1 - random() lies in (0, 1], keeping the logarithm finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t0 + hit_distance / ray_length
        return HitRecord(
            p=ray.at(t),
            normal=Vector3(1.0, 0.0, 0.0),  # arbitrary
            t=t,
            front_face=True,  # also arbitrary
            material=self.phase_function,
        )

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        return self.boundary.bounding_box(time0, time1)

    def __repr__(self) -> str:
        return f"ConstantMedium({self.boundary!r}, density={self.density})"
