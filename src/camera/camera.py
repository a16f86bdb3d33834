# camera/camera.py
import math
from core.errors import ConfigError
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from `lookfrom` towards `lookat`.

    vfov is the vertical field of view in degrees. The shutter is open
    between time0 and time1; every ray gets a uniform time in that range.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        if aspect_ratio <= 0:
            raise ConfigError(f"aspect ratio must be positive, got {aspect_ratio}")
        if not 0 < vfov < 180:
            raise ConfigError(f"vertical field of view must be in (0, 180), got {vfov}")
        if focus_dist <= 0:
            raise ConfigError(f"focus distance must be positive, got {focus_dist}")
        if (lookfrom - lookat).near_zero():
            raise ConfigError("lookfrom and lookat must differ")

        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        half_height = math.tan(math.radians(self.vfov) / 2)
        half_width = self.aspect_ratio * half_height

        self.w = (self.lookfrom - self.lookat).normalize()
        u = self.vup.cross(self.w)
        if u.near_zero():
            raise ConfigError("view up vector is parallel to the viewing direction")
        self.u = u.normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.lookfrom
        # The viewport lies on the focus plane.
        self.horizontal = self.u * (2.0 * half_width * self.focus_dist)
        self.vertical = self.v * (2.0 * half_height * self.focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Generates a ray through viewport coordinates (s, t) in [0, 1],
        measured from the lower left corner, with depth of field and a
        random time within the shutter interval.
        """
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0.0, 0.0, 0.0)

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        if self.time1 > self.time0:
            time = rng.uniform(self.time0, self.time1)
        else:
            time = self.time0
        return Ray(ray_origin, ray_direction, time)

    def __repr__(self) -> str:
        return (f"Camera(lookfrom={self.lookfrom}, lookat={self.lookat}, "
                f"vfov={self.vfov}, aperture={self.aperture})")
