# materials/material.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.textures import Texture

BLACK = Vector3(0.0, 0.0, 0.0)

class ScatterRecord:
    """
    Outcome of a scattering event.

    Specular materials set `specular_ray` (a deterministic direction given
    the draw); diffuse ones set `pdf`, the distribution the integrator mixes
    with light sampling.
    """
    def __init__(self, attenuation: Vector3, is_specular: bool = False,
                 specular_ray: Optional[Ray] = None, pdf=None):
        self.attenuation = attenuation
        self.is_specular = is_specular
        self.specular_ray = specular_ray
        self.pdf = pdf

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials can have textures for their properties.
    """
    def __init__(self):
        self.texture: Optional[Texture] = None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Returns a ScatterRecord, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Vector3) -> Vector3:
        return BLACK

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        return 0.0
