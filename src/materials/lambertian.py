# materials/lambertian.py

import math
from typing import Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material, ScatterRecord
from materials.textures import Texture, as_texture
from renderer.pdf import CosinePDF

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__()
        # Store either a solid color or a texture.
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        """
        Scatter according to the cosine distribution around the normal.
        The direction itself is drawn by the integrator from the returned PDF.
        """
        albedo = self.texture.value(rec.u, rec.v, rec.p)
        return ScatterRecord(albedo, is_specular=False, pdf=CosinePDF(rec.normal))

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        cosine = rec.normal.dot(scattered.direction.normalize())
        return 0.0 if cosine < 0 else cosine / math.pi
