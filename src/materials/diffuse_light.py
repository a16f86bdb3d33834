# materials/diffuse_light.py
from typing import Optional, Union
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import BLACK, Material, ScatterRecord
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    Light is only emitted from the front face; flip the surface with
    FlipFace to point it the other way.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, ray_in: Ray, rec: HitRecord, u: float, v: float, p: Vector3) -> Vector3:
        """
        Return the emitted radiance, which can be textured.

        Args:
            ray_in (Ray): The incoming ray.
            rec (HitRecord): The hit on the light surface.
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Vector3): The hit point.

        Returns:
            Vector3: The emission color from the texture, black on back faces.
        """
        if not rec.front_face:
            return BLACK
        return self.texture.value(u, v, p)
