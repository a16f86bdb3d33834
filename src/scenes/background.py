# scenes/background.py
from core.ray import Ray
from core.vector import Vector3

def black_background(ray: Ray) -> Vector3:
    """Use this when emissive objects light the scene."""
    return Vector3(0.0, 0.0, 0.0)

def gradient_background(ray: Ray) -> Vector3:
    """
    White-to-sky-blue vertical gradient, for scenes without explicit lights.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return Vector3(1.0, 1.0, 1.0) * (1.0 - t) + Vector3(0.5, 0.7, 1.0) * t

class SolidBackground:
    """Constant background color."""
    def __init__(self, color: Vector3):
        self.color = color

    def __call__(self, ray: Ray) -> Vector3:
        return self.color
