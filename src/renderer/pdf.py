# renderer/pdf.py
"""
Probability density functions over directions, used to importance-sample
scattered rays towards lights and along a material's own distribution.

Each PDF answers two questions: how likely is a given direction
(``value``), and draw a direction from the distribution (``generate``).
Directions returned by ``generate`` need not be normalized.
"""
import math
from core.onb import ONB
from core.utils import random_cosine_direction, random_unit_vector
from core.vector import Vector3

class PDF:
    def value(self, direction: Vector3) -> float:
        raise NotImplementedError("value() must be implemented by subclasses.")

    def generate(self, rng) -> Vector3:
        raise NotImplementedError("generate() must be implemented by subclasses.")

class CosinePDF(PDF):
    """
    cos(theta) / pi around a surface normal; the Lambertian distribution.
    """
    def __init__(self, normal: Vector3):
        self.uvw = ONB(normal)

    def value(self, direction: Vector3) -> float:
        cosine = direction.normalize().dot(self.uvw.w)
        return max(0.0, cosine / math.pi)

    def generate(self, rng) -> Vector3:
        return self.uvw.local(random_cosine_direction(rng))

class SpherePDF(PDF):
    """
    Uniform over the whole sphere of directions.
    """
    def value(self, direction: Vector3) -> float:
        return 1.0 / (4.0 * math.pi)

    def generate(self, rng) -> Vector3:
        return random_unit_vector(rng)

class HittablePDF(PDF):
    """
    Samples directions from `origin` towards a hittable, typically the
    scene's lights.
    """
    def __init__(self, objects, origin: Vector3):
        self.objects = objects
        self.origin = origin

    def value(self, direction: Vector3) -> float:
        return self.objects.pdf_value(self.origin, direction)

    def generate(self, rng) -> Vector3:
        return self.objects.random(self.origin, rng)

class MixturePDF(PDF):
    """
    Even mixture of two PDFs.
    """
    def __init__(self, p0: PDF, p1: PDF):
        self.p = (p0, p1)

    def value(self, direction: Vector3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self, rng) -> Vector3:
        if rng.random() < 0.5:
            return self.p[0].generate(rng)
        return self.p[1].generate(rng)
