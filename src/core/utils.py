# core/utils.py
import math
from core.vector import Vector3

# Rays start slightly off the surface to avoid self-intersection ("shadow acne").
RAY_EPSILON = 0.001

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x

def random_vector(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    a = rng.uniform(0.0, 2.0 * math.pi)
    z = rng.uniform(-1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)

def random_in_unit_disk(rng) -> Vector3:
    """Generate random point in unit disk for DOF."""
    while True:
        p = Vector3(
            rng.uniform(-1, 1),
            rng.uniform(-1, 1),
            0
        )
        if p.dot(p) < 1:
            return p

def random_cosine_direction(rng) -> Vector3:
    """
    Returns a direction around +z distributed as cos(theta) / pi.
    """
    r1 = rng.random()
    r2 = rng.random()
    phi = 2.0 * math.pi * r1
    r2_sqrt = math.sqrt(r2)
    return Vector3(math.cos(phi) * r2_sqrt, math.sin(phi) * r2_sqrt, math.sqrt(1.0 - r2))

def random_to_sphere(rng, radius: float, distance_squared: float) -> Vector3:
    """
    Returns a direction around +z uniformly sampled from the cone subtended
    by a sphere of the given radius at the given squared distance.
    """
    r1 = rng.random()
    r2 = rng.random()
    z = 1.0 + r2 * (math.sqrt(max(0.0, 1.0 - radius * radius / distance_squared)) - 1.0)
    phi = 2.0 * math.pi * r1
    s = math.sqrt(max(0.0, 1.0 - z * z))
    return Vector3(math.cos(phi) * s, math.sin(phi) * s, z)

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.dot(r_out_perp))))
    return r_out_perp + r_out_parallel
