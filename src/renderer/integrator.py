# renderer/integrator.py
import math
from typing import Callable
from core.interval import Interval
from core.ray import Ray
from core.utils import RAY_EPSILON
from core.vector import Vector3
from geometry.hittable import Hittable
from renderer.pdf import HittablePDF, MixturePDF

BLACK = Vector3(0.0, 0.0, 0.0)

def ray_color(ray: Ray, background: Callable[[Ray], Vector3], world: Hittable,
              lights, depth: int, rng) -> Vector3:
    """
    Estimates the radiance arriving along `ray` by path tracing.

    The path is followed for at most `depth` bounces. Instead of recursing,
    the loop carries `throughput`, the product of all attenuation and PDF
    weights collected so far, and adds each emitted or background term
    scaled by it. A path that runs out of bounces contributes nothing more.

    Diffuse bounces sample a 50/50 mixture of the lights (when `lights` is
    non-empty) and the material's own PDF. A zero, negative or non-finite
    mixture density ends the path with no scattered contribution.
    """
    color = BLACK
    throughput = Vector3(1.0, 1.0, 1.0)
    has_lights = lights is not None and len(lights) > 0

    for _ in range(depth):
        rec = world.hit(ray, Interval(RAY_EPSILON, math.inf), rng)
        if rec is None:
            return color + throughput * background(ray)

        emitted = rec.material.emitted(ray, rec, rec.u, rec.v, rec.p)
        color = color + throughput * emitted

        srec = rec.material.scatter(ray, rec, rng)
        if srec is None:
            return color

        if srec.is_specular:
            throughput = throughput * srec.attenuation
            ray = srec.specular_ray
            continue

        if has_lights:
            pdf = MixturePDF(HittablePDF(lights, rec.p), srec.pdf)
        else:
            pdf = srec.pdf

        scattered = Ray(rec.p, pdf.generate(rng), ray.time)
        pdf_value = pdf.value(scattered.direction)
        if not (pdf_value > 0.0 and math.isfinite(pdf_value)):
            return color

        scattering_pdf = rec.material.scattering_pdf(ray, rec, scattered)
        throughput = throughput * srec.attenuation * (scattering_pdf / pdf_value)
        ray = scattered

    return color
