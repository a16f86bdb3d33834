"""Unit tests for materials.

Tests cover:
- Lambertian scattering PDF
- Metal reflection, fuzz and absorption
- Dielectric total internal reflection and Schlick reflectance
- Diffuse lights emitting from the front face only
- Isotropic phase function
"""

import math
import random

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric, must_reflect, schlick
from materials.diffuse_light import DiffuseLight
from materials.isotropic import Isotropic
from materials.lambertian import Lambertian
from materials.material import BLACK
from materials.metal import Metal
from materials.textures import CheckerTexture
from renderer.pdf import CosinePDF, SpherePDF


def make_record(normal=Vector3(0, 1, 0), front_face=True, p=Vector3(0, 0, 0)):
    return HitRecord(p=p, normal=normal, t=1.0, front_face=front_face)


class TestLambertian:
    """Tests for the Lambertian material."""

    def test_scatter_returns_cosine_pdf(self, rng):
        material = Lambertian(Vector3(0.5, 0.6, 0.7))
        srec = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng)
        assert not srec.is_specular
        assert isinstance(srec.pdf, CosinePDF)
        assert srec.attenuation == Vector3(0.5, 0.6, 0.7)

    def test_scattering_pdf(self):
        material = Lambertian(Vector3(0.5, 0.5, 0.5))
        rec = make_record()
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        up = Ray(Vector3(0, 0, 0), Vector3(0, 2, 0))
        down = Ray(Vector3(0, 0, 0), Vector3(0, -1, 0))
        assert material.scattering_pdf(ray_in, rec, up) == pytest.approx(1 / math.pi)
        assert material.scattering_pdf(ray_in, rec, down) == 0.0

    def test_textured_albedo(self, rng):
        texture = CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1))
        material = Lambertian(texture)
        rec = make_record(p=Vector3(0.1, 0.1, 0.1))
        srec = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
        assert srec.attenuation == texture.value(0, 0, rec.p)


class TestMetal:
    """Tests for the Metal material."""

    def test_mirror_reflection(self, rng):
        material = Metal(Vector3(0.8, 0.8, 0.8), 0.0)
        ray_in = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        srec = material.scatter(ray_in, make_record(), rng)
        assert srec.is_specular
        direction = srec.specular_ray.direction
        assert direction.x == pytest.approx(math.sqrt(0.5))
        assert direction.y == pytest.approx(math.sqrt(0.5))
        assert srec.attenuation == Vector3(0.8, 0.8, 0.8)

    def test_grazing_reflection_is_absorbed(self, rng):
        """A reflection that does not leave the surface is absorbed."""
        material = Metal(Vector3(0.8, 0.8, 0.8), 0.0)
        ray_in = Ray(Vector3(-1, 0, 0), Vector3(1, 0, 0))
        assert material.scatter(ray_in, make_record(), rng) is None

    def test_fuzz_is_clamped(self):
        assert Metal(Vector3(1, 1, 1), 5.0).fuzz == 1.0
        assert Metal(Vector3(1, 1, 1), -1.0).fuzz == 0.0

    def test_fuzzy_reflections_leave_the_surface(self, rng):
        material = Metal(Vector3(1, 1, 1), 0.5)
        ray_in = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        for _ in range(100):
            srec = material.scatter(ray_in, make_record(), rng)
            if srec is not None:
                assert srec.specular_ray.direction.y > 0


class TestDielectric:
    """Tests for the Dielectric material."""

    def test_schlick(self):
        assert schlick(1.0, 1.5) == pytest.approx(0.04)
        assert schlick(0.0, 1.5) == pytest.approx(1.0)

    def test_must_reflect(self):
        assert must_reflect(1.5, 0.9)
        assert not must_reflect(1 / 1.5, 0.9)

    def test_total_internal_reflection_always_reflects(self):
        """Leaving glass at a grazing angle can only reflect."""
        material = Dielectric(1.5)
        # Inside the glass: the ray travels against the (flipped) normal.
        rec = make_record(normal=Vector3(0, 1, 0), front_face=False)
        ray_in = Ray(Vector3(-1, 0.2, 0), Vector3(1, -0.2, 0))
        for seed in range(50):
            srec = material.scatter(ray_in, rec, random.Random(seed))
            assert srec.is_specular
            assert srec.specular_ray.direction.y > 0

    def test_glass_does_not_absorb(self, rng):
        srec = Dielectric(1.5).scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng)
        assert srec.attenuation == Vector3(1, 1, 1)

    def test_head_on_mostly_refracts(self):
        material = Dielectric(1.5)
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        refracted = 0
        for seed in range(200):
            srec = material.scatter(ray_in, make_record(), random.Random(seed))
            if srec.specular_ray.direction.y < 0:
                refracted += 1
        # Schlick reflectance at normal incidence is 4%.
        assert refracted > 170


class TestDiffuseLight:
    """Tests for DiffuseLight."""

    def test_emits_from_front_face(self):
        light = DiffuseLight(Vector3(4, 4, 4))
        rec = make_record(front_face=True)
        assert light.emitted(None, rec, 0, 0, rec.p) == Vector3(4, 4, 4)

    def test_back_face_is_dark(self):
        light = DiffuseLight(Vector3(4, 4, 4))
        rec = make_record(front_face=False)
        assert light.emitted(None, rec, 0, 0, rec.p) == BLACK

    def test_never_scatters(self, rng):
        light = DiffuseLight(Vector3(4, 4, 4))
        assert light.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), make_record(), rng) is None


class TestIsotropic:
    """Tests for the Isotropic phase function."""

    def test_uniform_sphere(self, rng):
        material = Isotropic(Vector3(0.5, 0.5, 0.5))
        rec = make_record()
        srec = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
        assert isinstance(srec.pdf, SpherePDF)
        assert material.scattering_pdf(None, rec, None) == pytest.approx(1 / (4 * math.pi))

    def test_other_materials_do_not_emit(self):
        rec = make_record()
        assert Isotropic(Vector3(1, 1, 1)).emitted(None, rec, 0, 0, rec.p) == BLACK
        assert Lambertian(Vector3(1, 1, 1)).emitted(None, rec, 0, 0, rec.p) == BLACK
