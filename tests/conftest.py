"""Pytest configuration for path tracer tests.

Shared fixtures: a seeded random generator and a tiny scene with one red
diffuse sphere under a sky gradient.
"""

import random

import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList, Scene
from materials.lambertian import Lambertian
from renderer.config import RenderConfig
from scenes.background import gradient_background


@pytest.fixture
def rng():
    """Seeded generator so sampled tests are repeatable."""
    return random.Random(12345)


@pytest.fixture
def red_sphere_scene():
    """A red Lambertian sphere straight ahead of a default camera."""
    world = HittableList([Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.9, 0.1, 0.1)))])
    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), Vector3(0, 1, 0), 90.0, 2.0,
                    aperture=0.0, focus_dist=1.0)
    return Scene(world=world, camera=camera, background=gradient_background, name="red_sphere")


@pytest.fixture
def small_config():
    """A quick single-threaded render configuration."""
    return RenderConfig(width=20, height=10, samples_per_pixel=4, max_depth=5,
                        threads=1, seed=7, tile_size=8)
