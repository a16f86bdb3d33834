# scenes/presets.py
"""
Catalog of named example scenes.

Every builder takes the image aspect ratio, a seeded ``random.Random`` for
scene layout and an optional texture path, and returns a ``Scene``. Use
``build_scene`` to look one up by name.
"""
import logging
import os
import random
from typing import Callable, Dict, List, Optional, Tuple

from camera.camera import Camera
from core.errors import ConfigError
from core.utils import random_vector
from core.vector import Vector3
from geometry.box import Box
from geometry.bvh import BVHNode
from geometry.constant_medium import ConstantMedium
from geometry.hittable import Hittable
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import MovingSphere, Sphere
from geometry.transform import FlipFace, RotateY, Translate
from geometry.world import HittableList, Scene, build_world
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, NoiseTexture, Texture
from materials.texture_loader import load_texture
from scenes.background import black_background, gradient_background

logger = logging.getLogger(__name__)

UP = Vector3(0.0, 1.0, 0.0)

class SceneParts:
    """Raw pieces produced by a scene builder, before the world is assembled."""
    def __init__(self, objects: List[Hittable], camera: Camera, background,
                 lights: Optional[List[Hittable]] = None):
        self.objects = objects
        self.camera = camera
        self.background = background
        self.lights = lights or []

###############################################################################
# Cameras
###############################################################################
def default_camera(aspect: float) -> Camera:
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), UP, 90.0, aspect,
                  aperture=0.0, focus_dist=1.0)

def wide_angle_camera(aspect: float) -> Camera:
    return Camera(Vector3(-2, 2, 1), Vector3(0, 0, -1), UP, 90.0, aspect,
                  aperture=0.0, focus_dist=1.0)

def telephoto_camera(aspect: float) -> Camera:
    return Camera(Vector3(-2, 2, 1), Vector3(0, 0, -1), UP, 20.0, aspect,
                  aperture=0.0, focus_dist=1.0)

def large_aperture_camera(aspect: float) -> Camera:
    lookfrom = Vector3(3, 3, 2)
    lookat = Vector3(0, 0, -1)
    return Camera(lookfrom, lookat, UP, 20.0, aspect, aperture=2.0,
                  focus_dist=(lookfrom - lookat).length())

def random_spheres_camera(aspect: float, aperture: float = 0.1) -> Camera:
    return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect,
                  aperture=aperture, focus_dist=10.0, time0=0.0, time1=1.0)

def cornell_box_camera(aspect: float) -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), UP, 40.0, aspect,
                  aperture=0.0, focus_dist=10.0, time0=0.0, time1=1.0)

###############################################################################
# Small material test scenes
###############################################################################
def _ground() -> Sphere:
    return Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.8, 0.8, 0.0)))

def diffuse_spheres() -> List[Hittable]:
    return [
        Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))),
        Sphere(Vector3(0, -100.5, -1), 100, Lambertian(Vector3(0.5, 0.5, 0.5))),
    ]

def metal_spheres() -> List[Hittable]:
    return [
        Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.7, 0.3, 0.3))),
        _ground(),
        Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 1.0)),
        Sphere(Vector3(-1, 0, -1), 0.5, Metal(Vector3(0.8, 0.8, 0.8), 0.3)),
    ]

def dielectric_spheres() -> List[Hittable]:
    glass = Dielectric(1.5)
    return [
        Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5))),
        _ground(),
        Sphere(Vector3(1, 0, -1), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.3)),
        Sphere(Vector3(-1, 0, -1), 0.5, glass),
        # Negative radius: same surface, normal points inwards (hollow bubble).
        Sphere(Vector3(-1, 0, -1), -0.45, glass),
    ]

def random_spheres(rng: random.Random, motion_blur: bool = False,
                   checkered_floor: bool = False) -> List[Hittable]:
    """Some fixed spheres and a lot of small random ones."""
    world: List[Hittable] = []

    if checkered_floor:
        floor = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    else:
        floor = Vector3(0.5, 0.5, 0.5)
    world.append(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(floor)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                if motion_blur:
                    center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                    world.append(MovingSphere(center, center1, 0.0, 1.0, 0.2, Lambertian(albedo)))
                else:
                    world.append(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                world.append(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.append(Sphere(center, 0.2, Dielectric(1.5)))

    world.append(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.append(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.append(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    return world

###############################################################################
# Textures and lights
###############################################################################
def checkered_spheres() -> List[Hittable]:
    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    return [
        Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)),
        Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)),
    ]

def perlin_spheres(seed: int) -> List[Hittable]:
    noise = NoiseTexture(scale=4.0, seed=seed)
    return [
        Sphere(Vector3(0, -1000, 0), 1000, Lambertian(noise)),
        Sphere(Vector3(0, 2, 0), 2, Lambertian(noise)),
    ]

def earth_texture(texture_path: Optional[str]) -> Texture:
    """
    The globe texture, or a checker stand-in when no image is available.
    """
    if texture_path and os.path.exists(texture_path):
        try:
            return load_texture(texture_path)
        except ValueError as e:
            raise ConfigError(f"cannot use {texture_path!r} as a texture: {e}") from e
    logger.warning("Earth texture %r not found, using a checker texture instead", texture_path)
    return CheckerTexture(Vector3(0.1, 0.3, 0.7), Vector3(0.2, 0.6, 0.2), scale=5.0)

def _cornell_walls(light_material) -> Tuple[List[Hittable], Hittable]:
    red = Lambertian(Vector3(0.65, 0.05, 0.05))
    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    green = Lambertian(Vector3(0.12, 0.45, 0.15))

    light = XZRect(213, 343, 227, 332, 554, light_material)
    walls = [
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        # The light faces down into the box.
        FlipFace(light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ]
    return walls, light

def _cornell_boxes(white) -> List[Hittable]:
    tall = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    return [tall, short]

###############################################################################
# Catalog
###############################################################################
def _lambertian_diffuse(aspect, rng, texture_path):
    return SceneParts(diffuse_spheres(), default_camera(aspect), gradient_background)

def _metal(aspect, rng, texture_path):
    return SceneParts(metal_spheres(), default_camera(aspect), gradient_background)

def _dielectric(aspect, rng, texture_path):
    return SceneParts(dielectric_spheres(), default_camera(aspect), gradient_background)

def _wide_angle(aspect, rng, texture_path):
    return SceneParts(dielectric_spheres(), wide_angle_camera(aspect), gradient_background)

def _telephoto(aspect, rng, texture_path):
    return SceneParts(dielectric_spheres(), telephoto_camera(aspect), gradient_background)

def _defocus_blur(aspect, rng, texture_path):
    return SceneParts(dielectric_spheres(), large_aperture_camera(aspect), gradient_background)

def _random_spheres(aspect, rng, texture_path):
    return SceneParts(random_spheres(rng), random_spheres_camera(aspect), gradient_background)

def _motion_blur(aspect, rng, texture_path):
    return SceneParts(random_spheres(rng, motion_blur=True), random_spheres_camera(aspect),
                      gradient_background)

def _checkered_floor(aspect, rng, texture_path):
    return SceneParts(random_spheres(rng, motion_blur=True, checkered_floor=True),
                      random_spheres_camera(aspect), gradient_background)

def _checkered_spheres(aspect, rng, texture_path):
    return SceneParts(checkered_spheres(), random_spheres_camera(aspect, aperture=0.0),
                      gradient_background)

def _perlin_spheres(aspect, rng, texture_path):
    return SceneParts(perlin_spheres(rng.randrange(2 ** 32)),
                      random_spheres_camera(aspect, aperture=0.0), gradient_background)

def _earth(aspect, rng, texture_path):
    globe = Sphere(Vector3(0, 0, 0), 2, Lambertian(earth_texture(texture_path)))
    camera = Camera(Vector3(0, 0, 12), Vector3(0, 0, 0), UP, 20.0, aspect)
    return SceneParts([globe], camera, gradient_background)

def _simple_light(aspect, rng, texture_path):
    light = DiffuseLight(Vector3(4, 4, 4))
    lamp = Sphere(Vector3(0, 7, 0), 2, light)
    panel = XYRect(3, 5, 1, 3, -2, light)
    objects = perlin_spheres(rng.randrange(2 ** 32)) + [lamp, panel]
    camera = Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), UP, 20.0, aspect)
    return SceneParts(objects, camera, black_background, lights=[lamp, panel])

def _empty_cornell_box(aspect, rng, texture_path):
    walls, light = _cornell_walls(DiffuseLight(Vector3(15, 15, 15)))
    return SceneParts(walls, cornell_box_camera(aspect), black_background, lights=[light])

def _cornell_box(aspect, rng, texture_path):
    walls, light = _cornell_walls(DiffuseLight(Vector3(15, 15, 15)))
    objects = walls + _cornell_boxes(Lambertian(Vector3(0.73, 0.73, 0.73)))
    return SceneParts(objects, cornell_box_camera(aspect), black_background, lights=[light])

def _cornell_smoke(aspect, rng, texture_path):
    light_material = DiffuseLight(Vector3(7, 7, 7))
    walls, _ = _cornell_walls(light_material)
    # Swap the small lamp for a larger, dimmer one.
    big_light = XZRect(113, 443, 127, 432, 554, light_material)
    walls = [w for w in walls if not isinstance(w, FlipFace)] + [FlipFace(big_light)]
    tall, short = _cornell_boxes(Lambertian(Vector3(0.73, 0.73, 0.73)))
    objects = walls + [
        ConstantMedium(tall, 0.01, Vector3(0, 0, 0)),
        ConstantMedium(short, 0.01, Vector3(1, 1, 1)),
    ]
    return SceneParts(objects, cornell_box_camera(aspect), black_background, lights=[big_light])

def _final_scene(aspect, rng, texture_path):
    """Everything at once: boxes, motion blur, glass, fog, textures and instances."""
    objects: List[Hittable] = []

    ground = Lambertian(Vector3(0.48, 0.83, 0.53))
    boxes = []
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            boxes.append(Box(Vector3(x0, 0, z0), Vector3(x0 + w, y1, z0 + w), ground))
    objects.append(BVHNode(boxes, 0.0, 1.0, rng=random.Random(rng.randrange(2 ** 32))))

    light = XZRect(123, 423, 147, 412, 554, DiffuseLight(Vector3(7, 7, 7)))
    objects.append(FlipFace(light))

    center0 = Vector3(400, 400, 200)
    objects.append(MovingSphere(center0, center0 + Vector3(30, 0, 0), 0.0, 1.0, 50,
                                Lambertian(Vector3(0.7, 0.3, 0.1))))
    objects.append(Sphere(Vector3(260, 150, 45), 50, Dielectric(1.5)))
    objects.append(Sphere(Vector3(0, 150, 145), 50, Metal(Vector3(0.8, 0.8, 0.9), 1.0)))

    boundary = Sphere(Vector3(360, 150, 145), 70, Dielectric(1.5))
    objects.append(boundary)
    objects.append(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    objects.append(ConstantMedium(mist, 0.0001, Vector3(1, 1, 1)))

    objects.append(Sphere(Vector3(400, 200, 400), 100, Lambertian(earth_texture(texture_path))))
    objects.append(Sphere(Vector3(220, 280, 300), 80,
                          Lambertian(NoiseTexture(scale=0.1, seed=rng.randrange(2 ** 32)))))

    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    cluster = [Sphere(Vector3(rng.uniform(0, 165), rng.uniform(0, 165), rng.uniform(0, 165)), 10, white)
               for _ in range(1000)]
    objects.append(Translate(RotateY(BVHNode(cluster, 0.0, 1.0,
                                             rng=random.Random(rng.randrange(2 ** 32))), 15),
                             Vector3(-100, 270, 395)))

    camera = Camera(Vector3(478, 278, -600), Vector3(278, 278, 0), UP, 40.0, aspect,
                    time0=0.0, time1=1.0)
    return SceneParts(objects, camera, black_background, lights=[light])

SceneBuilder = Callable[[float, random.Random, Optional[str]], SceneParts]

SCENES: Dict[str, SceneBuilder] = {
    "lambertian_diffuse": _lambertian_diffuse,
    "metal": _metal,
    "dielectric": _dielectric,
    "wide_angle": _wide_angle,
    "telephoto": _telephoto,
    "defocus_blur": _defocus_blur,
    "random_spheres": _random_spheres,
    "motion_blur": _motion_blur,
    "checkered_floor": _checkered_floor,
    "checkered_spheres": _checkered_spheres,
    "perlin_spheres": _perlin_spheres,
    "earth": _earth,
    "simple_light": _simple_light,
    "empty_cornell_box": _empty_cornell_box,
    "cornell_box": _cornell_box,
    "cornell_smoke": _cornell_smoke,
    "final_scene": _final_scene,
}

def build_scene(name: str, aspect_ratio: float, seed: int = 0, use_bvh: bool = True,
                texture_path: Optional[str] = None) -> Scene:
    """
    Builds the named scene. The same name and seed always give the same scene.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ConfigError(
            f"unknown scene {name!r}; choose one of: {', '.join(sorted(SCENES))}"
        ) from None

    rng = random.Random(seed)
    parts = builder(aspect_ratio, rng, texture_path)
    world = build_world(parts.objects, use_bvh=use_bvh, bvh_seed=seed)
    return Scene(world=world, camera=parts.camera, background=parts.background,
                 lights=HittableList(parts.lights), name=name)
