"""Unit tests for rectangles, boxes, instances and volumes.

Tests cover:
- Axis-aligned rectangle hits, texture coordinates and light sampling
- Boxes built from six rectangles
- Translate, RotateY and FlipFace instances
- Constant density media
"""

import math
import random

import pytest

from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.box import Box
from geometry.constant_medium import ConstantMedium
from geometry.rect import XYRect, XZRect, YZRect
from geometry.sphere import Sphere
from geometry.transform import FlipFace, RotateY, Translate
from materials.isotropic import Isotropic

FORWARD = Interval(0.001, math.inf)


class TestRectangles:
    """Tests for XYRect, XZRect and YZRect."""

    def test_xy_rect_hit(self):
        rect = XYRect(0, 1, 0, 1, -1, None)
        rec = rect.hit(Ray(Vector3(0.25, 0.75, 0), Vector3(0, 0, -1)), FORWARD)
        assert rec.t == pytest.approx(1.0)
        assert (rec.u, rec.v) == pytest.approx((0.25, 0.75))
        assert rec.front_face
        assert rec.normal == Vector3(0, 0, 1)

    def test_hit_from_behind_is_back_face(self):
        rect = XZRect(-1, 1, -1, 1, 2, None)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        rec = rect.hit(ray, FORWARD)
        assert rec.t == pytest.approx(2.0)
        assert not rec.front_face
        assert rec.normal.dot(ray.direction) < 0

    def test_miss_outside_extent(self):
        rect = YZRect(0, 1, 0, 1, 3, None)
        assert rect.hit(Ray(Vector3(0, 2, 0.5), Vector3(1, 0, 0)), FORWARD) is None

    def test_parallel_ray_misses(self):
        rect = XYRect(0, 1, 0, 1, -1, None)
        assert rect.hit(Ray(Vector3(0.5, 0.5, -1), Vector3(1, 0, 0)), FORWARD) is None

    def test_bounding_box_is_padded(self):
        box = XYRect(0, 1, 0, 1, -1, None).bounding_box()
        assert box.maximum.z - box.minimum.z > 0
        assert box.minimum.z < -1 < box.maximum.z

    def test_pdf_value(self):
        """distance^2 / (cosine * area) for a light straight above."""
        light = XZRect(-1, 1, -1, 1, 5, None)
        assert light.pdf_value(Vector3(0, 0, 0), Vector3(0, 1, 0)) == pytest.approx(25 / 4)
        assert light.pdf_value(Vector3(0, 0, 0), Vector3(0, -1, 0)) == 0.0

    def test_random_directions_hit_the_rect(self, rng):
        light = XZRect(213, 343, 227, 332, 554, None)
        origin = Vector3(278, 0, 278)
        for _ in range(100):
            direction = light.random(origin, rng)
            assert light.hit(Ray(origin, direction), FORWARD) is not None
            assert light.pdf_value(origin, direction) > 0

    @pytest.mark.parametrize("rect", [XYRect(-1, 1, -1, 1, -3, None),
                                      XZRect(213, 343, 227, 332, 554, None),
                                      YZRect(0, 2, 0, 2, 5, None)])
    def test_random_directions_are_unit_length(self, rect, rng):
        origin = Vector3(0.5, 0.5, 0.5)
        for _ in range(50):
            direction = rect.random(origin, rng)
            assert direction.length() == pytest.approx(1.0)
            assert rect.pdf_value(origin, direction) == pytest.approx(
                rect.pdf_value(origin, 7 * direction))


class TestBox:
    """Tests for Box."""

    def test_hit_front_side(self):
        box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), None)
        ray = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        rec = box.hit(ray, FORWARD)
        assert rec.t == pytest.approx(5.0)
        assert rec.normal.dot(ray.direction) < 0

    def test_corners_are_normalized(self):
        box = Box(Vector3(1, 1, 1), Vector3(0, 0, 0), None)
        assert box.box_min == Vector3(0, 0, 0)
        assert box.box_max == Vector3(1, 1, 1)
        assert len(box.sides) == 6

    def test_miss(self):
        box = Box(Vector3(0, 0, 0), Vector3(1, 1, 1), None)
        assert box.hit(Ray(Vector3(2, 2, -5), Vector3(0, 0, 1)), FORWARD) is None


class TestInstances:
    """Tests for Translate, RotateY and FlipFace."""

    def test_translate_moves_hit_point(self):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, None), Vector3(0, 0, -5))
        rec = moved.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
        assert rec.t == pytest.approx(4.0)
        assert rec.p.z == pytest.approx(-4.0)
        assert rec.front_face
        assert rec.normal.z == pytest.approx(1.0)

    def test_translate_bounding_box(self):
        moved = Translate(Sphere(Vector3(0, 0, 0), 1.0, None), Vector3(3, 0, 0))
        box = moved.bounding_box()
        assert box.minimum == Vector3(2, -1, -1)
        assert box.maximum == Vector3(4, 1, 1)

    def test_rotate_y_quarter_turn(self):
        """A box on +x turned 90 degrees ends up on -z."""
        box = Box(Vector3(1, -0.5, -0.5), Vector3(2, 0.5, 0.5), None)
        rotated = RotateY(box, 90)

        rec = rotated.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), FORWARD)
        assert rec is not None
        assert rec.t == pytest.approx(1.0, abs=1e-3)
        assert rec.p.z == pytest.approx(-1.0, abs=1e-3)
        assert rec.normal.dot(Vector3(0, 0, -1)) < 0
        assert rotated.hit(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), FORWARD) is None

        bounds = rotated.bounding_box()
        assert bounds.minimum.z == pytest.approx(-2.0, abs=1e-3)
        assert bounds.maximum.z == pytest.approx(-1.0, abs=1e-3)

    def test_flip_face_inverts_front_face_only(self):
        rect = XZRect(-1, 1, -1, 1, 2, None)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 1, 0))
        plain = rect.hit(ray, FORWARD)
        flipped = FlipFace(rect).hit(ray, FORWARD)
        assert flipped.front_face != plain.front_face
        assert flipped.normal == plain.normal
        assert flipped.t == plain.t

    def test_instances_forward_light_sampling(self):
        rect = XZRect(-1, 1, -1, 1, 5, None)
        flipped = FlipFace(rect)
        origin = Vector3(0, 0, 0)
        direction = Vector3(0, 1, 0)
        assert flipped.pdf_value(origin, direction) == rect.pdf_value(origin, direction)


class TestConstantMedium:
    """Tests for ConstantMedium."""

    def test_dense_medium_scatters_just_inside(self, rng):
        fog = ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), 1e6, Vector3(1, 1, 1))
        rec = fog.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), FORWARD, rng)
        assert rec is not None
        assert 4.0 <= rec.t <= 4.01
        assert isinstance(rec.material, Isotropic)

    def test_thin_medium_lets_rays_through(self, rng):
        fog = ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), 1e-9, Vector3(1, 1, 1))
        assert fog.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), FORWARD, rng) is None

    def test_ray_starting_inside(self, rng):
        fog = ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), 1e6, Vector3(1, 1, 1))
        rec = fog.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), FORWARD, rng)
        assert rec is not None
        assert 0.0 < rec.t < 1.0

    def test_hits_always_inside_boundary(self):
        fog = ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), 0.5, Vector3(1, 1, 1))
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        for seed in range(50):
            rec = fog.hit(ray, FORWARD, random.Random(seed))
            if rec is not None:
                assert 4.0 <= rec.t <= 6.0

    def test_miss_boundary(self, rng):
        fog = ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), 1e6, Vector3(1, 1, 1))
        assert fog.hit(Ray(Vector3(0, 5, -5), Vector3(0, 0, 1)), FORWARD, rng) is None

    def test_needs_random_generator(self):
        fog = ConstantMedium(Sphere(Vector3(0, 0, 0), 1.0, None), 1.0, Vector3(1, 1, 1))
        with pytest.raises(ValueError):
            fog.hit(Ray(Vector3(0, 0, -5), Vector3(0, 0, 1)), FORWARD)
