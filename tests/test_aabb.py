"""Unit tests for axis-aligned bounding boxes."""

import math

import pytest

from core.aabb import AABB, AABB_PADDING
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3


@pytest.fixture
def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestSlabTest:
    """Tests for AABB.hit."""

    def test_ray_through_box_hits(self, unit_box):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert unit_box.hit(ray, Interval(0.001, math.inf))

    def test_ray_pointing_away_misses(self, unit_box):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, -1))
        assert not unit_box.hit(ray, Interval(0.001, math.inf))

    def test_parallel_ray_outside_slab_misses(self, unit_box):
        """A zero direction component only hits when the origin lies within that slab."""
        ray = Ray(Vector3(5, 0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, Interval(0.001, math.inf))

    def test_parallel_ray_inside_slab_hits(self, unit_box):
        ray = Ray(Vector3(0.5, 0, -5), Vector3(0, 0, 1))
        assert unit_box.hit(ray, Interval(0.001, math.inf))

    def test_interval_limits_the_hit(self, unit_box):
        """The box starts at t = 4; a search capped at 3 must miss."""
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not unit_box.hit(ray, Interval(0.001, 3.0))

    def test_origin_inside_box_hits(self, unit_box):
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert unit_box.hit(ray, Interval(0.001, math.inf))


class TestBoxOperations:
    """Tests for box construction helpers."""

    def test_surrounding_box(self):
        a = AABB(Vector3(0, 0, 0), Vector3(1, 1, 1))
        b = AABB(Vector3(-1, 2, 0.5), Vector3(0.5, 3, 4))
        box = AABB.surrounding_box(a, b)
        assert box.minimum == Vector3(-1, 0, 0)
        assert box.maximum == Vector3(1, 3, 4)
        assert box.contains_box(a)
        assert box.contains_box(b)

    def test_pad_gives_flat_boxes_thickness(self):
        flat = AABB(Vector3(0, 0, 2), Vector3(1, 1, 2)).pad()
        assert flat.maximum.z - flat.minimum.z == pytest.approx(AABB_PADDING)
        assert flat.maximum.x - flat.minimum.x == 1

    def test_centroid(self, unit_box):
        assert unit_box.centroid(0) == 0

    def test_translate(self, unit_box):
        moved = unit_box.translate(Vector3(1, 0, 0))
        assert moved.minimum == Vector3(0, -1, -1)
        assert moved.maximum == Vector3(2, 1, 1)
