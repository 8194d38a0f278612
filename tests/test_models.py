"""Tests for field bounds and clamp math."""

import math
import random

import pytest
from pygame.math import Vector2

from asteroid_dodge.models import Bounds, clamp


class TestClamp:
    def test_value_inside_range_is_unchanged(self):
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_value_outside_range_snaps_to_edge(self):
        assert clamp(-3.0, 0.0, 10.0) == 0.0
        assert clamp(42.0, 0.0, 10.0) == 10.0

    def test_inverted_range_collapses_to_midpoint(self):
        assert clamp(100.0, 48.0, -48.0) == 0.0
        assert clamp(-100.0, 48.0, -48.0) == 0.0


class TestBounds:
    def test_derived_geometry(self):
        bounds = Bounds(0, 0, 400, 800)
        assert bounds.width == 400
        assert bounds.height == 800
        assert bounds.mid_x == 200
        assert bounds.mid_y == 400
        assert bounds.center == Vector2(200, 400)

    @pytest.mark.parametrize(
        "point, expected",
        [
            ((-50, 400), (48, 400)),
            ((1000, 400), (352, 400)),
            ((200, -10), (200, 48)),
            ((200, 5000), (200, 752)),
            ((-1, -1), (48, 48)),
            ((999, 999), (352, 752)),
        ],
    )
    def test_out_of_bounds_points_clamp_to_nearest_inset_point(self, point, expected):
        bounds = Bounds(0, 0, 400, 800)
        assert bounds.clamp_point(point, 48) == Vector2(expected)

    def test_in_bounds_points_are_unchanged(self):
        bounds = Bounds(0, 0, 400, 800)
        for point in [(48, 48), (200, 400), (352, 752), (100.5, 700.25)]:
            assert bounds.clamp_point(point, 48) == Vector2(point)

    def test_degenerate_bounds_never_produce_nan(self):
        bounds = Bounds.from_size(0, 0)
        clamped = bounds.clamp_point((123, -456), 48)
        assert not math.isnan(clamped.x) and not math.isnan(clamped.y)
        assert clamped == Vector2(0, 0)

    def test_negative_size_is_treated_as_empty(self):
        bounds = Bounds.from_size(-10, -20)
        assert bounds.size == (0.0, 0.0)

    def test_random_x_stays_inset(self):
        bounds = Bounds(0, 0, 400, 800)
        rng = random.Random(7)
        for _ in range(200):
            x = bounds.random_x(rng, 24)
            assert 24 <= x <= 376

    def test_random_x_on_narrow_field_uses_centre(self):
        bounds = Bounds(0, 0, 30, 800)
        assert bounds.random_x(random.Random(1), 24) == 15
