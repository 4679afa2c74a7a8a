"""Tests for layoutflo.placer._geometry — overlap predicate and canvas helpers."""

import pytest

from layoutflo.placer._geometry import clamp_to_canvas, overlaps
from layoutflo.placer.models import Box, CanvasBounds


# ── overlaps ─────────────────────────────────────────────────────────────────


class TestOverlaps:
    def test_overlap(self):
        assert overlaps(Box(0, 0, 2, 2), Box(1, 1, 2, 2), 0.1) is True

    def test_far_apart_horizontal(self):
        assert overlaps(Box(0, 0, 1, 1), Box(5, 0, 1, 1), 0.1) is False

    def test_far_apart_vertical(self):
        assert overlaps(Box(0, 0, 1, 1), Box(0, 5, 1, 1), 0.1) is False

    def test_within_padding_counts_as_overlap(self):
        """A gap smaller than padding is a collision."""
        assert overlaps(Box(0, 0, 1, 1), Box(0, 1.05, 1, 1), 0.1) is True

    def test_exactly_padding_apart_is_clear(self):
        assert overlaps(Box(0, 0, 1, 1), Box(0, 1.5, 1, 1), 0.5) is False
        assert overlaps(Box(0, 0, 1, 1), Box(1.5, 0, 1, 1), 0.5) is False

    def test_touching_with_zero_padding_is_clear(self):
        assert overlaps(Box(0, 0, 1, 1), Box(1, 0, 1, 1), 0.0) is False

    def test_diagonal_neighbours_are_clear(self):
        """Overlap needs both axes; a gap on one axis is enough."""
        assert overlaps(Box(0, 0, 1, 1), Box(0.5, 2, 1, 1), 0.1) is False

    def test_containment(self):
        assert overlaps(Box(0, 0, 10, 10), Box(2, 2, 1, 1), 0.0) is True

    @pytest.mark.parametrize("padding", [0.0, 0.1, 3.0])
    def test_self_always_overlaps(self, padding):
        b = Box(3, 4, 0.5, 0.25)
        assert overlaps(b, b, padding) is True

    @pytest.mark.parametrize(
        "a,b",
        [
            (Box(0, 0, 2, 1), Box(0, 2, 2, 1)),
            (Box(0, 0, 3, 1), Box(0, 0.5, 3, 1)),
            (Box(0, 0, 1, 1), Box(1.05, 0, 1, 1)),
            (Box(-2, -2, 1, 1), Box(4, 4, 1, 1)),
        ],
    )
    @pytest.mark.parametrize("padding", [0.0, 0.1, 1.0])
    def test_symmetric(self, a, b, padding):
        assert overlaps(a, b, padding) == overlaps(b, a, padding)

    def test_payload_ignored(self):
        assert overlaps(Box(0, 0, 1, 1, "a"), Box(0, 0, 1, 1, "b"), 0.1) is True


# ── clamp_to_canvas ──────────────────────────────────────────────────────────


class TestClampToCanvas:
    def test_no_canvas_passthrough(self):
        assert clamp_to_canvas(-5, 100, 1, 1, None) == (-5, 100)

    def test_within_bounds(self):
        assert clamp_to_canvas(1, 2, 3, 1, CanvasBounds(10, 5)) == (1, 2)

    def test_clamp_negative(self):
        assert clamp_to_canvas(-1, -2, 3, 1, CanvasBounds(10, 5)) == (0, 0)

    def test_clamp_overflow(self):
        assert clamp_to_canvas(9, 6, 3, 1, CanvasBounds(10, 5)) == (7, 4)

    def test_box_larger_than_canvas_pinned_at_origin(self):
        assert clamp_to_canvas(3, 3, 20, 20, CanvasBounds(10, 5)) == (0, 0)
