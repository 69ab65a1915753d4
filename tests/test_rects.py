"""Tests for the rect geometry helpers."""

import pytest

from kenburns.core.rects import (
    Rect,
    aspect_ratio,
    center_crop_scale,
    ensure_valid,
    fit_center_scale,
    lerp_rect,
    max_crop_rect,
)
from kenburns.errors import DegenerateRectError


def test_rect_derived_properties():
    rect = Rect(10.0, 20.0, 110.0, 70.0)
    assert rect.width == 100.0
    assert rect.height == 50.0
    assert rect.center == (60.0, 45.0)
    assert rect.aspect_ratio == pytest.approx(2.0)


def test_rect_constructors_agree():
    by_size = Rect.from_size(40, 30, left=5, top=5)
    by_center = Rect.from_center(25, 20, 40, 30)
    assert by_size == by_center


def test_aspect_ratio_rejects_zero_height():
    with pytest.raises(DegenerateRectError):
        aspect_ratio(Rect(0, 0, 10, 0))


def test_ensure_valid_rejects_inverted_rect():
    with pytest.raises(DegenerateRectError):
        ensure_valid(Rect(10, 0, 0, 10))
    # DegenerateRectError doubles as a ValueError for generic callers
    with pytest.raises(ValueError):
        ensure_valid(Rect(0, 0, -1, 5))


def test_center_crop_scale_equal_ratios_is_identity():
    assert center_crop_scale(Rect.from_size(1000, 500), 2.0) == 1.0


def test_center_crop_scale_wider_content_expands_to_cover_height():
    # Content 4:1 fitted by width into a 2:1 outer rect is half as tall as needed
    assert center_crop_scale(Rect.from_size(1000, 500), 4.0) == pytest.approx(2.0)


def test_center_crop_scale_taller_content_needs_no_extra_scale():
    assert center_crop_scale(Rect.from_size(1000, 500), 1.0) == 1.0


def test_fit_center_scale_letterboxes_taller_content():
    assert fit_center_scale(Rect.from_size(1000, 500), 1.0) == pytest.approx(0.5)
    assert fit_center_scale(Rect.from_size(1000, 500), 4.0) == 1.0


def test_max_crop_rect_limited_by_height():
    crop = max_crop_rect(Rect.from_size(2000, 1000), 1.0)
    assert crop == Rect(0.0, 0.0, 1000.0, 1000.0)


def test_max_crop_rect_limited_by_width():
    crop = max_crop_rect(Rect.from_size(2000, 2000), 2.0)
    assert crop == Rect(0.0, 0.0, 2000.0, 1000.0)


def test_max_crop_rect_keeps_bounds_origin():
    crop = max_crop_rect(Rect(100, 50, 500, 350), 4.0 / 3.0)
    assert crop.left == 100
    assert crop.top == 50
    assert Rect(100, 50, 500, 350).contains(crop)


def test_contains_respects_tolerance():
    outer = Rect.from_size(100, 100)
    assert outer.contains(Rect(0, 0, 100 + 1e-9, 100))
    assert not outer.contains(Rect(-1, 0, 50, 50))


def test_lerp_rect_halfway():
    start = Rect(0, 0, 100, 50)
    end = Rect(100, 50, 300, 150)
    assert lerp_rect(start, end, 0.5) == Rect(50.0, 25.0, 200.0, 100.0)
