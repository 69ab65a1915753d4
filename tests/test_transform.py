"""Tests for AffineTransform composition."""

import numpy as np
import pytest

from kenburns.core.rects import Rect
from kenburns.core.transform import AffineTransform


def test_identity_maps_points_unchanged():
    assert AffineTransform.identity().map_point(3.5, -2.0) == (3.5, -2.0)


def test_post_operations_apply_in_call_order():
    transform = AffineTransform.identity().post_translate(-10, -20).post_scale(2, 2).post_translate(5, 5)
    # (10, 20) -> (0, 0) -> (0, 0) -> (5, 5)
    assert transform.map_point(10, 20) == pytest.approx((5.0, 5.0))
    # (11, 20) -> (1, 0) -> (2, 0) -> (7, 5)
    assert transform.map_point(11, 20) == pytest.approx((7.0, 5.0))


def test_order_matters():
    a = AffineTransform.identity().post_translate(10, 0).post_scale(2, 2)
    b = AffineTransform.identity().post_scale(2, 2).post_translate(10, 0)
    assert not a.is_close(b)


def test_map_rect():
    transform = AffineTransform.identity().post_scale(0.5, 0.5).post_translate(1, 1)
    assert transform.map_rect(Rect(0, 0, 100, 50)) == Rect(1.0, 1.0, 51.0, 26.0)


def test_matrix_is_a_copy():
    transform = AffineTransform.identity().post_scale(2, 3)
    matrix = transform.matrix
    matrix[0, 0] = 99.0
    assert transform.scale_x == 2.0
    assert transform.scale_y == 3.0


def test_as_affine_tuple_matches_row_vector_layout():
    transform = AffineTransform.identity().post_scale(2, 3).post_translate(4, 5)
    assert transform.as_affine_tuple() == (2.0, 0.0, 0.0, 3.0, 4.0, 5.0)


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        AffineTransform(np.zeros((2, 2)))


def test_equality_and_hash():
    a = AffineTransform.identity().post_translate(1, 2)
    b = AffineTransform.identity().post_translate(1, 2)
    assert a == b
    assert hash(a) == hash(b)
