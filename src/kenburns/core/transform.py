"""Immutable 2D affine transform backed by a 3x3 numpy matrix."""

from __future__ import annotations

import numpy as np

from .rects import Rect


class AffineTransform:
    """Row-major 3x3 affine matrix mapping column vectors ``(x, y, 1)``.

    ``post_*`` methods return a new transform that applies the extra
    operation *after* this one, so chains read in application order.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: np.ndarray | None = None) -> None:
        if matrix is None:
            data = np.identity(3, dtype=np.float64)
        else:
            data = np.array(matrix, dtype=np.float64, copy=True)
            if data.shape != (3, 3):
                raise ValueError(f"expected a 3x3 matrix, got shape {data.shape}")
        data.setflags(write=False)
        self._matrix = data

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @property
    def matrix(self) -> np.ndarray:
        """Return a writable copy of the underlying matrix."""
        return self._matrix.copy()

    @property
    def scale_x(self) -> float:
        return float(self._matrix[0, 0])

    @property
    def scale_y(self) -> float:
        return float(self._matrix[1, 1])

    @property
    def translation(self) -> tuple[float, float]:
        return (float(self._matrix[0, 2]), float(self._matrix[1, 2]))

    def post_concat(self, other: "AffineTransform") -> "AffineTransform":
        return AffineTransform(other._matrix @ self._matrix)

    def post_translate(self, dx: float, dy: float) -> "AffineTransform":
        step = np.array(
            [
                [1.0, 0.0, float(dx)],
                [0.0, 1.0, float(dy)],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return AffineTransform(step @ self._matrix)

    def post_scale(self, sx: float, sy: float) -> "AffineTransform":
        step = np.array(
            [
                [float(sx), 0.0, 0.0],
                [0.0, float(sy), 0.0],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return AffineTransform(step @ self._matrix)

    def map_point(self, x: float, y: float) -> tuple[float, float]:
        mapped = self._matrix @ np.array([float(x), float(y), 1.0], dtype=np.float64)
        return (float(mapped[0]), float(mapped[1]))

    def map_rect(self, rect: Rect) -> Rect:
        """Map *rect* and return the bounding box of its corners."""

        corners = np.array(
            [
                [rect.left, rect.right, rect.right, rect.left],
                [rect.top, rect.top, rect.bottom, rect.bottom],
                [1.0, 1.0, 1.0, 1.0],
            ],
            dtype=np.float64,
        )
        mapped = self._matrix @ corners
        return Rect(
            float(mapped[0].min()),
            float(mapped[1].min()),
            float(mapped[0].max()),
            float(mapped[1].max()),
        )

    def as_affine_tuple(self) -> tuple[float, float, float, float, float, float]:
        """Return ``(m11, m12, m21, m22, dx, dy)`` in Qt's row-vector convention."""

        m = self._matrix
        return (
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    def is_close(self, other: "AffineTransform", tolerance: float = 1e-9) -> bool:
        return bool(np.allclose(self._matrix, other._matrix, atol=tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(self._matrix.tobytes())

    def __repr__(self) -> str:
        return f"AffineTransform({self._matrix.tolist()!r})"


__all__ = ["AffineTransform"]
