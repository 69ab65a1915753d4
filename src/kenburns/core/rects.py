"""Rectangle value type and the geometry helpers shared by the engine."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import RECT_TOLERANCE
from ..errors import DegenerateRectError


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle described by its four bounds."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_size(
        cls, width: float, height: float, left: float = 0.0, top: float = 0.0
    ) -> "Rect":
        return cls(float(left), float(top), float(left) + float(width), float(top) + float(height))

    @classmethod
    def from_center(cls, cx: float, cy: float, width: float, height: float) -> "Rect":
        half_w = float(width) * 0.5
        half_h = float(height) * 0.5
        return cls(cx - half_w, cy - half_h, cx + half_w, cy + half_h)

    @property
    def width(self) -> float:
        return float(self.right) - float(self.left)

    @property
    def height(self) -> float:
        return float(self.bottom) - float(self.top)

    @property
    def center_x(self) -> float:
        return (float(self.left) + float(self.right)) * 0.5

    @property
    def center_y(self) -> float:
        return (float(self.top) + float(self.bottom)) * 0.5

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def aspect_ratio(self) -> float:
        return aspect_ratio(self)

    def is_degenerate(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def contains(self, other: "Rect", tolerance: float = RECT_TOLERANCE) -> bool:
        """Return ``True`` when *other* lies inside this rect, edges included."""

        return (
            other.left >= self.left - tolerance
            and other.top >= self.top - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (float(self.left), float(self.top), float(self.right), float(self.bottom))


def ensure_valid(rect: Rect, *, name: str = "rect") -> Rect:
    """Return *rect* unchanged or raise :class:`DegenerateRectError`."""

    if rect.is_degenerate():
        raise DegenerateRectError(
            f"{name} must have a positive width and height, got {rect.width}x{rect.height}"
        )
    return rect


def aspect_ratio(rect: Rect) -> float:
    """Return ``width / height`` for a non-degenerate *rect*."""

    ensure_valid(rect)
    return rect.width / rect.height


def center_crop_scale(outer: Rect, inner_aspect: float) -> float:
    """Return the extra scale needed for content of *inner_aspect* to cover *outer*.

    The content is assumed to be scaled so that its width already matches the
    width of *outer*.  When the content is relatively wider than *outer* its
    height falls short, so the height axis decides the multiplier.  Otherwise
    the width fit already covers and no extra scaling is needed.
    """

    outer_aspect = aspect_ratio(outer)
    if inner_aspect <= 0.0:
        raise DegenerateRectError(f"inner aspect ratio must be positive, got {inner_aspect}")
    if inner_aspect > outer_aspect:
        return inner_aspect / outer_aspect
    return 1.0


def fit_center_scale(outer: Rect, inner_aspect: float) -> float:
    """Return the scale correction that letterboxes *inner_aspect* content in *outer*."""

    outer_aspect = aspect_ratio(outer)
    if inner_aspect <= 0.0:
        raise DegenerateRectError(f"inner aspect ratio must be positive, got {inner_aspect}")
    if inner_aspect < outer_aspect:
        return inner_aspect / outer_aspect
    return 1.0


def max_crop_rect(bounds: Rect, target_aspect: float) -> Rect:
    """Return the largest rect of *target_aspect* fitting in *bounds*, at its origin."""

    bounds_aspect = aspect_ratio(bounds)
    if target_aspect <= 0.0:
        raise DegenerateRectError(f"target aspect ratio must be positive, got {target_aspect}")
    if bounds_aspect > target_aspect:
        # Bounds are wider than the target: height limits the crop
        width = bounds.height * target_aspect
        return Rect.from_size(min(width, bounds.width), bounds.height, bounds.left, bounds.top)
    height = bounds.width / target_aspect
    return Rect.from_size(bounds.width, min(height, bounds.height), bounds.left, bounds.top)


def lerp_rect(start: Rect, end: Rect, progress: float) -> Rect:
    """Interpolate each bound of *start* towards *end* by *progress*."""

    return Rect(
        start.left + (end.left - start.left) * progress,
        start.top + (end.top - start.top) * progress,
        start.right + (end.right - start.right) * progress,
        start.bottom + (end.bottom - start.bottom) * progress,
    )


__all__ = [
    "Rect",
    "aspect_ratio",
    "center_crop_scale",
    "ensure_valid",
    "fit_center_scale",
    "lerp_rect",
    "max_crop_rect",
]
