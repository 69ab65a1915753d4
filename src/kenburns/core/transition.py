"""Timed interpolation between two crop rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .easing import Easing, ease_in_out
from .rects import Rect, ensure_valid, lerp_rect


@dataclass(frozen=True)
class Transition:
    """Immutable pair of rects animated over ``duration_ms``.

    A transition without ``end_rect`` is the stop sentinel: the engine renders
    its last frame and asks for no further transitions.  ``start_rect`` of a
    stop transition is still the framing to show when nothing has been drawn
    yet.
    """

    start_rect: Rect
    end_rect: Optional[Rect]
    duration_ms: float
    easing: Easing = field(default=ease_in_out, compare=False)

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be >= 0, got {self.duration_ms}")
        ensure_valid(self.start_rect, name="start_rect")
        if self.end_rect is not None:
            ensure_valid(self.end_rect, name="end_rect")

    @classmethod
    def stop(cls, rect: Rect) -> "Transition":
        """Return a transition that tells the engine to stop on *rect*."""
        return cls(rect, None, 0.0)

    @property
    def is_stop(self) -> bool:
        return self.end_rect is None

    def is_expired(self, elapsed_ms: float) -> bool:
        return elapsed_ms >= self.duration_ms

    def _normalised_time(self, elapsed_ms: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, float(elapsed_ms) / float(self.duration_ms)))

    def progress(self, elapsed_ms: float) -> float:
        """Return the eased progress in ``[0, 1]`` after *elapsed_ms*."""

        t = self._normalised_time(elapsed_ms)
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return self.easing(t)

    def interpolated_rect(self, elapsed_ms: float) -> Rect:
        """Return the crop rect shown *elapsed_ms* after the transition started."""

        if self.end_rect is None:
            return self.start_rect
        t = self._normalised_time(elapsed_ms)
        # Boundaries return the stored rects exactly.
        if t <= 0.0:
            return self.start_rect
        if t >= 1.0:
            return self.end_rect
        return lerp_rect(self.start_rect, self.end_rect, self.easing(t))


__all__ = ["Transition"]
