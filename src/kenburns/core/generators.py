"""Strategies that produce the next :class:`Transition` for the engine."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Optional

from ..config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_MOTION,
    DEFAULT_TRANSITION_DURATION_MS,
)
from ..errors import DegenerateRectError, GeneratorExhausted
from .easing import Easing, ease_in_out
from .rects import Rect, aspect_ratio, ensure_valid, max_crop_rect
from .transition import Transition

_LOGGER = logging.getLogger(__name__)

NormalisedBounds = tuple[float, float, float, float]


class TransitionGenerator(ABC):
    """Base class for transition generation strategies."""

    @abstractmethod
    def generate_next(self, viewport: Rect, drawable: Rect) -> Transition:
        """Return the transition to play next.

        Parameters
        ----------
        viewport:
            Current display area, origin at ``(0, 0)``.
        drawable:
            Bounding box of the image being animated.  Every rect of the
            returned transition must lie inside it.
        """


def centered_max_crop(viewport: Rect, drawable: Rect) -> Rect:
    """Return the largest viewport-shaped rect centered inside *drawable*."""

    crop = max_crop_rect(drawable, aspect_ratio(viewport))
    return crop.translated(
        drawable.center_x - crop.center_x,
        drawable.center_y - crop.center_y,
    )


class RandomTransitionGenerator(TransitionGenerator):
    """Pick random zoomed-in crops of the image, each with the viewport's aspect."""

    def __init__(
        self,
        *,
        duration_range_ms: tuple[float, float] = (
            DEFAULT_TRANSITION_DURATION_MS,
            DEFAULT_TRANSITION_DURATION_MS,
        ),
        max_zoom: float = DEFAULT_MAX_ZOOM,
        easing: Easing = ease_in_out,
        min_motion: float = DEFAULT_MIN_MOTION,
        max_retries: int = DEFAULT_MAX_RETRIES,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialise the generator.

        Parameters
        ----------
        duration_range_ms:
            Inclusive ``(min, max)`` range the duration is drawn from.
        max_zoom:
            Deepest zoom relative to the largest crop fitting in the image.
            ``1.0`` disables zooming, leaving only panning.
        easing:
            Strategy attached to every produced transition.
        min_motion:
            Minimum center displacement (fraction of the crop size) or zoom
            delta for a pair to count as a perceptible transition.
        max_retries:
            How many times the end rect is regenerated before falling back to
            a still frame.
        rng:
            Random source, mainly for deterministic tests.
        """
        low, high = (float(value) for value in duration_range_ms)
        if low < 0 or high < low:
            raise ValueError(f"invalid duration range {duration_range_ms!r}")
        if max_zoom < 1.0:
            raise ValueError(f"max_zoom must be >= 1.0, got {max_zoom}")
        if min_motion < 0.0:
            raise ValueError(f"min_motion must be >= 0, got {min_motion}")
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self._duration_range = (low, high)
        self._max_zoom = float(max_zoom)
        self._easing = easing
        self._min_motion = float(min_motion)
        self._max_retries = int(max_retries)
        self._rng = rng or random.Random()

    @property
    def max_zoom(self) -> float:
        return self._max_zoom

    @property
    def duration_range_ms(self) -> tuple[float, float]:
        return self._duration_range

    def generate_next(self, viewport: Rect, drawable: Rect) -> Transition:
        ensure_valid(viewport, name="viewport")
        ensure_valid(drawable, name="drawable")
        max_crop = max_crop_rect(drawable, aspect_ratio(viewport))
        duration = self._rng.uniform(*self._duration_range)
        try:
            start, end = self._generate_pair(max_crop, drawable)
        except GeneratorExhausted as exc:
            _LOGGER.warning("Falling back to a still transition: %s", exc)
            still = centered_max_crop(viewport, drawable)
            return Transition(still, still, duration, self._easing)
        _LOGGER.debug("Generated transition %s -> %s over %.0f ms", start, end, duration)
        return Transition(start, end, duration, self._easing)

    def _generate_pair(self, max_crop: Rect, drawable: Rect) -> tuple[Rect, Rect]:
        start, start_zoom = self._random_rect(max_crop, drawable)
        for _attempt in range(self._max_retries + 1):
            end, end_zoom = self._random_rect(max_crop, drawable)
            if not self._is_same_framing(max_crop, start, start_zoom, end, end_zoom):
                return start, end
        raise GeneratorExhausted(
            f"no distinct rect pair after {self._max_retries} retries in {drawable}"
        )

    def _random_rect(self, max_crop: Rect, drawable: Rect) -> tuple[Rect, float]:
        zoom = self._rng.uniform(1.0, self._max_zoom)
        width = max_crop.width / zoom
        height = max_crop.height / zoom
        left = drawable.left + self._rng.uniform(0.0, max(0.0, drawable.width - width))
        top = drawable.top + self._rng.uniform(0.0, max(0.0, drawable.height - height))
        return Rect.from_size(width, height, left, top), zoom

    def _is_same_framing(
        self,
        max_crop: Rect,
        start: Rect,
        start_zoom: float,
        end: Rect,
        end_zoom: float,
    ) -> bool:
        dx = abs(end.center_x - start.center_x)
        dy = abs(end.center_y - start.center_y)
        return (
            dx < self._min_motion * max_crop.width
            and dy < self._min_motion * max_crop.height
            and abs(end_zoom - start_zoom) < self._min_motion
        )


class ScriptedTransitionGenerator(TransitionGenerator):
    """Replay a fixed list of transitions expressed in normalised image coordinates.

    Each step is ``(start, end, duration_ms)`` where ``start`` and ``end`` are
    ``(left, top, right, bottom)`` tuples in ``[0, 1]`` relative to the
    drawable.  An ``end`` of ``None`` produces a stop transition.
    """

    def __init__(
        self,
        steps: Sequence[tuple[NormalisedBounds, Optional[NormalisedBounds], float]],
        *,
        loop: bool = True,
        easing: Easing = ease_in_out,
    ) -> None:
        if not steps:
            raise ValueError("a scripted generator needs at least one step")
        for start, end, duration in steps:
            self._check_bounds(start)
            if end is not None:
                self._check_bounds(end)
            if duration < 0:
                raise ValueError(f"duration_ms must be >= 0, got {duration}")
        self._steps = list(steps)
        self._loop = loop
        self._easing = easing
        self._index = 0

    @staticmethod
    def _check_bounds(bounds: NormalisedBounds) -> None:
        left, top, right, bottom = bounds
        if not (0.0 <= left < right <= 1.0 and 0.0 <= top < bottom <= 1.0):
            raise DegenerateRectError(f"normalised bounds must be ordered within [0, 1]: {bounds}")

    @staticmethod
    def _to_drawable(bounds: NormalisedBounds, drawable: Rect) -> Rect:
        left, top, right, bottom = bounds
        return Rect(
            drawable.left + left * drawable.width,
            drawable.top + top * drawable.height,
            drawable.left + right * drawable.width,
            drawable.top + bottom * drawable.height,
        )

    def generate_next(self, viewport: Rect, drawable: Rect) -> Transition:
        ensure_valid(drawable, name="drawable")
        if self._index >= len(self._steps):
            if not self._loop:
                last_start, last_end, _ = self._steps[-1]
                return Transition.stop(self._to_drawable(last_end or last_start, drawable))
            self._index = 0
        start, end, duration = self._steps[self._index]
        self._index += 1
        start_rect = self._to_drawable(start, drawable)
        if end is None:
            return Transition.stop(start_rect)
        return Transition(start_rect, self._to_drawable(end, drawable), duration, self._easing)


class StaticTransitionGenerator(TransitionGenerator):
    """Show the centered crop of the image and stop immediately."""

    def generate_next(self, viewport: Rect, drawable: Rect) -> Transition:
        ensure_valid(viewport, name="viewport")
        ensure_valid(drawable, name="drawable")
        return Transition.stop(centered_max_crop(viewport, drawable))


class FunctionTransitionGenerator(TransitionGenerator):
    """Adapt a plain ``(viewport, drawable) -> Transition`` callable."""

    def __init__(self, func: Callable[[Rect, Rect], Transition]) -> None:
        self._func = func

    def generate_next(self, viewport: Rect, drawable: Rect) -> Transition:
        return self._func(viewport, drawable)


def as_generator(
    candidate: TransitionGenerator | Callable[[Rect, Rect], Transition],
) -> TransitionGenerator:
    """Return *candidate* as a :class:`TransitionGenerator`, wrapping callables."""

    if isinstance(candidate, TransitionGenerator):
        return candidate
    if callable(candidate):
        return FunctionTransitionGenerator(candidate)
    raise TypeError(f"expected a TransitionGenerator or callable, got {type(candidate).__name__}")


__all__ = [
    "FunctionTransitionGenerator",
    "RandomTransitionGenerator",
    "as_generator",
    "ScriptedTransitionGenerator",
    "StaticTransitionGenerator",
    "TransitionGenerator",
    "centered_max_crop",
]
