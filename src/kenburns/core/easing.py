"""Easing strategies mapping normalised time to normalised progress."""

from __future__ import annotations

import math
from collections.abc import Callable

from ..errors import UnknownEasingError

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Constant-speed progress."""
    return t


def ease_in_out(t: float) -> float:
    """Accelerate from rest, then decelerate back to rest (cosine curve)."""
    return math.cos((t + 1.0) * math.pi) * 0.5 + 0.5


def ease_out_cubic(t: float) -> float:
    """Cubic easing function for smooth animations (ease-out)."""
    return 1.0 - (1.0 - t) ** 3


def ease_in_quad(t: float) -> float:
    """Quadratic easing function for smooth animations (ease-in)."""
    return t * t


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in_out": ease_in_out,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_quad": ease_in_quad,
}


def easing_by_name(name: str) -> Easing:
    """Return the registered easing called *name*."""

    try:
        return EASINGS[name]
    except KeyError:
        known = ", ".join(sorted(EASINGS))
        raise UnknownEasingError(f"unknown easing {name!r}; expected one of: {known}") from None


__all__ = [
    "EASINGS",
    "Easing",
    "ease_in_out",
    "ease_in_quad",
    "ease_out_cubic",
    "easing_by_name",
    "linear",
]
