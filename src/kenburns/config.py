"""Default configuration values for kenburns."""

from __future__ import annotations

from typing import Final

# Delay between a pair of frames at a 60 FPS refresh rate.  Hosts driving the
# engine from a display callback use this as the single-shot timer interval.
FRAME_DELAY_MS: Final[int] = 1000 // 60

DEFAULT_TRANSITION_DURATION_MS: Final[int] = 10000

# The smallest generated crop covers 75% of the largest crop that fits inside
# the image, i.e. the deepest zoom is 1 / 0.75.
MIN_RECT_FACTOR: Final[float] = 0.75
DEFAULT_MAX_ZOOM: Final[float] = 1.0 / MIN_RECT_FACTOR

# Two generated rects closer than this (as a fraction of the max crop width,
# and as a zoom delta) are considered the same framing.
DEFAULT_MIN_MOTION: Final[float] = 0.01
DEFAULT_MAX_RETRIES: Final[int] = 10

DEFAULT_EASING: Final[str] = "ease_in_out"
DEFAULT_SCALE_MODE: Final[str] = "center_crop"

# Absolute tolerance used for containment and aspect-ratio comparisons.
RECT_TOLERANCE: Final[float] = 1e-6
