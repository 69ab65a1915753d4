"""Load engine settings from disk and build configured engines."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Any, Optional

from jsonschema import ValidationError

from ..core.easing import easing_by_name
from ..core.engine import KenBurnsEngine
from ..core.generators import RandomTransitionGenerator, TransitionGenerator
from ..errors import SettingsLoadError, SettingsValidationError
from .schema import merge_with_defaults

_LOGGER = logging.getLogger(__name__)


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Return validated settings from *path*, or the defaults when it is missing."""

    payload: dict[str, Any] | None = None
    if path is not None and path.exists():
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SettingsLoadError(f"cannot read settings from {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise SettingsLoadError(f"settings in {path} must be a JSON object")
    elif path is not None:
        _LOGGER.debug("Settings file %s not found; using defaults", path)
    return settings_from_mapping(payload)


def settings_from_mapping(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with the defaults, converting schema failures."""

    try:
        return merge_with_defaults(data)
    except ValidationError as exc:
        raise SettingsValidationError(exc.message) from exc


def build_generator(
    settings: dict[str, Any], rng: Optional[random.Random] = None
) -> RandomTransitionGenerator:
    """Return the random generator described by the ``transition`` block."""

    transition = settings["transition"]
    return RandomTransitionGenerator(
        duration_range_ms=(transition["min_duration_ms"], transition["max_duration_ms"]),
        max_zoom=transition["max_zoom"],
        easing=easing_by_name(transition["easing"]),
        min_motion=transition.get("min_motion", 0.0),
        max_retries=transition.get("max_retries", 0),
        rng=rng,
    )


def build_engine(
    settings: dict[str, Any] | None = None,
    generator: Optional[TransitionGenerator] = None,
) -> KenBurnsEngine:
    """Return an engine configured from *settings* (defaults when omitted)."""

    resolved = settings_from_mapping(settings)
    return KenBurnsEngine(
        generator if generator is not None else build_generator(resolved),
        scale_mode=resolved["scale_mode"],
        frame_delay_ms=resolved["frame_delay_ms"],
    )


__all__ = ["build_engine", "build_generator", "load_settings", "settings_from_mapping"]
