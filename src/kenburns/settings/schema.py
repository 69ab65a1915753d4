"""Schema helpers for the engine settings document."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from ..config import (
    DEFAULT_EASING,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_MOTION,
    DEFAULT_SCALE_MODE,
    DEFAULT_TRANSITION_DURATION_MS,
    FRAME_DELAY_MS,
)
from ..core.easing import EASINGS

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "kenburns/settings.schema.json",
    "type": "object",
    "required": ["schema", "scale_mode", "frame_delay_ms", "transition"],
    "properties": {
        "schema": {"const": "kenburns/settings@1"},
        "scale_mode": {
            "type": "string",
            "enum": ["center_crop", "fit_center"],
        },
        "frame_delay_ms": {"type": "integer", "minimum": 1},
        "transition": {
            "type": "object",
            "required": ["min_duration_ms", "max_duration_ms", "max_zoom", "easing"],
            "properties": {
                "min_duration_ms": {"type": "number", "minimum": 0},
                "max_duration_ms": {"type": "number", "minimum": 0},
                "max_zoom": {"type": "number", "minimum": 1},
                "easing": {"type": "string", "enum": sorted(EASINGS)},
                "min_motion": {"type": "number", "minimum": 0},
                "max_retries": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "kenburns/settings@1",
    "scale_mode": DEFAULT_SCALE_MODE,
    "frame_delay_ms": FRAME_DELAY_MS,
    "transition": {
        "min_duration_ms": DEFAULT_TRANSITION_DURATION_MS,
        "max_duration_ms": DEFAULT_TRANSITION_DURATION_MS,
        "max_zoom": DEFAULT_MAX_ZOOM,
        "easing": DEFAULT_EASING,
        "min_motion": DEFAULT_MIN_MOTION,
        "max_retries": DEFAULT_MAX_RETRIES,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "transition" and isinstance(value, dict):
                target = merged.setdefault("transition", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key == "scale_mode" and isinstance(value, str):
                merged[key] = value.strip().lower()
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema.

    The duration range ordering cannot be expressed in the schema, so it is
    checked here and reported with the same exception type.
    """

    _validator.validate(data)
    transition = data["transition"]
    if transition["min_duration_ms"] > transition["max_duration_ms"]:
        raise ValidationError("transition.min_duration_ms must not exceed max_duration_ms")


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
