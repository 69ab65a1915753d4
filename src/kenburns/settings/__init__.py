"""Engine settings: schema, defaults and loading helpers."""

from .loader import build_engine, build_generator, load_settings, settings_from_mapping
from .schema import DEFAULT_SETTINGS, SETTINGS_SCHEMA, merge_with_defaults, validate_settings

__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_SCHEMA",
    "build_engine",
    "build_generator",
    "load_settings",
    "merge_with_defaults",
    "settings_from_mapping",
    "validate_settings",
]
