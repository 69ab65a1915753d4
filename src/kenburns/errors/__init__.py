"""Custom exception hierarchy for kenburns."""

from __future__ import annotations


class KenBurnsError(Exception):
    """Base class for all custom errors raised by kenburns."""


# --- 2-layer hierarchy ---

class GeometryError(KenBurnsError):
    """Base class for errors caused by invalid rectangles."""


class ConfigurationError(KenBurnsError):
    """Base class for invalid engine or generator configuration."""


# --- Geometry errors ---

class DegenerateRectError(GeometryError, ValueError):
    """Raised when a rectangle with a non-positive width or height is used."""


# --- Configuration errors ---

class UnsupportedScaleModeError(ConfigurationError, ValueError):
    """Raised when a scale mode other than center-crop or fit-center is requested."""


class UnknownEasingError(ConfigurationError, KeyError):
    """Raised when an easing strategy name is not registered."""


class SettingsError(ConfigurationError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


# --- Generator errors ---

class GeneratorExhausted(KenBurnsError):
    """Raised when no sufficiently distinct rect pair was found within the retry budget."""


__all__ = [
    "ConfigurationError",
    "DegenerateRectError",
    "GeneratorExhausted",
    "GeometryError",
    "KenBurnsError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
    "UnknownEasingError",
    "UnsupportedScaleModeError",
]
