"""Ken Burns pan/zoom transitions for still images."""

from .core import (
    AffineTransform,
    EngineState,
    KenBurnsEngine,
    RandomTransitionGenerator,
    Rect,
    RenderCommand,
    ScaleMode,
    ScriptedTransitionGenerator,
    StaticTransitionGenerator,
    Transition,
    TransitionGenerator,
)
from .errors import (
    DegenerateRectError,
    GeneratorExhausted,
    KenBurnsError,
    UnsupportedScaleModeError,
)

__all__ = [
    "AffineTransform",
    "DegenerateRectError",
    "EngineState",
    "GeneratorExhausted",
    "KenBurnsEngine",
    "KenBurnsError",
    "RandomTransitionGenerator",
    "Rect",
    "RenderCommand",
    "ScaleMode",
    "ScriptedTransitionGenerator",
    "StaticTransitionGenerator",
    "Transition",
    "TransitionGenerator",
    "UnsupportedScaleModeError",
]
