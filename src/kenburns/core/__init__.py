"""
Transition engine core.

Pure geometry, transition and lifecycle logic with no dependency on Qt, so the
engine can be driven by any host that supplies geometry and timestamps.
"""

from .easing import EASINGS, ease_in_out, ease_in_quad, ease_out_cubic, easing_by_name, linear
from .engine import EngineState, KenBurnsEngine, RenderCommand, ScaleMode
from .generators import (
    FunctionTransitionGenerator,
    RandomTransitionGenerator,
    ScriptedTransitionGenerator,
    StaticTransitionGenerator,
    TransitionGenerator,
)
from .rects import Rect, aspect_ratio, center_crop_scale, fit_center_scale, max_crop_rect
from .transform import AffineTransform
from .transition import Transition

__all__ = [
    "EASINGS",
    "AffineTransform",
    "EngineState",
    "FunctionTransitionGenerator",
    "KenBurnsEngine",
    "RandomTransitionGenerator",
    "Rect",
    "RenderCommand",
    "ScaleMode",
    "ScriptedTransitionGenerator",
    "StaticTransitionGenerator",
    "Transition",
    "TransitionGenerator",
    "aspect_ratio",
    "center_crop_scale",
    "ease_in_out",
    "ease_in_quad",
    "ease_out_cubic",
    "easing_by_name",
    "fit_center_scale",
    "linear",
    "max_crop_rect",
]
