"""Frame-driven controller that turns transitions into viewport transforms.

The engine holds no clock and no timer.  A host feeds it viewport and image
geometry, then calls :meth:`KenBurnsEngine.advance_frame` with the current
timestamp on every display refresh and applies the returned transform to its
own drawing primitive.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from ..config import FRAME_DELAY_MS
from ..errors import DegenerateRectError, UnsupportedScaleModeError
from .generators import RandomTransitionGenerator, TransitionGenerator, as_generator
from .rects import Rect, center_crop_scale, ensure_valid, fit_center_scale
from .signal import Signal
from .transform import AffineTransform
from .transition import Transition

_LOGGER = logging.getLogger(__name__)


class ScaleMode(str, enum.Enum):
    """How the current crop rect is fitted to the viewport."""

    CENTER_CROP = "center_crop"
    FIT_CENTER = "fit_center"

    @classmethod
    def coerce(cls, mode: Union["ScaleMode", str]) -> "ScaleMode":
        """Return the member matching *mode* by member, name or value."""

        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            key = mode.strip()
            for member in cls:
                if key.upper() == member.name or key.lower() == member.value:
                    return member
        supported = ", ".join(member.name for member in cls)
        raise UnsupportedScaleModeError(
            f"unsupported scale mode {mode!r}; only {supported} are supported"
        )


class EngineState(enum.Enum):
    NO_IMAGE = "no_image"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


@dataclass(frozen=True)
class RenderCommand:
    """What the host should draw for one frame.

    ``transform`` maps intrinsic image pixels onto viewport pixels.  When
    ``schedule_next`` is ``False`` the animation is frozen and the host may
    stop requesting frames.
    """

    transform: AffineTransform
    rect: Rect
    schedule_next: bool
    delay_ms: Optional[int]


GeneratorLike = Union[TransitionGenerator, Callable[[Rect, Rect], Transition]]


class KenBurnsEngine:
    """Own viewport/image geometry and the lifecycle of the active transition."""

    def __init__(
        self,
        generator: Optional[GeneratorLike] = None,
        *,
        scale_mode: Union[ScaleMode, str] = ScaleMode.CENTER_CROP,
        frame_delay_ms: int = FRAME_DELAY_MS,
    ) -> None:
        if frame_delay_ms < 0:
            raise ValueError(f"frame_delay_ms must be >= 0, got {frame_delay_ms}")
        self._generator = as_generator(generator) if generator is not None else RandomTransitionGenerator()
        self._scale_mode = ScaleMode.coerce(scale_mode)
        self._frame_delay_ms = int(frame_delay_ms)

        self._viewport_rect: Optional[Rect] = None
        self._drawable_rect: Optional[Rect] = None
        self._intrinsic_size: Optional[tuple[float, float]] = None

        self._current: Optional[Transition] = None
        self._start_ms: float = 0.0
        self._paused_at_ms: Optional[float] = None
        self._stop_rect: Optional[Rect] = None
        self._last_command: Optional[RenderCommand] = None

        # Emitted with the Transition object.
        self.transition_started = Signal()
        self.transition_ended = Signal()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> EngineState:
        if self._drawable_rect is None:
            return EngineState.NO_IMAGE
        if self._stop_rect is not None:
            return EngineState.STOPPED
        if self._current is None:
            return EngineState.NO_IMAGE
        if self._paused_at_ms is not None:
            return EngineState.PAUSED
        return EngineState.RUNNING

    @property
    def scale_mode(self) -> ScaleMode:
        return self._scale_mode

    @property
    def generator(self) -> TransitionGenerator:
        return self._generator

    @property
    def frame_delay_ms(self) -> int:
        return self._frame_delay_ms

    @property
    def viewport_rect(self) -> Optional[Rect]:
        return self._viewport_rect

    @property
    def drawable_rect(self) -> Optional[Rect]:
        return self._drawable_rect

    @property
    def current_transition(self) -> Optional[Transition]:
        return self._current

    @property
    def transition_start_ms(self) -> float:
        return self._start_ms

    # ------------------------------------------------------------------
    # Host notifications
    # ------------------------------------------------------------------
    def on_viewport_resized(self, width: float, height: float) -> None:
        """Record the viewport size; takes effect on the next frame."""

        viewport = Rect.from_size(max(0.0, float(width)), max(0.0, float(height)))
        if viewport != self._viewport_rect:
            _LOGGER.debug("Viewport resized to %sx%s", viewport.width, viewport.height)
        self._viewport_rect = viewport

    def on_image_changed(
        self,
        intrinsic_width: float,
        intrinsic_height: float,
        bounds: Optional[Rect] = None,
    ) -> None:
        """Record the image geometry.

        *bounds* defaults to the intrinsic size anchored at the origin.  The
        in-flight transition keeps running on its original rects until it
        expires.
        """

        if intrinsic_width <= 0 or intrinsic_height <= 0:
            raise DegenerateRectError(
                f"image intrinsic size must be positive, got {intrinsic_width}x{intrinsic_height}"
            )
        drawable = bounds if bounds is not None else Rect.from_size(intrinsic_width, intrinsic_height)
        ensure_valid(drawable, name="image bounds")
        self._intrinsic_size = (float(intrinsic_width), float(intrinsic_height))
        self._drawable_rect = drawable
        _LOGGER.debug(
            "Image changed: intrinsic %sx%s, bounds %s",
            intrinsic_width,
            intrinsic_height,
            drawable,
        )

    def clear_image(self) -> None:
        """Forget the image and any transition state."""

        self._drawable_rect = None
        self._intrinsic_size = None
        self._reset_transition_state()

    def set_transition_generator(self, generator: GeneratorLike) -> None:
        """Use *generator* for the next transition; the current one finishes first."""
        self._generator = as_generator(generator)

    def set_scale_mode(self, mode: Union[ScaleMode, str]) -> None:
        """Switch between center-crop and fit-center.

        Raises :class:`UnsupportedScaleModeError` for anything else and keeps
        the previous mode.
        """

        self._scale_mode = ScaleMode.coerce(mode)

    # ------------------------------------------------------------------
    # Playback control
    # ------------------------------------------------------------------
    def pause(self, now_ms: float) -> None:
        if self.state is EngineState.RUNNING:
            self._paused_at_ms = float(now_ms)

    def resume(self, now_ms: float) -> None:
        if self._paused_at_ms is None:
            return
        self._start_ms += max(0.0, float(now_ms) - self._paused_at_ms)
        self._paused_at_ms = None

    def restart(self, now_ms: float) -> None:
        """Drop the current transition and start a fresh one at *now_ms*."""

        self._reset_transition_state()
        if self._has_geometry():
            self._start_new_transition(now_ms)

    # ------------------------------------------------------------------
    # Frame computation
    # ------------------------------------------------------------------
    def advance_frame(self, now_ms: float) -> Optional[RenderCommand]:
        """Return the render command for *now_ms*, or ``None`` with nothing to draw."""

        if not self._has_geometry():
            return None
        if self._stop_rect is None and self._current is None:
            self._start_new_transition(now_ms)
        if self._stop_rect is not None:
            return self._frozen_command()

        transition = self._current
        assert transition is not None
        if self._paused_at_ms is not None:
            rect = transition.interpolated_rect(self._elapsed(transition, self._paused_at_ms))
            return self._build_command(rect, schedule_next=False)

        raw_elapsed = float(now_ms) - self._start_ms
        rect = transition.interpolated_rect(self._elapsed(transition, now_ms))
        command = self._build_command(rect, schedule_next=True)
        self._last_command = command

        if transition.is_expired(raw_elapsed):
            self.transition_ended.emit(transition)
            self._start_new_transition(now_ms)
            if self._stop_rect is not None:
                command = self._frozen_command()
        return command

    def transform_for(self, rect: Rect) -> AffineTransform:
        """Return the transform that fits *rect* (drawable coordinates) to the viewport.

        The order is fixed: move the rect center to the origin, scale, then
        move to the viewport center.
        """

        if not self._has_geometry():
            raise DegenerateRectError("transform requires an image and a non-empty viewport")
        viewport = self._viewport_rect
        drawable = self._drawable_rect
        assert viewport is not None and drawable is not None and self._intrinsic_size is not None
        ensure_valid(rect)
        intrinsic_w, intrinsic_h = self._intrinsic_size

        to_intrinsic_x = intrinsic_w / drawable.width
        to_intrinsic_y = intrinsic_h / drawable.height
        rect_w = rect.width * to_intrinsic_x
        rect_h = rect.height * to_intrinsic_y
        center_x = (rect.center_x - drawable.left) * to_intrinsic_x
        center_y = (rect.center_y - drawable.top) * to_intrinsic_y

        scale = viewport.width / rect_w
        if self._scale_mode is ScaleMode.CENTER_CROP:
            scale *= center_crop_scale(viewport, rect_w / rect_h)
        else:
            scale *= fit_center_scale(viewport, rect_w / rect_h)

        return (
            AffineTransform.identity()
            .post_translate(-center_x, -center_y)
            .post_scale(scale, scale)
            .post_translate(viewport.center_x, viewport.center_y)
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _has_geometry(self) -> bool:
        return (
            self._drawable_rect is not None
            and self._viewport_rect is not None
            and not self._viewport_rect.is_degenerate()
        )

    def _elapsed(self, transition: Transition, now_ms: float) -> float:
        # Clock skew must never yield negative progress.
        return max(0.0, min(float(transition.duration_ms), float(now_ms) - self._start_ms))

    def _start_new_transition(self, now_ms: float) -> None:
        assert self._viewport_rect is not None and self._drawable_rect is not None
        transition = self._generator.generate_next(self._viewport_rect, self._drawable_rect)
        self._start_ms = float(now_ms)
        if transition.is_stop:
            self._stop_rect = transition.start_rect
            _LOGGER.info("Transition generator requested a stop; freezing the current frame")
            return
        self._current = transition
        _LOGGER.debug(
            "Transition started at %.1f ms: %s -> %s (%.0f ms)",
            self._start_ms,
            transition.start_rect,
            transition.end_rect,
            transition.duration_ms,
        )
        self.transition_started.emit(transition)

    def _frozen_command(self) -> RenderCommand:
        if self._last_command is None:
            assert self._stop_rect is not None
            self._last_command = self._build_command(self._stop_rect, schedule_next=False)
        elif self._last_command.schedule_next:
            self._last_command = replace(self._last_command, schedule_next=False, delay_ms=None)
        return self._last_command

    def _build_command(self, rect: Rect, *, schedule_next: bool) -> RenderCommand:
        return RenderCommand(
            transform=self.transform_for(rect),
            rect=rect,
            schedule_next=schedule_next,
            delay_ms=self._frame_delay_ms if schedule_next else None,
        )

    def _reset_transition_state(self) -> None:
        self._current = None
        self._start_ms = 0.0
        self._paused_at_ms = None
        self._stop_rect = None
        self._last_command = None


__all__ = ["EngineState", "KenBurnsEngine", "RenderCommand", "ScaleMode"]
