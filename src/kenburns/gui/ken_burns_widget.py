"""Qt widget that hosts a :class:`KenBurnsEngine` and paints its frames."""

from __future__ import annotations

import logging
from typing import Optional, Union

from PySide6.QtCore import QElapsedTimer, QRectF, QTimer, Signal
from PySide6.QtGui import QPainter, QPaintEvent, QPixmap, QResizeEvent, QTransform
from PySide6.QtWidgets import QWidget

from ..core.engine import GeneratorLike, KenBurnsEngine, RenderCommand, ScaleMode
from ..core.rects import Rect
from ..core.transform import AffineTransform

_LOGGER = logging.getLogger(__name__)


def to_qtransform(transform: AffineTransform) -> QTransform:
    """Convert an engine transform into the equivalent :class:`QTransform`."""
    return QTransform(*transform.as_affine_tuple())


def to_qrectf(rect: Rect) -> QRectF:
    return QRectF(rect.left, rect.top, rect.width, rect.height)


class KenBurnsWidget(QWidget):
    """Display a pixmap animated by the Ken Burns engine.

    The widget only forwards geometry, timestamps and transforms; every
    animation decision is made by the engine it holds.
    """

    transitionStarted = Signal(object)
    transitionEnded = Signal(object)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        engine: Optional[KenBurnsEngine] = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine or KenBurnsEngine()
        self._engine.transition_started.connect(self.transitionStarted.emit)
        self._engine.transition_ended.connect(self.transitionEnded.emit)
        self._engine.on_viewport_resized(self.width(), self.height())

        self._pixmap: Optional[QPixmap] = None
        self._command: Optional[RenderCommand] = None

        self._clock = QElapsedTimer()
        self._clock.start()

        # Frame timer - one shot per frame, re-armed from the render command
        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.timeout.connect(self._advance)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def engine(self) -> KenBurnsEngine:
        return self._engine

    def pixmap(self) -> Optional[QPixmap]:
        return self._pixmap

    def current_command(self) -> Optional[RenderCommand]:
        return self._command

    def now_ms(self) -> float:
        return float(self._clock.elapsed())

    def setPixmap(self, pixmap: Optional[QPixmap]) -> None:
        """Show *pixmap*, or clear the widget when it is ``None`` or null."""

        if pixmap is None or pixmap.isNull():
            self._pixmap = None
            self._engine.clear_image()
            self._command = None
            self._frame_timer.stop()
            self.update()
            return
        self._pixmap = QPixmap(pixmap)
        # Hidden widgets receive their pending resize event only when shown.
        self._engine.on_viewport_resized(self.width(), self.height())
        self._engine.on_image_changed(pixmap.width(), pixmap.height())
        self._advance()

    def setScaleMode(self, mode: Union[ScaleMode, str]) -> None:
        self._engine.set_scale_mode(mode)
        self._advance()

    def setTransitionGenerator(self, generator: GeneratorLike) -> None:
        self._engine.set_transition_generator(generator)

    def pause(self) -> None:
        self._engine.pause(self.now_ms())
        self._frame_timer.stop()

    def resume(self) -> None:
        self._engine.resume(self.now_ms())
        self._advance()

    def restart(self) -> None:
        self._engine.restart(self.now_ms())
        self._advance()

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802 - Qt API
        super().resizeEvent(event)
        size = event.size()
        self._engine.on_viewport_resized(size.width(), size.height())
        self._advance()

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802 - Qt API
        if self._pixmap is None or self._command is None:
            return
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)
            painter.setTransform(to_qtransform(self._command.transform))
            painter.drawPixmap(0, 0, self._pixmap)
        finally:
            painter.end()

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------
    def _advance(self) -> None:
        command = self._engine.advance_frame(self.now_ms())
        self._command = command
        self.update()
        if command is not None and command.schedule_next:
            self._frame_timer.start(int(command.delay_ms or 0))
        elif self._frame_timer.isActive():
            _LOGGER.debug("No further frames requested; stopping frame timer")
            self._frame_timer.stop()


__all__ = ["KenBurnsWidget", "to_qrectf", "to_qtransform"]
