"""Tests for the Qt host widget."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for widget tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)
pytest.importorskip("pytestqt", reason="pytest-qt is required for widget tests", exc_type=ImportError)

from PySide6.QtGui import QColor, QPixmap

from kenburns.core.engine import EngineState, KenBurnsEngine, ScaleMode
from kenburns.core.generators import ScriptedTransitionGenerator, StaticTransitionGenerator
from kenburns.core.rects import Rect
from kenburns.core.transform import AffineTransform
from kenburns.errors import UnsupportedScaleModeError
from kenburns.gui import KenBurnsWidget, to_qrectf, to_qtransform


def _pixmap(width: int, height: int) -> QPixmap:
    pixmap = QPixmap(width, height)
    pixmap.fill(QColor("steelblue"))
    return pixmap


def test_to_qtransform_maps_like_engine_transform() -> None:
    transform = AffineTransform.identity().post_translate(-50, -25).post_scale(2, 2).post_translate(10, 20)
    qt_transform = to_qtransform(transform)
    mapped = qt_transform.map(70.0, 30.0)
    assert mapped == pytest.approx(transform.map_point(70.0, 30.0))


def test_to_qrectf() -> None:
    rect = to_qrectf(Rect(10, 20, 110, 70))
    assert (rect.x(), rect.y(), rect.width(), rect.height()) == (10, 20, 100, 50)


def test_widget_without_pixmap_has_no_command(qtbot) -> None:
    widget = KenBurnsWidget()
    qtbot.addWidget(widget)
    widget.resize(200, 100)
    assert widget.current_command() is None
    assert widget.engine().state is EngineState.NO_IMAGE


def test_widget_forwards_geometry_and_animates(qtbot) -> None:
    engine = KenBurnsEngine(
        ScriptedTransitionGenerator([((0.0, 0.0, 0.5, 0.25), (0.5, 0.75, 1.0, 1.0), 5000)])
    )
    widget = KenBurnsWidget(engine=engine)
    qtbot.addWidget(widget)
    widget.resize(200, 100)
    widget.show()
    qtbot.waitExposed(widget)
    started = []
    widget.transitionStarted.connect(started.append)

    widget.setPixmap(_pixmap(400, 400))

    assert engine.viewport_rect == Rect.from_size(200, 100)
    assert engine.drawable_rect == Rect.from_size(400, 400)
    assert len(started) == 1
    command = widget.current_command()
    assert command is not None and command.schedule_next
    qtbot.waitUntil(lambda: widget.current_command() is not command, timeout=1000)
    widget.grab()


def test_static_generator_stops_frame_timer(qtbot) -> None:
    widget = KenBurnsWidget(engine=KenBurnsEngine(StaticTransitionGenerator()))
    qtbot.addWidget(widget)
    widget.resize(200, 100)
    widget.setPixmap(_pixmap(400, 400))
    assert widget.engine().state is EngineState.STOPPED
    assert not widget.current_command().schedule_next


def test_clearing_pixmap_resets_engine(qtbot) -> None:
    widget = KenBurnsWidget()
    qtbot.addWidget(widget)
    widget.resize(200, 100)
    widget.setPixmap(_pixmap(300, 300))
    widget.setPixmap(None)
    assert widget.pixmap() is None
    assert widget.current_command() is None
    assert widget.engine().state is EngineState.NO_IMAGE


def test_widget_rejects_unsupported_scale_mode(qtbot) -> None:
    widget = KenBurnsWidget()
    qtbot.addWidget(widget)
    widget.setScaleMode(ScaleMode.FIT_CENTER)
    with pytest.raises(UnsupportedScaleModeError):
        widget.setScaleMode("stretch")
    assert widget.engine().scale_mode is ScaleMode.FIT_CENTER
