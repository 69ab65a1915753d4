"""Qt host for the Ken Burns engine."""

from .ken_burns_widget import KenBurnsWidget, to_qrectf, to_qtransform

__all__ = ["KenBurnsWidget", "to_qrectf", "to_qtransform"]
