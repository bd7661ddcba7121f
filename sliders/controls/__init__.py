"""Slider controllers and drag interaction contracts."""

from .double_slider import DoubleDragUpdate, DoubleSliderModel, ThumbDragSession, ThumbPriority, ThumbSide, TrackSegments
from .interaction import DragEvent, DragPhase, parse_hdi_drag_event
from .round_slider import RoundDragSession, RoundDragUpdate, RoundSliderModel

__all__ = [
    "DoubleDragUpdate",
    "DoubleSliderModel",
    "DragEvent",
    "DragPhase",
    "RoundDragSession",
    "RoundDragUpdate",
    "RoundSliderModel",
    "ThumbDragSession",
    "ThumbPriority",
    "ThumbSide",
    "TrackSegments",
    "parse_hdi_drag_event",
]
