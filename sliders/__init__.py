"""Framework-independent value mapping and gesture math for dial and range sliders."""

from .component_schema import Bounds, DragPoint, TrackGeometry, as_bounds
from .config import (
    DoubleSliderConfig,
    RoundSliderConfig,
    double_slider_config_from_mapping,
    round_slider_config_from_mapping,
)
from .controls.double_slider import (
    DoubleDragUpdate,
    DoubleSliderModel,
    ThumbDragSession,
    ThumbPriority,
    ThumbSide,
    TrackSegments,
)
from .controls.interaction import DragEvent, DragPhase, parse_hdi_drag_event
from .controls.round_slider import RoundDragSession, RoundDragUpdate, RoundSliderModel
from .numeric import StepMode, clamp, snap_to_step

__all__ = [
    "Bounds",
    "DoubleDragUpdate",
    "DoubleSliderConfig",
    "DoubleSliderModel",
    "DragEvent",
    "DragPhase",
    "DragPoint",
    "RoundDragSession",
    "RoundDragUpdate",
    "RoundSliderConfig",
    "RoundSliderModel",
    "StepMode",
    "ThumbDragSession",
    "ThumbPriority",
    "ThumbSide",
    "TrackGeometry",
    "TrackSegments",
    "as_bounds",
    "clamp",
    "double_slider_config_from_mapping",
    "parse_hdi_drag_event",
    "round_slider_config_from_mapping",
    "snap_to_step",
]
