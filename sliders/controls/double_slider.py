from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Literal

import numpy as np

from sliders.component_schema import TrackGeometry
from sliders.config import DoubleSliderConfig
from sliders.numeric import clamp, ratio, snap_to_step, step_grid

from .interaction import DragEvent


LOGGER = logging.getLogger(__name__)

ThumbSide = Literal["low", "high"]
ThumbPriority = Literal["low_favored", "high_favored"]

EditingCallback = Callable[[bool], None]


@dataclass
class ThumbDragSession:
    """Pixel position of one thumb captured when its drag began."""

    side: ThumbSide
    anchor_x: float


@dataclass(frozen=True)
class DoubleDragUpdate:
    low: float
    high: float
    side: ThumbSide
    editing_started: bool = False
    editing_ended: bool = False


@dataclass(frozen=True)
class TrackSegments:
    leading: float
    active: float
    trailing: float


class DoubleSliderModel:
    """Gesture math for a two-thumb range slider.

    Values map onto the track as `width * value / span`, and drag positions map
    back the same way. Each side keeps its own anchor so a second gesture on the
    other thumb stays well-defined.
    """

    def __init__(self, config: DoubleSliderConfig, on_editing_changed: EditingCallback | None = None) -> None:
        self._config = config
        self._on_editing_changed = on_editing_changed or (lambda editing: None)
        self._sessions: dict[ThumbSide, ThumbDragSession] = {}
        self.priority: ThumbPriority = "low_favored"
        if config.bounds.span == 0:
            LOGGER.warning("double slider has zero-span bounds; thumb positions are undefined")

    @property
    def config(self) -> DoubleSliderConfig:
        return self._config

    @property
    def total_distance(self) -> float:
        return self._config.bounds.span

    def session(self, side: ThumbSide) -> ThumbDragSession | None:
        return self._sessions.get(side)

    def is_dragging(self, side: ThumbSide) -> bool:
        return side in self._sessions

    def thumb_position(self, side: ThumbSide, track_width: float, low: float, high: float) -> float:
        value = low if side == "low" else high
        return track_width * ratio(value, self.total_distance)

    def compute_candidate(
        self,
        side: ThumbSide,
        translation_x: float,
        track_width: float,
        low: float,
        high: float,
    ) -> float:
        session = self._sessions.get(side)
        if session is None:
            session = ThumbDragSession(side=side, anchor_x=self.thumb_position(side, track_width, low, high))
            self._sessions[side] = session
            LOGGER.debug("double slider %s thumb drag started at x=%s", side, session.anchor_x)
            self._on_editing_changed(True)

        value = ratio(session.anchor_x + translation_x, track_width) * self.total_distance
        if self._config.step is not None:
            value = snap_to_step(value, self._config.step, self._config.step_mode)

        value = min(value, high) if side == "low" else max(low, value)
        bounds = self._config.bounds
        return clamp(value, bounds.lower, bounds.upper)

    def drag(
        self,
        side: ThumbSide,
        translation_x: float,
        track_width: float,
        low: float,
        high: float,
    ) -> DoubleDragUpdate:
        started = side not in self._sessions
        value = self.compute_candidate(side, translation_x, track_width, low, high)
        if side == "low":
            low = value
            self.priority = "low_favored"
        else:
            high = value
            self.priority = "high_favored"
        return DoubleDragUpdate(low=low, high=high, side=side, editing_started=started)

    def end(self, side: ThumbSide) -> bool:
        if self._sessions.pop(side, None) is not None:
            LOGGER.debug("double slider %s thumb drag ended", side)
        self._on_editing_changed(False)
        self.priority = "low_favored" if side == "low" else "high_favored"
        return True

    def handle_event(
        self,
        side: ThumbSide,
        event: DragEvent,
        track: TrackGeometry,
        low: float,
        high: float,
    ) -> DoubleDragUpdate:
        if event.phase == "ended":
            return DoubleDragUpdate(low=low, high=high, side=side, editing_ended=self.end(side))
        return self.drag(side, event.x, track.width, low, high)

    def resolve_side(self, x: float, track_width: float, low: float, high: float) -> ThumbSide:
        """Pick the thumb a touch at pixel `x` belongs to.

        The nearer thumb wins. Thumbs stacked at an extreme resolve to the one that
        can still move inward; other ties go to the favored thumb.
        """

        bounds = self._config.bounds
        if low == high:
            if high >= bounds.upper:
                return "low"
            if low <= bounds.lower:
                return "high"

        low_distance = abs(x - self.thumb_position("low", track_width, low, high))
        high_distance = abs(x - self.thumb_position("high", track_width, low, high))
        if low_distance < high_distance:
            return "low"
        if high_distance < low_distance:
            return "high"
        return "low" if self.priority == "low_favored" else "high"

    def track_segments(self, track_width: float, low: float, high: float) -> TrackSegments:
        leading = self.thumb_position("low", track_width, low, high)
        trailing = track_width - self.thumb_position("high", track_width, low, high)
        return TrackSegments(leading=leading, active=track_width - leading - trailing, trailing=trailing)

    def step_values(self) -> np.ndarray:
        step = self._config.step
        if step is None:
            return np.empty(0, dtype=np.float64)
        bounds = self._config.bounds
        return step_grid(bounds.lower, bounds.upper, step)
