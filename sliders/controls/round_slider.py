from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from sliders.component_schema import DragPoint
from sliders.config import RoundSliderConfig
from sliders.numeric import clamp

from .interaction import DragEvent


LOGGER = logging.getLogger(__name__)

# Fraction of the bounds span covered by one pixel of drag at full sensitivity.
SENSITIVITY_SCALE = 0.005

EditingCallback = Callable[[bool], None]


@dataclass
class RoundDragSession:
    """Anchor of one live dial drag; moved to every processed sample."""

    anchor: DragPoint
    pointer_id: str = "primary"


@dataclass(frozen=True)
class RoundDragUpdate:
    value: float
    editing_started: bool = False
    editing_ended: bool = False


class RoundSliderModel:
    """Gesture math for a dial slider.

    Dragging right (+x) or up (-y in screen coordinates) increases the value;
    left or down decreases it. The host owns the value and passes it to every call.
    """

    def __init__(self, config: RoundSliderConfig, on_editing_changed: EditingCallback | None = None) -> None:
        self._config = config
        self._on_editing_changed = on_editing_changed or (lambda editing: None)
        self._session: RoundDragSession | None = None
        self._arc_fraction = clamp(config.arc_fraction, 0.0, 1.0)
        self._multiplier = clamp(config.sensitivity, 0.0, 1.0) * SENSITIVITY_SCALE * config.bounds.span
        if config.bounds.span == 0:
            LOGGER.warning("round slider %r has zero-span bounds; normalized values are undefined", config.title)

    @property
    def config(self) -> RoundSliderConfig:
        return self._config

    @property
    def sensitivity_multiplier(self) -> float:
        return self._multiplier

    @property
    def arc_fraction(self) -> float:
        return self._arc_fraction

    @property
    def session(self) -> RoundDragSession | None:
        return self._session

    @property
    def is_editing(self) -> bool:
        return self._session is not None

    def begin_or_continue(self, sample: DragPoint, value: float, pointer_id: str = "primary") -> RoundDragUpdate:
        if self._session is None:
            self._session = RoundDragSession(anchor=sample, pointer_id=pointer_id)
            LOGGER.debug("round slider %r drag started at (%s, %s)", self._config.title, sample.x, sample.y)
            self._on_editing_changed(True)
            return RoundDragUpdate(value=value, editing_started=True)

        if pointer_id != self._session.pointer_id:
            LOGGER.debug(
                "round slider %r ignoring sample from pointer %r during drag by %r",
                self._config.title,
                pointer_id,
                self._session.pointer_id,
            )
            return RoundDragUpdate(value=value)

        anchor = self._session.anchor
        delta = (sample.x - anchor.x) - (sample.y - anchor.y)
        bounds = self._config.bounds
        new_value = clamp(value + delta * self._multiplier, bounds.lower, bounds.upper)
        self._session.anchor = sample
        return RoundDragUpdate(value=new_value)

    def end(self) -> bool:
        if self._session is not None:
            LOGGER.debug("round slider %r drag ended", self._config.title)
        self._session = None
        self._on_editing_changed(False)
        return True

    def handle_event(self, event: DragEvent, value: float) -> RoundDragUpdate:
        if event.phase == "ended":
            if self._session is not None and event.pointer_id != self._session.pointer_id:
                return RoundDragUpdate(value=value)
            return RoundDragUpdate(value=value, editing_ended=self.end())
        return self.begin_or_continue(event.point, value, pointer_id=event.pointer_id)

    def normal_value(self, value: float) -> float:
        return self._config.bounds.normalize(value)

    def display_value(self, value: float) -> float | None:
        display = self._config.display_bounds
        if display is None:
            return None
        return display.lower + (display.upper - display.lower) * self.normal_value(value)

    def filled_fraction(self, value: float) -> float:
        """Share of the full circle covered by the highlighted arc."""

        return self._arc_fraction * self.normal_value(value)

    def readout(self, value: float) -> str:
        """Title shown above the dial: the live value while editing, else the title."""

        if not (self._config.show_value_on_editing and self.is_editing):
            return self._config.title
        shown = self.display_value(value)
        return f"{value if shown is None else shown:.2f}"
