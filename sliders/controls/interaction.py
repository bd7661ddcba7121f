from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

from sliders.component_schema import DragPoint


DragPhase = Literal["changed", "ended"]


@dataclass(frozen=True)
class DragEvent:
    """Minimal standardized drag sample consumed by slider controllers.

    `x`/`y` are the pointer location for round sliders and the translation since
    gesture start for double sliders; the controller decides which it expects.
    """

    phase: DragPhase
    x: float = 0.0
    y: float = 0.0
    pointer_id: str = "primary"

    @property
    def point(self) -> DragPoint:
        return DragPoint(self.x, self.y)


def parse_hdi_drag_event(event_type: str, payload: object) -> DragEvent | None:
    """Parse normalized HDI `drag` events into a typed slider drag sample.

    Anything that is not a well-formed drag payload yields `None` so hosts can
    feed their whole event stream through without pre-filtering.
    """

    if event_type != "drag" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in {"changed", "ended"}:
        return None
    try:
        x = float(payload.get("x", 0.0))
        y = float(payload.get("y", 0.0))
    except (TypeError, ValueError):
        return None
    pointer_id = str(payload.get("pointer_id", "primary"))
    return DragEvent(phase=phase, x=x, y=y, pointer_id=pointer_id)
