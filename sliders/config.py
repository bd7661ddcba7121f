from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

from .component_schema import Bounds, as_bounds, is_number
from .numeric import STEP_MODES, StepMode


@dataclass(frozen=True)
class RoundSliderConfig:
    """Construction-time settings for a round (dial) slider."""

    title: str = ""
    bounds: Bounds = field(default_factory=lambda: Bounds(0.0, 1.0))
    display_bounds: Bounds | None = None
    sensitivity: float = 0.5
    arc_fraction: float = 0.8
    show_value_on_editing: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.bounds, Bounds):
            raise ValueError("RoundSliderConfig bounds must be Bounds")
        if self.display_bounds is not None and not isinstance(self.display_bounds, Bounds):
            raise ValueError("RoundSliderConfig display_bounds must be Bounds or None")


@dataclass(frozen=True)
class DoubleSliderConfig:
    """Construction-time settings for a dual-thumb range slider."""

    bounds: Bounds = field(default_factory=lambda: Bounds(0.0, 1.0))
    step: float | None = None
    step_mode: StepMode = "truncate"

    def __post_init__(self) -> None:
        if not isinstance(self.bounds, Bounds):
            raise ValueError("DoubleSliderConfig bounds must be Bounds")
        if self.step is not None and (not is_number(self.step) or self.step <= 0):
            raise ValueError("DoubleSliderConfig step must be a positive number or None")
        if self.step_mode not in STEP_MODES:
            raise ValueError(f"Unknown step mode: {self.step_mode}")


DEFAULT_ROUND_CONFIG = RoundSliderConfig()
DEFAULT_DOUBLE_CONFIG = DoubleSliderConfig()


def round_slider_config_from_mapping(overrides: Mapping[str, Any] | None = None) -> RoundSliderConfig:
    """Merge user overrides (e.g. a parsed TOML table) into round slider defaults."""

    raw = _merge(asdict(DEFAULT_ROUND_CONFIG), overrides)
    if not isinstance(raw["title"], str):
        raise ValueError("Setting `title` must be a string")
    for key in ("sensitivity", "arc_fraction"):
        if not is_number(raw[key]):
            raise ValueError(f"Setting `{key}` must be a number")
    if not isinstance(raw["show_value_on_editing"], bool):
        raise ValueError("Setting `show_value_on_editing` must be a bool")
    display = raw["display_bounds"]
    return RoundSliderConfig(
        title=raw["title"],
        bounds=as_bounds(_bounds_pair(raw["bounds"])),
        display_bounds=None if display is None else as_bounds(_bounds_pair(display)),
        sensitivity=float(raw["sensitivity"]),
        arc_fraction=float(raw["arc_fraction"]),
        show_value_on_editing=raw["show_value_on_editing"],
    )


def double_slider_config_from_mapping(overrides: Mapping[str, Any] | None = None) -> DoubleSliderConfig:
    """Merge user overrides into double slider defaults."""

    raw = _merge(asdict(DEFAULT_DOUBLE_CONFIG), overrides)
    step = raw["step"]
    if step is not None and not is_number(step):
        raise ValueError("Setting `step` must be a number or None")
    return DoubleSliderConfig(
        bounds=as_bounds(_bounds_pair(raw["bounds"])),
        step=None if step is None else float(step),
        step_mode=raw["step_mode"],
    )


def _merge(raw: dict[str, Any], overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown slider setting: {key}")
            raw[key] = value
    return raw


def _bounds_pair(value: object) -> object:
    # asdict() turns nested Bounds into dicts
    if isinstance(value, Mapping):
        return (value.get("lower"), value.get("upper"))
    return value
