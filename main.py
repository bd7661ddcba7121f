from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
import tomllib
from typing import Any, Iterator

from sliders import (
    DoubleSliderModel,
    RoundSliderModel,
    TrackGeometry,
    double_slider_config_from_mapping,
    parse_hdi_drag_event,
    round_slider_config_from_mapping,
)


LOGGER = logging.getLogger("sliders.replay")


def _load_settings(path: Path | None, table: str) -> dict[str, Any]:
    if path is None:
        return {}
    with path.open("rb") as fh:
        raw = tomllib.load(fh)
    section = raw.get(table, {})
    if not isinstance(section, dict):
        raise ValueError(f"config table `{table}` must be a table")
    return section


def _read_records(path: Path) -> Iterator[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as fh:
        for line_no, line in enumerate(fh, start=1):
            line = line.strip()
            if not line:
                continue
            record = json.loads(line)
            if not isinstance(record, dict):
                raise ValueError(f"{path}:{line_no}: expected a JSON object")
            yield record


def _replay_round(args: argparse.Namespace) -> int:
    config = round_slider_config_from_mapping(_load_settings(args.config, "round"))
    model = RoundSliderModel(config, on_editing_changed=lambda editing: LOGGER.info("editing=%s", editing))
    value = args.value
    for record in _read_records(args.events):
        event = parse_hdi_drag_event(str(record.get("event_type", "drag")), record.get("payload", record))
        if event is None:
            LOGGER.debug("skipping non-drag record: %s", record)
            continue
        value = model.handle_event(event, value).value
        print(json.dumps({"value": value, "display": model.display_value(value), "readout": model.readout(value)}))
    return 0


def _replay_double(args: argparse.Namespace) -> int:
    config = double_slider_config_from_mapping(_load_settings(args.config, "double"))
    model = DoubleSliderModel(config, on_editing_changed=lambda editing: LOGGER.info("editing=%s", editing))
    track = TrackGeometry(width=args.width)
    low, high = args.low, args.high
    for record in _read_records(args.events):
        event = parse_hdi_drag_event(str(record.get("event_type", "drag")), record.get("payload", record))
        if event is None:
            LOGGER.debug("skipping non-drag record: %s", record)
            continue
        side = record.get("side")
        if side not in ("low", "high"):
            active = [s for s in ("low", "high") if model.is_dragging(s)]
            if active:
                side = active[0]
            else:
                side = model.resolve_side(float(record.get("touch_x", 0.0)), track.width, low, high)
        update = model.handle_event(side, event, track, low, high)
        low, high = update.low, update.high
        print(json.dumps({"side": side, "low": low, "high": high, "priority": model.priority}))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sliders", description="Replay recorded drag samples through a slider.")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    round_cmd = sub.add_parser("round", help="replay samples through a round (dial) slider")
    round_cmd.add_argument("events", type=Path, help="JSONL file of drag payloads")
    round_cmd.add_argument("--config", type=Path, default=None, help="TOML file with a [round] table")
    round_cmd.add_argument("--value", type=float, default=0.0)
    round_cmd.set_defaults(handler=_replay_round)

    double_cmd = sub.add_parser("double", help="replay samples through a two-thumb range slider")
    double_cmd.add_argument("events", type=Path, help="JSONL file of drag payloads")
    double_cmd.add_argument("--config", type=Path, default=None, help="TOML file with a [double] table")
    double_cmd.add_argument("--width", type=float, default=320.0, help="track width in pixels")
    double_cmd.add_argument("--low", type=float, default=0.0)
    double_cmd.add_argument("--high", type=float, default=1.0)
    double_cmd.set_defaults(handler=_replay_double)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
