"""Read run logs and yield Events."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from fogwalk.sim.contracts import Event, RunHeader


def read_events(path: Path) -> Iterator[Event]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = _parse_record(line)
            if not record:
                continue
            if record.get("type") != "event":
                continue
            event = record.get("event")
            if event is None:
                continue
            yield Event.model_validate(event)


def read_header(path: Path) -> RunHeader | None:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = _parse_record(line)
            if record and record.get("type") == "header":
                return RunHeader.model_validate(record.get("metadata", {}))
    return None


def _parse_record(line: str) -> dict | None:
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None
