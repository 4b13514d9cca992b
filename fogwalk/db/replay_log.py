"""Run logging helpers (JSONL)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fogwalk.sim.contracts import Event, RunHeader

SCHEMA_VERSION = 1
RUN_LOG_NAME = "run.jsonl"


def create_run_folder(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    """Create a fresh run folder; a clashing run id gets a ``-N`` suffix."""
    run_id = timestamp or _format_timestamp(datetime.now(timezone.utc))
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / run_id
    suffix = 0
    while True:
        try:
            run_dir.mkdir(exist_ok=False)
        except FileExistsError:
            suffix += 1
            run_dir = base_dir / f"{run_id}-{suffix}"
            continue
        return run_dir, run_dir / RUN_LOG_NAME


def write_header(path: Path, header: RunHeader) -> None:
    record: dict[str, Any] = {
        "type": "header",
        "schema_version": SCHEMA_VERSION,
        "metadata": header.model_dump(mode="json"),
    }
    _append_record(path, record)


def append_event(path: Path, event: Event, *, sequence: int) -> None:
    record: dict[str, Any] = {
        "type": "event",
        "schema_version": SCHEMA_VERSION,
        "sequence": sequence,
        "event": event.model_dump(mode="json"),
    }
    _append_record(path, record)


def _append_record(path: Path, record: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record))
        handle.write("\n")


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H-%M-%SZ")
