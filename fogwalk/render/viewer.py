"""Rich viewer rendering for a run's events."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fogwalk.sim.contracts import Event, EventKind, RunHeader


def render_events(
    events: Iterable[Event],
    *,
    header: RunHeader | None = None,
    max_events: int = 10,
) -> RenderableType:
    event_list = list(events)
    title = Text(
        f"Run {header.run_id}" if header else "Run", style="bold"
    )
    return Group(
        title,
        _render_summary(event_list, header),
        _render_recent(event_list, max_events=max_events),
    )


def _render_summary(events: list[Event], header: RunHeader | None) -> RenderableType:
    counts = Counter(event.kind for event in events)
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    if header:
        table.add_row("Grid", f"{header.width}x{header.height}")
        table.add_row("Radius", str(header.radius))
        table.add_row(
            "Objectives",
            f"{counts[EventKind.OBJECTIVE_REACHED]}/{header.objectives} reached",
        )
    else:
        table.add_row("Objectives", f"{counts[EventKind.OBJECTIVE_REACHED]} reached")
    table.add_row("Moves", str(counts[EventKind.MOVE]))
    table.add_row("Replans", str(counts[EventKind.BLOCKED]))
    chosen = [
        str(event.payload.get("option"))
        for event in events
        if event.kind == EventKind.OPTION_CHOSEN
    ]
    table.add_row("Unlocked", ", ".join(chosen) if chosen else "None")
    position = _last_position(events)
    table.add_row("Position", f"{position[0]}-{position[1]}" if position else "-")
    return Panel(table, title="Summary")


def _render_recent(events: list[Event], *, max_events: int) -> RenderableType:
    table = Table(title="Recent Events", show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Detail")
    for event in events[-max_events:]:
        table.add_row(event.kind.value, event.to_line())
    if not events:
        table.add_row("-", "None")
    return table


def _last_position(events: list[Event]) -> tuple[int, int] | None:
    for event in reversed(events):
        if "x" in event.payload and "y" in event.payload:
            return event.payload["x"], event.payload["y"]
    return None
