"""Tail a JSONL run log and render the event summary (Textual)."""

from __future__ import annotations

import json
import threading
import time
from pathlib import Path
from typing import Any

from rich.panel import Panel
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static

from fogwalk.render.textual_app import FogwalkApp
from fogwalk.render.viewer import render_events
from fogwalk.sim.contracts import Event, RunHeader


class TailViewerScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #tail-view {
        height: 1fr;
    }
    """

    def __init__(self, path: Path, *, poll_interval: float = 0.2) -> None:
        super().__init__()
        self._path = path
        self._poll_interval = poll_interval
        self._view: Static | None = None
        self._stop_event = threading.Event()
        self._events: list[Event] = []
        self._header: RunHeader | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Static(id="tail-view")

    def on_mount(self) -> None:
        self._view = self.query_one("#tail-view", Static)
        if self._view:
            self._view.update(Panel(Text("Waiting for run data..."), title="Live Run"))
        self._start_tail()

    def on_unmount(self) -> None:
        self._stop_event.set()

    def _start_tail(self) -> None:
        thread = threading.Thread(target=self._tail_loop, daemon=True)
        thread.start()

    def _tail_loop(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)
        with self._path.open("r", encoding="utf-8") as handle:
            while not self._stop_event.is_set():
                line = handle.readline()
                if not line:
                    time.sleep(self._poll_interval)
                    continue
                record = _parse_record(line)
                if record is None:
                    continue
                if record.get("type") == "header":
                    header = RunHeader.model_validate(record.get("metadata", {}))
                    self.app.call_from_thread(self._update_header, header)
                    continue
                if record.get("type") != "event" or record.get("event") is None:
                    continue
                event = Event.model_validate(record["event"])
                self.app.call_from_thread(self._append_event, event)

    def _update_header(self, header: RunHeader) -> None:
        self._header = header
        if isinstance(self.app, FogwalkApp):
            self.app.show_run(header)
        self._refresh()

    def _append_event(self, event: Event) -> None:
        self._events.append(event)
        self._refresh()

    def _refresh(self) -> None:
        if self._view:
            self._view.update(render_events(self._events, header=self._header))


def tail_run_log(path: Path, *, poll_interval: float = 0.2) -> None:
    app = FogwalkApp(
        TailViewerScreen(path, poll_interval=poll_interval), run_id=path.parent.name
    )
    app.run()


def _parse_record(line: str) -> dict[str, Any] | None:
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None
