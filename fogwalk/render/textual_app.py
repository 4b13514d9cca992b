"""Textual shell for fogwalk run viewers."""

from __future__ import annotations

from textual.app import App
from textual.screen import Screen

from fogwalk.sim.contracts import RunHeader


def describe_run(header: RunHeader) -> str:
    return (
        f"run {header.run_id} | {header.width}x{header.height} grid"
        f" | radius {header.radius} | {header.objectives} objectives"
    )


class FogwalkApp(App):
    """Host one run screen; the subtitle tracks the run being shown."""

    TITLE = "fogwalk"

    def __init__(self, screen: Screen, *, run_id: str | None = None) -> None:
        super().__init__()
        self._initial_screen = screen
        self.sub_title = f"run {run_id}" if run_id else "waiting for run header"

    def on_mount(self) -> None:
        self.push_screen(self._initial_screen)

    def show_run(self, header: RunHeader) -> None:
        self.sub_title = describe_run(header)
