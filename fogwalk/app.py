"""Application entry for running a journey from world files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from fogwalk.db.line_sink import FileLineSink, LineSink
from fogwalk.db.replay_log import append_event, create_run_folder, write_header
from fogwalk.sim.contracts import Coord, JourneySpec, RunHeader
from fogwalk.sim.grid import GridGraph
from fogwalk.sim.journey import Journey
from fogwalk.sim.world_loader import WorldPaths, load_world

DEFAULT_REPLAY_DIR = Path("replay")
DEFAULT_MAX_REPLANS: int | None = None


@dataclass(frozen=True)
class RunResult:
    run_dir: Path
    grid: GridGraph
    journey: JourneySpec
    position: Coord
    events: int


def run_from_files(
    paths: WorldPaths,
    output_path: Path,
    *,
    replay_dir: Path | None = None,
    max_replans: int | None = None,
) -> RunResult:
    grid, journey = load_world(paths)
    with FileLineSink(output_path) as sink:
        return run_journey(
            grid,
            journey,
            sink=sink,
            replay_dir=resolve_replay_dir(replay_dir),
            max_replans=resolve_max_replans(max_replans),
        )


def run_journey(
    grid: GridGraph,
    journey: JourneySpec,
    *,
    sink: LineSink,
    replay_dir: Path,
    max_replans: int | None = None,
    timestamp: str | None = None,
) -> RunResult:
    run_dir, log_path = create_run_folder(replay_dir, timestamp=timestamp)
    write_header(
        log_path,
        RunHeader(
            run_id=run_dir.name,
            width=grid.width,
            height=grid.height,
            radius=journey.radius,
            start=journey.start,
            objectives=len(journey.objectives),
        ),
    )
    walker = Journey(grid, radius=journey.radius, max_replans=max_replans)
    count = 0
    for event in walker.run(journey.start, journey.objectives):
        count += 1
        sink.append(event.to_line())
        append_event(log_path, event, sequence=count)
    return RunResult(
        run_dir=run_dir,
        grid=grid,
        journey=journey,
        position=walker.position or journey.start,
        events=count,
    )


def resolve_replay_dir(replay_dir: Path | None) -> Path:
    if replay_dir is not None:
        return replay_dir
    env_dir = os.getenv("FOGWALK_REPLAY_DIR")
    return Path(env_dir) if env_dir else DEFAULT_REPLAY_DIR


def resolve_max_replans(max_replans: int | None) -> int | None:
    if max_replans is not None:
        return max_replans if max_replans > 0 else None
    raw = os.getenv("FOGWALK_MAX_REPLANS")
    if not raw:
        return DEFAULT_MAX_REPLANS
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(
            f"FOGWALK_MAX_REPLANS must be an integer, got {raw!r}"
        ) from exc
    return value if value > 0 else None
