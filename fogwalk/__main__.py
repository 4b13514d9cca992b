"""Module entry point for `python -m fogwalk`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from fogwalk.app import resolve_replay_dir, run_from_files
from fogwalk.db.replay_log import RUN_LOG_NAME
from fogwalk.render.grid_map import render_grid
from fogwalk.render.live_tail import tail_run_log
from fogwalk.render.replay_reader import read_events, read_header
from fogwalk.render.viewer import render_events
from fogwalk.sim.errors import FogwalkError
from fogwalk.sim.world_loader import WorldPaths


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Walk a fogged grid through a sequence of objectives."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="Run a journey from world files.")
    run.add_argument("nodes", type=Path, help="Node file (grid size + nodes).")
    run.add_argument("edges", type=Path, help="Edge file (x1-y1,x2-y2 weight).")
    run.add_argument("objectives", type=Path, help="Objective file.")
    run.add_argument("output", type=Path, help="Progress log to write.")
    run.add_argument(
        "--replay-dir",
        type=Path,
        default=None,
        help="Base directory for run logs (env FOGWALK_REPLAY_DIR).",
    )
    run.add_argument(
        "--max-replans",
        type=int,
        default=None,
        help="Abort an objective after this many replans (env FOGWALK_MAX_REPLANS).",
    )
    run.add_argument(
        "--show-map",
        action="store_true",
        help="Print the grid as seen by the traveler when the run ends.",
    )

    view = commands.add_parser("view", help="Tail a run log in the live viewer.")
    view.add_argument(
        "--run-folder",
        type=Path,
        default=None,
        help="Run folder to view (defaults to latest).",
    )
    view.add_argument("--replay-dir", type=Path, default=None)

    replay = commands.add_parser("replay", help="Print a recorded run.")
    replay.add_argument("run_folder", type=Path)

    args = parser.parse_args(argv)
    console = Console()

    if args.command == "view":
        run_folder = args.run_folder or _latest_run_folder(
            resolve_replay_dir(args.replay_dir)
        )
        if run_folder is None:
            raise SystemExit("No run folder found. Run a journey first.")
        tail_run_log(run_folder / RUN_LOG_NAME)
        return

    if args.command == "replay":
        _replay_run(console, args.run_folder)
        return

    paths = WorldPaths(nodes=args.nodes, edges=args.edges, objectives=args.objectives)
    try:
        result = run_from_files(
            paths,
            args.output,
            replay_dir=args.replay_dir,
            max_replans=args.max_replans,
        )
    except (FogwalkError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.show_map:
        console.print(
            render_grid(
                result.grid,
                traveler=result.position,
                objectives=[item.coord for item in result.journey.objectives],
            )
        )
    console.print(f"Run saved to {result.run_dir}")


def _latest_run_folder(base_dir: Path) -> Path | None:
    if not base_dir.exists():
        return None
    run_dirs = [path for path in base_dir.iterdir() if path.is_dir()]
    if not run_dirs:
        return None
    return sorted(run_dirs)[-1]


def _replay_run(console: Console, run_folder: Path) -> None:
    log_path = run_folder / RUN_LOG_NAME
    if not log_path.exists():
        raise SystemExit(f"No run log found at {log_path}")
    header = read_header(log_path)
    console.print(render_events(read_events(log_path), header=header))


if __name__ == "__main__":
    main()
