import json
from pathlib import Path

from fogwalk.app import resolve_max_replans, resolve_replay_dir, run_journey
from fogwalk.db.line_sink import FileLineSink, MemoryLineSink
from fogwalk.db.replay_log import (
    RUN_LOG_NAME,
    append_event,
    create_run_folder,
    write_header,
)
from fogwalk.render.replay_reader import read_events, read_header
from fogwalk.sim.contracts import (
    EventKind,
    JourneySpec,
    ObjectiveSpec,
    RunHeader,
    move_event,
)
from fogwalk.sim.grid import GridGraph


def _header(run_id: str) -> RunHeader:
    return RunHeader(
        run_id=run_id, width=2, height=1, radius=1, start=(0, 0), objectives=1
    )


def test_run_log_header_and_events(tmp_path: Path) -> None:
    run_dir, log_path = create_run_folder(tmp_path, timestamp="2026-10-17T09-00-00Z")
    write_header(log_path, _header(run_dir.name))
    append_event(log_path, move_event((1, 0)), sequence=1)

    with log_path.open("r", encoding="utf-8") as handle:
        records = [json.loads(line) for line in handle]

    assert log_path.name == RUN_LOG_NAME
    assert records[0]["type"] == "header"
    assert records[0]["metadata"]["run_id"] == run_dir.name
    assert records[1]["type"] == "event"
    assert records[1]["event"] == {"kind": "MOVE", "payload": {"x": 1, "y": 0}}


def test_reader_skips_header_and_garbage(tmp_path: Path) -> None:
    run_dir, log_path = create_run_folder(tmp_path, timestamp="2026-10-17T09-01-00Z")
    write_header(log_path, _header(run_dir.name))
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write("not json\n")
    append_event(log_path, move_event((1, 0)), sequence=1)

    events = list(read_events(log_path))
    header = read_header(log_path)

    assert len(events) == 1
    assert events[0].kind == EventKind.MOVE
    assert header is not None
    assert header.start == (0, 0)


def test_run_journey_writes_lines_and_log(tmp_path: Path) -> None:
    grid = GridGraph.of_size(2, 1)
    grid.add_node((0, 0), "0")
    grid.add_node((1, 0), "0")
    grid.add_edge((0, 0), (1, 0), 1.0)
    journey = JourneySpec(
        radius=1, start=(0, 0), objectives=[ObjectiveSpec(coord=(1, 0))]
    )
    sink = MemoryLineSink()

    result = run_journey(
        grid,
        journey,
        sink=sink,
        replay_dir=tmp_path,
        timestamp="2026-10-17T09-02-00Z",
    )

    assert sink.lines == ["Moving to 1-0", "Objective 1 reached!"]
    assert result.position == (1, 0)
    assert result.events == 2
    logged = list(read_events(result.run_dir / RUN_LOG_NAME))
    assert [event.to_line() for event in logged] == sink.lines


def test_file_line_sink_truncates_and_appends(tmp_path: Path) -> None:
    path = tmp_path / "out" / "log.txt"
    path.parent.mkdir()
    path.write_text("stale\n", encoding="utf-8")

    with FileLineSink(path) as sink:
        sink.append("Moving to 1-0")
        sink.append("Objective 1 reached!")

    assert path.read_text(encoding="utf-8") == "Moving to 1-0\nObjective 1 reached!\n"


def test_config_resolution_from_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FOGWALK_REPLAY_DIR", str(tmp_path))
    monkeypatch.setenv("FOGWALK_MAX_REPLANS", "12")

    assert resolve_replay_dir(None) == tmp_path
    assert resolve_replay_dir(Path("elsewhere")) == Path("elsewhere")
    assert resolve_max_replans(None) == 12
    assert resolve_max_replans(3) == 3

    monkeypatch.delenv("FOGWALK_MAX_REPLANS")
    assert resolve_max_replans(None) is None


def test_run_folder_is_never_shared(tmp_path: Path) -> None:
    stamp = "2026-10-17T09-00-00Z"

    first_dir, first_log = create_run_folder(tmp_path, timestamp=stamp)
    second_dir, second_log = create_run_folder(tmp_path, timestamp=stamp)
    third_dir, _ = create_run_folder(tmp_path, timestamp=stamp)

    assert first_dir.name == stamp
    assert second_dir.name == f"{stamp}-1"
    assert third_dir.name == f"{stamp}-2"
    assert first_log != second_log
    assert second_dir.is_dir()


def test_non_positive_max_replans_means_unbounded(monkeypatch) -> None:
    monkeypatch.setenv("FOGWALK_MAX_REPLANS", "5")

    assert resolve_max_replans(0) is None
    assert resolve_max_replans(-2) is None

    monkeypatch.setenv("FOGWALK_MAX_REPLANS", "0")
    assert resolve_max_replans(None) is None
