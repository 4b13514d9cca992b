import pytest
from pydantic import ValidationError

from fogwalk.sim.contracts import (
    Event,
    EventKind,
    JourneySpec,
    ObjectiveSpec,
    blocked_event,
    move_event,
)


def test_event_lines() -> None:
    assert move_event((3, 4)).to_line() == "Moving to 3-4"
    assert blocked_event((3, 4)).to_line() == "Path is impassable!"
    reached = Event(kind=EventKind.OBJECTIVE_REACHED, payload={"index": 2})
    assert reached.to_line() == "Objective 2 reached!"
    chosen = Event(kind=EventKind.OPTION_CHOSEN, payload={"option": "7"})
    assert chosen.to_line() == "Number 7 is chosen!"


def test_event_round_trips_through_json() -> None:
    event = move_event((1, 2))

    restored = Event.model_validate_json(event.model_dump_json())

    assert restored == event
    assert restored.kind == EventKind.MOVE


def test_journey_spec_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        JourneySpec.model_validate(
            {"radius": 1, "start": [0, 0], "objectives": [], "speed": 3}
        )


def test_objective_defaults_to_no_options() -> None:
    objective = ObjectiveSpec.model_validate({"coord": [2, 3]})

    assert objective.coord == (2, 3)
    assert objective.options == []
