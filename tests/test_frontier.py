import random
from dataclasses import FrozenInstanceError

import pytest

from fogwalk.sim.errors import FrontierEmptyError, FrontierKeyError
from fogwalk.sim.frontier import PriorityFrontier


def test_extract_min_returns_entries_in_priority_order() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier()
    for key, priority in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
        frontier.insert(key, priority)

    assert frontier.peek_min().key == "a"
    order = [frontier.extract_min().key for _ in range(4)]
    assert order == ["a", "b", "c", "d"]
    assert frontier.is_empty()


def test_decrease_key_moves_entry_to_front() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier()
    frontier.insert("a", 5.0)
    frontier.insert("b", 3.0)
    frontier.insert("c", 4.0)

    frontier.decrease_key("a", 1.0)

    frontier.check_invariants()
    assert frontier.priority_of("a") == 1.0
    assert frontier.extract_min().key == "a"


def test_decrease_key_rejects_absent_key_and_larger_priority() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier()
    frontier.insert("a", 2.0)

    with pytest.raises(FrontierKeyError):
        frontier.decrease_key("missing", 1.0)
    with pytest.raises(ValueError):
        frontier.decrease_key("a", 3.0)
    with pytest.raises(ValueError):
        frontier.decrease_key("a", 2.0)
    assert frontier.priority_of("a") == 2.0


def test_empty_frontier_reports_errors() -> None:
    frontier: PriorityFrontier[int] = PriorityFrontier()

    with pytest.raises(FrontierEmptyError):
        frontier.extract_min()
    with pytest.raises(FrontierEmptyError):
        frontier.peek_min()


def test_reinserting_key_keeps_single_slot() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier()
    frontier.insert("x", 10.0)
    frontier.insert("y", 6.0)
    for priority in (9.0, 7.0, 5.0, 3.0):
        frontier.insert("x", priority)
        frontier.check_invariants()

    assert len(frontier) == 2
    first = frontier.extract_min()
    assert (first.key, first.priority) == ("x", 3.0)
    assert frontier.extract_min().key == "y"
    assert frontier.is_empty()


def test_reinserting_with_larger_priority_sifts_down() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier()
    frontier.insert("a", 1.0)
    frontier.insert("b", 2.0)
    frontier.insert("c", 3.0)

    frontier.insert("a", 10.0)

    frontier.check_invariants()
    assert [frontier.extract_min().key for _ in range(3)] == ["b", "c", "a"]


def test_peeked_entry_cannot_reorder_heap() -> None:
    frontier: PriorityFrontier[str] = PriorityFrontier()
    frontier.insert("a", 1.0)
    frontier.insert("b", 2.0)
    peeked = frontier.peek_min()

    with pytest.raises(FrozenInstanceError):
        peeked.priority = 99.0  # type: ignore[misc]

    frontier.decrease_key("b", 0.5)
    frontier.check_invariants()
    assert peeked.priority == 1.0
    assert frontier.peek_min().key == "b"


def test_random_operations_match_reference() -> None:
    rng = random.Random(7)
    frontier: PriorityFrontier[int] = PriorityFrontier()
    reference: dict[int, float] = {}

    for _ in range(2000):
        op = rng.random()
        if op < 0.5:
            key = rng.randrange(50)
            priority = float(rng.randrange(1000))
            frontier.insert(key, priority)
            reference[key] = priority
        elif op < 0.75 and reference:
            key = rng.choice(sorted(reference))
            lower = reference[key] - float(rng.randrange(1, 20))
            frontier.decrease_key(key, lower)
            reference[key] = lower
        elif reference:
            entry = frontier.extract_min()
            assert entry.priority == min(reference.values())
            assert reference.pop(entry.key) == entry.priority
        frontier.check_invariants()
        assert len(frontier) == len(reference)
