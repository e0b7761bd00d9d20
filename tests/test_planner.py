"""
Integration tests for the SanctumPath route planner.

Runs full planning cycles on small floors and the bundled sample floor,
with mock hooks standing in for consumers of the plan.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from sanctumpath.hooks.base import BaseHook
from sanctumpath.managers.path_solver import START_NODE
from sanctumpath.managers.weight_model import BASE_WEIGHT
from sanctumpath.planner import RoutePlanner
from sanctumpath.storage.models import FloorSnapshot, RoomAttributes, RoomCoordinate, RunContext
from sanctumpath.storage.snapshot import load_snapshot
from sanctumpath.weights.factory import create_weight_tables
from sanctumpath.weights.tables import WeightTables

SAMPLE_FLOOR = Path(__file__).parent.parent / "samples" / "floor1.json"

A = RoomCoordinate(1, 0)
B = RoomCoordinate(0, 0)
C = RoomCoordinate(0, 1)


class BrokenHook(BaseHook):
    """Hook that fails on every event."""

    def on_path_selected(self, path, current_position):
        raise RuntimeError("renderer went away")


@pytest.fixture
def tables():
    return WeightTables(room_type_weights={"Merchant_Floor1": 551})


@pytest.fixture
def small_floor():
    """A on layer 1; B (empty) and C (merchant) on layer 0 both lead into A."""
    return FloorSnapshot(
        layout=[[[0], [0]], [[]]],
        rooms=[
            [RoomAttributes(), RoomAttributes(reward_room="Merchant")],
            [RoomAttributes()],
        ],
        context=RunContext(floor_number=1, current_resolve=100),
    )


def test_plan_small_floor(tables, small_floor):
    planner = RoutePlanner(tables, start=A)

    result = planner.plan(small_floor)

    assert result.path == [A, C]
    assert result.costs == {
        A: BASE_WEIGHT - 25,
        B: BASE_WEIGHT - 25 - 5,
        C: BASE_WEIGHT - 551 - 5,
    }
    assert set(result.breakdowns) == {A, B, C}
    assert result.current_position is None


def test_plan_follows_current_position(tables, small_floor):
    small_floor.current_position = B
    planner = RoutePlanner(tables, start=A)

    result = planner.plan(small_floor)

    assert result.path == [A, B]
    assert result.current_position == B


def test_hooks_notified(tables, small_floor):
    hook = MagicMock(spec=BaseHook)
    planner = RoutePlanner(tables, start=A)
    planner.register_hook(hook)

    result = planner.plan(small_floor)

    hook.on_costs_computed.assert_called_once_with(
        costs=result.costs, breakdowns=result.breakdowns
    )
    hook.on_path_selected.assert_called_once_with(path=[A, C], current_position=None)
    hook.on_plan_complete.assert_called_once_with(result=result)


def test_broken_hook_does_not_break_plan(tables, small_floor):
    good_hook = MagicMock(spec=BaseHook)
    planner = RoutePlanner(tables, hooks=[BrokenHook(), good_hook], start=A)

    result = planner.plan(small_floor)

    assert result.path == [A, C]
    good_hook.on_path_selected.assert_called_once()
    good_hook.on_plan_complete.assert_called_once()


def test_plan_empty_floor(tables):
    result = RoutePlanner(tables).plan(FloorSnapshot(layout=[]))

    assert result.path == []
    assert result.costs == {}


def test_plans_are_independent(tables, small_floor):
    planner = RoutePlanner(tables, start=A)

    first = planner.plan(small_floor)
    second = planner.plan(small_floor)

    assert first.path == second.path
    assert first.costs == second.costs
    assert first.costs is not second.costs


def test_plan_sample_floor():
    """The bundled floor plans from the entry room down to layer 0."""
    snapshot = load_snapshot(SAMPLE_FLOOR)
    planner = RoutePlanner(create_weight_tables({}))

    result = planner.plan(snapshot)

    assert snapshot.context.floor_number == 1
    assert result.path[0] == START_NODE
    assert result.path[-1] == RoomCoordinate(0, 0)
    assert len(result.path) == 8
    assert len(result.costs) == 14
