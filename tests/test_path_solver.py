"""
Unit tests for PathSolver.

Tests cost minimisation, the longest-path selection policy, the current
position override, and the degenerate cases that return empty paths.
"""

import pytest

from sanctumpath.managers.floor_manager import FloorTopology
from sanctumpath.managers.path_solver import START_NODE, PathSolver
from sanctumpath.storage.models import RoomCoordinate


A = RoomCoordinate(1, 0)
B = RoomCoordinate(0, 0)
C = RoomCoordinate(0, 1)


@pytest.fixture
def two_layer_topology():
    """Rooms B and C on layer 0 both connect forward into room A on layer 1."""
    return FloorTopology([[[0], [0]], [[]]])


@pytest.fixture
def two_layer_costs():
    return {A: 10, B: 5, C: 3}


def test_cheapest_path_selected(two_layer_topology, two_layer_costs):
    """Of two equally long paths, the one ending on the cheaper room wins."""
    solver = PathSolver(two_layer_topology, two_layer_costs, start=A)

    result = solver.solve()

    assert result.path == [A, C]
    assert result.min_cost[C] == 13
    assert result.min_cost[B] == 15


def test_longer_path_preferred_over_cheaper():
    """The deepest-reaching route wins even if a shorter one is cheaper."""
    s = RoomCoordinate(2, 0)
    x = RoomCoordinate(1, 0)
    z = RoomCoordinate(1, 1)
    y = RoomCoordinate(0, 0)
    # y -> x -> s and z -> s
    topology = FloorTopology([[[0]], [[0], [0]], [[]]])
    costs = {s: 0, x: 5, z: 1, y: 5}

    path = PathSolver(topology, costs, start=s).find_best_path()

    assert path == [s, x, y]


def test_equal_length_equal_cost_tie_is_deterministic(two_layer_topology):
    costs = {A: 10, B: 5, C: 5}
    solver = PathSolver(two_layer_topology, costs, start=A)

    assert solver.find_best_path() == [A, B]
    assert solver.find_best_path() == [A, B]


def test_current_position_overrides_selection(two_layer_topology, two_layer_costs):
    solver = PathSolver(two_layer_topology, two_layer_costs, start=A)

    path = solver.find_best_path(current_position=B)

    assert path == [A, B]
    assert path[-1] == B


def test_current_position_without_path_returns_empty(two_layer_topology, two_layer_costs):
    solver = PathSolver(two_layer_topology, two_layer_costs, start=A)

    assert solver.find_best_path(current_position=RoomCoordinate(5, 5)) == []


def test_isolated_start():
    """A start room nothing connects into only reaches itself."""
    topology = FloorTopology([[[]] for _ in range(8)])
    costs = {coordinate: 1 for coordinate in topology.rooms()}
    solver = PathSolver(topology, costs)

    assert solver.find_best_path() == [START_NODE]
    assert solver.find_best_path(current_position=START_NODE) == [START_NODE]
    assert solver.find_best_path(current_position=RoomCoordinate(6, 0)) == []


def test_missing_start_returns_empty():
    topology = FloorTopology([])

    result = PathSolver(topology, {}).solve()

    assert result.path == []
    assert result.best_paths == {}


def test_layer_zero_is_a_boundary(two_layer_topology, two_layer_costs):
    """Starting on layer 0 there is nothing to relax into."""
    solver = PathSolver(two_layer_topology, two_layer_costs, start=B)

    assert solver.find_best_path() == [B]


def test_default_start_is_layer_seven():
    assert START_NODE == RoomCoordinate(7, 0)


@pytest.fixture
def branching_floor():
    """Eight layers with several crossing routes into the start room."""
    layout = [
        [[0, 1]],
        [[0], [0]],
        [[0, 1]],
        [[0], [1]],
        [[0, 1], [1, 2]],
        [[0], [0, 1], [1]],
        [[0], [0]],
        [[]],
    ]
    topology = FloorTopology(layout)
    costs = {}
    for coordinate in topology.rooms():
        costs[coordinate] = 100 + (coordinate.room * 7 + coordinate.layer * 3) % 11
    return topology, costs


def test_path_follows_connections(branching_floor):
    topology, costs = branching_floor

    path = PathSolver(topology, costs).find_best_path()

    assert path[0] == START_NODE
    assert path[-1] == RoomCoordinate(0, 0)
    assert len(path) == 8
    for deeper, shallower in zip(path, path[1:]):
        assert topology.has_connection(shallower, deeper)


def test_recorded_costs_match_paths(branching_floor):
    """Each recorded best cost is the sum of room costs along its path."""
    topology, costs = branching_floor

    result = PathSolver(topology, costs).solve()

    for end, path in result.best_paths.items():
        assert result.min_cost[end] == sum(costs[room] for room in path)


def test_recorded_costs_are_minimal(branching_floor):
    """No single-step detour undercuts a recorded cost."""
    topology, costs = branching_floor

    result = PathSolver(topology, costs).solve()

    for room in result.best_paths:
        for predecessor in topology.predecessors(room):
            assert result.min_cost[predecessor] <= result.min_cost[room] + costs[predecessor]


def test_solve_is_idempotent(branching_floor):
    topology, costs = branching_floor
    solver = PathSolver(topology, costs)

    first = solver.solve()
    second = solver.solve()

    assert first.path == second.path
    assert first.min_cost == second.min_cost
    assert PathSolver(topology, dict(costs)).find_best_path() == first.path


def test_settled_room_improved_by_negative_cost():
    """
    A room already expanded is re-expanded when a negative-cost room
    (a mirror reward outweighs the base weight) later opens a cheaper way in.
    """
    s = RoomCoordinate(4, 0)
    x = RoomCoordinate(3, 0)
    w = RoomCoordinate(3, 1)
    p = RoomCoordinate(2, 0)
    mirror = RoomCoordinate(2, 1)
    z = RoomCoordinate(1, 0)
    q = RoomCoordinate(0, 0)
    # q -> z -> (p -> x | mirror -> w) -> s
    topology = FloorTopology([[[0]], [[0, 1]], [[0], [1]], [[0], [0]], [[]]])
    costs = {s: 0, x: 1, w: 5, p: 1, mirror: -10, z: 1, q: 1}

    result = PathSolver(topology, costs, start=s).solve()

    assert result.path == [s, w, mirror, z, q]
    assert result.min_cost[z] == -4
    assert result.min_cost[q] == -3
    assert result.best_paths[z] == [s, w, mirror, z]
    for end, path in result.best_paths.items():
        assert result.min_cost[end] == sum(costs[room] for room in path)
