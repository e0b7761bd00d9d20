"""
Unit tests for FloorTopology.

Tests graph construction from a room layout, predecessor lookup and
connection counting.
"""

from sanctumpath.managers.floor_manager import FloorTopology
from sanctumpath.storage.models import RoomAttributes, RoomCoordinate


def test_rooms_and_edges_from_layout():
    topology = FloorTopology([[[0, 1]], [[0], [0]], [[]]])

    assert len(topology) == 4
    assert topology.layer_count == 3
    assert topology.has_connection(RoomCoordinate(0, 0), RoomCoordinate(1, 0))
    assert topology.has_connection(RoomCoordinate(0, 0), RoomCoordinate(1, 1))
    assert topology.has_connection(RoomCoordinate(1, 1), RoomCoordinate(2, 0))
    assert not topology.has_connection(RoomCoordinate(1, 0), RoomCoordinate(0, 0))


def test_predecessors_in_room_order():
    topology = FloorTopology([[[0], [0], [0]], [[]]])

    assert topology.predecessors(RoomCoordinate(1, 0)) == [
        RoomCoordinate(0, 0),
        RoomCoordinate(0, 1),
        RoomCoordinate(0, 2),
    ]


def test_layer_zero_has_no_predecessors():
    topology = FloorTopology([[[0]], [[]]])

    assert topology.predecessors(RoomCoordinate(0, 0)) == []
    assert topology.successors(RoomCoordinate(0, 0)) == [RoomCoordinate(1, 0)]


def test_unknown_room_lookups():
    topology = FloorTopology([[[]]])
    missing = RoomCoordinate(3, 3)

    assert missing not in topology
    assert topology.get_room(missing) is None
    assert topology.predecessors(missing) == []
    assert topology.connection_count(missing) == 0


def test_dangling_connection_counted_but_not_linked():
    """Connections to rooms that do not exist still count toward the room's total."""
    topology = FloorTopology([[[0, 4]], [[]]])

    assert topology.connection_count(RoomCoordinate(0, 0)) == 2
    assert topology.successors(RoomCoordinate(0, 0)) == [RoomCoordinate(1, 0)]
    assert RoomCoordinate(1, 4) not in topology


def test_room_attributes_stored_on_nodes():
    merchant = RoomAttributes(reward_room="Merchant")
    topology = FloorTopology([[[0], [0]], [[]]], [[RoomAttributes(), merchant]])

    assert topology.get_room(RoomCoordinate(0, 1)) == merchant
    # Missing attribute entries fall back to featureless rooms
    assert topology.get_room(RoomCoordinate(1, 0)) == RoomAttributes()


def test_rooms_iterates_last_layer_first():
    topology = FloorTopology([[[0]], [[], []]])

    assert list(topology.rooms()) == [
        RoomCoordinate(1, 0),
        RoomCoordinate(1, 1),
        RoomCoordinate(0, 0),
    ]
