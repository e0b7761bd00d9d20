"""
Floor topology for SanctumPath.

Maintains the layered room graph of one floor as a directed graph: one node
per room coordinate, one edge per forward connection into the next layer.
"""

import logging
from typing import Iterator, Optional

import networkx as nx

from sanctumpath.storage.models import RoomAttributes, RoomCoordinate

logger = logging.getLogger(__name__)


class FloorTopology:
    """
    Graph-based floor layout using NetworkX DiGraph.

    Node attributes hold the room's attributes and its raw connection
    count; edges always point from a layer to the layer after it.
    """

    def __init__(
        self,
        layout: list[list[list[int]]],
        rooms: Optional[list[list[RoomAttributes]]] = None,
    ):
        """
        Build the topology from the game's room layout.

        Args:
            layout: For each layer, for each room, the indices of the rooms
                in the next layer it connects to
            rooms: Room attributes with the same layer/room shape as layout;
                missing entries become featureless rooms
        """
        self.graph = nx.DiGraph()
        self.layer_sizes: list[int] = [len(layer) for layer in layout]

        for layer_index, layer in enumerate(layout):
            for room_index, connections in enumerate(layer):
                self._add_room(
                    RoomCoordinate(layer_index, room_index),
                    self._room_at(rooms, layer_index, room_index),
                    len(connections),
                )

        for layer_index, layer in enumerate(layout):
            for room_index, connections in enumerate(layer):
                source = RoomCoordinate(layer_index, room_index)
                for target_index in connections:
                    self._add_connection(source, RoomCoordinate(layer_index + 1, int(target_index)))

        logger.debug(
            f"FloorTopology built: {self.graph.number_of_nodes()} rooms, "
            f"{self.graph.number_of_edges()} connections, {len(self.layer_sizes)} layers"
        )

    @staticmethod
    def _room_at(
        rooms: Optional[list[list[RoomAttributes]]], layer_index: int, room_index: int
    ) -> RoomAttributes:
        if rooms is None or layer_index >= len(rooms) or room_index >= len(rooms[layer_index]):
            return RoomAttributes()
        return rooms[layer_index][room_index]

    def _add_room(self, coordinate: RoomCoordinate, room: RoomAttributes, connections: int) -> None:
        self.graph.add_node(coordinate, room=room, connections=connections)

    def _add_connection(self, source: RoomCoordinate, target: RoomCoordinate) -> None:
        """Add a forward edge, ignoring targets that are not on the floor."""
        if target not in self.graph.nodes:
            logger.debug(f"Ignoring connection {source} -> {target}: no such room")
            return
        self.graph.add_edge(source, target)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self.graph.nodes

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def layer_count(self) -> int:
        return len(self.layer_sizes)

    def rooms(self) -> Iterator[RoomCoordinate]:
        """Iterate room coordinates layer by layer, from the last layer down to 0."""
        for layer_index in range(self.layer_count - 1, -1, -1):
            for room_index in range(self.layer_sizes[layer_index]):
                yield RoomCoordinate(layer_index, room_index)

    def get_room(self, coordinate: RoomCoordinate) -> Optional[RoomAttributes]:
        if coordinate not in self.graph.nodes:
            return None
        return self.graph.nodes[coordinate]['room']

    def connection_count(self, coordinate: RoomCoordinate) -> int:
        """Number of forward connections listed for a room in the layout."""
        if coordinate not in self.graph.nodes:
            return 0
        return self.graph.nodes[coordinate]['connections']

    def predecessors(self, coordinate: RoomCoordinate) -> list[RoomCoordinate]:
        """
        Rooms of the previous layer that connect forward into a room.

        Args:
            coordinate: Room to look up

        Returns:
            Predecessor coordinates in room index order; empty on layer 0
        """
        if coordinate not in self.graph.nodes or coordinate.layer == 0:
            return []
        return sorted(self.graph.predecessors(coordinate))

    def successors(self, coordinate: RoomCoordinate) -> list[RoomCoordinate]:
        if coordinate not in self.graph.nodes:
            return []
        return sorted(self.graph.successors(coordinate))

    def has_connection(self, source: RoomCoordinate, target: RoomCoordinate) -> bool:
        return self.graph.has_edge(source, target)
