"""
Best path selection for SanctumPath.

Runs a Dijkstra-style relaxation over the layered floor graph, starting at
the fixed entry room and walking into the previous layer at each step, then
picks the deepest-reaching route or the route to the player's position.
"""

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from sanctumpath.managers.floor_manager import FloorTopology
from sanctumpath.storage.models import RoomCoordinate

logger = logging.getLogger(__name__)

# Entry room in the game's layout indexing
START_NODE = RoomCoordinate(7, 0)


@dataclass
class SolveResult:
    """Selected path plus every recorded best path and its cost."""
    path: list[RoomCoordinate] = field(default_factory=list)
    best_paths: dict[RoomCoordinate, list[RoomCoordinate]] = field(default_factory=dict)
    min_cost: dict[RoomCoordinate, float] = field(default_factory=dict)


class PathSolver:
    """Minimum-cost path search over a floor topology and its cost table."""

    def __init__(
        self,
        topology: FloorTopology,
        costs: dict[RoomCoordinate, int],
        start: RoomCoordinate = START_NODE,
    ):
        """
        Initialize the solver.

        Args:
            topology: Floor layout
            costs: Cost of every room, as built by the weight model
            start: Entry room the search starts from
        """
        self.topology = topology
        self.costs = costs
        self.start = start

    def solve(self, current_position: Optional[RoomCoordinate] = None) -> SolveResult:
        """
        Compute best paths from the start room and select one.

        Args:
            current_position: Room the player already occupies, or None

        Returns:
            SolveResult; its path is empty when nothing could be selected
        """
        if self.start not in self.costs:
            logger.warning(f"Start room {self.start} is not on the floor, no path")
            return SolveResult()

        min_cost, best_paths = self._relax()
        if current_position is not None:
            path = best_paths.get(current_position, [])
            if not path:
                logger.warning(f"No recorded path to current position {current_position}")
        else:
            path = self._select_deepest(best_paths, min_cost)

        return SolveResult(path=list(path), best_paths=best_paths, min_cost=min_cost)

    def find_best_path(self, current_position: Optional[RoomCoordinate] = None) -> list[RoomCoordinate]:
        return self.solve(current_position).path

    def _relax(self) -> tuple[dict[RoomCoordinate, float], dict[RoomCoordinate, list[RoomCoordinate]]]:
        min_cost: dict[RoomCoordinate, float] = {room: math.inf for room in self.costs}
        min_cost[self.start] = self.costs[self.start]
        best_paths = {self.start: [self.start]}

        queue = [(min_cost[self.start], self.start)]
        while queue:
            cost, current = heapq.heappop(queue)
            if cost > min_cost[current]:
                continue  # stale entry

            for neighbor in self.topology.predecessors(current):
                if neighbor not in self.costs:
                    logger.debug(f"Room {neighbor} has no cost, skipping")
                    continue

                neighbor_cost = cost + self.costs[neighbor]
                if neighbor_cost < min_cost[neighbor]:
                    min_cost[neighbor] = neighbor_cost
                    best_paths[neighbor] = best_paths[current] + [neighbor]
                    heapq.heappush(queue, (neighbor_cost, neighbor))

        return min_cost, best_paths

    @staticmethod
    def _select_deepest(
        best_paths: dict[RoomCoordinate, list[RoomCoordinate]],
        min_cost: dict[RoomCoordinate, float],
    ) -> list[RoomCoordinate]:
        """Longest recorded path, cheapest end room among equal lengths."""
        if not best_paths:
            return []

        longest = max(len(path) for path in best_paths.values())
        candidates = [room for room, path in best_paths.items() if len(path) == longest]
        # min() keeps the first recorded room on exact ties
        end = min(candidates, key=lambda room: min_cost.get(room, math.inf))
        return best_paths[end]
