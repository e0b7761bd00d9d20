"""
Route planner for SanctumPath.

Runs one evaluation cycle: lays out the floor, weighs every room, searches
for the best path and notifies hooks. Each call to plan() is independent;
deciding when to re-plan is up to the caller.
"""

import logging

from sanctumpath.hooks.base import BaseHook
from sanctumpath.managers.floor_manager import FloorTopology
from sanctumpath.managers.path_solver import START_NODE, PathSolver
from sanctumpath.managers.weight_model import WeightModel
from sanctumpath.storage.models import FloorSnapshot, PlanResult, RoomCoordinate
from sanctumpath.weights.tables import WeightTables

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    Coordinates the weight model and path solver for a floor snapshot.
    """

    def __init__(
        self,
        tables: WeightTables,
        hooks: list[BaseHook] | None = None,
        start: RoomCoordinate = START_NODE,
    ) -> None:
        """
        Initialize the planner.

        Args:
            tables: Weight tables of the active profile
            hooks: Hooks to notify on every plan
            start: Entry room of the floor layout
        """
        self.tables = tables
        self.start = start
        self._hooks: list[BaseHook] = list(hooks or [])

    def register_hook(self, hook: BaseHook) -> None:
        """
        Register a hook to receive planning events.

        Args:
            hook: Hook instance to register.
        """
        self._hooks.append(hook)
        logger.info(f"Registered hook: {hook.__class__.__name__}")

    def plan(self, snapshot: FloorSnapshot) -> PlanResult:
        """
        Compute the best route for a floor snapshot.

        Args:
            snapshot: Floor layout, room attributes and run state

        Returns:
            PlanResult with the selected path and every room's cost
        """
        topology = FloorTopology(snapshot.layout, snapshot.rooms)
        model = WeightModel(self.tables, snapshot.context)

        costs, breakdowns = model.build_cost_table(topology)
        self._fire_hooks("on_costs_computed", costs=costs, breakdowns=breakdowns)

        solver = PathSolver(topology, costs, start=self.start)
        path = solver.find_best_path(snapshot.current_position)
        self._fire_hooks(
            "on_path_selected", path=path, current_position=snapshot.current_position
        )

        result = PlanResult(
            path=path,
            costs=costs,
            breakdowns=breakdowns,
            current_position=snapshot.current_position,
        )
        self._fire_hooks("on_plan_complete", result=result)

        logger.info(
            f"Planned floor {snapshot.context.floor_number}: {len(costs)} rooms, "
            f"path of {len(path)} rooms"
        )
        return result

    def _fire_hooks(self, method_name: str, **kwargs) -> None:
        """
        Call a hook method on all registered hooks.

        Each call is wrapped in try/except so a broken hook never
        breaks a plan.

        Args:
            method_name: Name of the hook method to call.
            **kwargs: Arguments to pass to the hook method.
        """
        for hook in self._hooks:
            try:
                method = getattr(hook, method_name, None)
                if method:
                    method(**kwargs)
            except Exception as e:
                logger.error(
                    f"Hook {hook.__class__.__name__}.{method_name} failed: {e}",
                    exc_info=True,
                )
