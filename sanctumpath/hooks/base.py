"""
Hook base class for SanctumPath.

Provides an observer pattern interface with no-op default implementations.
Subclasses override only the methods they need. The planner wraps every
hook call in try/except so a broken hook never breaks a plan.
"""

import logging

from sanctumpath.storage.models import PlanResult, RoomCoordinate, RoomWeightBreakdown

logger = logging.getLogger(__name__)


class BaseHook:
    """
    Base class for all hooks in the SanctumPath event system.

    All methods are no-ops by default. Subclasses override selectively
    to handle specific events.
    """

    def on_costs_computed(
        self,
        costs: dict[RoomCoordinate, int],
        breakdowns: dict[RoomCoordinate, RoomWeightBreakdown],
    ) -> None:
        """Called once every room of the floor has been weighed."""
        pass

    def on_path_selected(
        self,
        path: list[RoomCoordinate],
        current_position: RoomCoordinate | None,
    ) -> None:
        """Called with the selected path at the end of every plan."""
        pass

    def on_plan_complete(self, result: PlanResult) -> None:
        """Called last, with the full result of the plan."""
        pass
