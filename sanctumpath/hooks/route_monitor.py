"""
Route monitoring hook for SanctumPath.

Publishes every plan to the web server's plan store and pushes it to the
connected WebSocket clients.
"""

import logging

from sanctumpath.hooks.base import BaseHook
from sanctumpath.storage.models import PlanResult
from sanctumpath.web.server import connection_manager, plan_store

logger = logging.getLogger(__name__)


class RouteMonitorHook(BaseHook):
    """
    Hook that makes the latest plan available to the route monitor.

    Each plan is broadcast as a JSON message with "type": "plan".
    """

    def __init__(self, debug: bool = False) -> None:
        plan_store.debug = debug
        self._plans_published = 0

    def on_plan_complete(self, result: PlanResult) -> None:
        plan_store.publish(result)
        self._plans_published += 1
        logger.debug(f"Published plan #{self._plans_published} ({len(result.path)} rooms)")
        if not connection_manager.push_plan(result):
            logger.debug("No route monitor client has connected yet, plan stored only")
