"""FastAPI web server for SanctumPath route monitoring."""

import asyncio
import logging
import threading

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse

from sanctumpath.reporting import format_room_label
from sanctumpath.storage.models import PlanResult, RoomCoordinate

logger = logging.getLogger(__name__)


class ConnectionManager:
    """
    Live WebSocket clients of the route monitor.

    Plans are produced on the planner thread; push_plan() hands them to the
    server's event loop, captured when the first client connects.
    """

    def __init__(self):
        self.clients: set[WebSocket] = set()
        self.loop: asyncio.AbstractEventLoop | None = None

    async def connect(self, websocket: WebSocket) -> None:
        if self.loop is None:
            self.loop = asyncio.get_running_loop()
        await websocket.accept()
        self.clients.add(websocket)
        logger.info(f"Route monitor client connected ({len(self.clients)} live)")

    def disconnect(self, websocket: WebSocket) -> None:
        self.clients.discard(websocket)
        logger.info(f"Route monitor client left ({len(self.clients)} live)")

    async def send_plan(self, plan: PlanResult) -> None:
        """Send a plan to every client, dropping clients that fail."""
        message = plan_message(plan)
        for client in list(self.clients):
            try:
                await client.send_json(message)
            except Exception as e:
                logger.warning(f"Dropping route monitor client: {e}")
                self.disconnect(client)

    def push_plan(self, plan: PlanResult) -> bool:
        """
        Schedule send_plan() from outside the server thread.

        Args:
            plan: Plan to push

        Returns:
            False if no server loop is running to send it
        """
        loop = self.loop
        if loop is None or not loop.is_running():
            return False
        asyncio.run_coroutine_threadsafe(self.send_plan(plan), loop)
        return True


def plan_message(plan: PlanResult) -> dict:
    """WebSocket message carrying a plan."""
    return {"type": "plan", **plan.to_dict()}


class PlanStore:
    """Latest plan, written by the planner thread and read by request handlers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._plan: PlanResult | None = None
        self.debug = False

    def publish(self, plan: PlanResult) -> None:
        with self._lock:
            self._plan = plan

    def latest(self) -> PlanResult | None:
        with self._lock:
            return self._plan

    def clear(self) -> None:
        with self._lock:
            self._plan = None


# Global instances shared with the route monitor hook
connection_manager = ConnectionManager()
plan_store = PlanStore()

app = FastAPI(title="SanctumPath Route Monitor", version="1.0.0")


@app.get("/api/plan")
async def get_plan():
    """Latest selected path and the cost of every room."""
    plan = plan_store.latest()
    if plan is None:
        return JSONResponse({"error": "No plan computed yet"}, status_code=404)
    return JSONResponse(plan.to_dict())


@app.get("/api/plan/rooms/{layer}/{room}")
async def get_room(layer: int, room: int):
    """Cost, weight breakdown and label of a single room."""
    plan = plan_store.latest()
    if plan is None:
        return JSONResponse({"error": "No plan computed yet"}, status_code=404)

    coordinate = RoomCoordinate(layer, room)
    breakdown = plan.breakdowns.get(coordinate)
    if breakdown is None:
        return JSONResponse({"error": f"Room {coordinate} not found"}, status_code=404)

    return JSONResponse({
        "cost": plan.costs[coordinate],
        "on_path": coordinate in plan.path,
        "breakdown": breakdown.to_dict(),
        "label": format_room_label(breakdown, debug=plan_store.debug),
    })


@app.websocket("/ws/live")
async def websocket_endpoint(websocket: WebSocket):
    """Push every new plan to the connected client."""
    await connection_manager.connect(websocket)
    try:
        plan = plan_store.latest()
        if plan is not None:
            await websocket.send_json(plan_message(plan))
        while True:
            # Keep the connection open; clients don't send anything meaningful
            await websocket.receive_text()
    except WebSocketDisconnect:
        connection_manager.disconnect(websocket)
