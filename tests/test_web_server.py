"""
Tests for the route monitor web server and its hook.

Uses FastAPI's TestClient; plans are published through RouteMonitorHook
exactly as the planner would.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from sanctumpath.hooks.route_monitor import RouteMonitorHook
from sanctumpath.planner import RoutePlanner
from sanctumpath.storage.models import FloorSnapshot, RoomAttributes, RoomCoordinate, RunContext
from sanctumpath.web.server import (
    ConnectionManager,
    app,
    connection_manager,
    plan_message,
    plan_store,
)
from sanctumpath.weights.tables import WeightTables


@pytest.fixture(autouse=True)
def reset_server_state():
    plan_store.clear()
    connection_manager.loop = None
    yield
    plan_store.clear()
    connection_manager.loop = None
    connection_manager.clients.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def planner():
    tables = WeightTables(room_type_weights={"Merchant_Floor1": 551})
    return RoutePlanner(tables, hooks=[RouteMonitorHook()], start=RoomCoordinate(1, 0))


@pytest.fixture
def snapshot():
    return FloorSnapshot(
        layout=[[[0], [0]], [[]]],
        rooms=[[RoomAttributes(), RoomAttributes(reward_room="Merchant")], [RoomAttributes()]],
        context=RunContext(floor_number=1, current_resolve=100),
    )


def test_plan_not_available_before_first_plan(client):
    response = client.get("/api/plan")

    assert response.status_code == 404


def test_get_plan(client, planner, snapshot):
    result = planner.plan(snapshot)

    response = client.get("/api/plan")

    assert response.status_code == 200
    data = response.json()
    assert data["path"] == [[1, 0], [0, 1]]
    assert data["current_position"] is None
    assert {"layer": 0, "room": 1, "cost": result.costs[RoomCoordinate(0, 1)]} in data["costs"]
    assert len(data["costs"]) == 3


def test_get_room(client, planner, snapshot):
    planner.plan(snapshot)

    response = client.get("/api/plan/rooms/0/1")

    assert response.status_code == 200
    data = response.json()
    assert data["on_path"] is True
    assert data["breakdown"]["room_type"] == 551
    assert data["breakdown"]["connections"] == 5
    assert data["cost"] == 1000000 - 551 - 5


def test_get_unknown_room(client, planner, snapshot):
    planner.plan(snapshot)

    response = client.get("/api/plan/rooms/4/4")

    assert response.status_code == 404


def test_hook_without_running_server_only_publishes(planner, snapshot):
    result = planner.plan(snapshot)

    assert plan_store.latest() is result


def test_websocket_receives_latest_plan(client, planner, snapshot):
    planner.plan(snapshot)

    with client.websocket_connect("/ws/live") as websocket:
        message = websocket.receive_json()

    assert message["type"] == "plan"
    assert message["path"] == [[1, 0], [0, 1]]


def test_send_plan_reaches_every_client(planner, snapshot):
    result = planner.plan(snapshot)
    first, second = AsyncMock(), AsyncMock()
    manager = ConnectionManager()
    manager.clients.update({first, second})

    asyncio.run(manager.send_plan(result))

    first.send_json.assert_awaited_once_with(plan_message(result))
    second.send_json.assert_awaited_once_with(plan_message(result))


def test_send_plan_drops_failing_client(planner, snapshot):
    result = planner.plan(snapshot)
    healthy, broken = AsyncMock(), AsyncMock()
    broken.send_json.side_effect = RuntimeError("connection reset")
    manager = ConnectionManager()
    manager.clients.update({healthy, broken})

    asyncio.run(manager.send_plan(result))

    assert manager.clients == {healthy}


def test_push_plan_needs_running_loop(planner, snapshot):
    result = planner.plan(snapshot)
    manager = ConnectionManager()

    assert manager.push_plan(result) is False
