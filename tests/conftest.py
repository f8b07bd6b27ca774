"""Shared test fixtures for the pcremote test suite.

Provides sample server payloads, a stub server built on
``httpx.MockTransport`` and mock collaborators for the UI layer.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from pcremote.client.http import RemoteClient
from pcremote.domain.models import CommandResult


# ---------------------------------------------------------------------------
# Server Payload Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def system_info_payload() -> dict:
    return {"temperature": 48.25, "hostname": "desktop"}


@pytest.fixture
def cpu_load_payload() -> dict:
    return {"load": 37.5}


@pytest.fixture
def memory_payload() -> dict:
    gib = 1024 ** 3
    return {
        "total": 16 * gib,
        "free": 4 * gib,
        "used": 12 * gib,
        "active": 8 * gib,
        "available": 6 * gib,
    }


@pytest.fixture
def disk_payload() -> list[dict]:
    gib = 1024 ** 3
    return [
        {"fs": "/dev/sda1", "type": "ext4", "used": 120 * gib, "size": 250 * gib},
        {"fs": "/dev/sdb1", "type": "ntfs", "used": 300 * gib, "size": 1000 * gib},
    ]


@pytest.fixture
def telemetry_payloads(
    system_info_payload: dict,
    cpu_load_payload: dict,
    memory_payload: dict,
    disk_payload: list[dict],
) -> dict:
    """Responses keyed by path, as the stub server serves them."""
    return {
        "/system-info": system_info_payload,
        "/cpu-load": cpu_load_payload,
        "/memory-info": memory_payload,
        "/disk-info": disk_payload,
    }


# ---------------------------------------------------------------------------
# Stub Server Fixtures
# ---------------------------------------------------------------------------


class StubServer:
    """Minimal in-process stand-in for the remote-control server.

    GETs are answered from ``payloads``; paths listed in ``failures`` get
    that status code instead. Every request is recorded.
    """

    def __init__(self, payloads: dict) -> None:
        self.payloads = dict(payloads)
        self.failures: dict[str, int] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path in self.failures:
            return httpx.Response(self.failures[path])
        if request.method == "GET":
            if path not in self.payloads:
                return httpx.Response(404)
            return httpx.Response(200, json=self.payloads[path])
        return httpx.Response(200, text="OK")

    @property
    def posts(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def post_bodies(self) -> list[dict | None]:
        return [json.loads(r.content) if r.content else None for r in self.posts]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def stub_server(telemetry_payloads: dict) -> StubServer:
    return StubServer(telemetry_payloads)


@pytest.fixture
def stub_client(stub_server: StubServer) -> RemoteClient:
    """A RemoteClient wired to the stub server. Connect it in the test."""
    return RemoteClient("http://remote.test:3000", transport=stub_server.transport())


# ---------------------------------------------------------------------------
# Mock Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_client() -> AsyncMock:
    """A mock RemoteClient; get/post are AsyncMocks."""
    return AsyncMock(spec=RemoteClient)


@pytest.fixture
def mock_dispatcher() -> AsyncMock:
    """A mock CommandDispatcher whose calls all succeed."""
    dispatcher = AsyncMock()
    ok = CommandResult(ok=True, path="/")
    for name in (
        "send_command",
        "send_volume_command",
        "click",
        "power",
        "turn_off",
        "turn_on",
        "suspend",
    ):
        getattr(dispatcher, name).return_value = ok
    return dispatcher


@pytest.fixture
def mock_poller() -> MagicMock:
    """A mock TelemetryPoller with no snapshot yet."""
    poller = MagicMock()
    poller.system_info = None
    poller.refresh = AsyncMock(return_value=True)
    return poller
