"""Telemetry polling for the remote machine.

Reads four server endpoints in parallel and merges them into a single
``SystemInfo``. A poll either fully succeeds or changes nothing.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from pcremote.client.http import RemoteClient, RemoteClientError
from pcremote.domain.models import SystemInfo

logger = logging.getLogger(__name__)

SYSTEM_INFO_PATH = "/system-info"
CPU_LOAD_PATH = "/cpu-load"
MEMORY_INFO_PATH = "/memory-info"
DISK_INFO_PATH = "/disk-info"

TELEMETRY_PATHS = (SYSTEM_INFO_PATH, CPU_LOAD_PATH, MEMORY_INFO_PATH, DISK_INFO_PATH)


class TelemetryError(Exception):
    """Raised when a telemetry poll cannot produce a complete snapshot."""


def merge_system_info(base: Any, cpu_load: Any, memory: Any, disk: Any) -> SystemInfo:
    """Combine the four endpoint payloads into one ``SystemInfo``.

    Fields of ``base`` are kept as-is; ``cpuLoad`` comes from the ``load``
    field of the CPU response and ``memory``/``disk`` replace whatever
    ``base`` had under those names.

    Raises:
        TelemetryError: If a payload does not have the expected shape.
    """
    if not isinstance(base, dict):
        raise TelemetryError(f"{SYSTEM_INFO_PATH} did not return an object")
    if not isinstance(cpu_load, dict) or "load" not in cpu_load:
        raise TelemetryError(f"{CPU_LOAD_PATH} did not return a load value")
    if not isinstance(disk, list):
        raise TelemetryError(f"{DISK_INFO_PATH} did not return a list")

    merged = {**base, "cpuLoad": cpu_load["load"], "memory": memory, "disk": disk}
    merged.pop("cpu_load", None)
    try:
        return SystemInfo.model_validate(merged)
    except ValidationError as e:
        raise TelemetryError(f"Malformed telemetry: {e}") from e


class TelemetryPoller:
    """Fetches telemetry on demand and keeps the last good snapshot."""

    def __init__(self, client: RemoteClient) -> None:
        self._client = client
        self._system_info: SystemInfo | None = None

    @property
    def system_info(self) -> SystemInfo | None:
        """Last successfully fetched snapshot, or None if none succeeded yet."""
        return self._system_info

    async def fetch_system_info(self) -> SystemInfo:
        """Poll all four endpoints concurrently and merge the results.

        Does not touch the stored snapshot. The first failed request
        cancels the ones still running.

        Raises:
            TelemetryError: If any request fails or any payload is malformed.
        """
        tasks = [asyncio.ensure_future(self._client.get(path)) for path in TELEMETRY_PATHS]
        try:
            base, cpu_load, memory, disk = await asyncio.gather(*tasks)
        except RemoteClientError as e:
            raise TelemetryError(str(e)) from e
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
        return merge_system_info(base, cpu_load, memory, disk)

    async def refresh(self) -> bool:
        """Fetch a new snapshot and store it; log and keep the old one on failure."""
        try:
            info = await self.fetch_system_info()
        except TelemetryError as e:
            logger.error("Failed to fetch system info: %s", e)
            return False
        self._system_info = info
        logger.debug(
            "System info updated: %.1fºC, load %.1f%%, %d disks",
            info.temperature, info.cpu_load, len(info.disk),
        )
        return True
