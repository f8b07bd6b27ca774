"""View state and text formatting for the remote-control UI.

Nothing here touches pygame: the renderer reads ``AppState`` and the row
helpers, and forwards user input to it.
"""

from __future__ import annotations

import logging

from pcremote.control.dispatcher import CommandDispatcher
from pcremote.control.repeat import RepeatPressController
from pcremote.domain.models import SystemInfo, View
from pcremote.telemetry.poller import TelemetryPoller

logger = logging.getLogger(__name__)

GIB = 1024 ** 3


def format_gb(num_bytes: int) -> str:
    return f"{num_bytes / GIB:.2f} GB"


def format_temperature(celsius: float) -> str:
    return f"{celsius:.2f}ºC"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def system_info_rows(info: SystemInfo) -> list[tuple[str, str]]:
    """Label/value pairs for the system info view, in display order."""
    memory = info.memory
    return [
        ("Temperatura CPU:", format_temperature(info.temperature)),
        ("Carga de la CPU:", format_percent(info.cpu_load)),
        ("Memoria Total:", format_gb(memory.total)),
        ("Memoria Libre:", format_gb(memory.free)),
        ("Memoria Usada:", format_gb(memory.used)),
        ("Memoria Activa:", format_gb(memory.active)),
        ("Memoria Disponible:", format_gb(memory.available)),
    ]


def disk_rows(info: SystemInfo) -> list[tuple[str, str]]:
    return [
        (f"{disk.fs} ({disk.type}):", f"{format_gb(disk.used)} usados de {format_gb(disk.size)}")
        for disk in info.disk
    ]


def system_info_lines(info: SystemInfo) -> list[tuple[str, str | None]]:
    """Every line of the system info view; section titles have no value."""
    return [
        ("Información del Sistema", None),
        *system_info_rows(info),
        ("Disco:", None),
        *disk_rows(info),
    ]


def row_window(count: int, offset: int, capacity: int) -> tuple[int, int]:
    """Slice ``[start, stop)`` of ``count`` rows shown when scrolled by ``offset``.

    The offset is clamped so the last page stays full and never goes negative.
    """
    capacity = max(1, capacity)
    start = min(max(0, offset), max(0, count - capacity))
    return start, min(count, start + capacity)


class AppState:
    """Which view is showing, plus the collaborators the views act on.

    Collaborators are passed in explicitly so views never look them up.
    """

    def __init__(
        self,
        poller: TelemetryPoller,
        dispatcher: CommandDispatcher,
        controller: RepeatPressController,
    ) -> None:
        self.poller = poller
        self.dispatcher = dispatcher
        self.controller = controller
        self._view = View.CONTROL

    @property
    def view(self) -> View:
        return self._view

    @property
    def system_info(self) -> SystemInfo | None:
        return self.poller.system_info

    async def mount(self) -> None:
        """Initial telemetry fetch when the UI first appears."""
        await self.poller.refresh()

    def show_control(self) -> None:
        self._view = View.CONTROL
        logger.debug("Showing control view")

    async def show_system_info(self) -> None:
        """Switch to the system info view and poll fresh telemetry."""
        self._view = View.SYSTEM_INFO
        logger.debug("Showing system info view, refreshing telemetry")
        await self.poller.refresh()
