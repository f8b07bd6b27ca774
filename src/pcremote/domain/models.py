"""Core domain models for the pcremote client.

These models represent the data flowing between the client and the
remote-control server: telemetry polled from the server, command
requests sent to it, and the outcome of each dispatch.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Command(str, enum.Enum):
    """Command names understood by the server's root endpoint."""

    MOVE_MOUSE = "move_mouse"
    CLICK_MOUSE = "click_mouse"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"


class PowerAction(str, enum.Enum):
    """Power actions; each value is the server sub-path that performs it."""

    TURN_OFF = "turn-off"
    RESTART = "restart"
    SUSPEND = "suspend"

    @property
    def path(self) -> str:
        return f"/{self.value}"


class View(str, enum.Enum):
    """The two mutually exclusive content views."""

    CONTROL = "control"
    SYSTEM_INFO = "system_info"


# ---------------------------------------------------------------------------
# Telemetry Models
# ---------------------------------------------------------------------------


class MemoryInfo(BaseModel):
    """Memory counters reported by ``/memory-info``, in bytes."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    free: int = Field(ge=0)
    used: int = Field(ge=0)
    active: int = Field(ge=0)
    available: int = Field(ge=0)


class DiskInfo(BaseModel):
    """One filesystem entry reported by ``/disk-info``."""

    model_config = ConfigDict(frozen=True)

    fs: str = Field(description="Filesystem / device name")
    type: str = Field(description="Filesystem type (ext4, ntfs, ...)")
    used: int = Field(ge=0, description="Used bytes")
    size: int = Field(ge=0, description="Total bytes")


class SystemInfo(BaseModel):
    """Merged telemetry snapshot of the remote machine.

    Built from four server responses at once. Any extra fields sent by
    ``/system-info`` are kept alongside the known ones.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    temperature: float = Field(description="CPU temperature in degrees Celsius")
    cpu_load: float = Field(alias="cpuLoad", description="CPU load in percent")
    memory: MemoryInfo
    disk: list[DiskInfo] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Command Models
# ---------------------------------------------------------------------------


class CommandRequest(BaseModel):
    """Body of a POST to the server's root endpoint."""

    model_config = ConfigDict(frozen=True)

    command: str
    x: int | None = None
    y: int | None = None

    def to_payload(self) -> dict:
        """JSON body with unset coordinates left out."""
        return self.model_dump(exclude_none=True)


class CommandResult(BaseModel):
    """Outcome of a single dispatched request."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    path: str = Field(description="Server path the request was sent to")
    error: str | None = None
