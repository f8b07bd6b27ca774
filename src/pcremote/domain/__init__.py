"""Domain models for pcremote.

This package contains the data structures and enumerations shared by the
client, telemetry and UI layers. All models use Pydantic v2 for
validation and serialization.
"""

from pcremote.domain.models import (
    Command,
    CommandRequest,
    CommandResult,
    DiskInfo,
    MemoryInfo,
    PowerAction,
    SystemInfo,
    View,
)

__all__ = [
    "Command",
    "CommandRequest",
    "CommandResult",
    "DiskInfo",
    "MemoryInfo",
    "PowerAction",
    "SystemInfo",
    "View",
]
