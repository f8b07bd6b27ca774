"""Telemetry polling for pcremote."""

from pcremote.telemetry.poller import TelemetryError, TelemetryPoller, merge_system_info

__all__ = ["TelemetryError", "TelemetryPoller", "merge_system_info"]
