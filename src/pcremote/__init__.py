"""pcremote -- Remote-control client for a desktop computer.

Drives the remote machine's mouse, volume and power state, and shows
basic telemetry (CPU temperature/load, memory, disk) polled from a
plain HTTP/JSON server.
"""

__version__ = "0.1.0"
