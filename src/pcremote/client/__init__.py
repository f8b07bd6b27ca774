"""HTTP access to the remote-control server.

Public API:
    RemoteClient -- async GET/POST wrapper around httpx
    RemoteClientError -- raised for transport, status and JSON failures
"""

from pcremote.client.http import RemoteClient, RemoteClientError

__all__ = ["RemoteClient", "RemoteClientError"]
