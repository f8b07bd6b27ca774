"""Presentation layer for pcremote.

Public API:
    AppState -- active view plus the collaborators the views act on
    RemoteApp -- pygame window rendering the views
"""

from pcremote.ui.state import AppState

__all__ = ["AppState", "RemoteApp"]


def __getattr__(name: str) -> type:
    """Lazy import for the window, which needs pygame."""
    if name == "RemoteApp":
        from pcremote.ui.app import RemoteApp
        return RemoteApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
