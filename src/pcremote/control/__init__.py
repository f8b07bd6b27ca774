"""Command output for pcremote.

Public API:
    CommandDispatcher -- one POST per discrete user action
    RepeatPressController -- repeats move commands while a control is held
    Direction -- directional controls and their pointer displacement
"""

from pcremote.control.dispatcher import CommandDispatcher
from pcremote.control.repeat import Direction, RepeatPressController

__all__ = ["CommandDispatcher", "Direction", "RepeatPressController"]
