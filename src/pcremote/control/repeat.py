"""Press-and-hold repetition of mouse move commands.

While a directional control is held, the move command is re-sent on a
fixed cadence. Ticks follow the event loop clock and do not wait for the
previous request to finish, so a slow server sees overlapping requests.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Coroutine

from pcremote.control.dispatcher import CommandDispatcher
from pcremote.domain.models import Command

logger = logging.getLogger(__name__)

DEFAULT_REPEAT_INTERVAL = 0.1
DEFAULT_MOVE_STEP = 45


class Direction(str, enum.Enum):
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"

    def delta(self, step: int = DEFAULT_MOVE_STEP) -> tuple[int, int]:
        """Pointer displacement for one move in this direction.

        Screen coordinates: y grows downwards.
        """
        dx, dy = _UNIT_VECTORS[self]
        return dx * step, dy * step


_UNIT_VECTORS = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


class RepeatPressController:
    """Two-state controller (idle / moving) owning the repeat timer.

    Only one timer can be live: ``start_moving`` while moving is a no-op,
    and ``stop_moving`` while idle is a no-op. Both must be called from
    the thread running the event loop.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        interval: float = DEFAULT_REPEAT_INTERVAL,
        step: int = DEFAULT_MOVE_STEP,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._dispatcher = dispatcher
        self._interval = interval
        self._step = step
        self._timer: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()

    @property
    def is_moving(self) -> bool:
        return self._timer is not None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def in_flight(self) -> int:
        """Number of dispatched commands that have not completed yet."""
        return len(self._in_flight)

    def start_moving(self, command: Command | str, x: int, y: int) -> bool:
        """Start repeating ``command`` with the fixed ``(x, y)``.

        Returns False without touching the running timer when already moving.
        """
        if self._timer is not None:
            logger.debug("Already moving, ignoring start for %s (%d, %d)", command, x, y)
            return False
        loop = asyncio.get_running_loop()
        self._timer = loop.create_task(self._repeat(command, x, y), name="repeat-press")
        logger.debug("Started moving: %s (%d, %d)", command, x, y)
        return True

    def stop_moving(self) -> bool:
        """Cancel the repeat timer. Requests already sent are left to finish."""
        if self._timer is None:
            return False
        self._timer.cancel()
        self._timer = None
        logger.debug("Stopped moving")
        return True

    def press(self, direction: Direction | str) -> bool:
        """Start moving the pointer in ``direction`` by the configured step."""
        x, y = Direction(direction).delta(self._step)
        return self.start_moving(Command.MOVE_MOUSE, x, y)

    def release(self) -> bool:
        return self.stop_moving()

    async def aclose(self) -> None:
        """Stop moving and wait for outstanding move commands."""
        self.stop_moving()
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def _repeat(self, command: Command | str, x: int, y: int) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self._interval
        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            self._spawn(self._dispatcher.send_command(command, x, y))
            next_tick += self._interval
            # Missed ticks are dropped rather than sent in a burst.
            now = loop.time()
            while next_tick <= now:
                next_tick += self._interval

    def _spawn(self, coro: Coroutine) -> None:
        task = asyncio.ensure_future(coro)
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
