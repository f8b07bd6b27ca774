"""Maps user actions to command requests on the remote-control server."""

from __future__ import annotations

import logging

from pcremote.client.http import RemoteClient, RemoteClientError
from pcremote.domain.models import Command, CommandRequest, CommandResult, PowerAction

logger = logging.getLogger(__name__)

COMMAND_PATH = "/"


class CommandDispatcher:
    """Sends one POST per user action.

    Failures never propagate: each call logs the error and reports it in
    the returned ``CommandResult``, leaving the caller free to ignore it.
    """

    def __init__(self, client: RemoteClient) -> None:
        self._client = client

    async def send_command(
        self, command: Command | str, x: int | None = None, y: int | None = None
    ) -> CommandResult:
        """POST ``{command, x, y}`` to the root endpoint, omitting unset coordinates."""
        if isinstance(command, Command):
            command = command.value
        request = CommandRequest(command=command, x=x, y=y)
        result = await self._post(COMMAND_PATH, request.to_payload())
        if result.ok:
            logger.debug("Sent command: %s", request.to_payload())
        return result

    async def send_volume_command(self, command: Command | str) -> CommandResult:
        """Send a volume command; volume commands carry no coordinates."""
        return await self.send_command(command)

    async def click(self) -> CommandResult:
        return await self.send_command(Command.CLICK_MOUSE)

    async def power(self, action: PowerAction | str) -> CommandResult:
        """POST an empty body to the power action's sub-path."""
        action = PowerAction(action)
        result = await self._post(action.path, None)
        if result.ok:
            logger.info("Power action sent: %s", action.value)
        return result

    async def turn_off(self) -> CommandResult:
        return await self.power(PowerAction.TURN_OFF)

    async def turn_on(self) -> CommandResult:
        # Bound to the restart control; the server has no power-on path.
        return await self.power(PowerAction.RESTART)

    async def suspend(self) -> CommandResult:
        return await self.power(PowerAction.SUSPEND)

    async def _post(self, path: str, body: dict | None) -> CommandResult:
        try:
            await self._client.post(path, body)
        except RemoteClientError as e:
            logger.error("Command to %s failed: %s", path, e)
            return CommandResult(ok=False, path=path, error=str(e))
        return CommandResult(ok=True, path=path)
