"""Command-line interface for the pcremote client.

Opens the remote-control window, or runs single operations against the
server for scripting and troubleshooting.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pcremote.domain.models import Command, PowerAction

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pcremote",
        description="Remote control for a desktop computer over HTTP",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/pcremote.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("gui", help="Open the remote-control window")
    subparsers.add_parser("info", help="Fetch and print system telemetry once")

    send_parser = subparsers.add_parser("send", help="Send a single command")
    send_parser.add_argument(
        "name", choices=[c.value for c in Command],
        help="Command to send",
    )
    send_parser.add_argument("--x", type=int, default=None, help="Horizontal displacement")
    send_parser.add_argument("--y", type=int, default=None, help="Vertical displacement")

    power_parser = subparsers.add_parser("power", help="Send a power action")
    power_parser.add_argument(
        "action", choices=[a.value for a in PowerAction],
        help="Power action to perform",
    )

    args = parser.parse_args(argv)
    if (
        args.command == "send"
        and args.name == Command.MOVE_MOUSE.value
        and (args.x is None or args.y is None)
    ):
        send_parser.error("move_mouse requires both --x and --y")
    return args


def _build_client(settings):
    from pcremote.client.http import RemoteClient

    return RemoteClient(
        base_url=settings.server.base_url,
        timeout=settings.server.timeout,
    )


async def _run_gui(settings) -> None:
    """Build all components and run the window until it is closed."""
    from pcremote.control.dispatcher import CommandDispatcher
    from pcremote.control.repeat import RepeatPressController
    from pcremote.telemetry.poller import TelemetryPoller
    from pcremote.ui.app import RemoteApp
    from pcremote.ui.state import AppState

    async with _build_client(settings) as client:
        dispatcher = CommandDispatcher(client)
        state = AppState(
            poller=TelemetryPoller(client),
            dispatcher=dispatcher,
            controller=RepeatPressController(
                dispatcher,
                interval=settings.control.repeat_interval,
                step=settings.control.move_step,
            ),
        )
        await RemoteApp(state, settings.display).run()


async def _print_info(settings) -> int:
    """Fetch telemetry once and print it."""
    from pcremote.telemetry.poller import TelemetryError, TelemetryPoller
    from pcremote.ui.state import disk_rows, system_info_rows

    async with _build_client(settings) as client:
        try:
            info = await TelemetryPoller(client).fetch_system_info()
        except TelemetryError as e:
            print(f"Could not fetch system info: {e}", file=sys.stderr)
            return 1

    for label, value in system_info_rows(info):
        print(f"{label:<22}{value}")
    print("Disco:")
    for label, value in disk_rows(info):
        print(f"  {label} {value}")
    return 0


async def _send(settings, args) -> int:
    from pcremote.control.dispatcher import CommandDispatcher

    async with _build_client(settings) as client:
        dispatcher = CommandDispatcher(client)
        if args.command == "power":
            result = await dispatcher.power(args.action)
        else:
            result = await dispatcher.send_command(args.name, args.x, args.y)

    if not result.ok:
        print(f"Request to {result.path} failed: {result.error}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the pcremote CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return 0

    from pcremote.config.settings import load_settings
    from pcremote.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "gui":
        logger.info("Opening remote control for %s", settings.server.base_url)
        asyncio.run(_run_gui(settings))
        return 0

    if args.command == "info":
        return asyncio.run(_print_info(settings))

    logger.info("Sending %s to %s", args.command, settings.server.base_url)
    return asyncio.run(_send(settings, args))


if __name__ == "__main__":
    sys.exit(main())
