"""Tests for the command-line interface."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from pcremote.cli import main, parse_args
from pcremote.domain.models import CommandResult


class TestParseArgs:
    def test_send_with_coordinates(self) -> None:
        args = parse_args(["send", "move_mouse", "--x", "45", "--y", "0"])
        assert args.command == "send"
        assert args.name == "move_mouse"
        assert (args.x, args.y) == (45, 0)

    def test_send_rejects_unknown_command(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["send", "dance"])

    def test_power_action(self) -> None:
        args = parse_args(["-v", "power", "restart"])
        assert args.verbose
        assert args.action == "restart"

    def test_no_command(self) -> None:
        assert parse_args([]).command is None


class TestMain:
    def test_send_returns_nonzero_on_failure(self, tmp_path) -> None:
        failed = CommandResult(ok=False, path="/", error="unreachable")
        with patch(
            "pcremote.control.dispatcher.CommandDispatcher.send_command",
            new=AsyncMock(return_value=failed),
        ):
            code = main(["-c", str(tmp_path / "none.yaml"), "send", "click_mouse"])
        assert code == 1

    def test_power_success(self, tmp_path) -> None:
        ok = CommandResult(ok=True, path="/suspend")
        with patch(
            "pcremote.control.dispatcher.CommandDispatcher.power",
            new=AsyncMock(return_value=ok),
        ) as power:
            code = main(["-c", str(tmp_path / "none.yaml"), "power", "suspend"])
        assert code == 0
        power.assert_awaited_once_with("suspend")


class TestMoveMouseCoordinates:
    def test_move_mouse_without_coordinates_is_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["send", "move_mouse"])
        assert exc_info.value.code == 2

    def test_move_mouse_with_one_coordinate_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["send", "move_mouse", "--x", "45"])

    def test_main_does_not_post_incomplete_move(self, tmp_path) -> None:
        send = AsyncMock()
        with patch("pcremote.control.dispatcher.CommandDispatcher.send_command", new=send):
            with pytest.raises(SystemExit):
                main(["-c", str(tmp_path / "none.yaml"), "send", "move_mouse", "--y", "0"])
        send.assert_not_called()

    def test_other_commands_need_no_coordinates(self) -> None:
        args = parse_args(["send", "volume_up"])
        assert args.x is None and args.y is None
