"""Unit tests for command decorators."""

import pytest
import typer

from timeadair_cli.commands.decorators import command_wrapper
from timeadair_cli.utils.exit_codes import ERROR_GENERAL, ERROR_TERMINAL


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def ok():
            return 42

        assert ok() == 42

    def test_preserves_name(self):
        @command_wrapper
        def named():
            pass

        assert named.__name__ == "named"

    def test_terminal_error_exits_with_terminal_code(self, capsys):
        @command_wrapper
        def broken_tty():
            raise OSError(25, "Inappropriate ioctl for device")

        with pytest.raises(typer.Exit) as exc_info:
            broken_tty()

        assert exc_info.value.exit_code == ERROR_TERMINAL
        assert "Terminal I/O failed" in capsys.readouterr().out

    def test_closed_stdin_is_a_terminal_error(self):
        @command_wrapper
        def eof():
            raise EOFError("stdin closed")

        with pytest.raises(typer.Exit) as exc_info:
            eof()

        assert exc_info.value.exit_code == ERROR_TERMINAL

    def test_unexpected_error_exits_general(self):
        @command_wrapper
        def boom():
            raise RuntimeError("boom")

        with pytest.raises(typer.Exit) as exc_info:
            boom()

        assert exc_info.value.exit_code == ERROR_GENERAL

    def test_system_exit_passes_through(self):
        @command_wrapper
        def interrupted():
            raise SystemExit(0)

        with pytest.raises(SystemExit) as exc_info:
            interrupted()

        assert exc_info.value.code == 0

    def test_failures_are_logged(self, isolated_log_dir):
        from timeadair_cli.utils.logger import get_logger

        @command_wrapper
        def boom():
            raise RuntimeError("logged boom")

        with pytest.raises(typer.Exit):
            boom()

        for handler in get_logger().handlers:
            handler.flush()
        content = (isolated_log_dir / "timeadair.log").read_text(encoding="utf-8")
        assert "command failed: boom" in content
        assert "logged boom" in content
