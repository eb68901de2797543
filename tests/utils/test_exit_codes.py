"""Unit tests for timeadair_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from timeadair_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_TERMINAL,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)


class TestExitCodeConstants:
    def test_success_is_zero(self):
        assert SUCCESS == 0

    def test_errors_are_non_zero_and_unique(self):
        codes = [ERROR_GENERAL, ERROR_TERMINAL]
        assert 0 not in codes
        assert len(codes) == len(set(codes))


class TestHelpers:
    @pytest.mark.parametrize(
        "code,name",
        [
            (SUCCESS, "SUCCESS"),
            (ERROR_GENERAL, "ERROR_GENERAL"),
            (ERROR_TERMINAL, "ERROR_TERMINAL"),
        ],
    )
    def test_names(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown_name(self):
        assert get_exit_code_name(99) == "UNKNOWN(99)"

    def test_terminal_description_mentions_terminal(self):
        assert "Terminal" in get_exit_code_description(ERROR_TERMINAL)

    def test_unknown_description(self):
        assert get_exit_code_description(-1) == "Unknown error"
