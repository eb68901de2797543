"""
Exit codes for Tìmeadair CLI.

Every voluntary way out of the timer (declining a session, quitting,
Ctrl+C) is a success. Only an unusable terminal is an error.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Terminal I/O failure (raw mode, polling, writing frames)
ERROR_TERMINAL = 3


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_TERMINAL: "ERROR_TERMINAL",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer exited normally",
        ERROR_GENERAL: "A general error occurred",
        ERROR_TERMINAL: "Terminal is not usable - run from an interactive shell",
    }
    return descriptions.get(code, "Unknown error")
