"""Exit codes of the ``greeter`` command line."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes.

    ``INVALID_ARGUMENT`` follows errno ``EINVAL``; ``CONFIG_ERROR`` is
    sysexits ``EX_CONFIG``. The signal codes are what lib_cli_exit_tools
    reports for SIGINT, SIGPIPE and SIGTERM; no command returns them itself.

    Example:
        >>> ExitCode(78).name
        'CONFIG_ERROR'
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
