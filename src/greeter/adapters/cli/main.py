"""Process entry for the ``greeter`` command line.

:func:`main` backs both the console script and ``python -m greeter``. The
root group runs in non-standalone mode, so every outcome comes back here
and leaves as an integer exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .exit_codes import ExitCode
from .root import cli
from .tracebacks import TracebackSettings

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _report_crash(exc: BaseException) -> int:
    """Print lib_cli_exit_tools' error report for ``exc`` and pick its code.

    Must run inside the ``except`` block that caught ``exc``.
    """
    settings = TracebackSettings.verbose(TracebackSettings.current().show)
    settings.apply()
    lib_cli_exit_tools.print_exception_message(trace_back=settings.show, length_limit=settings.length_limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli has no way to hand ``obj`` to the group.
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt get the same report
        return _report_crash(exc)
    return ExitCode.SUCCESS


def _stop_logging() -> None:
    """Shut lib_log_rich down, unless a worker thread is the caller."""
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``greeter`` and return its exit code.

    Args:
        argv: Arguments after the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back to what they were
            before the run.
        services_factory: Builds the AppServices for this run. The console
            script passes ``build_production``.

    Raises:
        ValueError: If no services_factory is given.

    Example:
        >>> from greeter.composition import build_production
        >>> main(["hello", "Ada"], services_factory=build_production)  # doctest: +SKIP
        Hello, Ada!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required; the console script passes build_production.")

    saved = TracebackSettings.current()
    try:
        return _invoke(argv, services_factory)
    finally:
        if restore_traceback:
            saved.apply()
        _stop_logging()


__all__ = ["main"]
