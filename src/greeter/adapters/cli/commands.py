"""Commands of the ``greeter`` group.

Contents:
    * :func:`cli_hello` - print the greeting.
    * :func:`cli_info` - print package metadata.
    * :func:`cli_fail` - raise on purpose to exercise the error path.
    * :func:`cli_config` - show the merged configuration, read-only.
"""

from __future__ import annotations

import logging
from typing import Final, NoReturn

import lib_log_rich.runtime
import rich_click as click

from greeter import __init__conf__
from greeter.domain.enums import OutputFormat
from greeter.domain.errors import ConfigurationError

from .exit_codes import ExitCode
from .session import current_session

logger = logging.getLogger(__name__)

#: ``-h`` works next to ``--help`` on the group and on every command.
CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


def _exit_with(code: ExitCode, message: str, cause: Exception) -> NoReturn:
    click.echo(f"\nError: {message}", err=True)
    raise SystemExit(code) from cause


@click.command("hello", context_settings=CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_context
def cli_hello(ctx: click.Context, name: str | None) -> None:
    """Print ``Hello, NAME!``.

    NAME defaults to the ``greeting.name`` setting, ``World`` out of the box.
    An empty NAME is greeted as given.
    """
    session = current_session(ctx)
    try:
        target = session.greeting_name(name)
    except ConfigurationError as exc:
        logger.error("Rejected [greeting] configuration", extra={"error": str(exc)})
        _exit_with(ExitCode.CONFIG_ERROR, f"Configuration error - {exc}", exc)

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Greeting", extra={"from_config": name is None, "name_length": len(target)})
        session.services.emit_greeting(target)


@click.command("info", context_settings=CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version and homepage of this installation."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


@click.command("fail", context_settings=CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise a RuntimeError so error reports and exit codes can be checked."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Failing on request")
        raise RuntimeError("This command fails on purpose")


@click.command("config", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Render as TOML-like text or as JSON",
)
@click.option("--section", default=None, help="Only show this top-level section, e.g. 'greeting'")
@click.option("--profile", default=None, help="Read this profile instead of the group's --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration ``hello`` reads its default name from.

    Layers, lowest precedence first: defaults, app, host, user, .env,
    environment. Root ``--set`` values are applied on top.
    """
    session = current_session(ctx)
    config, shown_profile = session.config_for(profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": shown_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Showing configuration", extra={"section": section})
        click.echo()
        try:
            session.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            _exit_with(ExitCode.INVALID_ARGUMENT, str(exc), exc)


#: Registration order on the root group.
COMMANDS: Final[tuple[click.Command, ...]] = (cli_hello, cli_info, cli_fail, cli_config)


__all__ = ["COMMANDS", "CONTEXT_SETTINGS", "cli_config", "cli_fail", "cli_hello", "cli_info"]
