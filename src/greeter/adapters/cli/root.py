"""The ``greeter`` click group and its global options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides

from .commands import COMMANDS, CONTEXT_SETTINGS
from .session import CLISession
from .tracebacks import TracebackSettings

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _load_config(services: AppServices, profile: str | None, overrides: tuple[str, ...]) -> Config:
    """Read the layers for ``profile`` and put the ``--set`` values on top.

    A malformed override is a usage error (exit 2). An invalid profile name
    is not: its ValueError comes from the loader and reaches ``main``.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Configuration profile to read, e.g. 'test'")
@click.option(
    "--set",
    "overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run (repeatable), e.g. greeting.name=Ada",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, overrides: tuple[str, ...]) -> None:
    """Build the services, load the configuration and start logging.

    ``ctx.obj`` comes in as a zero-argument services factory and is
    replaced by a :class:`~greeter.adapters.cli.session.CLISession`.

    Example:
        >>> from click.testing import CliRunner
        >>> from greeter.composition import build_production
        >>> CliRunner().invoke(cli, ["hello", "Ada"], obj=build_production).stdout
        'Hello, Ada!\\n'
    """
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("greeter needs a services factory as click obj; main() passes one.")
    services: AppServices = factory()

    config = _load_config(services, profile, overrides)
    services.init_logging(config)
    ctx.obj = CLISession(services=services, config=config, profile=profile, overrides=overrides, traceback=traceback)
    TracebackSettings.verbose(traceback).apply()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register(commands: tuple[click.Command, ...]) -> None:
    for command in commands:
        cli.add_command(command)


_register(COMMANDS)


__all__ = ["cli"]
