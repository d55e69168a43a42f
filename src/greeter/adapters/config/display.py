"""``greeter config`` output, rendered by lib_layered_config."""

from __future__ import annotations

import lib_layered_config
import lib_log_rich.runtime
from lib_layered_config import Config
from rich.console import Console

from greeter.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config``, or one ``section`` of it, with provenance.

    Buffered log lines are flushed before rendering so they land above the
    table rather than inside it. An unknown ``section`` raises ValueError.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    lib_layered_config.display_config(
        config,
        output_format=lib_layered_config.OutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
