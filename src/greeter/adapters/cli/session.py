"""Per-run state the root group hands to its commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greeter.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from greeter.composition import AppServices


@dataclass(slots=True)
class CLISession:
    """Wired services plus the configuration loaded for this run.

    Attributes:
        services: Ports wired by the composition root.
        config: Layered configuration with the root ``--set`` values applied.
        profile: Profile given to the root group, if any.
        overrides: Raw ``--set`` strings, kept so a profile reload can
            reapply them.
        traceback: Whether ``--traceback`` was given.
    """

    services: AppServices
    config: Config
    profile: str | None = None
    overrides: tuple[str, ...] = ()
    traceback: bool = False

    def greeting_name(self, explicit: str | None) -> str:
        """Return ``explicit`` when given, otherwise ``greeting.name``.

        An empty ``explicit`` is a real name and is returned as-is.

        Raises:
            ConfigurationError: ``explicit`` is None and the ``[greeting]``
                section does not validate.
        """
        if explicit is not None:
            return explicit
        return self.services.load_greeting_config_from_dict(self.config.as_dict()).name

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the configuration and profile a command should show.

        Without ``profile`` the root configuration is reused. With one the
        layers are read again for that profile and the root ``--set`` values
        go on top.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.overrides), profile


def current_session(ctx: click.Context) -> CLISession:
    """Return the session the root group stored for this invocation.

    Raises:
        RuntimeError: If the command runs outside the ``greeter`` group.
    """
    session = ctx.find_object(CLISession)
    if session is None:
        raise RuntimeError("No greeter session on this click context; run commands through the greeter group.")
    return session


__all__ = ["CLISession", "current_session"]
