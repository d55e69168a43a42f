"""Configuration ports served from a plain dict, for tests."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from lib_layered_config import Config

from greeter.domain.behaviors import DEFAULT_NAME
from greeter.domain.enums import OutputFormat


def _bundled_defaults() -> dict[str, Any]:
    return {"greeting": {"name": DEFAULT_NAME}}


@dataclass
class ConfigStub:
    """Serves one fixed configuration and records how it was used.

    :meth:`get_config` and :meth:`display_config` satisfy the ``GetConfig``
    and ``DisplayConfig`` ports without reading files or printing.

    Attributes:
        data: Configuration handed out on every :meth:`get_config` call.
        profiles: The ``profile`` argument of each :meth:`get_config` call.
        displayed: ``(output_format, section, profile)`` per display request.

    Example:
        >>> stub = ConfigStub({"greeting": {"name": "Ada"}})
        >>> stub.get_config(profile="test").as_dict()
        {'greeting': {'name': 'Ada'}}
        >>> stub.profiles
        ['test']
    """

    data: dict[str, Any] = field(default_factory=_bundled_defaults)
    profiles: list[str | None] = field(default_factory=list)
    displayed: list[tuple[OutputFormat, str | None, str | None]] = field(default_factory=list)

    def get_config(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        self.profiles.append(profile)
        return Config(copy.deepcopy(self.data), {})

    def display_config(
        self,
        config: Config,
        *,
        output_format: OutputFormat = OutputFormat.HUMAN,
        section: str | None = None,
        profile: str | None = None,
    ) -> None:
        """Record the request; an unknown section fails like the real display."""
        if section is not None and section not in config.as_dict():
            raise ValueError(f"Section '{section}' not found in configuration")
        self.displayed.append((output_format, section, profile))


__all__ = ["ConfigStub"]
