"""Application ports: one callable Protocol per adapter function.

Each Protocol's ``__call__`` mirrors the adapter's signature, so plain
module functions and bound methods of the in-memory stand-ins satisfy it
structurally (PEP 544). ``Config`` and ``GreetingConfig`` are imported for
type checking only, which keeps this layer free of infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TextIO

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.greeting.config import GreetingConfig


class EmitGreeting(Protocol):
    """Write the greeting for ``name`` and a newline."""

    def __call__(self, name: str, *, stream: TextIO | None = ...) -> None: ...


class LoadGreetingConfigFromDict(Protocol):
    """Validate the ``[greeting]`` section of a configuration mapping."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreetingConfig: ...


class GetConfig(Protocol):
    """Read the layered configuration, optionally for a profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Render a configuration for ``greeter config``."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime from a configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "EmitGreeting",
    "GetConfig",
    "InitLogging",
    "LoadGreetingConfigFromDict",
]
