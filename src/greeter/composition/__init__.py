"""Composition root: which adapter fills which port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.greeting import greet, load_greeting_config_from_dict
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory import ConfigStub, GreetingSpy
    from ..application.ports import DisplayConfig, EmitGreeting, GetConfig, InitLogging, LoadGreetingConfigFromDict

    # pyright checks each production adapter against its port here.
    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_emit_greeting: EmitGreeting = greet
    _assert_load_greeting_config_from_dict: LoadGreetingConfigFromDict = load_greeting_config_from_dict
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, fixed once built."""

    emit_greeting: EmitGreeting
    load_greeting_config_from_dict: LoadGreetingConfigFromDict
    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Greet on stdout, read the real configuration layers, log through lib_log_rich."""
    return AppServices(
        emit_greeting=greet,
        load_greeting_config_from_dict=load_greeting_config_from_dict,
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing(*, spy: GreetingSpy | None = None, config: ConfigStub | None = None) -> AppServices:
    """Services that neither print, read files nor start logging.

    The ``[greeting]`` section is still validated by the production loader,
    so configuration errors behave as they do for real.

    Args:
        spy: Receives the greetings; a fresh GreetingSpy when None.
        config: Serves the configuration; a ConfigStub holding the bundled
            ``[greeting]`` default when None.
    """
    from ..adapters.memory import ConfigStub, GreetingSpy, init_logging_in_memory

    greeting_spy = spy if spy is not None else GreetingSpy()
    config_stub = config if config is not None else ConfigStub()

    return AppServices(
        emit_greeting=greeting_spy.emit_greeting,
        load_greeting_config_from_dict=load_greeting_config_from_dict,
        get_config=config_stub.get_config,
        display_config=config_stub.display_config,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "greet",
    "init_logging",
    "load_greeting_config_from_dict",
]
