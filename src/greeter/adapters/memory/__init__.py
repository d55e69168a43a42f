"""Stand-ins for the I/O ports, used by ``build_testing`` and the tests.

Contents:
    * :class:`.config.ConfigStub` - fixed configuration, recorded lookups
    * :class:`.greeting.GreetingSpy` - recorded greetings
    * :func:`.logging.init_logging_in_memory` - logging left untouched
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import ConfigStub
from .greeting import GreetingSpy
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greeter.application.ports import DisplayConfig, EmitGreeting, GetConfig, InitLogging

    _assert_get_config: GetConfig = ConfigStub().get_config
    _assert_display_config: DisplayConfig = ConfigStub().display_config
    _assert_emit_greeting: EmitGreeting = GreetingSpy().emit_greeting
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = ["ConfigStub", "GreetingSpy", "init_logging_in_memory"]
