"""Callable contracts between the CLI and the adapters (see :mod:`.ports`)."""

from __future__ import annotations

from .ports import DisplayConfig, EmitGreeting, GetConfig, InitLogging, LoadGreetingConfigFromDict

__all__ = ["DisplayConfig", "EmitGreeting", "GetConfig", "InitLogging", "LoadGreetingConfigFromDict"]
