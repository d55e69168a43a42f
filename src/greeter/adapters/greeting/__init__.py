"""Greeting adapter - console output and the ``[greeting]`` config section.

Contents:
    * :func:`.console.greet` - Write the greeting line to stdout.
    * :class:`.config.GreetingConfig` - Validated greeting settings.
    * :func:`.config.load_greeting_config_from_dict` - Config dict loader.
"""

from __future__ import annotations

from .config import GreetingConfig, load_greeting_config_from_dict
from .console import greet

__all__ = [
    "GreetingConfig",
    "greet",
    "load_greeting_config_from_dict",
]
