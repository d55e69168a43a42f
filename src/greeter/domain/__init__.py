"""Domain layer: the greeting rule, with no I/O and no framework imports.

Contents:
    * :mod:`.behaviors` - ``build_greeting`` and its constants
    * :mod:`.enums` - ``OutputFormat``
    * :mod:`.errors` - ``ConfigurationError``
"""

from __future__ import annotations

from .behaviors import DEFAULT_NAME, GREETING_TEMPLATE, build_greeting
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    "DEFAULT_NAME",
    "GREETING_TEMPLATE",
    "ConfigurationError",
    "OutputFormat",
    "build_greeting",
]
