"""Errors raised by greeter code rather than by its libraries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """A ``[greeting]`` value greeter cannot use, such as a numeric ``name``.

    The ``hello`` command turns it into exit code 78.
    """


__all__ = ["ConfigurationError"]
