"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

#: Name greeted when neither the caller nor the configuration supplies one.
DEFAULT_NAME: Final[str] = "World"

#: Format string for a single greeting line (without line terminator).
GREETING_TEMPLATE: Final[str] = "Hello, {name}!"


def build_greeting(name: str) -> str:
    r"""Return the greeting for ``name``.

    The name is inserted verbatim: no trimming, no validation. Empty text
    and arbitrary characters are accepted, so the result is always exactly
    ``"Hello, " + name + "!"``.

    Args:
        name: Text to greet.

    Returns:
        The greeting line without a trailing line terminator.

    Example:
        >>> build_greeting("World")
        'Hello, World!'
        >>> build_greeting("")
        'Hello, !'
        >>> build_greeting("{name}")
        'Hello, {name}!'
    """
    return GREETING_TEMPLATE.format(name=name)


__all__ = [
    "DEFAULT_NAME",
    "GREETING_TEMPLATE",
    "build_greeting",
]
