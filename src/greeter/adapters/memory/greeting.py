"""Greeting port that records instead of printing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from greeter.domain.behaviors import build_greeting


@dataclass
class GreetingSpy:
    """Collects greetings for test assertions.

    Attributes:
        names: Every name passed to :meth:`emit_greeting`, in order.
        lines: The lines, newline included, that would have been written.
        raise_exception: Raised by :meth:`emit_greeting` after recording,
            to stand in for a broken stdout.

    Example:
        >>> spy = GreetingSpy()
        >>> spy.emit_greeting("Ada")
        >>> spy.lines
        ['Hello, Ada!\\n']
    """

    names: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        self.names.clear()
        self.lines.clear()
        self.raise_exception = None

    def emit_greeting(self, name: str, *, stream: TextIO | None = None) -> None:
        """Record ``name``; ``stream`` only exists to match the port."""
        self.names.append(name)
        self.lines.append(build_greeting(name) + "\n")
        if self.raise_exception is not None:
            raise self.raise_exception


__all__ = ["GreetingSpy"]
