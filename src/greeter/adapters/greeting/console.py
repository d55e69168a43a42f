"""Console greeting output."""

from __future__ import annotations

import sys
from typing import TextIO

import lib_log_rich.runtime

from greeter.domain.behaviors import build_greeting


def greet(name: str, *, stream: TextIO | None = None) -> None:
    r"""Write ``Hello, <name>!`` and a newline to standard output.

    ``sys.stdout`` is looked up on every call so redirected or captured
    streams (pytest, Click's CliRunner) receive the output. Pending log
    records are flushed first to keep them off the greeting line. Write
    errors on the stream propagate to the caller.

    Args:
        name: Text to greet, written verbatim.
        stream: Optional text stream overriding ``sys.stdout``.

    Example:
        >>> greet("World")
        Hello, World!
        >>> import io
        >>> buffer = io.StringIO()
        >>> greet("", stream=buffer)
        >>> buffer.getvalue()
        'Hello, !\n'
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    target = stream if stream is not None else sys.stdout
    target.write(build_greeting(name) + "\n")


__all__ = ["greet"]
