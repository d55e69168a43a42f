"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` and are kept in sync by
``tests/test_metadata_sync.py``.

Contents:
    * Distribution identifiers (``name``, ``version``, ``shell_command``).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config to locate
      configuration files on each platform.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "greeter"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Print a friendly greeting for a given name"
#: Release version, bumped together with ``pyproject.toml``.
version: Final[str] = "1.0.0"
#: Repository homepage.
homepage: Final[str] = "https://github.com/bitranox/greeter"
#: Author attribution.
author: Final[str] = "bitranox"
#: Contact email surfaced in metadata.
author_email: Final[str] = "bitranox@gmail.com"
#: Console-script name published by the package.
shell_command: Final[str] = "greeter"

#: Vendor directory used on macOS and Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
#: Application directory used on macOS and Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Greeter"
#: XDG slug used on Linux configuration paths.
LAYEREDCONF_SLUG: Final[str] = "greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
