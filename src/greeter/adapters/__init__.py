"""Adapters: everything that touches the console, files or libraries.

Contents:
    * :mod:`.greeting` - the greeting line on stdout and the ``[greeting]`` section
    * :mod:`.config` - layered configuration: loading, ``--set`` overrides, display
    * :mod:`.logging` - lib_log_rich runtime setup
    * :mod:`.memory` - stand-ins for tests
    * :mod:`.cli` - rich-click command line
"""

from __future__ import annotations

__all__: list[str] = []
