"""Where greeter's settings come from and how ``greeter config`` shows them.

:mod:`.loader` reads the layers, :mod:`.overrides` adds ``--set`` values on
top, and :mod:`.display` renders the result. Nothing here writes files.
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = ["apply_overrides", "display_config", "get_config", "get_default_config_path"]
