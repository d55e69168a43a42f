"""Say hello: ``greeter.greet("Ada")`` prints ``Hello, Ada!``.

``greet`` writes to standard output; ``build_greeting`` only returns the
text. ``get_config`` and ``print_info`` serve the ``greeter`` command.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config, greet
from .domain.behaviors import DEFAULT_NAME, GREETING_TEMPLATE, build_greeting

__all__ = ["DEFAULT_NAME", "GREETING_TEMPLATE", "build_greeting", "get_config", "greet", "print_info"]
