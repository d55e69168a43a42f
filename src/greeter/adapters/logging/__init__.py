"""lib_log_rich runtime for the greeter process.

:func:`init_logging` is the production ``InitLogging`` port; the
``[lib_log_rich]`` section it reads is modelled by :class:`LoggingConfigModel`.
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
