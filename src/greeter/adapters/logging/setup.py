"""Start lib_log_rich from the ``[lib_log_rich]`` section, once per process."""

from __future__ import annotations

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` table as greeter reads it.

    Only ``service`` and ``environment`` get defaults here; every other
    key is kept as an extra and handed to lib_log_rich untouched.

    Example:
        >>> LoggingConfigModel.from_config(Config({}, {})).to_runtime().service
        'greeter'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    @classmethod
    def from_config(cls, config: Config) -> LoggingConfigModel:
        return cls.model_validate(config.get("lib_log_rich", default=None) or {})

    def to_runtime(self) -> lib_log_rich.runtime.RuntimeConfig:
        passthrough = self.model_dump(exclude={"service", "environment"}, exclude_none=True)
        return lib_log_rich.runtime.RuntimeConfig(
            service=self.service or __init__conf__.name,
            environment=self.environment,
            **passthrough,
        )


def init_logging(config: Config) -> None:
    """Bring up the lib_log_rich runtime unless it is already running.

    ``.env`` files are honoured for ``LOG_*`` variables and stdlib
    ``logging`` is routed into the runtime.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(LoggingConfigModel.from_config(config).to_runtime())
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
