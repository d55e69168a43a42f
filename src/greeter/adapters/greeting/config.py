"""Greeting configuration model and loader.

Provides the GreetingConfig Pydantic model for the ``[greeting]`` section and
the loader that builds it from lib_layered_config's dictionary output.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError

from greeter.domain.behaviors import DEFAULT_NAME
from greeter.domain.errors import ConfigurationError


class GreetingConfig(BaseModel):
    """Validated, immutable ``[greeting]`` settings.

    Unknown keys are ignored so older config files keep loading.

    Example:
        >>> GreetingConfig().name
        'World'
        >>> GreetingConfig(name="Ada").name
        'Ada'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = DEFAULT_NAME


def _describe(exc: ValidationError) -> str:
    """Collapse pydantic errors into one ``greeting.<field>: <msg>`` line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "section"
        parts.append(f"greeting.{location}: {error['msg']}")
    return "; ".join(parts)


def load_greeting_config_from_dict(config_dict: Mapping[str, Any]) -> GreetingConfig:
    """Load GreetingConfig from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            The ``greeting`` section is optional.

    Returns:
        Greeting settings with defaults for missing values.

    Raises:
        ConfigurationError: When the section is not a table or a value has
            the wrong type (e.g. ``--set greeting.name=42``).

    Example:
        >>> load_greeting_config_from_dict({}).name
        'World'
        >>> load_greeting_config_from_dict({"greeting": {"name": "Ada"}}).name
        'Ada'
        >>> load_greeting_config_from_dict({"greeting": {"name": 42}})
        Traceback (most recent call last):
        ...
        greeter.domain.errors.ConfigurationError: greeting.name: Input should be a valid string
    """
    section: Any = config_dict.get("greeting", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[greeting] must be a table, got {type(section).__name__}")

    try:
        return GreetingConfig.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


__all__ = [
    "GreetingConfig",
    "load_greeting_config_from_dict",
]
