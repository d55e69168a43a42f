"""Enums shared by the command line and the config display adapter."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``greeter config`` renders the merged configuration.

    A ``str`` subclass, so members compare equal to the raw click choice.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["OutputFormat"]
