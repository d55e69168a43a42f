"""``--set SECTION.KEY=VALUE``: the top layer, above environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Anything a JSON literal can decode to, plus the raw string itself."""

Table = dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` value, addressed by section and key path below it."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    def merge_into(self, tables: dict[str, Table]) -> None:
        """Place :attr:`value` in ``tables``, creating tables along the path.

        Raises:
            ValueError: If an earlier override already put a scalar where
                this one needs a table.
        """
        table = tables.setdefault(self.section, {})
        walked = [self.section]
        for key in self.key_path[:-1]:
            walked.append(key)
            child = table.setdefault(key, {})
            if not isinstance(child, dict):
                raise ValueError(f"Cannot set below {'.'.join(walked)!r}: it already holds {child!r}")
            table = cast(Table, child)
        table[self.key_path[-1]] = self.value


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as a JSON literal when it is one, otherwise keep the text.

    Examples:
        >>> coerce_value("42"), coerce_value("false"), coerce_value('"42"')
        (42, False, '42')
        >>> coerce_value("Ada"), coerce_value("")
        ('Ada', '')
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Read one ``--set`` argument.

    The path ends at the first ``=`` and its first dot ends the section.

    Examples:
        >>> parse_override("greeting.name=a=b")
        ConfigOverride(section='greeting', key_path=('name',), value='a=b')
    """
    path, equals, value = raw.partition("=")
    if not equals:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    keys = tuple(rest.split("."))
    if "" in keys:
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section, keys, coerce_value(value))


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every override merged in, later ones winning.

    ``config`` comes back unchanged, as the same object, when there is
    nothing to apply.

    Example:
        >>> base = Config({"greeting": {"name": "World"}}, {})
        >>> apply_overrides(base, ("greeting.name=Ada",)).as_dict()
        {'greeting': {'name': 'Ada'}}
    """
    if not raw_overrides:
        return config
    tables: dict[str, Table] = {}
    for raw in raw_overrides:
        parse_override(raw).merge_into(tables)
    return config.with_overrides(tables)


__all__ = ["CoercedValue", "ConfigOverride", "apply_overrides", "coerce_value", "parse_override"]
