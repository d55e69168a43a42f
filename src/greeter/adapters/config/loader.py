"""Read greeter's layered configuration, once per profile and start directory.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, then
the app, host and user files lib_layered_config finds for greeter, then a
``.env`` file, then ``GREETER___SECTION__KEY`` environment variables.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from greeter import __init__conf__

_DEFAULTS = Path(__file__).with_name("defaultconfig.toml")


def get_default_config_path() -> Path:
    """Where the bundled defaults live.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULTS


def validate_profile(profile: str) -> None:
    """Reject profile names that could escape ``profile/<name>/``.

    Example:
        >>> validate_profile("staging-v2")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


class LayeredConfigLoader:
    """Callable config source that remembers the last few reads.

    A process reads the same profile many times (the root group, then
    ``config --profile``), so results are memoised per ``(profile, start_dir)``
    until :meth:`cache_clear`.
    """

    def __init__(self, defaults: Path, *, remembered: int = 4) -> None:
        self._defaults = defaults
        self._cached_read = lru_cache(maxsize=remembered)(self._read)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        if profile is not None:
            validate_profile(profile)
        return self._cached_read(profile, start_dir)

    def cache_clear(self) -> None:
        self._cached_read.cache_clear()

    def _read(self, profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            profile=profile,
            default_file=self._defaults,
            start_dir=start_dir,
        )


#: The process-wide loader wired into production services.
get_config = LayeredConfigLoader(_DEFAULTS)


__all__ = ["LayeredConfigLoader", "get_config", "get_default_config_path", "validate_profile"]
