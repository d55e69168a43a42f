"""Configuration loading: bundled defaults, caching and concurrent access."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from greeter.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
def test_default_config_path_is_the_bundled_toml() -> None:
    """The path points at the packaged defaultconfig.toml."""
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_get_config_greets_world_by_default(
    clear_config_cache: None,
    tmp_path: Path,
) -> None:
    """The bundled defaults define greeting.name."""
    config = get_config(start_dir=str(tmp_path))

    assert config.get("greeting", default={}).get("name") == "World"


@pytest.mark.os_agnostic
def test_repeated_calls_return_the_cached_instance(clear_config_cache: None) -> None:
    """The same arguments hit the cache."""
    assert get_config() is get_config()


@pytest.mark.os_agnostic
def test_cache_clear_forces_a_fresh_read(clear_config_cache: None) -> None:
    """After cache_clear a new Config with the same data is built."""
    first = get_config()

    get_config.cache_clear()
    second = get_config()

    assert first is not second
    assert first.as_dict() == second.as_dict()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["", "../etc", "a/b", "x" * 65])
def test_invalid_profile_is_rejected_before_reading(profile: str) -> None:
    """Path-like, empty or overlong profile names raise ValueError."""
    with pytest.raises(ValueError):
        get_config(profile=profile)


@pytest.mark.os_agnostic
def test_valid_profile_name_passes() -> None:
    """Letters, digits, hyphens and underscores are accepted."""
    validate_profile("staging-v2_eu")


@pytest.mark.os_agnostic
def test_concurrent_reads_agree(clear_config_cache: None) -> None:
    """Threads reading at once see equivalent data."""
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: get_config().as_dict(), range(10)))

    assert all(result == results[0] for result in results)


@pytest.mark.os_agnostic
def test_cache_clear_during_concurrent_reads_is_safe(clear_config_cache: None) -> None:
    """Clearing while other threads read raises nothing."""

    def _work(index: int) -> None:
        if index % 5 == 0:
            get_config.cache_clear()
        else:
            assert isinstance(get_config().as_dict(), dict)

    with ThreadPoolExecutor(max_workers=8) as pool:
        for future in [pool.submit(_work, i) for i in range(20)]:
            future.result()
