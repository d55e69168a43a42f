"""Shared fixtures for the greeter test suite.

Service factories start from ``build_production`` and swap out only the
ports a test needs to control, so the rest of the wiring stays real.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from greeter.adapters.memory import ConfigStub, GreetingSpy
    from greeter.composition import AppServices


def _load_project_env() -> None:
    """Pick up a project-level .env, e.g. LOG_CONSOLE_LEVEL for local runs."""
    from dotenv import load_dotenv

    env_file = Path(__file__).resolve().parent.parent / ".env"
    if env_file.is_file():
        load_dotenv(env_file)


_load_project_env()

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _production_with(**ports: Any) -> Callable[[], AppServices]:
    from greeter.composition import build_production

    services = dataclasses.replace(build_production(), **ports)
    return lambda: services


@dataclass
class StubbedCli:
    """A services factory and the stand-ins wired into it."""

    factory: Callable[[], AppServices]
    spy: GreetingSpy
    config: ConfigStub


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh CliRunner.

    Assert greetings on ``result.stdout``: log records go to stderr and
    would show up in ``result.output``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def traceback_baseline() -> Iterator[None]:
    """Start with tracebacks off and restore every lib_cli_exit_tools setting afterwards."""
    config = lib_cli_exit_tools.config
    saved = {field.name: getattr(config, field.name) for field in dataclasses.fields(config)}
    lib_cli_exit_tools.reset_config()
    config.traceback = False
    config.traceback_force_color = False
    try:
        yield
    finally:
        for name, value in saved.items():
            setattr(config, name, value)


@pytest.fixture
def clear_config_cache() -> None:
    """Forget configuration cached by earlier tests.

    Clears before the test only; a test may monkeypatch the loader and
    lose ``cache_clear``.
    """
    from greeter.adapters.config.loader import get_config

    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config from a plain dict, without provenance."""
    return lambda data: Config(data, {})


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    def _source(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _source


@pytest.fixture
def stubbed_cli(clear_config_cache: None) -> Callable[[dict[str, Any]], StubbedCli]:
    """Services reading ``config_data`` through a ConfigStub and greeting into a GreetingSpy.

    Display and logging stay on the production adapters, so ``config``
    output and command log bindings behave as in a real run.

    Example:
        def test_hello(cli_runner, stubbed_cli) -> None:
            stubbed = stubbed_cli({"greeting": {"name": "Ada"}})
            cli_runner.invoke(cli, ["hello"], obj=stubbed.factory)
            assert stubbed.spy.names == ["Ada"]
    """
    from greeter.adapters.memory import ConfigStub, GreetingSpy

    def _build(config_data: dict[str, Any]) -> StubbedCli:
        spy = GreetingSpy()
        stub = ConfigStub(config_data)
        factory = _production_with(get_config=stub.get_config, emit_greeting=spy.emit_greeting)
        return StubbedCli(factory=factory, spy=spy, config=stub)

    return _build


@pytest.fixture
def printing_cli(clear_config_cache: None) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Production services that read ``config_data`` instead of the config files."""
    from greeter.adapters.memory import ConfigStub

    def _build(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return _production_with(get_config=ConfigStub(config_data).get_config)

    return _build
