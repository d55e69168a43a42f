"""Logging configuration model and runtime initialisation."""

from __future__ import annotations

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from greeter import __init__conf__
from greeter.adapters.logging.setup import LoggingConfigModel, init_logging


@pytest.mark.os_agnostic
def test_logging_config_model_passes_unknown_keys_through() -> None:
    """Keys it does not know are forwarded to lib_log_rich."""
    parsed = LoggingConfigModel.model_validate({"environment": "dev", "console_level": "DEBUG"})

    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    """An empty section means no service override and the prod environment."""
    parsed = LoggingConfigModel.model_validate({})

    assert (parsed.service, parsed.environment) == (None, "prod")


@pytest.mark.os_agnostic
def test_runtime_config_service_defaults_to_distribution_name() -> None:
    """Without a configured service the package name is used."""
    runtime_config = LoggingConfigModel.from_config(Config({}, {})).to_runtime()

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_honours_configured_service() -> None:
    """A configured service and environment win."""
    runtime_config = LoggingConfigModel.from_config(
        Config({"lib_log_rich": {"service": "greeter-test", "environment": "test"}}, {})
    ).to_runtime()

    assert (runtime_config.service, runtime_config.environment) == ("greeter-test", "test")


@pytest.mark.os_agnostic
def test_init_logging_is_idempotent() -> None:
    """A second call leaves the running runtime alone."""
    config = Config({"lib_log_rich": {"environment": "test"}}, {})

    init_logging(config)
    try:
        init_logging(config)
        assert lib_log_rich.runtime.is_initialised()
    finally:
        lib_log_rich.runtime.shutdown()


@pytest.mark.os_agnostic
def test_empty_section_value_reads_as_defaults() -> None:
    """``lib_log_rich = {}`` behaves like a missing section."""
    parsed = LoggingConfigModel.from_config(Config({"lib_log_rich": {}}, {}))

    assert parsed == LoggingConfigModel()
