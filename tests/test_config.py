import logging

import pytest
from pydantic import ValidationError

from kitten import KittenConfig, configure_logging


def test_defaults() -> None:
    config = KittenConfig()
    assert config.await_timeout == 1.0
    assert config.log_level == "WARNING"


def test_from_env_reads_variables() -> None:
    config = KittenConfig.from_env({"KITTEN_AWAIT_TIMEOUT": "2.5", "KITTEN_LOG_LEVEL": "debug"})
    assert config.await_timeout == 2.5
    assert config.log_level == "DEBUG"


def test_from_env_ignores_unrelated_variables() -> None:
    assert KittenConfig.from_env({"HOME": "/root"}) == KittenConfig()


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KITTEN_AWAIT_TIMEOUT", "0.25")
    monkeypatch.delenv("KITTEN_LOG_LEVEL", raising=False)
    assert KittenConfig.from_env().await_timeout == 0.25


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        KittenConfig(await_timeout=0)


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        KittenConfig.from_env({"KITTEN_LOG_LEVEL": "chatty"})


def test_config_is_frozen() -> None:
    config = KittenConfig()
    with pytest.raises(ValidationError):
        config.await_timeout = 5.0


def test_configure_logging_sets_package_level() -> None:
    configure_logging(KittenConfig(log_level="INFO"))
    assert logging.getLogger("kitten").level == logging.INFO
