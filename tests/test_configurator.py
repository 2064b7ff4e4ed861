import logging

import pytest

from mixinmodel import ApplicationConfig, Environment, configure_logging


def test_environment_defaults():
    assert ApplicationConfig.for_environment(Environment.DEVELOPMENT).logging.level == "DEBUG"
    assert ApplicationConfig.for_environment(Environment.DEVELOPMENT).debug
    assert ApplicationConfig.for_environment(Environment.TESTING).logging.level == "WARNING"
    assert ApplicationConfig.for_environment(Environment.PRODUCTION).logging.level == "INFO"
    assert not ApplicationConfig.for_environment(Environment.PRODUCTION).debug


def test_from_env(monkeypatch):
    monkeypatch.setenv("MIXINMODEL_ENV", "production")
    monkeypatch.setenv("MIXINMODEL_LOG_LEVEL", "error")

    config = ApplicationConfig.from_env()
    assert config.environment == Environment.PRODUCTION
    assert config.logging.level == "ERROR"


def test_from_env_defaults_to_development(monkeypatch):
    monkeypatch.delenv("MIXINMODEL_ENV", raising=False)
    monkeypatch.delenv("MIXINMODEL_LOG_LEVEL", raising=False)
    assert ApplicationConfig.from_env().environment == Environment.DEVELOPMENT


def test_from_env_rejects_unknown_environment(monkeypatch):
    monkeypatch.setenv("MIXINMODEL_ENV", "staging")
    with pytest.raises(ValueError, match="staging"):
        ApplicationConfig.from_env()


def test_configure_logging_is_idempotent():
    logger = configure_logging(ApplicationConfig.for_environment(Environment.TESTING))
    handler_count = len(logger.handlers)

    logger = configure_logging(ApplicationConfig.for_environment(Environment.DEVELOPMENT))

    assert logger.name == "mixinmodel"
    assert len(logger.handlers) == handler_count
    assert logger.level == logging.DEBUG
