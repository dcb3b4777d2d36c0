"""Configuration hardening tests."""

import pytest

from parish.config import Config, ProductionConfig, TestingConfig

STRONG_KEY = "a7f3c9e1b5d04f2a8c6e3b9d1f7a5c0e"


class _DummyApp:
    logger = None


@pytest.fixture()
def production_env(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", STRONG_KEY)
    monkeypatch.delenv("WEB_CONCURRENCY", raising=False)
    monkeypatch.delenv("SCHEDULER_COLOR_REFRESH_HOUR", raising=False)
    return monkeypatch


def test_production_accepts_strong_secret(production_env):
    # Should not raise.
    ProductionConfig.init_app(_DummyApp())


def test_production_requires_secret_key(production_env):
    production_env.delenv("SECRET_KEY")
    with pytest.raises(RuntimeError, match="SECRET_KEY environment variable must be set"):
        ProductionConfig.init_app(_DummyApp())


def test_production_rejects_short_secret_key(production_env):
    production_env.setenv("SECRET_KEY", "too-short")
    with pytest.raises(RuntimeError, match="SECRET_KEY is too short"):
        ProductionConfig.init_app(_DummyApp())


def test_production_rejects_placeholder_secret_key(production_env):
    production_env.setenv("SECRET_KEY", "change-this-secret-key-0123456789")
    with pytest.raises(RuntimeError, match="SECRET_KEY appears to be a placeholder"):
        ProductionConfig.init_app(_DummyApp())


def test_production_rejects_multiple_workers(production_env):
    production_env.setenv("WEB_CONCURRENCY", "4")
    with pytest.raises(RuntimeError, match="requires a single worker"):
        ProductionConfig.init_app(_DummyApp())


def test_production_rejects_non_integer_web_concurrency(production_env):
    production_env.setenv("WEB_CONCURRENCY", "many")
    with pytest.raises(RuntimeError, match="WEB_CONCURRENCY must be an integer"):
        ProductionConfig.init_app(_DummyApp())


def test_production_rejects_zero_web_concurrency(production_env):
    production_env.setenv("WEB_CONCURRENCY", "0")
    with pytest.raises(RuntimeError, match="WEB_CONCURRENCY must be at least 1"):
        ProductionConfig.init_app(_DummyApp())


def test_production_rejects_out_of_range_refresh_hour(production_env):
    production_env.setenv("SCHEDULER_COLOR_REFRESH_HOUR", "24")
    with pytest.raises(RuntimeError, match="SCHEDULER_COLOR_REFRESH_HOUR"):
        ProductionConfig.init_app(_DummyApp())


def test_calendar_defaults():
    assert Config.UPCOMING_FEASTS_DEFAULT_DAYS == 9
    assert Config.UPCOMING_FEASTS_MAX_DAYS == 366
    assert Config.MAX_FEAST_RANGE_DAYS == 366
    assert Config.OVERRIDES_PAGE_SIZE == 20


def test_testing_config_disables_background_work():
    assert TestingConfig.SCHEDULER_ENABLED is False
    assert TestingConfig.RATELIMIT_ENABLED is False
    assert TestingConfig.SQLALCHEMY_DATABASE_URI == "sqlite:///:memory:"
