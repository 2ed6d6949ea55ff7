from __future__ import annotations

import pytest

from amnezic import config


def test_app_config_from_env() -> None:
    loaded = config.AppConfig.from_env(
        {"BIND": "127.0.0.1", "PORT": "9000", "AMNEZIC_MEDIA_ROOT": " http://media/ ", "AMNEZIC_LOG_LEVEL": "debug"}
    )
    assert loaded == config.AppConfig(host="127.0.0.1", port=9000, media_root="http://media", log_level="DEBUG")
    assert config.AppConfig.from_env({}) == config.AppConfig()


def test_app_config_rejects_bad_port() -> None:
    with pytest.raises(ValueError):
        config.AppConfig.from_env({"PORT": "eighty"})


def test_flag_read_from_env() -> None:
    assert config.is_enabled(config.UNIFORM_SHUFFLE, {}) is False
    assert config.is_enabled(config.UNIFORM_SHUFFLE, {"AMNEZIC_FEATURES": "other, Shuffle.Uniform "}) is True


def test_innermost_override_wins() -> None:
    env = {"AMNEZIC_FEATURES": "shuffle.uniform"}

    with config.override(config.UNIFORM_SHUFFLE, enabled=False):
        assert config.is_enabled(config.UNIFORM_SHUFFLE, env) is False
        with config.override(config.UNIFORM_SHUFFLE):
            assert config.is_enabled(config.UNIFORM_SHUFFLE, {}) is True
        assert config.is_enabled(config.UNIFORM_SHUFFLE, env) is False

    assert config.is_enabled(config.UNIFORM_SHUFFLE, env) is True
