"""
Tests for layered pattern configuration.
"""

import pytest

from uripattern.config import ConfigError, PatternConfig, load_config


class TestPatternConfig:

    def test_defaults(self):
        config = load_config()
        assert config == PatternConfig()
        assert config.to_dict() == {
            "cache_enabled": True,
            "cache_size": 1000,
            "cache_ttl": None,
            "cache_stats": True,
        }

    def test_validation(self):
        with pytest.raises(ConfigError):
            PatternConfig(cache_size=-1)
        with pytest.raises(ConfigError):
            PatternConfig(cache_ttl=0)


class TestLoadConfig:

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("URIPATTERN_CACHE_SIZE", "50")
        monkeypatch.setenv("URIPATTERN_CACHE_ENABLED", "no")
        monkeypatch.setenv("URIPATTERN_CACHE_TTL", "1.5")

        config = load_config()

        assert config.cache_size == 50
        assert config.cache_enabled is False
        assert config.cache_ttl == 1.5

    def test_unrelated_env_vars_ignored(self, monkeypatch):
        monkeypatch.setenv("URIPATTERN_SOMETHING_ELSE", "x")
        monkeypatch.setenv("OTHER_CACHE_SIZE", "7")
        assert load_config() == PatternConfig()

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("ROUTES_CACHE_SIZE", "7")
        assert load_config(env_prefix="ROUTES_").cache_size == 7

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# pattern cache\n"
            "URIPATTERN_CACHE_SIZE=25\n"
            "URIPATTERN_CACHE_STATS='false'\n"
        )

        config = load_config(env_file=str(env_file))

        assert config.cache_size == 25
        assert config.cache_stats is False

    def test_missing_env_file(self, tmp_path):
        assert load_config(env_file=str(tmp_path / "missing.env")) == PatternConfig()

    def test_precedence(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("URIPATTERN_CACHE_SIZE=25\n")
        monkeypatch.setenv("URIPATTERN_CACHE_SIZE", "30")

        assert load_config(env_file=str(env_file)).cache_size == 30
        assert load_config(env_file=str(env_file), overrides={"cache_size": 40}).cache_size == 40

    def test_ttl_none(self, monkeypatch):
        monkeypatch.setenv("URIPATTERN_CACHE_TTL", "none")
        assert load_config().cache_ttl is None

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("URIPATTERN_CACHE_SIZE", "lots")
        with pytest.raises(ConfigError, match="cache_size"):
            load_config()

    def test_invalid_bool(self, monkeypatch):
        monkeypatch.setenv("URIPATTERN_CACHE_ENABLED", "maybe")
        with pytest.raises(ConfigError, match="cache_enabled"):
            load_config()

    def test_unknown_override(self):
        with pytest.raises(ConfigError, match="cache_sise"):
            load_config(overrides={"cache_sise": 1})
