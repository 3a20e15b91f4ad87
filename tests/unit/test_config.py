"""Unit tests for the demonstration configuration."""

import logging

import pytest

from resultant import ConfigurationError
from resultant.config import Config

pytestmark = pytest.mark.unit


class TestConfig:
    @pytest.mark.smoke
    def test_defaults(self):
        config = Config()

        assert config.log_level == "INFO"
        assert config.demo_delay_s == 1.0
        assert config.log_level_value == logging.INFO

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            Config().log_level = "DEBUG"  # type: ignore[misc]

    def test_log_level_is_normalised(self):
        assert Config(log_level=" debug ").log_level == "DEBUG"

    def test_unknown_log_level_raises_with_hint(self):
        with pytest.raises(ConfigurationError, match="Unknown log level") as exc_info:
            Config(log_level="chatty")

        assert "INFO" in (exc_info.value.hint or "")

    def test_negative_delay_raises(self):
        with pytest.raises(ConfigurationError, match="demo_delay_s"):
            Config(demo_delay_s=-1)

    @pytest.mark.parametrize(
        "delay", [float("nan"), float("inf"), float("-inf"), "1", None, True]
    )
    def test_non_finite_or_non_numeric_delay_raises(self, delay):
        with pytest.raises(ConfigurationError, match="finite number"):
            Config(demo_delay_s=delay)  # type: ignore[arg-type]

    def test_integer_delay_is_accepted(self):
        assert Config(demo_delay_s=2).demo_delay_s == 2

    def test_str_is_compact(self):
        assert str(Config()) == "Config(log_level='INFO', demo_delay_s=1.0)"


class TestConfigFromEnv:
    def test_without_env_uses_defaults(self):
        assert Config.from_env() == Config()

    def test_reads_env_vars(self, monkeypatch):
        monkeypatch.setenv("RESULTANT_LOG_LEVEL", "warning")
        monkeypatch.setenv("RESULTANT_DEMO_DELAY_S", "0.25")

        config = Config.from_env()

        assert config.log_level == "WARNING"
        assert config.demo_delay_s == 0.25

    @pytest.mark.parametrize("raw", ["nan", "inf"])
    def test_non_finite_env_delay_raises(self, monkeypatch, raw):
        monkeypatch.setenv("RESULTANT_DEMO_DELAY_S", raw)

        with pytest.raises(ConfigurationError, match="finite number"):
            Config.from_env()

    def test_unparsable_delay_raises(self, monkeypatch):
        monkeypatch.setenv("RESULTANT_DEMO_DELAY_S", "soon")

        with pytest.raises(ConfigurationError, match="not a number") as exc_info:
            Config.from_env()

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_loads_dotenv(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "resultant.config.load_dotenv", lambda *a, **k: calls.append(1) or False
        )

        Config.from_env()

        assert calls == [1]
