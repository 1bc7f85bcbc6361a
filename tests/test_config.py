"""Tests for config.py - environment configuration."""

from pathlib import Path

import pytest

from geralt_tui.config import GeraltConfig, load_config, parse_key_overrides, parse_timeout
from geralt_tui.errors import ConfigError


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self) -> None:
        config = load_config({})
        assert config == GeraltConfig()
        assert config.executable == "geralt"
        assert config.timeout is None

    def test_environment(self) -> None:
        config = load_config(
            {
                "GERALT_EXECUTABLE": "/opt/bin/geralt",
                "GERALT_TIMEOUT": "2.5",
                "GERALT_CWD": "/tmp/work",
                "GERALT_KEYS": "remove=x",
            }
        )
        assert config.executable == "/opt/bin/geralt"
        assert config.timeout == 2.5
        assert config.cwd == Path("/tmp/work")
        assert config.key_overrides == {"remove": "x"}

    def test_overrides_skip_none(self) -> None:
        config = load_config({"GERALT_TIMEOUT": "3"}).with_overrides(executable="g", timeout=None)
        assert config.executable == "g"
        assert config.timeout == 3.0


class TestParsers:
    """Tests for value parsers."""

    @pytest.mark.parametrize("raw", ["abc", "0", "-1"])
    def test_invalid_timeout(self, raw: str) -> None:
        with pytest.raises(ConfigError):
            parse_timeout(raw)

    def test_blank_timeout_is_none(self) -> None:
        assert parse_timeout("  ") is None

    def test_key_overrides(self) -> None:
        assert parse_key_overrides("remove=x, toggle = c,") == {"remove": "x", "toggle": "c"}

    @pytest.mark.parametrize("raw", ["remove", "=x", "remove="])
    def test_invalid_key_override(self, raw: str) -> None:
        with pytest.raises(ConfigError):
            parse_key_overrides(raw)
