"""Unit tests for runtime helpers."""

import json
import logging
import sys

import pytest
from pydantic import ValidationError

from cqconfig.runtime import env
from cqconfig.runtime.env import BootstrapSettings
from cqconfig.runtime.logging import JsonFormatter, configure_logging


class TestBootstrapSettings:
    """Test reading the entry-point settings from the environment."""

    def test_defaults(self) -> None:
        settings = BootstrapSettings.from_env({})

        assert settings.config_path == "config.yml"
        assert settings.selection == "3"
        assert settings.companion_name == "cqhttp"
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_overrides(self) -> None:
        settings = BootstrapSettings.from_env(
            {
                "CQ_CONFIG_PATH": "conf/bot.yml",
                "CQ_SERVER_SELECTION": "02",
                "CQ_COMPANION_NAME": "mybot",
                "CQ_LOG_LEVEL": "debug",
                "CQ_LOG_JSON": "yes",
            }
        )

        assert settings == BootstrapSettings(
            config_path="conf/bot.yml", selection="02", companion_name="mybot", log_level="debug", log_json=True
        )

    def test_empty_value_is_kept(self) -> None:
        assert BootstrapSettings.from_env({"CQ_SERVER_SELECTION": ""}).selection == ""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", True), ("true", True), ("On", True), ("0", False), ("no", False), ("off", False)],
    )
    def test_log_json_flag(self, raw: str, expected: bool) -> None:
        assert BootstrapSettings.from_env({"CQ_LOG_JSON": raw}).log_json is expected

    def test_invalid_log_json_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BootstrapSettings.from_env({"CQ_LOG_JSON": "maybe"})

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(env.SERVER_SELECTION, "02")
        assert BootstrapSettings.from_env().selection == "02"


class TestJsonFormatter:
    """Test structured log output."""

    def test_basic_fields(self) -> None:
        record = logging.LogRecord("cqconfig.loader", logging.INFO, __file__, 1, "loaded %s", ("x",), None)

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "cqconfig.loader"
        assert payload["message"] == "loaded x"
        assert "timestamp" in payload
        assert "exc_info" not in payload

    def test_exception_is_formatted(self) -> None:
        try:
            raise ValueError("bad selection")
        except ValueError:
            exc_info = sys.exc_info()
        record = logging.LogRecord("cqconfig", logging.ERROR, __file__, 1, "failed", None, exc_info)

        payload = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad selection" in payload["exc_info"]


class TestConfigureLogging:
    """Test root logger setup."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_handler(self) -> None:
        logger = configure_logging("debug")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.DEBUG
        assert logger.name == "cqconfig"

    def test_plain_formatter(self) -> None:
        configure_logging("warning", json=False)

        handler = logging.getLogger().handlers[0]
        assert not isinstance(handler.formatter, JsonFormatter)
        assert logging.getLogger().level == logging.WARNING
