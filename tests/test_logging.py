"""
Tests for the logging module.

Tests verify:
- Processor chain contents for JSON and console output
- Service metadata and ECS field names in JSON output
- DEBUG logs are suppressed at INFO level
- Unknown levels are rejected with ConfigError
"""

import json

import pytest
import structlog

from docspine.errors import ConfigError
from docspine.logging import (
    LOG_LEVELS,
    _ecs_field_names,
    _service_metadata,
    build_processors,
    configure_logging,
    get_logger,
)


def _last_record(capsys) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


class TestProcessors:
    def test_service_metadata_added(self):
        event = _service_metadata("svc")(None, "info", {"event": "x"})
        assert event["service.name"] == "svc"

    def test_service_metadata_not_overwritten(self):
        event = _service_metadata("svc")(None, "info", {"service.name": "other"})
        assert event["service.name"] == "other"

    def test_ecs_field_names(self):
        event = _ecs_field_names(None, "info", {"timestamp": "t", "level": "info", "event": "x"})
        assert event == {"@timestamp": "t", "log.level": "info", "event": "x"}

    def test_json_chain_ends_with_json_renderer(self):
        processors = build_processors(json_format=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert _ecs_field_names in processors

    def test_console_chain_without_timestamp(self):
        processors = build_processors(json_format=False, add_timestamp=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert _ecs_field_names not in processors
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)


class TestConfigureLogging:
    def test_json_output(self, capsys):
        configure_logging(level="INFO", json_format=True, service="docspine-test")
        get_logger("tests").info("document_saved", document_id="abc")

        record = _last_record(capsys)
        assert record["event"] == "document_saved"
        assert record["document_id"] == "abc"
        assert record["service.name"] == "docspine-test"
        assert record["log.level"] == "info"
        assert "@timestamp" in record

    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("tests").debug("hidden")
        assert "hidden" not in capsys.readouterr().out

    def test_level_is_case_insensitive(self, capsys):
        configure_logging(level="debug", json_format=True)
        get_logger("tests").debug("shown")
        assert _last_record(capsys)["event"] == "shown"

    def test_console_output(self, capsys):
        configure_logging(level="DEBUG", json_format=False, add_timestamp=False)
        get_logger("tests").debug("visible")
        assert "visible" in capsys.readouterr().out

    @pytest.mark.parametrize("level", ["verbose", "", "TRACE"])
    def test_unknown_level_raises_config_error(self, level):
        with pytest.raises(ConfigError):
            configure_logging(level=level)
        assert not structlog.is_configured()

    def test_known_levels(self):
        assert LOG_LEVELS == ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
