"""
Tests for channel loggers, the provider registry and the explicit-channel entry point.
"""

import logging
from unittest.mock import MagicMock

import pytest

from logext import ChannelLogger, StdlibLoggerProvider, TRACE, get_logger, get_marker, get_provider, set_provider
from logext.levels import level_from_name


class TestProviderRegistry:
    def test_default_provider(self):
        assert isinstance(get_provider(), StdlibLoggerProvider)

    def test_set_provider_returns_previous(self):
        default = get_provider()
        custom = MagicMock()

        assert set_provider(custom) is default
        assert get_provider() is custom
        assert set_provider(None) is custom
        assert get_provider() is default

    def test_stdlib_provider_wraps_named_logger(self):
        channel = StdlibLoggerProvider().get_logger("billing.Invoice")

        assert isinstance(channel, ChannelLogger)
        assert channel.logger is logging.getLogger("billing.Invoice")
        assert channel.name == "billing.Invoice"


class TestExplicitChannel:
    def test_get_logger_uses_given_name(self, recording_provider):
        assert get_logger("reports.Daily") is recording_provider.get_logger.return_value
        recording_provider.get_logger.assert_called_once_with("reports.Daily")

    def test_get_logger_records_call_site(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("reports.Daily").info("rows=%d", 12)

        record = caplog.records[-1]
        assert record.name == "reports.Daily"
        assert record.getMessage() == "rows=12"
        assert record.funcName == "test_get_logger_records_call_site"


class TestChannelLogger:
    def test_marker_goes_into_extra(self, caplog):
        caplog.set_level(logging.INFO)
        audit = get_marker("AUDIT")
        channel = get_logger("security.Gate")

        channel.warn(audit, "denied %s", "bob", extra={"ip": "10.0.0.1"})

        record = caplog.records[-1]
        assert record.marker is audit
        assert record.ip == "10.0.0.1"
        assert record.levelno == logging.WARNING

    def test_unmarked_record_has_no_marker(self, caplog):
        caplog.set_level(logging.INFO)
        get_logger("security.Gate").info("open")

        assert not hasattr(caplog.records[-1], "marker")

    def test_disabled_level_is_not_emitted(self, caplog):
        caplog.set_level(logging.ERROR)
        channel = get_logger("security.Gate")

        channel.info(get_marker("AUDIT"), "quiet")
        channel.warning("quiet too")

        assert caplog.records == []
        assert channel.is_warn_enabled() is False
        assert channel.is_error_enabled(get_marker("AUDIT")) is True

    def test_marker_without_message_is_rejected(self):
        channel = get_logger("security.Gate")

        with pytest.raises(TypeError, match="a message must follow the marker"):
            channel.info(get_marker("AUDIT"))

    def test_caller_stacklevel_is_added_to(self, caplog):
        caplog.set_level(logging.INFO)

        def emit():
            get_logger("security.Gate").info("from helper", stacklevel=2)

        emit()

        assert caplog.records[-1].funcName == "test_caller_stacklevel_is_added_to"


class TestLevels:
    def test_trace_is_registered(self):
        assert TRACE < logging.DEBUG
        assert logging.getLevelName(TRACE) == "TRACE"

    def test_level_from_name(self):
        assert level_from_name("trace") == TRACE
        assert level_from_name("WARN") == logging.WARNING
        assert level_from_name(" error ") == logging.ERROR
        assert level_from_name("nonsense") == logging.INFO
        assert level_from_name(None, default=logging.DEBUG) == logging.DEBUG
