"""Tests for the logging system."""

import json
import logging
from unittest.mock import Mock

from pangolin.core.log import (
    LogManager,
    log_packing_event,
    log_context,
    get_log_context,
)
from pangolin.core.log_formatters import StructuredFormatter, PangolinRichHandler


class TestStructuredFormatter:
    """Test JSON log formatting."""

    def _record(self, **extra):
        record = logging.LogRecord("pangolin.test", logging.INFO, __file__, 1,
                                   "Packed %s bundles", (3,), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        entry = json.loads(StructuredFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "pangolin.test"
        assert entry["message"] == "Packed 3 bundles"
        assert "fields" not in entry

    def test_extra_fields_and_context(self):
        with log_context(run_id="r1"):
            entry = json.loads(
                StructuredFormatter().format(self._record(event_type="packing"))
            )

        assert entry["fields"] == {"event_type": "packing"}
        assert entry["context"] == {"run_id": "r1"}
        assert get_log_context() == {}


class TestLogManager:
    """Test LogManager."""

    def test_unconfigured_loggers_propagate(self):
        manager = LogManager("pangolin_test_a")
        logger = manager.get_logger("mod")

        assert logger.name == "pangolin_test_a.mod"
        assert logger.propagate is True
        assert manager.get_logger("mod") is logger

    def test_configure_attaches_handlers(self, temp_dir):
        manager = LogManager("pangolin_test_b")
        early = manager.get_logger("early")
        log_file = temp_dir / "logs" / "pangolin.jsonl"

        manager.configure(level=logging.DEBUG, log_file=log_file, enable_console=True)
        late = manager.get_logger("late")
        try:
            for logger in (early, late):
                assert logger.propagate is False
                assert any(isinstance(h, PangolinRichHandler) for h in logger.handlers)
            late.debug("hello %s", "file")
            for handler in late.handlers:
                handler.flush()
            entry = json.loads(log_file.read_text().splitlines()[-1])
            assert entry["message"] == "hello file"
        finally:
            manager.shutdown()

        assert early.handlers == []
        assert early.propagate is True


class TestLogPackingEvent:
    """Test the packing event helper."""

    def test_extra_fields(self):
        logger = Mock()

        log_packing_event(logger, "completed", "count", bundles=3)

        args, kwargs = logger.info.call_args
        assert args == ("Packing %s (%s)", "completed", "count")
        assert kwargs["extra"] == {
            "event_type": "packing",
            "packing_event": "completed",
            "strategy": "count",
            "bundles": 3,
        }


class TestRichHandler:
    """Test event-aware console styling."""

    def _record(self, event_type=None):
        record = logging.LogRecord("pangolin.test", logging.DEBUG, __file__, 1,
                                   "Split A into 2 bundles", (), None)
        if event_type is not None:
            record.event_type = event_type
        return record

    def test_event_types_styled(self):
        handler = PangolinRichHandler()
        for event_type, style in PangolinRichHandler.STYLE_MAP.items():
            text = handler.render_message(self._record(event_type), "msg")
            assert [span.style for span in text.spans] == [style]

    def test_plain_records_unstyled(self):
        text = PangolinRichHandler().render_message(self._record(), "msg")
        assert text.spans == []
