"""Shared logging formatters and context management."""

import json
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict
from contextlib import contextmanager

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.theme import Theme

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class LogContext:
    """Thread-local logging context for structured metadata."""

    def __init__(self) -> None:
        self._local = threading.local()

    def set_context(self, **kwargs: Any) -> None:
        """Set context variables for current thread."""
        if not hasattr(self._local, "context"):
            self._local.context = {}
        self._local.context.update(kwargs)

    def get_context(self) -> Dict[str, Any]:
        """Get current thread context."""
        if not hasattr(self._local, "context"):
            return {}
        return self._local.context.copy()

    def clear_context(self) -> None:
        """Clear context for current thread."""
        if hasattr(self._local, "context"):
            self._local.context.clear()

    @contextmanager
    def context(self, **kwargs: Any):
        """Context manager for temporary context variables."""
        old_context = self.get_context()
        try:
            self.set_context(**kwargs)
            yield
        finally:
            self.clear_context()
            self.set_context(**old_context)


# Global logging context
_log_context = LogContext()


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, include_context: bool = True) -> None:
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        }
        if extra_fields:
            log_entry["fields"] = extra_fields

        if self.include_context:
            context = _log_context.get_context()
            if context:
                log_entry["context"] = context

        return json.dumps(log_entry, default=str)


class PangolinRichHandler(RichHandler):
    """Custom Rich handler with event-aware styling."""

    STYLE_MAP = {
        "packing": "pangolin.packing",
        "bundle": "pangolin.bundle",
        "estimate": "pangolin.estimate",
    }

    def __init__(self, *args, **kwargs):
        theme = Theme(
            {
                "logging.level.debug": "dim cyan",
                "logging.level.info": "dim blue",
                "logging.level.warning": "yellow",
                "logging.level.error": "red",
                "logging.level.critical": "bold red",
                "pangolin.packing": "bright_green",
                "pangolin.bundle": "bright_cyan",
                "pangolin.estimate": "bright_magenta",
            }
        )

        console = Console(theme=theme, stderr=True)
        super().__init__(*args, console=console, **kwargs)

    def render_message(self, record: logging.LogRecord, message: str) -> Text:
        """Render message with context-aware styling."""
        text = Text(message)
        event_type = getattr(record, "event_type", None)
        if event_type in self.STYLE_MAP:
            text.stylize(self.STYLE_MAP[event_type])
        return text
