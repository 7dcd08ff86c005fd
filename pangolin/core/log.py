"""Structured logging system with JSON output and rich terminal formatting."""

import logging
import threading
from typing import Any, Dict, List, Optional, Union, Protocol
from pathlib import Path

from .log_formatters import StructuredFormatter, PangolinRichHandler, _log_context


class Logger(Protocol):
    """Protocol for logger instances to enable dependency injection."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log info message."""

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log error message."""


class LogManager:
    """Central logging configuration and management.

    Loggers handed out before ``configure`` propagate to the root logger so
    that host applications (and pytest's caplog) see them. Once configured,
    the manager attaches its own handlers and stops propagation.
    """

    def __init__(self, namespace: str = "") -> None:
        self._namespace = namespace
        self._configured = False
        self._handlers: List[logging.Handler] = []
        self._loggers: Dict[str, logging.Logger] = {}
        self._lock = threading.RLock()

    def configure(
        self,
        level: Union[int, str] = logging.INFO,
        log_file: Optional[Path] = None,
        enable_json: bool = True,
        enable_console: bool = True,
        console_level: Optional[Union[int, str]] = None,
    ) -> None:
        """Configure logging system."""
        with self._lock:
            if self._configured:
                self._clear_configuration()

            if enable_json and log_file:
                log_file = Path(log_file)
                log_file.parent.mkdir(parents=True, exist_ok=True)
                json_handler = logging.FileHandler(log_file, encoding="utf-8")
                json_handler.setFormatter(StructuredFormatter(include_context=True))
                json_handler.setLevel(level)
                self._handlers.append(json_handler)

            if enable_console:
                console_handler = PangolinRichHandler(
                    show_time=True, show_path=False, markup=False
                )
                console_handler.setLevel(console_level or level)
                self._handlers.append(console_handler)

            self._configured = True
            for logger in self._loggers.values():
                self._attach(logger)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance."""
        with self._lock:
            full_name = f"{self._namespace}.{name}" if self._namespace else name
            if full_name in self._loggers:
                return self._loggers[full_name]

            logger = logging.getLogger(full_name)
            if self._configured:
                self._attach(logger)
            self._loggers[full_name] = logger
            return logger

    def shutdown(self) -> None:
        """Detach and close all handlers, restoring propagation."""
        with self._lock:
            self._clear_configuration()

    def _attach(self, logger: logging.Logger) -> None:
        logger.propagate = False
        logger.setLevel(logging.DEBUG)
        for handler in self._handlers:
            if handler not in logger.handlers:
                logger.addHandler(handler)

    def _clear_configuration(self) -> None:
        for logger in self._loggers.values():
            for handler in self._handlers:
                logger.removeHandler(handler)
            logger.propagate = True
            logger.setLevel(logging.NOTSET)

        for handler in self._handlers:
            try:
                handler.close()
            except (OSError, RuntimeError):
                pass  # Ignore handler close errors
        self._handlers = []
        self._configured = False


# Global log manager instance
_log_manager = LogManager()


def configure_logging(**kwargs: Any) -> None:
    """Configure the global logging system."""
    _log_manager.configure(**kwargs)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return _log_manager.get_logger(name)


def shutdown_logging() -> None:
    """Shutdown the logging system."""
    _log_manager.shutdown()


def log_packing_event(
    logger: Logger, event: str, strategy: Optional[str] = None, **kwargs: Any
) -> None:
    """Log a packing-related event."""
    extra: Dict[str, Any] = {"event_type": "packing", "packing_event": event}
    if strategy is not None:
        extra["strategy"] = strategy
    extra.update(kwargs)
    logger.info("Packing %s (%s)", event, strategy or "-", extra=extra)


# Context management shortcuts
def get_log_context() -> Dict[str, Any]:
    """Get current logging context."""
    return _log_context.get_context()


def log_context(**kwargs: Any) -> Any:
    """Context manager for temporary logging context."""
    return _log_context.context(**kwargs)
