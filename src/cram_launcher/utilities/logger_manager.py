"""Logger manager with colored console output and optional JSON records.

Every launcher module logs through ``logging.getLogger(__name__)``; the manager
configures the ``cram_launcher`` parent logger once so those records reach a
stderr console handler and, when enabled, a rotating log file.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import datetime
import json
import logging
from logging import Filter, Handler, Logger, LogRecord
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Any, ClassVar

import colorlog

ROOT_LOGGER_NAME = "cram_launcher"


@dataclass
class LoggerConfig:
    """Configuration for LoggerManager."""

    log_dir: Path = Path("artifacts/logs")
    log_level: str = "INFO"
    log_file_name: str = "cram-launcher.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    structured_logging: bool = False
    file_logging: bool = False
    log_colors: dict[str, str] | None = None

    DEFAULT_LOG_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    }

    def __post_init__(self) -> None:
        self.log_dir = Path(self.log_dir).resolve()
        self.log_level = self.log_level.upper()
        self.log_colors = self.log_colors or self.DEFAULT_LOG_COLORS


class ContextFilter(Filter):
    """Attach the active context mapping to every record as ``record.context``."""

    def __init__(self) -> None:
        super().__init__()
        self.stack: list[dict[str, Any]] = []

    def filter(self, record: LogRecord) -> bool:
        merged: dict[str, Any] = {}
        for frame in self.stack:
            merged.update(frame)
        existing = getattr(record, "context", None)
        if isinstance(existing, dict):
            merged.update(existing)
        record.context = merged
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: LogRecord) -> str:
        log_data = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "context": getattr(record, "context", {}),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


class LoggerManager:
    """Owns the handlers of the ``cram_launcher`` logger tree."""

    def __init__(
        self,
        config: LoggerConfig | None = None,
        name: str = ROOT_LOGGER_NAME,
    ) -> None:
        self.name = name
        self.config = config or LoggerConfig()
        self._context_filter = ContextFilter()
        self._handlers: list[Handler] = []
        self._logger = self._configure_logger()

    def get_logger(self) -> Logger:
        return self._logger

    def _configure_logger(self) -> Logger:
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.getLevelName(self.config.log_level))

        self._handlers.append(self._console_handler())
        file_handler = self._file_handler() if self.config.file_logging else None
        if file_handler:
            self._handlers.append(file_handler)
        for handler in self._handlers:
            handler.addFilter(self._context_filter)
            logger.addHandler(handler)
        logger.propagate = False
        return logger

    def _console_handler(self) -> Handler:
        handler = colorlog.StreamHandler(sys.stderr)
        if self.config.structured_logging:
            handler.setFormatter(StructuredFormatter())
        else:
            handler.setFormatter(
                colorlog.ColoredFormatter(
                    "%(log_color)s[%(levelname)s]%(reset)s %(message)s",
                    log_colors=self.config.log_colors,
                )
            )
        return handler

    def _file_handler(self) -> Handler | None:
        file_path = self.config.log_dir / self.config.log_file_name
        try:
            self.config.log_dir.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                file_path,
                maxBytes=self.config.max_file_size_mb * 1024 * 1024,
                backupCount=self.config.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            print(f"Failed to create RotatingFileHandler: {e}", file=sys.stderr)
            return None
        handler.setFormatter(
            StructuredFormatter()
            if self.config.structured_logging
            else logging.Formatter(
                "%(asctime)s - [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        return handler

    @contextmanager
    def context(self, **context_kwargs: Any) -> Iterator[Logger]:
        """Attach ``context_kwargs`` to every record emitted inside the block."""
        self._context_filter.stack.append(context_kwargs)
        try:
            yield self._logger
        finally:
            self._context_filter.stack.pop()

    def flush(self) -> None:
        for handler in self._handlers:
            handler.flush()

    def shutdown(self) -> None:
        """Flush and detach every handler this manager installed."""
        self.flush()
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        self._logger.propagate = True
