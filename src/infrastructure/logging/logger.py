"""Logging helpers for the workflow core.

Loggers are standard ``logging.Logger`` objects configured by a fluent
builder: one dated file handler under ``<project root>/logs/<subdir>`` and an
optional console handler. ``get_app_logger`` returns the shared application
logger used by use cases and adapters.
"""

import logging
from datetime import datetime
from pathlib import Path

from src.utils.utils import get_project_root


DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class LoggerBuilder:
    """Fluent builder for file and console backed loggers."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = False
        self._level = logging.INFO
        self._formatter_factory = LoggerBuilder._default_formatter
        self._file_handler_factory = LoggerBuilder._default_file_handler
        self._console_handler_factory = LoggerBuilder._default_console_handler
        self._logger: logging.Logger | None = None

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(self, factory) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(self, factory) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(self, factory) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Create the configured logger, reusing it on later calls.

        Returns:
            logging.Logger: Logger with file and optional console handlers.
        """
        if self._logger is not None:
            return self._logger

        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        logger.propagate = False

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"
        fmt = self._formatter_factory()

        has_file_handler = any(
            isinstance(handler, logging.FileHandler)
            and handler.baseFilename == str(log_path)
            for handler in logger.handlers
        )
        if not has_file_handler:
            logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console and not any(
            type(handler) is logging.StreamHandler
            for handler in logger.handlers
        ):
            logger.addHandler(self._console_handler_factory(fmt))

        self._logger = logger
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.FileHandler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(
        fmt: logging.Formatter,
    ) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper delegating to a built ``logging.Logger``."""

    _instance = None

    def __new__(cls, name: str = "app"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = cls._builder(name).build()
            cls._instance = instance
        return cls._instance

    @staticmethod
    def _builder(name: str) -> LoggerBuilder:
        return LoggerBuilder().name(name).subdir(name).prefix(f"{name}_logs")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Application logger shared by use cases and adapters."""

    _instance = None

    @staticmethod
    def _builder(name: str) -> LoggerBuilder:
        return (
            LoggerBuilder()
            .name("jib_workflows")
            .subdir("app")
            .prefix("app_logs")
            .console(True)
        )


def get_app_logger() -> AppLogger:
    """Return the application logger singleton."""
    return AppLogger()


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "get_app_logger",
]
