"""TelegramLogger: Singleton JSON logger for the SDK and applications using it.

Library modules log through ``logging.getLogger(__name__)``, i.e. children
of the ``telegram_sdk`` logger.  :class:`TelegramLogger` attaches JSON
handlers to that parent: always one on stderr, plus a rotating file when a
log file path is configured.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOGGER_NAME = "telegram_sdk"


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present.  Any *extra* key-value pairs passed via the ``extra``
    parameter of a logging call are merged into the JSON object, e.g.::

        logger.warning("Bot API error", extra={"api_method": "sendMessage", "error_code": "400"})

    Produces::

        {"timestamp": "…", "level": "WARNING", …, "api_method": "sendMessage", "error_code": "400"}
    """

    # Keys that belong to the standard LogRecord; everything else is extra.
    _BUILTIN_ATTRS: frozenset = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    return resolved


class TelegramLogger:
    """Singleton that configures the ``telegram_sdk`` logger once.

    Usage::

        from telegram_sdk.logger import TelegramLogger

        logger = TelegramLogger.get_logger("DEBUG", log_file="logs/bot.log")
        logger.info("Bot started")
    """

    _instance: Optional["TelegramLogger"] = None
    _logger: Optional[logging.Logger] = None

    # Rotation settings
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> "TelegramLogger":
        if cls._instance is None:
            resolved = _resolve_level(level)
            instance = super().__new__(cls)
            instance._init_logger(resolved, log_file)
            cls._instance = instance
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_file: Optional[str]) -> None:
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if not log_file:
            return

        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=self._MAX_BYTES,
            backupCount=self._BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
        """Return the shared ``telegram_sdk`` logger.

        Creates the singleton on first call; subsequent calls return the
        same logger regardless of the arguments.
        """
        instance = TelegramLogger(level, log_file)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Tear down the singleton so the next call reconfigures from scratch."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None
