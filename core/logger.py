"""TelegramBotLogger — Singleton JSON logger for the client wrapper.

Writes one JSON object per record to stderr and, when a log file is
configured, to a size-rotated file as well.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON object.

    ``extra=`` fields supplied at the call site are merged in, so the
    transport can attach ``api_method``, ``bot_id`` or ``status_code``
    without formatting them into the message::

        logger.debug("Dispatching", extra={"api_method": "getMe", "bot_id": 1234})
    """

    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
        }
        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in entry:
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TelegramBotLogger:
    """Process-wide logger holder.

    Usage::

        from core.logger import TelegramBotLogger

        logger = TelegramBotLogger.get_logger()
    """

    _instance: Optional["TelegramBotLogger"] = None
    _logger: Optional[logging.Logger] = None

    _NAME: str = "telegrambot"
    _MAX_BYTES: int = 2 * 1024 * 1024  # 2 MB
    _BACKUP_COUNT: int = 3

    def __new__(cls, level: int | str = logging.INFO, log_file: str | None = None) -> "TelegramBotLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_file)
        return cls._instance

    def _init_logger(self, level: int | str, log_file: str | None) -> None:
        self._logger = logging.getLogger(self._NAME)
        self._logger.setLevel(level)

        # Reloading the module must not stack handlers.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_file:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    @staticmethod
    def get_logger(level: int | str = logging.INFO, log_file: str | None = None) -> logging.Logger:
        """Return the shared :class:`logging.Logger`.

        *level* and *log_file* only take effect on the first call.
        """
        instance = TelegramBotLogger(level, log_file)
        assert instance._logger is not None  # set in __new__
        return instance._logger
