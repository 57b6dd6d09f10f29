"""Application configuration — environment variables and derived constants.

Loads ``TELEGRAM_ENDPOINT``, ``BOT_TOKEN``, ``REQUEST_TIMEOUT``,
``LOG_LEVEL`` and ``LOG_FILE`` from the environment via ``python-dotenv``.
All values are resolved at import time so other modules can
``from config import …`` without repeated lookups.  Nothing here is
mutated at runtime; callers that need a different endpoint pass it
explicitly.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import TelegramBotLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_ENDPOINT: str = "https://api.telegram.org"
DEFAULT_TIMEOUT: float = 10.0

DEFAULT_LOG_LEVEL: str = "INFO"


# Parsed ahead of the other helpers: the logger needs it.
def _parse_log_level(raw: str | None) -> str:
    """Return a level name :mod:`logging` accepts, falling back to ``INFO``."""
    if not raw or not raw.strip():
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


_RAW_LOG_LEVEL: str | None = os.environ.get("LOG_LEVEL")
LOG_LEVEL: str = _parse_log_level(_RAW_LOG_LEVEL)
LOG_FILE: str | None = os.environ.get("LOG_FILE") or None

logger = TelegramBotLogger.get_logger(LOG_LEVEL, LOG_FILE)

if _RAW_LOG_LEVEL and _RAW_LOG_LEVEL.strip().upper() != LOG_LEVEL:
    logger.warning("LOG_LEVEL is not a known level, using default", extra={"raw": _RAW_LOG_LEVEL})


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_endpoint(raw: str | None) -> str:
    """Return the API base address without a trailing slash."""
    if not raw or not raw.strip():
        return DEFAULT_ENDPOINT
    return raw.strip().rstrip("/")


def _parse_timeout(raw: str | None) -> float:
    """Parse a positive number of seconds, falling back to the default."""
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("REQUEST_TIMEOUT is not a number, using default", extra={"raw": raw})
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("REQUEST_TIMEOUT must be positive, using default", extra={"raw": raw})
        return DEFAULT_TIMEOUT
    return value


# ── Public constants ─────────────────────────────────────────────────────────

TELEGRAM_ENDPOINT: str = _parse_endpoint(os.environ.get("TELEGRAM_ENDPOINT"))
BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN") or None
REQUEST_TIMEOUT: float = _parse_timeout(os.environ.get("REQUEST_TIMEOUT"))


# ── Startup diagnostics ─────────────────────────────────────────────────────

logger.debug(
    "Config loaded",
    extra={"endpoint": TELEGRAM_ENDPOINT, "timeout": REQUEST_TIMEOUT, "bot_token_set": BOT_TOKEN is not None},
)
