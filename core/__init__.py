"""Ambient plumbing shared by the client and the CLI.

This package must NEVER import from ``telegrambot/``.
"""

from core.logger import TelegramBotLogger

__all__ = [
    "TelegramBotLogger",
]
