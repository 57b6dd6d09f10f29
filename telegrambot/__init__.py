"""Minimal Telegram Bot API client: request dispatch and response normalization.

Usage::

    from telegrambot import TelegramBot, TelegramAPIError

    def on_result(err, result):
        ...

    await TelegramBot(BOT_TOKEN).get_me(on_result)
"""

from telegrambot.bot import REMOTE_METHODS, TelegramBot
from telegrambot.envelope import Envelope, ResponseParameters
from telegrambot.errors import EnvelopeError, HTTPStatusError, TelegramAPIError
from telegrambot.transport import ENDPOINT, request, unwrap

__all__ = [
    # Facade
    "TelegramBot",
    "REMOTE_METHODS",
    # Pipeline
    "ENDPOINT",
    "request",
    "unwrap",
    # Envelope models
    "Envelope",
    "ResponseParameters",
    # Errors
    "TelegramAPIError",
    "HTTPStatusError",
    "EnvelopeError",
]
