"""Command-line entry point: invoke one Bot API method and print the result.

Examples::

    python main.py getMe
    python main.py send_message chat_id=42 text=hello
    python main.py sendLocation chat_id=42 latitude=52.5 longitude=13.4

``key=value`` pairs become the JSON body; values are decoded as JSON when
possible (numbers, booleans, objects) and kept as strings otherwise.
"""

import argparse
import asyncio
import json
import sys
from typing import Any

from config import BOT_TOKEN, REQUEST_TIMEOUT, TELEGRAM_ENDPOINT
from core.logger import TelegramBotLogger
from telegrambot import REMOTE_METHODS, TelegramAPIError, TelegramBot

logger = TelegramBotLogger.get_logger()


def parse_options(pairs: list[str]) -> dict[str, Any]:
    """Turn ``["chat_id=42", "text=hi"]`` into ``{"chat_id": 42, "text": "hi"}``.

    Raises:
        ValueError: If a pair has no ``=``.
    """
    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        try:
            options[key] = json.loads(raw)
        except json.JSONDecodeError:
            options[key] = raw
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call a single Telegram Bot API method.")
    parser.add_argument("method", help="Remote method (getMe) or its Python name (get_me).")
    parser.add_argument("options", nargs="*", metavar="key=value", help="Request body fields.")
    parser.add_argument("--bot-id", default=BOT_TOKEN, help="Bot token; defaults to $BOT_TOKEN.")
    parser.add_argument("--endpoint", default=TELEGRAM_ENDPOINT, help="API base address.")
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help="Request timeout in seconds.")
    return parser


async def run(bot: TelegramBot, method: str, options: dict[str, Any]) -> int:
    """Invoke *method* and print its outcome.  Returns the process exit code."""
    remote = REMOTE_METHODS.get(method, method)

    def report(err: BaseException | None, result: Any) -> int:
        if err is None:
            print(json.dumps(result, ensure_ascii=False, indent=2))
            return 0
        if isinstance(err, TelegramAPIError):
            payload = err.to_dict()
        else:
            payload = {"message": f"Transport error: {type(err).__name__}", "code": None}
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return 1

    logger.info("Invoking remote method", extra={"api_method": remote})
    return await bot.invoke(remote, options, report)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.bot_id:
        raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")

    try:
        options = parse_options(args.options)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    bot = TelegramBot(args.bot_id, endpoint=args.endpoint, timeout=args.timeout)
    return asyncio.run(run(bot, args.method, options))


if __name__ == "__main__":
    sys.exit(main())
