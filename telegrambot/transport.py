"""Request dispatch and response normalization for the Bot API.

:func:`request` posts one JSON body to ``{endpoint}/bot{bot_id}/{method}``
and hands the raw outcome to :func:`unwrap`, which resolves it into a
single ``callback(error, result)`` call.  Blocking ``requests`` I/O is
offloaded via :func:`asyncio.to_thread` so the event loop is never
blocked.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Dict, Optional, Union

import requests
from pydantic import ValidationError

from config import REQUEST_TIMEOUT, TELEGRAM_ENDPOINT
from core.logger import TelegramBotLogger
from telegrambot.envelope import Envelope
from telegrambot.errors import EnvelopeError, HTTPStatusError

logger = TelegramBotLogger.get_logger()

BotId = Union[int, str]
Callback = Callable[[Optional[BaseException], Any], Any]
Handler = Callable[[Optional[BaseException], Any, Any], Any]

ENDPOINT: str = TELEGRAM_ENDPOINT


def build_url(endpoint: str, bot_id: BotId, method: str) -> str:
    """Return ``{endpoint}/bot{bot_id}/{method}``."""
    return f"{endpoint.rstrip('/')}/bot{bot_id}/{method}"


def unwrap(callback: Callback) -> Handler:
    """Build a handler that classifies one HTTP outcome for *callback*.

    The returned ``handler(transport_error, http_response, body)`` resolves
    exactly one of, in this order:

    1. transport error: ``callback(transport_error, None)``, unchanged;
    2. non-2xx or missing status: ``callback(HTTPStatusError, None)``,
       whatever the body holds;
    3. envelope with falsy ``ok``: ``callback(EnvelopeError, None)`` carrying
       ``description`` and ``error_code`` as sent;
    4. envelope with truthy ``ok``: ``callback(None, envelope.result)``.

    Classification never raises.  The handler returns whatever
    *callback* returns.
    """

    def handler(transport_error: Optional[BaseException], http_response: Any, body: Any) -> Any:
        if transport_error is not None:
            # The message may embed the request URL, and with it the token.
            logger.debug("Transport error", extra={"error_type": type(transport_error).__name__})
            return callback(transport_error, None)

        status = getattr(http_response, "status_code", None)
        if not isinstance(status, int) or not 200 <= status < 300:
            logger.debug("HTTP error status", extra={"status_code": status})
            return callback(HTTPStatusError(status), None)

        try:
            envelope = Envelope.model_validate(body)
        except ValidationError as exc:
            logger.debug("Malformed response envelope", extra={"error": str(exc)})
            return callback(EnvelopeError("Malformed response envelope"), None)

        if not envelope.succeeded:
            logger.debug(
                "Envelope reported failure",
                extra={"error_code": envelope.error_code, "description": envelope.description},
            )
            error = EnvelopeError(
                envelope.description if envelope.description is not None else "Unknown error",
                code=envelope.error_code,
                parameters=envelope.response_parameters(),
            )
            return callback(error, None)

        return callback(None, envelope.result)

    return handler


def _read_body(response: requests.Response) -> Any:
    """Decode a JSON body, falling back to the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


async def request(
    bot_id: BotId,
    method: str,
    options: Optional[Dict[str, Any]],
    callback: Callback,
    *,
    endpoint: str = ENDPOINT,
    timeout: float = REQUEST_TIMEOUT,
) -> Any:
    """POST *options* to the remote *method* and resolve *callback* once.

    Exactly one HTTP call is made; nothing is retried.  A timeout surfaces
    as a transport error.  If *callback* returns an awaitable it is
    awaited, and its result is returned.

    Raises:
        Exception: Only what *callback* itself raises.
    """
    url = build_url(endpoint, bot_id, method)
    log_extra = {"api_method": method}
    logger.debug("Dispatching request", extra=log_extra)

    transport_error: Optional[requests.RequestException] = None
    response: Optional[requests.Response] = None
    body: Any = None
    try:
        response = await asyncio.to_thread(requests.post, url, json=options, timeout=timeout)
    except requests.RequestException as exc:
        transport_error = exc
    else:
        body = _read_body(response)
        logger.debug("Response received", extra={**log_extra, "status_code": response.status_code})

    outcome = unwrap(callback)(transport_error, response, body)
    if inspect.isawaitable(outcome):
        outcome = await outcome
    return outcome
