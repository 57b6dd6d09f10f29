"""TelegramBot — per-bot facade over :func:`telegrambot.transport.request`.

Each public coroutine maps to exactly one Bot API method of the same
name (``send_message`` → ``sendMessage``).  They carry no logic of their
own: *options* is forwarded as the JSON body (``{}`` when omitted) and
*callback* receives ``(error, result)`` once the call resolves.

Usage::

    bot = TelegramBot(BOT_TOKEN)
    await bot.send_message({"chat_id": 42, "text": "hi"}, on_sent)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from config import REQUEST_TIMEOUT
from telegrambot.transport import ENDPOINT, BotId, Callback, request

Options = Optional[Dict[str, Any]]

# Python name → remote method name.
REMOTE_METHODS: Dict[str, str] = {
    "get_me": "getMe",
    "send_message": "sendMessage",
    "forward_message": "forwardMessage",
    "send_photo": "sendPhoto",
    "send_audio": "sendAudio",
    "send_document": "sendDocument",
    "send_sticker": "sendSticker",
    "send_video": "sendVideo",
    "send_location": "sendLocation",
    "send_chat_action": "sendChatAction",
    "send_contact": "sendContact",
    "get_user_profile_photos": "getUserProfilePhotos",
    "get_file": "getFile",
    "kick_chat_member": "kickChatMember",
    "unban_chat_member": "unbanChatMember",
    "answer_callback_query": "answerCallbackQuery",
    "edit_message_text": "editMessageText",
    "edit_message_caption": "editMessageCaption",
    "edit_message_reply_markup": "editMessageReplyMarkup",
    "get_updates": "getUpdates",
    "answer_inline_query": "answerInlineQuery",
    "set_webhook": "setWebhook",
}


class TelegramBot:
    """Facade bound to one bot identifier.

    Construction performs no network activity.  The identifier, endpoint
    and timeout are fixed for the lifetime of the instance; calls share
    nothing else and may run concurrently.
    """

    def __init__(self, bot_id: BotId, endpoint: str = ENDPOINT, timeout: float = REQUEST_TIMEOUT) -> None:
        """Bind the facade to *bot_id*.

        Args:
            bot_id: Bot token (or numeric identifier) placed after ``/bot``.
            endpoint: API base address, e.g. ``https://api.telegram.org``.
            timeout: Per-request timeout in seconds.
        """
        self._bot_id = bot_id
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout

    @property
    def bot_id(self) -> BotId:
        return self._bot_id

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __repr__(self) -> str:
        # Never render the identifier: for real bots it is the secret token.
        return f"TelegramBot(endpoint={self._endpoint!r})"

    async def invoke(self, method: str, options: Options, callback: Callback) -> Any:
        """Call the remote *method* with *options*, resolving *callback*."""
        return await request(
            self._bot_id,
            method,
            options,
            callback,
            endpoint=self._endpoint,
            timeout=self._timeout,
        )

    # ------------------------------------------------------------------
    #  Bot API methods
    # ------------------------------------------------------------------

    async def get_me(self, callback: Callback) -> Any:
        """Return basic information about the bot as a ``User``."""
        return await self.invoke("getMe", {}, callback)

    async def send_message(self, options: Options, callback: Callback) -> Any:
        """Send a text message; resolves with the sent ``Message``."""
        return await self.invoke("sendMessage", options or {}, callback)

    async def forward_message(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("forwardMessage", options or {}, callback)

    async def send_photo(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendPhoto", options or {}, callback)

    async def send_audio(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendAudio", options or {}, callback)

    async def send_document(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendDocument", options or {}, callback)

    async def send_sticker(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendSticker", options or {}, callback)

    async def send_video(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendVideo", options or {}, callback)

    async def send_location(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendLocation", options or {}, callback)

    async def send_chat_action(self, options: Options, callback: Callback) -> Any:
        """Show a status such as ``typing`` in the chat for a few seconds."""
        return await self.invoke("sendChatAction", options or {}, callback)

    async def send_contact(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("sendContact", options or {}, callback)

    async def get_user_profile_photos(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("getUserProfilePhotos", options or {}, callback)

    async def get_file(self, options: Options, callback: Callback) -> Any:
        """Resolve a ``file_id`` into a ``File`` with a download path."""
        return await self.invoke("getFile", options or {}, callback)

    async def kick_chat_member(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("kickChatMember", options or {}, callback)

    async def unban_chat_member(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("unbanChatMember", options or {}, callback)

    async def answer_callback_query(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("answerCallbackQuery", options or {}, callback)

    async def edit_message_text(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("editMessageText", options or {}, callback)

    async def edit_message_caption(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("editMessageCaption", options or {}, callback)

    async def edit_message_reply_markup(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("editMessageReplyMarkup", options or {}, callback)

    async def get_updates(self, options: Options, callback: Callback) -> Any:
        """Fetch pending updates once; no polling loop is run."""
        return await self.invoke("getUpdates", options or {}, callback)

    async def answer_inline_query(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("answerInlineQuery", options or {}, callback)

    async def set_webhook(self, options: Options, callback: Callback) -> Any:
        return await self.invoke("setWebhook", options or {}, callback)
