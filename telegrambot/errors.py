"""Exception hierarchy for failures reported by the Telegram Bot API."""

from typing import Any, Dict, Optional

from telegrambot.envelope import ResponseParameters


class TelegramAPIError(Exception):
    """A failure synthesized from an HTTP response or a service envelope.

    Transport failures are never wrapped in this class; they reach the
    callback as the original :mod:`requests` exception.

    Attributes:
        message: Human-readable description.
        code: Telegram ``error_code`` or the HTTP status code.
        http_status: HTTP status code, set only for HTTP-layer failures.
        parameters: Optional ``ResponseParameters`` sent with the error.
    """

    def __init__(
        self,
        message: Any,
        code: Any = None,
        http_status: Optional[int] = None,
        parameters: Optional[ResponseParameters] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.parameters = parameters

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a JSON-friendly dictionary."""
        data: Dict[str, Any] = {"message": self.message, "code": self.code}
        if self.http_status is not None:
            data["http_status"] = self.http_status
        if self.parameters is not None:
            data["parameters"] = self.parameters.model_dump(exclude_none=True)
        return data

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class HTTPStatusError(TelegramAPIError):
    """The server answered with a status outside the 2xx range."""

    def __init__(self, status_code: Optional[int]) -> None:
        super().__init__(
            message=f"HTTP request failed with status {status_code}",
            code=status_code,
            http_status=status_code,
        )


class EnvelopeError(TelegramAPIError):
    """The server answered 2xx but the envelope reports ``ok: false``."""
