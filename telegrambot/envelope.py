"""Pydantic models for the JSON envelope wrapping every Bot API response."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class ResponseParameters(BaseModel):
    """Hints on how a failed request can be retried or redirected."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None

    model_config = ConfigDict(extra="allow")


class Envelope(BaseModel):
    """``{ok, result?, error_code?, description?, parameters?}``.

    Any JSON object validates.  Fields are kept exactly as sent: ``ok`` is
    read by truthiness (a missing ``ok`` is a failure) and ``error_code`` /
    ``description`` are passed on untouched, whatever their type.
    """

    ok: Any = False
    result: Any = None
    error_code: Any = None
    description: Any = None
    parameters: Any = None

    model_config = ConfigDict(extra="allow")

    @property
    def succeeded(self) -> bool:
        return bool(self.ok)

    def response_parameters(self) -> Optional[ResponseParameters]:
        """Return ``parameters`` as a model, or ``None`` if absent or invalid."""
        if self.parameters is None:
            return None
        try:
            return ResponseParameters.model_validate(self.parameters)
        except ValidationError:
            return None
