"""Exception hierarchy for the Telegram Bot API SDK."""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from telegram_sdk.models import ResponseParameters


class TelegramException(Exception):
    """Raised when a Bot API call does not produce a result.

    Two situations end up here:

    * Telegram answered with ``ok: false``.  ``error_code`` holds the
      stringified numeric code and ``parameters`` may carry
      ``retry_after`` / ``migrate_to_chat_id``.
    * The HTTP call itself failed (network error, malformed body).
      ``error_code`` is ``None`` and the transport error is chained as
      ``__cause__``.

    Attributes:
        description: Human-readable message from Telegram or the transport.
        error_code: Telegram's ``error_code`` as a string, when available.
        parameters: Telegram's ``ResponseParameters``, when available.
        response_body: Raw decoded envelope, when available.
    """

    def __init__(
        self,
        description: str,
        error_code: Optional[str] = None,
        parameters: Optional[ResponseParameters] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.description = description
        self.error_code = error_code
        self.parameters = parameters
        self.response_body = response_body or {}
        super().__init__(description)

    @classmethod
    def from_envelope(cls, body: Dict[str, Any]) -> "TelegramException":
        """Build the exception from an ``ok: false`` response envelope."""
        code = body.get("error_code")
        raw_params = body.get("parameters")
        parameters = None
        if isinstance(raw_params, dict):
            try:
                parameters = ResponseParameters.model_validate(raw_params)
            except ValidationError:
                # Unusable hints; the raw block stays in response_body.
                parameters = None
        return cls(
            body.get("description") or "Unknown error",
            error_code=str(code) if code is not None else None,
            parameters=parameters,
            response_body=body,
        )

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating a rate-limited request."""
        return self.parameters.retry_after if self.parameters else None

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        """New identifier of a group that was migrated to a supergroup."""
        return self.parameters.migrate_to_chat_id if self.parameters else None

    def __repr__(self) -> str:
        return f"TelegramException({self.description!r}, error_code={self.error_code!r})"
