"""Client configuration: bot token, API URL template and transport options.

:class:`TelegramOptions` is built once at startup, either directly or from
the environment via :meth:`TelegramOptions.from_env` (which also reads a
``.env`` file through ``python-dotenv``).  It is immutable afterwards.

Environment variables:

``TELEGRAM_BOT_TOKEN``
    Bot token issued by @BotFather (required).
``TELEGRAM_API_URL``
    URL template with a ``{token}`` placeholder.  Defaults to the public
    Bot API server.
``TELEGRAM_TIMEOUT``
    Request timeout in seconds.  Unset means the transport default.
``TELEGRAM_STREAM``
    Truthy to deliver results as a one-item async stream instead of an
    awaitable.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os
from typing import Optional

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_API_URL: str = "https://api.telegram.org/bot{token}/"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_bool(raw: Optional[str]) -> bool:
    """Interpret an environment flag.  Unset or unknown values are False."""
    return bool(raw) and raw.strip().lower() in _TRUTHY


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Parse ``TELEGRAM_TIMEOUT``; blank means no override."""
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"TELEGRAM_TIMEOUT must be a number of seconds, got {raw!r}") from None


# ── Options ──────────────────────────────────────────────────────────────────


class TelegramOptions(BaseModel):
    """Immutable client configuration.

    Attributes:
        bot_token: Opaque bot credential, embedded in the request URL.
        api_url: URL template containing ``{token}``.
        timeout: Per-request timeout in seconds; ``None`` keeps the
            transport default.
        stream: Deliver results as a one-item async stream.
    """

    model_config = ConfigDict(frozen=True)

    bot_token: str = Field(min_length=1, repr=False)
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None
    stream: bool = False

    @field_validator("api_url")
    @classmethod
    def _check_template(cls, value: str) -> str:
        if "{token}" not in value:
            raise ValueError("api_url must contain a {token} placeholder")
        return value

    @property
    def base_url(self) -> str:
        """The API root for this bot, always ending with ``/``."""
        url = self.api_url.replace("{token}", self.bot_token)
        return url if url.endswith("/") else url + "/"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "TelegramOptions":
        """Build options from environment variables (and ``.env``).

        Raises:
            ValueError: ``TELEGRAM_BOT_TOKEN`` is missing or a value is malformed.
        """
        load_dotenv(env_file)
        token = os.environ.get("TELEGRAM_BOT_TOKEN")
        if not token:
            logger.error("Config not loaded: TELEGRAM_BOT_TOKEN is NOT set")
            raise ValueError("TELEGRAM_BOT_TOKEN is not set")

        options = cls(
            bot_token=token,
            api_url=os.environ.get("TELEGRAM_API_URL") or DEFAULT_API_URL,
            timeout=_parse_timeout(os.environ.get("TELEGRAM_TIMEOUT")),
            stream=_parse_bool(os.environ.get("TELEGRAM_STREAM")),
        )
        logger.info(
            "Config loaded: TELEGRAM_BOT_TOKEN is set",
            extra={"api_url": options.api_url, "timeout": options.timeout, "stream": options.stream},
        )
        return options
