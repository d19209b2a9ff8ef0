"""Typed Telegram Bot API SDK: Pydantic models, async client and exceptions.

:class:`TelegramClient` exposes one coroutine per Bot API method, all routed
through a single dispatcher that picks JSON or multipart encoding and
unwraps the response envelope.

Usage::

    from telegram_sdk import TelegramOptions, create_client

    client = create_client(TelegramOptions(bot_token="123:abc"))
    me = await client.get_me()
    await client.send_message(chat_id=me.id, text="hello")
"""

from telegram_sdk.client import TelegramClient
from telegram_sdk.config import TelegramOptions
from telegram_sdk.exceptions import TelegramException
from telegram_sdk.factory import TelegramOptionsFactory, create_client, create_client_async
from telegram_sdk.models import InputFile
from telegram_sdk.streams import as_stream

__all__ = [
    "TelegramClient",
    "TelegramOptions",
    "TelegramOptionsFactory",
    "TelegramException",
    "InputFile",
    "as_stream",
    "create_client",
    "create_client_async",
]
