"""Sample application: build a client from the environment and call getMe.

Reads ``TELEGRAM_BOT_TOKEN`` (and the optional settings documented in
:mod:`telegram_sdk.config`) from the environment or a ``.env`` file.  When
``TELEGRAM_STREAM`` is truthy the result is consumed as a stream.
"""

import asyncio
import os
from contextlib import aclosing

from telegram_sdk import TelegramClient, TelegramException, TelegramOptions, as_stream, create_client_async
from telegram_sdk.logger import TelegramLogger
from telegram_sdk.models import User

logger = TelegramLogger.get_logger(
    os.environ.get("LOG_LEVEL", "INFO"),
    log_file=os.environ.get("LOG_FILE"),
)


class BotService:
    """Thin application service on top of :class:`TelegramClient`."""

    def __init__(self, client: TelegramClient) -> None:
        self._client = client

    async def get_me(self) -> User:
        if not self._client.options.stream:
            return await self._client.get_me()
        async with aclosing(as_stream(self._client.get_me())) as results:
            async for me in results:
                return me
        raise RuntimeError("getMe stream completed without a result")


async def main() -> None:
    client = await create_client_async(TelegramOptions.from_env)
    service = BotService(client)
    try:
        me = await service.get_me()
    except TelegramException as exc:
        logger.error("getMe failed", extra={"error_code": exc.error_code, "description": exc.description})
        raise SystemExit(1) from exc
    logger.info("Bot identity resolved", extra={"bot_id": me.id, "username": me.username})


if __name__ == "__main__":
    asyncio.run(main())
