"""Stream-style delivery of Bot API results.

The façade returns coroutines.  Callers that consume results as streams can
wrap any call with :func:`as_stream`::

    async for me in as_stream(client.get_me()):
        print(me.username)

The stream yields exactly one item and then completes.  A failed call
raises its :class:`~telegram_sdk.exceptions.TelegramException` from the
iteration instead of yielding.
"""

from typing import AsyncIterator, Awaitable, TypeVar

T = TypeVar("T")


async def as_stream(call: Awaitable[T]) -> AsyncIterator[T]:
    """Turn a pending call into a single-item async stream."""
    yield await call
