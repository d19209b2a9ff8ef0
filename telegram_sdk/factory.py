"""Client construction.

Configuration is supplied exactly once, when the client is built:

* :func:`create_client` takes ready options (or reads the environment);
* :func:`create_client_async` accepts anything that produces options,
  including coroutines, so the token can come from a secret store or an
  async configuration service.

Usage::

    client = create_client(TelegramOptions(bot_token="123:abc"))

    async def load_options() -> TelegramOptions:
        return TelegramOptions(bot_token=await vault.read("telegram"))

    client = await create_client_async(load_options)
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, Union, runtime_checkable

from telegram_sdk.client import TelegramClient
from telegram_sdk.config import TelegramOptions

logger = logging.getLogger(__name__)


@runtime_checkable
class TelegramOptionsFactory(Protocol):
    """An object that knows how to build client options (sync or async)."""

    def create_telegram_options(self) -> Union[TelegramOptions, Awaitable[TelegramOptions]]:
        ...


OptionsSource = Union[
    TelegramOptions,
    Mapping[str, Any],
    TelegramOptionsFactory,
    Callable[[], Union[TelegramOptions, Mapping[str, Any], Awaitable[Any]]],
]


def _coerce_options(value: Any) -> TelegramOptions:
    if isinstance(value, TelegramOptions):
        return value
    if isinstance(value, Mapping):
        return TelegramOptions.model_validate(dict(value))
    raise TypeError(f"expected TelegramOptions or a mapping, got {type(value).__name__}")


def create_client(options: Optional[Union[TelegramOptions, Mapping[str, Any]]] = None) -> TelegramClient:
    """Build a client from *options*, or from the environment when omitted."""
    resolved = TelegramOptions.from_env() if options is None else _coerce_options(options)
    logger.debug("Telegram client created", extra={"api_url": resolved.api_url})
    return TelegramClient(resolved)


async def create_client_async(source: OptionsSource) -> TelegramClient:
    """Build a client from an options source that may be asynchronous.

    *source* may be:

    * a :class:`TelegramOptions` instance or a mapping of its fields;
    * an object with a ``create_telegram_options()`` method;
    * a zero-argument callable.

    Methods and callables may return the options directly or an awaitable
    resolving to them.
    """
    if isinstance(source, (TelegramOptions, Mapping)):
        produced: Any = source
    elif isinstance(source, TelegramOptionsFactory):
        produced = source.create_telegram_options()
    elif callable(source):
        produced = source()
    else:
        raise TypeError(f"cannot build TelegramOptions from {type(source).__name__}")

    if inspect.isawaitable(produced):
        produced = await produced
    return create_client(_coerce_options(produced))
