"""Tests for the sample BotService."""

import os
import sys
from unittest.mock import MagicMock, patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from conftest import BOT_USER, FAILURE, TOKEN, make_response, ok
from main import BotService
from telegram_sdk import TelegramClient, TelegramException, TelegramOptions, as_stream


class TestBotService:
    """getMe through both delivery modes."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stream", [False, True])
    @patch("telegram_sdk.client.requests.post")
    async def test_get_me(self, mock_post: MagicMock, stream: bool) -> None:
        mock_post.return_value = ok(BOT_USER)
        service = BotService(TelegramClient(TelegramOptions(bot_token=TOKEN, stream=stream)))

        me = await service.get_me()
        assert me.first_name == "Test_bot"
        mock_post.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("stream", [False, True])
    @patch("telegram_sdk.client.requests.post")
    async def test_get_me_failure(self, mock_post: MagicMock, stream: bool) -> None:
        mock_post.return_value = make_response(FAILURE, status_code=400)
        service = BotService(TelegramClient(TelegramOptions(bot_token=TOKEN, stream=stream)))

        with pytest.raises(TelegramException) as exc_info:
            await service.get_me()
        assert exc_info.value.error_code == "400"

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_stream_closed_after_result(self, mock_post: MagicMock) -> None:
        mock_post.return_value = ok(BOT_USER)
        service = BotService(TelegramClient(TelegramOptions(bot_token=TOKEN, stream=True)))
        created = []

        def tracking_stream(call):
            stream = as_stream(call)
            created.append(stream)
            return stream

        with patch("main.as_stream", side_effect=tracking_stream):
            me = await service.get_me()

        assert me.id == 45872
        assert len(created) == 1
        assert created[0].ag_frame is None
