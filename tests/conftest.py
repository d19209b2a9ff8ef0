"""Shared fixtures for the SDK test-suite."""

import os
import sys
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_sdk import TelegramClient, TelegramOptions

TOKEN = "123456:TEST-token"

# Canonical records shared by the client tests.
CHAT: Dict[str, Any] = {"id": 8754, "type": "group"}
MESSAGE: Dict[str, Any] = {"message_id": 4587, "chat": CHAT, "date": 45778965}
BOT_USER: Dict[str, Any] = {"id": 45872, "is_bot": True, "first_name": "Test_bot"}
FAILURE: Dict[str, Any] = {"ok": False, "error_code": 400, "description": "Bad request"}


def make_response(body: Any, status_code: int = 200) -> MagicMock:
    """Build a stand-in for :class:`requests.Response` returning *body* as JSON."""
    mock_resp = MagicMock()
    mock_resp.ok = 200 <= status_code < 300
    mock_resp.status_code = status_code
    mock_resp.json.return_value = body
    return mock_resp


def ok(result: Any) -> MagicMock:
    return make_response({"ok": True, "result": result})


@pytest.fixture()
def options() -> TelegramOptions:
    return TelegramOptions(bot_token=TOKEN)


@pytest.fixture()
def client(options: TelegramOptions) -> TelegramClient:
    return TelegramClient(options)
