"""Tests for TelegramClient: dispatcher, envelope handling and façade."""

import gc
import inspect
import os
import sys
import warnings
from unittest.mock import MagicMock, patch

import pytest
import requests
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from conftest import BOT_USER, CHAT, FAILURE, MESSAGE, TOKEN, make_response, ok
from telegram_sdk import InputFile, TelegramClient, TelegramException, TelegramOptions
from telegram_sdk.methods import METHODS
from telegram_sdk.models import Message, MessageId, Poll, User
from telegram_sdk.params import SendMessageParams


def _sent_url(mock_post: MagicMock) -> str:
    return mock_post.call_args[0][0]


def _sent_kwargs(mock_post: MagicMock) -> dict:
    return mock_post.call_args[1]


# ── TelegramException ────────────────────────────────────────────────────────


class TestTelegramException:
    """Validate the single SDK exception type."""

    def test_from_envelope(self) -> None:
        exc = TelegramException.from_envelope(FAILURE)
        assert exc.description == "Bad request"
        assert exc.error_code == "400"
        assert str(exc) == "Bad request"
        assert exc.response_body == FAILURE

    def test_retry_after(self) -> None:
        exc = TelegramException.from_envelope(
            {"ok": False, "error_code": 429, "description": "Too Many Requests", "parameters": {"retry_after": 7}}
        )
        assert exc.retry_after == 7
        assert exc.migrate_to_chat_id is None

    def test_malformed_parameters_ignored(self) -> None:
        body = {"ok": False, "error_code": 429, "description": "Too Many", "parameters": {"retry_after": "soon"}}
        exc = TelegramException.from_envelope(body)
        assert exc.description == "Too Many"
        assert exc.error_code == "429"
        assert exc.parameters is None
        assert exc.retry_after is None
        assert exc.response_body["parameters"] == {"retry_after": "soon"}

    def test_transport_error_has_no_code(self) -> None:
        exc = TelegramException("offline")
        assert exc.error_code is None
        assert exc.parameters is None
        assert exc.retry_after is None

    def test_is_exception(self) -> None:
        assert issubclass(TelegramException, Exception)


# ── Construction ─────────────────────────────────────────────────────────────


class TestClientInit:
    """Validate client initialisation."""

    def test_base_url(self, client: TelegramClient) -> None:
        assert client._base_url == f"https://api.telegram.org/bot{TOKEN}/"

    def test_default_timeout(self, client: TelegramClient) -> None:
        assert client._timeout is None

    def test_custom_api_url(self) -> None:
        c = TelegramClient(TelegramOptions(bot_token="t", api_url="http://localhost:8081/bot{token}", timeout=30))
        assert c._base_url == "http://localhost:8081/bott/"
        assert c._timeout == 30


# ── Dispatcher ───────────────────────────────────────────────────────────────


class TestPostHelper:
    """Validate the internal _post method."""

    @patch("telegram_sdk.client.requests.post")
    def test_success_returns_typed_result(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(BOT_USER)

        result = client._post("getMe")
        assert isinstance(result, User)
        assert result.first_name == "Test_bot"
        mock_post.assert_called_once()
        assert _sent_url(mock_post) == f"https://api.telegram.org/bot{TOKEN}/getMe"
        assert _sent_kwargs(mock_post) == {"json": {}}

    @patch("telegram_sdk.client.requests.post")
    def test_api_error_raises(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = make_response(FAILURE, status_code=400)

        with pytest.raises(TelegramException) as exc_info:
            client._post("sendMessage", {"chat_id": 8754, "text": "hi"})
        assert exc_info.value.description == "Bad request"
        assert exc_info.value.error_code == "400"

    @patch("telegram_sdk.client.requests.post")
    def test_ok_false_with_http_200_still_raises(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = make_response(FAILURE, status_code=200)

        with pytest.raises(TelegramException) as exc_info:
            client._post("getMe")
        assert exc_info.value.error_code == "400"

    @patch("telegram_sdk.client.requests.post")
    def test_ok_false_with_malformed_parameters(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = make_response(
            {"ok": False, "error_code": 429, "description": "Too Many", "parameters": {"retry_after": "soon"}},
            status_code=429,
        )

        with pytest.raises(TelegramException) as exc_info:
            client._post("getMe")
        assert exc_info.value.description == "Too Many"
        assert exc_info.value.error_code == "429"

    @patch("telegram_sdk.client.requests.post")
    def test_network_error_wrapped(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.side_effect = requests.ConnectionError("offline")

        with pytest.raises(TelegramException) as exc_info:
            client._post("getMe")
        assert exc_info.value.error_code is None
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @patch("telegram_sdk.client.requests.post")
    def test_network_error_hides_token(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.side_effect = requests.ConnectionError(f"Max retries exceeded with url: /bot{TOKEN}/getMe")

        with pytest.raises(TelegramException) as exc_info:
            client._post("getMe")
        assert TOKEN not in exc_info.value.description

    @patch("telegram_sdk.client.requests.post")
    def test_non_json_http_error(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_resp = make_response(None, status_code=502)
        mock_resp.json.side_effect = ValueError("No JSON")
        mock_resp.raise_for_status.side_effect = requests.HTTPError("502 Server Error: Bad Gateway")
        mock_post.return_value = mock_resp

        with pytest.raises(TelegramException) as exc_info:
            client._post("getMe")
        assert exc_info.value.error_code is None
        assert "502" in exc_info.value.description

    @patch("telegram_sdk.client.requests.post")
    def test_non_json_success_status(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_resp = make_response(None)
        mock_resp.json.side_effect = ValueError("No JSON")
        mock_post.return_value = mock_resp

        with pytest.raises(TelegramException, match="Invalid JSON"):
            client._post("getMe")

    @patch("telegram_sdk.client.requests.post")
    def test_missing_ok_field(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = make_response({"result": True})

        with pytest.raises(TelegramException, match="Malformed"):
            client._post("getMe")

    @patch("telegram_sdk.client.requests.post")
    def test_unexpected_result_shape(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok({"id": "not-a-number"})

        with pytest.raises(TelegramException) as exc_info:
            client._post("getMe")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @patch("telegram_sdk.client.requests.post")
    def test_timeout_forwarded(self, mock_post: MagicMock) -> None:
        mock_post.return_value = ok(True)
        c = TelegramClient(TelegramOptions(bot_token=TOKEN, timeout=12.5))

        c._post("logOut")
        assert _sent_kwargs(mock_post)["timeout"] == 12.5

    @patch("telegram_sdk.client.requests.post")
    def test_invalid_params_not_sent(self, mock_post: MagicMock, client: TelegramClient) -> None:
        with pytest.raises(ValidationError):
            client._post("sendMessage", {"chat_id": 8754})
        mock_post.assert_not_called()

    @patch("telegram_sdk.client.requests.post")
    def test_unknown_method_passes_through(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok({"anything": 1})

        result = client._post("futureMethod", {"x": 1})
        assert result == {"anything": 1}
        assert _sent_url(mock_post).endswith("/futureMethod")
        assert _sent_kwargs(mock_post) == {"json": {"x": 1}}


# ── Encoding selection ───────────────────────────────────────────────────────


class TestEncoding:
    """JSON vs multipart is chosen from the data of each call."""

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_photo_bytes_sent_multipart(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)

        result = await client.send_photo(chat_id=8754, photo=b"\x89PNG", caption="look")
        assert isinstance(result, Message)
        kwargs = _sent_kwargs(mock_post)
        assert "json" not in kwargs
        files = kwargs["files"]
        assert files["photo"][1] == b"\x89PNG"
        assert files["chat_id"] == (None, "8754", None)
        assert files["caption"] == (None, "look", None)

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_photo_url_sent_json(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)

        await client.send_photo(chat_id=8754, photo="https://example.com/cat.png")
        assert _sent_kwargs(mock_post) == {"json": {"chat_id": 8754, "photo": "https://example.com/cat.png"}}

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_document_with_uploaded_thumb(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)

        await client.send_document(chat_id=8754, document="file-id", thumb=InputFile(b"jpg", filename="t.jpg"))
        files = _sent_kwargs(mock_post)["files"]
        assert files["thumb"] == ("t.jpg", b"jpg", "image/jpeg")
        assert files["document"] == (None, "file-id", None)

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_media_group_with_upload(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok([MESSAGE, MESSAGE])

        result = await client.send_media_group(
            chat_id=8754,
            media=[
                {"type": "photo", "media": b"raw"},
                {"type": "photo", "media": "https://example.com/b.png"},
            ],
        )
        assert len(result) == 2
        files = _sent_kwargs(mock_post)["files"]
        assert files["file0"][1] == b"raw"
        assert '"attach://file0"' in files["media"][1]
        assert "https://example.com/b.png" in files["media"][1]

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_media_group_by_reference_sent_json(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok([MESSAGE])

        await client.send_media_group(chat_id=8754, media=[{"type": "photo", "media": "file-id"}])
        payload = _sent_kwargs(mock_post)["json"]
        assert payload["media"] == [{"media": "file-id", "type": "photo"}]

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_forced_multipart(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)

        await client.call("sendMessage", {"chat_id": 8754, "text": "hi"}, multipart=True)
        files = _sent_kwargs(mock_post)["files"]
        assert files["text"] == (None, "hi", None)

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_forced_json_with_bytes_rejected(self, mock_post: MagicMock, client: TelegramClient) -> None:
        with pytest.raises(ValueError):
            await client.call("sendPhoto", {"chat_id": 8754, "photo": b"raw"}, multipart=False)
        mock_post.assert_not_called()


# ── Façade ───────────────────────────────────────────────────────────────────


class TestEndpointMethods:
    """Spot-check the typed façade."""

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_get_me(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(BOT_USER)

        me = await client.get_me()
        assert me == User(id=45872, is_bot=True, first_name="Test_bot")

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_get_me_twice_makes_two_calls(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(BOT_USER)

        first = await client.get_me()
        second = await client.get_me()
        assert first == second
        assert mock_post.call_count == 2

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_send_message_end_to_end(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)

        msg = await client.send_message(chat_id=8754, text="This is a test")
        assert msg.message_id == 4587
        assert msg.chat.id == 8754
        assert msg.model_dump(by_alias=True, exclude_none=True) == MESSAGE
        assert _sent_url(mock_post).endswith("/sendMessage")
        assert _sent_kwargs(mock_post) == {"json": {"chat_id": 8754, "text": "This is a test"}}

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_params_model_and_kwargs_merge(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)

        params = SendMessageParams(chat_id=8754, text="hello")
        await client.send_message(params, parse_mode="HTML")
        payload = _sent_kwargs(mock_post)["json"]
        assert payload == {"chat_id": 8754, "text": "hello", "parse_mode": "HTML"}

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_send_message_failure(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = make_response(FAILURE, status_code=400)

        with pytest.raises(TelegramException) as exc_info:
            await client.send_message(chat_id=8754, text="hello")
        assert (exc_info.value.description, exc_info.value.error_code) == ("Bad request", "400")

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_reply_markup_serialized(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(MESSAGE)
        markup = {"inline_keyboard": [[{"text": "Go", "callback_data": "go"}]]}

        await client.send_message(chat_id=8754, text="pick", reply_markup=markup)
        assert _sent_kwargs(mock_post)["json"]["reply_markup"] == markup

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_copy_message_returns_message_id(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok({"message_id": 77})

        result = await client.copy_message(chat_id=8754, from_chat_id=1, message_id=5)
        assert result == MessageId(message_id=77)

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_edit_inline_message_returns_true(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(True)

        result = await client.edit_message_text(inline_message_id="abc", text="new")
        assert result is True

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_stop_poll_uses_own_method_name(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(
            {
                "id": "1",
                "question": "?",
                "options": [{"text": "a", "voter_count": 1}],
                "total_voter_count": 1,
                "is_closed": True,
                "is_anonymous": True,
                "type": "regular",
                "allows_multiple_answers": False,
            }
        )

        poll = await client.stop_poll(chat_id=8754, message_id=4587)
        assert isinstance(poll, Poll)
        assert _sent_url(mock_post).endswith("/stopPoll")

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_get_game_high_scores_method_name(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok([{"position": 1, "user": BOT_USER, "score": 10}])

        scores = await client.get_game_high_scores(user_id=45872, chat_id=8754, message_id=4587)
        assert scores[0].score == 10
        assert _sent_url(mock_post).endswith("/getGameHighScores")

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_get_chat(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(CHAT)

        chat = await client.get_chat(chat_id="@channel")
        assert chat.type == "group"
        assert _sent_kwargs(mock_post)["json"] == {"chat_id": "@channel"}

    @pytest.mark.asyncio
    @patch("telegram_sdk.client.requests.post")
    async def test_stream_yields_once(self, mock_post: MagicMock, client: TelegramClient) -> None:
        mock_post.return_value = ok(BOT_USER)

        results = [me async for me in client.stream("getMe")]
        assert len(results) == 1
        assert results[0].id == 45872

    @patch("telegram_sdk.client.requests.post")
    def test_stream_is_lazy(self, mock_post: MagicMock, client: TelegramClient) -> None:
        """An un-iterated stream sends nothing and leaves no pending coroutine."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            stream = client.stream("getMe")
            assert inspect.isasyncgen(stream)
            del stream
            gc.collect()

        mock_post.assert_not_called()
        assert not [w for w in caught if issubclass(w.category, RuntimeWarning)]

    def test_all_74_methods_exist(self, client: TelegramClient) -> None:
        """Every Bot API method has a corresponding coroutine."""
        expected_methods = [
            "get_updates", "set_webhook", "delete_webhook", "get_webhook_info",
            "get_me", "log_out", "close", "send_message", "forward_message",
            "copy_message", "send_photo", "send_audio", "send_document",
            "send_video", "send_animation", "send_voice", "send_video_note",
            "send_media_group", "send_location", "edit_message_live_location",
            "stop_message_live_location", "send_venue", "send_contact",
            "send_poll", "send_dice", "send_chat_action",
            "get_user_profile_photos", "get_file", "kick_chat_member",
            "unban_chat_member", "restrict_chat_member", "promote_chat_member",
            "set_chat_administrator_custom_title", "set_chat_permissions",
            "export_chat_invite_link", "set_chat_photo", "delete_chat_photo",
            "set_chat_title", "set_chat_description", "pin_chat_message",
            "unpin_chat_message", "unpin_all_chat_messages", "leave_chat",
            "get_chat", "get_chat_administrators", "get_chat_members_count",
            "get_chat_member", "set_chat_sticker_set", "delete_chat_sticker_set",
            "answer_callback_query", "set_my_commands", "get_my_commands",
            "edit_message_text", "edit_message_caption", "edit_message_media",
            "edit_message_reply_markup", "stop_poll", "delete_message",
            "send_sticker", "get_sticker_set", "upload_sticker_file",
            "create_new_sticker_set", "add_sticker_to_set",
            "set_sticker_position_in_set", "delete_sticker_from_set",
            "set_sticker_set_thumb", "answer_inline_query", "send_invoice",
            "answer_shipping_query", "answer_pre_checkout_query",
            "set_passport_data_errors", "send_game", "set_game_score",
            "get_game_high_scores",
        ]
        assert len(expected_methods) == len(METHODS) == 74
        for name in expected_methods:
            assert inspect.iscoroutinefunction(getattr(client, name, None)), f"Missing method: {name}"
