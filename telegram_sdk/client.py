"""TelegramClient -- request dispatcher and typed façade over the Bot API.

Every public coroutine corresponds to one Bot API method.  It accepts a
parameter model from :mod:`telegram_sdk.params`, a plain mapping, or
keyword arguments, and returns the method's ``result`` validated into the
matching :mod:`telegram_sdk.models` type.

All of them funnel into :meth:`TelegramClient._post`, which builds the URL,
picks JSON or multipart encoding, issues a single ``requests.post`` and
unwraps the ``{ok, result}`` envelope.  Blocking I/O is offloaded with
:func:`asyncio.to_thread` so the event loop is never blocked.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union

import requests
from pydantic import BaseModel, ValidationError

from telegram_sdk import params as p
from telegram_sdk.config import TelegramOptions
from telegram_sdk.exceptions import TelegramException
from telegram_sdk.methods import METHODS
from telegram_sdk.models import (
    BotCommand,
    Chat,
    ChatMember,
    File,
    GameHighScore,
    Message,
    MessageId,
    Poll,
    StickerSet,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
    dump,
)
from telegram_sdk.payload import build_request

logger = logging.getLogger(__name__)

Params = Union[BaseModel, Mapping[str, Any], None]


class TelegramClient:
    """Client for the Telegram Bot API.

    The client holds only immutable configuration; calls are independent
    and may run concurrently.  Failures of any kind raise
    :class:`~telegram_sdk.exceptions.TelegramException`.
    """

    def __init__(self, options: TelegramOptions) -> None:
        """Create a client bound to the bot described by *options*."""
        self._options = options
        self._base_url = options.base_url
        self._timeout = options.timeout

    @property
    def options(self) -> TelegramOptions:
        return self._options

    # ------------------------------------------------------------------
    #  Dispatcher
    # ------------------------------------------------------------------

    def _redact(self, exc: Exception) -> str:
        """Render a transport error without the bot token (it is part of the URL)."""
        return str(exc).replace(self._options.bot_token, "<token>")

    @staticmethod
    def _merge(data: Params, kwargs: Dict[str, Any]) -> Params:
        if not kwargs:
            return data
        merged = dict(dump(data)) if data is not None else {}
        merged.update(kwargs)
        return merged

    def _decode(self, method: str, response: requests.Response) -> Dict[str, Any]:
        """Return the decoded envelope, or raise for an unusable response."""
        try:
            body = response.json()
        except ValueError as exc:
            try:
                response.raise_for_status()
            except requests.HTTPError as http_exc:
                logger.error("Bot API HTTP error", extra={"api_method": method, "status_code": response.status_code, "error": self._redact(http_exc)})
                raise TelegramException(self._redact(http_exc)) from http_exc
            logger.error("Bot API returned invalid JSON", extra={"api_method": method, "error": str(exc)})
            raise TelegramException(f"Invalid JSON in response: {exc}") from exc
        if not isinstance(body, dict) or "ok" not in body:
            logger.error("Bot API returned a malformed envelope", extra={"api_method": method, "api_response": body})
            raise TelegramException("Malformed response: missing 'ok' field")
        return body

    def _post(self, method: str, data: Params = None, multipart: Optional[bool] = None) -> Any:
        """Perform one Bot API call and return its ``result``.

        Args:
            method: Bot API method name, e.g. ``"sendMessage"``.
            data: Parameters as a params model or mapping.
            multipart: Encoding hint; ``None`` decides from the data.

        Raises:
            TelegramException: Telegram answered ``ok: false`` (with
                ``error_code``) or the transport failed (without).
            pydantic.ValidationError: *data* does not fit the method's
                parameter model; nothing was sent.
        """
        api_method = METHODS.get(method)
        if api_method is not None:
            payload = api_method.prepare(data)
            file_fields = api_method.file_fields
        else:
            payload = dict(dump(data)) if data is not None else {}
            file_fields = None

        request_kwargs = build_request(payload, file_fields, multipart)
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        logger.debug("Calling Bot API", extra={"api_method": method, "multipart": "files" in request_kwargs})
        try:
            response = requests.post(self._base_url + method, **request_kwargs)
        except requests.RequestException as exc:
            logger.error("Bot API request error", extra={"api_method": method, "error": self._redact(exc)})
            raise TelegramException(self._redact(exc)) from exc

        body = self._decode(method, response)
        if not body["ok"]:
            error = TelegramException.from_envelope(body)
            logger.warning(
                "Bot API error",
                extra={"api_method": method, "error_code": error.error_code, "description": error.description, "retry_after": error.retry_after},
            )
            raise error

        result = body.get("result")
        if api_method is None:
            return result
        try:
            return api_method.parse_result(result)
        except ValidationError as exc:
            logger.error("Bot API result does not match schema", extra={"api_method": method, "error": str(exc)})
            raise TelegramException(f"Unexpected result for {method}: {exc}") from exc

    async def call(self, method: str, data: Params = None, *, multipart: Optional[bool] = None, **kwargs: Any) -> Any:
        """Call any Bot API method by name.

        Methods without a table entry are still dispatched; their parameters
        are sent as given and the raw ``result`` is returned.
        """
        return await asyncio.to_thread(self._post, method, self._merge(data, kwargs), multipart)

    async def stream(self, method: str, data: Params = None, *, multipart: Optional[bool] = None, **kwargs: Any) -> AsyncIterator[Any]:
        """Like :meth:`call`, but deliver the result as a one-item async stream.

        Nothing is sent until the stream is iterated.
        """
        yield await self.call(method, data, multipart=multipart, **kwargs)

    # ------------------------------------------------------------------
    #  Getting updates
    # ------------------------------------------------------------------

    async def get_updates(self, data: Optional[p.GetUpdatesParams] = None, **kwargs: Any) -> List[Update]:
        """Receive incoming updates using long polling."""
        return await self.call("getUpdates", data, **kwargs)

    async def set_webhook(self, data: Optional[p.SetWebhookParams] = None, **kwargs: Any) -> bool:
        """Specify a URL to receive incoming updates via an outgoing webhook."""
        return await self.call("setWebhook", data, **kwargs)

    async def delete_webhook(self, data: Optional[p.DeleteWebhookParams] = None, **kwargs: Any) -> bool:
        """Remove webhook integration to switch back to :meth:`get_updates`."""
        return await self.call("deleteWebhook", data, **kwargs)

    async def get_webhook_info(self) -> WebhookInfo:
        return await self.call("getWebhookInfo")

    # ------------------------------------------------------------------
    #  Bot
    # ------------------------------------------------------------------

    async def get_me(self) -> User:
        """A simple method for testing the bot's auth token."""
        return await self.call("getMe")

    async def log_out(self) -> bool:
        """Log out from the cloud Bot API server before running a local one."""
        return await self.call("logOut")

    async def close(self) -> bool:
        """Close the bot instance before moving it to another local server."""
        return await self.call("close")

    async def set_my_commands(self, data: Optional[p.SetMyCommandsParams] = None, **kwargs: Any) -> bool:
        return await self.call("setMyCommands", data, **kwargs)

    async def get_my_commands(self) -> List[BotCommand]:
        return await self.call("getMyCommands")

    # ------------------------------------------------------------------
    #  Sending messages
    # ------------------------------------------------------------------

    async def send_message(self, data: Optional[p.SendMessageParams] = None, **kwargs: Any) -> Message:
        """Send a text message.  On success, the sent Message is returned."""
        return await self.call("sendMessage", data, **kwargs)

    async def forward_message(self, data: Optional[p.ForwardMessageParams] = None, **kwargs: Any) -> Message:
        """Forward a message of any kind."""
        return await self.call("forwardMessage", data, **kwargs)

    async def copy_message(self, data: Optional[p.CopyMessageParams] = None, **kwargs: Any) -> MessageId:
        """Copy a message without a link to the original.  Returns the new MessageId."""
        return await self.call("copyMessage", data, **kwargs)

    async def send_photo(self, data: Optional[p.SendPhotoParams] = None, **kwargs: Any) -> Message:
        """Send a photo by upload, URL or file_id."""
        return await self.call("sendPhoto", data, **kwargs)

    async def send_audio(self, data: Optional[p.SendAudioParams] = None, **kwargs: Any) -> Message:
        """Send an audio file to be displayed in the music player (.MP3 or .M4A)."""
        return await self.call("sendAudio", data, **kwargs)

    async def send_document(self, data: Optional[p.SendDocumentParams] = None, **kwargs: Any) -> Message:
        """Send a general file (up to 50 MB when uploaded)."""
        return await self.call("sendDocument", data, **kwargs)

    async def send_video(self, data: Optional[p.SendVideoParams] = None, **kwargs: Any) -> Message:
        """Send an MPEG4 video."""
        return await self.call("sendVideo", data, **kwargs)

    async def send_animation(self, data: Optional[p.SendAnimationParams] = None, **kwargs: Any) -> Message:
        """Send a GIF or H.264/MPEG-4 AVC video without sound."""
        return await self.call("sendAnimation", data, **kwargs)

    async def send_voice(self, data: Optional[p.SendVoiceParams] = None, **kwargs: Any) -> Message:
        """Send a playable voice message (OGG/OPUS)."""
        return await self.call("sendVoice", data, **kwargs)

    async def send_video_note(self, data: Optional[p.SendVideoNoteParams] = None, **kwargs: Any) -> Message:
        """Send a rounded square video message."""
        return await self.call("sendVideoNote", data, **kwargs)

    async def send_media_group(self, data: Optional[p.SendMediaGroupParams] = None, **kwargs: Any) -> List[Message]:
        """Send photos, videos, documents or audio as an album."""
        return await self.call("sendMediaGroup", data, **kwargs)

    async def send_location(self, data: Optional[p.SendLocationParams] = None, **kwargs: Any) -> Message:
        return await self.call("sendLocation", data, **kwargs)

    async def edit_message_live_location(
        self, data: Optional[p.EditMessageLiveLocationParams] = None, **kwargs: Any
    ) -> Union[Message, bool]:
        """Edit a live location message.  Returns True for inline messages."""
        return await self.call("editMessageLiveLocation", data, **kwargs)

    async def stop_message_live_location(
        self, data: Optional[p.StopMessageLiveLocationParams] = None, **kwargs: Any
    ) -> Union[Message, bool]:
        """Stop updating a live location message before live_period expires."""
        return await self.call("stopMessageLiveLocation", data, **kwargs)

    async def send_venue(self, data: Optional[p.SendVenueParams] = None, **kwargs: Any) -> Message:
        return await self.call("sendVenue", data, **kwargs)

    async def send_contact(self, data: Optional[p.SendContactParams] = None, **kwargs: Any) -> Message:
        return await self.call("sendContact", data, **kwargs)

    async def send_poll(self, data: Optional[p.SendPollParams] = None, **kwargs: Any) -> Message:
        """Send a native poll or quiz."""
        return await self.call("sendPoll", data, **kwargs)

    async def send_dice(self, data: Optional[p.SendDiceParams] = None, **kwargs: Any) -> Message:
        """Send an animated emoji that displays a random value."""
        return await self.call("sendDice", data, **kwargs)

    async def send_chat_action(self, data: Optional[p.SendChatActionParams] = None, **kwargs: Any) -> bool:
        """Show a status such as "typing" for 5 seconds or until the next message."""
        return await self.call("sendChatAction", data, **kwargs)

    async def get_user_profile_photos(
        self, data: Optional[p.GetUserProfilePhotosParams] = None, **kwargs: Any
    ) -> UserProfilePhotos:
        return await self.call("getUserProfilePhotos", data, **kwargs)

    async def get_file(self, data: Optional[p.GetFileParams] = None, **kwargs: Any) -> File:
        """Get basic info about a file and prepare it for downloading.

        The download link is valid for at least one hour; files up to 20 MB.
        """
        return await self.call("getFile", data, **kwargs)

    # ------------------------------------------------------------------
    #  Chat administration
    # ------------------------------------------------------------------

    async def kick_chat_member(self, data: Optional[p.KickChatMemberParams] = None, **kwargs: Any) -> bool:
        """Ban a user from a group, supergroup or channel."""
        return await self.call("kickChatMember", data, **kwargs)

    async def unban_chat_member(self, data: Optional[p.UnbanChatMemberParams] = None, **kwargs: Any) -> bool:
        return await self.call("unbanChatMember", data, **kwargs)

    async def restrict_chat_member(self, data: Optional[p.RestrictChatMemberParams] = None, **kwargs: Any) -> bool:
        """Restrict a user in a supergroup.  Pass all-True permissions to lift restrictions."""
        return await self.call("restrictChatMember", data, **kwargs)

    async def promote_chat_member(self, data: Optional[p.PromoteChatMemberParams] = None, **kwargs: Any) -> bool:
        """Promote or demote a user.  Pass all-False rights to demote."""
        return await self.call("promoteChatMember", data, **kwargs)

    async def set_chat_administrator_custom_title(
        self, data: Optional[p.SetChatAdministratorCustomTitleParams] = None, **kwargs: Any
    ) -> bool:
        return await self.call("setChatAdministratorCustomTitle", data, **kwargs)

    async def set_chat_permissions(self, data: Optional[p.SetChatPermissionsParams] = None, **kwargs: Any) -> bool:
        return await self.call("setChatPermissions", data, **kwargs)

    async def export_chat_invite_link(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> str:
        """Generate a new invite link; any previous link is revoked."""
        return await self.call("exportChatInviteLink", data, **kwargs)

    async def set_chat_photo(self, data: Optional[p.SetChatPhotoParams] = None, **kwargs: Any) -> bool:
        """Set a new chat photo.  Photos must be uploaded."""
        return await self.call("setChatPhoto", data, **kwargs)

    async def delete_chat_photo(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> bool:
        return await self.call("deleteChatPhoto", data, **kwargs)

    async def set_chat_title(self, data: Optional[p.SetChatTitleParams] = None, **kwargs: Any) -> bool:
        return await self.call("setChatTitle", data, **kwargs)

    async def set_chat_description(self, data: Optional[p.SetChatDescriptionParams] = None, **kwargs: Any) -> bool:
        return await self.call("setChatDescription", data, **kwargs)

    async def pin_chat_message(self, data: Optional[p.PinChatMessageParams] = None, **kwargs: Any) -> bool:
        return await self.call("pinChatMessage", data, **kwargs)

    async def unpin_chat_message(self, data: Optional[p.UnpinChatMessageParams] = None, **kwargs: Any) -> bool:
        """Unpin a message; without message_id the most recent pin is removed."""
        return await self.call("unpinChatMessage", data, **kwargs)

    async def unpin_all_chat_messages(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> bool:
        return await self.call("unpinAllChatMessages", data, **kwargs)

    async def leave_chat(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> bool:
        return await self.call("leaveChat", data, **kwargs)

    async def get_chat(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> Chat:
        """Get up-to-date information about a chat."""
        return await self.call("getChat", data, **kwargs)

    async def get_chat_administrators(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> List[ChatMember]:
        """List administrators of a chat, bots excluded."""
        return await self.call("getChatAdministrators", data, **kwargs)

    async def get_chat_members_count(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> int:
        return await self.call("getChatMembersCount", data, **kwargs)

    async def get_chat_member(self, data: Optional[p.ChatMemberParams] = None, **kwargs: Any) -> ChatMember:
        return await self.call("getChatMember", data, **kwargs)

    async def set_chat_sticker_set(self, data: Optional[p.SetChatStickerSetParams] = None, **kwargs: Any) -> bool:
        """Set a supergroup's sticker set (check Chat.can_set_sticker_set first)."""
        return await self.call("setChatStickerSet", data, **kwargs)

    async def delete_chat_sticker_set(self, data: Optional[p.ChatParams] = None, **kwargs: Any) -> bool:
        return await self.call("deleteChatStickerSet", data, **kwargs)

    async def answer_callback_query(self, data: Optional[p.AnswerCallbackQueryParams] = None, **kwargs: Any) -> bool:
        """Answer a callback query from an inline keyboard button."""
        return await self.call("answerCallbackQuery", data, **kwargs)

    # ------------------------------------------------------------------
    #  Updating messages
    # ------------------------------------------------------------------

    async def edit_message_text(self, data: Optional[p.EditMessageTextParams] = None, **kwargs: Any) -> Union[Message, bool]:
        return await self.call("editMessageText", data, **kwargs)

    async def edit_message_caption(
        self, data: Optional[p.EditMessageCaptionParams] = None, **kwargs: Any
    ) -> Union[Message, bool]:
        return await self.call("editMessageCaption", data, **kwargs)

    async def edit_message_media(self, data: Optional[p.EditMessageMediaParams] = None, **kwargs: Any) -> Union[Message, bool]:
        """Replace the media of a message.  New content may be uploaded."""
        return await self.call("editMessageMedia", data, **kwargs)

    async def edit_message_reply_markup(
        self, data: Optional[p.EditMessageReplyMarkupParams] = None, **kwargs: Any
    ) -> Union[Message, bool]:
        return await self.call("editMessageReplyMarkup", data, **kwargs)

    async def stop_poll(self, data: Optional[p.StopPollParams] = None, **kwargs: Any) -> Poll:
        """Stop a poll sent by the bot.  Returns the final Poll."""
        return await self.call("stopPoll", data, **kwargs)

    async def delete_message(self, data: Optional[p.DeleteMessageParams] = None, **kwargs: Any) -> bool:
        """Delete a message, including service messages.

        Only messages sent less than 48 hours ago can be deleted.
        """
        return await self.call("deleteMessage", data, **kwargs)

    # ------------------------------------------------------------------
    #  Stickers
    # ------------------------------------------------------------------

    async def send_sticker(self, data: Optional[p.SendStickerParams] = None, **kwargs: Any) -> Message:
        """Send a static .WEBP or animated .TGS sticker."""
        return await self.call("sendSticker", data, **kwargs)

    async def get_sticker_set(self, data: Optional[p.GetStickerSetParams] = None, **kwargs: Any) -> StickerSet:
        return await self.call("getStickerSet", data, **kwargs)

    async def upload_sticker_file(self, data: Optional[p.UploadStickerFileParams] = None, **kwargs: Any) -> File:
        """Upload a .PNG for later use in sticker set methods."""
        return await self.call("uploadStickerFile", data, **kwargs)

    async def create_new_sticker_set(self, data: Optional[p.CreateNewStickerSetParams] = None, **kwargs: Any) -> bool:
        return await self.call("createNewStickerSet", data, **kwargs)

    async def add_sticker_to_set(self, data: Optional[p.AddStickerToSetParams] = None, **kwargs: Any) -> bool:
        return await self.call("addStickerToSet", data, **kwargs)

    async def set_sticker_position_in_set(
        self, data: Optional[p.SetStickerPositionInSetParams] = None, **kwargs: Any
    ) -> bool:
        return await self.call("setStickerPositionInSet", data, **kwargs)

    async def delete_sticker_from_set(self, data: Optional[p.DeleteStickerFromSetParams] = None, **kwargs: Any) -> bool:
        return await self.call("deleteStickerFromSet", data, **kwargs)

    async def set_sticker_set_thumb(self, data: Optional[p.SetStickerSetThumbParams] = None, **kwargs: Any) -> bool:
        return await self.call("setStickerSetThumb", data, **kwargs)

    # ------------------------------------------------------------------
    #  Inline mode, payments, passport, games
    # ------------------------------------------------------------------

    async def answer_inline_query(self, data: Optional[p.AnswerInlineQueryParams] = None, **kwargs: Any) -> bool:
        """Send answers to an inline query.  No more than 50 results are allowed."""
        return await self.call("answerInlineQuery", data, **kwargs)

    async def send_invoice(self, data: Optional[p.SendInvoiceParams] = None, **kwargs: Any) -> Message:
        return await self.call("sendInvoice", data, **kwargs)

    async def answer_shipping_query(self, data: Optional[p.AnswerShippingQueryParams] = None, **kwargs: Any) -> bool:
        """Reply to a shipping query sent for an invoice with a flexible price."""
        return await self.call("answerShippingQuery", data, **kwargs)

    async def answer_pre_checkout_query(
        self, data: Optional[p.AnswerPreCheckoutQueryParams] = None, **kwargs: Any
    ) -> bool:
        """Confirm or reject a checkout.  Must be answered within 10 seconds."""
        return await self.call("answerPreCheckoutQuery", data, **kwargs)

    async def set_passport_data_errors(
        self, data: Optional[p.SetPassportDataErrorsParams] = None, **kwargs: Any
    ) -> bool:
        """Report Telegram Passport elements the user must fix and resend."""
        return await self.call("setPassportDataErrors", data, **kwargs)

    async def send_game(self, data: Optional[p.SendGameParams] = None, **kwargs: Any) -> Message:
        return await self.call("sendGame", data, **kwargs)

    async def set_game_score(self, data: Optional[p.SetGameScoreParams] = None, **kwargs: Any) -> Union[Message, bool]:
        """Set a user's score in a game message."""
        return await self.call("setGameScore", data, **kwargs)

    async def get_game_high_scores(
        self, data: Optional[p.GetGameHighScoresParams] = None, **kwargs: Any
    ) -> List[GameHighScore]:
        """Get the score of a user and several of their neighbors in a game."""
        return await self.call("getGameHighScores", data, **kwargs)
