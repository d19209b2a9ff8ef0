"""Bot API method table.

Maps every supported method name to its parameter model, the type of its
``result`` and the top-level fields that may carry file content.  The
dispatcher in :mod:`telegram_sdk.client` consults this table; the typed
façade methods are thin shims over it.
"""

from __future__ import annotations

import dataclasses
import functools
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, TypeAdapter

from telegram_sdk import params as p
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

# Edit methods return the edited Message, or True for inline messages.
EditResult = Union[Message, bool]

_THUMB = ("thumb",)


@dataclasses.dataclass(frozen=True)
class ApiMethod:
    """One Bot API method.

    Attributes:
        name: Method name as it appears in the URL path.
        params: Parameter model, or ``None`` for methods without parameters.
        result: Type expression the ``result`` payload is validated into.
        file_fields: Top-level fields that may hold content to upload.
    """

    name: str
    params: Optional[Type[p.TelegramParams]]
    result: Any
    file_fields: Tuple[str, ...] = ()

    def prepare(self, data: Union[BaseModel, Mapping[str, Any], None]) -> Dict[str, Any]:
        """Validate *data* against the parameter model and dump it for the wire."""
        if self.params is None:
            if data:
                raise ValueError(f"{self.name} takes no parameters")
            return {}
        if not isinstance(data, self.params):
            data = self.params.model_validate(dump(data) if data is not None else {})
        return data.model_dump(by_alias=True, exclude_none=True)

    def parse_result(self, raw: Any) -> Any:
        """Validate the ``result`` payload into the declared result type."""
        return _adapter(self.result).validate_python(raw)


@functools.lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


_TABLE: List[ApiMethod] = [
    # Updates
    ApiMethod("getUpdates", p.GetUpdatesParams, List[Update]),
    ApiMethod("setWebhook", p.SetWebhookParams, bool, ("certificate",)),
    ApiMethod("deleteWebhook", p.DeleteWebhookParams, bool),
    ApiMethod("getWebhookInfo", None, WebhookInfo),
    # Bot
    ApiMethod("getMe", None, User),
    ApiMethod("logOut", None, bool),
    ApiMethod("close", None, bool),
    ApiMethod("setMyCommands", p.SetMyCommandsParams, bool),
    ApiMethod("getMyCommands", None, List[BotCommand]),
    # Messages
    ApiMethod("sendMessage", p.SendMessageParams, Message),
    ApiMethod("forwardMessage", p.ForwardMessageParams, Message),
    ApiMethod("copyMessage", p.CopyMessageParams, MessageId),
    ApiMethod("sendPhoto", p.SendPhotoParams, Message, ("photo",)),
    ApiMethod("sendAudio", p.SendAudioParams, Message, ("audio",) + _THUMB),
    ApiMethod("sendDocument", p.SendDocumentParams, Message, ("document",) + _THUMB),
    ApiMethod("sendVideo", p.SendVideoParams, Message, ("video",) + _THUMB),
    ApiMethod("sendAnimation", p.SendAnimationParams, Message, ("animation",) + _THUMB),
    ApiMethod("sendVoice", p.SendVoiceParams, Message, ("voice",)),
    ApiMethod("sendVideoNote", p.SendVideoNoteParams, Message, ("video_note",) + _THUMB),
    ApiMethod("sendMediaGroup", p.SendMediaGroupParams, List[Message], ("media",)),
    ApiMethod("sendLocation", p.SendLocationParams, Message),
    ApiMethod("editMessageLiveLocation", p.EditMessageLiveLocationParams, EditResult),
    ApiMethod("stopMessageLiveLocation", p.StopMessageLiveLocationParams, EditResult),
    ApiMethod("sendVenue", p.SendVenueParams, Message),
    ApiMethod("sendContact", p.SendContactParams, Message),
    ApiMethod("sendPoll", p.SendPollParams, Message),
    ApiMethod("sendDice", p.SendDiceParams, Message),
    ApiMethod("sendChatAction", p.SendChatActionParams, bool),
    # Users and files
    ApiMethod("getUserProfilePhotos", p.GetUserProfilePhotosParams, UserProfilePhotos),
    ApiMethod("getFile", p.GetFileParams, File),
    # Chat administration
    ApiMethod("kickChatMember", p.KickChatMemberParams, bool),
    ApiMethod("unbanChatMember", p.UnbanChatMemberParams, bool),
    ApiMethod("restrictChatMember", p.RestrictChatMemberParams, bool),
    ApiMethod("promoteChatMember", p.PromoteChatMemberParams, bool),
    ApiMethod("setChatAdministratorCustomTitle", p.SetChatAdministratorCustomTitleParams, bool),
    ApiMethod("setChatPermissions", p.SetChatPermissionsParams, bool),
    ApiMethod("exportChatInviteLink", p.ChatParams, str),
    ApiMethod("setChatPhoto", p.SetChatPhotoParams, bool, ("photo",)),
    ApiMethod("deleteChatPhoto", p.ChatParams, bool),
    ApiMethod("setChatTitle", p.SetChatTitleParams, bool),
    ApiMethod("setChatDescription", p.SetChatDescriptionParams, bool),
    ApiMethod("pinChatMessage", p.PinChatMessageParams, bool),
    ApiMethod("unpinChatMessage", p.UnpinChatMessageParams, bool),
    ApiMethod("unpinAllChatMessages", p.ChatParams, bool),
    ApiMethod("leaveChat", p.ChatParams, bool),
    ApiMethod("getChat", p.ChatParams, Chat),
    ApiMethod("getChatAdministrators", p.ChatParams, List[ChatMember]),
    ApiMethod("getChatMembersCount", p.ChatParams, int),
    ApiMethod("getChatMember", p.ChatMemberParams, ChatMember),
    ApiMethod("setChatStickerSet", p.SetChatStickerSetParams, bool),
    ApiMethod("deleteChatStickerSet", p.ChatParams, bool),
    ApiMethod("answerCallbackQuery", p.AnswerCallbackQueryParams, bool),
    # Updating messages
    ApiMethod("editMessageText", p.EditMessageTextParams, EditResult),
    ApiMethod("editMessageCaption", p.EditMessageCaptionParams, EditResult),
    ApiMethod("editMessageMedia", p.EditMessageMediaParams, EditResult, ("media",)),
    ApiMethod("editMessageReplyMarkup", p.EditMessageReplyMarkupParams, EditResult),
    ApiMethod("stopPoll", p.StopPollParams, Poll),
    ApiMethod("deleteMessage", p.DeleteMessageParams, bool),
    # Stickers
    ApiMethod("sendSticker", p.SendStickerParams, Message, ("sticker",)),
    ApiMethod("getStickerSet", p.GetStickerSetParams, StickerSet),
    ApiMethod("uploadStickerFile", p.UploadStickerFileParams, File, ("png_sticker",)),
    ApiMethod("createNewStickerSet", p.CreateNewStickerSetParams, bool, ("png_sticker", "tgs_sticker")),
    ApiMethod("addStickerToSet", p.AddStickerToSetParams, bool, ("png_sticker", "tgs_sticker")),
    ApiMethod("setStickerPositionInSet", p.SetStickerPositionInSetParams, bool),
    ApiMethod("deleteStickerFromSet", p.DeleteStickerFromSetParams, bool),
    ApiMethod("setStickerSetThumb", p.SetStickerSetThumbParams, bool, _THUMB),
    # Inline mode
    ApiMethod("answerInlineQuery", p.AnswerInlineQueryParams, bool),
    # Payments
    ApiMethod("sendInvoice", p.SendInvoiceParams, Message),
    ApiMethod("answerShippingQuery", p.AnswerShippingQueryParams, bool),
    ApiMethod("answerPreCheckoutQuery", p.AnswerPreCheckoutQueryParams, bool),
    # Telegram Passport
    ApiMethod("setPassportDataErrors", p.SetPassportDataErrorsParams, bool),
    # Games
    ApiMethod("sendGame", p.SendGameParams, Message),
    ApiMethod("setGameScore", p.SetGameScoreParams, EditResult),
    ApiMethod("getGameHighScores", p.GetGameHighScoresParams, List[GameHighScore]),
]

METHODS: Dict[str, ApiMethod] = {method.name: method for method in _TABLE}
