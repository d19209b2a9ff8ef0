"""Request parameter models, one per Bot API method.

Each model declares exactly the fields Telegram documents for the method:
required fields have no default, optional ones default to ``None`` and are
left out of the request body.  Unknown keys are rejected so a typo fails
before any network traffic.

File fields are typed :data:`~telegram_sdk.models.FileInput`: raw content
(``bytes``, a binary stream or :class:`~telegram_sdk.models.InputFile`) is
uploaded with multipart encoding, a string is a URL or ``file_id``.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, SerializeAsAny, model_validator

from telegram_sdk.models import (
    AlbumInputMedia,
    AnyInputMedia,
    BotCommand,
    ChatPermissions,
    FileInput,
    InlineKeyboardMarkup,
    InlineQueryResult,
    LabeledPrice,
    MaskPosition,
    MessageEntity,
    ParseMode,
    PassportElementError,
    ReplyMarkup,
    ShippingOption,
)

ChatId = Union[int, str]

ChatAction = Literal[
    "typing",
    "upload_photo",
    "record_video",
    "upload_video",
    "record_audio",
    "upload_audio",
    "record_voice",
    "upload_voice",
    "upload_document",
    "find_location",
    "record_video_note",
    "upload_video_note",
]

DiceEmoji = Literal["🎲", "🎯", "🏀", "⚽", "🎰"]


class TelegramParams(BaseModel):
    """Base for every parameter model."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)


class ChatParams(TelegramParams):
    """Methods whose only parameter is the target chat."""

    chat_id: ChatId


class _ReplyOptions(TelegramParams):
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class _CaptionedSend(_ReplyOptions):
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class _MessageTarget(TelegramParams):
    """A message addressed either by chat + message id or by inline id."""

    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_target(self) -> "_MessageTarget":
        if self.inline_message_id is None and (self.chat_id is None or self.message_id is None):
            raise ValueError("either inline_message_id or both chat_id and message_id are required")
        return self


# ── Updates ──────────────────────────────────────────────────────────────────


class GetUpdatesParams(TelegramParams):
    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


class SetWebhookParams(TelegramParams):
    url: str
    certificate: Optional[FileInput] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None


class DeleteWebhookParams(TelegramParams):
    drop_pending_updates: Optional[bool] = None


# ── Sending messages ─────────────────────────────────────────────────────────


class SendMessageParams(_ReplyOptions):
    chat_id: ChatId
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class ForwardMessageParams(TelegramParams):
    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None


class CopyMessageParams(_CaptionedSend):
    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int


class SendPhotoParams(_CaptionedSend):
    chat_id: ChatId
    photo: FileInput


class SendAudioParams(_CaptionedSend):
    chat_id: ChatId
    audio: FileInput
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[FileInput] = None


class SendDocumentParams(_CaptionedSend):
    chat_id: ChatId
    document: FileInput
    thumb: Optional[FileInput] = None
    disable_content_type_detection: Optional[bool] = None


class SendVideoParams(_CaptionedSend):
    chat_id: ChatId
    video: FileInput
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[FileInput] = None
    supports_streaming: Optional[bool] = None


class SendAnimationParams(_CaptionedSend):
    chat_id: ChatId
    animation: FileInput
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[FileInput] = None


class SendVoiceParams(_CaptionedSend):
    chat_id: ChatId
    voice: FileInput
    duration: Optional[int] = None


class SendVideoNoteParams(_ReplyOptions):
    chat_id: ChatId
    video_note: FileInput
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[FileInput] = None


class SendMediaGroupParams(TelegramParams):
    """2-10 items; documents and audio can only be grouped with their own kind."""

    chat_id: ChatId
    media: List[AlbumInputMedia]
    disable_notification: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class SendLocationParams(_ReplyOptions):
    chat_id: ChatId
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class EditMessageLiveLocationParams(_MessageTarget):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopMessageLiveLocationParams(_MessageTarget):
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SendVenueParams(_ReplyOptions):
    chat_id: ChatId
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class SendContactParams(_ReplyOptions):
    chat_id: ChatId
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class SendPollParams(_ReplyOptions):
    chat_id: ChatId
    question: str
    options: List[str]
    is_anonymous: Optional[bool] = None
    type: Optional[Literal["regular", "quiz"]] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_parse_mode: Optional[ParseMode] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None


class SendDiceParams(_ReplyOptions):
    chat_id: ChatId
    emoji: Optional[DiceEmoji] = None


class SendChatActionParams(TelegramParams):
    chat_id: ChatId
    action: ChatAction


class GetUserProfilePhotosParams(TelegramParams):
    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None


class GetFileParams(TelegramParams):
    file_id: str


# ── Chat administration ──────────────────────────────────────────────────────


class ChatMemberParams(TelegramParams):
    chat_id: ChatId
    user_id: int


class KickChatMemberParams(ChatMemberParams):
    until_date: Optional[int] = None


class UnbanChatMemberParams(ChatMemberParams):
    only_if_banned: Optional[bool] = None


class RestrictChatMemberParams(ChatMemberParams):
    permissions: ChatPermissions
    until_date: Optional[int] = None


class PromoteChatMemberParams(ChatMemberParams):
    is_anonymous: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    can_promote_members: Optional[bool] = None


class SetChatAdministratorCustomTitleParams(ChatMemberParams):
    custom_title: str


class SetChatPermissionsParams(ChatParams):
    permissions: ChatPermissions


class SetChatPhotoParams(ChatParams):
    photo: FileInput


class SetChatTitleParams(ChatParams):
    title: str


class SetChatDescriptionParams(ChatParams):
    description: Optional[str] = None


class PinChatMessageParams(ChatParams):
    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessageParams(ChatParams):
    message_id: Optional[int] = None


class SetChatStickerSetParams(ChatParams):
    sticker_set_name: str


class AnswerCallbackQueryParams(TelegramParams):
    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None


class SetMyCommandsParams(TelegramParams):
    commands: List[BotCommand]


# ── Updating messages ────────────────────────────────────────────────────────


class EditMessageTextParams(_MessageTarget):
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaptionParams(_MessageTarget):
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageMediaParams(_MessageTarget):
    media: AnyInputMedia
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkupParams(_MessageTarget):
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopPollParams(ChatParams):
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessageParams(ChatParams):
    message_id: int


# ── Stickers ─────────────────────────────────────────────────────────────────


class SendStickerParams(_ReplyOptions):
    chat_id: ChatId
    sticker: FileInput


class GetStickerSetParams(TelegramParams):
    name: str


class UploadStickerFileParams(TelegramParams):
    user_id: int
    png_sticker: FileInput


class AddStickerToSetParams(TelegramParams):
    """Exactly one of ``png_sticker`` or ``tgs_sticker`` must be given."""

    user_id: int
    name: str
    png_sticker: Optional[FileInput] = None
    tgs_sticker: Optional[FileInput] = None
    emojis: str
    mask_position: Optional[MaskPosition] = None

    @model_validator(mode="after")
    def _check_sticker(self) -> "AddStickerToSetParams":
        if (self.png_sticker is None) == (self.tgs_sticker is None):
            raise ValueError("exactly one of png_sticker or tgs_sticker is required")
        return self


class CreateNewStickerSetParams(AddStickerToSetParams):
    title: str
    contains_masks: Optional[bool] = None


class SetStickerPositionInSetParams(TelegramParams):
    sticker: str
    position: int


class DeleteStickerFromSetParams(TelegramParams):
    sticker: str


class SetStickerSetThumbParams(TelegramParams):
    name: str
    user_id: int
    thumb: Optional[FileInput] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class AnswerInlineQueryParams(TelegramParams):
    inline_query_id: str
    results: List[SerializeAsAny[InlineQueryResult]]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None


# ── Payments ─────────────────────────────────────────────────────────────────


class SendInvoiceParams(_ReplyOptions):
    chat_id: int
    title: str
    description: str
    payload: str
    provider_token: str
    start_parameter: str
    currency: str
    prices: List[LabeledPrice]
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class AnswerShippingQueryParams(TelegramParams):
    shipping_query_id: str
    ok: bool
    shipping_options: Optional[List[ShippingOption]] = None
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_answer(self) -> "AnswerShippingQueryParams":
        if self.ok and not self.shipping_options:
            raise ValueError("shipping_options are required when ok is True")
        if not self.ok and not self.error_message:
            raise ValueError("error_message is required when ok is False")
        return self


class AnswerPreCheckoutQueryParams(TelegramParams):
    pre_checkout_query_id: str
    ok: bool
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_answer(self) -> "AnswerPreCheckoutQueryParams":
        if not self.ok and not self.error_message:
            raise ValueError("error_message is required when ok is False")
        return self


# ── Telegram Passport ────────────────────────────────────────────────────────


class SetPassportDataErrorsParams(TelegramParams):
    user_id: int
    errors: List[SerializeAsAny[PassportElementError]]


# ── Games ────────────────────────────────────────────────────────────────────


class SendGameParams(_ReplyOptions):
    chat_id: int
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SetGameScoreParams(_MessageTarget):
    user_id: int
    score: int
    force: Optional[bool] = None
    disable_edit_message: Optional[bool] = None


class GetGameHighScoresParams(_MessageTarget):
    user_id: int
