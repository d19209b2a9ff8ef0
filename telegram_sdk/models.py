"""Pydantic data models mirroring the Telegram Bot API schema.

Every class corresponds to an object documented at
https://core.telegram.org/bots/api#available-types.  Records are
immutable; fields the schema does not (yet) describe are kept as extras so
a parsed result dumps back to the payload Telegram sent.

Usage::

    from telegram_sdk.models import Message

    msg = Message.model_validate(payload)
    msg.model_dump(by_alias=True, exclude_none=True) == payload
"""

from __future__ import annotations

import io
import mimetypes
import os
from typing import Annotated, Any, BinaryIO, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class TelegramObject(BaseModel):
    """Base for every Telegram record."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


# ── File uploads ─────────────────────────────────────────────────────────────


class InputFile:
    """Raw file content to be uploaded with ``multipart/form-data``.

    Wraps ``bytes`` or a binary stream.  Strings are never wrapped: a string
    in a file field is a URL or a ``file_id`` and travels as JSON.
    """

    _DEFAULT_NAME = "file"

    def __init__(
        self,
        content: Union[bytes, bytearray, BinaryIO],
        filename: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> None:
        if isinstance(content, bytearray):
            content = bytes(content)
        self.content = content
        if filename is None:
            stream_name = getattr(content, "name", None)
            filename = os.path.basename(stream_name) if isinstance(stream_name, str) else self._DEFAULT_NAME
        self.filename = filename
        self.mime_type = mime_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"

    @staticmethod
    def is_binary(value: Any) -> bool:
        """True for values that must be sent as a multipart file part."""
        if isinstance(value, (InputFile, bytes, bytearray)):
            return True
        return isinstance(value, io.IOBase) or (hasattr(value, "read") and not isinstance(value, str))

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Wrap binary values in :class:`InputFile`; leave anything else alone."""
        if isinstance(value, InputFile) or not cls.is_binary(value):
            return value
        return cls(value)

    def to_part(self) -> Tuple[str, Union[bytes, BinaryIO], str]:
        """Return the ``(filename, content, mime_type)`` tuple ``requests`` expects."""
        return (self.filename, self.content, self.mime_type)

    def __repr__(self) -> str:
        return f"InputFile(filename={self.filename!r}, mime_type={self.mime_type!r})"


# A file parameter: uploaded content, or a URL / file_id string.
FileInput = Annotated[Union[InputFile, str], BeforeValidator(InputFile.coerce)]

ParseMode = Literal["Markdown", "MarkdownV2", "HTML"]


# ── Envelope ─────────────────────────────────────────────────────────────────


class ResponseParameters(TelegramObject):
    """Why a request was unsuccessful, when Telegram can tell."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


class TelegramResponse(TelegramObject):
    """The ``{ok, result | error_code + description}`` wrapper of every reply."""

    ok: bool
    result: Optional[Any] = None
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional[ResponseParameters] = None


# ── Core types ───────────────────────────────────────────────────────────────


class User(TelegramObject):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class ChatPhoto(TelegramObject):
    small_file_id: str
    small_file_unique_id: Optional[str] = None
    big_file_id: str
    big_file_unique_id: Optional[str] = None


class ChatPermissions(TelegramObject):
    """Actions a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class Location(TelegramObject):
    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class ChatLocation(TelegramObject):
    location: Location
    address: str


class Chat(TelegramObject):
    """A private chat, group, supergroup or channel."""

    id: int
    type: Literal["private", "group", "supergroup", "channel"]
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    all_members_are_administrators: Optional[bool] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional["Message"] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None


class MessageId(TelegramObject):
    message_id: int


class MessageEntity(TelegramObject):
    """A special entity in a text message: hashtag, URL, bold span and so on."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramObject):
    """One size of a photo, or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: Optional[str] = None
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    emoji: str
    value: int


class PollOption(TelegramObject):
    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramObject):
    """A native poll.  ``type`` is ``regular`` or ``quiz``."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: Optional[int] = None
    is_closed: bool
    is_anonymous: Optional[bool] = None
    type: Optional[Literal["regular", "quiz"]] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Venue(TelegramObject):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class ProximityAlertTriggered(TelegramObject):
    traveler: User
    watcher: User
    distance: int


class UserProfilePhotos(TelegramObject):
    total_count: int
    photos: List[List[PhotoSize]]


class File(TelegramObject):
    """A file ready to be downloaded from ``/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: Optional[str] = None
    file_size: Optional[int] = None
    file_path: Optional[str] = None


# ── Keyboards ────────────────────────────────────────────────────────────────


class KeyboardButtonPollType(TelegramObject):
    type: Optional[Literal["regular", "quiz"]] = None


class KeyboardButton(TelegramObject):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None


class ReplyKeyboardMarkup(TelegramObject):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramObject):
    remove_keyboard: Literal[True]
    selective: Optional[bool] = None


class LoginUrl(TelegramObject):
    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackGame(TelegramObject):
    """Placeholder; holds no information."""


class InlineKeyboardButton(TelegramObject):
    """One button of an inline keyboard.  Exactly one optional field must be used."""

    text: str
    url: Optional[str] = None
    login_url: Optional[LoginUrl] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    inline_keyboard: List[List[InlineKeyboardButton]]


class ForceReply(TelegramObject):
    force_reply: Literal[True]
    selective: Optional[bool] = None


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


# ── Stickers ─────────────────────────────────────────────────────────────────


class MaskPosition(TelegramObject):
    """Where a mask is placed by default on a face."""

    point: Literal["forehead", "eyes", "mouth", "chin"]
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    width: int
    height: int
    is_animated: Optional[bool] = None
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    name: str
    title: str
    is_animated: Optional[bool] = None
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """A portion of the price, in the smallest units of the currency."""

    label: str
    amount: int


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramObject):
    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Telegram Passport ────────────────────────────────────────────────────────

PassportElementType = Literal[
    "personal_details",
    "passport",
    "driver_license",
    "identity_card",
    "internal_passport",
    "address",
    "utility_bill",
    "bank_statement",
    "rental_agreement",
    "passport_registration",
    "temporary_registration",
    "phone_number",
    "email",
]


class PassportFile(TelegramObject):
    file_id: str
    file_unique_id: Optional[str] = None
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    type: PassportElementType
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None
    hash: str


class EncryptedCredentials(TelegramObject):
    data: str
    hash: str
    secret: str


class PassportData(TelegramObject):
    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


class PassportElementError(TelegramObject):
    """Base of the errors reported back through ``setPassportDataErrors``."""

    type: PassportElementType
    message: str


class PassportElementErrorDataField(PassportElementError):
    source: Literal["data"] = "data"
    field_name: str
    data_hash: str


class PassportElementErrorFrontSide(PassportElementError):
    source: Literal["front_side"] = "front_side"
    file_hash: str


class PassportElementErrorReverseSide(PassportElementError):
    source: Literal["reverse_side"] = "reverse_side"
    file_hash: str


class PassportElementErrorSelfie(PassportElementError):
    source: Literal["selfie"] = "selfie"
    file_hash: str


class PassportElementErrorFile(PassportElementError):
    source: Literal["file"] = "file"
    file_hash: str


class PassportElementErrorFiles(PassportElementError):
    source: Literal["files"] = "files"
    file_hashes: List[str]


class PassportElementErrorTranslationFile(PassportElementError):
    source: Literal["translation_file"] = "translation_file"
    file_hash: str


class PassportElementErrorTranslationFiles(PassportElementError):
    source: Literal["translation_files"] = "translation_files"
    file_hashes: List[str]


class PassportElementErrorUnspecified(PassportElementError):
    source: Literal["unspecified"] = "unspecified"
    element_hash: str


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class GameHighScore(TelegramObject):
    position: int
    user: User
    score: int


# ── Message ──────────────────────────────────────────────────────────────────


class Message(TelegramObject):
    """A message.  ``from`` is exposed as :attr:`from_user`."""

    message_id: int
    from_user: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    date: int
    chat: Chat
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional["Message"] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional["Message"] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class CallbackQuery(TelegramObject):
    """An incoming callback query from an inline keyboard button."""

    id: str
    from_user: User = Field(alias="from")
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None


ChatMemberStatus = Literal["creator", "administrator", "member", "restricted", "left", "kicked"]


class ChatMember(TelegramObject):
    user: User
    status: ChatMemberStatus
    custom_title: Optional[str] = None
    is_anonymous: Optional[bool] = None
    until_date: Optional[int] = None
    can_be_edited: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None


class BotCommand(TelegramObject):
    command: str
    description: str


class WebhookInfo(TelegramObject):
    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Input media ──────────────────────────────────────────────────────────────


class InputMedia(TelegramObject):
    """Base of the media items of ``sendMediaGroup`` / ``editMessageMedia``.

    ``media`` (and ``thumb`` where present) may hold raw content; it is
    uploaded as a separate part and referenced with ``attach://<name>``.
    """

    media: FileInput
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InputMediaPhoto(InputMedia):
    type: Literal["photo"] = "photo"


class InputMediaVideo(InputMedia):
    type: Literal["video"] = "video"
    thumb: Optional[FileInput] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(InputMedia):
    type: Literal["animation"] = "animation"
    thumb: Optional[FileInput] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(InputMedia):
    type: Literal["audio"] = "audio"
    thumb: Optional[FileInput] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(InputMedia):
    type: Literal["document"] = "document"
    thumb: Optional[FileInput] = None
    disable_content_type_detection: Optional[bool] = None


AnyInputMedia = Annotated[
    Union[InputMediaAnimation, InputMediaDocument, InputMediaAudio, InputMediaPhoto, InputMediaVideo],
    Field(discriminator="type"),
]

# Animations cannot be part of an album.
AlbumInputMedia = Annotated[
    Union[InputMediaAudio, InputMediaDocument, InputMediaPhoto, InputMediaVideo],
    Field(discriminator="type"),
]


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    id: str
    from_user: User = Field(alias="from")
    location: Optional[Location] = None
    query: str
    offset: str


class ChosenInlineResult(TelegramObject):
    result_id: str
    from_user: User = Field(alias="from")
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None
    query: str


class InputTextMessageContent(TelegramObject):
    message_text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramObject):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramObject):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramObject):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


InputMessageContent = Union[
    InputTextMessageContent,
    InputVenueMessageContent,
    InputLocationMessageContent,
    InputContactMessageContent,
]


class InlineQueryResult(TelegramObject):
    """Common part of every inline query result."""

    id: str
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class _CaptionedResult(InlineQueryResult):
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class _ThumbnailedResult(InlineQueryResult):
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultArticle(_ThumbnailedResult):
    type: Literal["article"] = "article"
    title: str
    input_message_content: InputMessageContent
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None


class InlineQueryResultPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None


class InlineQueryResultVideo(_CaptionedResult):
    type: Literal["video"] = "video"
    video_url: str
    mime_type: Literal["text/html", "video/mp4"]
    thumb_url: str
    title: str
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None


class InlineQueryResultAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_url: str
    title: str
    performer: Optional[str] = None
    audio_duration: Optional[int] = None


class InlineQueryResultVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_url: str
    title: str
    voice_duration: Optional[int] = None


class InlineQueryResultDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    title: str
    document_url: str
    mime_type: Literal["application/pdf", "application/zip"]
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(_ThumbnailedResult):
    type: Literal["location"] = "location"
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InlineQueryResultVenue(_ThumbnailedResult):
    type: Literal["venue"] = "venue"
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InlineQueryResultContact(_ThumbnailedResult):
    type: Literal["contact"] = "contact"
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InlineQueryResultGame(InlineQueryResult):
    type: Literal["game"] = "game"
    game_short_name: str


class InlineQueryResultCachedPhoto(_CaptionedResult):
    type: Literal["photo"] = "photo"
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None


class InlineQueryResultCachedGif(_CaptionedResult):
    type: Literal["gif"] = "gif"
    gif_file_id: str
    title: Optional[str] = None


class InlineQueryResultCachedMpeg4Gif(_CaptionedResult):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    mpeg4_file_id: str
    title: Optional[str] = None


class InlineQueryResultCachedSticker(InlineQueryResult):
    type: Literal["sticker"] = "sticker"
    sticker_file_id: str


class InlineQueryResultCachedDocument(_CaptionedResult):
    type: Literal["document"] = "document"
    title: str
    document_file_id: str
    description: Optional[str] = None


class InlineQueryResultCachedVideo(_CaptionedResult):
    type: Literal["video"] = "video"
    video_file_id: str
    title: str
    description: Optional[str] = None


class InlineQueryResultCachedVoice(_CaptionedResult):
    type: Literal["voice"] = "voice"
    voice_file_id: str
    title: str


class InlineQueryResultCachedAudio(_CaptionedResult):
    type: Literal["audio"] = "audio"
    audio_file_id: str


# ── Update ───────────────────────────────────────────────────────────────────


class Update(TelegramObject):
    """An incoming update.  At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None


def dump(obj: Any) -> Any:
    """Convert models (and containers of models) back to plain Bot API data."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, exclude_none=True)
    if isinstance(obj, (list, tuple)):
        return [dump(item) for item in obj]
    if isinstance(obj, dict):
        return {key: dump(value) for key, value in obj.items()}
    return obj


