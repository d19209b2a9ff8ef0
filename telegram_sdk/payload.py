"""Request body construction for Bot API calls.

A call is sent as ``multipart/form-data`` when any of its file fields holds
raw content, and as JSON otherwise.  The decision is made per call from the
data itself:

* a top-level file field (``photo``, ``document``, ``thumb``, ...) holding
  ``bytes``, a binary stream or :class:`~telegram_sdk.models.InputFile`;
* an InputMedia item (``sendMediaGroup``, ``editMessageMedia``) whose
  ``media`` or ``thumb`` holds raw content.  Such content is uploaded as a
  separate part and referenced from the item with ``attach://<name>``.

Strings (URLs and ``file_id`` values) never trigger multipart encoding.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from telegram_sdk.models import InputFile

MEDIA_FIELD = "media"
_MEDIA_FILE_KEYS = ("media", "thumb")

# ``requests`` multipart entry: (filename or None, content, content type).
FilePart = Tuple[Optional[str], Any, Optional[str]]


def _media_items(value: Any) -> Iterable[Dict[str, Any]]:
    if isinstance(value, dict):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, dict)]
    return []


def _inspected_fields(payload: Dict[str, Any], file_fields: Optional[Iterable[str]]) -> List[str]:
    if file_fields is None:
        return list(payload)
    return [name for name in file_fields if name in payload]


def has_binary(payload: Dict[str, Any], file_fields: Optional[Iterable[str]] = None) -> bool:
    """Return True when the call must be sent as multipart.

    *file_fields* names the fields to inspect; ``None`` inspects every
    top-level field.
    """
    for name in _inspected_fields(payload, file_fields):
        value = payload[name]
        if InputFile.is_binary(value):
            return True
        if name == MEDIA_FIELD:
            for item in _media_items(value):
                if any(InputFile.is_binary(item.get(key)) for key in _MEDIA_FILE_KEYS):
                    return True
    return False


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _attach_media(value: Any, files: Dict[str, FilePart]) -> Any:
    """Move raw media content into *files* and reference it with ``attach://``."""

    def attach(item: Dict[str, Any]) -> Dict[str, Any]:
        item = dict(item)
        for key in _MEDIA_FILE_KEYS:
            content = item.get(key)
            if InputFile.is_binary(content):
                part_name = f"file{len(files)}"
                files[part_name] = InputFile.coerce(content).to_part()
                item[key] = f"attach://{part_name}"
        return item

    if isinstance(value, dict):
        return attach(value)
    if isinstance(value, (list, tuple)):
        return [attach(item) if isinstance(item, dict) else item for item in value]
    return value


def multipart_body(payload: Dict[str, Any]) -> Dict[str, FilePart]:
    """Encode *payload* as ``requests`` ``files=`` entries.

    Plain fields are sent as form parts without a filename; objects and
    arrays are JSON-encoded as Telegram expects.
    """
    uploads: Dict[str, FilePart] = {}
    fields: Dict[str, FilePart] = {}
    for name, value in payload.items():
        if value is None:
            continue
        if InputFile.is_binary(value):
            uploads[name] = InputFile.coerce(value).to_part()
            continue
        if name == MEDIA_FIELD:
            value = _attach_media(value, uploads)
        fields[name] = (None, _form_value(value), None)
    fields.update(uploads)
    return fields


def build_request(
    payload: Dict[str, Any],
    file_fields: Optional[Iterable[str]] = None,
    multipart: Optional[bool] = None,
) -> Dict[str, Any]:
    """Return the ``requests.post`` keyword arguments carrying *payload*.

    Args:
        payload: Wire-ready parameters (already dumped from the params model).
        file_fields: Fields that may carry uploads; ``None`` checks them all.
        multipart: Encoding hint.  ``None`` decides from the data, ``True``
            forces multipart, ``False`` forces JSON.

    Raises:
        ValueError: JSON encoding was forced but the payload carries raw content.
    """
    binary = has_binary(payload, file_fields)
    if multipart is None:
        multipart = binary
    if multipart:
        return {"files": multipart_body(payload)}
    if binary:
        raise ValueError("raw file content can only be sent with multipart encoding")
    return {"json": payload}
