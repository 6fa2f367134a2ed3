# app/utils.py

import base64
import binascii
import re
from datetime import datetime, timezone

from .errors import ValidationFailed

# Arabic-Indic (U+0660..) and Eastern Arabic-Indic (U+06F0..) digits
_DIGIT_TABLE = str.maketrans(
    '٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹',
    '01234567890123456789',
)

_DATA_URL_RE = re.compile(r'^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w=.-]+)*;base64,(?P<data>.*)$', re.DOTALL)


def normalize_digits(value):
    """
    Converts Arabic-Indic digits to ASCII digits, leaving other characters alone.

    Members often type their university ID on an Arabic keyboard, e.g.
    "٤٤٥١٠١٤١٣" -> "445101413".
    """
    if not value:
        return value
    return value.translate(_DIGIT_TABLE)


def utc_now_iso():
    """Timestamp written into createdAt/date cells."""
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def decode_data_url(data_url, default_mime='image/jpeg'):
    """
    Splits a base64 data URL into raw bytes and its MIME type.

    Args:
        data_url (str): "data:image/png;base64,...." or bare base64 content.
        default_mime (str): Used when the URL does not name a type.

    Returns:
        tuple: (bytes, mime_type)

    Raises:
        ValueError: If the payload is not valid base64.
    """
    mime_type = default_mime
    payload = data_url or ''
    match = _DATA_URL_RE.match(payload)
    if match:
        payload = match.group('data')
        mime_type = match.group('mime') or default_mime
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 image payload: {e}")
    return data, mime_type


def file_extension(file_name, default='jpg'):
    if file_name and '.' in file_name:
        ext = file_name.rsplit('.', 1)[1].strip().lower()
        if ext:
            return ext
    return default


def is_allowed_image(file_name, allowed_extensions):
    return file_extension(file_name, default='') in allowed_extensions


def parse_row_index(value):
    """
    Validates a rowIndex from a request body.

    Raises:
        ValidationFailed: If the value is not a non-negative integer.
    """
    if isinstance(value, bool):
        raise ValidationFailed('rowIndex must be a non-negative integer.')
    try:
        index = int(value)
    except (TypeError, ValueError):
        raise ValidationFailed('rowIndex must be a non-negative integer.')
    if index < 0 or (isinstance(value, float) and not value.is_integer()):
        raise ValidationFailed('rowIndex must be a non-negative integer.')
    return index


def parse_hours(value):
    """Validates an hours value; must be a positive, finite number."""
    if isinstance(value, bool) or value is None:
        raise ValidationFailed('Hours must be a positive number.')
    try:
        hours = float(normalize_digits(value) if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationFailed('Hours must be a positive number.')
    if hours != hours or hours in (float('inf'), float('-inf')) or hours <= 0:
        raise ValidationFailed('Hours must be a positive number.')
    return hours
