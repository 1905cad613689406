import base64
import binascii
import re
from typing import Tuple

# data:<mimetype>;base64,<encoded_data>
DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>[A-Za-z0-9+/=\s]+)$")


def to_data_uri(mime_type: str, data: bytes) -> str:
    b64 = base64.b64encode(data).decode("utf-8")
    return f"data:{mime_type};base64,{b64}"


def parse_data_uri(uri: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into (mime_type, raw bytes). Raises ValueError if malformed."""
    match = DATA_URI_PATTERN.match(uri.strip())
    if not match:
        raise ValueError("Expected a data URI of the form 'data:<mimetype>;base64,<encoded_data>'.")
    try:
        data = base64.b64decode(match.group("data"), validate=False)
    except binascii.Error as exc:
        raise ValueError("Data URI payload is not valid base64.") from exc
    return match.group("mime").lower(), data


def is_image_data_uri(uri: str) -> bool:
    try:
        mime_type, data = parse_data_uri(uri)
    except ValueError:
        return False
    return mime_type.startswith("image/") and bool(data)
