import base64
from typing import List


def split_comma_list(text: str) -> List[str]:
    """
    Splits a comma separated form field into trimmed, non-empty items.
    """
    return [item.strip() for item in (text or "").split(",") if item.strip()]


def or_not_specified(value) -> str:
    if value is None or not str(value).strip():
        return "Not specified"
    return str(value)


def to_data_url(payload: bytes, mime_type: str) -> str:
    """
    Encodes bytes as a base64 ``data:`` URL.
    """
    return f"data:{mime_type};base64," + base64.b64encode(payload).decode("ascii")
