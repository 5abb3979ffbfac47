"""
Text decoding helpers for raw cookie values.
"""

from __future__ import annotations

import base64
import binascii
import re
from urllib import parse

# A "%" not followed by two hex digits is not a valid escape.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def url_decode(value: str) -> str:
    """Percent-decode a cookie value.

    Every ``%`` must start a two-digit hex escape and the decoded
    bytes must form valid UTF-8; ``+`` is kept literally because
    cookie values are not form-encoded.

    Raises:
        ValueError: If an escape is malformed or decodes to invalid UTF-8.
    """
    bad = _BAD_ESCAPE_RE.search(value)
    if bad is not None:
        raise ValueError(f"malformed percent-escape at position {bad.start()}")
    return parse.unquote(value, encoding="utf-8", errors="strict")


def b64decode_segment(segment: str) -> bytes:
    """Decode a base64 segment that may use either alphabet.

    Accepts the standard (``+/``) and URL-safe (``-_``) alphabets
    and tolerates missing ``=`` padding, as token segments
    usually omit it.

    Raises:
        ValueError: If *segment* is empty or not valid base64.
    """
    cleaned = segment.strip().replace("-", "+").replace("_", "/").rstrip("=")
    if not cleaned:
        raise ValueError("empty base64 segment")
    if len(cleaned) % 4 == 1:
        raise ValueError("truncated base64 segment")
    padded = cleaned + "=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64: {exc}") from exc
