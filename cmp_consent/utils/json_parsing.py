"""JSON parsing helpers for decoded cookie payloads."""

from __future__ import annotations

import json
from typing import Any


def load_json_object(text: str | bytes) -> dict[str, Any]:
    """Parse *text* as JSON and require a top-level object.

    CMP cookies that carry JSON always serialise an object;
    any other top-level value (``null``, a list, a number)
    means the cookie is not in the expected shape.

    Args:
        text: Decoded cookie payload.

    Returns:
        The parsed JSON object.

    Raises:
        ValueError: If *text* is not valid JSON or is not an object.
    """
    try:
        parsed = json.loads(text)
    except RecursionError as exc:
        raise ValueError("JSON nesting too deep") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed
