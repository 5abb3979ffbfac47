"""
Cookie header parsing.

Turns a ``Cookie`` header string into a name to raw-value mapping.
Values are left percent-encoded; each vendor decoder decodes its
own cookie.
"""

from __future__ import annotations

from collections.abc import Mapping


def parse_cookie_string(cookie_header: str) -> dict[str, str]:
    """Split a cookie header into a name to raw-value mapping.

    Pairs are separated by ``;`` and split on the first ``=``.
    A pair without ``=`` maps its name to ``""``. Blank segments
    are skipped and a repeated name keeps its last value.

    Args:
        cookie_header: Header such as ``"a=1; b=2"``.

    Returns:
        The cookie mapping, empty if nothing parsed.
    """
    cookies: dict[str, str] = {}
    for pair in (cookie_header or "").split(";"):
        pair = pair.strip()
        if not pair:
            continue
        name, _, value = pair.partition("=")
        name = name.strip()
        if name:
            cookies[name] = value.strip()
    return cookies


def format_cookie_header(cookies: Mapping[str, str]) -> str:
    """Join a cookie mapping back into a ``name=value; ...`` header."""
    return "; ".join(f"{name}={value}" for name, value in cookies.items())
