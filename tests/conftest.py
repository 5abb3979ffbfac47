"""Shared fixtures for the test suite."""

from __future__ import annotations

import base64
import json
from collections.abc import Callable, Iterator
from typing import Any
from urllib import parse

import pytest

from cmp_consent import config
from cmp_consent.utils import logger


@pytest.fixture(autouse=True)
def _fresh_state() -> Iterator[None]:
    """Reset cached settings and the log buffer around every test."""
    config.reset_settings()
    logger.clear_log_buffer()
    yield
    config.reset_settings()
    logger.clear_log_buffer()


# ── Cookie Value Builders ───────────────────────────────────────


def _url_json(payload: Any) -> str:
    """URL-encode a JSON payload the way CMP scripts write it."""
    return parse.quote(json.dumps(payload, separators=(",", ":")), safe="")


def _didomi_token(payload: Any, *, urlsafe: bool = True) -> str:
    """Build a three-part ``didomi_token`` with *payload* as the middle segment."""
    raw = json.dumps(payload).encode("utf-8")
    encoded = base64.urlsafe_b64encode(raw) if urlsafe else base64.b64encode(raw)
    return f"header.{encoded.decode('ascii').rstrip('=')}.signature"


@pytest.fixture()
def url_json() -> Callable[[Any], str]:
    """Encoder for URL-encoded JSON cookie values."""
    return _url_json


@pytest.fixture()
def make_didomi_token() -> Callable[..., str]:
    """Builder for ``didomi_token`` values."""
    return _didomi_token


# ── Cookie Map Fixtures ─────────────────────────────────────────


@pytest.fixture()
def onetrust_value() -> str:
    """A realistic percent-encoded ``OptanonConsent`` value."""
    return (
        "isGpcEnabled=0&datestamp=Mon+Jan+05+2026+10%3A00%3A00+GMT%2B0000"
        "&version=202401.1.0&isIABGlobal=false&hosts="
        "&groups=C0001%3A1%2CC0002%3A1%2CC0003%3A0%2CC0004%3A1"
        "&AwaitingReconsent=false"
    )


@pytest.fixture()
def cookiebot_value() -> str:
    """A ``CookieConsent`` value granting statistics only."""
    return _url_json({"stamp": "abc", "necessary": True, "preferences": False, "statistics": True, "marketing": False})


@pytest.fixture()
def didomi_value() -> str:
    """A ``didomi_token`` granting marketing and functional."""
    return _didomi_token({
        "user_id": "1234",
        "purposes_consent": {"marketing": True, "analytics": False, "functional": True},
    })


@pytest.fixture()
def termly_value() -> str:
    """A ``termly-consent`` value denying advertising."""
    return _url_json({"analytics": True, "functional": True, "advertising": False})
