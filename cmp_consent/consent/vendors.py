"""
Per-vendor cookie decoders.

Each decoder takes the raw (still percent-encoded) cookie value
and returns the ``ConsentFields`` update it carries. Any failure
to decode is raised as ``MalformedPayloadError``; callers never
see a parser-specific exception.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator, Mapping

import pydantic

from cmp_consent.consent import constants
from cmp_consent.data import loader
from cmp_consent.models import consent
from cmp_consent.utils import encoding, errors, json_parsing

VendorDecoder = Callable[[str], consent.ConsentFields]


@contextlib.contextmanager
def _decoding(vendor: consent.VendorId, cookie_name: str) -> Iterator[None]:
    """Convert any decode error raised inside the block to ``MalformedPayloadError``."""
    try:
        yield
    except errors.MalformedPayloadError:
        raise
    except (ValueError, TypeError, KeyError, IndexError, RecursionError, pydantic.ValidationError) as exc:
        raise errors.MalformedPayloadError(vendor, cookie_name, errors.get_error_message(exc)) from exc


def map_categories(vendor: consent.VendorId, flags: Mapping[str, bool | None]) -> consent.ConsentFields:
    """Map a vendor's decoded flags onto consent categories.

    The key to category table comes from the vendor's registry
    entry. Keys missing from *flags* (or ``None``) leave their
    category unset.
    """
    entry = loader.get_cmp_entry(vendor)
    categories = entry.categories if entry is not None else {}
    return consent.ConsentFields.from_optional(
        **{category: flags.get(key) for key, category in categories.items()}
    )


# ============================================================================
# OneTrust
# ============================================================================


def parse_onetrust_groups(value: str) -> consent.OneTrustGroups:
    """Parse the ``groups=`` segment of an ``OptanonConsent`` value.

    The value is a query-like ``key=value&key=value`` string whose
    ``groups`` entry lists ``CODE:FLAG`` pairs separated by commas.
    A flag of ``"1"`` means granted; anything else means denied.
    A value with no ``groups=`` segment yields no groups.
    """
    with _decoding("onetrust", constants.ONETRUST_COOKIE):
        decoded = encoding.url_decode(value)
        groups: dict[str, bool] = {}
        for segment in decoded.split("&"):
            if not segment.startswith(constants.ONETRUST_GROUP_PREFIX):
                continue
            body = segment.removeprefix(constants.ONETRUST_GROUP_PREFIX)
            for pair in body.split(","):
                code, _, flag = pair.partition(":")
                groups[code] = flag == "1"
        return consent.OneTrustGroups(groups=groups)


def decode_onetrust(value: str) -> consent.ConsentFields:
    """Decode an ``OptanonConsent`` cookie value."""
    return map_categories("onetrust", parse_onetrust_groups(value).groups)


# ============================================================================
# Cookiebot
# ============================================================================


def decode_cookiebot(value: str) -> consent.ConsentFields:
    """Decode a ``CookieConsent`` cookie value (URL-encoded JSON)."""
    with _decoding("cookiebot", constants.COOKIEBOT_COOKIE):
        payload = consent.CookiebotPayload.model_validate(
            json_parsing.load_json_object(encoding.url_decode(value))
        )
    return map_categories("cookiebot", payload.model_dump())


# ============================================================================
# Didomi
# ============================================================================


def decode_didomi(value: str) -> consent.ConsentFields:
    """Decode a ``didomi_token`` cookie value.

    The token is made of ``.``-separated segments like a JWT; the
    second segment is base64-encoded JSON holding a
    ``purposes_consent`` object.
    """
    with _decoding("didomi", constants.DIDOMI_COOKIE):
        segments = value.split(".")
        if len(segments) < 2:
            raise ValueError("token has no payload segment")
        raw = encoding.b64decode_segment(segments[1]).decode("utf-8")
        payload = consent.DidomiPayload.model_validate(json_parsing.load_json_object(raw))

    purposes = payload.purposes_consent
    if purposes is None:
        return consent.ConsentFields()
    return map_categories("didomi", purposes.model_dump())


# ============================================================================
# Termly
# ============================================================================


def decode_termly(value: str) -> consent.ConsentFields:
    """Decode a ``termly-consent`` cookie value (URL-encoded JSON)."""
    with _decoding("termly", constants.TERMLY_COOKIE):
        payload = consent.TermlyPayload.model_validate(
            json_parsing.load_json_object(encoding.url_decode(value))
        )
    return map_categories("termly", payload.model_dump())


# ============================================================================
# IAB TCF
# ============================================================================


def decode_tcf(value: str) -> consent.ConsentFields:
    """Handle a ``euconsent-v2`` cookie without decoding it.

    The TC string is a binary format that needs a full TCF parser.
    Its presence resets ``marketing`` to unknown rather than letting
    an earlier vendor's value stand as if it were current.
    """
    return consent.ConsentFields(marketing=None)


VENDOR_DECODERS: dict[consent.VendorId, VendorDecoder] = {
    "onetrust": decode_onetrust,
    "cookiebot": decode_cookiebot,
    "didomi": decode_didomi,
    "termly": decode_termly,
    "iab-tcf": decode_tcf,
}
