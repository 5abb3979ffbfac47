"""Cookie names and category mappings shared by the vendor decoders."""

from __future__ import annotations

from cmp_consent.models import consent

# Cookie names are fixed by each CMP vendor and matched exactly.
ONETRUST_COOKIE = "OptanonConsent"
COOKIEBOT_COOKIE = "CookieConsent"
DIDOMI_COOKIE = "didomi_token"
TERMLY_COOKIE = "termly-consent"
TCF_COOKIE = "euconsent-v2"

# Vendors are evaluated in this order; later vendors win per field.
VENDOR_ORDER: tuple[tuple[consent.VendorId, str], ...] = (
    ("onetrust", ONETRUST_COOKIE),
    ("cookiebot", COOKIEBOT_COOKIE),
    ("didomi", DIDOMI_COOKIE),
    ("termly", TERMLY_COOKIE),
    ("iab-tcf", TCF_COOKIE),
)

# Segment of an OptanonConsent value listing CODE:FLAG group pairs.
ONETRUST_GROUP_PREFIX = "groups="
