"""
Multi-vendor consent decoding.

Runs each vendor decoder whose cookie is present, in a fixed order,
and merges their updates into one ``ConsentSchema``. A later vendor
overwrites an earlier one field by field. A malformed vendor cookie
is recorded as a failed outcome and never stops the other vendors.
"""

from __future__ import annotations

from collections.abc import Mapping

from cmp_consent.consent import constants, cookies, vendors
from cmp_consent.models import consent
from cmp_consent.utils import errors, logger

log = logger.create_logger("Consent-Decoder")


def _decode_vendor(vendor: consent.VendorId, cookie_name: str, value: str) -> consent.VendorOutcome:
    """Run one vendor decoder, recovering a malformed payload into a failed outcome."""
    try:
        update = vendors.VENDOR_DECODERS[vendor](value)
    except errors.MalformedPayloadError as exc:
        log.debug("Skipping malformed consent cookie", {"vendor": vendor, "cookie": cookie_name, "reason": exc.reason})
        return consent.VendorOutcome.failure(vendor, cookie_name, exc.reason)
    return consent.VendorOutcome.success(vendor, cookie_name, update)


def decode_consent_report(cookie_map: Mapping[str, str]) -> consent.ConsentReport:
    """Decode every recognised CMP cookie and report each vendor's outcome.

    Args:
        cookie_map: Cookie name to raw value, as returned by
            :func:`cmp_consent.consent.cookies.parse_cookie_string`.

    Returns:
        The merged consent and the outcome of every vendor whose
        cookie was present, in evaluation order.
    """
    result = consent.ConsentSchema.default()
    outcomes: list[consent.VendorOutcome] = []

    for vendor, cookie_name in constants.VENDOR_ORDER:
        value = cookie_map.get(cookie_name)
        # An empty value carries no signal.
        if not value:
            continue
        outcome = _decode_vendor(vendor, cookie_name, value)
        outcomes.append(outcome)
        if outcome.update is not None:
            result = result.apply(outcome.update)

    return consent.ConsentReport(consent=result, outcomes=outcomes)


def decode_consent(cookie_map: Mapping[str, str]) -> consent.ConsentSchema:
    """Normalise CMP cookies into the universal consent schema.

    Never raises: undecodable vendor cookies leave their fields at
    whatever an earlier vendor (or the default) set.
    """
    return decode_consent_report(cookie_map).consent


def decode_cookie_header(cookie_header: str) -> consent.ConsentSchema:
    """Parse a raw ``Cookie`` header and decode the consent it carries."""
    return decode_consent(cookies.parse_cookie_string(cookie_header))
