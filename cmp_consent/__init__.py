# Public API: re-export the decoding entry points and result models.
# Prefer importing from the specific submodule (e.g. cmp_consent.consent.decoder).

from cmp_consent.consent.ambient import (
    consent_from_request as consent_from_request,
    decode_ambient_consent as decode_ambient_consent,
    read_cookie_header as read_cookie_header,
)
from cmp_consent.consent.cookies import (
    format_cookie_header as format_cookie_header,
    parse_cookie_string as parse_cookie_string,
)
from cmp_consent.consent.decoder import (
    decode_consent as decode_consent,
    decode_consent_report as decode_consent_report,
    decode_cookie_header as decode_cookie_header,
)
from cmp_consent.data.loader import (
    detect_cmps as detect_cmps,
    get_cmp_registry as get_cmp_registry,
    is_consent_cookie as is_consent_cookie,
)
from cmp_consent.models.consent import (
    ConsentReport as ConsentReport,
    ConsentSchema as ConsentSchema,
    VendorOutcome as VendorOutcome,
)
from cmp_consent.utils.errors import MalformedPayloadError as MalformedPayloadError
