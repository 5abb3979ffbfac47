"""
Adapters that read the ambient cookie source.

The decoding core only works on explicit input. These helpers
fetch the raw ``Cookie`` header from wherever the host runtime keeps
it (a CGI/WSGI style environment, or an incoming HTTP request) and
hand it to the core.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from starlette import requests

from cmp_consent import config
from cmp_consent.consent import cookies, decoder
from cmp_consent.models import consent
from cmp_consent.utils import logger

log = logger.create_logger("Consent-Ambient")


def read_cookie_header(environ: Mapping[str, str] | None = None) -> str:
    """Read the raw cookie header from an environment mapping.

    Args:
        environ: A CGI/WSGI environ; defaults to ``os.environ``.

    Returns:
        The header value, or ``""`` when the variable is unset.
    """
    source = os.environ if environ is None else environ
    env_var = config.get_settings().cookie_env_var
    header = source.get(env_var)
    if header is None:
        log.debug("No ambient cookie header", {"env_var": env_var})
        return ""
    return header


def parse_ambient_cookies(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Parse the ambient cookie header into a cookie mapping."""
    return cookies.parse_cookie_string(read_cookie_header(environ))


def decode_ambient_consent(environ: Mapping[str, str] | None = None) -> consent.ConsentSchema:
    """Decode consent from the ambient cookie header."""
    return decoder.decode_consent(parse_ambient_cookies(environ))


def consent_from_request(request: requests.Request) -> consent.ConsentSchema:
    """Decode consent from an incoming request's ``Cookie`` header.

    Reads the raw header rather than ``request.cookies`` so values
    reach the vendor decoders still percent-encoded. Can be used
    directly as a FastAPI dependency::

        @app.get("/page")
        def page(consent: ConsentSchema = fastapi.Depends(consent_from_request)): ...
    """
    header = "; ".join(request.headers.getlist("cookie"))
    return decoder.decode_cookie_header(header)
