"""Tests for cmp_consent.consent.ambient — ambient cookie source adapters."""

from __future__ import annotations

from unittest import mock

import fastapi
from fastapi import testclient
from starlette import requests

from cmp_consent.consent import ambient
from cmp_consent.models.consent import ConsentSchema


def _request(*cookie_headers: str) -> requests.Request:
    """Build a bare Starlette request carrying the given Cookie headers."""
    headers = [(b"cookie", h.encode("latin-1")) for h in cookie_headers]
    return requests.Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


class TestReadCookieHeader:
    """Tests for read_cookie_header()."""

    def test_reads_explicit_environ(self) -> None:
        assert ambient.read_cookie_header({"HTTP_COOKIE": "a=1"}) == "a=1"

    def test_missing_variable_gives_empty(self) -> None:
        assert ambient.read_cookie_header({}) == ""

    def test_defaults_to_process_environment(self) -> None:
        with mock.patch.dict("os.environ", {"HTTP_COOKIE": "b=2"}, clear=True):
            assert ambient.read_cookie_header() == "b=2"

    def test_configurable_variable_name(self) -> None:
        with mock.patch.dict("os.environ", {"CMP_CONSENT_COOKIE_ENV_VAR": "RAW_COOKIES"}, clear=True):
            assert ambient.read_cookie_header({"RAW_COOKIES": "c=3", "HTTP_COOKIE": "d=4"}) == "c=3"


class TestDecodeAmbientConsent:
    """Tests for parse_ambient_cookies() and decode_ambient_consent()."""

    def test_parse(self) -> None:
        assert ambient.parse_ambient_cookies({"HTTP_COOKIE": "a=1; b=2"}) == {"a": "1", "b": "2"}

    def test_decode(self, termly_value: str) -> None:
        result = ambient.decode_ambient_consent({"HTTP_COOKIE": f"termly-consent={termly_value}"})
        assert result.marketing is False
        assert result.analytics is True

    def test_decode_from_process_environment(self) -> None:
        env = {"HTTP_COOKIE": "OptanonConsent=groups%3DC0004%3A1"}
        with mock.patch.dict("os.environ", env, clear=True):
            assert ambient.decode_ambient_consent().marketing is True

    def test_no_cookies(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            result = ambient.decode_ambient_consent()
        assert result.unknown_categories() == ["marketing", "analytics", "functional"]


class TestConsentFromRequest:
    """Tests for consent_from_request()."""

    def test_decodes_cookie_header(self, cookiebot_value: str) -> None:
        result = ambient.consent_from_request(_request(f"CookieConsent={cookiebot_value}; theme=dark"))
        assert result.analytics is True
        assert result.marketing is False

    def test_values_reach_decoder_percent_encoded(self) -> None:
        request = _request("OptanonConsent=isGpcEnabled=0&groups=C0002%3A1%2CC0003%3A1")
        result = ambient.consent_from_request(request)
        assert result.analytics is True
        assert result.functional is True

    def test_multiple_cookie_headers(self, termly_value: str) -> None:
        request = _request("OptanonConsent=groups=C0004:1", f"termly-consent={termly_value}")
        result = ambient.consent_from_request(request)
        assert result.marketing is False

    def test_no_cookie_header(self) -> None:
        result = ambient.consent_from_request(_request())
        assert result.necessary is True
        assert result.marketing is None


class TestFastapiDependency:
    """consent_from_request() mounted as a FastAPI dependency."""

    @staticmethod
    def _client() -> testclient.TestClient:
        app = fastapi.FastAPI()

        @app.get("/consent")
        def read_consent(consent: ConsentSchema = fastapi.Depends(ambient.consent_from_request)) -> dict:
            return consent.model_dump()

        return testclient.TestClient(app)

    def test_decodes_request_cookies(self) -> None:
        response = self._client().get("/consent", headers={"Cookie": "OptanonConsent=groups%3DC0002%3A1%2CC0004%3A0"})
        assert response.status_code == 200
        assert response.json() == {"marketing": False, "analytics": True, "functional": None, "necessary": True}

    def test_no_cookies_gives_defaults(self) -> None:
        response = self._client().get("/consent")
        assert response.json() == {"marketing": None, "analytics": None, "functional": None, "necessary": True}
