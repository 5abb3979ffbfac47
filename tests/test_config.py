"""Tests for cmp_consent.config — environment-driven settings."""

from __future__ import annotations

from unittest import mock

import pydantic
import pytest

from cmp_consent.config import ConsentSettings, get_settings, reset_settings


class TestConsentSettings:
    def test_defaults(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            cfg = ConsentSettings()
        assert cfg.cookie_env_var == "HTTP_COOKIE"
        assert cfg.log_level == "warn"

    def test_reads_environment(self) -> None:
        env = {"CMP_CONSENT_COOKIE_ENV_VAR": "X_COOKIES", "CMP_CONSENT_LOG_LEVEL": "debug"}
        with mock.patch.dict("os.environ", env, clear=True):
            cfg = ConsentSettings()
        assert cfg.cookie_env_var == "X_COOKIES"
        assert cfg.log_level == "debug"

    @pytest.mark.parametrize(("raw", "expected"), [("INFO", "info"), (" Error ", "error"), ("WARNING", "warn")])
    def test_level_normalised(self, raw: str, expected: str) -> None:
        with mock.patch.dict("os.environ", {"CMP_CONSENT_LOG_LEVEL": raw}, clear=True):
            assert ConsentSettings().log_level == expected

    def test_invalid_level_rejected(self) -> None:
        with mock.patch.dict("os.environ", {"CMP_CONSENT_LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(pydantic.ValidationError):
                ConsentSettings()


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self) -> None:
        with mock.patch.dict("os.environ", {"CMP_CONSENT_COOKIE_ENV_VAR": "FIRST"}, clear=True):
            assert get_settings().cookie_env_var == "FIRST"
        with mock.patch.dict("os.environ", {"CMP_CONSENT_COOKIE_ENV_VAR": "SECOND"}, clear=True):
            assert get_settings().cookie_env_var == "FIRST"
            reset_settings()
            assert get_settings().cookie_env_var == "SECOND"
