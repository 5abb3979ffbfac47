"""Pydantic models for the CMP registry data file."""

from __future__ import annotations

from typing import Literal

import pydantic

from cmp_consent.models import consent

PayloadEncoding = Literal[
    "query-string",
    "json",
    "base64-json-token",
    "tc-string",
]


class CmpEntry(pydantic.BaseModel):
    """One consent-management platform as stored in JSON."""

    model_config = pydantic.ConfigDict(frozen=True)

    id: consent.VendorId
    name: str
    cookie_name: str
    encoding: PayloadEncoding
    decoded: bool
    url: str = ""
    categories: dict[str, consent.ConsentCategoryName] = pydantic.Field(default_factory=dict)


class CmpRegistry(pydantic.BaseModel):
    """All supported CMPs plus auxiliary consent-state cookie patterns."""

    model_config = pydantic.ConfigDict(frozen=True)

    cmps: list[CmpEntry]
    consent_cookie_name_patterns: list[str] = pydantic.Field(default_factory=list)
