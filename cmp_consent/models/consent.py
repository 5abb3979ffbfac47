"""Pydantic models for the universal consent schema and vendor payloads."""

from __future__ import annotations

from typing import Any, Literal

import pydantic

from cmp_consent.utils import serialization

ConsentCategoryName = Literal["marketing", "analytics", "functional", "necessary"]

VendorId = Literal["onetrust", "cookiebot", "didomi", "termly", "iab-tcf"]

# True / False / None, where None means no decodable consent signal.
TriState = pydantic.StrictBool | None

CONSENT_CATEGORIES: tuple[ConsentCategoryName, ...] = (
    "marketing",
    "analytics",
    "functional",
    "necessary",
)


# ============================================================================
# Universal Schema
# ============================================================================


class ConsentSchema(pydantic.BaseModel):
    """Normalised consent state across all supported CMPs.

    Exactly four categories exist. ``None`` means no vendor
    cookie carried a decodable signal for that category and must
    not be read as either granted or denied.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    marketing: TriState = None
    analytics: TriState = None
    functional: TriState = None
    necessary: TriState = True

    @classmethod
    def default(cls) -> ConsentSchema:
        """Return the schema before any vendor cookie is applied."""
        return cls()

    def is_granted(self, category: ConsentCategoryName) -> bool:
        """Return ``True`` only if *category* is explicitly granted."""
        return getattr(self, category) is True

    def unknown_categories(self) -> list[ConsentCategoryName]:
        """Return the categories with no decodable signal."""
        return [name for name in CONSENT_CATEGORIES if getattr(self, name) is None]

    def apply(self, fields: ConsentFields) -> ConsentSchema:
        """Return a copy with every field *fields* explicitly set overwritten."""
        update = {name: getattr(fields, name) for name in fields.model_fields_set}
        if not update:
            return self
        return self.model_copy(update=update)


class ConsentFields(pydantic.BaseModel):
    """Partial consent update produced by a single vendor.

    Only the fields a vendor actually decoded are set, which
    ``model_fields_set`` records. Setting a field to ``None``
    explicitly resets it to unknown.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    marketing: TriState = None
    analytics: TriState = None
    functional: TriState = None
    necessary: TriState = None

    @classmethod
    def from_optional(cls, **values: bool | None) -> ConsentFields:
        """Build an update from *values*, dropping those that are ``None``."""
        return cls(**{k: v for k, v in values.items() if v is not None})


# ============================================================================
# Vendor Payload Shapes
# ============================================================================


class _VendorPayload(pydantic.BaseModel):
    """Base for decoded vendor JSON: unknown keys are ignored."""

    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)

    @pydantic.field_validator("*", mode="before")
    @classmethod
    def _booleans_only(cls, value: Any) -> Any:
        """Treat any non-boolean consent flag as absent."""
        return value if isinstance(value, bool) else None


class OneTrustGroups(pydantic.BaseModel):
    """Group code to consent flag, from the ``groups=`` segment."""

    model_config = pydantic.ConfigDict(frozen=True)

    groups: dict[str, bool] = pydantic.Field(default_factory=dict)

    def get(self, code: str) -> bool | None:
        """Return the flag for *code*, or ``None`` if it was not listed."""
        return self.groups.get(code)


class CookiebotPayload(_VendorPayload):
    """Decoded ``CookieConsent`` JSON."""

    statistics: bool | None = None
    preferences: bool | None = None
    marketing: bool | None = None


class DidomiPurposes(_VendorPayload):
    """Didomi ``purposes_consent`` object."""

    marketing: bool | None = None
    analytics: bool | None = None
    functional: bool | None = None


class DidomiPayload(pydantic.BaseModel):
    """Decoded middle segment of a ``didomi_token``."""

    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)

    purposes_consent: DidomiPurposes | None = None

    @pydantic.field_validator("purposes_consent", mode="before")
    @classmethod
    def _objects_only(cls, value: Any) -> Any:
        """Treat a non-object ``purposes_consent`` as absent."""
        return value if isinstance(value, dict) else None


class TermlyPayload(_VendorPayload):
    """Decoded ``termly-consent`` JSON."""

    analytics: bool | None = None
    functional: bool | None = None
    advertising: bool | None = None


# ============================================================================
# Decode Outcomes
# ============================================================================


class VendorOutcome(pydantic.BaseModel):
    """Result of decoding one vendor cookie: either an update or an error."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )

    vendor: VendorId
    cookie_name: str
    update: ConsentFields | None = None
    error: str | None = None

    @pydantic.model_validator(mode="after")
    def _exactly_one(self) -> VendorOutcome:
        if (self.update is None) == (self.error is None):
            raise ValueError("exactly one of update or error must be set")
        return self

    @property
    def ok(self) -> bool:
        """Whether the vendor payload decoded successfully."""
        return self.error is None

    @classmethod
    def success(cls, vendor: VendorId, cookie_name: str, update: ConsentFields) -> VendorOutcome:
        """Wrap a decoded update."""
        return cls(vendor=vendor, cookie_name=cookie_name, update=update)

    @classmethod
    def failure(cls, vendor: VendorId, cookie_name: str, error: str) -> VendorOutcome:
        """Wrap a decode failure."""
        return cls(vendor=vendor, cookie_name=cookie_name, error=error)


class ConsentReport(pydantic.BaseModel):
    """Decoded consent plus the per-vendor outcomes that produced it."""

    model_config = pydantic.ConfigDict(
        alias_generator=serialization.snake_to_camel,
        populate_by_name=True,
        frozen=True,
    )

    consent: ConsentSchema
    outcomes: list[VendorOutcome] = pydantic.Field(default_factory=list)

    @property
    def matched_vendors(self) -> list[VendorId]:
        """Vendors whose cookie was present, in evaluation order."""
        return [o.vendor for o in self.outcomes]

    @property
    def failed_vendors(self) -> list[VendorId]:
        """Vendors whose cookie was present but malformed."""
        return [o.vendor for o in self.outcomes if not o.ok]
