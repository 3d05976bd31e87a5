"""Recruiter listing adapter.

The backend answers recruiter listings in several shapes depending on the
endpoint and its version:

* ``{"recruiters": [...], "count": n}`` with flat entries holding a ``user``
  object next to the company fields;
* ``{"results": [...], "count": n}`` where entries are either flat as above
  or already split into user fields plus a nested ``profile``;
* ``{"pending_recruiters": [...]}`` from older validation endpoints;
* a bare JSON list of flat entries.

Everything is validated against the payload schemas below and turned into
the canonical ``Recruiter`` model.
"""

from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Tag,
    TypeAdapter,
    ValidationError,
)

from boardadmin.models.enums import AccountStatus
from boardadmin.models.recruiter import Recruiter, RecruiterPage, RecruiterProfile


class AdapterError(Exception):
    """Raised when a listing payload matches none of the known shapes."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class UserPayload(BaseModel):
    """User object embedded in a flat recruiter entry."""

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    created_at: datetime | None = None


class ProfilePayload(BaseModel):
    """Company fields as sent by the backend; every field may be null."""

    model_config = ConfigDict(extra="allow")

    company_name: str | None = None
    sector: str | None = None
    company_size: str | None = None
    website: str | None = None
    address: str | None = None
    country: Any = None
    region: Any = None
    contact_email: str | None = None
    contact_phone: str | None = None
    account_status: str | None = None
    logo: str | None = None
    description: str | None = None
    documents: list[Any] | None = None

    def to_profile(self) -> RecruiterProfile:
        return RecruiterProfile(
            **(self.model_extra or {}),
            company_name=self.company_name or "",
            sector=self.sector or "",
            company_size=self.company_size or "",
            website=self.website or "",
            address=self.address or "",
            country=self.country or None,
            region=self.region or None,
            contact_email=self.contact_email or "",
            contact_phone=self.contact_phone or "",
            account_status=self.account_status or AccountStatus.PENDING.value,
            logo=self.logo or None,
            description=self.description or "",
            documents=self.documents or [],
        )


class FlatRecruiterPayload(ProfilePayload):
    """Recruiter entry with company fields at the top level."""

    id: int | str
    user: UserPayload | int | str | None = None
    created_at: datetime | None = None

    def status(self) -> str | None:
        return self.account_status

    def to_recruiter(self) -> Recruiter:
        user = self.user if isinstance(self.user, UserPayload) else UserPayload(id=self.user)
        profile = ProfilePayload.model_validate(
            self.model_dump(include=set(ProfilePayload.model_fields))
        ).to_profile()
        return Recruiter(
            id=self.id,
            username=user.username or "",
            email=user.email or "",
            first_name=user.first_name or "",
            last_name=user.last_name or "",
            phone=user.phone or "",
            created_at=user.created_at or self.created_at,
            user_id=user.id,
            profile=profile,
        )


class NestedRecruiterPayload(BaseModel):
    """Recruiter entry with user fields at the top and a ``profile`` object."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    created_at: datetime | None = None
    profile: ProfilePayload

    def status(self) -> str | None:
        return self.profile.account_status

    def to_recruiter(self) -> Recruiter:
        return Recruiter(
            id=self.id,
            username=self.username or "",
            email=self.email or "",
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            phone=self.phone or "",
            created_at=self.created_at,
            user_id=self.id,
            profile=self.profile.to_profile(),
        )


def _entry_shape(value: Any) -> str:
    if isinstance(value, dict):
        return "nested" if isinstance(value.get("profile"), dict) else "flat"
    return "nested" if isinstance(getattr(value, "profile", None), ProfilePayload) else "flat"


RecruiterPayload = Annotated[
    Union[
        Annotated[NestedRecruiterPayload, Tag("nested")],
        Annotated[FlatRecruiterPayload, Tag("flat")],
    ],
    Discriminator(_entry_shape),
]

_entries_adapter = TypeAdapter(list[RecruiterPayload])

LISTING_KEYS = ("recruiters", "results", "pending_recruiters")


def _extract_entries(payload: Any) -> tuple[list[Any], int | None]:
    """Pick the entry list out of any known listing shape."""
    if isinstance(payload, list):
        return payload, len(payload)
    if isinstance(payload, dict):
        count = payload.get("count")
        for key in LISTING_KEYS:
            entries = payload.get(key)
            if isinstance(entries, list):
                return entries, count if isinstance(count, int) else None
        return [], count if isinstance(count, int) else 0
    if payload is None:
        return [], 0
    raise AdapterError(
        f"Unsupported recruiter listing payload: {type(payload).__name__}",
        details={"payload": repr(payload)[:200]},
    )


def parse_entries(payload: Any) -> list[FlatRecruiterPayload | NestedRecruiterPayload]:
    """Validate every entry of a listing payload."""
    entries, _ = _extract_entries(payload)
    try:
        return _entries_adapter.validate_python(entries)
    except ValidationError as e:
        raise AdapterError(
            "Recruiter entry does not match any known schema",
            details={"errors": e.errors(include_url=False)},
        ) from e


def normalize_recruiter_listing(payload: Any) -> RecruiterPage:
    """
    Convert any supported listing payload into canonical recruiters.

    Args:
        payload: Decoded JSON from a listing endpoint.

    Returns:
        The recruiters and the backend total (list length when absent).

    Raises:
        AdapterError: If the payload or an entry has an unknown shape.
    """
    _, count = _extract_entries(payload)
    recruiters = [entry.to_recruiter() for entry in parse_entries(payload)]
    return RecruiterPage(
        recruiters=recruiters,
        count=count if count is not None else len(recruiters),
    )


def filter_pending(payload: Any) -> list[Recruiter]:
    """Keep only entries whose backend status is explicitly PENDING."""
    return [
        entry.to_recruiter()
        for entry in parse_entries(payload)
        if entry.status() == AccountStatus.PENDING.value
    ]


def normalize_recruiter(payload: dict[str, Any]) -> Recruiter:
    """Convert a single recruiter detail payload."""
    return normalize_recruiter_listing([payload]).recruiters[0]
