"""Recruiter data models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from boardadmin.models.enums import AccountStatus


class RecruiterProfile(BaseModel):
    """Company side of a recruiter account."""

    model_config = ConfigDict(extra="allow")

    company_name: str = ""
    sector: str = ""
    company_size: str = ""
    website: str = ""
    address: str = ""
    country: Any = None
    region: Any = None
    contact_email: str = ""
    contact_phone: str = ""
    account_status: str = AccountStatus.PENDING.value
    logo: str | None = None
    description: str = ""
    documents: list[Any] = Field(default_factory=list)


class Recruiter(BaseModel):
    """Canonical recruiter shape used by the recruiter pages."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    created_at: datetime | None = None
    user_id: int | str | None = None
    profile: RecruiterProfile = Field(default_factory=RecruiterProfile)

    @property
    def account_status(self) -> str:
        return self.profile.account_status

    @property
    def display_name(self) -> str:
        return self.username or "ce recruteur"


class RecruiterFilters(BaseModel):
    """Server-side filters of the recruiters listing."""

    account_status: str = ""
    country: str = ""
    sector: str = ""
    company_size: str = ""


class Pagination(BaseModel):
    """Pagination state of a listing page."""

    page: int = 1
    page_size: int = 20
    total: int = 0

    @property
    def num_pages(self) -> int:
        if self.page_size <= 0:
            return 1
        return max(1, -(-self.total // self.page_size))


class RecruiterPage(BaseModel):
    """One page of normalized recruiters plus the backend total."""

    recruiters: list[Recruiter] = Field(default_factory=list)
    count: int = 0


class PendingStats(BaseModel):
    """Completeness summary of the moderation queue."""

    total: int = 0
    with_company_info: int = 0
    with_contact_info: int = 0
    with_sector_info: int = 0
    incomplete: int = 0
