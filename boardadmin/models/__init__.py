"""boardadmin data models."""

from boardadmin.models.enums import (
    AccountStatus,
    ApiErrorType,
    BlogStatus,
    CompanySize,
    Sector,
    ValidationAction,
)
from boardadmin.models.blog import (
    BlogAuthor,
    BlogCategory,
    BlogFilters,
    BlogPost,
    BlogStats,
)
from boardadmin.models.recruiter import (
    Pagination,
    PendingStats,
    Recruiter,
    RecruiterFilters,
    RecruiterPage,
    RecruiterProfile,
)
from boardadmin.models.auth import LoginResponse, Session, TokenPair

__all__ = [
    "AccountStatus",
    "ApiErrorType",
    "BlogStatus",
    "CompanySize",
    "Sector",
    "ValidationAction",
    "BlogAuthor",
    "BlogCategory",
    "BlogFilters",
    "BlogPost",
    "BlogStats",
    "Pagination",
    "PendingStats",
    "Recruiter",
    "RecruiterFilters",
    "RecruiterPage",
    "RecruiterProfile",
    "LoginResponse",
    "Session",
    "TokenPair",
]
