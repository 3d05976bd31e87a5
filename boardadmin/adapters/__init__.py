"""Backend payload adapters."""

from boardadmin.adapters.recruiters import (
    AdapterError,
    filter_pending,
    normalize_recruiter,
    normalize_recruiter_listing,
)

__all__ = [
    "AdapterError",
    "filter_pending",
    "normalize_recruiter",
    "normalize_recruiter_listing",
]
