"""Recruiter moderation endpoints."""

from typing import Any

from boardadmin.http.query import build_query
from boardadmin.models.enums import AccountStatus, ValidationAction
from boardadmin.services.base import BaseService, ServiceError, service_call

PENDING_FILTER_KEYS = [
    "status", "country", "sector", "company_size", "search",
    "page", "page_size", "sort_by", "sort_order",
]
PROFILE_FILTER_KEYS = [
    "user_type", "status", "account_status", "country", "sector", "company_size",
    "search", "page", "page_size", "ordering",
]


class RecruiterService(BaseService):
    """Listing, detail and validation of recruiter accounts.

    Listings are returned as decoded JSON; callers normalize them through
    ``boardadmin.adapters.recruiters``.
    """

    @service_call
    async def get_pending_recruiters(self, filters: dict[str, Any] | None = None) -> Any:
        params = build_query(filters, PENDING_FILTER_KEYS)
        return await self.client.get("/api/auth/recruiter-validation/", params=params)

    async def validate_recruiter(self, recruiter_id: int | str, action: ValidationAction | str) -> Any:
        """Approve or reject a recruiter account."""
        try:
            action = ValidationAction(action)
        except ValueError:
            raise ServiceError(f"Action de validation inconnue : {action}") from None
        return await self._post_validation(recruiter_id, action)

    @service_call
    async def _post_validation(self, recruiter_id: int | str, action: ValidationAction) -> Any:
        return await self.client.post(
            f"/api/auth/recruiter-validation/{recruiter_id}/",
            {"action": action.value},
        )

    @service_call
    async def get_recruiter_profiles(self, filters: dict[str, Any] | None = None) -> Any:
        params = build_query(filters, PROFILE_FILTER_KEYS)
        return await self.client.get("/api/auth/profiles/public/", params=params)

    @service_call
    async def search_recruiters_advanced(self, search_params: dict[str, Any]) -> Any:
        return await self.client.post("/api/auth/profiles/search/advanced/", search_params)

    @service_call
    async def get_recruiter_profile(self, recruiter_id: int | str) -> dict[str, Any]:
        return await self.client.get(f"/api/auth/profiles/public/{recruiter_id}/")

    @service_call
    async def update_recruiter_status(self, recruiter_id: int | str, status: AccountStatus | str) -> Any:
        value = AccountStatus(status).value
        return await self.client.patch(
            f"/api/auth/profiles/public/{recruiter_id}/",
            {"account_status": value},
        )

    @service_call
    async def get_recruiter_stats(self) -> dict[str, Any]:
        return await self.client.get("/api/auth/recruiter-validation/stats/")
