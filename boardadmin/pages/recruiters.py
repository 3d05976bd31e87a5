"""Recruiter listing, moderation queue and detail pages."""

import asyncio
import logging
from typing import Any

from boardadmin.adapters.recruiters import (
    AdapterError,
    filter_pending,
    normalize_recruiter,
    normalize_recruiter_listing,
)
from boardadmin.models.enums import ValidationAction
from boardadmin.models.recruiter import (
    Pagination,
    PendingStats,
    Recruiter,
    RecruiterFilters,
    RecruiterPage,
)
from boardadmin.pages.base import BasePage, PageStatus
from boardadmin.services.base import ServiceError
from boardadmin.services.recruiter import RecruiterService

logger = logging.getLogger(__name__)

RECRUITER_USER_TYPE = "RECRUTEUR"


def _action_noun(action: ValidationAction) -> str:
    return "validation" if action == ValidationAction.APPROVE else "rejet"


def validation_prompt(recruiter: Recruiter, action: ValidationAction) -> tuple[str, str, str]:
    """Title, message and variant of the confirmation for a moderation action."""
    name = recruiter.display_name
    if action == ValidationAction.APPROVE:
        return (
            "Approuver le recruteur",
            f"Êtes-vous sûr de vouloir approuver {name} ?",
            "success",
        )
    return (
        "Rejeter le recruteur",
        f"Êtes-vous sûr de vouloir rejeter {name} ?",
        "danger",
    )


def public_profile_url(base_url: str, recruiter: Recruiter) -> str | None:
    if recruiter.user_id is None:
        return None
    return f"{base_url.rstrip('/')}/recruteur/profil-public/{recruiter.user_id}"


class RecruitersPage(BasePage):
    """
    Paginated recruiter listing plus the pending moderation queue.

    Both collections are fetched in parallel and fail independently.
    """

    def __init__(
        self,
        recruiter_service: RecruiterService,
        page_size: int = 20,
        pending_page_size: int = 50,
    ):
        super().__init__()
        self.recruiter_service = recruiter_service
        self.pending_page_size = pending_page_size
        self.recruiters: list[Recruiter] = []
        self.pending_recruiters: list[Recruiter] = []
        self.filters = RecruiterFilters()
        self.search_query = ""
        self.pagination = Pagination(page_size=page_size)

    def listing_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "user_type": RECRUITER_USER_TYPE,
            "page": self.pagination.page,
            "page_size": self.pagination.page_size,
            **self.filters.model_dump(),
        }
        if self.search_query:
            params["search"] = self.search_query
        return params

    def pending_params(self) -> dict[str, Any]:
        return {
            "page": 1,
            "page_size": self.pending_page_size,
            "sort_by": "created_at",
            "sort_order": "desc",
        }

    async def _fetch_listing(self) -> RecruiterPage:
        data = await self.recruiter_service.get_recruiter_profiles(self.listing_params())
        return normalize_recruiter_listing(data)

    async def _fetch_pending(self) -> list[Recruiter]:
        data = await self.recruiter_service.get_pending_recruiters(self.pending_params())
        return filter_pending(data)

    async def load(self):
        seq = self._begin_load()
        listing, pending = await asyncio.gather(
            self._fetch_listing(),
            self._fetch_pending(),
            return_exceptions=True,
        )
        if not self._is_current(seq):
            logger.debug("Discarding stale recruiter load %s", seq)
            return

        errors = []
        if isinstance(listing, (ServiceError, AdapterError)):
            logger.error("Failed to load recruiters: %s", listing)
            errors.append("Erreur lors du chargement des recruteurs")
        elif isinstance(listing, BaseException):
            raise listing
        else:
            self.recruiters = listing.recruiters
            self.pagination = self.pagination.model_copy(update={"total": listing.count})

        if isinstance(pending, (ServiceError, AdapterError)):
            logger.error("Failed to load pending recruiters: %s", pending)
            errors.append(f"Erreur lors du chargement des recruteurs en attente: {pending}")
        elif isinstance(pending, BaseException):
            raise pending
        else:
            self.pending_recruiters = pending

        if errors:
            self._fail(" / ".join(errors))
        else:
            self.status = PageStatus.SUCCESS

    async def set_filter(self, key: str, value: str):
        self.filters = self.filters.model_copy(update={key: value})
        self.pagination = self.pagination.model_copy(update={"page": 1})
        await self.load()

    async def set_search(self, query: str):
        self.search_query = query
        self.pagination = self.pagination.model_copy(update={"page": 1})
        await self.load()

    async def set_page(self, page: int):
        self.pagination = self.pagination.model_copy(update={"page": max(1, page)})
        await self.load()

    def request_validation(self, recruiter: Recruiter, action: ValidationAction):
        title, message, variant = validation_prompt(recruiter, action)
        self.show_confirm_dialog(
            title,
            message,
            lambda: self.validate(recruiter.id, action),
            variant,
        )

    async def validate(self, recruiter_id: int | str, action: ValidationAction) -> bool:
        action = ValidationAction(action)
        try:
            await self.recruiter_service.validate_recruiter(recruiter_id, action)
        except ServiceError as e:
            logger.error("Recruiter %s %s failed: %s", recruiter_id, action.value, e)
            self.error = f"Erreur lors de la {_action_noun(action)} du recruteur"
            return False
        await self.load()
        self.close_confirm_dialog()
        return True

    def pending_stats(self) -> PendingStats:
        pending = [r.profile for r in self.pending_recruiters]
        total = len(pending)
        with_company = sum(1 for p in pending if p.company_name.strip())
        with_contact = sum(1 for p in pending if p.contact_email or p.contact_phone)
        with_sector = sum(1 for p in pending if p.sector.strip())
        return PendingStats(
            total=total,
            with_company_info=with_company,
            with_contact_info=with_contact,
            with_sector_info=with_sector,
            incomplete=total - min(with_company, with_contact, with_sector),
        )


class RecruiterDetailPage(BasePage):
    """One recruiter account with approve/reject actions."""

    def __init__(self, recruiter_service: RecruiterService, recruiter_id: int | str):
        super().__init__()
        self.recruiter_service = recruiter_service
        self.recruiter_id = recruiter_id
        self.recruiter: Recruiter | None = None
        self.action_loading = False

    async def load(self):
        seq = self._begin_load()
        try:
            data = await self.recruiter_service.get_recruiter_profile(self.recruiter_id)
            recruiter = normalize_recruiter(data or {})
        except (ServiceError, AdapterError) as e:
            if self._is_current(seq):
                logger.error("Failed to load recruiter %s: %s", self.recruiter_id, e)
                self._fail("Erreur lors du chargement du recruteur")
            return
        if not self._is_current(seq):
            return
        self.recruiter = recruiter
        self.status = PageStatus.SUCCESS

    def request_validation(self, action: ValidationAction):
        if self.recruiter is None:
            return
        title, message, variant = validation_prompt(self.recruiter, action)
        self.show_confirm_dialog(title, message, lambda: self.validate(action), variant)

    async def validate(self, action: ValidationAction) -> bool:
        action = ValidationAction(action)
        self.action_loading = True
        try:
            await self.recruiter_service.validate_recruiter(self.recruiter_id, action)
            await self.load()
            self.close_confirm_dialog()
            return True
        except ServiceError as e:
            logger.error("Recruiter %s %s failed: %s", self.recruiter_id, action.value, e)
            self.error = f"Erreur lors de la {_action_noun(action)} du recruteur"
            return False
        finally:
            self.action_loading = False
