"""Tests for the recruiter page controllers."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from boardadmin.models.enums import ValidationAction
from boardadmin.models.recruiter import Recruiter
from boardadmin.pages.base import PageStatus
from boardadmin.pages.recruiters import (
    RecruiterDetailPage,
    RecruitersPage,
    public_profile_url,
    validation_prompt,
)
from boardadmin.services.base import ServiceError
from boardadmin.ui.labels import account_status_label


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def flat_entries():
    """Load flat recruiter entries fixture."""
    with open(FIXTURES_DIR / "recruiters_flat.json") as f:
        return json.load(f)


@pytest.fixture
def recruiter_service(flat_entries):
    service = MagicMock()
    service.get_recruiter_profiles = AsyncMock(return_value={"recruiters": flat_entries, "count": 3})
    service.get_pending_recruiters = AsyncMock(return_value={"results": flat_entries})
    service.get_recruiter_profile = AsyncMock(return_value=flat_entries[0])
    service.validate_recruiter = AsyncMock(return_value={"status": "ok"})
    return service


def approved(entries: list[dict], recruiter_id: int) -> list[dict]:
    updated = []
    for entry in entries:
        entry = dict(entry)
        if entry["id"] == recruiter_id:
            entry["account_status"] = "APPROVED"
        updated.append(entry)
    return updated


class TestRecruitersPage:
    """Tests for RecruitersPage."""

    @pytest.mark.asyncio
    async def test_load_both_collections(self, recruiter_service):
        page = RecruitersPage(recruiter_service)

        await page.load()

        assert page.status == PageStatus.SUCCESS
        assert [r.id for r in page.recruiters] == [11, 12, 13]
        assert [r.id for r in page.pending_recruiters] == [11]
        assert page.pagination.total == 3

    @pytest.mark.asyncio
    async def test_request_parameters(self, recruiter_service):
        page = RecruitersPage(recruiter_service, page_size=10, pending_page_size=25)
        page.search_query = "acme"

        await page.load()

        recruiter_service.get_recruiter_profiles.assert_awaited_once_with({
            "user_type": "RECRUTEUR",
            "page": 1,
            "page_size": 10,
            "account_status": "",
            "country": "",
            "sector": "",
            "company_size": "",
            "search": "acme",
        })
        recruiter_service.get_pending_recruiters.assert_awaited_once_with({
            "page": 1,
            "page_size": 25,
            "sort_by": "created_at",
            "sort_order": "desc",
        })

    @pytest.mark.asyncio
    async def test_collections_fail_independently(self, recruiter_service):
        recruiter_service.get_recruiter_profiles.side_effect = ServiceError("Erreur interne du serveur")
        page = RecruitersPage(recruiter_service)

        await page.load()

        assert page.status == PageStatus.ERROR
        assert page.error == "Erreur lors du chargement des recruteurs"
        assert [r.id for r in page.pending_recruiters] == [11]

    @pytest.mark.asyncio
    async def test_pending_failure_message(self, recruiter_service):
        recruiter_service.get_pending_recruiters.side_effect = ServiceError("Ressource non trouvée")
        page = RecruitersPage(recruiter_service)

        await page.load()

        assert page.error == "Erreur lors du chargement des recruteurs en attente: Ressource non trouvée"
        assert len(page.recruiters) == 3

    @pytest.mark.asyncio
    async def test_filter_change_resets_page(self, recruiter_service):
        page = RecruitersPage(recruiter_service)
        await page.set_page(3)
        assert page.pagination.page == 3

        await page.set_filter("sector", "FINANCE")

        assert page.pagination.page == 1
        params = recruiter_service.get_recruiter_profiles.await_args.args[0]
        assert params["sector"] == "FINANCE"
        assert params["page"] == 1

    @pytest.mark.asyncio
    async def test_approve_removes_from_pending(self, recruiter_service, flat_entries):
        page = RecruitersPage(recruiter_service)
        await page.load()
        acme = page.pending_recruiters[0]

        after = approved(flat_entries, 11)
        recruiter_service.get_recruiter_profiles.return_value = {"recruiters": after, "count": 3}
        recruiter_service.get_pending_recruiters.return_value = {"results": after}

        page.request_validation(acme, ValidationAction.APPROVE)
        assert page.confirm_dialog.title == "Approuver le recruteur"
        assert page.confirm_dialog.variant == "success"

        ok = await page.dialog.confirm()

        assert ok
        recruiter_service.validate_recruiter.assert_awaited_once_with(11, ValidationAction.APPROVE)
        assert page.pending_recruiters == []
        listed = next(r for r in page.recruiters if r.id == 11)
        assert account_status_label(listed.account_status)[0] == "Approuvé"
        assert not page.confirm_dialog.is_open

    @pytest.mark.asyncio
    async def test_failed_validation_keeps_dialog(self, recruiter_service):
        recruiter_service.validate_recruiter.side_effect = ServiceError("Accès refusé. Permissions insuffisantes.")
        page = RecruitersPage(recruiter_service)
        await page.load()

        page.request_validation(page.pending_recruiters[0], ValidationAction.REJECT)
        ok = await page.dialog.confirm()

        assert not ok
        assert page.error == "Erreur lors de la rejet du recruteur"
        assert page.confirm_dialog.is_open

    @pytest.mark.asyncio
    async def test_pending_stats(self, recruiter_service):
        page = RecruitersPage(recruiter_service)
        recruiter_service.get_pending_recruiters.return_value = [
            {"id": 1, "company_name": "Acme", "sector": "RETAIL", "contact_email": "a@a.fr", "account_status": "PENDING"},
            {"id": 2, "company_name": " ", "contact_phone": "0100", "account_status": "PENDING"},
            {"id": 3, "account_status": "PENDING"},
        ]

        await page.load()
        stats = page.pending_stats()

        assert stats.total == 3
        assert stats.with_company_info == 1
        assert stats.with_contact_info == 2
        assert stats.with_sector_info == 1
        assert stats.incomplete == 2


class TestRecruiterDetailPage:
    """Tests for RecruiterDetailPage."""

    @pytest.mark.asyncio
    async def test_load_and_approve(self, recruiter_service, flat_entries):
        page = RecruiterDetailPage(recruiter_service, 11)
        await page.load()
        assert page.recruiter.account_status == "PENDING"

        recruiter_service.get_recruiter_profile.return_value = approved(flat_entries, 11)[0]
        page.request_validation(ValidationAction.APPROVE)
        await page.dialog.confirm()

        assert page.recruiter.account_status == "APPROVED"
        assert not page.action_loading
        assert not page.confirm_dialog.is_open

    @pytest.mark.asyncio
    async def test_load_failure(self, recruiter_service):
        recruiter_service.get_recruiter_profile.side_effect = ServiceError("Ressource non trouvée")
        page = RecruiterDetailPage(recruiter_service, 99)

        await page.load()

        assert page.recruiter is None
        assert page.error == "Erreur lors du chargement du recruteur"

    def test_request_validation_without_recruiter(self, recruiter_service):
        page = RecruiterDetailPage(recruiter_service, 99)

        page.request_validation(ValidationAction.APPROVE)

        assert not page.confirm_dialog.is_open


def test_validation_prompt_falls_back_to_generic_name():
    title, message, variant = validation_prompt(Recruiter(id=1), ValidationAction.REJECT)

    assert title == "Rejeter le recruteur"
    assert "ce recruteur" in message
    assert variant == "danger"


def test_public_profile_url():
    assert public_profile_url("http://site.test/", Recruiter(id=1, user_id=7)) == (
        "http://site.test/recruteur/profil-public/7"
    )
    assert public_profile_url("http://site.test", Recruiter(id=1)) is None
