"""Tests for the recruiter listing adapter."""

import json
from pathlib import Path

import pytest

from boardadmin.adapters.recruiters import (
    AdapterError,
    filter_pending,
    normalize_recruiter,
    normalize_recruiter_listing,
)


FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def flat_entries():
    """Load flat recruiter entries fixture."""
    with open(FIXTURES_DIR / "recruiters_flat.json") as f:
        return json.load(f)


@pytest.fixture
def nested_response():
    """Load nested recruiter listing fixture."""
    with open(FIXTURES_DIR / "recruiters_nested.json") as f:
        return json.load(f)


class TestNormalizeRecruiterListing:
    """Tests for normalize_recruiter_listing."""

    def test_equivalent_shapes_agree(self, flat_entries):
        as_recruiters = normalize_recruiter_listing({"recruiters": flat_entries, "count": 3})
        as_results = normalize_recruiter_listing({"results": flat_entries, "count": 3})
        as_list = normalize_recruiter_listing(flat_entries)

        assert as_recruiters == as_results == as_list
        assert as_list.count == 3

    def test_flat_entry(self, flat_entries):
        acme = normalize_recruiter_listing(flat_entries).recruiters[0]

        assert acme.id == 11
        assert acme.user_id == 101
        assert acme.username == "acme_rh"
        assert acme.profile.company_name == "Acme"
        assert acme.profile.contact_phone == ""
        assert acme.account_status == "PENDING"
        assert acme.created_at.year == 2024

    def test_missing_fields_get_defaults(self, flat_entries):
        bare = normalize_recruiter_listing(flat_entries).recruiters[2]

        assert bare.user_id == 103
        assert bare.username == ""
        assert bare.display_name == "ce recruteur"
        assert bare.profile.company_name == ""
        assert bare.profile.sector == ""
        assert bare.account_status == "PENDING"

    def test_nested_entries(self, nested_response):
        page = normalize_recruiter_listing(nested_response)

        assert page.count == 42
        acme, initech = page.recruiters
        assert acme.user_id == 101
        assert acme.profile.company_name == "Acme"
        assert acme.profile.model_extra["verified"] is True
        assert initech.account_status == "REJECTED"
        assert initech.first_name == ""

    def test_flat_and_nested_produce_same_person(self, flat_entries, nested_response):
        flat = normalize_recruiter_listing(flat_entries).recruiters[0]
        nested = normalize_recruiter_listing(nested_response).recruiters[0]

        assert flat.username == nested.username
        assert flat.email == nested.email
        assert flat.user_id == nested.user_id
        assert flat.profile.company_name == nested.profile.company_name
        assert flat.profile.sector == nested.profile.sector

    def test_count_falls_back_to_length(self, flat_entries):
        page = normalize_recruiter_listing({"recruiters": flat_entries[:2]})

        assert page.count == 2

    def test_empty_payloads(self):
        assert normalize_recruiter_listing(None).recruiters == []
        assert normalize_recruiter_listing({"count": 0}).count == 0
        assert normalize_recruiter_listing([]).recruiters == []

    def test_unknown_payload(self):
        with pytest.raises(AdapterError):
            normalize_recruiter_listing("recruiters")

    def test_invalid_entry(self):
        with pytest.raises(AdapterError) as exc_info:
            normalize_recruiter_listing([{"company_name": "No id"}])

        assert exc_info.value.details["errors"]


class TestFilterPending:
    """Tests for filter_pending."""

    def test_only_explicit_pending(self, flat_entries):
        pending = filter_pending({"pending_recruiters": flat_entries})

        assert [r.id for r in pending] == [11]

    def test_nested_pending(self, nested_response):
        pending = filter_pending(nested_response)

        assert [r.username for r in pending] == ["acme_rh"]


def test_normalize_single_recruiter(nested_response):
    recruiter = normalize_recruiter(nested_response["results"][1])

    assert recruiter.id == 104
    assert recruiter.profile.company_name == "Initech"
