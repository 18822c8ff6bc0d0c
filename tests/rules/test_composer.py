from __future__ import annotations

import json
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from statecomply.constants import US_STATES
from statecomply.core.core_types import EntityType, FeeStatus, FilingFrequency
from statecomply.rules import compose_filing_profile


class TestExemptProfiles:
    def test_arizona_llc_suppresses_form(self):
        profile = compose_filing_profile("Arizona", EntityType.LLC)
        assert profile.is_exempt
        assert profile.exemption_message.startswith("Arizona LLCs are exempt")
        assert profile.address_rules is None
        assert profile.officer_rules is None
        assert profile.fee is None
        assert profile.fee_status is FeeStatus.NOT_APPLICABLE
        assert profile.required_fields == ()
        assert profile.optional_fields == ()
        assert profile.notices == ()

    def test_delaware_llc_keeps_people_label(self):
        profile = compose_filing_profile("Delaware", "LLC")
        assert profile.is_exempt
        assert profile.people_label == "Manager/Member"
        assert profile.people_field == "managers"

    def test_delaware_corporation_is_labelled_officer(self):
        profile = compose_filing_profile("Delaware", "Corporation")
        assert not profile.is_exempt
        assert profile.people_label == "Officer"
        assert profile.people_field == "officers"

    def test_non_exempt_sibling_in_same_state(self):
        profile = compose_filing_profile("Arizona", EntityType.CORPORATION)
        assert not profile.is_exempt
        assert profile.exemption_message == ""
        assert profile.fee == Decimal(0)
        assert profile.fee_status is FeeStatus.FREE
        assert profile.fee_display == "$0"


class TestCaliforniaCorporation:
    @pytest.fixture
    def profile(self):
        return compose_filing_profile("California", EntityType.CORPORATION)

    def test_fee(self, profile):
        assert profile.fee == Decimal(20)
        assert profile.fee_status is FeeStatus.FIXED
        assert profile.fee_display == "$20"

    def test_address_fields(self, profile):
        fields = [f.field for f in profile.address_rules.fields]
        assert fields == ["street", "city", "state", "zipCode"]
        assert all(f.required for f in profile.address_rules.fields)
        assert any("no P.O. Boxes" in n for n in profile.notices)

    def test_required_officers(self, profile):
        required = {
            r.title: r for r in profile.officer_rules.requirements if r.required
        }
        assert set(required) == {"Chief Executive Officer (CEO)", "Secretary"}
        assert all(r.is_exact and r.min_required == 1 for r in required.values())

    def test_fields(self, profile):
        assert profile.people_label == "Officer"
        assert profile.required_fields == (
            "businessName",
            "fileNumber",
            "principalAddress",
            "registeredAgent",
            "officers",
            "signerName",
        )
        assert profile.optional_fields == ("businessPurpose", "mailingAddress")
        assert "officer" in profile.description


def test_florida_mailing_address_is_required():
    profile = compose_filing_profile("Florida", EntityType.CORPORATION)
    assert "mailingAddress" in profile.required_fields
    assert "mailingAddress" not in profile.optional_fields
    assert "Mailing address is required in Florida" in profile.notices


def test_delaware_extra_field_is_optional():
    profile = compose_filing_profile("Delaware", EntityType.CORPORATION)
    assert "delawareAddress" in profile.optional_fields
    assert profile.fee_display == "$50"


def test_professional_corporation_fee_varies():
    profile = compose_filing_profile("California", EntityType.PROFESSIONAL_CORPORATION)
    assert profile.fee is None
    assert profile.fee_status is FeeStatus.VARIES
    assert profile.fee_display == "Varies"


def test_unknown_state_still_renders():
    profile = compose_filing_profile("Atlantis", EntityType.PROFESSIONAL_CORPORATION)
    assert not profile.is_exempt
    assert profile.address_rules.is_default
    assert profile.officer_rules is None
    assert not profile.has_officer_guidance
    assert profile.fee_display == "Varies"
    assert profile.schedule is None


def test_biennial_schedule_adds_notice():
    profile = compose_filing_profile("New York", EntityType.CORPORATION)
    assert profile.schedule.frequency is FilingFrequency.BIENNIAL
    assert any(n.startswith("Biennial filing: due") for n in profile.notices)


def test_notices_are_unique():
    for state in ("California", "Florida", "Delaware", "Nevada"):
        profile = compose_filing_profile(state, EntityType.CORPORATION)
        assert len(profile.notices) == len(set(profile.notices))


def test_composition_is_idempotent():
    first = compose_filing_profile("Texas", "Corporation")
    second = compose_filing_profile("Texas", EntityType.CORPORATION)
    assert first == second


def test_profile_is_frozen():
    profile = compose_filing_profile("Texas", "Corporation")
    with pytest.raises(FrozenInstanceError):
        profile.fee = Decimal(1)


def test_every_pair_composes_and_serialises():
    for state in US_STATES:
        for kind in EntityType:
            profile = compose_filing_profile(state, kind)
            payload = json.loads(json.dumps(profile.to_dict()))
            assert payload["entity_type"] == kind.value
            assert payload["is_exempt"] is profile.is_exempt
            if profile.is_exempt:
                assert payload["address_rules"] is None
            else:
                assert payload["address_rules"]["fields"]


def test_to_dict_renders_decimal_as_string():
    payload = compose_filing_profile("Delaware", EntityType.CORPORATION).to_dict()
    assert payload["fee"] == "50"
    assert payload["schedule"]["late_fee"] == "200"
