from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from statecomply.core.core_types import (
    EntityType,
    ExemptionRecord,
    JurisdictionKey,
    OfficerRequirement,
    UnknownEntityTypeError,
)


@pytest.mark.parametrize("text, expected", [
    ("LLC", EntityType.LLC),
    ("llc", EntityType.LLC),
    ("Corporation", EntityType.CORPORATION),
    ("  corporation ", EntityType.CORPORATION),
    ("Professional Corporation", EntityType.PROFESSIONAL_CORPORATION),
    ("ProfessionalCorporation", EntityType.PROFESSIONAL_CORPORATION),
    ("Non-Profit Corporation", EntityType.NON_PROFIT_CORPORATION),
    ("NON_PROFIT_CORPORATION", EntityType.NON_PROFIT_CORPORATION),
    ("NonProfitCorporation", EntityType.NON_PROFIT_CORPORATION),
])
def test_parse_accepts_labels_names_and_tags(text, expected):
    assert EntityType.parse(text) is expected


def test_parse_passes_members_through():
    assert EntityType.parse(EntityType.LLC) is EntityType.LLC


@pytest.mark.parametrize("text", ["", None, "Partnership", "S Corp"])
def test_parse_rejects_unknown(text):
    with pytest.raises(UnknownEntityTypeError):
        EntityType.parse(text)


def test_unknown_entity_type_is_value_error():
    with pytest.raises(ValueError, match="Partnership"):
        EntityType.parse("Partnership")


def test_tag_strips_spaces_and_hyphens():
    assert EntityType.NON_PROFIT_CORPORATION.tag == "NonProfitCorporation"
    assert EntityType.LLC.label == "LLC"


def test_jurisdiction_key_parses_entity_type_only():
    assert JurisdictionKey.of("Ohio", "llc") == JurisdictionKey("Ohio", EntityType.LLC)
    # state names are exact table keys, like every resolver lookup
    assert JurisdictionKey.of(" Ohio ", "LLC").state == " Ohio "


class TestOfficerRequirement:
    def test_exact_when_bounds_match(self):
        assert OfficerRequirement("Secretary", True, min_required=1, max_required=1).is_exact

    def test_not_exact_when_open_ended(self):
        assert not OfficerRequirement("Director(s)", True, min_required=1).is_exact
        assert not OfficerRequirement("Treasurer", False).is_exact

    def test_frozen(self):
        req = OfficerRequirement("Secretary", True)
        with pytest.raises(FrozenInstanceError):
            req.title = "Clerk"


class TestExemptionRecord:
    def test_flags_are_independent(self):
        record = ExemptionRecord("Arizona", llc=True)
        assert record.exempts(EntityType.LLC)
        assert not record.exempts(EntityType.CORPORATION)
        assert not record.exempts(EntityType.PROFESSIONAL_CORPORATION)
        assert not record.exempts(EntityType.NON_PROFIT_CORPORATION)

    def test_defaults_exempt_nothing(self):
        record = ExemptionRecord("Nowhere")
        assert not any(record.exempts(kind) for kind in EntityType)
