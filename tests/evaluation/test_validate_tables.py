"""
Falsification tests for the rule table validator.

The shipped tables must pass. Each check must FAIL when handed broken data,
proving it inspects the tables rather than rubber-stamping them.
"""

from decimal import Decimal
from types import MappingProxyType

import pytest

from statecomply.core.core_types import (
    AddressRuleSet,
    EntityType,
    ExemptionRecord,
    FieldRequirement,
    FilingFrequency,
    FilingSchedule,
    OfficerRequirement,
    OfficerRuleSet,
    RuleSource,
)
from statecomply.evaluation import TableValidationError, assert_tables_valid, validate_tables
from statecomply.evaluation.validate_tables import (
    check_rt1_address_rules,
    check_rt2_officer_rules,
    check_rt3_fees,
    check_rt4_exemptions,
    check_rt6_schedules,
)
from statecomply.tables import DEFAULT_ADDRESS_RULES, DEFAULT_OFFICER_RULES


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def street_field():
    return (FieldRequirement("street", "Street Address", True),)


@pytest.fixture
def corp_rules():
    def _build(state, *requirements):
        return OfficerRuleSet(
            state=state,
            entity_type=EntityType.CORPORATION,
            source=RuleSource.STATE,
            requirements=tuple(requirements),
        )
    return _build


# =============================================================================
# SHIPPED TABLES
# =============================================================================

def test_shipped_tables_pass():
    report = validate_tables()
    assert report.passed, [
        f.message for c in report.checks for f in c.findings if f.severity == "error"
    ]
    assert report.summary["overall_status"] == "PASS"
    assert report.summary["checks_failed"] == 0
    assert len(report.checks) == 7


def test_assert_tables_valid_returns_report():
    assert assert_tables_valid().passed


def test_assert_tables_valid_raises(monkeypatch):
    import importlib

    module = importlib.import_module("statecomply.evaluation.validate_tables")

    def broken():
        report = module.ValidationReport(timestamp="now")
        report.add_check(module.CheckResult(
            "RT3", "Filing Fees", False,
            [module.Finding("RT3", "error", "Texas/LLC: negative fee -1")],
        ))
        report.compute_summary()
        return report

    monkeypatch.setattr(module, "validate_tables", broken)
    with pytest.raises(TableValidationError, match="negative fee"):
        module.assert_tables_valid()


# =============================================================================
# RT1 - RT6 FALSIFICATION
# =============================================================================

class TestAddressCheck:
    def test_missing_default_fails(self):
        assert check_rt1_address_rules({}, None).passed is False

    def test_unknown_state_key_fails(self, street_field):
        rules = AddressRuleSet("Atlantis", RuleSource.STATE, street_field)
        result = check_rt1_address_rules({"Atlantis": rules}, DEFAULT_ADDRESS_RULES)
        assert not result.passed
        assert any("Atlantis" in f.message for f in result.findings)

    def test_empty_fields_fail(self):
        rules = AddressRuleSet("Ohio", RuleSource.STATE, ())
        result = check_rt1_address_rules({"Ohio": rules}, DEFAULT_ADDRESS_RULES)
        assert not result.passed


class TestOfficerCheck:
    def test_min_greater_than_max_fails(self, corp_rules):
        bad = corp_rules("Ohio", OfficerRequirement("Director(s)", True, min_required=3, max_required=1))
        result = check_rt2_officer_rules(
            {("Ohio", EntityType.CORPORATION): bad}, DEFAULT_OFFICER_RULES,
        )
        assert not result.passed
        assert result.findings[0].details == {"min_required": 3, "max_required": 1}

    def test_negative_bound_fails(self, corp_rules):
        bad = corp_rules("Ohio", OfficerRequirement("Secretary", True, min_required=-1))
        result = check_rt2_officer_rules(
            {("Ohio", EntityType.CORPORATION): bad}, DEFAULT_OFFICER_RULES,
        )
        assert not result.passed

    def test_missing_corporation_default_fails(self):
        defaults = {EntityType.LLC: DEFAULT_OFFICER_RULES[EntityType.LLC]}
        result = check_rt2_officer_rules({}, defaults)
        assert not result.passed
        assert "Corporation" in result.findings[0].message

    def test_mislabelled_entry_fails(self, corp_rules):
        rules = corp_rules("Ohio", OfficerRequirement("Secretary", True))
        result = check_rt2_officer_rules(
            {("Ohio", EntityType.LLC): rules}, DEFAULT_OFFICER_RULES,
        )
        assert not result.passed


class TestFeeCheck:
    def test_negative_fee_fails(self):
        table = {"Texas": MappingProxyType({EntityType.LLC: Decimal(-1)})}
        assert not check_rt3_fees(table).passed

    def test_sub_cent_fee_fails(self):
        table = {"Texas": {EntityType.LLC: Decimal("10.001")}}
        assert not check_rt3_fees(table).passed

    def test_partial_coverage_only_warns(self):
        result = check_rt3_fees({"Texas": {EntityType.LLC: Decimal(0)}})
        assert result.passed
        assert result.warning_count == 1
        assert result.metrics["free_entries"] == 1


class TestExemptionAndScheduleChecks:
    def test_unknown_exemption_state_fails(self):
        result = check_rt4_exemptions({"Atlantis": ExemptionRecord("Atlantis", llc=True)})
        assert not result.passed

    def test_empty_record_warns(self):
        result = check_rt4_exemptions({"Ohio": ExemptionRecord("Ohio")})
        assert result.passed
        assert result.warning_count == 1

    def test_no_filing_schedule_without_exemption_warns(self):
        overrides = {
            ("Texas", EntityType.LLC): FilingSchedule(FilingFrequency.NONE, "No filing required"),
        }
        result = check_rt6_schedules({}, overrides, {})
        assert result.passed
        assert result.warning_count == 1
