"""
Rule Table Validator - Reference data integrity checks.

Checks:
- RT1: Address rules (default present, non-empty field lists, known state keys)
- RT2: Officer rules (min <= max, non-negative bounds, LLC/Corporation defaults)
- RT3: Fees (non-negative, at most two decimals, state coverage)
- RT4: Exemption records (known states, key/state agreement, notes present)
- RT5: Exemption message consistency (message non-empty iff exempt)
- RT6: Schedules (known states, "no filing" cadence agrees with exemptions)
- RT7: Profile composition (every state x entity type composes, exempt
  profiles carry no form sections)

Each check accepts the tables it inspects so tests can feed broken data.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Sequence

from statecomply.constants import DEFAULT_JURISDICTION, US_STATES, is_known_state
from statecomply.core.core_types import (
    AddressRuleSet,
    EntityType,
    ExemptionRecord,
    FilingFrequency,
    FilingSchedule,
    OfficerRuleSet,
)
from statecomply.rules import compose_filing_profile, exemption_message, is_exempt
from statecomply.tables import (
    ADDRESS_RULES,
    DEFAULT_ADDRESS_RULES,
    DEFAULT_OFFICER_RULES,
    EXEMPTIONS,
    FEE_TABLE,
    OFFICER_RULES,
    SCHEDULE_OVERRIDES,
    SCHEDULES,
)

logger = logging.getLogger(__name__)

# Entity types that must always have a default officer entry
REQUIRED_OFFICER_DEFAULTS = (EntityType.LLC, EntityType.CORPORATION)


class TableValidationError(Exception):
    """Raised when rule tables fail one or more error-level checks."""
    pass


@dataclass
class Finding:
    check_id: str
    severity: str  # error, warning, info
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CheckResult:
    check_id: str
    check_name: str
    passed: bool
    findings: List[Finding] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "warning")


@dataclass
class ValidationReport:
    timestamp: str
    checks: List[CheckResult] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def add_check(self, result: CheckResult):
        self.checks.append(result)

    def compute_summary(self):
        passed = sum(1 for c in self.checks if c.passed)
        failed = len(self.checks) - passed
        errors = sum(c.error_count for c in self.checks)
        warnings = sum(c.warning_count for c in self.checks)

        self.summary = {
            "checks_passed": passed,
            "checks_failed": failed,
            "total_errors": errors,
            "total_warnings": warnings,
            "overall_status": "PASS" if failed == 0 else "FAIL",
        }

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)


def _result(check_id: str, name: str, findings: List[Finding], metrics: Dict[str, Any]) -> CheckResult:
    passed = not any(f.severity == "error" for f in findings)
    return CheckResult(check_id, name, passed, findings, metrics)


# =============================================================================
# CHECKS
# =============================================================================

def check_rt1_address_rules(
    address_rules: Mapping[str, AddressRuleSet] = ADDRESS_RULES,
    default_rules: Optional[AddressRuleSet] = DEFAULT_ADDRESS_RULES,
) -> CheckResult:
    """RT1: Default exists and every address rule set is renderable."""
    findings = []

    if default_rules is None:
        findings.append(Finding("RT1", "error", "Default address rules missing"))
    elif not default_rules.fields:
        findings.append(Finding("RT1", "error", "Default address rules have no fields"))

    for state, rules in address_rules.items():
        if not is_known_state(state):
            findings.append(Finding("RT1", "error", f"Unknown state key: {state}"))
        if rules.state != state:
            findings.append(Finding(
                "RT1", "error", f"Address entry {state} labelled {rules.state}",
            ))
        if not rules.fields:
            findings.append(Finding("RT1", "error", f"{state} has no address fields"))
        names = [f.field for f in rules.fields]
        if len(names) != len(set(names)):
            findings.append(Finding(
                "RT1", "warning", f"{state} repeats address fields", {"fields": names},
            ))

    return _result("RT1", "Address Rules", findings, {
        "states_configured": len(address_rules),
        "states_on_default": len(US_STATES) - sum(1 for s in address_rules if is_known_state(s)),
    })


def check_rt2_officer_rules(
    officer_rules: Mapping = OFFICER_RULES,
    default_rules: Mapping[EntityType, OfficerRuleSet] = DEFAULT_OFFICER_RULES,
) -> CheckResult:
    """RT2: Officer bounds are ordered and required defaults exist."""
    findings = []

    for entity_type in REQUIRED_OFFICER_DEFAULTS:
        if entity_type not in default_rules:
            findings.append(Finding(
                "RT2", "error", f"No default officer rules for {entity_type.value}",
            ))

    all_sets = list(officer_rules.items()) + [
        ((DEFAULT_JURISDICTION, kind), rules) for kind, rules in default_rules.items()
    ]
    requirement_count = 0
    for (state, entity_type), rules in all_sets:
        if state != DEFAULT_JURISDICTION and not is_known_state(state):
            findings.append(Finding("RT2", "error", f"Unknown state key: {state}"))
        if rules.entity_type is not entity_type:
            findings.append(Finding(
                "RT2", "error",
                f"{state}/{entity_type.value} entry holds {rules.entity_type.value} rules",
            ))
        for req in rules.requirements:
            requirement_count += 1
            lo, hi = req.min_required, req.max_required
            if (lo is not None and lo < 0) or (hi is not None and hi < 0):
                findings.append(Finding(
                    "RT2", "error", f"{state}/{entity_type.value} {req.title}: negative bound",
                ))
            if lo is not None and hi is not None and lo > hi:
                findings.append(Finding(
                    "RT2", "error",
                    f"{state}/{entity_type.value} {req.title}: min {lo} > max {hi}",
                    {"min_required": lo, "max_required": hi},
                ))

    return _result("RT2", "Officer Rules", findings, {
        "rule_sets": len(all_sets),
        "requirements": requirement_count,
    })


def check_rt3_fees(fee_table: Mapping = FEE_TABLE) -> CheckResult:
    """RT3: Fees are non-negative with at most two decimal places."""
    findings = []
    free = 0

    for state, fees in fee_table.items():
        if not is_known_state(state):
            findings.append(Finding("RT3", "error", f"Unknown state key: {state}"))
        for entity_type, fee in fees.items():
            amount = Decimal(fee)
            if amount < 0:
                findings.append(Finding(
                    "RT3", "error", f"{state}/{entity_type.value}: negative fee {amount}",
                ))
            if amount.as_tuple().exponent < -2:
                findings.append(Finding(
                    "RT3", "error", f"{state}/{entity_type.value}: sub-cent fee {amount}",
                ))
            if amount == 0:
                free += 1

    missing = [s for s in US_STATES if s not in fee_table]
    if missing:
        findings.append(Finding(
            "RT3", "warning", f"{len(missing)} states have no fee entry", {"states": missing},
        ))

    return _result("RT3", "Filing Fees", findings, {
        "states_with_fees": len(fee_table),
        "free_entries": free,
    })


def check_rt4_exemptions(exemptions: Mapping[str, ExemptionRecord] = EXEMPTIONS) -> CheckResult:
    """RT4: Exemption records are keyed by known states and explained."""
    findings = []

    for state, record in exemptions.items():
        if not is_known_state(state):
            findings.append(Finding("RT4", "error", f"Unknown state key: {state}"))
        if record.state != state:
            findings.append(Finding(
                "RT4", "error", f"Exemption entry {state} labelled {record.state}",
            ))
        flags = [record.exempts(kind) for kind in EntityType]
        if not any(flags):
            findings.append(Finding(
                "RT4", "warning", f"{state} exemption record exempts nothing",
            ))
        elif not record.notes:
            findings.append(Finding("RT4", "info", f"{state} exemption has no notes"))

    return _result("RT4", "Exemption Records", findings, {
        "exempt_states": len(exemptions),
        "exempt_pairs": sum(
            1 for r in exemptions.values() for kind in EntityType if r.exempts(kind)
        ),
    })


def check_rt5_exemption_messages(states: Sequence[str] = US_STATES) -> CheckResult:
    """RT5: exemption_message is non-empty exactly when is_exempt is True."""
    findings = []

    for state in states:
        for kind in EntityType:
            exempt = is_exempt(state, kind)
            message = exemption_message(state, kind)
            if exempt and not message:
                findings.append(Finding(
                    "RT5", "error", f"{state}/{kind.value}: exempt without message",
                ))
            elif message and not exempt:
                findings.append(Finding(
                    "RT5", "error", f"{state}/{kind.value}: message without exemption",
                    {"message": message},
                ))

    return _result("RT5", "Exemption Messages", findings, {
        "pairs_checked": len(states) * len(EntityType),
    })


def check_rt6_schedules(
    schedules: Mapping[str, FilingSchedule] = SCHEDULES,
    overrides: Mapping = SCHEDULE_OVERRIDES,
    exemptions: Mapping[str, ExemptionRecord] = EXEMPTIONS,
) -> CheckResult:
    """RT6: Schedules use known states and "no filing" agrees with exemptions."""
    findings = []

    for state in schedules:
        if not is_known_state(state):
            findings.append(Finding("RT6", "error", f"Unknown state key: {state}"))

    for (state, kind), schedule in overrides.items():
        if not is_known_state(state):
            findings.append(Finding("RT6", "error", f"Unknown state key: {state}"))
        if schedule.frequency is FilingFrequency.NONE:
            record = exemptions.get(state)
            if record is None or not record.exempts(kind):
                findings.append(Finding(
                    "RT6", "warning",
                    f"{state}/{kind.value}: schedule says no filing but pair is not exempt",
                ))

    biennial = sorted(s for s, sch in schedules.items() if sch.frequency is FilingFrequency.BIENNIAL)
    return _result("RT6", "Filing Schedules", findings, {
        "states_with_schedule": len(schedules),
        "overrides": len(overrides),
        "biennial_states": biennial,
    })


def check_rt7_composition(states: Sequence[str] = US_STATES) -> CheckResult:
    """RT7: Every pair composes and exempt profiles suppress the form."""
    findings = []
    exempt_count = 0

    for state in states:
        for kind in EntityType:
            profile = compose_filing_profile(state, kind)
            if profile.is_exempt:
                exempt_count += 1
                if profile.address_rules or profile.officer_rules or profile.required_fields:
                    findings.append(Finding(
                        "RT7", "error", f"{state}/{kind.value}: exempt profile has form sections",
                    ))
            elif profile.address_rules is None or not profile.address_rules.fields:
                findings.append(Finding(
                    "RT7", "error", f"{state}/{kind.value}: profile has no address rules",
                ))

    return _result("RT7", "Profile Composition", findings, {
        "profiles": len(states) * len(EntityType),
        "exempt_profiles": exempt_count,
    })


# =============================================================================
# ENTRY POINTS
# =============================================================================

def validate_tables() -> ValidationReport:
    """Run every table check against the shipped tables."""
    report = ValidationReport(timestamp=datetime.now(timezone.utc).isoformat())
    for check in (
        check_rt1_address_rules,
        check_rt2_officer_rules,
        check_rt3_fees,
        check_rt4_exemptions,
        check_rt5_exemption_messages,
        check_rt6_schedules,
        check_rt7_composition,
    ):
        result = check()
        report.add_check(result)
        for finding in result.findings:
            if finding.severity == "error":
                logger.warning("%s: %s", finding.check_id, finding.message)
    report.compute_summary()
    return report


def assert_tables_valid() -> ValidationReport:
    """
    Validate tables and raise on any error-level finding.

    Raises:
        TableValidationError: If any check fails.
    """
    report = validate_tables()
    if not report.passed:
        errors = [
            f"{f.check_id}: {f.message}"
            for c in report.checks
            for f in c.findings
            if f.severity == "error"
        ]
        raise TableValidationError(
            "Rule tables failed validation:\n  " + "\n  ".join(errors)
        )
    return report


__all__ = [
    "TableValidationError",
    "Finding",
    "CheckResult",
    "ValidationReport",
    "check_rt1_address_rules",
    "check_rt2_officer_rules",
    "check_rt3_fees",
    "check_rt4_exemptions",
    "check_rt5_exemption_messages",
    "check_rt6_schedules",
    "check_rt7_composition",
    "validate_tables",
    "assert_tables_valid",
]
