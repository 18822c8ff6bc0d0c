"""
Officer, manager and member requirements by (state, entity type).

A state lists only the entity types it has guidance for. DEFAULT_OFFICER_RULES
covers LLC and Corporation for unlisted pairs; Professional and Non-Profit
Corporations have no default, so unlisted pairs resolve to no guidance.
"""

from types import MappingProxyType
from typing import Dict, Tuple

from statecomply.constants import DEFAULT_JURISDICTION
from statecomply.core.core_types import (
    EntityType,
    OfficerRequirement as Req,
    OfficerRuleSet,
    RuleSource,
)

LLC = EntityType.LLC
CORP = EntityType.CORPORATION
PC = EntityType.PROFESSIONAL_CORPORATION
NPC = EntityType.NON_PROFIT_CORPORATION

_PRESIDENT = Req("President", True, "Chief executive officer", 1, 1)
_SECRETARY = Req("Secretary", True, "Corporate secretary", 1, 1)


# (state, entity_type) -> (requirements, notes)
_RULES: Dict[Tuple[str, EntityType], Tuple[Tuple[Req, ...], Tuple[str, ...]]] = {
    # -------------------------------------------------------------- California
    ("California", LLC): (
        (
            Req("Manager(s)", True, "At least one manager required for manager-managed LLC", 1),
            Req("Managing Member(s)", False, "Required for member-managed LLC (alternative to managers)"),
        ),
        (
            "Must specify if LLC is manager-managed or member-managed",
            "Manager-managed: List all managers with full names and addresses",
            "Member-managed: List managing members instead of managers",
        ),
    ),
    ("California", CORP): (
        (
            Req("Chief Executive Officer (CEO)", True, "Required for all California corporations", 1, 1),
            Req("Secretary", True, "Corporate secretary required", 1, 1),
            Req("Chief Financial Officer (CFO)", False, "Required if corporation has designated CFO"),
        ),
        (
            "CEO and Secretary are mandatory officer positions",
            "Same person can hold multiple officer positions except CEO and Secretary",
            "Must provide full names and business addresses",
        ),
    ),
    ("California", PC): (
        (
            Req("President", True, "Licensed professional required as president", 1, 1),
            Req("Secretary", True, "Corporate secretary required", 1, 1),
            Req("Licensed Shareholders", True, "All shareholders must be licensed professionals"),
        ),
        (
            "All officers and shareholders must hold required professional licenses",
            "License verification may be required",
            "Professional corporation must practice only the licensed profession",
        ),
    ),
    ("California", NPC): (
        (
            Req("President", True, "Board president required", 1, 1),
            Req("Secretary", True, "Corporate secretary required", 1, 1),
            Req("Treasurer", True, "Financial officer required", 1, 1),
            Req("Board of Directors", True, "Minimum 3 directors required", 3),
        ),
        (
            "Minimum 3 board members required",
            "No compensation restrictions for officers",
            "Must maintain charitable/educational purpose",
        ),
    ),
    # ---------------------------------------------------------------- Delaware
    ("Delaware", LLC): (
        (
            Req("Manager(s)", False, "Only required for manager-managed LLCs"),
            Req("Member(s)", True, "At least one member required", 1),
        ),
        (
            "Delaware LLCs can be member-managed or manager-managed",
            "Single-member LLCs are permitted",
            "Members can be individuals or entities",
        ),
    ),
    ("Delaware", CORP): (
        (
            _PRESIDENT,
            _SECRETARY,
            Req("Treasurer", False, "Financial officer (optional)"),
        ),
        (
            "President and Secretary are required positions",
            "One person may hold multiple offices",
            "Delaware allows single-director corporations",
        ),
    ),
    ("Delaware", PC): (
        (
            Req("President", True, "Must be licensed professional", 1, 1),
            _SECRETARY,
        ),
        (
            "Only licensed professionals can be shareholders",
            "Corporation limited to practice of licensed profession",
            "Regular compliance with professional licensing boards required",
        ),
    ),
    ("Delaware", NPC): (
        (
            Req("President", True, "Board president", 1, 1),
            _SECRETARY,
            Req("Board of Directors", True, "Minimum 3 directors", 3),
        ),
        (
            "Must maintain charitable, educational, or religious purpose",
            "No private benefit to individuals",
            "Annual reporting to Delaware Department of State required",
        ),
    ),
    # ------------------------------------------------------------------ Nevada
    ("Nevada", LLC): (
        (
            Req("Manager(s)", False, "Required only for manager-managed LLCs"),
            Req("Managing Member(s)", False, "Required only for member-managed LLCs"),
        ),
        (
            "Nevada LLCs must specify management structure",
            "List of managers required for manager-managed LLCs",
            "List of managing members required for member-managed LLCs",
        ),
    ),
    ("Nevada", CORP): (
        (
            _PRESIDENT,
            _SECRETARY,
            Req("Treasurer", True, "Chief financial officer", 1, 1),
        ),
        (
            "President, Secretary, and Treasurer all required",
            "Same person can hold multiple offices",
            "Must provide current officer information",
        ),
    ),
    # ------------------------------------------------------------------- Texas
    ("Texas", LLC): (
        (
            Req("Manager(s)", False, "Only required for manager-managed LLCs"),
        ),
        (
            "Texas LLCs are not required to file annual reports",
            "This information may be needed for other state filings",
            "Management structure should be clearly defined",
        ),
    ),
    ("Texas", CORP): (
        (_PRESIDENT, _SECRETARY),
        (
            "Minimum of President and Secretary required",
            "Annual franchise tax report required",
            "Officer information must be current and accurate",
        ),
    ),
    # ----------------------------------------------------------------- Florida
    ("Florida", LLC): (
        (
            Req("Manager(s)", True, "At least one manager or managing member required", 1),
        ),
        (
            "Florida requires annual reports for LLCs",
            "Must list current managers or managing members",
            "Addresses must be current and accurate",
        ),
    ),
    ("Florida", CORP): (
        (
            _PRESIDENT,
            _SECRETARY,
            Req("Director(s)", True, "Board of directors", 1),
        ),
        (
            "President, Secretary, and at least one Director required",
            "Directors elect officers",
            "Annual report must list current officers and directors",
        ),
    ),
    # ---------------------------------------------------------------- Colorado
    ("Colorado", LLC): (
        (
            Req("Manager(s) or Managing Member(s)", True, "Must list management structure", 1),
        ),
        (
            "Periodic report required every other year",
            "Must specify manager-managed or member-managed",
            "Complete names and addresses required",
        ),
    ),
    ("Colorado", CORP): (
        (_PRESIDENT, _SECRETARY),
        (
            "Periodic report required every other year",
            "Must list current principal officers",
            "Officer changes should be reported promptly",
        ),
    ),
    # ------------------------------------------------------------------ Alaska
    ("Alaska", LLC): (
        (
            Req("Manager(s)", False, "Required only if manager-managed"),
            Req("Member(s)", True, "At least one member required", 1),
        ),
        (
            "Biennial report filed every two years",
            "Management structure must be clearly identified",
            "Current information required as of report date",
        ),
    ),
    ("Alaska", CORP): (
        (_PRESIDENT, _SECRETARY),
        (
            "Biennial report required every two years",
            "Officers must be listed with current information",
            "Changes in officers should be reported between filings",
        ),
    ),
}

OFFICER_RULES = MappingProxyType({
    key: OfficerRuleSet(
        state=key[0],
        entity_type=key[1],
        source=RuleSource.STATE,
        requirements=requirements,
        notes=notes,
    )
    for key, (requirements, notes) in _RULES.items()
})


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_OFFICER_RULES = MappingProxyType({
    LLC: OfficerRuleSet(
        state=DEFAULT_JURISDICTION,
        entity_type=LLC,
        source=RuleSource.DEFAULT,
        requirements=(
            Req("Manager(s) or Managing Member(s)", True, "Management information required", 1),
        ),
        notes=(
            "Check state-specific requirements",
            "Management structure varies by state",
            "Consult with legal counsel if uncertain",
        ),
    ),
    CORP: OfficerRuleSet(
        state=DEFAULT_JURISDICTION,
        entity_type=CORP,
        source=RuleSource.DEFAULT,
        requirements=(_PRESIDENT, _SECRETARY),
        notes=(
            "Standard corporate officer requirements",
            "Verify state-specific requirements",
            "Current officer information required",
        ),
    ),
})


__all__ = ["OFFICER_RULES", "DEFAULT_OFFICER_RULES"]
