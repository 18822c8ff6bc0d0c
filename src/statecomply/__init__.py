"""
State compliance rules engine.

Given a US state and a business entity type, decides what an annual report
filing requires: address fields, officer or manager positions, the filing
fee, whether filing is required at all, and which notices to show.

Every lookup resolves to something renderable: unknown states use the default
address rules, missing officer guidance is None, untabulated fees are None
("Varies") and states without an exemption entry must file.
"""

from statecomply.constants import US_STATES, is_known_state
from statecomply.core.core_types import (
    AddressRuleSet,
    EntityType,
    ExemptionRecord,
    FeeStatus,
    FieldRequirement,
    FilingFrequency,
    FilingSchedule,
    JurisdictionKey,
    MailingAddressPolicy,
    OfficerRequirement,
    OfficerRuleSet,
    RuleSource,
    UnknownEntityTypeError,
)
from statecomply.policy import format_fee
from statecomply.rules import (
    FilingProfile,
    compose_filing_profile,
    exemption_message,
    is_exempt,
    resolve_address_rules,
    resolve_exemption,
    resolve_fee,
    resolve_filing_schedule,
    resolve_officer_rules,
)


def list_entity_types():
    """Return the supported entity types in display order."""
    return list(EntityType)


__version__ = "0.1.0"

__all__ = [
    # Operations
    "resolve_address_rules",
    "resolve_officer_rules",
    "resolve_fee",
    "is_exempt",
    "exemption_message",
    "compose_filing_profile",
    "resolve_exemption",
    "resolve_filing_schedule",
    "format_fee",
    "list_entity_types",
    "is_known_state",
    "US_STATES",
    # Types
    "AddressRuleSet",
    "EntityType",
    "ExemptionRecord",
    "FeeStatus",
    "FieldRequirement",
    "FilingFrequency",
    "FilingProfile",
    "FilingSchedule",
    "JurisdictionKey",
    "MailingAddressPolicy",
    "OfficerRequirement",
    "OfficerRuleSet",
    "RuleSource",
    "UnknownEntityTypeError",
]
