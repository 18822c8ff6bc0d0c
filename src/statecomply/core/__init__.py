"""
Core rule types for statecomply.

Everything the rule tables and resolvers are expressed in lives in
core_types; this package re-exports it.
"""

from statecomply.core.core_types import (
    UnknownEntityTypeError,
    EntityType,
    RuleSource,
    FilingFrequency,
    FeeStatus,
    JurisdictionKey,
    FieldRequirement,
    MailingAddressPolicy,
    AddressRuleSet,
    OfficerRequirement,
    OfficerRuleSet,
    ExemptionRecord,
    FilingSchedule,
)

__all__ = [
    "UnknownEntityTypeError",
    "EntityType",
    "RuleSource",
    "FilingFrequency",
    "FeeStatus",
    "JurisdictionKey",
    "FieldRequirement",
    "MailingAddressPolicy",
    "AddressRuleSet",
    "OfficerRequirement",
    "OfficerRuleSet",
    "ExemptionRecord",
    "FilingSchedule",
]
