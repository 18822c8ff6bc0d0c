"""
Rule resolution over the immutable tables.

Resolver Contract
1) Input: state name (any string) and, where keyed, an entity type
2) Address: exact state entry, else DEFAULT_ADDRESS_RULES; never absent
3) Officers: exact (state, entity type), else the default for that entity
   type, else None ("no state-specific guidance", not an error)
4) Fee: tabulated amount (zero included), else None ("varies")
5) Schedule: entity override, else the state's common schedule, else None
6) No resolver raises for an unknown state; entity types outside the closed
   set are rejected by EntityType.parse at the call boundary
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Union

from statecomply.core.core_types import (
    AddressRuleSet,
    EntityType,
    FilingSchedule,
    OfficerRuleSet,
)
from statecomply.tables import (
    ADDRESS_RULES,
    DEFAULT_ADDRESS_RULES,
    DEFAULT_OFFICER_RULES,
    FEE_TABLE,
    OFFICER_RULES,
    SCHEDULE_OVERRIDES,
    SCHEDULES,
)

logger = logging.getLogger(__name__)

EntityTypeLike = Union[EntityType, str]


def resolve_address_rules(state: str) -> AddressRuleSet:
    """Return the address rules for state, falling back to the default set."""
    rules = ADDRESS_RULES.get(state)
    if rules is None:
        logger.debug("No address rules for %r; using default", state)
        return DEFAULT_ADDRESS_RULES
    return rules


def resolve_officer_rules(
    state: str,
    entity_type: EntityTypeLike,
) -> Optional[OfficerRuleSet]:
    """
    Return officer/manager guidance for (state, entity_type).

    None means no guidance exists for the pair. An empty requirement list is
    never used to signal that.
    """
    kind = EntityType.parse(entity_type)
    rules = OFFICER_RULES.get((state, kind))
    if rules is not None:
        return rules
    rules = DEFAULT_OFFICER_RULES.get(kind)
    if rules is None:
        logger.debug("No officer guidance for %r / %s", state, kind.value)
    else:
        logger.debug("No officer rules for %r / %s; using default", state, kind.value)
    return rules


def resolve_fee(state: str, entity_type: EntityTypeLike) -> Optional[Decimal]:
    """Return the filing fee, 0 when the state charges nothing, None when unknown."""
    kind = EntityType.parse(entity_type)
    fees = FEE_TABLE.get(state)
    if fees is None:
        logger.debug("No fee schedule for %r", state)
        return None
    return fees.get(kind)


def resolve_filing_schedule(
    state: str,
    entity_type: EntityTypeLike,
) -> Optional[FilingSchedule]:
    """Return the filing cadence and due-date text for (state, entity_type)."""
    kind = EntityType.parse(entity_type)
    schedule = SCHEDULE_OVERRIDES.get((state, kind))
    if schedule is not None:
        return schedule
    return SCHEDULES.get(state)


__all__ = [
    "EntityTypeLike",
    "resolve_address_rules",
    "resolve_officer_rules",
    "resolve_fee",
    "resolve_filing_schedule",
]
