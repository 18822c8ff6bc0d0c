"""
Filing profile composition.

A FilingProfile is everything the annual report form needs for one
(state, entity type): whether to show a form at all, which fields are
required or optional, the fee and the notices to display. Profiles are built
on demand and never written back to the tables.

Algorithm:
1. Exemption first. An exempt pair gets a profile with the exemption message
   and no address, officer, fee, field or notice content.
2. Otherwise resolve address rules (never absent), officer guidance (may be
   None), fee (may be None, rendered "Varies") and filing schedule.
3. Merge into entity-aware field lists. The people section is "Manager/Member"
   for LLCs and "Officer" for corporations regardless of state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from statecomply.constants import FIELD_MAILING_ADDRESS
from statecomply.core.core_types import (
    AddressRuleSet,
    EntityType,
    FeeStatus,
    FilingFrequency,
    FilingSchedule,
    OfficerRuleSet,
)
from statecomply.policy import (
    format_fee,
    people_field,
    people_label,
    standard_optional_fields,
    standard_required_fields,
)
from statecomply.rules.exemptions import exemption_message, is_exempt
from statecomply.rules.resolvers import (
    EntityTypeLike,
    resolve_address_rules,
    resolve_fee,
    resolve_filing_schedule,
    resolve_officer_rules,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilingProfile:
    """Resolved requirements for one form session."""

    state: str
    entity_type: EntityType
    is_exempt: bool
    exemption_message: str
    people_label: str
    people_field: str
    address_rules: Optional[AddressRuleSet] = None
    officer_rules: Optional[OfficerRuleSet] = None
    fee: Optional[Decimal] = None
    fee_status: FeeStatus = FeeStatus.NOT_APPLICABLE
    fee_display: str = ""
    schedule: Optional[FilingSchedule] = None
    required_fields: Tuple[str, ...] = ()
    optional_fields: Tuple[str, ...] = ()
    notices: Tuple[str, ...] = ()
    description: str = ""

    @property
    def has_officer_guidance(self) -> bool:
        return self.officer_rules is not None

    def to_dict(self) -> Dict[str, object]:
        """Convert to a JSON-safe dict for the presentation layer."""
        return {
            "state": self.state,
            "entity_type": self.entity_type.value,
            "is_exempt": self.is_exempt,
            "exemption_message": self.exemption_message,
            "people_label": self.people_label,
            "people_field": self.people_field,
            "address_rules": _address_to_dict(self.address_rules),
            "officer_rules": _officers_to_dict(self.officer_rules),
            "fee": None if self.fee is None else str(self.fee),
            "fee_status": self.fee_status.value,
            "fee_display": self.fee_display,
            "schedule": _schedule_to_dict(self.schedule),
            "required_fields": list(self.required_fields),
            "optional_fields": list(self.optional_fields),
            "notices": list(self.notices),
            "description": self.description,
        }


def compose_filing_profile(state: str, entity_type: EntityTypeLike) -> FilingProfile:
    """Compose the filing profile for (state, entity_type). Never raises for a valid key."""
    kind = EntityType.parse(entity_type)

    if is_exempt(state, kind):
        logger.debug("%s / %s is exempt; suppressing form sections", state, kind.value)
        message = exemption_message(state, kind)
        return FilingProfile(
            state=state,
            entity_type=kind,
            is_exempt=True,
            exemption_message=message,
            people_label=people_label(kind),
            people_field=people_field(kind),
            description=message,
        )

    address = resolve_address_rules(state)
    officers = resolve_officer_rules(state, kind)
    fee = resolve_fee(state, kind)
    schedule = resolve_filing_schedule(state, kind)

    required: List[str] = list(standard_required_fields(kind))
    optional: List[str] = list(standard_optional_fields(kind))
    if address.mailing.required:
        required.append(FIELD_MAILING_ADDRESS)
    else:
        optional.append(FIELD_MAILING_ADDRESS)
    for extra in address.additional_fields:
        (required if extra.required else optional).append(extra.field)

    return FilingProfile(
        state=state,
        entity_type=kind,
        is_exempt=False,
        exemption_message="",
        people_label=people_label(kind),
        people_field=people_field(kind),
        address_rules=address,
        officer_rules=officers,
        fee=fee,
        fee_status=fee_status(fee),
        fee_display=format_fee(fee),
        schedule=schedule,
        required_fields=_unique(required),
        optional_fields=_unique(optional),
        notices=_collect_notices(address, officers, schedule),
        description=_describe(state, kind),
    )


def fee_status(fee: Optional[Decimal]) -> FeeStatus:
    if fee is None:
        return FeeStatus.VARIES
    if fee == 0:
        return FeeStatus.FREE
    return FeeStatus.FIXED


def _collect_notices(
    address: AddressRuleSet,
    officers: Optional[OfficerRuleSet],
    schedule: Optional[FilingSchedule],
) -> Tuple[str, ...]:
    notices: List[str] = list(address.principal_notes)
    notices.extend(address.mailing.notes)
    if not address.mailing.allow_po_box:
        notices.append("P.O. Boxes are not accepted for the mailing address")
    if officers is not None:
        notices.extend(officers.notes)
    if schedule is not None and schedule.frequency is FilingFrequency.BIENNIAL:
        notices.append(f"Biennial filing: due {schedule.due_date}")
    return _unique(notices)


def _describe(state: str, entity_type: EntityType) -> str:
    if entity_type is EntityType.LLC:
        return f"{state} LLC Annual Report requires detailed business information."
    return f"{state} {entity_type.label} Annual Report requires officer and business information."


def _unique(items: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    ordered = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        ordered.append(item)
    return tuple(ordered)


def _address_to_dict(rules: Optional[AddressRuleSet]) -> Optional[Dict[str, object]]:
    if rules is None:
        return None
    return {
        "state": rules.state,
        "source": rules.source.value,
        "fields": [_field_to_dict(f) for f in rules.fields],
        "principal_notes": list(rules.principal_notes),
        "mailing": {
            "required": rules.mailing.required,
            "allow_po_box": rules.mailing.allow_po_box,
            "notes": list(rules.mailing.notes),
        },
        "additional_fields": [_field_to_dict(f) for f in rules.additional_fields],
    }


def _field_to_dict(requirement) -> Dict[str, object]:
    return {
        "field": requirement.field,
        "label": requirement.label,
        "required": requirement.required,
        "help_text": requirement.help_text,
        "pattern": requirement.pattern,
        "max_length": requirement.max_length,
    }


def _officers_to_dict(rules: Optional[OfficerRuleSet]) -> Optional[Dict[str, object]]:
    if rules is None:
        return None
    return {
        "state": rules.state,
        "entity_type": rules.entity_type.value,
        "source": rules.source.value,
        "requirements": [
            {
                "title": r.title,
                "required": r.required,
                "description": r.description,
                "min_required": r.min_required,
                "max_required": r.max_required,
            }
            for r in rules.requirements
        ],
        "notes": list(rules.notes),
    }


def _schedule_to_dict(schedule: Optional[FilingSchedule]) -> Optional[Dict[str, object]]:
    if schedule is None:
        return None
    return {
        "frequency": schedule.frequency.value,
        "due_date": schedule.due_date,
        "late_fee": None if schedule.late_fee is None else str(schedule.late_fee),
    }


__all__ = ["FilingProfile", "compose_filing_profile", "fee_status"]
