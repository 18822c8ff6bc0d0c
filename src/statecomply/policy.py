"""Presentation policy defaults: labels, standard field lists, fee display."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Tuple

from statecomply.constants import (
    FIELD_BUSINESS_NAME,
    FIELD_BUSINESS_PURPOSE,
    FIELD_FILE_NUMBER,
    FIELD_MANAGERS,
    FIELD_OFFICERS,
    FIELD_PRINCIPAL_ADDRESS,
    FIELD_REGISTERED_AGENT,
    FIELD_SIGNER_NAME,
)
from statecomply.core.core_types import EntityType


FEE_VARIES_TEXT = "Varies"
CURRENCY_SYMBOL = "$"

LLC_PEOPLE_LABEL = "Manager/Member"
CORPORATE_PEOPLE_LABEL = "Officer"

# LLCs list managers/members; every corporate form lists officers.
PEOPLE_FIELD_BY_ENTITY: Dict[EntityType, str] = {
    EntityType.LLC: FIELD_MANAGERS,
    EntityType.CORPORATION: FIELD_OFFICERS,
    EntityType.PROFESSIONAL_CORPORATION: FIELD_OFFICERS,
    EntityType.NON_PROFIT_CORPORATION: FIELD_OFFICERS,
}


def people_label(entity_type: EntityType) -> str:
    """Heading for the people section of the form."""
    if entity_type is EntityType.LLC:
        return LLC_PEOPLE_LABEL
    return CORPORATE_PEOPLE_LABEL


def people_field(entity_type: EntityType) -> str:
    return PEOPLE_FIELD_BY_ENTITY[entity_type]


def standard_required_fields(entity_type: EntityType) -> Tuple[str, ...]:
    """Fields every non-exempt annual report collects, in form order."""
    return (
        FIELD_BUSINESS_NAME,
        FIELD_FILE_NUMBER,
        FIELD_PRINCIPAL_ADDRESS,
        FIELD_REGISTERED_AGENT,
        people_field(entity_type),
        FIELD_SIGNER_NAME,
    )


def standard_optional_fields(entity_type: EntityType) -> Tuple[str, ...]:
    return (FIELD_BUSINESS_PURPOSE,)


def format_fee(fee: Optional[Decimal]) -> str:
    """
    Render a fee for display.

    None means the fee is not tabulated and renders as "Varies". Zero is a
    real answer and renders as "$0", never as "Varies".
    """
    if fee is None:
        return FEE_VARIES_TEXT
    amount = Decimal(fee)
    if amount == amount.to_integral_value():
        return f"{CURRENCY_SYMBOL}{int(amount)}"
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


__all__ = [
    "FEE_VARIES_TEXT",
    "CURRENCY_SYMBOL",
    "LLC_PEOPLE_LABEL",
    "CORPORATE_PEOPLE_LABEL",
    "PEOPLE_FIELD_BY_ENTITY",
    "people_label",
    "people_field",
    "standard_required_fields",
    "standard_optional_fields",
    "format_fee",
]
