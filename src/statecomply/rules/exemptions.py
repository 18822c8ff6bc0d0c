"""Annual filing exemption evaluation."""

from __future__ import annotations

from typing import Optional

from statecomply.core.core_types import EntityType, ExemptionRecord
from statecomply.rules.resolvers import EntityTypeLike
from statecomply.tables import EXEMPTIONS


def resolve_exemption(state: str) -> Optional[ExemptionRecord]:
    return EXEMPTIONS.get(state)


def is_exempt(state: str, entity_type: EntityTypeLike) -> bool:
    """True only when the state explicitly exempts this entity type."""
    kind = EntityType.parse(entity_type)
    record = EXEMPTIONS.get(state)
    if record is None:
        return False
    return record.exempts(kind)


def exemption_message(state: str, entity_type: EntityTypeLike) -> str:
    """
    Explain an exemption, or return "" when the pair must file.

    Example:
        >>> exemption_message("Arizona", "LLC")
        'Arizona LLCs are exempt from annual filing requirements. Only corporations file annually'
        >>> exemption_message("Arizona", "Corporation")
        ''
    """
    kind = EntityType.parse(entity_type)
    if not is_exempt(state, kind):
        return ""
    record = EXEMPTIONS[state]
    message = f"{state} {kind.label}s are exempt from annual filing requirements."
    if record.notes:
        message += f" {record.notes}"
    return message


__all__ = ["resolve_exemption", "is_exempt", "exemption_message"]
