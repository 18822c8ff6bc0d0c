"""
Core Rule Types: The Compliance Vocabulary.

These are the primitives every rule table and resolver is expressed in.

Layer: Reference data
- EntityType: Closed set of business structures
- RuleSource: Where a resolved rule set came from (state entry or default)
- FieldRequirement / MailingAddressPolicy / AddressRuleSet: Address rules
- OfficerRequirement / OfficerRuleSet: People rules
- ExemptionRecord: Per-state filing exemptions
- FilingSchedule: Static cadence and due-date text

All rule types are frozen. Sequences are tuples so a resolved rule set can be
handed to any number of callers without copying.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class UnknownEntityTypeError(ValueError):
    """Raised when text does not name one of the four supported entity types."""
    pass


class EntityType(Enum):
    """Business structures the engine has rules for. Values are table labels."""
    LLC = "LLC"
    CORPORATION = "Corporation"
    PROFESSIONAL_CORPORATION = "Professional Corporation"
    NON_PROFIT_CORPORATION = "Non-Profit Corporation"

    @property
    def label(self) -> str:
        return self.value

    @property
    def tag(self) -> str:
        """Compact tag, e.g. "ProfessionalCorporation"."""
        return self.value.replace(" ", "").replace("-", "")

    @classmethod
    def parse(cls, value) -> "EntityType":
        """
        Parse an entity type from its label, enum name, or compact tag.

        Matching is case-insensitive: "LLC", "llc", "Non-Profit Corporation",
        "NON_PROFIT_CORPORATION" and "NonProfitCorporation" are all accepted.

        Raises:
            UnknownEntityTypeError: If value names no supported entity type.
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip()
        key = text.lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower(), member.tag.lower()):
                return member
        raise UnknownEntityTypeError(
            f"Unknown entity type {text!r}; expected one of "
            + ", ".join(m.value for m in cls)
        )


class RuleSource(Enum):
    """Provenance of a resolved rule set."""
    STATE = "state"         # Exact entry for the requested state
    DEFAULT = "default"     # Named fallback for unconfigured states


class FilingFrequency(Enum):
    """How often an annual-report style filing is due."""
    ANNUAL = "annual"
    BIENNIAL = "biennial"
    NONE = "none"


class FeeStatus(Enum):
    """How a profile's fee should be presented."""
    FIXED = "fixed"                     # Tabulated non-zero amount
    FREE = "free"                       # Tabulated zero
    VARIES = "varies"                   # Not tabulated for this pair
    NOT_APPLICABLE = "not_applicable"   # Exempt, no filing


# =============================================================================
# JURISDICTION KEY
# =============================================================================

@dataclass(frozen=True)
class JurisdictionKey:
    """A (state, entity type) pair. State is a canonical full state name."""
    state: str
    entity_type: EntityType

    @classmethod
    def of(cls, state: str, entity_type) -> "JurisdictionKey":
        return cls(state=state, entity_type=EntityType.parse(entity_type))


# =============================================================================
# ADDRESS RULES
# =============================================================================

@dataclass(frozen=True)
class FieldRequirement:
    """One input on the principal address block."""
    field: str
    label: str
    required: bool
    help_text: Optional[str] = None
    pattern: Optional[str] = None
    max_length: Optional[int] = None


@dataclass(frozen=True)
class MailingAddressPolicy:
    """Whether a mailing address is needed and whether it may be a P.O. Box."""
    required: bool = False
    allow_po_box: bool = True
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AddressRuleSet:
    """
    Address requirements for one state.

    Attributes:
        state: Table key the rules were defined under ("Default" for the fallback).
        source: STATE for an exact match, DEFAULT for the fallback.
        fields: Ordered principal address inputs. Never empty.
        principal_notes: Guidance shown beside the principal address.
        mailing: Mailing address policy.
        additional_fields: State-specific extra address inputs.
    """
    state: str
    source: RuleSource
    fields: Tuple[FieldRequirement, ...]
    principal_notes: Tuple[str, ...] = ()
    mailing: MailingAddressPolicy = field(default_factory=MailingAddressPolicy)
    additional_fields: Tuple[FieldRequirement, ...] = ()

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(f.field for f in self.fields if f.required)

    @property
    def is_default(self) -> bool:
        return self.source is RuleSource.DEFAULT


# =============================================================================
# OFFICER RULES
# =============================================================================

@dataclass(frozen=True)
class OfficerRequirement:
    """One officer, manager, member or director position."""
    title: str
    required: bool
    description: Optional[str] = None
    min_required: Optional[int] = None
    max_required: Optional[int] = None

    @property
    def is_exact(self) -> bool:
        """True when the position must be filled by exactly min_required people."""
        return (
            self.min_required is not None
            and self.min_required == self.max_required
        )


@dataclass(frozen=True)
class OfficerRuleSet:
    """People requirements for one (state, entity type)."""
    state: str
    entity_type: EntityType
    source: RuleSource
    requirements: Tuple[OfficerRequirement, ...]
    notes: Tuple[str, ...] = ()

    @property
    def required_titles(self) -> Tuple[str, ...]:
        return tuple(r.title for r in self.requirements if r.required)

    @property
    def is_default(self) -> bool:
        return self.source is RuleSource.DEFAULT


# =============================================================================
# EXEMPTIONS AND SCHEDULES
# =============================================================================

@dataclass(frozen=True)
class ExemptionRecord:
    """
    Filing exemptions for one state.

    Each flag is independent. A state missing from the exemption table is
    not exempt for any entity type.
    """
    state: str
    llc: bool = False
    corporation: bool = False
    professional_corporation: bool = False
    non_profit_corporation: bool = False
    notes: Optional[str] = None

    def exempts(self, entity_type: EntityType) -> bool:
        return {
            EntityType.LLC: self.llc,
            EntityType.CORPORATION: self.corporation,
            EntityType.PROFESSIONAL_CORPORATION: self.professional_corporation,
            EntityType.NON_PROFIT_CORPORATION: self.non_profit_corporation,
        }[entity_type]


@dataclass(frozen=True)
class FilingSchedule:
    """Static filing cadence. due_date is display text, not a computed date."""
    frequency: FilingFrequency
    due_date: str
    late_fee: Optional[Decimal] = None


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
