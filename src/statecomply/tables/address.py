"""
Principal and mailing address rules by state.

States not listed here resolve to DEFAULT_ADDRESS_RULES. Every entry uses the
same four principal address inputs; states differ in help text, notes,
mailing policy and extra fields.
"""

from types import MappingProxyType
from typing import Optional, Tuple

from statecomply.constants import DEFAULT_JURISDICTION, ZIP_CODE_PATTERN
from statecomply.core.core_types import (
    AddressRuleSet,
    FieldRequirement,
    MailingAddressPolicy,
    RuleSource,
)


def _principal_fields(
    street_help: str,
    state_help: Optional[str] = None,
) -> Tuple[FieldRequirement, ...]:
    return (
        FieldRequirement("street", "Street Address", True, help_text=street_help),
        FieldRequirement("city", "City", True),
        FieldRequirement("state", "State", True, help_text=state_help),
        FieldRequirement("zipCode", "ZIP Code", True, pattern=ZIP_CODE_PATTERN),
    )


def _state(state: str, **kwargs) -> AddressRuleSet:
    return AddressRuleSet(state=state, source=RuleSource.STATE, **kwargs)


# =============================================================================
# STATE ENTRIES
# =============================================================================

_ENTRIES = (
    _state(
        "California",
        fields=_principal_fields(
            "Must be a physical street address in California (no P.O. Boxes)",
            state_help="Must be CA for principal office",
        ),
        principal_notes=(
            "Principal office must be located in California",
            "Street address required - no P.O. Boxes accepted",
        ),
        mailing=MailingAddressPolicy(
            required=False,
            allow_po_box=True,
            notes=(
                "Mailing address is optional",
                "Can be different from principal office",
                "P.O. Boxes are acceptable for mailing address",
            ),
        ),
    ),
    _state(
        "Delaware",
        fields=_principal_fields("Business address (can be outside Delaware)"),
        principal_notes=(
            "Principal office can be located anywhere in the United States",
            "Must be a street address for principal office",
        ),
        additional_fields=(
            FieldRequirement(
                "delawareAddress",
                "Delaware Business Address",
                False,
                help_text="If different from registered agent address",
            ),
        ),
    ),
    _state(
        "Nevada",
        fields=_principal_fields("Principal place of business (can be outside Nevada)"),
        principal_notes=(
            "Principal place of business can be located anywhere",
            "Must provide complete address information",
        ),
    ),
    _state(
        "Texas",
        fields=_principal_fields("Principal office address"),
        principal_notes=(
            "No annual report required for Texas LLCs",
            "Corporations must file annual reports",
        ),
    ),
    _state(
        "Florida",
        fields=_principal_fields(
            "Principal place of business in Florida",
            state_help="Must be FL for Florida entities",
        ),
        principal_notes=(
            "Principal place of business must be in Florida",
            "Street address required - no P.O. Boxes",
        ),
        mailing=MailingAddressPolicy(
            required=True,
            allow_po_box=True,
            notes=(
                "Mailing address is required in Florida",
                "Can be same as principal address",
                "P.O. Boxes acceptable for mailing address",
            ),
        ),
    ),
    _state(
        "Colorado",
        fields=_principal_fields("Principal office or place of business"),
        principal_notes=(
            "Principal office can be located anywhere",
            "Complete address information required",
        ),
    ),
    _state(
        "Alaska",
        fields=_principal_fields("Principal place of business"),
        principal_notes=(
            "Biennial report required every two years",
            "Principal office can be located anywhere in the United States",
        ),
    ),
)

ADDRESS_RULES = MappingProxyType({entry.state: entry for entry in _ENTRIES})


# =============================================================================
# DEFAULT
# =============================================================================

DEFAULT_ADDRESS_RULES = AddressRuleSet(
    state=DEFAULT_JURISDICTION,
    source=RuleSource.DEFAULT,
    fields=_principal_fields("Principal business address"),
    principal_notes=(
        "Complete address information required",
        "Verify state-specific requirements with local authorities",
    ),
)


__all__ = ["ADDRESS_RULES", "DEFAULT_ADDRESS_RULES"]
