"""
Shared constants across statecomply modules.

This module is the single source of truth for:
- Canonical US state names (table keys)
- The named default jurisdiction key
- Form field keys used by the filing profile
"""

# =============================================================================
# JURISDICTIONS
# =============================================================================
# Full state names are the only accepted table keys. Abbreviations are not
# translated.

US_STATES = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado",
    "Connecticut", "Delaware", "Florida", "Georgia", "Hawaii", "Idaho",
    "Illinois", "Indiana", "Iowa", "Kansas", "Kentucky", "Louisiana",
    "Maine", "Maryland", "Massachusetts", "Michigan", "Minnesota",
    "Mississippi", "Missouri", "Montana", "Nebraska", "Nevada",
    "New Hampshire", "New Jersey", "New Mexico", "New York",
    "North Carolina", "North Dakota", "Ohio", "Oklahoma", "Oregon",
    "Pennsylvania", "Rhode Island", "South Carolina", "South Dakota",
    "Tennessee", "Texas", "Utah", "Vermont", "Virginia", "Washington",
    "West Virginia", "Wisconsin", "Wyoming",
)

US_STATE_SET = frozenset(US_STATES)

# Label carried by fallback rule sets. Never used as a lookup key.
DEFAULT_JURISDICTION = "Default"


# =============================================================================
# FORM FIELD KEYS
# =============================================================================

FIELD_BUSINESS_NAME = "businessName"
FIELD_FILE_NUMBER = "fileNumber"
FIELD_PRINCIPAL_ADDRESS = "principalAddress"
FIELD_MAILING_ADDRESS = "mailingAddress"
FIELD_REGISTERED_AGENT = "registeredAgent"
FIELD_MANAGERS = "managers"
FIELD_OFFICERS = "officers"
FIELD_BUSINESS_PURPOSE = "businessPurpose"
FIELD_SIGNER_NAME = "signerName"

# US ZIP or ZIP+4
ZIP_CODE_PATTERN = r"^[0-9]{5}(-[0-9]{4})?$"


def is_known_state(state: str) -> bool:
    """Return True if state is one of the 50 canonical full state names."""
    return state in US_STATE_SET


__all__ = [
    "US_STATES",
    "US_STATE_SET",
    "DEFAULT_JURISDICTION",
    "FIELD_BUSINESS_NAME",
    "FIELD_FILE_NUMBER",
    "FIELD_PRINCIPAL_ADDRESS",
    "FIELD_MAILING_ADDRESS",
    "FIELD_REGISTERED_AGENT",
    "FIELD_MANAGERS",
    "FIELD_OFFICERS",
    "FIELD_BUSINESS_PURPOSE",
    "FIELD_SIGNER_NAME",
    "ZIP_CODE_PATTERN",
    "is_known_state",
]
