"""
Rule resolution for statecomply.

Provides table resolvers, exemption evaluation and filing profile composition.
"""

from .resolvers import (
    resolve_address_rules,
    resolve_officer_rules,
    resolve_fee,
    resolve_filing_schedule,
)
from .exemptions import resolve_exemption, is_exempt, exemption_message
from .composer import FilingProfile, compose_filing_profile, fee_status

__all__ = [
    "resolve_address_rules",
    "resolve_officer_rules",
    "resolve_fee",
    "resolve_filing_schedule",
    "resolve_exemption",
    "is_exempt",
    "exemption_message",
    "FilingProfile",
    "compose_filing_profile",
    "fee_status",
]
