"""
Immutable rule tables.

Submodules:
    address: Principal/mailing address rules by state, plus the default
    officers: Officer/manager requirements by (state, entity type), plus defaults
    fees: Annual report fees for LLCs and Corporations
    exemptions: States exempt from annual filing per entity type
    schedules: Filing cadence, due-date text and late fees
"""

from statecomply.tables.address import ADDRESS_RULES, DEFAULT_ADDRESS_RULES
from statecomply.tables.officers import OFFICER_RULES, DEFAULT_OFFICER_RULES
from statecomply.tables.fees import FEE_TABLE
from statecomply.tables.exemptions import EXEMPTIONS
from statecomply.tables.schedules import SCHEDULES, SCHEDULE_OVERRIDES

__all__ = [
    "ADDRESS_RULES",
    "DEFAULT_ADDRESS_RULES",
    "OFFICER_RULES",
    "DEFAULT_OFFICER_RULES",
    "FEE_TABLE",
    "EXEMPTIONS",
    "SCHEDULES",
    "SCHEDULE_OVERRIDES",
]
