"""
Filing cadence, due-date text and late fee by state.

Each state has one common schedule; a few states override it for specific
entity types. Due dates are display text only.
"""

from decimal import Decimal
from types import MappingProxyType

from statecomply.core.core_types import EntityType, FilingFrequency, FilingSchedule

ANNUAL = FilingFrequency.ANNUAL
BIENNIAL = FilingFrequency.BIENNIAL
NONE = FilingFrequency.NONE

_ANNIVERSARY = "Anniversary month"
_LAST_DAY = "Last day of anniversary month"

# state, frequency, due date, late fee
_SCHEDULE_ROWS = (
    ("Alabama", ANNUAL, _LAST_DAY, 25),
    ("Alaska", BIENNIAL, "January 2nd of even years", 25),
    ("Arizona", ANNUAL, _ANNIVERSARY, 15),
    ("Arkansas", ANNUAL, "May 1st", 300),
    ("California", ANNUAL, "Within 90 days after filing", 250),
    ("Colorado", ANNUAL, _ANNIVERSARY, 50),
    ("Connecticut", ANNUAL, _LAST_DAY, 25),
    ("Delaware", ANNUAL, "March 1st", 200),
    ("Florida", ANNUAL, "May 1st", 400),
    ("Georgia", ANNUAL, "April 1st", 50),
    ("Hawaii", ANNUAL, _ANNIVERSARY, 10),
    ("Idaho", ANNUAL, _ANNIVERSARY, 30),
    ("Illinois", ANNUAL, _ANNIVERSARY, 300),
    ("Indiana", BIENNIAL, _LAST_DAY, 30),
    ("Iowa", BIENNIAL, _LAST_DAY, 45),
    ("Kansas", ANNUAL, _ANNIVERSARY, 165),
    ("Kentucky", ANNUAL, "June 30th", 10),
    ("Louisiana", ANNUAL, _ANNIVERSARY, 25),
    ("Maine", ANNUAL, "June 1st", 100),
    ("Maryland", ANNUAL, "April 15th", 100),
    ("Massachusetts", ANNUAL, _ANNIVERSARY, 100),
    ("Michigan", ANNUAL, "May 15th", 10),
    ("Minnesota", ANNUAL, "December 31st", 25),
    ("Mississippi", ANNUAL, "April 15th", 25),
    ("Missouri", ANNUAL, _ANNIVERSARY, 45),
    ("Montana", ANNUAL, _ANNIVERSARY, 10),
    ("Nebraska", BIENNIAL, "March 1st of odd years", 10),
    ("Nevada", ANNUAL, _LAST_DAY, 100),
    ("New Hampshire", ANNUAL, "April 1st", 25),
    ("New Jersey", ANNUAL, _ANNIVERSARY, 25),
    ("New Mexico", ANNUAL, "15th day of 3rd month", 25),
    ("New York", BIENNIAL, "Anniversary month of even years", 20),
    ("North Carolina", ANNUAL, _ANNIVERSARY, 50),
    ("North Dakota", ANNUAL, "November 15th", 25),
    ("Ohio", ANNUAL, _ANNIVERSARY, 25),
    ("Oklahoma", ANNUAL, _ANNIVERSARY, 10),
    ("Oregon", ANNUAL, _ANNIVERSARY, 100),
    ("Pennsylvania", ANNUAL, _ANNIVERSARY, 5),
    ("Rhode Island", ANNUAL, _ANNIVERSARY, 100),
    ("South Carolina", ANNUAL, _ANNIVERSARY, 10),
    ("South Dakota", ANNUAL, _ANNIVERSARY, 15),
    ("Tennessee", ANNUAL, _ANNIVERSARY, 50),
    ("Texas", ANNUAL, _ANNIVERSARY, 25),
    ("Utah", ANNUAL, _ANNIVERSARY, 10),
    ("Vermont", ANNUAL, _ANNIVERSARY, 25),
    ("Virginia", ANNUAL, "Last day of registration month", 100),
    ("Washington", ANNUAL, _ANNIVERSARY, 20),
    ("West Virginia", ANNUAL, "June 30th", 25),
    ("Wisconsin", ANNUAL, "Anniversary quarter", 25),
    ("Wyoming", ANNUAL, _ANNIVERSARY, 50),
)

# state, entity type, frequency, due date, late fee
_OVERRIDE_ROWS = (
    ("Arizona", EntityType.LLC, NONE, "No filing required", 0),
    ("Delaware", EntityType.LLC, ANNUAL, "June 1st", 200),
    ("Michigan", EntityType.LLC, ANNUAL, "February 15th", 10),
    ("Michigan", EntityType.NON_PROFIT_CORPORATION, ANNUAL, "October 1st", 10),
    ("South Carolina", EntityType.LLC, BIENNIAL, "Anniversary month of even years", 10),
)

SCHEDULES = MappingProxyType({
    state: FilingSchedule(frequency, due_date, Decimal(late_fee))
    for state, frequency, due_date, late_fee in _SCHEDULE_ROWS
})

SCHEDULE_OVERRIDES = MappingProxyType({
    (state, entity_type): FilingSchedule(frequency, due_date, Decimal(late_fee))
    for state, entity_type, frequency, due_date, late_fee in _OVERRIDE_ROWS
})


__all__ = ["SCHEDULES", "SCHEDULE_OVERRIDES"]
