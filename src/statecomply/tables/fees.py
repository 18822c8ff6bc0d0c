"""
Annual report filing fees in whole US dollars.

Only LLC and Corporation fees are tabulated. A missing (state, entity type)
pair means the fee is unknown or varies; zero is a tabulated "no fee".
"""

from decimal import Decimal
from types import MappingProxyType

from statecomply.core.core_types import EntityType

# state, LLC fee, Corporation fee
_FEE_ROWS = (
    ("Alabama", 50, 50),
    ("Alaska", 100, 100),
    ("Arizona", 0, 0),
    ("Arkansas", 150, 50),
    ("California", 20, 20),
    ("Colorado", 10, 10),
    ("Connecticut", 80, 80),
    ("Delaware", 300, 50),
    ("Florida", 150, 150),
    ("Georgia", 50, 50),
    ("Hawaii", 25, 25),
    ("Idaho", 30, 30),
    ("Illinois", 75, 75),
    ("Indiana", 50, 30),
    ("Iowa", 45, 40),
    ("Kansas", 55, 40),
    ("Kentucky", 15, 15),
    ("Louisiana", 35, 25),
    ("Maine", 85, 85),
    ("Maryland", 100, 100),
    ("Massachusetts", 500, 125),
    ("Michigan", 25, 25),
    ("Minnesota", 25, 25),
    ("Mississippi", 0, 25),
    ("Missouri", 45, 45),
    ("Montana", 10, 10),
    ("Nebraska", 25, 25),
    ("Nevada", 150, 150),
    ("New Hampshire", 100, 100),
    ("New Jersey", 50, 50),
    ("New Mexico", 50, 25),
    ("New York", 9, 9),
    ("North Carolina", 200, 30),
    ("North Dakota", 50, 25),
    ("Ohio", 50, 50),
    ("Oklahoma", 25, 25),
    ("Oregon", 100, 100),
    ("Pennsylvania", 70, 70),
    ("Rhode Island", 50, 50),
    ("South Carolina", 0, 25),
    ("South Dakota", 50, 25),
    ("Tennessee", 300, 20),
    ("Texas", 0, 0),
    ("Utah", 20, 20),
    ("Vermont", 35, 35),
    ("Virginia", 50, 50),
    ("Washington", 60, 60),
    ("West Virginia", 25, 25),
    ("Wisconsin", 25, 25),
    ("Wyoming", 60, 60),
)

FEE_TABLE = MappingProxyType({
    state: MappingProxyType({
        EntityType.LLC: Decimal(llc_fee),
        EntityType.CORPORATION: Decimal(corp_fee),
    })
    for state, llc_fee, corp_fee in _FEE_ROWS
})


__all__ = ["FEE_TABLE"]
