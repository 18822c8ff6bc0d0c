"""
States that do not require an annual filing for some entity types.

Exemption is opt-in per state and entity type. A state absent from this table
files for every entity type.
"""

from types import MappingProxyType

from statecomply.core.core_types import ExemptionRecord


def _all(state: str, notes: str) -> ExemptionRecord:
    return ExemptionRecord(
        state=state,
        llc=True,
        corporation=True,
        professional_corporation=True,
        non_profit_corporation=True,
        notes=notes,
    )


def _llc_only(state: str, notes: str) -> ExemptionRecord:
    return ExemptionRecord(state=state, llc=True, notes=notes)


_RECORDS = (
    _all("Alaska", "Biennial only (every 2 years)"),
    _llc_only("Arizona", "Only corporations file annually"),
    _llc_only("Delaware", "LLCs pay flat tax, no report"),
    _all("Indiana", "Biennial for both"),
    _all("Iowa", "Biennial for both"),
    _llc_only("Michigan", "LLCs exempt from annual filing"),
    _llc_only("Mississippi", "LLCs exempt; Corps file annually"),
    # Corporations here file an optional report, so they are not exempt.
    _llc_only("Missouri", "LLCs exempt; Corps optional report"),
    _all("Nebraska", "Biennial filing required"),
    _llc_only("New Mexico", "LLCs exempt; Corps file"),
    _llc_only("New York", "LLCs file biennial, Corps file annually"),
    _all("Ohio", "No annual report required"),
    _llc_only("Pennsylvania", "Corps: Annual; LLCs: Change form only"),
    _llc_only("South Carolina", "LLCs exempt; Corps file with DOR"),
)

EXEMPTIONS = MappingProxyType({record.state: record for record in _RECORDS})


__all__ = ["EXEMPTIONS"]
