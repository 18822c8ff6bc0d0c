"""
Tabular views of the rule engine for admin and reporting surfaces.

Matrix Contract
1) One row per (state, entity_type), states in canonical order
2) Rows come from compose_filing_profile and the raw resolvers; nothing is
   recomputed here
3) fee is numeric with NaN for "varies" and for exempt pairs; fee_status and
   fee_display keep the two apart
4) Exports: rule_matrix.csv / rule_matrix.json plus matrix_metadata.json
   with a content hash so reruns can be diffed
"""

from __future__ import annotations

import json
import logging
from hashlib import sha256
from typing import Dict, Iterable, List, Optional

import pandas as pd

from statecomply.config import ReportConfig
from statecomply.constants import US_STATES
from statecomply.core.core_types import EntityType
from statecomply.policy import format_fee
from statecomply.rules import (
    compose_filing_profile,
    resolve_address_rules,
    resolve_exemption,
    resolve_fee,
    resolve_officer_rules,
)

logger = logging.getLogger(__name__)

MATRIX_COLUMNS = [
    "state",
    "entity_type",
    "is_exempt",
    "exemption_message",
    "fee",
    "fee_status",
    "fee_display",
    "people_label",
    "address_source",
    "mailing_required",
    "officer_source",
    "officer_requirement_count",
    "required_officer_titles",
    "frequency",
    "due_date",
    "late_fee",
    "required_field_count",
    "notice_count",
]


def build_rule_matrix(
    states: Optional[Iterable[str]] = None,
    entity_types: Optional[Iterable[EntityType]] = None,
) -> pd.DataFrame:
    """Compose every requested pair and flatten the profiles into a DataFrame."""
    states = list(states) if states is not None else list(US_STATES)
    kinds = [EntityType.parse(e) for e in entity_types] if entity_types is not None else list(EntityType)

    rows: List[Dict[str, object]] = []
    for state in states:
        for kind in kinds:
            profile = compose_filing_profile(state, kind)
            address = profile.address_rules
            officers = profile.officer_rules
            schedule = profile.schedule
            rows.append({
                "state": state,
                "entity_type": kind.value,
                "is_exempt": profile.is_exempt,
                "exemption_message": profile.exemption_message,
                "fee": None if profile.fee is None else float(profile.fee),
                "fee_status": profile.fee_status.value,
                "fee_display": profile.fee_display,
                "people_label": profile.people_label,
                "address_source": address.source.value if address else None,
                "mailing_required": address.mailing.required if address else None,
                "officer_source": officers.source.value if officers else None,
                "officer_requirement_count": len(officers.requirements) if officers else 0,
                "required_officer_titles": "; ".join(officers.required_titles) if officers else "",
                "frequency": schedule.frequency.value if schedule else None,
                "due_date": schedule.due_date if schedule else None,
                "late_fee": float(schedule.late_fee) if schedule and schedule.late_fee is not None else None,
                "required_field_count": len(profile.required_fields),
                "notice_count": len(profile.notices),
            })

    if not rows:
        return pd.DataFrame(columns=MATRIX_COLUMNS)
    df = pd.DataFrame(rows, columns=MATRIX_COLUMNS)
    df["fee"] = pd.to_numeric(df["fee"])
    df["late_fee"] = pd.to_numeric(df["late_fee"])
    return df


def build_fee_table(states: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """Raw fee lookups for every state and entity type, without exemption logic."""
    states = list(states) if states is not None else list(US_STATES)
    rows = []
    for state in states:
        for kind in EntityType:
            fee = resolve_fee(state, kind)
            rows.append({
                "state": state,
                "entity_type": kind.value,
                "fee": None if fee is None else float(fee),
                "fee_display": format_fee(fee),
                "tabulated": fee is not None,
            })
    df = pd.DataFrame(rows, columns=["state", "entity_type", "fee", "fee_display", "tabulated"])
    df["fee"] = pd.to_numeric(df["fee"])
    return df


def build_exemption_table(states: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """One row per state with a boolean column per entity type."""
    states = list(states) if states is not None else list(US_STATES)
    rows = []
    for state in states:
        record = resolve_exemption(state)
        row: Dict[str, object] = {"state": state}
        for kind in EntityType:
            row[kind.value] = bool(record and record.exempts(kind))
        row["notes"] = record.notes if record else None
        rows.append(row)
    columns = ["state"] + [k.value for k in EntityType] + ["notes"]
    return pd.DataFrame(rows, columns=columns)


def build_guidance_coverage(states: Optional[Iterable[str]] = None) -> pd.DataFrame:
    """Which states have their own address/officer rules versus defaults."""
    states = list(states) if states is not None else list(US_STATES)
    rows = []
    for state in states:
        row: Dict[str, object] = {
            "state": state,
            "address_source": resolve_address_rules(state).source.value,
        }
        for kind in EntityType:
            officers = resolve_officer_rules(state, kind)
            row[kind.value] = officers.source.value if officers else "none"
        rows.append(row)
    return pd.DataFrame(rows)


def summarize_matrix(matrix_df: pd.DataFrame) -> pd.DataFrame:
    """Per entity type: exempt count, varies count, and fee statistics."""
    if matrix_df.empty:
        return pd.DataFrame()
    grouped = matrix_df.groupby("entity_type", sort=False)
    summary = pd.DataFrame({
        "pairs": grouped.size(),
        "exempt": grouped["is_exempt"].sum(),
        "fee_varies": grouped["fee_status"].apply(lambda s: int((s == "varies").sum())),
        "fee_free": grouped["fee_status"].apply(lambda s: int((s == "free").sum())),
        "fee_min": grouped["fee"].min(),
        "fee_median": grouped["fee"].median(),
        "fee_max": grouped["fee"].max(),
    })
    return summary.reset_index()


def write_rule_matrix(config: ReportConfig) -> Dict[str, int]:
    """Build the matrix for config and write it in each configured format."""
    matrix_df = build_rule_matrix(config.states, config.entity_types)

    output_dir = config.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    if "csv" in config.formats:
        path = output_dir / "rule_matrix.csv"
        matrix_df.to_csv(path, index=False)
        written.append(path.name)
    if "json" in config.formats:
        path = output_dir / "rule_matrix.json"
        matrix_df.to_json(path, orient="records", indent=2)
        written.append(path.name)
    _write_metadata(output_dir, matrix_df, written)
    logger.info("Wrote %d matrix rows to %s", len(matrix_df), output_dir)

    return {
        "rows": int(len(matrix_df)),
        "exempt": int(matrix_df["is_exempt"].sum()) if not matrix_df.empty else 0,
        "files": len(written),
    }


def _write_metadata(output_dir, matrix_df: pd.DataFrame, files: List[str]) -> None:
    payload = {
        "content_hash": _hash_dataframe(matrix_df),
        "rows": int(len(matrix_df)),
        "states": int(matrix_df["state"].nunique()) if not matrix_df.empty else 0,
        "files": sorted(files),
    }
    with open(output_dir / "matrix_metadata.json", "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, sort_keys=True)


def _hash_dataframe(df: pd.DataFrame) -> str:
    if df is None or df.empty:
        return ""
    norm = df.copy()
    for col in norm.columns:
        norm[col] = norm[col].apply(_normalize_cell)
    norm = norm.sort_values(list(norm.columns)).reset_index(drop=True)
    payload = norm.to_csv(index=False)
    return sha256(payload.encode("utf-8")).hexdigest()


def _normalize_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value)


__all__ = [
    "MATRIX_COLUMNS",
    "build_rule_matrix",
    "build_fee_table",
    "build_exemption_table",
    "build_guidance_coverage",
    "summarize_matrix",
    "write_rule_matrix",
]
