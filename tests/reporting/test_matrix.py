from __future__ import annotations

import json
from pathlib import Path

import pandas as pd

from statecomply.config import ReportConfig
from statecomply.core.core_types import EntityType
from statecomply.reporting import (
    MATRIX_COLUMNS,
    build_exemption_table,
    build_fee_table,
    build_guidance_coverage,
    build_rule_matrix,
    summarize_matrix,
    write_rule_matrix,
)


def _row(df: pd.DataFrame, state: str, entity_type: str) -> pd.Series:
    return df[(df["state"] == state) & (df["entity_type"] == entity_type)].iloc[0]


def test_matrix_covers_every_pair():
    df = build_rule_matrix()
    assert list(df.columns) == MATRIX_COLUMNS
    assert len(df) == 50 * 4
    assert not df.duplicated(["state", "entity_type"]).any()


def test_matrix_keeps_zero_and_varies_apart():
    df = build_rule_matrix(["Arizona", "California"])
    free = _row(df, "Arizona", "Corporation")
    varies = _row(df, "California", "Professional Corporation")
    assert free["fee"] == 0
    assert free["fee_status"] == "free"
    assert pd.isna(varies["fee"])
    assert varies["fee_display"] == "Varies"


def test_matrix_exempt_rows():
    df = build_rule_matrix(["Arizona"], ["LLC"])
    row = df.iloc[0]
    assert bool(row["is_exempt"]) is True
    assert row["fee_status"] == "not_applicable"
    assert row["required_field_count"] == 0


def test_empty_selection_returns_columns_only():
    df = build_rule_matrix([], None)
    assert df.empty
    assert list(df.columns) == MATRIX_COLUMNS
    assert summarize_matrix(df).empty


def test_fee_table_ignores_exemptions():
    df = build_fee_table(["Arizona"])
    llc = df[df["entity_type"] == "LLC"].iloc[0]
    assert llc["tabulated"]
    assert llc["fee_display"] == "$0"


def test_exemption_table():
    df = build_exemption_table(["Arizona", "Ohio", "Texas"]).set_index("state")
    assert df.loc["Arizona", "LLC"] and not df.loc["Arizona", "Corporation"]
    assert df.loc["Ohio", [k.value for k in EntityType]].all()
    assert not df.loc["Texas", [k.value for k in EntityType]].any()
    assert df.loc["Texas", "notes"] is None


def test_guidance_coverage():
    df = build_guidance_coverage(["California", "Vermont"]).set_index("state")
    assert df.loc["California", "address_source"] == "state"
    assert df.loc["Vermont", "address_source"] == "default"
    assert df.loc["Vermont", "Corporation"] == "default"
    assert df.loc["Vermont", "Professional Corporation"] == "none"


def test_summary_counts_by_entity_type():
    summary = summarize_matrix(build_rule_matrix()).set_index("entity_type")
    assert summary.loc["LLC", "pairs"] == 50
    assert summary.loc["LLC", "exempt"] > summary.loc["Corporation", "exempt"]
    assert summary.loc["Professional Corporation", "fee_varies"] > 0


def test_write_rule_matrix(tmp_path: Path):
    config = ReportConfig(
        output_dir=tmp_path / "out",
        states=("Arizona", "California"),
        formats=("csv", "json"),
    )
    results = write_rule_matrix(config)
    assert results == {"rows": 8, "exempt": 1, "files": 2}

    csv_df = pd.read_csv(tmp_path / "out" / "rule_matrix.csv")
    assert len(csv_df) == 8
    records = json.loads((tmp_path / "out" / "rule_matrix.json").read_text())
    assert len(records) == 8

    meta = json.loads((tmp_path / "out" / "matrix_metadata.json").read_text())
    assert meta["rows"] == 8
    assert meta["states"] == 2
    assert meta["files"] == ["rule_matrix.csv", "rule_matrix.json"]
    assert len(meta["content_hash"]) == 64


def test_metadata_hash_is_stable(tmp_path: Path):
    first = ReportConfig(output_dir=tmp_path / "a", states=("Ohio", "Texas"))
    second = ReportConfig(output_dir=tmp_path / "b", states=("Ohio", "Texas"))
    write_rule_matrix(first)
    write_rule_matrix(second)
    meta_a = json.loads((tmp_path / "a" / "matrix_metadata.json").read_text())
    meta_b = json.loads((tmp_path / "b" / "matrix_metadata.json").read_text())
    assert meta_a["content_hash"] == meta_b["content_hash"]
