"""
Reporting views over the rule engine.

Submodules:
    matrix: State x entity type DataFrames and file exports
"""

from statecomply.reporting.matrix import (
    MATRIX_COLUMNS,
    build_rule_matrix,
    build_fee_table,
    build_exemption_table,
    build_guidance_coverage,
    summarize_matrix,
    write_rule_matrix,
)

__all__ = [
    "MATRIX_COLUMNS",
    "build_rule_matrix",
    "build_fee_table",
    "build_exemption_table",
    "build_guidance_coverage",
    "summarize_matrix",
    "write_rule_matrix",
]
