"""
Rule table evaluation.

Submodules:
    validate_tables: Integrity checks over the shipped reference tables
"""

from statecomply.evaluation.validate_tables import (
    TableValidationError,
    Finding,
    CheckResult,
    ValidationReport,
    validate_tables,
    assert_tables_valid,
)

__all__ = [
    "TableValidationError",
    "Finding",
    "CheckResult",
    "ValidationReport",
    "validate_tables",
    "assert_tables_valid",
]
