"""
Report configuration for statecomply.

This module defines the ReportConfig dataclass that captures the parameters
for exporting the rule matrix: which states and entity types to cover, where
to write, which formats, and the log level used by the CLI.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Tuple

from dotenv import find_dotenv, load_dotenv

from statecomply.constants import US_STATES
from statecomply.core.core_types import EntityType

SUPPORTED_FORMATS = ("csv", "json")

ENV_OUTPUT_DIR = "STATECOMPLY_OUTPUT_DIR"
ENV_FORMATS = "STATECOMPLY_FORMATS"
ENV_LOG_LEVEL = "STATECOMPLY_LOG_LEVEL"


@dataclass
class ReportConfig:
    """
    Configuration for rule matrix exports.

    Attributes:
        output_dir: Directory for exported files.
        states: States to include. Defaults to all 50.
        entity_types: Entity types to include. Defaults to all four.
        formats: Output formats, any of "csv" and "json".
        log_level: Logging level name for the CLI.
    """

    output_dir: Path = field(default_factory=lambda: Path("output"))
    states: Tuple[str, ...] = US_STATES
    entity_types: Tuple[EntityType, ...] = tuple(EntityType)
    formats: Tuple[str, ...] = ("csv",)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Normalize paths, entity types and formats."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)

        self.states = tuple(self.states)
        self.entity_types = tuple(EntityType.parse(e) for e in self.entity_types)

        formats = tuple(f.strip().lower() for f in self.formats if f and f.strip())
        unknown = [f for f in formats if f not in SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(
                f"Unsupported format(s) {unknown}; expected {list(SUPPORTED_FORMATS)}"
            )
        self.formats = formats or ("csv",)

        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides) -> "ReportConfig":
        """
        Create configuration from environment variables.

        Loads a .env file first (without overriding variables already set),
        then reads STATECOMPLY_OUTPUT_DIR, STATECOMPLY_FORMATS (comma
        separated) and STATECOMPLY_LOG_LEVEL. Keyword overrides that are not
        None win over the environment.

        Args:
            dotenv_path: Explicit .env path. If None, python-dotenv searches
                upward from the working directory.

        Returns:
            ReportConfig built from the environment.
        """
        if dotenv_path is None:
            dotenv_path = find_dotenv(usecwd=True)
        load_dotenv(dotenv_path=dotenv_path, override=False)

        values = {}
        if os.getenv(ENV_OUTPUT_DIR):
            values["output_dir"] = Path(os.environ[ENV_OUTPUT_DIR])
        if os.getenv(ENV_FORMATS):
            values["formats"] = _split(os.environ[ENV_FORMATS])
        if os.getenv(ENV_LOG_LEVEL):
            values["log_level"] = os.environ[ENV_LOG_LEVEL]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _split(raw: str) -> Sequence[str]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


__all__ = ["ReportConfig", "SUPPORTED_FORMATS"]
