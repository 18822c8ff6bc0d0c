#!/usr/bin/env python3
"""
Command-line access to the state compliance rules engine.

Usage:
    python -m statecomply.cli profile --state California --entity-type Corporation [--json]
    python -m statecomply.cli matrix [--output DIR] [--format csv json]
    python -m statecomply.cli check
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from statecomply.config import SUPPORTED_FORMATS, ReportConfig
from statecomply.core.core_types import EntityType, UnknownEntityTypeError
from statecomply.evaluation import validate_tables
from statecomply.reporting import write_rule_matrix
from statecomply.rules import FilingProfile, compose_filing_profile

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_profile(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    config: ReportConfig,
) -> int:
    try:
        entity_type = EntityType.parse(args.entity_type)
    except UnknownEntityTypeError as exc:
        parser.error(str(exc))

    profile = compose_filing_profile(args.state, entity_type)
    if args.json:
        print(json.dumps(profile.to_dict(), indent=2))
    else:
        print(render_profile(profile))
    return 0


def cmd_matrix(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    config: ReportConfig,
) -> int:
    results = write_rule_matrix(config)
    print(
        f"Rule matrix complete: {results['rows']} rows, "
        f"{results['exempt']} exempt, {results['files']} file(s) in {config.output_dir}"
    )
    return 0


def cmd_check(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
    config: ReportConfig,
) -> int:
    report = validate_tables()
    for check in report.checks:
        status = "PASS" if check.passed else "FAIL"
        print(f"[{status}] {check.check_id} {check.check_name}")
        for finding in check.findings:
            if finding.severity == "info" and not args.verbose:
                continue
            print(f"    {finding.severity}: {finding.message}")
    summary = report.summary
    print(
        f"\n{summary['overall_status']}: {summary['checks_passed']} passed, "
        f"{summary['checks_failed']} failed, {summary['total_warnings']} warning(s)"
    )
    return 0 if report.passed else 1


# =============================================================================
# RENDERING
# =============================================================================

def render_profile(profile: FilingProfile) -> str:
    """Plain-text rendering of a profile for terminal use."""
    lines = [f"{profile.state} {profile.entity_type.value} Annual Report"]
    if profile.is_exempt:
        lines.append("No Annual Filing Required")
        lines.append(profile.exemption_message)
        return "\n".join(lines)

    lines.append(f"Filing fee: {profile.fee_display}")
    if profile.schedule is not None:
        lines.append(
            f"Schedule: {profile.schedule.frequency.value}, due {profile.schedule.due_date}"
        )
    lines.append("Required fields: " + ", ".join(profile.required_fields))
    lines.append("Optional fields: " + ", ".join(profile.optional_fields))

    lines.append("Principal address:")
    for requirement in profile.address_rules.fields:
        marker = "*" if requirement.required else " "
        help_text = f" ({requirement.help_text})" if requirement.help_text else ""
        lines.append(f"  {marker} {requirement.label}{help_text}")

    lines.append(f"{profile.people_label} Information:")
    if profile.officer_rules is None:
        lines.append("  (no state-specific guidance)")
    else:
        for requirement in profile.officer_rules.requirements:
            marker = "*" if requirement.required else " "
            bounds = _bounds(requirement.min_required, requirement.max_required)
            lines.append(f"  {marker} {requirement.title}{bounds}")

    if profile.notices:
        lines.append("Notices:")
        lines.extend(f"  - {notice}" for notice in profile.notices)
    return "\n".join(lines)


def _bounds(lo: Optional[int], hi: Optional[int]) -> str:
    if lo is None and hi is None:
        return ""
    if lo is not None and lo == hi:
        return f" [exactly {lo}]"
    if hi is None:
        return f" [at least {lo}]"
    if lo is None:
        return f" [at most {hi}]"
    return f" [{lo}-{hi}]"


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statecomply",
        description="State annual report compliance rules",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: STATECOMPLY_LOG_LEVEL, then WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    profile = sub.add_parser("profile", help="Show the filing profile for a state and entity type")
    profile.add_argument("--state", required=True, help="Full state name, e.g. 'New York'")
    profile.add_argument(
        "--entity-type",
        required=True,
        help="LLC, Corporation, Professional Corporation or Non-Profit Corporation",
    )
    profile.add_argument("--json", action="store_true", help="Emit JSON")
    profile.set_defaults(handler=cmd_profile)

    matrix = sub.add_parser("matrix", help="Export the state x entity type rule matrix")
    matrix.add_argument("--output", default=None, help="Output directory")
    matrix.add_argument(
        "--format",
        nargs="+",
        choices=SUPPORTED_FORMATS,
        default=None,
        help="Output format(s)",
    )
    matrix.set_defaults(handler=cmd_matrix)

    check = sub.add_parser("check", help="Validate the rule tables")
    check.add_argument("--verbose", action="store_true", help="Include info findings")
    check.set_defaults(handler=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # .env is loaded here, before logging is configured
    try:
        config = ReportConfig.from_env(
            output_dir=getattr(args, "output", None),
            formats=getattr(args, "format", None),
            log_level=args.log_level,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=config.numeric_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args, parser, config)


if __name__ == "__main__":
    sys.exit(main())
