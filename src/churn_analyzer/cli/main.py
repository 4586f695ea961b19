"""CLI entry point for the churn analyzer."""
import argparse
from dotenv import load_dotenv
import json
import os
import sys
import traceback
from pathlib import Path

from pydantic import ValidationError

from churn_analyzer.analysis import (
    DEFAULT_OUTPUT_DIR,
    AnalysisError,
    ConfigurationError,
    InputLoadError,
    analyze_change,
    format_report_human,
    format_report_json,
    write_report,
)
from churn_analyzer.classification import DEFAULT_MAX_DELTA_DAYS
from churn_analyzer.models import ChangeInput, InvalidDatePolicy
from churn_analyzer.utils import configure_logging

load_dotenv()

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_ANALYSIS_ERROR = 2
EXIT_UNEXPECTED = 5
EXIT_KEYBOARD_INTERRUPT = 130

# Environment variables
ENV_MAX_DELTA_DAYS = "MAX_DELTA_DAYS"
ENV_INVALID_DATE_POLICY = "INVALID_DATE_POLICY"
ENV_OUTPUT_DIR = "OUTPUT_DIR"
ENV_OUTPUT_JSON = "OUTPUT_JSON"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="churn-analyzer",
        description=(
            "Attribute the lines added by a change to New Work, Churn, "
            "Rework or Help Others"
        ),
    )
    parser.add_argument(
        "input_path",
        type=str,
        help="JSON file describing the change (patches, blame ranges, commits)",
    )
    parser.add_argument(
        "--max-delta-days",
        type=float,
        default=None,
        help=(
            f"Churn/Rework threshold in days "
            f"(default: ${ENV_MAX_DELTA_DAYS} or {DEFAULT_MAX_DELTA_DAYS})"
        ),
    )
    parser.add_argument(
        "--invalid-date-policy",
        type=str,
        default=None,
        choices=[policy.value for policy in InvalidDatePolicy],
        help=(
            "Treatment of unparseable blame timestamps "
            f"(default: ${ENV_INVALID_DATE_POLICY} or {InvalidDatePolicy.AS_MISSING.value})"
        ),
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help=f"Directory for the report file (default: ${ENV_OUTPUT_DIR} or {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--output-name",
        type=str,
        default=None,
        help=f"Report file name (default: ${ENV_OUTPUT_JSON} or pr_<number>_churn_summary.json)",
    )
    parser.add_argument(
        "--output-json", action="store_true", help="Print the full report as JSON"
    )
    parser.add_argument(
        "--no-save", action="store_true", help="Do not write the report file"
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Print config and exit without running"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv per-line debug)",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> dict:
    """Merge CLI flags with environment defaults.

    Raises:
        ConfigurationError: If an environment value is invalid.
    """
    max_delta_days = args.max_delta_days
    if max_delta_days is None:
        raw = os.getenv(ENV_MAX_DELTA_DAYS)
        if raw:
            try:
                max_delta_days = float(raw)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{ENV_MAX_DELTA_DAYS} must be a number, got {raw!r}"
                ) from exc
        else:
            max_delta_days = DEFAULT_MAX_DELTA_DAYS

    policy = args.invalid_date_policy or os.getenv(ENV_INVALID_DATE_POLICY) or InvalidDatePolicy.AS_MISSING.value
    try:
        invalid_date_policy = InvalidDatePolicy(policy)
    except ValueError as exc:
        choices = ", ".join(p.value for p in InvalidDatePolicy)
        raise ConfigurationError(
            f"{ENV_INVALID_DATE_POLICY} must be one of {choices}, got {policy!r}"
        ) from exc

    return {
        "input_path": args.input_path,
        "max_delta_days": max_delta_days,
        "invalid_date_policy": invalid_date_policy.value,
        "output_dir": args.output_dir or os.getenv(ENV_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR,
        "output_name": args.output_name or os.getenv(ENV_OUTPUT_JSON) or None,
        "output_json": args.output_json,
        "save": not args.no_save,
        "verbose": args.verbose,
    }


def load_change_input(path: str) -> ChangeInput:
    """Read and validate the change description.

    Raises:
        InputLoadError: If the file is missing, not JSON, or invalid.
    """
    input_file = Path(path)
    if not input_file.is_file():
        raise InputLoadError(f"'{path}' is not a readable file")
    try:
        payload = json.loads(input_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InputLoadError(f"Failed reading '{path}': {exc}") from exc
    try:
        return ChangeInput.model_validate(payload)
    except ValidationError as exc:
        raise InputLoadError(f"Invalid change description in '{path}': {exc}") from exc


def print_config_human(config: dict) -> None:
    """Print configuration in human-readable format."""
    print("\nConfiguration:")
    print(f"{'='*40}")
    for key, value in config.items():
        print(f"  {key}: {value}")
    print(f"{'='*40}")


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = resolve_config(args)
    except ConfigurationError as exc:
        return _handle_error("Configuration error", exc, bool(args.verbose), EXIT_INVALID_INPUT)

    if args.dry_run:
        if args.output_json:
            print(json.dumps(config, indent=2))
        else:
            print_config_human(config)
        return EXIT_SUCCESS

    try:
        change = load_change_input(config["input_path"])
    except InputLoadError as exc:
        return _handle_error("Input error", exc, bool(args.verbose), EXIT_INVALID_INPUT)

    try:
        report = analyze_change(
            change,
            max_delta_days=config["max_delta_days"],
            invalid_date_policy=InvalidDatePolicy(config["invalid_date_policy"]),
        )

        if args.output_json:
            print(format_report_json(report))
        else:
            print(format_report_human(report))

        if config["save"]:
            written = write_report(report, config["output_dir"], config["output_name"])
            if args.verbose:
                print(f"Report written: {written}")

        return EXIT_SUCCESS

    except AnalysisError as exc:
        return _handle_error("Analysis error", exc, bool(args.verbose), EXIT_ANALYSIS_ERROR)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, bool(args.verbose), EXIT_UNEXPECTED)


if __name__ == "__main__":
    sys.exit(main())
