"""CLI entrypoint for Sealcheck."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path

from sealcheck import __version__
from sealcheck.cli.handlers import evaluate_fail_thresholds, handle_validate_config, interrupt_sets
from sealcheck.constants.branding import CLI_DESCRIPTION
from sealcheck.constants.config import MAX_WORKERS
from sealcheck.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from sealcheck.constants.scoring import SEVERITY_ORDER
from sealcheck.exceptions import ConfigError, SealcheckError
from sealcheck.exceptions.validation import format_errors
from sealcheck.reporting.stdout import StdoutReporter
from sealcheck.scanner import scan_workspace
from sealcheck.validation import preflight_validate

SEVERITY_CHOICES = tuple(reversed(SEVERITY_ORDER))


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sealcheck",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Audit a tree for release artifact and lockfile integrity gaps")
    scan.add_argument("-r", "--root", type=Path, required=True, help="Root directory to scan")
    scan.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory root (no files written if omitted)",
    )
    scan.add_argument("-c", "--config", type=Path, help="Explicit config file")
    scan.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Comma-separated output formats: json, sarif (default: json)",
    )
    scan.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help=f"Per-file check threads, 1-{MAX_WORKERS} (default: config value or 1)",
    )
    scan.add_argument(
        "--min-severity",
        choices=SEVERITY_CHOICES,
        default=None,
        help="Only show and write findings at or above this severity",
    )
    scan.add_argument(
        "--fail-on",
        choices=SEVERITY_CHOICES,
        default=None,
        help="Exit with code 1 when any finding is at or above this severity",
    )
    scan.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    scan.add_argument("--no-color", action="store_true", help="Disable colored output")
    scan.add_argument("-v", "--verbose", action="store_true", help="Show warnings and debug diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Root directory to scan")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command != "scan":
        parser.error(f"Unsupported command: {args.command}")

    raw_tokens = args.output_format.split(",")
    output_formats = tuple(fmt for fmt in (t.strip() for t in raw_tokens) if fmt)
    if not output_formats or len(output_formats) != len(raw_tokens):
        print(
            "Configuration error: --output-format contains empty or malformed tokens",
            file=sys.stderr,
        )
        return 2
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        print(
            f"Configuration error: unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}",
            file=sys.stderr,
        )
        return 2

    if args.workers is not None and not 1 <= args.workers <= MAX_WORKERS:
        print(
            f"Configuration error: --workers must be between 1 and {MAX_WORKERS}",
            file=sys.stderr,
        )
        return 2

    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    cancel_event = threading.Event()
    try:
        with interrupt_sets(cancel_event):
            result = scan_workspace(
                root=args.root,
                out=args.output_dir,
                config_path=args.config,
                cancel_event=cancel_event,
                workers=args.workers,
                output_formats=output_formats,
                min_severity=args.min_severity,
            )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SealcheckError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 1

    exit_code = evaluate_fail_thresholds(result, fail_on=args.fail_on)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            result,
            color=use_color,
            verbose=args.verbose,
            min_severity=args.min_severity,
            fail_on=args.fail_on,
            exit_code=exit_code,
        )
        print(reporter.render())

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
