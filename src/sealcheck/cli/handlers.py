"""CLI subcommand handlers and threshold evaluation."""

from __future__ import annotations

import argparse
import signal
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from sealcheck.constants.scoring import SEVERITY_RANK
from sealcheck.exceptions.validation import format_errors
from sealcheck.model import ScanResult
from sealcheck.validation import preflight_validate


def evaluate_fail_thresholds(result: ScanResult, *, fail_on: str | None) -> int:
    """Return 1 if any finding meets the ``--fail-on`` severity, 0 otherwise."""
    if fail_on is None:
        return 0
    threshold = SEVERITY_RANK.get(fail_on, 0)
    for finding in result.findings:
        if SEVERITY_RANK.get(finding.severity, 0) >= threshold:
            return 1
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run root + config validation and report results."""
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


@contextmanager
def interrupt_sets(cancel_event: threading.Event) -> Iterator[None]:
    """Route SIGINT to *cancel_event* for the duration of the block.

    The scan then returns partial results instead of dying with a traceback.
    Outside the main thread the handler cannot be installed and the block runs
    unchanged.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _on_interrupt(signum: int, frame: object) -> None:
        cancel_event.set()

    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)
