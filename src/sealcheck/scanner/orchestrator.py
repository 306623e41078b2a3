"""End-to-end scan orchestration for Sealcheck.

``scan`` is the bare engine entry point: index, classify, dispatch, collect.
``scan_workspace`` wraps it with config loading, report writing and summary
statistics for the CLI.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from sealcheck.config import effective_detector_ids, load_config
from sealcheck.constants.rules import DEFAULT_DETECTORS
from sealcheck.constants.reporting import VALID_OUTPUT_FORMATS
from sealcheck.detectors import Detector, build_detectors
from sealcheck.exceptions import ConfigError, ParsingError
from sealcheck.model import FileEntry, FileIndex, FileKind, Finding, ScanResult
from sealcheck.reporting.filters import OutputFilters, build_filter_metadata, filter_findings
from sealcheck.scanner.classify import classify_file_name
from sealcheck.scanner.discovery import build_file_index, relative_display_path
from sealcheck.scanner.pipeline.conversion import candidate_to_finding, sort_findings
from sealcheck.scanner.score import rule_counts, severity_counts
from sealcheck.types import Severity

logger = logging.getLogger(__name__)

DetectorDispatch: TypeAlias = dict[FileKind, tuple[Detector, ...]]


@dataclass(frozen=True)
class _FileOutcome:
    findings: tuple[Finding, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class _ScanOutcome:
    index: FileIndex
    findings: tuple[Finding, ...]
    warnings: tuple[str, ...]
    cancelled: bool


def scan(
    root: Path | str,
    *,
    cancel_event: threading.Event | None = None,
    workers: int = 1,
) -> list[Finding]:
    """Scan *root* with every detector and return findings in stable order.

    Never raises for an unreadable tree: a missing root yields no findings, and
    a cancelled scan yields whatever was produced before the signal.
    """
    outcome = _execute(
        Path(root).resolve(),
        detectors=build_detectors(DEFAULT_DETECTORS),
        workers=workers,
        cancel_event=cancel_event,
    )
    return list(outcome.findings)


def scan_workspace(
    *,
    root: Path,
    out: Path | None = None,
    config_path: Path | None = None,
    cancel_event: threading.Event | None = None,
    workers: int | None = None,
    output_formats: tuple[str, ...] = ("json",),
    min_severity: Severity | None = None,
) -> ScanResult:
    """Scan a workspace and optionally write findings, summary and SARIF reports."""
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        raise ConfigError(
            f"Unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )

    started_at = time.perf_counter()
    root = root.resolve()
    if out is not None:
        out = out.resolve()

    config = load_config(root, config_path)
    detector_ids = effective_detector_ids(config)
    detectors = build_detectors(detector_ids)
    resolved_workers = workers if workers is not None else config.workers

    outcome = _execute(root, detectors=detectors, workers=resolved_workers, cancel_event=cancel_event)
    findings = list(outcome.findings)

    if out is not None:
        _write_reports(
            out,
            root=root,
            findings=findings,
            scanned_files=len(outcome.index),
            output_formats=output_formats,
            filters=OutputFilters(min_severity=min_severity),
            cancelled=outcome.cancelled,
        )

    return ScanResult(
        root=str(root),
        scanned_files=len(outcome.index),
        total_findings=len(findings),
        counts_by_severity=severity_counts(findings),
        findings=tuple(findings),
        duration_seconds=time.perf_counter() - started_at,
        warnings=outcome.warnings,
        counts_by_rule=rule_counts(findings),
        rules_executed=tuple(detector.detector_id for detector in detectors),
        cancelled=outcome.cancelled,
    )


def build_dispatch(detectors: Sequence[Detector]) -> DetectorDispatch:
    """Group detectors by the file kinds they handle, preserving order."""
    dispatch: dict[FileKind, list[Detector]] = {}
    for detector in detectors:
        for kind in sorted(detector.kinds):
            dispatch.setdefault(kind, []).append(detector)
    return {kind: tuple(items) for kind, items in dispatch.items()}


def check_file(entry: FileEntry, index: FileIndex, dispatch: DetectorDispatch) -> _FileOutcome:
    """Run every detector registered for the file's kind."""
    kind = classify_file_name(entry.name)
    detectors = dispatch.get(kind, ())
    if not detectors:
        return _FileOutcome()

    findings: list[Finding] = []
    warnings: list[str] = []
    for detector in detectors:
        try:
            candidates = detector.run(entry=entry, index=index)
        except ParsingError as exc:
            warning = f"{detector.detector_id} skipped {relative_display_path(entry.path, index.root)}: {exc.reason}"
            warnings.append(warning)
            logger.debug(warning)
            continue
        findings.extend(candidate_to_finding(candidate) for candidate in candidates)
    return _FileOutcome(findings=tuple(findings), warnings=tuple(warnings))


def _execute(
    root: Path,
    *,
    detectors: Sequence[Detector],
    workers: int,
    cancel_event: threading.Event | None,
) -> _ScanOutcome:
    if not root.is_dir():
        warning = f"Scan root is not an accessible directory: {root}"
        logger.warning(warning)
        return _ScanOutcome(index=FileIndex(root=root), findings=(), warnings=(warning,), cancelled=False)

    index = build_file_index(root, cancel_event=cancel_event)
    logger.debug("Indexed %d files under %s", len(index), root)
    dispatch = build_dispatch(detectors)

    if workers > 1:
        outcomes, cancelled = _check_parallel(index, dispatch, workers=workers, cancel_event=cancel_event)
    else:
        outcomes, cancelled = _check_sequential(index, dispatch, cancel_event=cancel_event)

    findings = [finding for outcome in outcomes for finding in outcome.findings]
    warnings = [warning for outcome in outcomes for warning in outcome.warnings]
    cancelled = cancelled or not index.complete
    if cancelled:
        logger.info("Scan cancelled; returning %d findings collected so far", len(findings))

    return _ScanOutcome(
        index=index,
        findings=tuple(sort_findings(findings)),
        warnings=tuple(warnings),
        cancelled=cancelled,
    )


def _check_sequential(
    index: FileIndex,
    dispatch: DetectorDispatch,
    *,
    cancel_event: threading.Event | None,
) -> tuple[list[_FileOutcome], bool]:
    outcomes: list[_FileOutcome] = []
    for entry in index:
        if cancel_event is not None and cancel_event.is_set():
            return outcomes, True
        outcomes.append(check_file(entry, index, dispatch))
    return outcomes, False


def _check_parallel(
    index: FileIndex,
    dispatch: DetectorDispatch,
    *,
    workers: int,
    cancel_event: threading.Event | None,
) -> tuple[list[_FileOutcome], bool]:
    def _guarded(entry: FileEntry) -> _FileOutcome | None:
        if cancel_event is not None and cancel_event.is_set():
            return None
        return check_file(entry, index, dispatch)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sealcheck") as executor:
        results = list(executor.map(_guarded, index.entries))

    outcomes = [outcome for outcome in results if outcome is not None]
    return outcomes, len(outcomes) != len(results)


def _write_reports(
    out: Path,
    *,
    root: Path,
    findings: list[Finding],
    scanned_files: int,
    output_formats: tuple[str, ...],
    filters: OutputFilters,
    cancelled: bool,
) -> None:
    shown = filter_findings(findings, filters)
    filter_metadata = build_filter_metadata(total=len(findings), shown=len(shown), filters=filters)

    if "json" in output_formats:
        from sealcheck.reporting.writer import write_scan_reports

        write_scan_reports(
            out,
            root=str(root),
            findings=shown,
            all_findings=findings,
            scanned_files=scanned_files,
            output_filter=filter_metadata,
            cancelled=cancelled,
        )

    if "sarif" in output_formats:
        from sealcheck.reporting.sarif_writer import write_sarif_findings

        write_sarif_findings(
            out,
            shown,
            rule_distribution=rule_counts(findings),
            filter_metadata=filter_metadata,
        )
