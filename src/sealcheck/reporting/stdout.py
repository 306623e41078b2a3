"""Human-readable stdout reporter for scan results."""

from __future__ import annotations

from sealcheck.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from sealcheck.constants.reporting import ANSI_DIM, ANSI_RESET, SEVERITY_COLORS
from sealcheck.constants.scoring import SEVERITY_ORDER, SEVERITY_RANK
from sealcheck.model import ScanResult
from sealcheck.reporting.filters import OutputFilters, filter_findings
from sealcheck.scanner.score import highest_severity, rule_counts
from sealcheck.types import Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: str) -> str:
    color = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, color) if color else severity


def _location(path: str, line: int) -> str:
    return f"{path}:{line}" if line > 0 else path


def _printable(text: str) -> str:
    # Undecodable file name bytes survive as lone surrogates; show them as U+FFFD.
    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"


class StdoutReporter:
    """Formats scan results as human-readable stdout output."""

    def __init__(
        self,
        result: ScanResult,
        *,
        color: bool = True,
        verbose: bool = False,
        min_severity: Severity | None = None,
        fail_on: Severity | None = None,
        exit_code: int = 0,
    ) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose
        self._fail_on = fail_on
        self._exit_code = exit_code
        self._filters = OutputFilters(min_severity=min_severity)
        self._shown_findings = filter_findings(result.findings, self._filters)

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_findings_table()]
        if self._verbose:
            sections.append(self._render_warnings())
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38

        worst = highest_severity(list(r.findings))
        if worst is None:
            worst_str = "none"
        else:
            worst_str = _color_severity(worst) if self._color else worst

        files_with_findings = len({finding.evidence.path for finding in r.findings})
        total_findings = r.total_findings
        shown_findings = len(self._shown_findings)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SCAN_SUMMARY_TITLE}",
            sep,
            "",
            f"  Highest     {worst_str}",
            f"  Files       {r.scanned_files} scanned / {files_with_findings} with findings",
        ]

        if self._filters.active():
            filtered = max(0, total_findings - shown_findings)
            lines.append(
                f"  Findings    {shown_findings} shown / {total_findings} total "
                f"({filtered} below {self._filters.min_severity} filtered)"
            )
        else:
            lines.append(f"  Findings    {total_findings}")

        lines.append(f"  Severities  {self._format_severity_breakdown(r.counts_by_severity)}")
        all_rule_counts = r.counts_by_rule if r.counts_by_rule else rule_counts(list(r.findings))
        lines.append(f"  Rules       {self._format_rule_counts(all_rule_counts)}")
        if r.rules_executed:
            lines.append(f"  Detectors   {len(r.rules_executed)} ({', '.join(r.rules_executed)})")
        if r.warnings:
            lines.append(f"  Warnings    {len(r.warnings)}")
        if r.cancelled:
            state = "CANCELLED (partial results)"
            lines.append(f"  Status      {_colorize(state, ANSI_DIM) if self._color else state}")

        verdict = self._render_verdict()
        if verdict is not None:
            lines.append(f"  Verdict     {verdict}")

        lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def _render_findings_table(self) -> str:
        findings = self._shown_findings
        if not findings:
            return ""

        w_rule = 10
        w_sev = 8
        w_loc = 40
        w_desc = 60

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_rule + 2)}{mid}{'─' * (w_sev + 2)}"
                f"{mid}{'─' * (w_loc + 2)}{mid}{'─' * (w_desc + 2)}{right}"
            )

        top_border = _hline("┌", "┬", "┐")
        hdr_sep = _hline("├", "┼", "┤")
        bot_border = _hline("└", "┴", "┘")

        hdr = (
            f"  │ {'Rule':<{w_rule}} │ {'Severity':<{w_sev}}"
            f" │ {'Location':<{w_loc}} │ {'Description':<{w_desc}} │"
        )

        lines = ["  Findings", top_border, hdr, hdr_sep]
        for finding in findings:
            # Pad before colouring so escape codes do not skew column widths.
            sev_cell = f"{finding.severity:<{w_sev}}"
            if self._color:
                sev_cell = sev_cell.replace(finding.severity, _color_severity(finding.severity), 1)
            location = _truncate(_printable(_location(finding.evidence.path, finding.evidence.line)), w_loc)
            description = _truncate(_printable(finding.description), w_desc)
            lines.append(
                f"  │ {finding.rule_id:<{w_rule}} │ {sev_cell}"
                f" │ {location:<{w_loc}} │ {description:<{w_desc}} │"
            )
        lines.append(bot_border)
        return "\n".join(lines)

    def _render_warnings(self) -> str:
        if not self._result.warnings:
            return ""
        lines = ["  Warnings"]
        lines.extend(f"    - {_printable(warning)}" for warning in self._result.warnings)
        return "\n".join(lines)

    def _format_severity_breakdown(self, counts: dict[Severity, int]) -> str:
        """Render ``critical/high/medium/low`` finding counts in fixed order."""
        parts: list[str] = []
        for severity in SEVERITY_ORDER:
            count = counts.get(severity, 0)  # type: ignore[call-overload]
            label = _color_severity(severity) if self._color else severity
            parts.append(f"{count} {label}")
        return " · ".join(parts)

    @staticmethod
    def _format_rule_counts(counts: dict[str, int]) -> str:
        """Render rule counts sorted by descending count, then rule id."""
        if not counts:
            return "none"
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return " · ".join(f"{rule_id} {count}" for rule_id, count in ranked)

    def _render_verdict(self) -> str | None:
        """Render CI threshold verdict when ``--fail-on`` is configured."""
        if self._fail_on is None:
            return None

        threshold = SEVERITY_RANK[self._fail_on]
        matched = [finding for finding in self._result.findings if SEVERITY_RANK.get(finding.severity, 0) >= threshold]
        if matched:
            clause = f"{len(matched)} finding(s) >= {self._fail_on}"
        else:
            clause = f"no findings >= {self._fail_on}"

        state = "FAIL" if self._exit_code == 1 else "PASS"
        return f"{state} ({clause})"
