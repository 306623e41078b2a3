"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
import signal
import threading
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from sealcheck.cli.handlers import interrupt_sets
from sealcheck.cli.main import build_parser, main
from sealcheck.exceptions import ConfigError, SealcheckError
from sealcheck.model import ScanResult


def _empty_result() -> ScanResult:
    return ScanResult(
        root="/tree",
        scanned_files=0,
        total_findings=0,
        counts_by_severity={"critical": 0, "high": 0, "medium": 0, "low": 0},
        findings=(),
        duration_seconds=0.0,
    )


def test_build_parser_accepts_scan_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "scan",
            "--root",
            str(tmp_path),
            "--output-dir",
            str(tmp_path / "out"),
            "--workers",
            "4",
            "--min-severity",
            "high",
        ]
    )

    assert args.command == "scan"
    assert args.root == tmp_path
    assert args.output_dir == tmp_path / "out"
    assert args.workers == 4
    assert args.min_severity == "high"


def test_build_parser_defaults(tmp_path: Path) -> None:
    args = build_parser().parse_args(["scan", "--root", str(tmp_path)])

    assert args.output_dir is None
    assert args.config is None
    assert args.workers is None
    assert args.output_format == "json"
    assert args.fail_on is None
    assert args.no_stdout is False


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(
            ["scan", "-r", ".", "-o", "out"],
            ["scan", "--root", ".", "--output-dir", "out"],
            id="root-and-output-dir",
        ),
        pytest.param(
            ["scan", "-r", ".", "-c", "sealcheck.yaml"],
            ["scan", "--root", ".", "--config", "sealcheck.yaml"],
            id="config",
        ),
        pytest.param(
            ["scan", "-r", ".", "-w", "2"],
            ["scan", "--root", ".", "--workers", "2"],
            id="workers",
        ),
        pytest.param(
            ["validate-config", "-r", ".", "-c", "x.yaml"],
            ["validate-config", "--root", ".", "--config", "x.yaml"],
            id="validate-config",
        ),
    ],
)
def test_short_and_long_flags_are_equivalent(short_args: list[str], long_args: list[str]) -> None:
    parser = build_parser()

    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_build_parser_rejects_unknown_severity(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["scan", "--root", str(tmp_path), "--min-severity", "urgent"])


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("sealcheck ")


@pytest.mark.parametrize("output_format", ["json,", ",", "json,,sarif", "csv", "json,xml"])
def test_main_rejects_bad_output_formats(
    tmp_path: Path, output_format: str, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["scan", "--root", str(tmp_path), "--output-format", output_format, "--no-stdout"])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


@pytest.mark.parametrize("workers", ["0", "65", "-3"])
def test_main_rejects_out_of_range_workers(tmp_path: Path, workers: str, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["scan", "--root", str(tmp_path), "--workers", workers, "--no-stdout"])

    assert code == 2
    assert "--workers" in capsys.readouterr().err


def test_main_missing_root_fails_preflight(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["scan", "--root", str(tmp_path / "missing"), "--no-stdout"])

    assert code == 2
    assert "[CFG010]" in capsys.readouterr().err


def test_main_invalid_config_fails_preflight(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "sealcheck.yaml").write_text("workers: lots\n", encoding="utf-8")

    code = main(["scan", "--root", str(tmp_path), "--no-stdout"])

    assert code == 2
    assert "[CFG005]" in capsys.readouterr().err


def test_main_scan_writes_outputs(release_tree: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "out"

    code = main(["scan", "-r", str(release_tree), "-o", str(out), "--output-format", "json,sarif", "--no-color"])

    assert code == 0
    assert len(json.loads((out / "findings.json").read_text(encoding="utf-8"))) == 6
    assert (out / "findings.sarif").is_file()
    stdout = capsys.readouterr().out
    assert "Findings    6" in stdout
    assert "ARTINT-003" in stdout


def test_main_no_stdout_is_silent(release_tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", "-r", str(release_tree), "--no-stdout"]) == 0

    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(("fail_on", "expected"), [("critical", 1), ("medium", 1), ("low", 1)])
def test_main_fail_on_threshold_met(release_tree: Path, fail_on: str, expected: int) -> None:
    assert main(["scan", "-r", str(release_tree), "--no-stdout", "--fail-on", fail_on]) == expected


def test_main_fail_on_passes_for_clean_tree(tmp_path: Path) -> None:
    assert main(["scan", "-r", str(tmp_path), "--no-stdout", "--fail-on", "low"]) == 0


def test_main_passes_flags_to_scan_workspace(tmp_path: Path) -> None:
    with patch("sealcheck.cli.main.scan_workspace", return_value=_empty_result()) as mock_scan:
        code = main(
            [
                "scan",
                "-r",
                str(tmp_path),
                "-w",
                "3",
                "--min-severity",
                "medium",
                "--output-format",
                "sarif",
                "--no-stdout",
            ]
        )

    assert code == 0
    kwargs = mock_scan.call_args.kwargs
    assert kwargs["root"] == tmp_path
    assert kwargs["workers"] == 3
    assert kwargs["min_severity"] == "medium"
    assert kwargs["output_formats"] == ("sarif",)
    assert isinstance(kwargs["cancel_event"], threading.Event)


@pytest.mark.parametrize(
    ("error", "expected_code", "prefix"),
    [
        (ConfigError("bad"), 2, "Configuration error: bad"),
        (SealcheckError("boom"), 1, "Scanner error: boom"),
    ],
)
def test_main_maps_scan_errors_to_exit_codes(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    error: Exception,
    expected_code: int,
    prefix: str,
) -> None:
    with patch("sealcheck.cli.main.scan_workspace", MagicMock(side_effect=error)):
        code = main(["scan", "-r", str(tmp_path), "--no-stdout"])

    assert code == expected_code
    assert prefix in capsys.readouterr().err


def test_validate_config_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "sealcheck.yaml").write_text("workers: 2\n", encoding="utf-8")

    assert main(["validate-config", "-r", str(tmp_path)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "sealcheck.yaml").write_text("detectors:\n  enabled: [NOT_A_DETECTOR]\n", encoding="utf-8")

    assert main(["validate-config", "-r", str(tmp_path)]) == 2
    assert "[CFG007]" in capsys.readouterr().err


def test_interrupt_sets_event_and_restores_handler() -> None:
    cancel = threading.Event()
    previous = signal.getsignal(signal.SIGINT)

    with interrupt_sets(cancel):
        handler = signal.getsignal(signal.SIGINT)
        assert callable(handler)
        handler(signal.SIGINT, None)  # type: ignore[operator]

    assert cancel.is_set()
    assert signal.getsignal(signal.SIGINT) is previous
