"""Branding constants for docs and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SEALCHECK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SEALCHECK",
    "     // release artifact and lockfile integrity",
)
SCAN_SUMMARY_TITLE: str = "Scan summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} integrity auditor"))
