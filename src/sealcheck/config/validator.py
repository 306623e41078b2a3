"""Config file validation for Sealcheck scans."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from sealcheck.constants.config import CONFIG_FILENAME, MAX_WORKERS
from sealcheck.constants.rules import DEFAULT_DETECTORS
from sealcheck.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_DETECTOR_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from sealcheck.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a sealcheck.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``sealcheck
    validate-config`` and ``sealcheck scan`` preflight. It never raises; all
    problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "workers" in raw:
        errors.extend(_validate_workers(raw["workers"], path_str))

    if "detectors" in raw:
        errors.extend(_validate_detectors(raw["detectors"], path_str))

    return errors


def _validate_workers(value: Any, path_str: str) -> list[ValidationError]:
    if isinstance(value, bool) or not isinstance(value, int):
        return [
            ValidationError(
                code=CFG005,
                path=path_str,
                field="workers",
                message="`workers` must be an integer",
                hint=f"got {type(value).__name__}",
            )
        ]
    if not 1 <= value <= MAX_WORKERS:
        return [
            ValidationError(
                code=CFG006,
                path=path_str,
                field="workers",
                message=f"`workers` must be between 1 and {MAX_WORKERS}",
                hint=f"got {value}",
            )
        ]
    return []


def _validate_detectors(value: Any, path_str: str) -> list[ValidationError]:
    if value is None:
        return []
    if not isinstance(value, dict):
        return [
            ValidationError(
                code=CFG005,
                path=path_str,
                field="detectors",
                message="`detectors` must be a mapping",
                hint=f"got {type(value).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    for key in sorted(str(key) for key in value):
        if key not in ALLOWED_DETECTOR_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"detectors.{key}",
                    message=f"unknown key `detectors.{key}`",
                    hint=_suggest_key(key, ALLOWED_DETECTOR_KEYS),
                )
            )

    resolved: dict[str, set[str]] = {}
    for key in sorted(ALLOWED_DETECTOR_KEYS):
        items = value.get(key)
        if items is None:
            continue
        field_name = f"detectors.{key}"
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field_name,
                    message=f"`{field_name}` must be a list of strings",
                )
            )
            continue
        resolved[key] = {item.strip().upper() for item in items if item.strip()}
        for detector_id in sorted(resolved[key]):
            if detector_id not in DEFAULT_DETECTORS:
                errors.append(
                    ValidationError(
                        code=CFG007,
                        path=path_str,
                        field=field_name,
                        message=f"unknown detector `{detector_id}`",
                        hint=_suggest_key(detector_id, frozenset(DEFAULT_DETECTORS)),
                    )
                )

    overlap = resolved.get("enabled", set()) & resolved.get("disabled", set())
    for detector_id in sorted(overlap):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field="detectors",
                message=f"detector `{detector_id}` is both enabled and disabled",
            )
        )
    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a did-you-mean hint for a misspelled key."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
