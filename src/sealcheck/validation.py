"""Preflight validation orchestrator.

Combines root and config-file checks into a single entry point that both
``sealcheck validate-config`` and ``sealcheck scan`` share.
"""

from __future__ import annotations

from pathlib import Path

from sealcheck.config import validate_config_file
from sealcheck.constants.validation import CFG010
from sealcheck.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        errors.append(
            ValidationError(
                code=CFG010,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        )
        return sort_errors(errors)

    errors.extend(validate_config_file(root, config_path, config_explicit=config_path is not None))
    return sort_errors(errors)
