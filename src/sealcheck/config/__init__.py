"""Configuration loading, validation, and normalization for Sealcheck scans.

This package facade re-exports all public names so that
``from sealcheck.config import ...`` statements keep working.
"""

from __future__ import annotations

from sealcheck.config.loader import load_config
from sealcheck.config.model import SealcheckConfig, effective_detector_ids
from sealcheck.config.validator import validate_config_file

__all__ = [
    "SealcheckConfig",
    "effective_detector_ids",
    "load_config",
    "validate_config_file",
]
