"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "sealcheck.yaml"
DEFAULT_WORKERS: int = 1
MAX_WORKERS: int = 64
