"""Config data model for Sealcheck scans."""

from __future__ import annotations

from dataclasses import dataclass

from sealcheck.constants.config import DEFAULT_WORKERS
from sealcheck.constants.rules import DEFAULT_DETECTORS
from sealcheck.types.config import DetectorConfig


@dataclass(frozen=True)
class SealcheckConfig:
    """Resolved scanner config."""

    detectors: DetectorConfig = DetectorConfig()
    workers: int = DEFAULT_WORKERS


def effective_detector_ids(config: SealcheckConfig) -> tuple[str, ...]:
    """Resolve enabled detectors with config overrides."""
    enabled = list(config.detectors.enabled or DEFAULT_DETECTORS)
    disabled = set(config.detectors.disabled)
    return tuple(detector_id for detector_id in enabled if detector_id not in disabled)
