"""Detector package for Sealcheck."""

from .base import Detector
from .rules import DETECTOR_CLASSES, DETECTORS_BY_ID, build_detectors

__all__ = ["DETECTORS_BY_ID", "DETECTOR_CLASSES", "Detector", "build_detectors"]
