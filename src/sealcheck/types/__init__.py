"""Shared type aliases for Sealcheck."""

from .common import Confidence, FindingType, JsonObject, JsonScalar, JsonValue, Severity
from .config import DetectorConfig

__all__ = [
    "Confidence",
    "DetectorConfig",
    "FindingType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Severity",
]
