"""Detector interfaces for integrity checks."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from sealcheck.model import FileEntry, FileIndex, FileKind, FindingCandidate

_DETECTOR_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")
_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z]+-[0-9]{3}$")


class Detector(ABC):
    """Abstract base class for detector implementations.

    Each detector declares the file kinds it is dispatched for. The scanner
    calls ``run`` once per indexed file of a matching kind.
    """

    detector_id: ClassVar[str]
    rule_id: ClassVar[str]
    kinds: ClassVar[frozenset[FileKind]]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate detector subclasses define well-formed identifiers and kinds."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        detector_id = getattr(cls, "detector_id", None)
        if not isinstance(detector_id, str) or not _DETECTOR_ID_PATTERN.match(detector_id):
            raise TypeError(f"{cls.__name__}.detector_id must be UPPER_SNAKE_CASE (got {detector_id!r})")

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must look like ARTINT-001 (got {rule_id!r})")

        kinds = getattr(cls, "kinds", None)
        if not kinds or FileKind.NONE in kinds:
            raise TypeError(f"{cls.__name__} must declare at least one dispatchable file kind")

    @abstractmethod
    def run(self, *, entry: FileEntry, index: FileIndex) -> list[FindingCandidate]:
        """Run the detector on one indexed file."""
