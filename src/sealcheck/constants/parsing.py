"""Constants for checksum manifest and lockfile parsing."""

from __future__ import annotations

import re
from re import Pattern

MANIFEST_COMMENT_PREFIX: str = "#"
# BSD/coreutils binary-mode marker in front of the file name.
MANIFEST_BINARY_MARKER: str = "*"

CHECKSUM_LINE_PATTERN: Pattern[str] = re.compile(r"^([a-fA-F0-9]{32,128})\s+(.+)$")
SHA256_HEX_LENGTH: int = 64
DIGEST_PREVIEW_LENGTH: int = 16

GO_SUM_HASH_PREFIX: str = "h1:"
GO_SUM_LINE_PATTERN: Pattern[str] = re.compile(rf"^(\S+)\s+(\S+)\s+({re.escape(GO_SUM_HASH_PREFIX)}\S+)$")

# The package-lock.json entry keyed by "" describes the root project itself.
NPM_ROOT_PACKAGE_KEY: str = ""

FILE_HASH_CHUNK_SIZE: int = 65536
