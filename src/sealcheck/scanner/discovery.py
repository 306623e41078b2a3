"""Workspace indexing: one walk per scan, producing the shared file index."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator
from pathlib import Path

from sealcheck.constants.discovery import SKIPPED_DIR_NAMES
from sealcheck.model import FileEntry, FileIndex

logger = logging.getLogger(__name__)


def build_file_index(
    root: Path,
    *,
    skip_dirs: frozenset[str] = SKIPPED_DIR_NAMES,
    cancel_event: threading.Event | None = None,
) -> FileIndex:
    """Walk *root* once and index every regular file below it.

    Entries are produced in lexical depth-first order. Subtrees whose
    directory name is in *skip_dirs* are never entered. Directories that
    cannot be listed are skipped and the walk continues. When *cancel_event*
    is set mid-walk the files collected so far are returned with
    ``complete=False``.
    """
    entries: list[FileEntry] = []
    if cancel_event is not None and cancel_event.is_set():
        return FileIndex.from_entries(root, entries, complete=False)

    root_listing = _list_directory(root)
    if root_listing is None:
        return FileIndex.from_entries(root, entries)

    stack: list[Iterator[os.DirEntry[str]]] = [iter(root_listing)]
    while stack:
        if cancel_event is not None and cancel_event.is_set():
            logger.debug("Indexing cancelled after %d files", len(entries))
            return FileIndex.from_entries(root, entries, complete=False)

        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        try:
            if entry.is_dir(follow_symlinks=False):
                if entry.name in skip_dirs:
                    continue
                listing = _list_directory(Path(entry.path))
                if listing is not None:
                    stack.append(iter(listing))
                continue
            if not entry.is_file():
                continue
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", entry.path, exc)
            continue

        entries.append(FileEntry.from_path(Path(entry.path)))

    return FileIndex.from_entries(root, entries)


def _list_directory(directory: Path) -> list[os.DirEntry[str]] | None:
    """Return directory entries sorted by name, or None if it cannot be opened."""
    try:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda item: item.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return None


def relative_display_path(path: Path, root: Path) -> str:
    """Render *path* relative to the scan root when possible."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
