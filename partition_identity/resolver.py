"""
Resolver - scans /dev/disk/by-* symlink directories.

Two primitives over an already-open directory listing:

    forward_resolve(value, entries)        # identifier -> canonical device path
    reverse_resolve(device_path, entries)  # device path -> identifier value

Entries only need `.name` and `.path` (os.DirEntry, or anything shaped
like it). Nothing is cached: every call re-reads the filesystem, since
devices come and go with hot-plug and reformat.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Protocol

from .errors import DirectoryUnavailableError
from .source import PartitionSource

logger = logging.getLogger(__name__)


class DirEntryLike(Protocol):
    name: str
    path: str


def canonicalize(path: str | Path) -> Optional[Path]:
    """Resolve symlinks, '.' and '..'. None if the target is gone."""
    try:
        return Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        # RuntimeError: symlink loop on older interpreters
        logger.debug("cannot canonicalize %s: %s", path, e)
        return None


def open_source_dir(source: PartitionSource, root: str | Path | None = None):
    """
    Open the backing directory for `source` as a scandir iterator.

    Use as a context manager so the handle is closed after the scan.
    Raises DirectoryUnavailableError if it is missing or unreadable.
    """
    directory = source.backing_directory(root)
    try:
        return os.scandir(directory)
    except OSError as e:
        raise DirectoryUnavailableError(directory, e) from e


def forward_resolve(value: str, entries: Iterable[DirEntryLike]) -> Optional[Path]:
    """
    Find the device an identifier points at.

    Names are compared as plain strings. The first matching entry that
    still resolves wins; dangling matches are skipped.
    """
    for entry in entries:
        if entry.name != value:
            continue
        device = canonicalize(entry.path)
        if device is not None:
            logger.debug("%s -> %s", entry.path, device)
            return device
        logger.debug("skipping dangling entry %s", entry.path)
    return None


def reverse_resolve(device_path: str | Path, entries: Iterable[DirEntryLike]) -> Optional[str]:
    """
    Find the identifier whose symlink points at `device_path`.

    Returns None without scanning if `device_path` itself does not resolve.
    """
    target = canonicalize(device_path)
    if target is None:
        return None

    for entry in entries:
        if canonicalize(entry.path) == target:
            logger.debug("%s <- %s", target, entry.name)
            return entry.name
    return None


__all__ = ["canonicalize", "open_source_dir", "forward_resolve", "reverse_resolve"]
