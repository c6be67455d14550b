#!/usr/bin/env python3
"""
Partition Identity

Find the ID of a device by its path, or find a device path by its ID.
Resolution goes through the udev symlink trees under /dev/disk/by-*.

Usage:
    from partition_identity import PartitionID, PartitionSource

    pid = PartitionID.parse("UUID=1c5e8a3f-...")
    path = pid.resolve_path()                                        # /dev/nvme0n1p2
    uuid = PartitionID.resolve_identity(PartitionSource.UUID, path)  # PartitionID(UUID, ...)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import resolver
from .errors import PartitionIDParseError
from .source import PREFIXED_SOURCES, PartitionSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionID:
    """
    Describes a partition identity.

    A claim about a device at the time it was resolved. The device path
    is not stored; call resolve_path() again to get the current one.
    """
    source: PartitionSource
    id: str

    # ─────────────────────────────────────────────────────────────────────────
    # Constructors
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def new(cls, source: PartitionSource, id: str) -> "PartitionID":
        return cls(source, id)

    @classmethod
    def new_id(cls, id: str) -> "PartitionID":
        return cls(PartitionSource.ID, id)

    @classmethod
    def new_label(cls, id: str) -> "PartitionID":
        return cls(PartitionSource.LABEL, id)

    @classmethod
    def new_uuid(cls, id: str) -> "PartitionID":
        return cls(PartitionSource.UUID, id)

    @classmethod
    def new_partlabel(cls, id: str) -> "PartitionID":
        return cls(PartitionSource.PARTLABEL, id)

    @classmethod
    def new_partuuid(cls, id: str) -> "PartitionID":
        return cls(PartitionSource.PARTUUID, id)

    @classmethod
    def new_path(cls, id: str) -> "PartitionID":
        return cls(PartitionSource.PATH, id)

    @classmethod
    def parse(cls, text: str) -> "PartitionID":
        """'UUID=abcd', 'PARTLABEL=root', '/dev/sda1', ..."""
        return parse(text)

    from_str = parse

    def __str__(self) -> str:
        return format_id(self)

    # ─────────────────────────────────────────────────────────────────────────
    # Resolution
    # ─────────────────────────────────────────────────────────────────────────

    def resolve_path(self, root: str | Path | None = None) -> Optional[Path]:
        """
        Find the current device path of this ID.

        Returns None if no entry matches. Raises DirectoryUnavailableError
        if the by-* directory for this kind cannot be opened.
        """
        if self.source is PartitionSource.PATH:
            return resolver.canonicalize(self.id)

        with resolver.open_source_dir(self.source, root) as entries:
            device = resolver.forward_resolve(self.id, entries)

        if device is None:
            logger.debug("%s not found", self)
        return device

    get_device_path = resolve_path

    @classmethod
    def resolve_identity(
        cls,
        source: PartitionSource,
        path: str | Path,
        root: str | Path | None = None,
    ) -> Optional["PartitionID"]:
        """
        Find the given kind of ID for the device at `path`.

        For PATH this is the canonical path itself, if it exists.
        """
        if source is PartitionSource.PATH:
            device = resolver.canonicalize(path)
            return cls(source, str(device)) if device is not None else None

        with resolver.open_source_dir(source, root) as entries:
            value = resolver.reverse_resolve(path, entries)

        if value is None:
            logger.debug("no %s for %s", source, path)
            return None
        return cls(source, value)

    get_source = resolve_identity

    @classmethod
    def resolve_all(
        cls, path: str | Path, root: str | Path | None = None
    ) -> dict[PartitionSource, Optional["PartitionID"]]:
        """Every kind of ID for the device at `path`, in enum order."""
        return {source: cls.resolve_identity(source, path, root) for source in PartitionSource}

    @classmethod
    def get_id(cls, path: str | Path, root: str | Path | None = None) -> Optional["PartitionID"]:
        return cls.resolve_identity(PartitionSource.ID, path, root)

    @classmethod
    def get_label(cls, path: str | Path, root: str | Path | None = None) -> Optional["PartitionID"]:
        return cls.resolve_identity(PartitionSource.LABEL, path, root)

    @classmethod
    def get_partlabel(cls, path: str | Path, root: str | Path | None = None) -> Optional["PartitionID"]:
        return cls.resolve_identity(PartitionSource.PARTLABEL, path, root)

    @classmethod
    def get_partuuid(cls, path: str | Path, root: str | Path | None = None) -> Optional["PartitionID"]:
        return cls.resolve_identity(PartitionSource.PARTUUID, path, root)

    @classmethod
    def get_uuid(cls, path: str | Path, root: str | Path | None = None) -> Optional["PartitionID"]:
        return cls.resolve_identity(PartitionSource.UUID, path, root)


def parse(text: str) -> PartitionID:
    """
    Parse a mount-style identifier string.

    '/dev/sda1'      -> PATH
    'UUID=abcd'      -> UUID
    'PARTLABEL=root' -> PARTLABEL

    Raises PartitionIDParseError for anything else, including ''.
    """
    if text.startswith("/"):
        return PartitionID(PartitionSource.PATH, text)

    for source in PREFIXED_SOURCES:
        if text.startswith(source.prefix):
            return PartitionID(source, text[len(source.prefix):])

    raise PartitionIDParseError(text)


def format_id(pid: PartitionID) -> str:
    """Inverse of parse(): 'UUID=abcd', or the bare path for PATH."""
    if pid.source is PartitionSource.PATH:
        return pid.id
    return f"{pid.source.prefix}{pid.id}"
