"""
Partition Sources - the kinds of stable identifier a partition can carry.

Each kind maps to a lowercase token, a text-form prefix as written in
fstab/crypttab (`UUID=...`, `PARTLABEL=...`), and the udev-maintained
directory that holds its symlinks (`/dev/disk/by-uuid`, ...).

Usage:
    from partition_identity.source import PartitionSource

    PartitionSource.PARTUUID.prefix             # PARTUUID=
    PartitionSource.UUID.backing_directory()   # /dev/disk/by-uuid
"""

import os
from enum import Enum
from pathlib import Path

# udev symlink trees live under /dev/disk (override with PARTITION_IDENTITY_DISK_ROOT)
DISK_ROOT = Path(os.environ.get("PARTITION_IDENTITY_DISK_ROOT", "/dev/disk"))


class PartitionSource(Enum):
    """Describes the type of partition identity."""

    ID = "id"
    LABEL = "label"
    PARTLABEL = "partlabel"
    PARTUUID = "partuuid"
    PATH = "path"
    UUID = "uuid"

    @property
    def token(self) -> str:
        return self.value

    @property
    def prefix(self) -> str | None:
        """Text-form prefix, e.g. 'PARTUUID='. PATH has none."""
        if self is PartitionSource.PATH:
            return None
        return self.value.upper() + "="

    @property
    def directory_backed(self) -> bool:
        return self is not PartitionSource.PATH

    def backing_directory(self, root: str | Path | None = None) -> Path:
        """Directory of `<value> -> device` symlinks for this kind."""
        if not self.directory_backed:
            raise ValueError("PATH identities are not backed by a /dev/disk directory")
        base = Path(root) if root is not None else DISK_ROOT
        return base / f"by-{self.value}"

    def __str__(self) -> str:
        return self.value


# Prefixed kinds, checked in order. None of the prefixes is a leading
# substring of another, so 'PARTLABEL=x' can never match 'LABEL='.
PREFIXED_SOURCES = tuple(s for s in PartitionSource if s.directory_backed)

__all__ = ["DISK_ROOT", "PartitionSource", "PREFIXED_SOURCES"]
