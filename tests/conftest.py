"""
Partition Identity Test Fixtures

Builds a fake /dev tree under tmp_path: device nodes are plain files,
by-* directories hold relative symlinks the way udev writes them.

Run with: pytest tests/ -v
"""
import os
from pathlib import Path

import pytest


# =============================================================================
# LAYOUT — by-* directory -> {entry name: device under dev/}
# =============================================================================

DEVICES = ["sda", "sda1", "sda2", "nvme0n1p1"]

LINKS = {
    "by-uuid": {
        "u1": "sda1",
        "u2": "sda2",
        "1C5E-8A3F": "nvme0n1p1",
    },
    "by-partuuid": {
        "9b0e4c4d-01": "sda1",
        "9b0e4c4d-02": "sda2",
    },
    "by-label": {
        "root": "sda2",
    },
    "by-partlabel": {
        "EFI": "nvme0n1p1",
    },
    "by-id": {
        "ata-FAKE_DISK_1234-part1": "sda1",
        "ata-FAKE_DISK_1234": "sda",
    },
}


class FakeDisk:
    """Handle on a fake /dev tree. `root` stands in for /dev/disk."""

    def __init__(self, base: Path):
        self.base = base
        self.dev = base / "dev"
        self.root = self.dev / "disk"

    def device(self, name: str) -> Path:
        return self.dev / name

    def link(self, directory: str, name: str, target: str) -> Path:
        """Add `root/<directory>/<name>` -> ../../<target> (may dangle)."""
        d = self.root / directory
        d.mkdir(parents=True, exist_ok=True)
        entry = d / name
        entry.symlink_to(Path("..") / ".." / target)
        return entry


def build_fake_disk(base: Path) -> FakeDisk:
    disk = FakeDisk(base)
    disk.dev.mkdir(parents=True)
    for name in DEVICES:
        disk.device(name).touch()
    for directory, entries in LINKS.items():
        for name, target in entries.items():
            disk.link(directory, name, target)
    return disk


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def fake_disk(tmp_path, monkeypatch):
    """Fake /dev/disk tree, installed as the default DISK_ROOT."""
    disk = build_fake_disk(tmp_path)
    monkeypatch.setattr("partition_identity.source.DISK_ROOT", disk.root)
    return disk


@pytest.fixture
def entries(fake_disk):
    """Entries of fake by-uuid, as a list so it can be scanned twice."""
    with os.scandir(fake_disk.root / "by-uuid") as it:
        return list(it)
