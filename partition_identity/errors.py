"""Partition identity exceptions.

Not-found is never an exception: lookups return None. Only unparseable
identifier strings and unreadable backing directories reach the caller.
"""

from pathlib import Path


class PartitionIdentityError(Exception):
    """Base exception for partition identity errors."""


class PartitionIDParseError(PartitionIdentityError, ValueError):
    """Raised when a string is not a recognized identifier string."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"'{text}' is not a valid PartitionID string")


class DirectoryUnavailableError(PartitionIdentityError, OSError):
    """Raised when a /dev/disk/by-* directory cannot be opened."""

    def __init__(self, directory: Path, reason: OSError):
        self.directory = directory
        self.reason = reason
        super().__init__(f"unable to open {directory}: {reason.strerror or reason}")

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "PartitionIdentityError",
    "PartitionIDParseError",
    "DirectoryUnavailableError",
]
