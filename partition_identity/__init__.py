"""
Partition Identity — resolve partitions by UUID, label, or path.

Reads the udev symlink trees under /dev/disk/by-* in either direction.
Nothing is cached; every lookup re-reads the filesystem.

Modules:
  source.py     identifier kinds and their by-* directories
  resolver.py   forward/reverse scans over a by-* directory
  identity.py   PartitionID: constructors, KIND=value parsing, top-level lookups
  cli.py        demonstration command line
"""

from .errors import DirectoryUnavailableError, PartitionIdentityError, PartitionIDParseError
from .identity import PartitionID, format_id, parse
from .source import PartitionSource

__all__ = [
    "PartitionID", "PartitionSource", "parse", "format_id",
    "PartitionIdentityError", "PartitionIDParseError", "DirectoryUnavailableError",
]
