"""File status records, file types and open flags."""

import enum
import struct
from dataclasses import dataclass

_STAT = struct.Struct("<iIhh4xQ")

STAT_SIZE = _STAT.size


class FileType(enum.IntEnum):
    """Kind of object an inode describes."""

    DIR = 1
    FILE = 2
    DEVICE = 3


class OpenFlags(enum.IntFlag):
    """Mode bits accepted by open."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200
    TRUNC = 0x400


@dataclass
class Stat:
    """Status of a file as reported by fstat."""

    dev: int
    ino: int
    type: FileType
    nlink: int
    size: int

    def __post_init__(self):
        self.type = FileType(self.type)

    def pack(self):
        """Encode the record in its binary layout."""
        try:
            return _STAT.pack(self.dev, self.ino, int(self.type), self.nlink, self.size)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc


def unpack_stat(data):
    """Decode a stat record from exactly STAT_SIZE bytes."""
    data = bytes(data)
    if len(data) != STAT_SIZE:
        raise ValueError(f"stat record needs {STAT_SIZE} bytes, got {len(data)}")
    dev, ino, ftype, nlink, size = _STAT.unpack(data)
    return Stat(dev=dev, ino=ino, type=FileType(ftype), nlink=nlink, size=size)