"""ELF executable header and program header records."""

import struct
from dataclasses import dataclass

ELF_MAGIC = 0x464C457F  # "\x7fELF" read as a little-endian word

ELF_PROG_LOAD = 1

ELF_PROG_FLAG_EXEC = 1
ELF_PROG_FLAG_WRITE = 2
ELF_PROG_FLAG_READ = 4

_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGRAM_HEADER = struct.Struct("<IIQQQQQQ")

ELF_HEADER_SIZE = _ELF_HEADER.size
PROGRAM_HEADER_SIZE = _PROGRAM_HEADER.size


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a valid ELF record."""


def _pack(layout, values):
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


@dataclass
class ElfHeader:
    """The file header at the start of an ELF executable."""

    magic: int = ELF_MAGIC
    ident: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    def pack(self):
        """Encode the header as its on-disk bytes."""
        if len(self.ident) != 12:
            raise ValueError("ident must be exactly 12 bytes")
        return _pack(
            _ELF_HEADER,
            (
                self.magic, bytes(self.ident), self.type, self.machine,
                self.version, self.entry, self.phoff, self.shoff, self.flags,
                self.ehsize, self.phentsize, self.phnum, self.shentsize,
                self.shnum, self.shstrndx,
            ),
        )


@dataclass
class ProgramHeader:
    """One program section header of an ELF executable."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    def pack(self):
        """Encode the program header as its on-disk bytes."""
        return _pack(
            _PROGRAM_HEADER,
            (
                self.type, self.flags, self.off, self.vaddr, self.paddr,
                self.filesz, self.memsz, self.align,
            ),
        )

    def is_loadable(self):
        """True if this section is to be loaded into memory."""
        return self.type == ELF_PROG_LOAD


def parse_elf_header(data):
    """Decode an ELF file header from the start of data."""
    data = bytes(data)
    if len(data) < ELF_HEADER_SIZE:
        raise ElfFormatError(
            f"ELF header needs {ELF_HEADER_SIZE} bytes, got {len(data)}"
        )
    fields = _ELF_HEADER.unpack_from(data)
    header = ElfHeader(*fields)
    if header.magic != ELF_MAGIC:
        raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
    return header


def parse_program_header(data):
    """Decode a program header from the start of data."""
    data = bytes(data)
    if len(data) < PROGRAM_HEADER_SIZE:
        raise ElfFormatError(
            f"program header needs {PROGRAM_HEADER_SIZE} bytes, got {len(data)}"
        )
    return ProgramHeader(*_PROGRAM_HEADER.unpack_from(data))