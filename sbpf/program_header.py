"""ELF program headers (segments)."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from .elf_header import ELFHeader
from .errors import InvalidProgramType, NonStandardElfHeader

PF_X = 0x01
PF_W = 0x02
PF_R = 0x04

_FORMAT = struct.Struct("<IIQQQQQQ")
PROGRAM_HEADER_SIZE = _FORMAT.size


class ProgramType(enum.IntEnum):
    """Segment type."""

    PT_NULL = 0x00
    PT_LOAD = 0x01
    PT_DYNAMIC = 0x02
    PT_INTERP = 0x03
    PT_NOTE = 0x04
    PT_SHLIB = 0x05
    PT_PHDR = 0x06
    PT_TLS = 0x07

    @classmethod
    def from_value(cls, value: int) -> ProgramType:
        """Return the type for ``value``, raising InvalidProgramType if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidProgramType() from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ProgramFlags:
    """Segment permission bits (read, write, execute)."""

    value: int

    @classmethod
    def from_value(cls, value: int) -> ProgramFlags:
        """Keep only the R/W/X bits of ``value``."""
        return cls(value & 7)

    def __str__(self) -> str:
        r = "R" if self.value & PF_R else "*"
        w = "W" if self.value & PF_W else "*"
        x = "X" if self.value & PF_X else "*"
        return f"{r}/{w}/{x}"


@dataclass
class ProgramHeader:
    """One entry of the program header table."""

    p_type: ProgramType
    p_flags: ProgramFlags
    p_offset: int
    p_vaddr: int
    p_paddr: int
    p_filesz: int
    p_memsz: int
    p_align: int

    @classmethod
    def parse_all(cls, data: bytes, elf_header: ELFHeader) -> list[ProgramHeader]:
        """Read every program header described by ``elf_header`` from ``data``."""
        count = elf_header.e_phnum
        if count == 0:
            return []
        if elf_header.e_phentsize != PROGRAM_HEADER_SIZE:
            raise NonStandardElfHeader()
        start = elf_header.e_phoff
        end = start + count * PROGRAM_HEADER_SIZE
        if end > len(data):
            raise NonStandardElfHeader()

        headers = []
        for p_type, p_flags, *rest in _FORMAT.iter_unpack(data[start:end]):
            headers.append(
                cls(
                    ProgramType.from_value(p_type),
                    ProgramFlags.from_value(p_flags),
                    *rest,
                )
            )
        return headers

    def to_bytes(self) -> bytes:
        """Encode the header as its 56 little-endian bytes."""
        return _FORMAT.pack(
            int(self.p_type),
            self.p_flags.value,
            self.p_offset,
            self.p_vaddr,
            self.p_paddr,
            self.p_filesz,
            self.p_memsz,
            self.p_align,
        )