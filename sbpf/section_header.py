"""ELF section headers and the section contents they describe."""

from __future__ import annotations

import bisect
import enum
import struct
from dataclasses import dataclass

from .elf_header import ELFHeader
from .errors import InvalidSectionHeaderType, InvalidString, NonStandardElfHeader
from .section_header_entry import SectionHeaderEntry

_FORMAT = struct.Struct("<IIQQQQIIQQ")
SECTION_HEADER_SIZE = _FORMAT.size


class SectionHeaderType(enum.IntEnum):
    """Section type."""

    SHT_NULL = 0x00
    SHT_PROGBITS = 0x01
    SHT_SYMTAB = 0x02
    SHT_STRTAB = 0x03
    SHT_RELA = 0x04
    SHT_HASH = 0x05
    SHT_DYNAMIC = 0x06
    SHT_NOTE = 0x07
    SHT_NOBITS = 0x08
    SHT_REL = 0x09
    SHT_SHLIB = 0x0A
    SHT_DYNSYM = 0x0B
    SHT_INIT_ARRAY = 0x0E
    SHT_FINI_ARRAY = 0x0F
    SHT_PREINIT_ARRAY = 0x10
    SHT_GROUP = 0x11
    SHT_SYMTAB_SHNDX = 0x12
    SHT_NUM = 0x13
    SHT_GNU_HASH = 0x6FFFFFF6

    @classmethod
    def from_value(cls, value: int) -> SectionHeaderType:
        """Return the type for ``value``, raising InvalidSectionHeaderType if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidSectionHeaderType() from None

    def __str__(self) -> str:
        return self.name


def _slice(data: bytes, offset: int, size: int) -> bytes:
    end = offset + size
    if end > len(data):
        raise NonStandardElfHeader()
    return data[offset:end]


@dataclass
class SectionHeader:
    """One entry of the section header table."""

    sh_name: int
    sh_type: SectionHeaderType
    sh_flags: int
    sh_addr: int
    sh_offset: int
    sh_size: int
    sh_link: int
    sh_info: int
    sh_addralign: int
    sh_entsize: int

    @classmethod
    def parse_all(
        cls, data: bytes, elf_header: ELFHeader
    ) -> tuple[list[SectionHeader], list[SectionHeaderEntry]]:
        """Read the section header table and each section's name and bytes.

        A section's name runs from its offset in the section name table to
        the next name offset (or the end of that table), so it keeps its
        trailing NUL byte.
        """
        count = elf_header.e_shnum
        if count and elf_header.e_shentsize != SECTION_HEADER_SIZE:
            raise NonStandardElfHeader()
        table = _slice(data, elf_header.e_shoff, count * SECTION_HEADER_SIZE)

        headers = [
            cls(sh_name, SectionHeaderType.from_value(sh_type), *rest)
            for sh_name, sh_type, *rest in _FORMAT.iter_unpack(table)
        ]

        if elf_header.e_shstrndx >= len(headers):
            raise NonStandardElfHeader()
        shstr = headers[elf_header.e_shstrndx]
        names = _slice(data, shstr.sh_offset, shstr.sh_size)

        indices = sorted([h.sh_name for h in headers] + [shstr.sh_size])

        entries = []
        for header in headers:
            start = header.sh_name
            next_index = bisect.bisect_right(indices, start)
            if next_index >= len(indices):
                raise InvalidString()
            end = indices[next_index]
            if end > len(names):
                raise InvalidString()
            try:
                label = names[start:end].decode("utf-8")
            except UnicodeDecodeError:
                label = "default"
            content = _slice(data, header.sh_offset, header.sh_size)
            entries.append(SectionHeaderEntry(label, header.sh_offset, content))

        return headers, entries

    def to_bytes(self) -> bytes:
        """Encode the header as its 64 little-endian bytes."""
        return _FORMAT.pack(
            self.sh_name,
            int(self.sh_type),
            self.sh_flags,
            self.sh_addr,
            self.sh_offset,
            self.sh_size,
            self.sh_link,
            self.sh_info,
            self.sh_addralign,
            self.sh_entsize,
        )