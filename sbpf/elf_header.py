"""The 64-byte ELF file header of an SBPF executable."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import NonStandardElfHeader

EI_MAGIC = b"\x7fELF"
EI_CLASS = 0x02  # 64-bit
EI_DATA = 0x01  # little endian
EI_VERSION = 0x01
EI_OSABI = 0x00  # System V
EI_ABIVERSION = 0x00
EI_PAD = bytes(7)
E_TYPE = 0x03  # ET_DYN
E_MACHINE = 0xF7  # BPF
E_MACHINE_SBPF = 0x0107  # SBPF
E_VERSION = 0x01

_FORMAT = struct.Struct("<4s5B7sHHIQQQIHHHHHH")
ELF_HEADER_SIZE = _FORMAT.size


@dataclass
class ELFHeader:
    """Decoded ELF header fields."""

    ei_magic: bytes
    ei_class: int
    ei_data: int
    ei_version: int
    ei_osabi: int
    ei_abiversion: int
    ei_pad: bytes
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int

    @classmethod
    def from_bytes(cls, data: bytes) -> ELFHeader:
        """Parse and validate the header at the start of ``data``.

        Raises NonStandardElfHeader if the data is too short or the
        identification, machine or version fields are not those of an
        SBPF executable.
        """
        if len(data) < ELF_HEADER_SIZE:
            raise NonStandardElfHeader()
        header = cls(*_FORMAT.unpack_from(data, 0))
        if (
            header.ei_magic != EI_MAGIC
            or header.ei_class != EI_CLASS
            or header.ei_data != EI_DATA
            or header.ei_version != EI_VERSION
            or header.ei_osabi != EI_OSABI
            or header.ei_abiversion != EI_ABIVERSION
            or header.ei_pad != EI_PAD
            or header.e_machine not in (E_MACHINE, E_MACHINE_SBPF)
            or header.e_version != E_VERSION
        ):
            raise NonStandardElfHeader()
        return header

    def to_bytes(self) -> bytes:
        """Encode the header as its 64 little-endian bytes."""
        return _FORMAT.pack(
            bytes(self.ei_magic),
            self.ei_class,
            self.ei_data,
            self.ei_version,
            self.ei_osabi,
            self.ei_abiversion,
            bytes(self.ei_pad),
            self.e_type,
            self.e_machine,
            self.e_version,
            self.e_entry,
            self.e_phoff,
            self.e_shoff,
            self.e_flags,
            self.e_ehsize,
            self.e_phentsize,
            self.e_phnum,
            self.e_shentsize,
            self.e_shnum,
            self.e_shstrndx,
        )