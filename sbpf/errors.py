"""Errors raised while reading SBPF executables."""

from __future__ import annotations


class DisassemblerError(Exception):
    """Base class for disassembly failures."""

    default_message = "Disassembler error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NonStandardElfHeader(DisassemblerError):
    default_message = "Non-standard ELF header"


class InvalidProgramType(DisassemblerError):
    default_message = "Invalid Program Type"


class InvalidSectionHeaderType(DisassemblerError):
    default_message = "Invalid Section Header Type"


class InvalidOpcode(DisassemblerError):
    default_message = "Invalid OpCode"


class InvalidImmediate(DisassemblerError):
    default_message = "Invalid Immediate"


class InvalidDataLength(DisassemblerError):
    default_message = "Invalid data length"


class InvalidString(DisassemblerError):
    default_message = "Invalid string"


class BytecodeError(DisassemblerError):
    """An instruction could not be decoded."""

    def __init__(self, error: str) -> None:
        self.error = error
        super().__init__(f"Bytecode error: {error}")


class MissingTextSection(DisassemblerError):
    default_message = "Missing text section"


class InvalidDynstrOffset(DisassemblerError):
    default_message = "Invalid offset in .dynstr section"


class InvalidUtf8InDynstr(DisassemblerError):
    default_message = "Non-UTF8 data in .dynstr section"