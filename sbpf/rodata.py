"""Recovery of typed items from a read-only data section."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Union

_EXTRA_TEXT_CHARS = frozenset(" \t\n\r")


class RodataKind(enum.Enum):
    """The assembler directive an item is written with."""

    ASCII = "ascii"
    BYTE = "byte"
    WORD = "word"
    LONG = "long"
    QUAD = "quad"


@dataclass(frozen=True)
class RodataType:
    """A typed value: text for ASCII, signed bytes for BYTE, a signed int otherwise."""

    kind: RodataKind
    value: Union[str, tuple[int, ...], int]

    @classmethod
    def ascii(cls, text: str) -> RodataType:
        return cls(RodataKind.ASCII, text)

    @classmethod
    def byte(cls, values: Iterable[int]) -> RodataType:
        return cls(RodataKind.BYTE, tuple(values))

    @classmethod
    def word(cls, value: int) -> RodataType:
        return cls(RodataKind.WORD, value)

    @classmethod
    def long(cls, value: int) -> RodataType:
        return cls(RodataKind.LONG, value)

    @classmethod
    def quad(cls, value: int) -> RodataType:
        return cls(RodataKind.QUAD, value)

    def to_asm(self) -> str:
        """Render the value as an assembler directive."""
        if self.kind is RodataKind.ASCII:
            return f'.ascii "{self.value}"'
        if self.kind is RodataKind.BYTE:
            return ".byte " + ", ".join(f"0x{v & 0xFF:02x}" for v in self.value)
        if self.kind is RodataKind.WORD:
            return f".word 0x{self.value & 0xFFFF:04x}"
        if self.kind is RodataKind.LONG:
            return f".long 0x{self.value & 0xFFFFFFFF:08x}"
        return f".quad 0x{self.value & 0xFFFFFFFFFFFFFFFF:016x}"


@dataclass
class RodataItem:
    """A labelled run of bytes at an offset within the section."""

    label: str
    offset: int
    data: bytes
    data_type: RodataType
    size: int = field(init=False)

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        self.size = len(self.data)

    def to_asm(self) -> str:
        return f"{self.label}: {self.data_type.to_asm()}"


@dataclass
class RodataSection:
    """A read-only data section split into items at referenced addresses."""

    base_address: int
    data: bytes
    items: list[RodataItem] = field(default_factory=list)

    @classmethod
    def parse(
        cls, data: bytes, base_address: int, references: Iterable[int]
    ) -> RodataSection:
        """Split ``data`` at the referenced absolute addresses and type each part."""
        data = bytes(data)
        return cls(base_address, data, _parse_items(data, base_address, references))

    def has_items(self) -> bool:
        return bool(self.items)

    def to_asm(self) -> str:
        """Render the section, or an empty string if it holds no items."""
        if not self.items:
            return ""
        return ".rodata\n" + "".join(f"  {item.to_asm()}\n" for item in self.items)

    def get_label(self, address: int) -> str | None:
        """Return the label of the item starting at ``address``, if any."""
        if address < self.base_address:
            return None
        offset = address - self.base_address
        return next((item.label for item in self.items if item.offset == offset), None)

    def contains_address(self, address: int) -> bool:
        return self.base_address <= address < self.base_address + len(self.data)


def _parse_items(
    data: bytes, base_address: int, references: Iterable[int]
) -> list[RodataItem]:
    if not data:
        return []

    end_address = base_address + len(data)
    offsets = [
        addr - base_address
        for addr in sorted(set(references))
        if base_address <= addr < end_address
    ]

    if not offsets:
        trimmed = trim_trailing_zeros(data)
        if not trimmed:
            return []
        data_type = infer_type(trimmed)
        return [RodataItem(generate_label(0, data_type), 0, trimmed, data_type)]

    if offsets[0] != 0:
        offsets.insert(0, 0)

    items = []
    bounds = offsets[1:] + [None]
    for start, following in zip(offsets, bounds):
        if start >= len(data):
            continue
        if following is not None:
            end = min(following, len(data))
        else:
            end = start + len(trim_trailing_zeros(data[start:]))
        if start < end:
            chunk = data[start:end]
            data_type = infer_type(chunk)
            items.append(
                RodataItem(generate_label(start, data_type), start, chunk, data_type)
            )
    return items


def trim_trailing_zeros(data: bytes) -> bytes:
    """Drop trailing zero bytes."""
    return bytes(data).rstrip(b"\x00")


def _is_text(text: str) -> bool:
    return all("!" <= c <= "~" or c in _EXTRA_TEXT_CHARS for c in text)


def infer_type(data: bytes) -> RodataType:
    """Guess the directive for ``data``: text, then word/long/quad by size, else bytes."""
    data = bytes(data)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = None
    if text and _is_text(text):
        return RodataType.ascii(text)

    if len(data) == 2:
        return RodataType.word(int.from_bytes(data, "little", signed=True))
    if len(data) == 4:
        return RodataType.long(int.from_bytes(data, "little", signed=True))
    if len(data) == 8:
        return RodataType.quad(int.from_bytes(data, "little", signed=True))
    return RodataType.byte(b - 256 if b > 127 else b for b in data)


def generate_label(offset: int, data_type: RodataType) -> str:
    """Name an item by its kind and offset."""
    prefix = "str" if data_type.kind is RodataKind.ASCII else "data"
    return f"{prefix}_{offset:04x}"