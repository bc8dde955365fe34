"""Named contents of one ELF section."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SectionHeaderEntry:
    """A section's name, file offset and raw bytes.

    ``utf8`` holds the data decoded as UTF-8 when that succeeds, and is
    empty otherwise.
    """

    label: str
    offset: int
    data: bytes
    utf8: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        try:
            self.utf8 = self.data.decode("utf-8")
        except UnicodeDecodeError:
            self.utf8 = ""

    def to_bytes(self) -> bytes:
        """Return the raw section bytes."""
        return bytes(self.data)