"""Lookup tables from syscall hashes to syscall names."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable

from .hash import murmur3_32

Entry = tuple[int, str]


def _check_conflicts(entries: list[Entry]) -> None:
    for (h1, n1), (h2, n2) in zip(entries, entries[1:]):
        if h1 == h2:
            raise ValueError(
                f"Hash conflict detected between syscalls '{n1}' and '{n2}'"
            )


def _find(entries: list[Entry] | tuple[Entry, ...], hash: int) -> str | None:
    idx = bisect.bisect_left(entries, hash, key=lambda entry: entry[0])
    if idx < len(entries) and entries[idx][0] == hash:
        return entries[idx][1]
    return None


def compute_syscall_entries(syscalls: Iterable[str]) -> list[Entry]:
    """Hash each name and return (hash, name) pairs sorted by hash.

    Raises ValueError if two names share a hash.
    """
    entries = sorted(((murmur3_32(name), name) for name in syscalls), key=lambda e: e[0])
    _check_conflicts(entries)
    return entries


@dataclass(frozen=True)
class SyscallMap:
    """Immutable map over (hash, name) pairs sorted by hash."""

    entries: tuple[Entry, ...] = ()

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> SyscallMap:
        """Build a map from pre-sorted entries, rejecting duplicate hashes."""
        items = list(entries)
        for (h1, _), (h2, _) in zip(items, items[1:]):
            if h1 == h2:
                raise ValueError("Hash conflict detected between syscalls")
        return cls(tuple(items))

    def get(self, hash: int) -> str | None:
        """Return the syscall name for ``hash``, or None."""
        return _find(self.entries, hash)

    def __len__(self) -> int:
        return len(self.entries)


class DynamicSyscallMap:
    """Syscall map that can be extended at runtime."""

    def __init__(self, syscalls: Iterable[str] = ()) -> None:
        self.entries: list[Entry] = compute_syscall_entries(syscalls)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> DynamicSyscallMap:
        return cls(names)

    @classmethod
    def from_static(cls, static_map: SyscallMap) -> DynamicSyscallMap:
        """Copy the entries of a static map into a new mutable map."""
        result = cls()
        result.entries = list(static_map.entries)
        return result

    def get(self, hash: int) -> str | None:
        """Return the syscall name for ``hash``, or None."""
        return _find(self.entries, hash)

    def add(self, name: str) -> None:
        """Insert a syscall, raising ValueError if its hash is already present."""
        hash = murmur3_32(name)
        idx = bisect.bisect_left(self.entries, hash, key=lambda entry: entry[0])
        if idx < len(self.entries) and self.entries[idx][0] == hash:
            raise ValueError(
                f"Hash conflict: '{name}' conflicts with existing syscall"
            )
        self.entries.insert(idx, (hash, name))

    def __len__(self) -> int:
        return len(self.entries)