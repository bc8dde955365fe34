"""Tools for Solana BPF programs: ELF header parsing, rodata decoding, syscall hashing and project commands."""

__version__ = "0.1.6"