# sbpf

Tools for working with Solana BPF (sBPF) programs:

- parse the ELF header, program headers and section headers of a compiled
  program and encode them back to bytes;
- split a read-only data section into labelled `.ascii`, `.byte`, `.word`,
  `.long` and `.quad` items;
- compute MurmurHash3 syscall hashes and look syscall names up by hash;
- scaffold, deploy and clean sBPF assembly projects from the command line.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
sbpf init my-project              # create a project scaffold with Rust tests
sbpf init my-project --ts-tests   # ... or with TypeScript tests
sbpf deploy                       # deploy every deploy/*.so to localhost
sbpf deploy my-project devnet     # deploy one program to a given cluster
sbpf clean                        # remove .sbpf and deploy/*.so
sbpf --version
```

`sbpf init` asks for a project name when none is given (spaces become
dashes) and does nothing if a directory of that name already exists.
Otherwise it writes `src/<name>/<name>.s` with a "Hello, Solana!" program,
a `README.md`, a `.gitignore`, and a fresh ed25519 program keypair at
`deploy/<name>-keypair.json` (a JSON list of 64 bytes). With `--ts-tests`
it adds `package.json`, `tsconfig.json` and `tests/<name>.test.ts` and runs
`yarn install`; without it, it adds `Cargo.toml` and `src/lib.rs` with a
Rust test.

`sbpf deploy` runs `solana program deploy` for each program, which must be
on your `PATH`. `sbpf clean` removes the `.sbpf` directory and the `.so`
files in `deploy/`. A failing command prints the error and exits with
status 1.

The same commands are available as `sbpf.project.init`,
`sbpf.project.deploy`, `sbpf.project.clean` and
`sbpf.project.clean_directory`; `sbpf.project.generate_keypair` returns a
new keypair as a list of 64 integers.

## Library

Syscall hashes:

```python
from sbpf.hash import murmur3_32
from sbpf.syscall_map import DynamicSyscallMap, SyscallMap, compute_syscall_entries

static = SyscallMap.from_entries(compute_syscall_entries(["abort", "sol_log_"]))
assert static.get(murmur3_32("sol_log_")) == "sol_log_"

dynamic = DynamicSyscallMap.from_static(static)
dynamic.add("my_custom_syscall")
assert len(dynamic) == 3
```

Two names with the same hash raise `ValueError`.

Reading an ELF file:

```python
from sbpf.elf_header import ELFHeader
from sbpf.program_header import ProgramHeader
from sbpf.section_header import SectionHeader

data = open("deploy/my-project.so", "rb").read()
header = ELFHeader.from_bytes(data)
segments = ProgramHeader.parse_all(data, header)
sections, entries = SectionHeader.parse_all(data, header)
```

Each `SectionHeaderEntry` holds the section's name (with its trailing NUL),
file offset and bytes. A header that is not a 64-bit little-endian BPF or
SBPF ELF raises `sbpf.errors.NonStandardElfHeader`; errors raised while
reading ELF data derive from `sbpf.errors.DisassemblerError`.

Decoding read-only data:

```python
from sbpf.rodata import RodataSection

section = RodataSection.parse(b"Hello World!\x00\x00", 0x160, {0x160})
print(section.to_asm())
# .rodata
#   str_0000: .ascii "Hello World!"
```

## What it does not do

The package does not assemble source files into programs, decode or print
machine instructions, or run program tests: there are no `build`,
`disassemble`, `test` or `e2e` commands. `sbpf deploy` expects the `.so`
files under `deploy/` to have been built by another tool.