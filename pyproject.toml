[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbpf"
version = "0.1.6"
description = "Toolkit for Solana BPF programs: ELF header parsing, rodata decoding, syscall hashing and project scaffolding"
requires-python = ">=3.10"
keywords = ["solana", "bpf", "sbpf", "elf", "rodata", "syscall", "murmur3"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Disassemblers",
]
dependencies = [
    "pynacl",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sbpf = "sbpf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sbpf"]

[tool.pytest.ini_options]
addopts = "-ra"
