"""Project scaffolding, deployment and cleanup commands."""

from __future__ import annotations

import json
import shutil
import subprocess
import sys
from pathlib import Path

from nacl.signing import SigningKey

from .templates import (
    CARGO_TOML,
    GITIGNORE,
    PACKAGE_JSON,
    PROGRAM,
    README,
    RUST_TESTS,
    TS_TESTS,
    TSCONFIG,
    render,
)

DEPLOY_DIR = "deploy"
BUILD_CACHE_DIR = ".sbpf"
DEFAULT_URL = "localhost"


def generate_keypair() -> list[int]:
    """Return a fresh ed25519 keypair as 64 bytes: the secret seed, then the public key."""
    signing_key = SigningKey.generate()
    return list(bytes(signing_key) + bytes(signing_key.verify_key))


def _write_keypair(path: Path) -> None:
    path.write_text(json.dumps(generate_keypair(), separators=(",", ":")))


def _prompt_project_name() -> str:
    while True:
        answer = input("What is the name of your project? ").strip()
        if answer:
            return answer.replace(" ", "-")
        print("Project name cannot be empty. Please enter a valid name.")


def init(name: str | None = None, ts_tests: bool = False) -> Path | None:
    """Create a project scaffold in the current directory.

    Asks for a name when none is given. Returns the new project's path, or
    None if a project of that name already exists.
    """
    project_name = name if name is not None else _prompt_project_name()
    project_path = Path.cwd() / project_name

    if project_path.exists():
        print(f"⚠️ Project '{project_name}' already exists!")
        return None

    source_dir = project_path / "src" / project_name
    deploy_dir = project_path / DEPLOY_DIR
    source_dir.mkdir(parents=True)
    deploy_dir.mkdir(parents=True)

    (project_path / "README.md").write_text(render(README, project_name))
    (project_path / ".gitignore").write_text(GITIGNORE)
    (source_dir / f"{project_name}.s").write_text(PROGRAM)
    _write_keypair(deploy_dir / f"{project_name}-keypair.json")

    if ts_tests:
        (project_path / "package.json").write_text(render(PACKAGE_JSON, project_name))
        (project_path / "tsconfig.json").write_text(TSCONFIG)
        tests_dir = project_path / "tests"
        tests_dir.mkdir(parents=True, exist_ok=True)
        (tests_dir / f"{project_name}.test.ts").write_text(render(TS_TESTS, project_name))
        subprocess.run(["yarn", "install"], cwd=project_path, check=False)
    else:
        (project_path / "src" / "lib.rs").write_text(render(RUST_TESTS, project_name))
        (project_path / "Cargo.toml").write_text(render(CARGO_TOML, project_name))

    kind = "TypeScript" if ts_tests else "Rust"
    print(f"✅ Project '{project_name}' initialized successfully with {kind} tests")
    return project_path


def _deploy_program(program_name: str, url: str) -> None:
    program_id_file = f"./{DEPLOY_DIR}/{program_name}-keypair.json"
    program_file = f"./{DEPLOY_DIR}/{program_name}.so"

    if not Path(program_file).exists():
        print(f"Program file {program_file} not found", file=sys.stderr)
        raise FileNotFoundError("❌ Program file not found")

    print(f'🔄 Deploying "{program_name}"')
    result = subprocess.run(
        [
            "solana",
            "program",
            "deploy",
            program_file,
            "--program-id",
            program_id_file,
            "-u",
            url,
        ],
        check=False,
    )
    if result.returncode != 0:
        print(f"Failed to deploy program for {program_name}", file=sys.stderr)
        raise RuntimeError("❌ Deployment failed")
    print(f'✅ "{program_name}" deployed successfully!')


def deploy(name: str | None = None, url: str | None = None) -> list[str]:
    """Deploy one program, or every built program, and return the names deployed."""
    url = url if url is not None else DEFAULT_URL
    if name is not None:
        _deploy_program(name, url)
        return [name]

    names = sorted(
        path.stem
        for path in Path(DEPLOY_DIR).iterdir()
        if path.is_file() and path.suffix == ".so"
    )
    for program_name in names:
        _deploy_program(program_name, url)
    return names


def clean_directory(directory: str | Path, extension: str) -> list[Path]:
    """Remove files in ``directory`` with ``extension`` (any extension if empty).

    Files without an extension are always kept. Returns the removed paths.
    """
    removed = []
    for path in Path(directory).iterdir():
        if not path.is_file() or not path.suffix:
            continue
        if extension and path.suffix[1:] != extension:
            continue
        path.unlink()
        removed.append(path)
    return removed


def clean() -> None:
    """Remove the build cache and the built programs."""
    shutil.rmtree(BUILD_CACHE_DIR)
    clean_directory(DEPLOY_DIR, "so")