import json
import subprocess
from unittest import mock

import pytest
from nacl.signing import SigningKey

from sbpf import project
from sbpf.templates import CARGO_TOML, GITIGNORE, PACKAGE_JSON, PROGRAM, README, render


def _assert_keypair_consistent(values):
    seed = bytes(values[:32])
    assert bytes(SigningKey(seed).verify_key) == bytes(values[32:])


def test_generate_keypair_layout():
    values = project.generate_keypair()
    assert len(values) == 64
    assert all(0 <= v <= 255 for v in values)
    _assert_keypair_consistent(values)


def test_generate_keypair_is_random():
    keypairs = [project.generate_keypair() for _ in range(5)]
    seeds = {bytes(values[:32]) for values in keypairs}
    assert len(seeds) == 5
    for values in keypairs:
        _assert_keypair_consistent(values)


def test_init_rust_project(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    path = project.init("demo", False)
    assert path == tmp_path / "demo"
    assert (path / "README.md").read_text() == render(README, "demo")
    assert (path / ".gitignore").read_text() == GITIGNORE
    assert (path / "src" / "demo" / "demo.s").read_text() == PROGRAM
    assert (path / "Cargo.toml").read_text() == render(CARGO_TOML, "demo")
    assert "deploy/demo-keypair.json" in (path / "src" / "lib.rs").read_text()
    assert not (path / "package.json").exists()
    keypair_text = (path / "deploy" / "demo-keypair.json").read_text()
    assert " " not in keypair_text
    _assert_keypair_consistent(json.loads(keypair_text))
    assert "initialized successfully with Rust tests" in capsys.readouterr().out


def test_init_ts_project_runs_yarn(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    done = subprocess.CompletedProcess(["yarn", "install"], 0)
    with mock.patch("sbpf.project.subprocess.run", return_value=done) as run:
        path = project.init("web", True)
    assert (path / "package.json").read_text() == render(PACKAGE_JSON, "web")
    assert (path / "tests" / "web.test.ts").exists()
    assert (path / "tsconfig.json").exists()
    assert not (path / "Cargo.toml").exists()
    run.assert_called_once()
    assert run.call_args.args[0] == ["yarn", "install"]
    assert run.call_args.kwargs["cwd"] == path
    assert "TypeScript" in capsys.readouterr().out


def test_init_existing_project_is_left_alone(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "demo").mkdir()
    assert project.init("demo", False) is None
    assert not (tmp_path / "demo" / "README.md").exists()
    assert "already exists" in capsys.readouterr().out


def test_init_prompts_for_name(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with mock.patch("builtins.input", side_effect=["   ", "my project"]):
        path = project.init(None, False)
    assert path == tmp_path / "my-project"
    assert (path / "src" / "my-project" / "my-project.s").exists()
    assert "cannot be empty" in capsys.readouterr().out


def test_deploy_missing_program(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "deploy").mkdir()
    with pytest.raises(FileNotFoundError, match="Program file not found"):
        project.deploy("missing", None)


def test_deploy_named_program_uses_default_url(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "deploy").mkdir()
    (tmp_path / "deploy" / "prog.so").write_bytes(b"\x7fELF")
    done = subprocess.CompletedProcess([], 0)
    with mock.patch("sbpf.project.subprocess.run", return_value=done) as run:
        result = project.deploy("prog", None)
    assert result == ["prog"]
    assert run.call_args.args[0] == [
        "solana",
        "program",
        "deploy",
        "./deploy/prog.so",
        "--program-id",
        "./deploy/prog-keypair.json",
        "-u",
        "localhost",
    ]


def test_deploy_failure_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "deploy").mkdir()
    (tmp_path / "deploy" / "prog.so").write_bytes(b"")
    failed = subprocess.CompletedProcess([], 1)
    with mock.patch("sbpf.project.subprocess.run", return_value=failed):
        with pytest.raises(RuntimeError, match="Deployment failed"):
            project.deploy("prog", "devnet")


def test_deploy_all_programs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    deploy_dir = tmp_path / "deploy"
    deploy_dir.mkdir()
    (deploy_dir / "beta.so").write_bytes(b"")
    (deploy_dir / "alpha.so").write_bytes(b"")
    (deploy_dir / "alpha-keypair.json").write_text("[]")
    done = subprocess.CompletedProcess([], 0)
    with mock.patch("sbpf.project.subprocess.run", return_value=done) as run:
        result = project.deploy(None, "devnet")
    assert result == ["alpha", "beta"]
    assert run.call_count == 2
    assert all(call.args[0][-1] == "devnet" for call in run.call_args_list)


def test_clean_directory_by_extension(tmp_path):
    (tmp_path / "a.so").write_bytes(b"")
    (tmp_path / "b.json").write_text("{}")
    (tmp_path / "noext").write_text("")
    (tmp_path / "sub.so").mkdir()
    removed = project.clean_directory(tmp_path, "so")
    assert removed == [tmp_path / "a.so"]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["b.json", "noext", "sub.so"]


def test_clean_directory_any_extension(tmp_path):
    (tmp_path / "a.so").write_bytes(b"")
    (tmp_path / "b.json").write_text("{}")
    (tmp_path / "noext").write_text("")
    removed = project.clean_directory(tmp_path, "")
    assert sorted(p.name for p in removed) == ["a.so", "b.json"]
    assert [p.name for p in tmp_path.iterdir()] == ["noext"]


def test_clean_removes_cache_and_programs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".sbpf" / "nested").mkdir(parents=True)
    deploy_dir = tmp_path / "deploy"
    deploy_dir.mkdir()
    (deploy_dir / "prog.so").write_bytes(b"")
    (deploy_dir / "prog-keypair.json").write_text("[]")
    project.clean()
    assert not (tmp_path / ".sbpf").exists()
    assert [p.name for p in deploy_dir.iterdir()] == ["prog-keypair.json"]
    # The cache directory is gone, so a second clean has nothing to remove.
    with pytest.raises(FileNotFoundError):
        project.clean()


def test_clean_without_cache_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "deploy").mkdir()
    with pytest.raises(FileNotFoundError):
        project.clean()