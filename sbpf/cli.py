"""Command line entry point."""

from __future__ import annotations

import argparse
import subprocess
import sys

from . import project

_VERSION = "0.1.6"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sbpf")
    parser.add_argument("--version", "-V", action="version", version=f"sbpf {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    init_parser = commands.add_parser("init", help="Create a new project scaffold")
    init_parser.add_argument("name", nargs="?")
    init_parser.add_argument(
        "-t",
        "--ts-tests",
        action="store_true",
        help="Initialize with TypeScript tests instead of Mollusk Rust tests",
    )

    deploy_parser = commands.add_parser("deploy", help="Deploy built programs")
    deploy_parser.add_argument("name", nargs="?")
    deploy_parser.add_argument("url", nargs="?")

    commands.add_parser("clean", help="Clean up build and deploy artifacts")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "init":
            project.init(args.name, args.ts_tests)
        elif args.command == "deploy":
            project.deploy(args.name, args.url)
        elif args.command == "clean":
            project.clean()
    except (OSError, RuntimeError, subprocess.SubprocessError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())