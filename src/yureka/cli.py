"""Command-line entry point for ``yureka``.

Usage::

    yureka init
    yureka add button
    yureka add              # pick from the catalog
    yureka remove button --yes
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .commands import AddCommand, InitCommand, RemoveCommand
from .config import PACKAGE_MANAGERS, Config
from .exceptions import YurekaError
from .utils import console, print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yureka",
        description="A modular UI component library for Next.js",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  yureka init\n"
            "  yureka add button\n"
            "  yureka remove card --yes\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--cwd",
        default=None,
        help="Project root (default: current directory or $YUREKA_PROJECT_ROOT)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    subparsers.add_parser("init", help="Initialize Yureka UI in your Next.js project")

    add = subparsers.add_parser("add", help="Add a component to your project")
    add.add_argument("component", nargs="?", default=None, help="Component identifier, e.g. button")
    add.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not install missing runtime packages",
    )
    add.add_argument(
        "--package-manager",
        choices=PACKAGE_MANAGERS,
        default=None,
        help="Package manager to use (default: detected from lock files)",
    )

    remove = subparsers.add_parser("remove", help="Remove a component from your project")
    remove.add_argument("component", nargs="?", default=None, help="Component identifier, e.g. button")
    remove.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Skip confirmation prompts",
    )

    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Merge command-line options over the environment-based defaults."""
    config = Config.from_env()
    updates: dict[str, object] = {}
    if args.cwd:
        updates["project_root"] = Path(args.cwd)
    if getattr(args, "skip_install", False):
        updates["install_dependencies"] = False
    if getattr(args, "package_manager", None):
        updates["package_manager"] = args.package_manager
    if getattr(args, "yes", False):
        updates["assume_yes"] = True
    return config.model_copy(update=updates)


async def dispatch(args: argparse.Namespace, config: Config) -> None:
    if args.command == "init":
        await InitCommand(config).run()
    elif args.command == "add":
        await AddCommand(config).run(args.component)
    elif args.command == "remove":
        await RemoveCommand(config).run(args.component)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``yureka`` and ``python -m yureka``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    try:
        asyncio.run(dispatch(args, config))
    except YurekaError as exc:
        print_error(str(exc), hint=exc.hint)
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
