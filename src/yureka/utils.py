"""Shared utility functions for the Yureka UI CLI.

Provides async command execution, file-system helpers and Rich-based console
reporting.  All user-facing output goes through the module-level ``console``.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 600,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout yields
        returncode ``-1``; a missing executable yields ``127``.
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        return (127, "", f"Command not found: {cmd[0]}")

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: Path, content: str) -> None:
    """Create parent dirs and write *content* as UTF-8."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def remove_tree(path: Path) -> None:
    """Delete a directory tree; missing paths are ignored."""
    if path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()


def list_subdirectories(path: Path) -> list[str]:
    """Sorted names of the visible subdirectories of *path*."""
    return sorted(
        entry.name
        for entry in path.iterdir()
        if entry.is_dir()
        and not entry.name.startswith(".")
        and entry.name != "node_modules"
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str, hint: str = "") -> None:
    """Print a red error message, with an optional corrective hint."""
    console.print(f"[bold red]Error:[/bold red] {message}")
    if hint:
        console.print(f"  [dim]{hint}[/dim]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[blue]{message}[/blue]")


def print_choices_table(rows: list[tuple[str, str]], title: str) -> None:
    """Print a numbered ``name / description`` table used by selections."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Component", no_wrap=True)
    table.add_column("Description")

    for index, (name, description) in enumerate(rows, start=1):
        table.add_row(str(index), name, description)

    console.print(table)
