"""Dependency installation through the host project's package manager."""

from __future__ import annotations

from pathlib import Path

from .exceptions import DependencyInstallError
from .utils import console, run_command

_LOCK_FILES: tuple[tuple[str, str], ...] = (
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
)


def detect_package_manager(project_root: str | Path) -> str:
    """``yarn`` / ``pnpm`` when their lock file exists, otherwise ``npm``."""
    root = Path(project_root)
    for lock_file, manager in _LOCK_FILES:
        if (root / lock_file).exists():
            return manager
    return "npm"


def install_command(manager: str, packages: list[str]) -> list[str]:
    """Build the argv that installs *packages* with *manager*."""
    if manager == "npm":
        return ["npm", "install", *packages]
    return [manager, "add", *packages]


class PackageInstaller:
    """Installs npm packages into the host project.

    Args:
        project_root: Directory containing ``package.json``.
        manager: Force a package manager; sniffed from lock files when omitted.
    """

    def __init__(self, project_root: str | Path, manager: str | None = None) -> None:
        self.project_root = Path(project_root)
        self.manager = manager or detect_package_manager(self.project_root)

    async def install(self, packages: list[str]) -> None:
        """Install *packages*; raises ``DependencyInstallError`` on failure."""
        if not packages:
            return
        cmd = install_command(self.manager, packages)
        with console.status(f"Installing dependencies: {', '.join(packages)}..."):
            returncode, _stdout, stderr = await run_command(cmd, cwd=self.project_root)
        if returncode != 0:
            raise DependencyInstallError(" ".join(cmd), returncode, stderr)
        console.print("[green]Dependencies installed successfully[/green]")
