"""Shared plumbing for the ``init``, ``add`` and ``remove`` commands."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..config import Config
from ..exceptions import MissingPackageJsonError, UninitializedProjectError
from ..installer import PackageInstaller
from ..probe import ProjectConfig, ProjectProbe
from ..prompts import AutoConfirmPrompter, Prompter
from ..scaffolder.extensions import choose_manifest_extension, find_manifest
from ..scaffolder.manifest import ManifestSynchronizer


class BaseCommand:
    """Holds the configuration and the collaborators every command needs.

    Collaborators are injectable so tests can run commands against a
    temporary project without a terminal or a package manager.
    """

    def __init__(
        self,
        config: Config,
        prompter: Prompter | None = None,
        installer: PackageInstaller | None = None,
        synchronizer: ManifestSynchronizer | None = None,
    ) -> None:
        self.config = config
        if prompter is None:
            prompter = AutoConfirmPrompter() if config.assume_yes else Prompter()
        self.prompter = prompter
        self.installer = installer or PackageInstaller(
            config.project_root, manager=config.package_manager
        )
        self.synchronizer = synchronizer or ManifestSynchronizer()
        self.probe = ProjectProbe(config.project_root)

    # -- Validation --------------------------------------------------------

    def require_package_json(self) -> None:
        if not self.config.package_json_path.is_file():
            raise MissingPackageJsonError(self.config.project_root)

    def validate_environment(self) -> None:
        """Fail unless ``package.json`` and ``components/yureka-ui`` exist."""
        self.require_package_json()
        if not self.config.library_dir.is_dir():
            raise UninitializedProjectError(self.config.library_dir)

    # -- Project configuration ---------------------------------------------

    async def detect_project(self) -> ProjectConfig:
        """Probe the host project; never cached."""
        return await asyncio.to_thread(self.probe.detect, self.config.components_root)

    def manifest_path(self, project: ProjectConfig) -> Path:
        """The existing barrel file, or where a new one should be created."""
        existing = find_manifest(self.config.library_dir)
        if existing is not None:
            return existing
        ext = choose_manifest_extension(project.source_extension)
        return self.config.library_dir / f"index{ext}"
