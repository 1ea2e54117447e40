"""``yureka init``: prepare a project to receive components."""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field

from ..exceptions import ComponentWriteError
from ..utils import console, print_info, print_success, write_file
from .base import BaseCommand


class ProjectSettings(BaseModel):
    """Snapshot of the detected setup written to ``yureka.config.json``.

    Informational only; every command re-probes the project.
    """

    style: str = Field(default="css-modules", description="tailwind or css-modules")
    typescript: bool = False
    source_extension: str = ".js"
    manifest: str = "index.js"
    components_dir: str = "components/yureka-ui"


class InitResult(BaseModel):
    library_dir: Path
    manifest_path: Path
    settings: ProjectSettings
    created: bool = Field(default=False, description="library directory was newly created")


class InitCommand(BaseCommand):
    """Create ``components/yureka-ui`` with an empty manifest and settings file."""

    async def run(self) -> InitResult:
        self.require_package_json()
        project = await self.detect_project()

        library_dir = self.config.library_dir
        created = not library_dir.exists()
        manifest_path = self.manifest_path(project)

        settings = ProjectSettings(
            style="tailwind" if project.uses_style_framework else "css-modules",
            typescript=project.uses_static_types,
            source_extension=project.source_extension,
            manifest=manifest_path.name,
            components_dir=f"{self.config.components_dir}/{self.config.library_dir_name}",
        )

        try:
            await asyncio.to_thread(library_dir.mkdir, parents=True, exist_ok=True)
            await self.synchronizer.ensure(manifest_path)
            await asyncio.to_thread(
                write_file,
                self.config.settings_path,
                settings.model_dump_json(indent=2) + "\n",
            )
        except OSError as exc:
            raise ComponentWriteError("Failed to initialize Yureka UI", exc) from exc

        if created:
            print_success("Yureka UI initialized successfully")
        else:
            print_info("Yureka UI was already initialized; settings refreshed.")
        console.print(f"  Styling:    [bold]{settings.style}[/bold]")
        console.print(f"  TypeScript: [bold]{'yes' if settings.typescript else 'no'}[/bold]")
        console.print(f"  Manifest:   [bold]{settings.components_dir}/{settings.manifest}[/bold]")
        print_info("\nAdd your first component with:")
        console.print("  npx yureka@latest add button")

        return InitResult(
            library_dir=library_dir,
            manifest_path=manifest_path,
            settings=settings,
            created=created,
        )
