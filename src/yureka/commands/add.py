"""``yureka add``: install a catalog component into the host project.

Flow: select (if needed) -> validate -> probe -> resolve -> write -> sync the
manifest -> report.  Component files are written into a staging directory
next to their final location and renamed into place only once every file has
been written, so a failed write never leaves a half-installed component.
"""

from __future__ import annotations

import asyncio
import os
import shutil
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field

from ..catalog import CATALOG, ComponentInfo, lookup
from ..exceptions import ComponentWriteError, UnknownComponentError
from ..prompts import Choice
from ..scaffolder.extensions import choose_manifest_extension, is_typed_extension
from ..scaffolder.resolver import ResolvedTemplate, TemplateResolver
from ..utils import console, print_error, print_info, print_success, print_warning
from .base import BaseCommand


class AddResult(BaseModel):
    display_name: str
    component_dir: Path
    files: list[Path] = Field(default_factory=list)
    manifest_path: Path
    manifest_updated: bool = False
    variant: str | None = Field(default=None, description="None when a default was synthesized")


class AddCommand(BaseCommand):
    """Adds one component per run."""

    def __init__(self, *args, resolver: TemplateResolver | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.resolver = resolver or TemplateResolver(self.config.template_dir)

    async def run(self, identifier: str | None = None) -> AddResult | None:
        """Add *identifier*; returns ``None`` if the user cancelled selection."""
        info = self._resolve_identifier(identifier)
        if info is None:
            print_warning("No component selected.")
            return None

        name = info.display_name
        print_info(f"Adding {name} component to your project...")
        self.validate_environment()

        project = await self.detect_project()
        await self._install_missing_dependencies(info)

        manifest_ext = choose_manifest_extension(project.source_extension)
        manifest_path = self.manifest_path(project)
        component_dir = self.config.component_dir(name)

        with console.status(f"Creating {name} component..."):
            resolved = await self.resolver.aresolve(
                name,
                project.uses_style_framework,
                is_typed_extension(project.source_extension),
                project.source_extension,
            )
            files = dict(resolved.files)
            files[f"index{manifest_ext}"] = self.resolver.renderer.render(
                "component_index.j2", {"name": name}
            )
            written = await self._write_component(component_dir, files)
            try:
                updated = await self.synchronizer.add_entry(manifest_path, name)
            except OSError as exc:
                raise ComponentWriteError(
                    f"Failed to update {manifest_path.name}", exc
                ) from exc

        print_success(f"{name} component created successfully")
        self._report(name, resolved)

        return AddResult(
            display_name=name,
            component_dir=component_dir,
            files=written,
            manifest_path=manifest_path,
            manifest_updated=updated,
            variant=resolved.variant,
        )

    # -- Selection ---------------------------------------------------------

    def _resolve_identifier(self, identifier: str | None) -> ComponentInfo | None:
        """Catalog entry for *identifier*, falling back to interactive selection."""
        while True:
            if identifier is None:
                identifier = self._select_component()
                if identifier is None:
                    return None
            info = lookup(identifier)
            if info is not None:
                return info
            print_error(str(UnknownComponentError(identifier)))
            identifier = None

    def _select_component(self) -> str | None:
        choices = [
            Choice(value=key, label=info.display_name, description=info.description)
            for key, info in CATALOG.items()
        ]
        return self.prompter.select("Select a component to add", choices)

    # -- Dependencies ------------------------------------------------------

    async def _install_missing_dependencies(self, info: ComponentInfo) -> None:
        if not self.config.install_dependencies:
            return
        present = await asyncio.to_thread(self.probe.dependencies)
        missing = [pkg for pkg in info.dependencies if pkg not in present]
        if missing:
            await self.installer.install(missing)

    # -- Writing -----------------------------------------------------------

    async def _write_component(self, component_dir: Path, files: dict[str, str]) -> list[Path]:
        try:
            return await asyncio.to_thread(_stage_and_commit, component_dir, files)
        except OSError as exc:
            raise ComponentWriteError(
                f"Failed to add {component_dir.name} component", exc
            ) from exc

    # -- Reporting ---------------------------------------------------------

    def _report(self, name: str, resolved: ResolvedTemplate) -> None:
        root = f"@/{self.config.components_dir}/{self.config.library_dir_name}"
        if resolved.synthesized:
            print_warning(f"No bundled template for {name}; generated a default component.")
        console.print(f"\n[green]{name} component has been added to your project![/green]")
        print_info("\nYou can import it with:")
        console.print(f"  import {{ {name} }} from '{root}';")
        print_info("\nOr directly:")
        console.print(f"  import {name} from '{root}/{name}';")
        print_info("\nExample usage:")
        console.print(f"  <{name}>Click me</{name}>", markup=False)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _stage_and_commit(component_dir: Path, files: dict[str, str]) -> list[Path]:
    """Write *files* to a staging dir, then swap it in for *component_dir*.

    An existing install of the component is replaced.  If the swap fails the
    previous install is restored; the staging dir never outlives the call.
    """
    parent = component_dir.parent
    staging = Path(tempfile.mkdtemp(prefix=f".{component_dir.name}-", dir=parent))
    os.chmod(staging, 0o755)
    backup: Path | None = None
    try:
        for rel, content in files.items():
            (staging / rel).write_text(content, encoding="utf-8")

        if component_dir.exists():
            backup = parent / f"{staging.name}.previous"
            component_dir.rename(backup)
        try:
            staging.rename(component_dir)
        except OSError:
            if backup is not None:
                backup.rename(component_dir)
                backup = None
            raise
    finally:
        if staging.exists():
            shutil.rmtree(staging, ignore_errors=True)
        if backup is not None and backup.exists():
            shutil.rmtree(backup, ignore_errors=True)

    return [component_dir / rel for rel in files]
