"""``yureka remove``: delete an installed component.

Flow: validate -> select (if needed) -> confirm -> delete the directory ->
drop the manifest entry -> offer full teardown when nothing is left.

The directory delete and the manifest edit are two independent steps.  If the
manifest write fails after the directory is gone, the stale export line stays
behind and has to be removed by hand.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel, Field

from ..catalog import describe, identifier_for, lookup
from ..exceptions import ComponentWriteError, NotInstalledError, UnknownComponentError
from ..prompts import Choice
from ..scaffolder.extensions import find_manifest
from ..utils import (
    console,
    list_subdirectories,
    print_error,
    print_success,
    print_warning,
    remove_tree,
)
from .base import BaseCommand


class RemoveResult(BaseModel):
    display_name: str | None = None
    removed: bool = False
    cancelled: bool = False
    remaining: list[str] = Field(default_factory=list, description="Manifest entries left")
    teardown_offered: bool = False
    torn_down: bool = False


class RemoveCommand(BaseCommand):
    """Removes one component per run."""

    async def run(self, identifier: str | None = None) -> RemoveResult:
        self.validate_environment()

        name = await self._resolve_target(identifier)
        if name is None:
            return RemoveResult(cancelled=True)

        label = name if identifier_for(name) is not None else f"custom {name}"
        if not self.prompter.confirm(
            f"Are you sure you want to remove the {label} component?", default=False
        ):
            print_warning("Removal cancelled.")
            return RemoveResult(display_name=name, cancelled=True)

        component_dir = self.config.component_dir(name)
        with console.status(f"Removing {name} component..."):
            try:
                await asyncio.to_thread(remove_tree, component_dir)
            except OSError as exc:
                raise ComponentWriteError(f"Failed to remove {name} component", exc) from exc

            remaining: list[str] = []
            manifest_path = find_manifest(self.config.library_dir)
            if manifest_path is not None:
                try:
                    remaining = await self.synchronizer.remove_entry(manifest_path, name)
                except OSError as exc:
                    raise ComponentWriteError(
                        f"Failed to update {manifest_path.name}", exc
                    ) from exc

        print_success(f"{name} component removed successfully")
        result = RemoveResult(display_name=name, removed=True, remaining=remaining)

        if not remaining and not await self._installed_components():
            result.teardown_offered = True
            result.torn_down = await self._maybe_teardown()

        console.print(f"\n[green]{name} component has been removed from your project![/green]")
        return result

    # -- Target selection --------------------------------------------------

    async def _resolve_target(self, identifier: str | None) -> str | None:
        """Display name of an installed component, selecting interactively if needed."""
        while True:
            if identifier is None:
                return await self._select_installed()

            info = lookup(identifier)
            if info is not None:
                name = info.display_name
            elif identifier in await self._installed_components():
                name = identifier
            else:
                print_error(str(UnknownComponentError(identifier)))
                identifier = None
                continue

            if self.config.component_dir(name).is_dir():
                return name
            print_error(str(NotInstalledError(name)))
            identifier = None

    async def _installed_components(self) -> list[str]:
        try:
            return await asyncio.to_thread(list_subdirectories, self.config.library_dir)
        except OSError as exc:
            raise ComponentWriteError("Could not read installed components", exc) from exc

    async def _select_installed(self) -> str | None:
        installed = await self._installed_components()
        if not installed:
            print_warning("No Yureka UI components are installed.")
            return None
        choices = [
            Choice(value=name, label=name, description=describe(name))
            for name in installed
        ]
        return self.prompter.select("Select a component to remove", choices)

    # -- Teardown ----------------------------------------------------------

    async def _maybe_teardown(self) -> bool:
        if not self.prompter.confirm(
            "No more components left. Do you want to remove Yureka UI completely?",
            default=False,
        ):
            return False
        library_dir: Path = self.config.library_dir
        try:
            await asyncio.to_thread(remove_tree, library_dir)
        except OSError as exc:
            raise ComponentWriteError("Failed to remove Yureka UI", exc) from exc
        print_success("Yureka UI has been completely removed from your project")
        return True
