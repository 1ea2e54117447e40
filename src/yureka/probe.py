"""Shallow probing of the host project.

Classifies the project on two independent axes: whether Tailwind CSS is set
up, and whether TypeScript is enabled.  Every probe is a plain read that fails
open; a missing or broken ``package.json`` means "no framework, no types"
rather than an error.  Nothing is cached because the project can change
between runs.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .scaffolder.extensions import choose_source_extension


TAILWIND_PACKAGE = "tailwindcss"
TYPESCRIPT_PACKAGE = "typescript"

TAILWIND_CONFIG_FILES: tuple[str, ...] = (
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.ts",
    "tailwind.config.mjs",
)

GLOBAL_STYLESHEETS: tuple[str, ...] = (
    "src/styles/globals.css",
    "styles/globals.css",
    "app/globals.css",
)

TAILWIND_DIRECTIVES: tuple[str, ...] = ("@tailwind", "@apply")

TSCONFIG_FILE = "tsconfig.json"


class PackageManifest(BaseModel):
    """The parts of ``package.json`` the probe cares about."""

    name: str = Field(default="")
    dependencies: dict[str, str] = Field(default_factory=dict)
    devDependencies: dict[str, str] = Field(default_factory=dict)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, value: object) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("dependencies", "devDependencies", mode="before")
    @classmethod
    def _dependency_section(cls, value: object) -> dict[str, str]:
        """A section that is not an object (``null``, a list) counts as empty."""
        if not isinstance(value, dict):
            return {}
        return {str(key): str(version) for key, version in value.items()}

    def all_dependencies(self) -> dict[str, str]:
        """Runtime and development dependencies merged (dev wins on clashes)."""
        return {**self.dependencies, **self.devDependencies}


class ProjectConfig(BaseModel):
    """Derived project configuration; recomputed on every invocation."""

    uses_style_framework: bool = False
    uses_static_types: bool = False
    source_extension: str = ".js"


class ProjectProbe:
    """Reads ``package.json`` and a handful of well-known files under *root*."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    @property
    def package_json_path(self) -> Path:
        return self.root / "package.json"

    def read_manifest(self) -> PackageManifest | None:
        """Parse ``package.json``; ``None`` when missing or malformed."""
        try:
            raw = self.package_json_path.read_text(encoding="utf-8")
            data = json.loads(raw)
            if not isinstance(data, dict):
                return None
            return PackageManifest.model_validate(data)
        except (OSError, ValueError, ValidationError):
            return None

    def dependencies(self) -> dict[str, str]:
        """Combined dependency map, empty when the manifest is unreadable."""
        manifest = self.read_manifest()
        if manifest is None:
            return {}
        return manifest.all_dependencies()

    # -- Axis detection ----------------------------------------------------

    def detect_style_framework(self) -> bool:
        """Return ``True`` if Tailwind CSS appears to be configured."""
        manifest = self.read_manifest()
        if manifest is None:
            return False

        if TAILWIND_PACKAGE in manifest.all_dependencies():
            return True

        for name in TAILWIND_CONFIG_FILES:
            if (self.root / name).is_file():
                return True

        for rel in GLOBAL_STYLESHEETS:
            path = self.root / rel
            try:
                if not path.is_file():
                    continue
                content = path.read_text(encoding="utf-8", errors="replace")
            except OSError:
                continue
            if any(token in content for token in TAILWIND_DIRECTIVES):
                return True

        return False

    def detect_type_system(self) -> bool:
        """Return ``True`` if the project uses TypeScript."""
        try:
            if (self.root / TSCONFIG_FILE).is_file():
                return True
        except OSError:
            return False
        return TYPESCRIPT_PACKAGE in self.dependencies()

    def detect(self, components_root: str | Path) -> ProjectConfig:
        """Probe both axes and pick the source extension for *components_root*."""
        uses_types = self.detect_type_system()
        return ProjectConfig(
            uses_style_framework=self.detect_style_framework(),
            uses_static_types=uses_types,
            source_extension=choose_source_extension(components_root, uses_types),
        )
