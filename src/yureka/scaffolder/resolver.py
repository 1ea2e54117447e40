"""Template variant resolution.

A component template lives at ``<template_dir>/<variant key>/<Name><ext>``.
The resolver walks an explicit, ordered list of (variant key, extension)
pairs and takes the first file that exists.  When none does, it renders one
of the four generic defaults so the user always gets a working component.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from pydantic import BaseModel, Field

from .extensions import default_source_extension
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Variant keys and search order
# ---------------------------------------------------------------------------

TAILWIND_TS = "tailwind-ts"
TAILWIND = "tailwind"
NON_TAILWIND_TS = "non-tailwind-ts"
NON_TAILWIND = "non-tailwind"

TYPED_TEMPLATE_EXTENSIONS: tuple[str, ...] = (".tsx", ".ts", ".js")
UNTYPED_TEMPLATE_EXTENSIONS: tuple[str, ...] = (".js",)

_CSS_CLASS_RE = re.compile(r"\.(\w+)\s*\{")


def variant_key(uses_style_framework: bool, uses_static_types: bool) -> str:
    """The directory key matching both axes exactly."""
    if uses_style_framework:
        return TAILWIND_TS if uses_static_types else TAILWIND
    return NON_TAILWIND_TS if uses_static_types else NON_TAILWIND


def candidate_keys(uses_style_framework: bool, uses_static_types: bool) -> list[str]:
    """Variant keys to try, best match first, without duplicates."""
    ordered = [variant_key(uses_style_framework, uses_static_types)]
    if uses_static_types:
        ordered += [TAILWIND_TS, NON_TAILWIND_TS]
    ordered += [TAILWIND, NON_TAILWIND]

    keys: list[str] = []
    for key in ordered:
        if key not in keys:
            keys.append(key)
    return keys


def template_search_order(
    uses_style_framework: bool, uses_static_types: bool
) -> list[tuple[str, str]]:
    """Every (variant key, template extension) pair in lookup order."""
    extensions = TYPED_TEMPLATE_EXTENSIONS if uses_static_types else UNTYPED_TEMPLATE_EXTENSIONS
    return [
        (key, ext)
        for key in candidate_keys(uses_style_framework, uses_static_types)
        for ext in extensions
    ]


def default_template_name(uses_style_framework: bool, uses_static_types: bool) -> str:
    """Name of the synthesized body for an axis combination."""
    style = "tailwind" if uses_style_framework else "css-modules"
    lang = "tsx" if uses_static_types else "js"
    return f"component.{style}.{lang}.j2"


def stylesheet_class_names(css: str) -> list[str]:
    """Class selectors (``.name {``) in *css*, deduplicated in first-seen order."""
    names: list[str] = []
    for name in _CSS_CLASS_RE.findall(css):
        if name not in names:
            names.append(name)
    return names


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ResolvedTemplate(BaseModel):
    """Files to write into a component directory."""

    display_name: str
    files: dict[str, str] = Field(default_factory=dict)
    variant: str | None = Field(
        default=None, description="Matched variant key; None when synthesized"
    )
    template_path: Path | None = None

    @property
    def synthesized(self) -> bool:
        return self.variant is None


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class TemplateResolver:
    """Picks and loads the template files for one component."""

    def __init__(
        self,
        template_dir: str | Path,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.template_dir = Path(template_dir)
        self.renderer = renderer or TemplateRenderer()

    def find_template(
        self, display_name: str, uses_style_framework: bool, uses_static_types: bool
    ) -> tuple[str, Path] | None:
        """First existing template file along the search order."""
        for key, ext in template_search_order(uses_style_framework, uses_static_types):
            path = self.template_dir / key / f"{display_name}{ext}"
            if path.is_file():
                return key, path
        return None

    def resolve(
        self,
        display_name: str,
        uses_style_framework: bool,
        uses_static_types: bool,
        source_extension: str | None = None,
    ) -> ResolvedTemplate:
        """Build the file mapping for *display_name*.

        Args:
            display_name: PascalCase component name.
            uses_style_framework: Tailwind detected in the host project.
            uses_static_types: TypeScript syntax may be emitted.
            source_extension: Extension for the component file; defaults to
                ``.tsx`` when typed and ``.js`` otherwise.

        Returns:
            A ``ResolvedTemplate`` whose ``files`` map file names (relative to
            the component directory) to content.
        """
        source_extension = source_extension or default_source_extension(uses_static_types)
        context = {"name": display_name}

        found = self.find_template(display_name, uses_style_framework, uses_static_types)
        if found is not None:
            variant, template_path = found
            component = template_path.read_text(encoding="utf-8")
        else:
            variant, template_path = None, None
            component = self.renderer.render(
                default_template_name(uses_style_framework, uses_static_types), context
            )

        result = ResolvedTemplate(
            display_name=display_name,
            variant=variant,
            template_path=template_path,
        )
        result.files[f"{display_name}{source_extension}"] = component

        if not uses_style_framework:
            stylesheet_name = f"{display_name}.module.css"
            stylesheet = None
            if template_path is not None:
                companion = template_path.parent / stylesheet_name
                if companion.is_file():
                    stylesheet = companion.read_text(encoding="utf-8")
            if stylesheet is None:
                stylesheet = self.renderer.render("stylesheet.module.css.j2", context)
            result.files[stylesheet_name] = stylesheet

            if uses_static_types:
                result.files[f"{stylesheet_name}.d.ts"] = self.renderer.render(
                    "stylesheet.d.ts.j2",
                    {"class_names": stylesheet_class_names(stylesheet)},
                )

        return result

    async def aresolve(
        self,
        display_name: str,
        uses_style_framework: bool,
        uses_static_types: bool,
        source_extension: str | None = None,
    ) -> ResolvedTemplate:
        """``resolve`` off the event loop."""
        return await asyncio.to_thread(
            self.resolve,
            display_name,
            uses_style_framework,
            uses_static_types,
            source_extension,
        )
