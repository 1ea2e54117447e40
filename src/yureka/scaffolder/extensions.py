"""File extension policy for generated component files.

The source extension is sticky: once a project has settled on ``.tsx``,
``.ts`` or ``.jsx`` files in its components root, new components follow that
convention instead of the plain typed/untyped default.
"""

from __future__ import annotations

from pathlib import Path

TYPED_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx")
MANIFEST_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")


def default_source_extension(uses_static_types: bool) -> str:
    return ".tsx" if uses_static_types else ".js"


def choose_source_extension(components_root: str | Path, uses_static_types: bool) -> str:
    """Pick the extension for new component source files.

    Only regular files directly inside *components_root* are considered.  A
    missing or unreadable directory yields the default for the type mode.
    """
    root = Path(components_root)
    try:
        names = [entry.name for entry in root.iterdir() if entry.is_file()]
    except OSError:
        return default_source_extension(uses_static_types)

    def _has(ext: str) -> bool:
        return any(name.endswith(ext) for name in names)

    if uses_static_types and _has(".tsx"):
        return ".tsx"
    if uses_static_types and _has(".ts"):
        return ".ts"
    if _has(".jsx"):
        return ".jsx"
    return default_source_extension(uses_static_types)


def choose_manifest_extension(source_extension: str) -> str:
    """Markup-capable extensions are reused; anything else becomes ``.js``."""
    if "x" in source_extension:
        return source_extension
    return ".js"


def is_typed_extension(extension: str) -> bool:
    return extension in TYPED_EXTENSIONS


def find_manifest(library_dir: str | Path) -> Path | None:
    """Return the existing ``index.*`` barrel file in *library_dir*, if any."""
    base = Path(library_dir)
    for ext in MANIFEST_EXTENSIONS:
        candidate = base / f"index{ext}"
        if candidate.is_file():
            return candidate
    return None
