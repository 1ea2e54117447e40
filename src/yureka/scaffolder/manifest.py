"""Barrel file maintenance for ``components/yureka-ui/index.*``.

The manifest is edited line by line.  Each export line is parsed and compared
on its exported identifier, so removing ``Button`` never touches
``ButtonGroup``.  The pure functions operate on strings; ``ManifestSynchronizer``
adds the file I/O.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

MANIFEST_HEADER = (
    "// Yureka UI Components\n"
    "// This file is automatically generated for all UI components\n"
)

_EXPORT_RE = re.compile(
    r"""^\s*export\s*\{\s*default\s+as\s+(?P<name>[A-Za-z_$][\w$]*)\s*\}"""
    r"""\s*from\s*(?P<quote>['"])\./(?P<path>[^'"]+)(?P=quote)\s*;?\s*$"""
)


def export_line(display_name: str) -> str:
    """The canonical export line for one component (with newline)."""
    return f"export {{ default as {display_name} }} from './{display_name}';\n"


def exported_name(line: str) -> str | None:
    """Identifier re-exported by *line*, or ``None`` for any other line."""
    match = _EXPORT_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    return match.group("name")


def parse_entries(content: str) -> list[str]:
    """Exported component names in file order."""
    names: list[str] = []
    for line in content.splitlines():
        name = exported_name(line)
        if name is not None:
            names.append(name)
    return names


def add_export_line(content: str, display_name: str) -> str:
    """Return *content* with an export for *display_name* appended.

    Idempotent: content that already exports the name is returned unchanged.
    Empty content starts from ``MANIFEST_HEADER``.  A missing final newline
    is added before the new line and stays in place if the entry is removed
    again, so ``remove_export_lines`` only restores the input byte for byte
    when it ended with a newline.
    """
    if display_name in parse_entries(content):
        return content
    if not content:
        content = MANIFEST_HEADER
    elif not content.endswith("\n"):
        content += "\n"
    return content + export_line(display_name)


def remove_export_lines(content: str, display_name: str) -> str:
    """Return *content* without the export line(s) for *display_name*."""
    kept = [
        line
        for line in content.splitlines(keepends=True)
        if exported_name(line) != display_name
    ]
    return "".join(kept)


class ManifestSynchronizer:
    """Reads and rewrites a manifest file on disk."""

    async def read(self, manifest_path: str | Path) -> str:
        """Current manifest content; empty string if the file is absent."""
        path = Path(manifest_path)
        return await asyncio.to_thread(_read_if_exists, path)

    async def add_entry(self, manifest_path: str | Path, display_name: str) -> bool:
        """Append an export for *display_name*; ``True`` if the file changed."""
        path = Path(manifest_path)
        current = await self.read(path)
        updated = add_export_line(current, display_name)
        if updated == current and path.exists():
            return False
        await asyncio.to_thread(_write_file, path, updated)
        return True

    async def remove_entry(self, manifest_path: str | Path, display_name: str) -> list[str]:
        """Drop the export for *display_name* and return the remaining names.

        An empty result means no components are left in the manifest.  A
        missing manifest is left alone.
        """
        path = Path(manifest_path)
        if not path.exists():
            return []
        current = await self.read(path)
        updated = remove_export_lines(current, display_name)
        if updated != current:
            await asyncio.to_thread(_write_file, path, updated)
        return parse_entries(updated)

    async def ensure(self, manifest_path: str | Path) -> bool:
        """Create the manifest with only the header if it does not exist."""
        path = Path(manifest_path)
        if path.exists():
            return False
        await asyncio.to_thread(_write_file, path, MANIFEST_HEADER)
        return True


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _read_if_exists(path: Path) -> str:
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
