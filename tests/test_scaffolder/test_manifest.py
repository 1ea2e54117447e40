"""Tests for barrel file maintenance (yureka.scaffolder.manifest).

Covers:
- export line parsing (exact identifiers only)
- idempotent add, header creation, newline repair
- exact-match removal (Button vs ButtonGroup / ButtonIcon)
- add/remove round trip
- ManifestSynchronizer file I/O and the teardown signal
"""

from __future__ import annotations

from pathlib import Path

import pytest

from yureka.scaffolder.manifest import (
    MANIFEST_HEADER,
    ManifestSynchronizer,
    add_export_line,
    export_line,
    exported_name,
    parse_entries,
    remove_export_lines,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestExportedName:
    def test_canonical_line(self):
        assert exported_name("export { default as Button } from './Button';") == "Button"

    def test_double_quotes_and_no_semicolon(self):
        assert exported_name('export {default as Card} from "./Card"') == "Card"

    def test_trailing_newline(self):
        assert exported_name("export { default as Modal } from './Modal';\n") == "Modal"

    def test_comment_is_not_an_entry(self):
        assert exported_name("// Yureka UI Components") is None

    def test_named_export_is_not_an_entry(self):
        assert exported_name("export { helper } from './helper';") is None

    def test_canonical_line_round_trips(self):
        assert exported_name(export_line("Toast")) == "Toast"


class TestParseEntries:
    def test_header_only(self):
        assert parse_entries(MANIFEST_HEADER) == []

    def test_file_order(self):
        content = MANIFEST_HEADER + export_line("Card") + export_line("Button")
        assert parse_entries(content) == ["Card", "Button"]


# ---------------------------------------------------------------------------
# Adding
# ---------------------------------------------------------------------------


class TestAddExportLine:
    def test_empty_content_gets_header(self):
        result = add_export_line("", "Button")
        assert result == MANIFEST_HEADER + "export { default as Button } from './Button';\n"

    def test_idempotent(self):
        once = add_export_line("", "Button")
        twice = add_export_line(once, "Button")
        assert twice == once
        assert twice.count("default as Button }") == 1

    def test_appends_in_order(self):
        content = add_export_line(add_export_line("", "Card"), "Button")
        assert parse_entries(content) == ["Card", "Button"]

    def test_similar_name_does_not_block_add(self):
        content = add_export_line("", "ButtonGroup")
        content = add_export_line(content, "Button")
        assert parse_entries(content) == ["ButtonGroup", "Button"]

    def test_repairs_missing_trailing_newline(self):
        content = "// custom header"
        result = add_export_line(content, "Card")
        assert result == "// custom header\nexport { default as Card } from './Card';\n"


# ---------------------------------------------------------------------------
# Removing
# ---------------------------------------------------------------------------


class TestRemoveExportLines:
    def test_exact_match_only(self):
        content = (
            MANIFEST_HEADER
            + export_line("ButtonGroup")
            + export_line("Button")
            + export_line("ButtonIcon")
        )
        result = remove_export_lines(content, "Button")
        assert parse_entries(result) == ["ButtonGroup", "ButtonIcon"]

    def test_removes_duplicates(self):
        content = MANIFEST_HEADER + export_line("Card") + export_line("Card")
        assert parse_entries(remove_export_lines(content, "Card")) == []

    def test_missing_name_is_noop(self):
        content = MANIFEST_HEADER + export_line("Card")
        assert remove_export_lines(content, "Modal") == content

    def test_keeps_non_export_lines(self):
        content = MANIFEST_HEADER + "// keep me\n" + export_line("Card")
        result = remove_export_lines(content, "Card")
        assert result == MANIFEST_HEADER + "// keep me\n"

    def test_round_trip_restores_content(self):
        original = MANIFEST_HEADER + export_line("Card") + export_line("Modal")
        added = add_export_line(original, "Button")
        assert remove_export_lines(added, "Button") == original

    def test_round_trip_keeps_repaired_newline(self):
        original = "// hdr\n" + export_line("Card").rstrip("\n")
        added = add_export_line(original, "Button")
        restored = remove_export_lines(added, "Button")
        assert restored == original + "\n"
        assert parse_entries(restored) == ["Card"]


# ---------------------------------------------------------------------------
# ManifestSynchronizer
# ---------------------------------------------------------------------------


class TestManifestSynchronizer:
    @pytest.mark.asyncio
    async def test_add_creates_file(self, tmp_path: Path):
        path = tmp_path / "index.js"
        sync = ManifestSynchronizer()
        assert await sync.add_entry(path, "Button") is True
        assert path.read_text(encoding="utf-8") == MANIFEST_HEADER + export_line("Button")

    @pytest.mark.asyncio
    async def test_add_twice_writes_once(self, tmp_path: Path):
        path = tmp_path / "index.js"
        sync = ManifestSynchronizer()
        await sync.add_entry(path, "Button")
        assert await sync.add_entry(path, "Button") is False
        assert parse_entries(path.read_text(encoding="utf-8")) == ["Button"]

    @pytest.mark.asyncio
    async def test_remove_returns_remaining(self, tmp_path: Path):
        path = tmp_path / "index.tsx"
        sync = ManifestSynchronizer()
        await sync.add_entry(path, "Button")
        await sync.add_entry(path, "ButtonGroup")
        remaining = await sync.remove_entry(path, "Button")
        assert remaining == ["ButtonGroup"]
        assert "default as Button }" not in path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_remove_last_entry_signals_empty(self, tmp_path: Path):
        path = tmp_path / "index.js"
        sync = ManifestSynchronizer()
        await sync.add_entry(path, "Button")
        assert await sync.remove_entry(path, "Button") == []
        assert path.read_text(encoding="utf-8") == MANIFEST_HEADER

    @pytest.mark.asyncio
    async def test_remove_from_missing_file(self, tmp_path: Path):
        path = tmp_path / "index.js"
        assert await ManifestSynchronizer().remove_entry(path, "Button") == []
        assert not path.exists()

    @pytest.mark.asyncio
    async def test_ensure_writes_header_once(self, tmp_path: Path):
        path = tmp_path / "index.js"
        sync = ManifestSynchronizer()
        assert await sync.ensure(path) is True
        path.write_text(MANIFEST_HEADER + export_line("Card"), encoding="utf-8")
        assert await sync.ensure(path) is False
        assert parse_entries(path.read_text(encoding="utf-8")) == ["Card"]
