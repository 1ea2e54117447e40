"""Unit tests for the component catalog (yureka.catalog)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from yureka.catalog import CATALOG, ComponentInfo, describe, identifier_for, lookup

pytestmark = pytest.mark.unit


class TestCatalog:
    def test_identifiers(self):
        assert list(CATALOG) == [
            "button", "card", "input", "select", "checkbox", "toggle", "modal", "toast",
        ]

    def test_display_names_are_pascal_case(self):
        for key, info in CATALOG.items():
            assert info.display_name == key.capitalize()

    def test_every_entry_needs_react(self):
        for info in CATALOG.values():
            assert "react" in info.dependencies
            assert info.description

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            CATALOG["accordion"] = ComponentInfo(display_name="Accordion")  # type: ignore[index]

    def test_entries_are_frozen(self):
        with pytest.raises(ValidationError):
            CATALOG["button"].display_name = "Other"  # type: ignore[misc]


class TestLookup:
    @pytest.mark.parametrize("identifier", ["button", "Button", "  BUTTON "])
    def test_case_insensitive(self, identifier):
        assert lookup(identifier).display_name == "Button"

    def test_unknown(self):
        assert lookup("accordion") is None

    def test_identifier_for(self):
        assert identifier_for("Modal") == "modal"
        assert identifier_for("modal") is None
        assert identifier_for("Avatar") is None

    def test_describe(self):
        assert describe("Toast").startswith("Notification toast")
        assert describe("Avatar") == "Custom component"
