"""The fixed catalog of components Yureka UI can scaffold.

Both ``yureka add`` and ``yureka remove`` resolve identifiers through
``CATALOG`` so a component is always installed and removed under the same
display name.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


class ComponentInfo(BaseModel):
    """Descriptor for a single catalog entry."""

    model_config = ConfigDict(frozen=True)

    display_name: str = Field(..., description="PascalCase name used for files and exports")
    description: str = Field(default="")
    dependencies: tuple[str, ...] = Field(
        default=("react",),
        description="Runtime packages the generated component imports",
    )


CATALOG: Mapping[str, ComponentInfo] = MappingProxyType(
    {
        "button": ComponentInfo(
            display_name="Button",
            description="A customizable button component with various styles and states",
        ),
        "card": ComponentInfo(
            display_name="Card",
            description="A container component for organizing related content",
        ),
        "input": ComponentInfo(
            display_name="Input",
            description="Text input field with validation support",
        ),
        "select": ComponentInfo(
            display_name="Select",
            description="Dropdown select component with various options",
        ),
        "checkbox": ComponentInfo(
            display_name="Checkbox",
            description="Checkbox input component with customizable styles",
        ),
        "toggle": ComponentInfo(
            display_name="Toggle",
            description="Switch/toggle component for boolean inputs",
        ),
        "modal": ComponentInfo(
            display_name="Modal",
            description="Popup modal dialog component",
        ),
        "toast": ComponentInfo(
            display_name="Toast",
            description="Notification toast component for alerts and messages",
        ),
    }
)


def lookup(identifier: str) -> ComponentInfo | None:
    """Return the catalog entry for *identifier* (case-insensitive)."""
    return CATALOG.get(identifier.strip().lower())


def identifier_for(display_name: str) -> str | None:
    """Reverse lookup: catalog identifier for a PascalCase display name."""
    for key, info in CATALOG.items():
        if info.display_name == display_name:
            return key
    return None


def describe(display_name: str) -> str:
    """Description for an installed directory, or ``"Custom component"``."""
    key = identifier_for(display_name)
    if key is None:
        return "Custom component"
    return CATALOG[key].description
