"""Shared pytest fixtures for the Yureka UI test suite.

Provides reusable fixtures for:
- Temporary host projects (typed / untyped, Tailwind / CSS modules)
- A ``Config`` pointing at such a project
- Scripted prompts and a recording package installer
- An empty template directory to force synthesized defaults
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from yureka.config import Config
from yureka.prompts import Choice, Prompter


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class ScriptedPrompter(Prompter):
    """Answers prompts from pre-seeded queues and records what was asked."""

    def __init__(
        self,
        selections: list[str | None] | None = None,
        confirms: list[bool] | None = None,
    ) -> None:
        self.selections = list(selections or [])
        self.confirms = list(confirms or [])
        self.select_calls: list[tuple[str, list[Choice]]] = []
        self.confirm_calls: list[str] = []

    def select(self, message: str, choices: list[Choice]) -> str | None:
        self.select_calls.append((message, choices))
        if not self.selections:
            return None
        return self.selections.pop(0)

    def confirm(self, message: str, default: bool = False) -> bool:
        self.confirm_calls.append(message)
        if not self.confirms:
            return default
        return self.confirms.pop(0)


class RecordingInstaller:
    """Stands in for ``PackageInstaller``; remembers requested packages."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []

    async def install(self, packages: list[str]) -> None:
        self.calls.append(list(packages))


# ---------------------------------------------------------------------------
# Host project builders
# ---------------------------------------------------------------------------


def write_package_json(root: Path, dependencies: dict[str, str] | None = None,
                       dev_dependencies: dict[str, str] | None = None) -> Path:
    payload: dict[str, Any] = {
        "name": "host-app",
        "version": "0.1.0",
        "dependencies": {"next": "14.2.0", "react": "18.3.1", **(dependencies or {})},
        "devDependencies": dict(dev_dependencies or {}),
    }
    path = root / "package.json"
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def host_project(tmp_path: Path) -> Path:
    """Untyped, unstyled Next.js project with Yureka UI initialized."""
    root = tmp_path / "host-app"
    root.mkdir()
    write_package_json(root)
    (root / "components" / "yureka-ui").mkdir(parents=True)
    return root


@pytest.fixture
def typed_unstyled_project(tmp_path: Path) -> Path:
    """TypeScript project styled with CSS modules and no components yet."""
    root = tmp_path / "typed-plain-app"
    root.mkdir()
    write_package_json(root, dev_dependencies={"typescript": "5.4.0"})
    (root / "tsconfig.json").write_text("{}", encoding="utf-8")
    (root / "components" / "yureka-ui").mkdir(parents=True)
    return root


@pytest.fixture
def typed_styled_project(tmp_path: Path) -> Path:
    """TypeScript + Tailwind project with existing ``.tsx`` components."""
    root = tmp_path / "typed-app"
    root.mkdir()
    write_package_json(
        root,
        dev_dependencies={"typescript": "5.4.0", "tailwindcss": "3.4.0"},
    )
    (root / "tsconfig.json").write_text("{}", encoding="utf-8")
    components = root / "components"
    (components / "yureka-ui").mkdir(parents=True)
    (components / "Header.tsx").write_text("export default function Header() {}\n")
    return root


@pytest.fixture
def empty_template_dir(tmp_path: Path) -> Path:
    """A template directory with no component templates at all."""
    path = tmp_path / "no-templates"
    path.mkdir()
    return path


@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def make_prompter():
    """Factory: ``make_prompter(selections=[...], confirms=[...])``."""
    return ScriptedPrompter


@pytest.fixture
def installer() -> RecordingInstaller:
    return RecordingInstaller()


@pytest.fixture
def make_config():
    """Factory: ``make_config(root, **overrides)`` -> ``Config``."""

    def _make(root: Path, **overrides: Any) -> Config:
        return Config(project_root=root, **overrides)

    return _make
