"""Yureka UI configuration.

Typed settings for a single CLI invocation.  Nothing here describes the host
project's styling or typing setup; that is re-detected by ``yureka.probe`` on
every run.  This model only says *where* to look and *where* to write.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_PACKAGE_TEMPLATE_DIR = Path(__file__).parent / "templates"

PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")


class Config(BaseModel):
    """Settings for one ``yureka`` invocation.

    Instances are created by the CLI entry point (or by tests) and passed to
    the commands.
    """

    project_root: Path = Field(default_factory=Path.cwd)
    components_dir: str = Field(default="components")
    library_dir_name: str = Field(default="yureka-ui")
    template_dir: Path = Field(default=_PACKAGE_TEMPLATE_DIR)
    package_manager: str | None = Field(
        default=None,
        description="Force npm, yarn or pnpm instead of sniffing lock files",
    )
    assume_yes: bool = Field(default=False, description="Answer yes to confirmations")
    install_dependencies: bool = Field(
        default=True,
        description="Install runtime packages a component needs when they are missing",
    )

    @field_validator("package_manager")
    @classmethod
    def _known_package_manager(cls, value: str | None) -> str | None:
        if value is not None and value not in PACKAGE_MANAGERS:
            raise ValueError(
                f"Unsupported package manager {value!r}; "
                f"expected one of {', '.join(PACKAGE_MANAGERS)}"
            )
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def package_json_path(self) -> Path:
        """The host project's ``package.json``."""
        return self.project_root / "package.json"

    @property
    def components_root(self) -> Path:
        """``components/``; its files decide the sticky source extension."""
        return self.project_root / self.components_dir

    @property
    def library_dir(self) -> Path:
        """``components/yureka-ui/``, the generated root."""
        return self.components_root / self.library_dir_name

    @property
    def settings_path(self) -> Path:
        """``yureka.config.json`` written by ``yureka init``."""
        return self.library_dir / "yureka.config.json"

    def component_dir(self, display_name: str) -> Path:
        """Install directory for one component."""
        return self.library_dir / display_name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            YUREKA_PROJECT_ROOT, YUREKA_TEMPLATE_DIR, YUREKA_PACKAGE_MANAGER.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("YUREKA_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["YUREKA_PROJECT_ROOT"])
        if os.environ.get("YUREKA_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["YUREKA_TEMPLATE_DIR"])
        if os.environ.get("YUREKA_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["YUREKA_PACKAGE_MANAGER"]
        return cls(**kwargs)
