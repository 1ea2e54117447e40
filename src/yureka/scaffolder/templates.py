"""Jinja2 rendering for synthesized component files.

When no on-disk template exists for a component, the resolver falls back to
the generic bodies kept in ``src/yureka/scaffolder/defaults/``.  They are
rendered here with the component's display name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "defaults"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the ``.j2`` fallback bodies.

    Templates are rendered with a context that holds at least ``name`` (the
    PascalCase display name).  Undefined variables raise instead of rendering
    as empty strings, so a broken default never reaches a user's project.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template relative to the template directory."""
        template = self.env.get_template(template_path)
        return template.render(**context)
