"""Yureka UI scaffolder -- template resolution and project adaptation.

Decides which template variant a component gets, how its files are named,
and keeps the ``components/yureka-ui/index.*`` barrel file in sync.

Quick usage::

    from yureka.scaffolder import TemplateResolver

    resolver = TemplateResolver(config.template_dir)
    resolved = resolver.resolve("Button", uses_style_framework=False,
                                uses_static_types=True)
    resolved.files  # {"Button.tsx": ..., "Button.module.css": ..., ...}
"""

from yureka.scaffolder.extensions import (
    choose_manifest_extension,
    choose_source_extension,
    find_manifest,
    is_typed_extension,
)
from yureka.scaffolder.manifest import ManifestSynchronizer
from yureka.scaffolder.resolver import ResolvedTemplate, TemplateResolver
from yureka.scaffolder.templates import TemplateRenderer

__all__ = [
    "ManifestSynchronizer",
    "ResolvedTemplate",
    "TemplateRenderer",
    "TemplateResolver",
    "choose_manifest_extension",
    "choose_source_extension",
    "find_manifest",
    "is_typed_extension",
]
