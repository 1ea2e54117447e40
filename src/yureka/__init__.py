"""Yureka UI -- copy ready-made React components into a Next.js project.

The package detects whether the host project uses Tailwind CSS and
TypeScript, picks the matching component template, writes it under
``components/yureka-ui/`` and keeps the barrel ``index`` file up to date.
"""

__version__ = "0.3.0"
