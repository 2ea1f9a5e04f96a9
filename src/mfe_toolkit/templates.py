"""Jinja2 rendering for generated documents.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``mfe_toolkit/templates/`` directory and renders them with per-microfrontend
context data.  Microfrontend source templates are *not* rendered here: they
use literal ``{{TOKEN}}`` substitution (see
:mod:`mfe_toolkit.scaffolder.placeholders`) because their JSX would clash
with Jinja2 syntax.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the toolkit's bundled ``.j2`` templates.

    Undefined variables raise instead of rendering empty, so a missing
    context key cannot silently produce a broken document.
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
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"integration_checklist.md.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)
