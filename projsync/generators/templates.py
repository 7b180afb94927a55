"""Jinja2 template rendering for generated files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``projsync/generators/templates/`` directory and renders them with
project-specific context data.  Rendering only produces text; writing the
result is left to the caller so that every file goes through the
content-comparing writer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..utils import escape_c_string


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated headers and build files.

    The renderer loads ``.j2`` template files from a configurable template
    directory.  Output is C/C++ source and build files, so no HTML escaping
    is applied.  Undefined template variables raise
    ``jinja2.UndefinedError`` rather than rendering as empty text.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["c_string"] = _c_string_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"exporters/Makefile.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _c_string_filter(value: Any) -> str:
    """Render *value* as a quoted, escaped C string literal."""
    return f'"{escape_c_string(str(value))}"'
