"""Jinja2 template rendering for CRUD scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``crudgen/scaffolder/templates/`` directory and renders them with
model-specific context data.

The generated files are PHP and Blade, and Blade already uses ``{{ }}`` for
its own echo statements.  Template variables are therefore delimited with
``[[ ]]``; block tags keep the standard ``{% %}`` syntax.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def php_single_quoted(value: Any) -> str:
    """Escape *value* for use inside a PHP single-quoted string literal."""
    return str(value).replace("\\", "\\\\").replace("'", "\\'")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for CRUD scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary
    built by :func:`crudgen.scaffolder.context.build_context`.

    Output is not auto-escaped.  Values placed inside PHP string literals go
    through the ``php`` filter; values placed in HTML go through ``e``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            undefined=StrictUndefined,
            variable_start_string="[[",
            variable_end_string="]]",
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["php"] = php_single_quoted

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"html/controller.php.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)
