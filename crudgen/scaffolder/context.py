"""Template context building and artifact writing.

Everything a template needs is computed here as plain data, so the
templates themselves only substitute values and include partials.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel

from crudgen.schema.models import ModelDescriptor, RuleTable
from crudgen.utils import headline, route_name, write_file


WIDGETS: dict[str, tuple[str, str]] = {
    # kind -> (create partial, edit partial)
    "select": ("html/partials/create_select.blade.php.j2", "html/partials/edit_select.blade.php.j2"),
    "input": ("html/partials/create_input.blade.php.j2", "html/partials/edit_input.blade.php.j2"),
}


class Artifact(BaseModel):
    """One rendered file and the path it is written to."""
    path: Path
    content: str


def build_context(
    descriptor: ModelDescriptor,
    rule_table: RuleTable,
    per_page: int = 10,
) -> dict[str, Any]:
    """Build the Jinja2 context for a model.

    Fields are listed in ``rule_table`` order, which is the model's declared
    field order.
    """
    enums = rule_table.enums()
    rules = rule_table.rules()
    fields = []
    for name in rule_table.fields:
        enum = enums.get(name)
        options = []
        if enum is not None:
            options = [
                {
                    "value": value,
                    "attr": " selected" if value == enum.default else "",
                }
                for value in enum.values
            ]
        widget = "select" if enum is not None else "input"
        fields.append({
            "name": name,
            "label": headline(name),
            "rule": rules[name],
            "widget": widget,
            "create_widget": WIDGETS[widget][0],
            "edit_widget": WIDGETS[widget][1],
            "options": options,
        })

    return {
        "name": descriptor.name,
        "plural": route_name(descriptor.name),
        "per_page": per_page,
        "fields": fields,
    }


def write_artifacts(artifacts: list[Artifact]) -> list[Path]:
    """Write every artifact, overwriting existing files."""
    return [write_file(artifact.path, artifact.content) for artifact in artifacts]
