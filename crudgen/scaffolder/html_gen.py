"""Browser-facing CRUD artifact generation.

Renders, for a model ``<Name>`` with route prefix ``<plural>``:

- ``app/Http/Requests/Store<Name>Request.php`` and ``Update<Name>Request.php``
- ``app/Http/Controllers/<Name>Controller.php``
- ``resources/views/<plural>/{index,create,edit,show}.blade.php``

and the ``Route::resource`` declaration for ``routes/web.php``.
"""

from __future__ import annotations

from typing import Any

from crudgen.config import Config
from crudgen.schema.models import ModelDescriptor, RuleTable
from crudgen.utils import route_name

from .context import Artifact, build_context
from .templates import TemplateRenderer


_VIEWS = ("index", "create", "edit", "show")


class HtmlCrudGenerator:
    """Renders requests, controller and Blade views for a model."""

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    def render_requests(self, context: dict[str, Any]) -> list[Artifact]:
        """Render the Store and Update form requests (identical rule sets)."""
        name = context["name"]
        artifacts = []
        for action in ("Store", "Update"):
            class_name = f"{action}{name}Request"
            content = self.renderer.render(
                "shared/request.php.j2",
                {**context, "namespace": "App\\Http\\Requests", "class_name": class_name},
            )
            artifacts.append(
                Artifact(path=self.config.requests_dir / f"{class_name}.php", content=content)
            )
        return artifacts

    def render_controller(self, context: dict[str, Any]) -> Artifact:
        """Render the resource controller."""
        return Artifact(
            path=self.config.controllers_dir / f"{context['name']}Controller.php",
            content=self.renderer.render("html/controller.php.j2", context),
        )

    def render_views(self, context: dict[str, Any]) -> list[Artifact]:
        """Render the index, create, edit and show Blade views."""
        view_dir = self.config.views_dir / context["plural"]
        return [
            Artifact(
                path=view_dir / f"{view}.blade.php",
                content=self.renderer.render(f"html/{view}.blade.php.j2", context),
            )
            for view in _VIEWS
        ]

    def render_all(self, descriptor: ModelDescriptor, rule_table: RuleTable) -> list[Artifact]:
        """Render every HTML artifact, in request/controller/view order."""
        context = build_context(descriptor, rule_table, self.config.per_page)
        return [
            *self.render_requests(context),
            self.render_controller(context),
            *self.render_views(context),
        ]


def web_route_declaration(model_name: str) -> str:
    """Return the ``Route::resource`` line for *model_name*."""
    return (
        f"Route::resource('{route_name(model_name)}', "
        f"App\\Http\\Controllers\\{model_name}Controller::class);"
    )
