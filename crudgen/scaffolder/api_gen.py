"""JSON API CRUD artifact generation.

Renders, for a model ``<Name>``:

- ``app/Http/Resources/Api/<Name>/<Name>Resource.php``
- ``app/Http/Requests/Api/<Name>/{Store,Update}<Name>Request.php``
- ``app/Http/Controllers/Api/<Name>/<Name>Controller.php``

and the ``Route::apiResource`` declaration for ``routes/api.php``.
"""

from __future__ import annotations

from typing import Any

from crudgen.config import Config
from crudgen.schema.models import ModelDescriptor, RuleTable
from crudgen.utils import route_name

from .context import Artifact, build_context
from .templates import TemplateRenderer


class ApiCrudGenerator:
    """Renders the resource transformer, requests and API controller for a model."""

    def __init__(self, renderer: TemplateRenderer, config: Config) -> None:
        self.renderer = renderer
        self.config = config

    def render_resource(self, context: dict[str, Any]) -> Artifact:
        """Render the JSON resource (fields plus timestamps)."""
        name = context["name"]
        return Artifact(
            path=self.config.resources_dir / "Api" / name / f"{name}Resource.php",
            content=self.renderer.render("api/resource.php.j2", context),
        )

    def render_requests(self, context: dict[str, Any]) -> list[Artifact]:
        """Render the Store and Update form requests under ``Requests/Api/<Name>``."""
        name = context["name"]
        artifacts = []
        for action in ("Store", "Update"):
            class_name = f"{action}{name}Request"
            content = self.renderer.render(
                "shared/request.php.j2",
                {
                    **context,
                    "namespace": f"App\\Http\\Requests\\Api\\{name}",
                    "class_name": class_name,
                },
            )
            artifacts.append(
                Artifact(
                    path=self.config.requests_dir / "Api" / name / f"{class_name}.php",
                    content=content,
                )
            )
        return artifacts

    def render_controller(self, context: dict[str, Any]) -> Artifact:
        """Render the API controller."""
        name = context["name"]
        return Artifact(
            path=self.config.controllers_dir / "Api" / name / f"{name}Controller.php",
            content=self.renderer.render("api/controller.php.j2", context),
        )

    def render_all(self, descriptor: ModelDescriptor, rule_table: RuleTable) -> list[Artifact]:
        """Render every API artifact, in resource/request/controller order."""
        context = build_context(descriptor, rule_table, self.config.per_page)
        return [
            self.render_resource(context),
            *self.render_requests(context),
            self.render_controller(context),
        ]


def api_route_declaration(model_name: str) -> str:
    """Return the ``Route::apiResource`` line for *model_name*."""
    return (
        f"Route::apiResource('{route_name(model_name)}', "
        f"App\\Http\\Controllers\\Api\\{model_name}\\{model_name}Controller::class);"
    )
