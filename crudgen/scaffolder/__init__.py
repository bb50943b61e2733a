"""crudgen scaffolder -- renders CRUD artifacts for a resolved model.

Quick usage::

    from crudgen.scaffolder import HtmlCrudGenerator, TemplateRenderer

    generator = HtmlCrudGenerator(TemplateRenderer(), config)
    artifacts = generator.render_all(descriptor, rule_table)
    write_artifacts(artifacts)
    register_route(config.web_routes_path, web_route_declaration("Product"))
"""

from crudgen.scaffolder.api_gen import ApiCrudGenerator, api_route_declaration
from crudgen.scaffolder.context import Artifact, build_context, write_artifacts
from crudgen.scaffolder.html_gen import HtmlCrudGenerator, web_route_declaration
from crudgen.scaffolder.routes import RouteRegistry, register_route
from crudgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ApiCrudGenerator",
    "Artifact",
    "HtmlCrudGenerator",
    "RouteRegistry",
    "TemplateRenderer",
    "api_route_declaration",
    "build_context",
    "register_route",
    "web_route_declaration",
    "write_artifacts",
]
