"""crudgen commands and CLI entry point.

Implements the two generation commands:

make:crud            -- form requests, resource controller, Blade views and
                        a ``Route::resource`` line in ``routes/web.php``.
make:simple-api-crud -- JSON resource, form requests, API controller and a
                        ``Route::apiResource`` line in ``routes/api.php``.

A run resolves the model, builds the rule table, renders every artifact in
memory and only then writes files and registers the route.  Failures up to
that point leave the application untouched; failures after the first write
are not rolled back.

Usage::

    python -m crudgen make:crud Product --app-root ./my-app
    python -m crudgen make:simple-api-crud Product --models-file models.yaml
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from crudgen.config import Config
from crudgen.errors import CrudGenError
from crudgen.inference import RuleSetBuilder
from crudgen.scaffolder import (
    ApiCrudGenerator,
    Artifact,
    HtmlCrudGenerator,
    TemplateRenderer,
    api_route_declaration,
    register_route,
    web_route_declaration,
    write_artifacts,
)
from crudgen.schema.models import ModelDescriptor, RuleTable
from crudgen.utils import console, print_error, print_success, print_summary_table


class GenerationResult(BaseModel):
    """Outcome of a successful generation run."""
    model: str
    written: list[Path] = Field(default_factory=list)
    routes_file: Path
    route: str


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class GeneratorCommand:
    """Shared resolve -> build -> render -> write -> route pipeline."""

    signature = ""
    success_message = ""

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def render_artifacts(self, descriptor: ModelDescriptor, rule_table: RuleTable) -> list[Artifact]:
        raise NotImplementedError

    def route(self, name: str) -> tuple[Path, str]:
        raise NotImplementedError

    def run(self, name: str) -> GenerationResult:
        """Generate every artifact for model *name*.

        Raises:
            ModelNotFoundError: If the model cannot be resolved.
            NoWritableFieldsError: If the model has no writable fields.
            SchemaInspectionError: If the configured database cannot be read.
        """
        repository = self.config.model_repository()
        descriptor = repository.resolve(name)
        inspector = self.config.schema_inspector(repository)
        try:
            rule_table = RuleSetBuilder(inspector).build(descriptor)
        finally:
            inspector.close()
        artifacts = self.render_artifacts(descriptor, rule_table)

        written = write_artifacts(artifacts)
        routes_file, declaration = self.route(descriptor.name)
        register_route(routes_file, declaration)

        return GenerationResult(
            model=descriptor.name,
            written=written,
            routes_file=routes_file,
            route=declaration,
        )

    def handle(self, name: str) -> int:
        """Run the command and report the outcome; returns an exit status."""
        try:
            result = self.run(name)
        except CrudGenError as exc:
            print_error(str(exc))
            return 1

        root = self.config.app_root
        print_summary_table(
            {_relative(path, root): "written" for path in result.written}
            | {_relative(result.routes_file, root): "route registered"},
            title=f"{self.signature} {result.model}",
        )
        print_success(self.success_message.format(name=result.model))
        return 0


class CrudCommand(GeneratorCommand):
    """``make:crud``: browser-facing CRUD."""

    signature = "make:crud"
    success_message = "CRUD for {name} successfully generated!"

    def render_artifacts(self, descriptor: ModelDescriptor, rule_table: RuleTable) -> list[Artifact]:
        return HtmlCrudGenerator(self.renderer, self.config).render_all(descriptor, rule_table)

    def route(self, name: str) -> tuple[Path, str]:
        return self.config.web_routes_path, web_route_declaration(name)


class ApiCrudCommand(GeneratorCommand):
    """``make:simple-api-crud``: JSON API CRUD."""

    signature = "make:simple-api-crud"
    success_message = "API CRUD for {name} successfully generated!"

    def render_artifacts(self, descriptor: ModelDescriptor, rule_table: RuleTable) -> list[Artifact]:
        return ApiCrudGenerator(self.renderer, self.config).render_all(descriptor, rule_table)

    def route(self, name: str) -> tuple[Path, str]:
        return self.config.api_routes_path, api_route_declaration(name)


COMMANDS: dict[str, type[GeneratorCommand]] = {
    CrudCommand.signature: CrudCommand,
    ApiCrudCommand.signature: ApiCrudCommand,
}


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``python -m crudgen`` and the ``crudgen`` script."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="crudgen",
        description="Generate CRUD scaffolding from an existing model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  crudgen make:crud Product\n"
            "  crudgen make:simple-api-crud Product --app-root ./shop\n"
            "  crudgen make:crud Product --models-file models.yaml --database-url sqlite:///db.sqlite\n"
        ),
    )
    parser.add_argument(
        "--app-root",
        default=None,
        help="Root of the target application (default: $CRUDGEN_APP_ROOT or .)",
    )
    parser.add_argument(
        "--models-file",
        default=None,
        help="YAML model manifest (default: read app/Models/<Name>.php)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL used to look up column types",
    )
    parser.add_argument(
        "--per-page",
        type=int,
        default=None,
        help="Page size of generated index actions (default: 10)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for signature, command_cls in COMMANDS.items():
        sub = subparsers.add_parser(signature, help=command_cls.__doc__)
        sub.add_argument("name", help="Model class name, e.g. Product")

    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except CrudGenError as exc:
        print_error(str(exc))
        sys.exit(1)
    if args.app_root:
        config.app_root = Path(args.app_root)
    if args.models_file:
        config.models_file = Path(args.models_file)
    if args.database_url:
        config.database_url = args.database_url
    if args.per_page is not None:
        if args.per_page < 1:
            console.print(f"[bold red]Error:[/bold red] Invalid page size: {args.per_page}")
            sys.exit(1)
        config.per_page = args.per_page

    command = COMMANDS[args.command](config)
    status = command.handle(args.name)
    if status != 0:
        sys.exit(status)


if __name__ == "__main__":
    main()
