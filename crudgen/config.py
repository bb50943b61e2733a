"""crudgen configuration.

Centralised, typed configuration for a generation run.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from crudgen.errors import ConfigurationError
from crudgen.schema.inspector import (
    SchemaInspector,
    SqlAlchemySchemaInspector,
    StaticSchemaInspector,
)
from crudgen.schema.repository import (
    LaravelModelRepository,
    ManifestModelRepository,
    ModelRepository,
)


class Config(BaseModel):
    """Global crudgen configuration.

    Holds the target application root, where model definitions and column
    types come from, and the derived output paths.  Instances are created
    once by the CLI entry point and passed to the commands.
    """

    app_root: Path = Field(default=Path("."), description="Root of the target Laravel application")
    models_file: Optional[Path] = Field(
        default=None, description="YAML model manifest; app/Models/*.php is read when unset"
    )
    database_url: Optional[str] = Field(
        default=None, description="SQLAlchemy URL used to reflect column types"
    )
    per_page: int = Field(default=10, ge=1, description="Page size used by generated index actions")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def models_dir(self) -> Path:
        """Directory holding the application's model classes."""
        return self.app_root / "app" / "Models"

    @property
    def requests_dir(self) -> Path:
        """Directory for generated form request classes."""
        return self.app_root / "app" / "Http" / "Requests"

    @property
    def controllers_dir(self) -> Path:
        """Directory for generated controllers."""
        return self.app_root / "app" / "Http" / "Controllers"

    @property
    def resources_dir(self) -> Path:
        """Directory for generated JSON resource transformers."""
        return self.app_root / "app" / "Http" / "Resources"

    @property
    def views_dir(self) -> Path:
        """Root of the Blade view tree."""
        return self.app_root / "resources" / "views"

    @property
    def web_routes_path(self) -> Path:
        """Routes file receiving ``Route::resource`` declarations."""
        return self.app_root / "routes" / "web.php"

    @property
    def api_routes_path(self) -> Path:
        """Routes file receiving ``Route::apiResource`` declarations."""
        return self.app_root / "routes" / "api.php"

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def model_repository(self) -> ModelRepository:
        """Return the repository that resolves model names."""
        if self.models_file is not None:
            return ManifestModelRepository.from_file(self.models_file)
        return LaravelModelRepository(self.models_dir)

    def schema_inspector(self, repository: ModelRepository | None = None) -> SchemaInspector:
        """Return the inspector that supplies column types.

        A configured database wins; otherwise a manifest repository answers
        from its ``columns`` sections; otherwise every column is unknown.
        """
        if self.database_url:
            return SqlAlchemySchemaInspector.from_url(self.database_url)
        if isinstance(repository, ManifestModelRepository):
            return repository.schema_inspector()
        return StaticSchemaInspector()

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CRUDGEN_APP_ROOT, CRUDGEN_MODELS_FILE, CRUDGEN_DATABASE_URL,
            CRUDGEN_PER_PAGE.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CRUDGEN_APP_ROOT"):
            kwargs["app_root"] = Path(os.environ["CRUDGEN_APP_ROOT"])
        if os.environ.get("CRUDGEN_MODELS_FILE"):
            kwargs["models_file"] = Path(os.environ["CRUDGEN_MODELS_FILE"])
        if os.environ.get("CRUDGEN_DATABASE_URL"):
            kwargs["database_url"] = os.environ["CRUDGEN_DATABASE_URL"]
        if os.environ.get("CRUDGEN_PER_PAGE"):
            raw = os.environ["CRUDGEN_PER_PAGE"]
            try:
                kwargs["per_page"] = int(raw)
            except ValueError as exc:
                raise ConfigurationError(f"CRUDGEN_PER_PAGE must be an integer, got {raw!r}") from exc
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise ConfigurationError(errors) from exc
