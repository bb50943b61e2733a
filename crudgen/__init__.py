"""crudgen -- CRUD scaffolding generator for Laravel-style applications.

Infers validation rules from a model's fillable fields and column types and
renders requests, controllers, views, API resources and route declarations.

Usage::

    from crudgen import Config, CrudCommand

    CrudCommand(Config(app_root=Path("./shop"))).run("Product")
"""

from crudgen.commands import ApiCrudCommand, CrudCommand, GenerationResult
from crudgen.config import Config
from crudgen.errors import (
    ConfigurationError,
    CrudGenError,
    ModelNotFoundError,
    NoWritableFieldsError,
    SchemaInspectionError,
)

__all__ = [
    "ApiCrudCommand",
    "Config",
    "ConfigurationError",
    "CrudCommand",
    "CrudGenError",
    "GenerationResult",
    "ModelNotFoundError",
    "NoWritableFieldsError",
    "SchemaInspectionError",
]
