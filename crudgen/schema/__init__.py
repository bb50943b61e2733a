"""Model descriptors, schema inspectors and model repositories."""

from crudgen.schema.inspector import (
    SchemaInspector,
    SqlAlchemySchemaInspector,
    StaticSchemaInspector,
)
from crudgen.schema.models import (
    Classification,
    ColumnType,
    EnumMeta,
    ModelDescriptor,
    RuleDescriptor,
    RuleTable,
)
from crudgen.schema.repository import (
    LaravelModelRepository,
    ManifestModelRepository,
    ModelRepository,
)

__all__ = [
    "Classification",
    "ColumnType",
    "EnumMeta",
    "LaravelModelRepository",
    "ManifestModelRepository",
    "ModelDescriptor",
    "ModelRepository",
    "RuleDescriptor",
    "RuleTable",
    "SchemaInspector",
    "SqlAlchemySchemaInspector",
    "StaticSchemaInspector",
]
