"""Rule set builder: classify every writable field of a model."""

from __future__ import annotations

from crudgen.errors import NoWritableFieldsError
from crudgen.schema.inspector import SchemaInspector
from crudgen.schema.models import ModelDescriptor, RuleTable

from .classifier import classify


class RuleSetBuilder:
    """Builds a ``RuleTable`` from a model descriptor and a schema inspector.

    The table is assembled entirely in memory.  Callers write artifacts only
    after ``build`` returns, so a failure here leaves the file system
    untouched.
    """

    def __init__(self, inspector: SchemaInspector) -> None:
        self.inspector = inspector

    def build(self, descriptor: ModelDescriptor) -> RuleTable:
        """Classify ``descriptor.fields`` in declared order.

        Raises:
            NoWritableFieldsError: If the model declares no writable fields.
        """
        if not descriptor.fields:
            raise NoWritableFieldsError(descriptor.name)

        entries = []
        for field in descriptor.fields:
            column_type = self.inspector.get_column_type(descriptor.table, field)
            entries.append(classify(field, column_type, descriptor.enums.get(field)))
        return RuleTable(entries=entries)


def build_rule_table(descriptor: ModelDescriptor, inspector: SchemaInspector) -> RuleTable:
    """Shortcut for ``RuleSetBuilder(inspector).build(descriptor)``."""
    return RuleSetBuilder(inspector).build(descriptor)
