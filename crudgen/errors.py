"""Exception hierarchy for crudgen.

Every error a generation run can report to the user derives from
``CrudGenError``.  The command layer catches that base class, prints the
message and exits non-zero; nothing below it recovers from these errors.
"""

from __future__ import annotations


class CrudGenError(Exception):
    """Base class for all user-facing generation failures."""


class ModelNotFoundError(CrudGenError):
    """Raised when the named model cannot be resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Model {name} does not exist!")


class NoWritableFieldsError(CrudGenError):
    """Raised when a model declares no writable (fillable) fields."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No fillable fields found in {name} model!")


class ModelParseError(CrudGenError):
    """Raised when a model source file contains a malformed property literal."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Could not parse {path}: {message}")


class SchemaInspectionError(CrudGenError):
    """Raised when the database holding column types cannot be inspected."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Could not inspect database schema: {message}")


class ConfigurationError(CrudGenError):
    """Raised when a configuration value is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid configuration: {message}")
