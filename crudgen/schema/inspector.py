"""Schema inspectors: look up the storage type of a model's columns.

The rule builder only depends on the ``SchemaInspector`` protocol.  Two
implementations are provided:

- ``StaticSchemaInspector`` answers from an in-memory mapping (the YAML
  manifest's ``columns`` sections, or synthetic data in tests).
- ``SqlAlchemySchemaInspector`` reflects a live database through
  ``sqlalchemy.inspect``.

Neither implementation raises for an unknown table or column; both answer
``ColumnType.UNKNOWN`` so that classification falls back to its string
default.  Connection and driver failures raise ``SchemaInspectionError``.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from sqlalchemy import create_engine, inspect, types as sqltypes
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

from crudgen.errors import SchemaInspectionError

from .models import ColumnType


class SchemaInspector(Protocol):
    """Anything that can resolve ``(table, column)`` to a ``ColumnType``."""

    def get_column_type(self, table: str, field: str) -> ColumnType:
        ...

    def close(self) -> None:
        ...


# ---------------------------------------------------------------------------
# Static inspector
# ---------------------------------------------------------------------------


class StaticSchemaInspector:
    """Inspector backed by a ``{table: {column: raw_type}}`` mapping."""

    def __init__(self, tables: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self.tables: dict[str, dict[str, str]] = {
            table: dict(columns) for table, columns in (tables or {}).items()
        }

    def get_column_type(self, table: str, field: str) -> ColumnType:
        raw = self.tables.get(table, {}).get(field)
        return ColumnType.parse(raw)

    def close(self) -> None:
        pass


# ---------------------------------------------------------------------------
# SQLAlchemy inspector
# ---------------------------------------------------------------------------


class SqlAlchemySchemaInspector:
    """Inspector that reflects column types from a live database.

    Columns are reflected on every call; nothing is cached between fields.
    Call ``close()`` (or use the inspector as a context manager) to release
    the engine's connection pool.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @classmethod
    def from_url(cls, url: str) -> "SqlAlchemySchemaInspector":
        """Create an inspector for a SQLAlchemy database URL.

        Raises:
            SchemaInspectionError: If the URL is malformed or its database
                driver is not installed.
        """
        try:
            engine = create_engine(url)
        except SQLAlchemyError as exc:
            raise SchemaInspectionError(str(exc)) from exc
        except ImportError as exc:
            raise SchemaInspectionError(f"database driver unavailable ({exc})") from exc
        return cls(engine)

    def get_column_type(self, table: str, field: str) -> ColumnType:
        try:
            columns = inspect(self.engine).get_columns(table)
        except NoSuchTableError:
            return ColumnType.UNKNOWN
        except SQLAlchemyError as exc:
            raise SchemaInspectionError(str(exc)) from exc

        for column in columns:
            if column["name"] == field:
                return column_type_from_sqlalchemy(column["type"])
        return ColumnType.UNKNOWN

    def close(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> "SqlAlchemySchemaInspector":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def column_type_from_sqlalchemy(type_: Any) -> ColumnType:
    """Classify a reflected SQLAlchemy type instance.

    Order matters: ``Text`` is a ``String`` subclass and ``BigInteger`` an
    ``Integer`` subclass, so the narrower checks run first.  ``Float`` is not
    a ``Numeric`` subclass in every SQLAlchemy release, so both are checked.
    """
    if isinstance(type_, sqltypes.Text):
        return ColumnType.TEXT
    if isinstance(type_, sqltypes.Boolean):
        return ColumnType.BOOLEAN
    if isinstance(type_, sqltypes.String):
        return ColumnType.STRING
    if isinstance(type_, sqltypes.BigInteger) and getattr(type_, "unsigned", False):
        return ColumnType.UNSIGNED_BIG_INTEGER
    if isinstance(type_, sqltypes.Integer):
        return ColumnType.INTEGER
    if isinstance(type_, (sqltypes.Numeric, sqltypes.Float)):
        return ColumnType.DECIMAL
    if isinstance(type_, (sqltypes.Date, sqltypes.DateTime)):
        return ColumnType.DATETIME
    return ColumnType.UNKNOWN
