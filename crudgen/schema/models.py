"""Pydantic v2 models for model descriptors and inferred validation rules.

Defines the data that flows through a generation run: the resolved model
(``ModelDescriptor``), the storage classification of each column
(``ColumnType``), and the classifier output collected into a ``RuleTable``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Column types
# ---------------------------------------------------------------------------

class ColumnType(str, Enum):
    """Semantic classification of a storage column."""
    INTEGER = "integer"
    UNSIGNED_BIG_INTEGER = "unsigned_big_integer"
    STRING = "string"
    TEXT = "text"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ColumnType":
        """Map a raw storage type name to a ``ColumnType``.

        Matching is case-insensitive and ignores any length/precision suffix
        (``VARCHAR(255)`` parses as ``string``).  Unrecognised or empty names
        map to ``UNKNOWN``; this never raises.
        """
        if isinstance(raw, ColumnType):
            return raw
        if not raw:
            return cls.UNKNOWN
        key = str(raw).split("(", 1)[0].strip().lower()
        return _RAW_TYPE_MAP.get(key, cls.UNKNOWN)


_RAW_TYPE_MAP: dict[str, ColumnType] = {
    "integer": ColumnType.INTEGER,
    "int": ColumnType.INTEGER,
    "bigint": ColumnType.INTEGER,
    "biginteger": ColumnType.INTEGER,
    "smallint": ColumnType.INTEGER,
    "smallinteger": ColumnType.INTEGER,
    "tinyint": ColumnType.INTEGER,
    "tinyinteger": ColumnType.INTEGER,
    "mediumint": ColumnType.INTEGER,
    "unsignedbiginteger": ColumnType.UNSIGNED_BIG_INTEGER,
    "unsigned_big_integer": ColumnType.UNSIGNED_BIG_INTEGER,
    "string": ColumnType.STRING,
    "varchar": ColumnType.STRING,
    "char": ColumnType.STRING,
    "text": ColumnType.TEXT,
    "mediumtext": ColumnType.TEXT,
    "longtext": ColumnType.TEXT,
    "decimal": ColumnType.DECIMAL,
    "numeric": ColumnType.DECIMAL,
    "float": ColumnType.DECIMAL,
    "double": ColumnType.DECIMAL,
    "real": ColumnType.DECIMAL,
    "boolean": ColumnType.BOOLEAN,
    "bool": ColumnType.BOOLEAN,
    "date": ColumnType.DATETIME,
    "datetime": ColumnType.DATETIME,
    "timestamp": ColumnType.DATETIME,
}


# ---------------------------------------------------------------------------
# Model descriptor
# ---------------------------------------------------------------------------

class EnumMeta(BaseModel):
    """Closed set of allowed values for a field.

    ``default`` is expected to be one of ``values``; that is the caller's
    responsibility and is not checked here.
    """
    model_config = ConfigDict(frozen=True)

    values: list[str] = Field(..., min_length=1, description="Allowed values, in declared order")
    default: Optional[str] = Field(default=None, description="Pre-selected value, if any")


class ModelDescriptor(BaseModel):
    """A data model resolved for generation."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Model class name, e.g. 'Product'")
    table: str = Field(..., description="Storage table name, e.g. 'products'")
    fields: list[str] = Field(default_factory=list, description="Writable fields, in declared order")
    enums: dict[str, EnumMeta] = Field(
        default_factory=dict, description="Enumeration metadata keyed by field name"
    )


# ---------------------------------------------------------------------------
# Classifier output
# ---------------------------------------------------------------------------

class RuleDescriptor(BaseModel):
    """Ordered validation rule tokens for one field."""
    model_config = ConfigDict(frozen=True)

    field: str
    tokens: list[str]

    @field_validator("tokens")
    @classmethod
    def _starts_with_required(cls, tokens: list[str]) -> list[str]:
        if not tokens or tokens[0] != "required":
            raise ValueError("rule tokens must start with 'required'")
        return tokens

    def as_rule(self) -> str:
        """Return the pipe-delimited rule string, e.g. ``required|integer``."""
        return "|".join(self.tokens)


class Classification(BaseModel):
    """Result of classifying a single field."""
    model_config = ConfigDict(frozen=True)

    rule: RuleDescriptor
    enum: Optional[EnumMeta] = None

    @property
    def field(self) -> str:
        return self.rule.field


class RuleTable(BaseModel):
    """Classifications for every writable field, in the model's field order."""

    entries: list[Classification] = Field(default_factory=list)

    @property
    def fields(self) -> list[str]:
        return [entry.field for entry in self.entries]

    def rules(self) -> dict[str, str]:
        """Return ``{field: 'required|...'}`` in field order."""
        return {entry.field: entry.rule.as_rule() for entry in self.entries}

    def enums(self) -> dict[str, EnumMeta]:
        """Return enumeration metadata for the fields that took the enum path."""
        return {
            entry.field: entry.enum
            for entry in self.entries
            if entry.enum is not None
        }

