"""Model repositories: resolve a model name to a ``ModelDescriptor``.

Two sources are supported:

- ``ManifestModelRepository`` reads a YAML manifest describing each model's
  table, fillable fields, enumerations and (optionally) column types::

      models:
        Product:
          table: products
          fillable: [name, price, status, category_id]
          enums:
            status: {values: [draft, published], default: draft}
          columns:
            name: string
            price: decimal

- ``LaravelModelRepository`` reads ``app/Models/<Name>.php`` from a Laravel
  application and extracts the ``$fillable``, ``$table`` and
  ``$enumValues`` properties from their PHP array literals.

Both raise ``ModelNotFoundError`` for unknown models.  Neither rejects an
empty field list; that is the rule builder's job.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Optional, Protocol

import yaml
from pydantic import BaseModel, Field, ValidationError

from crudgen.errors import ModelNotFoundError, ModelParseError
from crudgen.utils import table_name

from .inspector import StaticSchemaInspector
from .models import EnumMeta, ModelDescriptor


_CLASS_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ModelRepository(Protocol):
    """Anything that can resolve a model name to its descriptor."""

    def resolve(self, name: str) -> ModelDescriptor:
        ...


# ---------------------------------------------------------------------------
# YAML manifest
# ---------------------------------------------------------------------------


class ManifestModel(BaseModel):
    """One model entry in a YAML manifest."""
    table: Optional[str] = Field(default=None, description="Defaults to the pluralised snake-case name")
    fillable: list[str] = Field(default_factory=list)
    enums: dict[str, EnumMeta] = Field(default_factory=dict)
    columns: dict[str, str] = Field(default_factory=dict, description="Raw column type per field")


class Manifest(BaseModel):
    """Top-level YAML manifest."""
    models: dict[str, ManifestModel] = Field(default_factory=dict)


class ManifestModelRepository:
    """Resolves models from a YAML manifest file."""

    def __init__(self, manifest: Manifest, source: str = "<manifest>") -> None:
        self.manifest = manifest
        self.source = source

    @classmethod
    def from_file(cls, path: str | Path) -> "ManifestModelRepository":
        """Load and validate a manifest file."""
        manifest_path = Path(path)
        if not manifest_path.is_file():
            raise ModelParseError(str(manifest_path), "file not found")
        try:
            raw = yaml.safe_load(manifest_path.read_text(encoding="utf-8")) or {}
            manifest = Manifest.model_validate(raw)
        except yaml.YAMLError as exc:
            raise ModelParseError(str(manifest_path), str(exc)) from exc
        except ValidationError as exc:
            raise ModelParseError(str(manifest_path), str(exc)) from exc
        return cls(manifest, source=str(manifest_path))

    def resolve(self, name: str) -> ModelDescriptor:
        entry = self.manifest.models.get(name)
        if entry is None:
            raise ModelNotFoundError(name)
        return ModelDescriptor(
            name=name,
            table=entry.table or table_name(name),
            fields=list(entry.fillable),
            enums=dict(entry.enums),
        )

    def schema_inspector(self) -> StaticSchemaInspector:
        """Return an inspector answering from the manifest's ``columns``."""
        return StaticSchemaInspector({
            entry.table or table_name(name): entry.columns
            for name, entry in self.manifest.models.items()
        })


# ---------------------------------------------------------------------------
# Laravel model files
# ---------------------------------------------------------------------------


class LaravelModelRepository:
    """Resolves models by reading PHP model classes from ``app/Models``."""

    def __init__(self, models_dir: str | Path) -> None:
        self.models_dir = Path(models_dir)

    def resolve(self, name: str) -> ModelDescriptor:
        if not _CLASS_NAME_RE.match(name):
            raise ModelNotFoundError(name)
        path = self.models_dir / f"{name}.php"
        if not path.is_file():
            raise ModelNotFoundError(name)

        source = path.read_text(encoding="utf-8")
        fillable = read_php_property(source, "fillable", str(path))
        table = read_php_property(source, "table", str(path))
        raw_enums = read_php_property(source, "enumValues", str(path))

        if fillable is None:
            fillable = []
        if isinstance(fillable, dict):
            fillable = list(fillable.values())
        if not isinstance(fillable, list):
            raise ModelParseError(str(path), "$fillable must be an array")

        try:
            return ModelDescriptor(
                name=name,
                table=table if isinstance(table, str) and table else table_name(name),
                fields=[str(f) for f in fillable],
                enums=_enums_from_php(raw_enums),
            )
        except ValidationError as exc:
            raise ModelParseError(str(path), str(exc)) from exc


def _enums_from_php(raw: Any) -> dict[str, EnumMeta]:
    """Convert a parsed ``$enumValues`` array into ``EnumMeta`` objects."""
    if not isinstance(raw, dict):
        return {}
    enums: dict[str, EnumMeta] = {}
    for field, meta in raw.items():
        if not isinstance(meta, dict):
            continue
        values = meta.get("values") or []
        if isinstance(values, dict):
            values = list(values.values())
        default = meta.get("default")
        enums[str(field)] = EnumMeta(
            values=[str(v) for v in values],
            default=None if default is None else str(default),
        )
    return enums


# ---------------------------------------------------------------------------
# PHP literal reader
# ---------------------------------------------------------------------------

_PROPERTY_RE_TEMPLATE = (
    r"(?:public|protected|private|var)\s+(?:static\s+)?(?:\??[\w\\]+\s+)?"
    r"\${name}\s*=\s*"
)

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+|//[^\n]*|\#[^\n]*|/\*.*?\*/)
    | (?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
    | (?P<arrow>=>)
    | (?P<open>\[|array\s*\()
    | (?P<close>[\])])
    | (?P<comma>,)
    | (?P<number>-?\d+(?:\.\d+)?)
    | (?P<word>[A-Za-z_][A-Za-z0-9_]*)
    """,
    re.VERBOSE | re.DOTALL | re.IGNORECASE,
)


def read_php_property(source: str, name: str, path: str = "<source>") -> Any:
    """Return the literal value assigned to class property ``$name``.

    Arrays become lists (positional) or dicts (keyed); strings, numbers,
    ``true``/``false`` and ``null`` become their Python counterparts.
    Returns ``None`` when the property is not declared.
    """
    match = re.search(_PROPERTY_RE_TEMPLATE.format(name=re.escape(name)), source)
    if match is None:
        return None
    value, _ = _PhpLiteralParser(source, path).parse_value(match.end())
    return value


class _PhpLiteralParser:
    """Minimal recursive-descent reader for PHP array and scalar literals."""

    def __init__(self, source: str, path: str) -> None:
        self.source = source
        self.path = path

    def _next(self, pos: int) -> tuple[str, str, int]:
        while pos < len(self.source):
            match = _TOKEN_RE.match(self.source, pos)
            if match is None:
                raise ModelParseError(self.path, f"unexpected character at offset {pos}")
            pos = match.end()
            kind = match.lastgroup or ""
            if kind != "ws":
                return kind, match.group(), pos
        raise ModelParseError(self.path, "unexpected end of file")

    def parse_value(self, pos: int) -> tuple[Any, int]:
        kind, text, pos = self._next(pos)
        if kind == "open":
            closer = "]" if text == "[" else ")"
            return self._parse_array(pos, closer)
        if kind == "string":
            return _unquote(text), pos
        if kind == "number":
            return (float(text) if "." in text else int(text)), pos
        if kind == "word":
            lowered = text.lower()
            if lowered == "true":
                return True, pos
            if lowered == "false":
                return False, pos
            if lowered == "null":
                return None, pos
        raise ModelParseError(self.path, f"unsupported literal {text!r}")

    def _parse_array(self, pos: int, closer: str) -> tuple[Any, int]:
        items: list[tuple[Any, Any]] = []
        keyed = False
        while True:
            kind, text, after = self._next(pos)
            if kind == "close":
                if text != closer:
                    raise ModelParseError(self.path, f"expected {closer!r}, found {text!r}")
                pos = after
                break
            value, pos = self.parse_value(pos)
            kind, text, after = self._next(pos)
            if kind == "arrow":
                key = value
                value, pos = self.parse_value(after)
                keyed = True
                kind, text, after = self._next(pos)
            else:
                key = None
            items.append((key, value))
            if kind == "comma":
                pos = after
            elif kind == "close" and text == closer:
                pos = after
                break
            else:
                raise ModelParseError(self.path, f"expected ',' or {closer!r}, found {text!r}")

        if not keyed:
            return [value for _, value in items], pos
        result: dict[Any, Any] = {}
        index = 0
        for key, value in items:
            if key is None:
                key = index
                index += 1
            result[key] = value
        return result, pos


def _unquote(literal: str) -> str:
    body = literal[1:-1]
    if literal[0] == "'":
        return re.sub(r"\\([\\'])", r"\1", body)
    return re.sub(r"\\([\\\"$])", r"\1", body)
