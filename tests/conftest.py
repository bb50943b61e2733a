"""Shared pytest fixtures for the crudgen test suite.

Provides reusable fixtures for:
- The ``Product`` model used across the suite (descriptor, inspector)
- A temporary Laravel application tree with model classes
- A YAML model manifest
- ``Config`` instances pointing at the temporary application
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from crudgen.config import Config
from crudgen.schema.inspector import StaticSchemaInspector
from crudgen.schema.models import EnumMeta, ModelDescriptor


# ---------------------------------------------------------------------------
# Model data
# ---------------------------------------------------------------------------

PRODUCT_COLUMNS: dict[str, str] = {
    "name": "string",
    "price": "decimal",
    "status": "string",
    "category_id": "bigint",
}

PRODUCT_MODEL_PHP = textwrap.dedent("""\
    <?php

    namespace App\\Models;

    use Illuminate\\Database\\Eloquent\\Model;

    class Product extends Model
    {
        protected $table = 'products';

        protected $fillable = [
            'name',
            'price',
            'status',
            'category_id',
        ];

        public $enumValues = [
            'status' => [
                'values'  => ['draft', 'published'],
                'default' => 'draft',
            ],
        ];
    }
""")

EMPTY_MODEL_PHP = textwrap.dedent("""\
    <?php

    namespace App\\Models;

    use Illuminate\\Database\\Eloquent\\Model;

    class AuditLog extends Model
    {
        protected $fillable = [];
    }
""")

MANIFEST_YAML = textwrap.dedent("""\
    models:
      Product:
        table: products
        fillable: [name, price, status, category_id]
        enums:
          status:
            values: [draft, published]
            default: draft
        columns:
          name: string
          price: decimal
          status: string
          category_id: bigint
      Customer:
        fillable: [full_name, contact_email, balance, is_active, born_on, notes]
        columns:
          full_name: varchar
          contact_email: varchar
          balance: unsignedBigInteger
          is_active: boolean
          born_on: date
          notes: text
      AuditLog:
        fillable: []
""")


@pytest.fixture
def product_descriptor() -> ModelDescriptor:
    """The ``Product`` model: name, price, status (enum), category_id."""
    return ModelDescriptor(
        name="Product",
        table="products",
        fields=["name", "price", "status", "category_id"],
        enums={"status": EnumMeta(values=["draft", "published"], default="draft")},
    )


@pytest.fixture
def product_inspector() -> StaticSchemaInspector:
    """Column types for the ``products`` table."""
    return StaticSchemaInspector({"products": PRODUCT_COLUMNS})


# ---------------------------------------------------------------------------
# Application trees
# ---------------------------------------------------------------------------

@pytest.fixture
def laravel_app(tmp_path: Path) -> Path:
    """Temporary Laravel application with ``Product`` and ``AuditLog`` models."""
    app_root = tmp_path / "shop"
    models_dir = app_root / "app" / "Models"
    models_dir.mkdir(parents=True)
    (models_dir / "Product.php").write_text(PRODUCT_MODEL_PHP, encoding="utf-8")
    (models_dir / "AuditLog.php").write_text(EMPTY_MODEL_PHP, encoding="utf-8")
    routes_dir = app_root / "routes"
    routes_dir.mkdir()
    (routes_dir / "web.php").write_text(
        "<?php\n\nuse Illuminate\\Support\\Facades\\Route;\n\n"
        "Route::get('/', function () {\n    return view('welcome');\n});\n",
        encoding="utf-8",
    )
    yield app_root


@pytest.fixture
def manifest_file(tmp_path: Path) -> Path:
    """YAML manifest describing ``Product``, ``Customer`` and ``AuditLog``."""
    path = tmp_path / "models.yaml"
    path.write_text(MANIFEST_YAML, encoding="utf-8")
    return path


@pytest.fixture
def manifest_config(laravel_app: Path, manifest_file: Path) -> Config:
    """Config reading models and column types from the YAML manifest."""
    return Config(app_root=laravel_app, models_file=manifest_file)


@pytest.fixture
def laravel_config(laravel_app: Path) -> Config:
    """Config reading model classes from ``app/Models`` with no column types."""
    return Config(app_root=laravel_app)
