"""Tests for browser-facing CRUD generation (crudgen.scaffolder.html_gen).

Covers:
- Artifact paths for requests, controller and views
- Validation rules rendered into both form requests
- Controller search filters and pagination
- Select controls for enum fields, text inputs otherwise
- The Route::resource declaration
"""

from __future__ import annotations

import pytest

from crudgen.config import Config
from crudgen.inference import build_rule_table
from crudgen.scaffolder.html_gen import HtmlCrudGenerator, web_route_declaration
from crudgen.scaffolder.templates import TemplateRenderer
from crudgen.schema.inspector import StaticSchemaInspector
from crudgen.schema.models import EnumMeta, ModelDescriptor


pytestmark = pytest.mark.unit


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(app_root=tmp_path / "app", per_page=15)


@pytest.fixture
def artifacts(config, product_descriptor, product_inspector):
    table = build_rule_table(product_descriptor, product_inspector)
    generator = HtmlCrudGenerator(TemplateRenderer(), config)
    return {a.path: a.content for a in generator.render_all(product_descriptor, table)}


class TestPaths:
    def test_artifact_paths_in_order(self, config, product_descriptor, product_inspector):
        table = build_rule_table(product_descriptor, product_inspector)
        generator = HtmlCrudGenerator(TemplateRenderer(), config)
        paths = [a.path for a in generator.render_all(product_descriptor, table)]
        root = config.app_root
        assert paths == [
            root / "app/Http/Requests/StoreProductRequest.php",
            root / "app/Http/Requests/UpdateProductRequest.php",
            root / "app/Http/Controllers/ProductController.php",
            root / "resources/views/products/index.blade.php",
            root / "resources/views/products/create.blade.php",
            root / "resources/views/products/edit.blade.php",
            root / "resources/views/products/show.blade.php",
        ]

    def test_render_all_writes_nothing(self, config, artifacts):
        assert not config.app_root.exists()


class TestRequests:
    EXPECTED_RULES = (
        "        return [\n"
        "            'name' => 'required|string|max:255',\n"
        "            'price' => 'required|numeric',\n"
        "            'status' => 'required|in:draft,published',\n"
        "            'category_id' => 'required|integer',\n"
        "        ];\n"
    )

    @pytest.mark.parametrize("action", ["Store", "Update"])
    def test_rules(self, config, artifacts, action):
        content = artifacts[config.requests_dir / f"{action}ProductRequest.php"]
        assert "namespace App\\Http\\Requests;" in content
        assert f"class {action}ProductRequest extends FormRequest" in content
        assert self.EXPECTED_RULES in content
        assert content.startswith("<?php\n")


class TestController:
    def test_actions(self, config, artifacts):
        content = artifacts[config.controllers_dir / "ProductController.php"]
        for action in ("index", "create", "store", "show", "edit", "update", "destroy"):
            assert f"public function {action}(" in content
        assert "use App\\Models\\Product;" in content
        assert "use App\\Http\\Requests\\StoreProductRequest;" in content

    def test_search_filters_in_field_order(self, config, artifacts):
        content = artifacts[config.controllers_dir / "ProductController.php"]
        positions = [
            content.index(f"$request->filled('{field}')")
            for field in ("name", "price", "status", "category_id")
        ]
        assert positions == sorted(positions)
        assert (
            "$query->where('price', 'like', '%' . $request->input('price') . '%');"
            in content
        )

    def test_pagination_and_views(self, config, artifacts):
        content = artifacts[config.controllers_dir / "ProductController.php"]
        assert "$models = $query->paginate(15);" in content
        assert "return view('products.index', ['models' => $models]);" in content
        assert "->with('success', 'Product deleted successfully!');" in content


class TestViews:
    def test_index(self, config, artifacts):
        content = artifacts[config.views_dir / "products" / "index.blade.php"]
        assert "<th>Category Id</th>" in content
        assert "<td>{{ $model->category_id }}</td>" in content
        assert (
            '<input type="text" name="price" class="form-control" placeholder="Price" '
            "value=\"{{ request('price') }}\">"
        ) in content
        assert "{{ route('products.create') }}" in content
        assert "{{ $models->links() }}" in content

    def test_create_renders_select_for_enum(self, config, artifacts):
        content = artifacts[config.views_dir / "products" / "create.blade.php"]
        assert '<select name="status" class="form-control" id="status">' in content
        assert '<option value="draft" selected>draft</option>' in content
        assert '<option value="published">published</option>' in content
        assert 'name="status" class="form-control" id="status" placeholder' not in content

    def test_create_renders_inputs_for_plain_fields(self, config, artifacts):
        content = artifacts[config.views_dir / "products" / "create.blade.php"]
        assert "value=\"{{ old('name') }}\"" in content
        assert "@error('category_id')" in content
        assert "{{ route('products.store') }}" in content

    def test_edit_preselects_current_value(self, config, artifacts):
        content = artifacts[config.views_dir / "products" / "edit.blade.php"]
        assert (
            "<option value=\"published\" {{ $model->status === 'published' ? 'selected' : '' }}>"
            "published</option>"
        ) in content
        assert "value=\"{{ old('price', $model->price ?? '') }}\"" in content
        assert "@method('PUT')" in content

    def test_show_lists_fields_in_order(self, config, artifacts):
        content = artifacts[config.views_dir / "products" / "show.blade.php"]
        labels = ["Name", "Price", "Status", "Category Id"]
        positions = [content.index(f"<strong>{label}:</strong>") for label in labels]
        assert positions == sorted(positions)
        assert "<h1>Product Details</h1>" in content


class TestQuotedEnumValues:
    @pytest.fixture
    def shirt_artifacts(self, config):
        descriptor = ModelDescriptor(
            name="Shirt",
            table="shirts",
            fields=["brand"],
            enums={"brand": EnumMeta(values=["levi's", "gap"], default="levi's")},
        )
        table = build_rule_table(descriptor, StaticSchemaInspector())
        generator = HtmlCrudGenerator(TemplateRenderer(), config)
        return {a.path.name: a.content for a in generator.render_all(descriptor, table)}

    def test_request_rule_is_valid_php_string(self, shirt_artifacts):
        assert "'brand' => 'required|in:levi\\'s,gap'," in shirt_artifacts["StoreShirtRequest.php"]

    def test_create_option_is_html_escaped(self, shirt_artifacts):
        assert (
            '<option value="levi&#39;s" selected>levi&#39;s</option>'
        ) in shirt_artifacts["create.blade.php"]

    def test_edit_comparison_is_valid_php_string(self, shirt_artifacts):
        assert "$model->brand === 'levi\\'s'" in shirt_artifacts["edit.blade.php"]


class TestRouteDeclaration:
    def test_web_route(self):
        assert web_route_declaration("Product") == (
            "Route::resource('products', App\\Http\\Controllers\\ProductController::class);"
        )

    def test_plural_of_lowercased_name(self):
        assert web_route_declaration("Category").startswith("Route::resource('categories',")
        assert web_route_declaration("OrderItem").startswith("Route::resource('orderitems',")
