"""Shared utility functions for crudgen.

Provides naming helpers (Laravel-style pluralisation, snake case,
labels), a file-writing helper and Rich-based console reporting.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def pluralize(word: str) -> str:
    """Return the English plural of a singular noun.

    Examples::

        pluralize("product")  -> "products"
        pluralize("category") -> "categories"
        pluralize("status")   -> "statuses"
        pluralize("key")      -> "keys"
    """
    if not word:
        return word
    lower = word.lower()
    if lower.endswith("y") and lower[-2:-1] not in ("a", "e", "i", "o", "u"):
        return word[:-1] + "ies"
    if lower.endswith(("s", "sh", "ch", "x", "z")):
        return word + "es"
    return word + "s"


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def headline(field: str) -> str:
    """Turn a field name into a form label.

    Underscores become spaces and the first letter of every word is
    upper-cased; the rest of each word is left as is.

    Examples::

        headline("category_id") -> "Category Id"
        headline("userEmail")   -> "UserEmail"
    """
    words = field.replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def route_name(model_name: str) -> str:
    """Return the resource/route/view prefix for a model, e.g. ``products``."""
    return pluralize(model_name.lower())


def table_name(model_name: str) -> str:
    """Return the conventional table name for a model class.

    ``OrderItem`` -> ``order_items``; only the last word is pluralised.
    """
    parts = snake_case(model_name).split("_")
    parts[-1] = pluralize(parts[-1])
    return "_".join(parts)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: str | Path, content: str) -> Path:
    """Create parent dirs and write *content*, replacing any existing file."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")
