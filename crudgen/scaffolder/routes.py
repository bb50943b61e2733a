"""Idempotent route registration.

A routes file is loaded into a ``RouteRegistry`` as a list of lines, with
their original line endings.  Resource declarations (``Route::resource`` /
``Route::apiResource``) are keyed by route method and resource name.
``upsert`` replaces the declaration for a resource in place, keeping the
line's indentation, or appends it when absent, so re-running generation
never duplicates a route.  Duplicates left by earlier append-only runs are
collapsed on the next upsert.
"""

from __future__ import annotations

import re
from pathlib import Path


ROUTES_HEADER = "<?php\n\nuse Illuminate\\Support\\Facades\\Route;\n\n"

_DECLARATION_RE = re.compile(
    r"^\s*Route::(?P<method>resource|apiResource)\(\s*(?P<quote>['\"])(?P<resource>[^'\"]+)(?P=quote)"
)
_INDENT_RE = re.compile(r"^[ \t]*")


def declaration_key(declaration: str) -> str | None:
    """Return ``'<method>:<resource>'`` for a resource route line, else ``None``."""
    match = _DECLARATION_RE.match(declaration)
    if match is None:
        return None
    return f"{match.group('method')}:{match.group('resource')}"


def _line_ending(line: str) -> str:
    body = line.rstrip("\r\n")
    return line[len(body):]


class RouteRegistry:
    """In-memory view of a routes file with keyed resource declarations.

    ``lines`` keep their line endings; ``newline`` is the ending used for
    inserted lines, taken from the first line of the file.
    """

    def __init__(self, path: str | Path, lines: list[str], newline: str = "\n") -> None:
        self.path = Path(path)
        self.lines = lines
        self.newline = newline

    @classmethod
    def load(cls, path: str | Path) -> "RouteRegistry":
        """Read *path*; a missing file starts from the standard PHP header."""
        routes_path = Path(path)
        if routes_path.is_file():
            # newline="" keeps "\r\n" intact
            with open(routes_path, encoding="utf-8", newline="") as fh:
                text = fh.read()
        else:
            text = ROUTES_HEADER
        lines = text.splitlines(keepends=True)
        newline = _line_ending(lines[0]) if lines else "\n"
        return cls(routes_path, lines, newline or "\n")

    def upsert(self, declaration: str) -> None:
        """Insert or replace the declaration for its resource.

        Raises:
            ValueError: If *declaration* is not a resource route line.
        """
        key = declaration_key(declaration)
        if key is None:
            raise ValueError(f"Not a resource route declaration: {declaration!r}")
        declaration = declaration.strip()

        updated: list[str] = []
        replaced = False
        for line in self.lines:
            if declaration_key(line) == key:
                if not replaced:
                    indent = _INDENT_RE.match(line).group()
                    updated.append(indent + declaration + (_line_ending(line) or self.newline))
                    replaced = True
                continue
            updated.append(line)
        if not replaced:
            if updated and not _line_ending(updated[-1]):
                updated[-1] += self.newline
            updated.append(declaration + self.newline)
        self.lines = updated

    def render(self) -> str:
        return "".join(self.lines)

    def save(self) -> Path:
        """Write the registry back to its file in one operation."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8", newline="") as fh:
            fh.write(self.render())
        return self.path


def register_route(path: str | Path, declaration: str) -> Path:
    """Load *path*, upsert *declaration* and save."""
    registry = RouteRegistry.load(path)
    registry.upsert(declaration)
    return registry.save()
