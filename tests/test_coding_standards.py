"""
Tests that enforce coding standards.

Import conventions for hex_object:
- external modules: ``import x as _x``
- internal modules: ``import hex_object.mod as mod``
- ``from X import Y`` only in __init__.py re-exports, under TYPE_CHECKING,
  or for ``from __future__``
"""

import ast as _ast
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "hex_object"
TESTS_DIR = _pathlib.Path(__file__).parent


def _python_files(directory: _pathlib.Path) -> list[_pathlib.Path]:
    return sorted(directory.rglob("*.py"))


def _is_type_checking_block(node: _ast.AST) -> bool:
    """Check for ``if TYPE_CHECKING:`` / ``if _typing.TYPE_CHECKING:``."""
    if not isinstance(node, _ast.If):
        return False
    test = node.test
    if isinstance(test, _ast.Name):
        return test.id == "TYPE_CHECKING"
    if isinstance(test, _ast.Attribute):
        return test.attr == "TYPE_CHECKING"
    return False


def find_from_imports(source: str) -> list[tuple[int, str]]:
    """
    Return (line, module) for every forbidden ``from X import Y``.

    Imports nested under a TYPE_CHECKING block and ``from __future__``
    imports are allowed.
    """
    tree = _ast.parse(source)
    allowed: set[int] = set()
    for node in _ast.walk(tree):
        if _is_type_checking_block(node):
            for child in _ast.walk(node):
                allowed.add(id(child))

    violations: list[tuple[int, str]] = []
    for node in _ast.walk(tree):
        if not isinstance(node, _ast.ImportFrom) or id(node) in allowed:
            continue
        if node.module == "__future__":
            continue
        violations.append((node.lineno, node.module or "."))
    return violations


def find_unaliased_external_imports(source: str) -> list[tuple[int, str]]:
    """Return (line, module) for external ``import x`` without a ``_`` alias."""
    violations: list[tuple[int, str]] = []
    for node in _ast.walk(_ast.parse(source)):
        if not isinstance(node, _ast.Import):
            continue
        for alias in node.names:
            if alias.name.split(".")[0] == "hex_object":
                continue
            if not (alias.asname and alias.asname.startswith("_")):
                violations.append((node.lineno, alias.name))
    return violations


def _collect(
    directory: _pathlib.Path,
    finder: _typing.Callable[[str], list[tuple[int, str]]],
) -> list[str]:
    messages: list[str] = []
    for path in _python_files(directory):
        if path.name == "__init__.py":
            continue
        for line, module in finder(path.read_text()):
            messages.append(f"{path}:{line}: {module}")
    return messages


class TestImportStyle:
    """Tests for import style compliance."""

    @_pytest.mark.parametrize("directory", [SRC_DIR, TESTS_DIR], ids=["src", "tests"])
    def test_no_from_imports(self, directory: _pathlib.Path) -> None:
        """Modules should not use 'from X import Y'."""
        violations = _collect(directory, find_from_imports)

        if violations:
            _pytest.fail(
                "Found forbidden 'from X import Y' imports:\n"
                + "\n".join(f"  {v}" for v in violations)
                + "\n\nUse 'import X as _x' (external) or 'import X as x' (internal) instead."
            )

    def test_src_external_imports_are_private(self) -> None:
        """External modules are bound to underscore names in source files."""
        violations = _collect(SRC_DIR, find_unaliased_external_imports)

        if violations:
            _pytest.fail(
                "External imports must use 'import x as _x':\n"
                + "\n".join(f"  {v}" for v in violations)
            )

    def test_src_modules_have_docstrings(self) -> None:
        missing = [
            str(path)
            for path in _python_files(SRC_DIR)
            if _ast.get_docstring(_ast.parse(path.read_text())) is None
        ]

        assert missing == []


class TestImportExtraction:
    """Tests for the import extraction logic itself."""

    def test_detects_from_import(self) -> None:
        assert find_from_imports("from pathlib import Path") == [(1, "pathlib")]

    def test_allows_future_imports(self) -> None:
        assert find_from_imports("from __future__ import annotations") == []

    def test_ignores_type_checking_block(self) -> None:
        source = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from some_module import SomeType

def foo():
    pass
"""
        assert find_from_imports(source) == []

    def test_detects_import_after_type_checking(self) -> None:
        source = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from allowed import Type

from forbidden import Other
"""
        assert find_from_imports(source) == [(7, "forbidden")]

    def test_unaliased_external_import(self) -> None:
        source = "import os\nimport json as _json\nimport hex_object.tree as tree\n"

        assert find_unaliased_external_imports(source) == [(1, "os")]
