"""Static check that the validation package documents its public API."""

from __future__ import annotations

import ast
from pathlib import Path

_PACKAGE_ROOT = Path(__file__).resolve().parents[2] / "packages" / "syslog_fields"


def _missing_docstrings(path: Path) -> list[str]:
    """Return public module-level functions, classes and methods without docs."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    missing: list[str] = []
    for node in tree.body:
        if not isinstance(node, (ast.FunctionDef, ast.ClassDef)):
            continue
        if node.name.startswith("_"):
            continue
        if ast.get_docstring(node) is None:
            missing.append(f"{path.name}:{node.name}")
        if isinstance(node, ast.ClassDef):
            for member in node.body:
                if (
                    isinstance(member, ast.FunctionDef)
                    and not member.name.startswith("_")
                    and ast.get_docstring(member) is None
                ):
                    missing.append(f"{path.name}:{node.name}.{member.name}")
    return missing


def test_public_functions_and_methods_have_docstrings() -> None:
    """Every public callable in the validation package carries a docstring."""
    missing: list[str] = []
    for path in sorted(_PACKAGE_ROOT.glob("*.py")):
        missing.extend(_missing_docstrings(path))

    assert not missing, f"Missing docstrings: {missing}"
