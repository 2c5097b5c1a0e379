"""
Architecture guardrails: the core depends on abstractions only.
"""

import ast
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
CORE_FILES = sorted((SRC / "core").rglob("*.py"))

FORBIDDEN_IN_CORE = {"adapters", "bootstrap", "httpx", "jinja2", "rich"}
FORBIDDEN_IN_ADAPTERS = {"bootstrap"}


def imported_roots(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    roots: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            roots.update(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            roots.add(node.module.split(".")[0])
    return roots


def test_core_files_found():
    assert len(CORE_FILES) > 5


@pytest.mark.parametrize("path", CORE_FILES, ids=lambda p: str(p.relative_to(SRC)))
def test_core_does_not_import_infrastructure(path):
    assert imported_roots(path).isdisjoint(FORBIDDEN_IN_CORE)


@pytest.mark.parametrize(
    "path",
    sorted((SRC / "adapters").rglob("*.py")),
    ids=lambda p: str(p.relative_to(SRC)),
)
def test_adapters_do_not_import_composition_root(path):
    assert imported_roots(path).isdisjoint(FORBIDDEN_IN_ADAPTERS)
