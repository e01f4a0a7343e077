from __future__ import annotations

import ast
from pathlib import Path

import pytest

from structural.adapters.source_ast import PythonSourceScanner, collect_imports, resolve_from
from structural.domain.checker import find_violations
from structural.domain.entities import (
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    ImportRef,
    ImportRules,
)
from structural.domain.errors import SourceParseError


def _write(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_collect_imports_handles_plain_from_and_star() -> None:
    source = "\n".join(
        [
            "import os",
            "import app.data.repository as repo",
            "from app.ui import screen, widgets",
            "from app.domain.models import *",
        ]
    )

    refs = collect_imports(ast.parse(source), "app.ui")

    assert refs == [
        ImportRef("os", 1),
        ImportRef("app.data.repository", 2),
        ImportRef("app.ui.screen", 3),
        ImportRef("app.ui.widgets", 3),
        ImportRef("app.domain.models.*", 4),
    ]


def test_collect_imports_walks_nested_blocks_in_line_order() -> None:
    source = "\n".join(
        [
            "from typing import TYPE_CHECKING",
            "if TYPE_CHECKING:",
            "    from app.data.repository import Repository",
            "def load():",
            "    import app.domain.loader",
        ]
    )

    refs = collect_imports(ast.parse(source), "app.ui")

    assert [ref.line for ref in refs] == [1, 3, 5]
    assert refs[1].path == "app.data.repository.Repository"
    assert refs[2].path == "app.domain.loader"


@pytest.mark.parametrize(
    ("module", "level", "package", "expected"),
    [
        ("os", 0, "app.ui", "os"),
        ("models", 1, "app.ui", "app.ui.models"),
        (None, 1, "app.ui", "app.ui"),
        ("domain.models", 2, "app.ui", "app.domain.models"),
        (None, 2, "app.ui", "app"),
        ("x", 4, "app.ui", None),
    ],
)
def test_resolve_from(module, level, package, expected) -> None:
    assert resolve_from(module, level, package) == expected


def test_scanner_derives_packages_from_paths(tmp_path: Path) -> None:
    _write(tmp_path, "app/__init__.py", "")
    _write(tmp_path, "app/data/__init__.py", "from .repository import Repository\n")
    _write(tmp_path, "app/data/repository.py", "from ..ui.view_model import ViewModel\n")

    units = PythonSourceScanner(tmp_path).scan()

    by_name = {unit.path.relative_to(tmp_path).as_posix(): unit for unit in units}
    assert by_name["app/__init__.py"].package == "app"
    assert by_name["app/data/__init__.py"].package == "app.data"
    assert by_name["app/data/__init__.py"].imports == (
        ImportRef("app.data.repository.Repository", 1),
    )
    assert by_name["app/data/repository.py"].imports == (
        ImportRef("app.ui.view_model.ViewModel", 1),
    )


def test_scanner_skips_pycache_hidden_and_excluded(tmp_path: Path) -> None:
    _write(tmp_path, "app/ui/screen.py", "")
    _write(tmp_path, "app/ui/__pycache__/screen.py", "")
    _write(tmp_path, ".venv/lib/site.py", "")
    _write(tmp_path, "app/tests/test_screen.py", "")
    _write(tmp_path, "app/ui/notes.txt", "")

    scanner = PythonSourceScanner(tmp_path, exclude=("app/tests/*",))
    paths = [unit.path.relative_to(tmp_path).as_posix() for unit in scanner.scan()]

    assert paths == ["app/ui/screen.py"]


def test_scanner_include_patterns_limit_files(tmp_path: Path) -> None:
    _write(tmp_path, "app/ui/screen.py", "")
    _write(tmp_path, "other/tool.py", "")

    scanner = PythonSourceScanner(tmp_path, include=("app/**/*.py",))

    assert [unit.stem for unit in scanner.scan()] == ["screen"]


def test_scanner_reports_syntax_errors(tmp_path: Path) -> None:
    bad = _write(tmp_path, "app/ui/broken.py", "import os\ndef (:\n")

    with pytest.raises(SourceParseError) as excinfo:
        PythonSourceScanner(tmp_path).scan()

    assert excinfo.value.path == str(bad)
    assert excinfo.value.line == 2


def test_scanned_package_imports_follow_the_rules(tmp_path: Path) -> None:
    _write(tmp_path, "app/__init__.py", "")
    _write(tmp_path, "app/domain/__init__.py", "")
    _write(tmp_path, "app/helpers.py", "")
    _write(
        tmp_path,
        "app/ui/view.py",
        "\n".join(
            [
                "from __future__ import annotations",
                "from app import domain",
                "from .. import domain as d2",
                "import app.domain",
                "from .. import helpers",
            ]
        ),
    )
    rules = ImportRules(
        checked_packages=("domain", "ui"),
        allowed={"domain": ("domain",), "ui": ("ui", "domain")},
    )

    violations = find_violations(PythonSourceScanner(tmp_path).scan(), rules)

    assert violations == {
        tmp_path / "app/ui/view.py": [
            FileOnSameLevelAsPackages(line_number=5, class_name="helpers", imported_package="app")
        ]
    }


def test_flat_layout_skips_stdlib_imports(tmp_path: Path) -> None:
    _write(tmp_path, "domain/__init__.py", "")
    _write(
        tmp_path,
        "domain/model.py",
        "from __future__ import annotations\nfrom typing import Optional\nimport os\n",
    )
    _write(tmp_path, "ui/__init__.py", "")
    _write(tmp_path, "ui/view.py", "from domain.model import Model\n")
    _write(tmp_path, "domain/service.py", "from ui import view\n")
    rules = ImportRules(
        checked_packages=("domain", "ui"),
        allowed={"domain": ("domain",), "ui": ("ui", "domain")},
    )

    violations = find_violations(PythonSourceScanner(tmp_path).scan(), rules)

    assert violations == {
        tmp_path / "domain/service.py": [
            ForbiddenImport(line_number=1, importing_package="domain", imported_package="ui")
        ]
    }
