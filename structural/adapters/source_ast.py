from __future__ import annotations

import ast
import fnmatch
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ..domain.entities import ImportRef, SourceUnit
from ..domain.errors import SourceParseError
from ..domain.ports import SourcePort

DEFAULT_INCLUDE: Tuple[str, ...] = ("**/*.py",)
DEFAULT_EXCLUDE: Tuple[str, ...] = ()


class PythonSourceScanner(SourcePort):
    """Collect imports from Python files below ``root`` using :mod:`ast`.

    Package names are derived from the path relative to ``root``:
    ``root/app/data/repository.py`` lives in package ``app.data`` and
    ``root/app/data/__init__.py`` *is* package ``app.data``.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        include: Sequence[str] = DEFAULT_INCLUDE,
        exclude: Sequence[str] = DEFAULT_EXCLUDE,
    ) -> None:
        self.root = Path(root)
        self.include = tuple(include) or DEFAULT_INCLUDE
        self.exclude = tuple(exclude)
        self._log = logging.getLogger(__name__)

    def scan(self) -> List[SourceUnit]:
        units = [self.parse_file(path) for path in self._iter_files()]
        self._log.debug("Scanned %d python files under %s", len(units), self.root)
        return units

    def parse_file(self, path: Path) -> SourceUnit:
        package = self.package_for(path)
        try:
            text = path.read_text(encoding="utf-8")
            tree = ast.parse(text, filename=str(path))
        except SyntaxError as exc:
            raise SourceParseError(
                f"Could not parse {path}: {exc.msg}", path=str(path), line=exc.lineno
            ) from exc
        except UnicodeDecodeError as exc:
            raise SourceParseError(f"Could not decode {path}: {exc}", path=str(path)) from exc
        return SourceUnit(path=path, package=package, imports=tuple(collect_imports(tree, package)))

    def package_for(self, path: Path) -> str:
        relative = path.resolve().relative_to(self.root.resolve())
        parts = list(relative.parts[:-1])
        return ".".join(parts)

    # ------------------------------------------------------------------
    def _iter_files(self) -> Iterable[Path]:
        seen = set()
        for pattern in self.include:
            for path in self.root.glob(pattern):
                if not path.is_file() or path.suffix != ".py":
                    continue
                if path in seen or self._is_excluded(path):
                    continue
                seen.add(path)
        return sorted(seen)

    def _is_excluded(self, path: Path) -> bool:
        relative = path.relative_to(self.root)
        for part in relative.parts[:-1]:
            if part == "__pycache__" or part.startswith("."):
                return True
        posix = relative.as_posix()
        return any(fnmatch.fnmatch(posix, pattern) for pattern in self.exclude)


def collect_imports(tree: ast.AST, package: str) -> List[ImportRef]:
    """Return every import in ``tree``; relative imports resolve against ``package``."""
    refs: List[ImportRef] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                refs.append(ImportRef(alias.name, node.lineno))
        elif isinstance(node, ast.ImportFrom):
            base = resolve_from(node.module, node.level, package)
            if base is None:
                continue
            for alias in node.names:
                target = f"{base}.{alias.name}" if base else alias.name
                refs.append(ImportRef(target, node.lineno))
    refs.sort(key=lambda ref: ref.line)
    return refs


def resolve_from(module: Optional[str], level: int, package: str) -> Optional[str]:
    """Resolve ``from <dots><module> import ...`` to an absolute dotted base.

    Returns ``None`` when the relative import climbs above the scan root.
    """
    if not level:
        return module or ""
    parts = package.split(".") if package else []
    climb = level - 1
    if climb > len(parts):
        return None
    base_parts = parts[: len(parts) - climb]
    if module:
        base_parts = base_parts + module.split(".")
    return ".".join(base_parts)


__all__ = ["PythonSourceScanner", "collect_imports", "resolve_from"]
