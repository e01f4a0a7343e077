from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from .entities import (
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    ImportRules,
    SourceUnit,
    Violation,
)


def find_violations(
    units: Iterable[SourceUnit],
    rules: ImportRules,
    ignored: Optional[Mapping[str, Sequence[Violation]]] = None,
) -> Dict[Path, List[Violation]]:
    """Return violations per file; files without violations are omitted.

    A unit is checked when the last segment of its package (``domain`` for
    ``app.feature.domain``) is one of ``rules.checked_packages``. Only imports
    under the same parent (``app.feature``) are considered. For checked
    packages at the top of the scan root, that means imports whose first
    segment names a scanned package or module.

    Importing a sibling package itself (``from app import domain``) goes
    through the allow-list like any import from inside it. Only a plain
    module beside the checked packages yields
    :class:`FileOnSameLevelAsPackages`.
    """
    units = list(units)
    ignored = ignored or {}
    violations: Dict[Path, List[Violation]] = {}
    checked = set(rules.checked_packages)
    packages, local_roots = _local_names(units)
    local_roots |= checked

    for unit in units:
        if not unit.package:
            continue
        package_parts = unit.package.split(".")
        local_package = package_parts[-1]
        if local_package not in checked:
            continue
        prefix = package_parts[:-1]
        allowed = rules.allowed_for(local_package)
        skip = ignored.get(unit.stem, ())

        for ref in unit.imports:
            path_parts = ref.path.split(".")
            if len(path_parts) <= len(prefix) or path_parts[: len(prefix)] != prefix:
                continue
            if not prefix and path_parts[0] not in local_roots:
                # stdlib or third party, e.g. ``from typing import Optional``
                continue

            imported_local = path_parts[len(prefix)]
            violation: Violation
            if len(path_parts) == len(prefix) + 1:
                if imported_local not in checked and ref.path not in packages:
                    # module sitting beside the checked packages
                    violation = FileOnSameLevelAsPackages(
                        line_number=ref.line,
                        class_name=imported_local,
                        imported_package=ref.package,
                    )
                elif imported_local in allowed:
                    continue
                else:
                    violation = ForbiddenImport(
                        line_number=ref.line,
                        importing_package=unit.package,
                        imported_package=ref.path,
                    )
            elif imported_local in allowed:
                continue
            else:
                violation = ForbiddenImport(
                    line_number=ref.line,
                    importing_package=unit.package,
                    imported_package=ref.package,
                )

            if violation in skip:
                continue
            bucket = violations.setdefault(unit.path, [])
            if violation not in bucket:
                bucket.append(violation)

    return violations


def _local_names(units: Sequence[SourceUnit]) -> Tuple[Set[str], Set[str]]:
    """Return (dotted packages, first segments of any local module) for ``units``."""
    packages: Set[str] = set()
    roots: Set[str] = set()
    for unit in units:
        if unit.package:
            parts = unit.package.split(".")
            for end in range(1, len(parts) + 1):
                packages.add(".".join(parts[:end]))
            roots.add(parts[0])
        elif unit.stem != "__init__":
            roots.add(unit.stem)
    return packages, roots


def count_violations(violations: Mapping[Path, Sequence[Violation]]) -> int:
    return sum(len(items) for items in violations.values())


__all__ = ["count_violations", "find_violations"]
