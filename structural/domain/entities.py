"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

_log = logging.getLogger(__name__)

BASELINE_SEPARATOR = "$"


@dataclass(frozen=True)
class ImportRef:
    """A single imported dotted path as written (after relative resolution)."""

    path: str
    """Fully qualified import target, e.g. ``pkg.domain.handler.Handler``."""

    line: int
    """1-based line of the import statement."""

    @property
    def package(self) -> str:
        """Import path without its last segment (module or imported name)."""
        return self.path.rpartition(".")[0]


@dataclass(frozen=True)
class SourceUnit:
    """One parsed Python file and the imports it declares."""

    path: Path
    package: str
    """Dotted package containing the module; empty for top-level modules."""

    imports: Tuple[ImportRef, ...] = ()

    @property
    def stem(self) -> str:
        return self.path.stem


@dataclass(frozen=True)
class ForbiddenImport:
    """A checked package imports a sibling package it is not allowed to use."""

    line_number: int
    importing_package: str
    imported_package: str


@dataclass(frozen=True)
class FileOnSameLevelAsPackages:
    """A checked package imports a module that sits beside the checked packages."""

    line_number: int
    class_name: str
    imported_package: str


Violation = Union[ForbiddenImport, FileOnSameLevelAsPackages]


@dataclass(frozen=True)
class ImportRules:
    """Checked local package names and their allowed import targets."""

    checked_packages: Tuple[str, ...]
    allowed: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def allowed_for(self, local_package: str) -> Tuple[str, ...]:
        return tuple(self.allowed.get(local_package, ()))

    def describe(self) -> str:
        parts = [f"{name} -> [{', '.join(targets)}]" for name, targets in self.allowed.items()]
        return "{" + "; ".join(parts) + "}"


@dataclass(frozen=True)
class BaselineData:
    """Serialized violation identifiers that a check should ignore."""

    violations_to_ignore: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.violations_to_ignore)


IgnoredViolations = Dict[str, List[Violation]]


def baseline_id(file_stem: str, violation: Violation) -> str:
    """Build the stable baseline identifier for ``violation`` found in ``file_stem``."""
    if isinstance(violation, FileOnSameLevelAsPackages):
        fields = (
            "FileOnSameLevelAsPackages",
            file_stem,
            str(violation.line_number),
            violation.class_name,
            violation.imported_package,
        )
    else:
        fields = (
            "ForbiddenImport",
            file_stem,
            str(violation.line_number),
            violation.importing_package,
            violation.imported_package,
        )
    return BASELINE_SEPARATOR.join(fields)


def parse_baseline_id(raw: str) -> Optional[Tuple[str, Violation]]:
    """Inverse of :func:`baseline_id`; returns ``(file_stem, violation)`` or ``None``."""
    parts = (raw or "").strip().split(BASELINE_SEPARATOR)
    if len(parts) != 5:
        return None
    kind, stem, line_text, first, second = parts
    try:
        line = int(line_text)
    except ValueError:
        return None
    if kind == "ForbiddenImport":
        return stem, ForbiddenImport(line, first, second)
    if kind == "FileOnSameLevelAsPackages":
        return stem, FileOnSameLevelAsPackages(line, first, second)
    return None


def group_baseline(ids: Iterable[str]) -> IgnoredViolations:
    """Group parsed baseline IDs by file stem, skipping malformed entries."""
    grouped: IgnoredViolations = {}
    for raw in ids:
        parsed = parse_baseline_id(raw)
        if parsed is None:
            _log.warning("Skipping malformed baseline entry: %r", raw)
            continue
        stem, violation = parsed
        grouped.setdefault(stem, []).append(violation)
    return grouped
