"""Domain package exports for value objects, rules, and the violation search."""

from .checker import count_violations, find_violations
from .entities import (
    BaselineData,
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    ImportRef,
    ImportRules,
    SourceUnit,
    Violation,
    baseline_id,
    group_baseline,
    parse_baseline_id,
)
from .rules import build_import_rules

__all__ = [
    "BaselineData",
    "FileOnSameLevelAsPackages",
    "ForbiddenImport",
    "ImportRef",
    "ImportRules",
    "SourceUnit",
    "Violation",
    "baseline_id",
    "build_import_rules",
    "count_violations",
    "find_violations",
    "group_baseline",
    "parse_baseline_id",
]
