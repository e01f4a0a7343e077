from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..domain.entities import FileOnSameLevelAsPackages, Violation
from ..usecases.check_imports import CheckResult

ALERT = "\U0001F6A8"
OK_MARK = "✅"


@dataclass(frozen=True)
class ReportLine:
    """One rendered violation row."""

    path: str
    line_number: int
    message: str

    def render(self) -> str:
        return f"{ALERT} {self.path}:{self.line_number} : {self.message}"


class ReportVM:
    """Turns a CheckResult into printable lines; no I/O here."""

    def __init__(self, result: Optional[CheckResult] = None) -> None:
        self.result = result

    def apply_result(self, result: CheckResult) -> None:
        self.result = result

    @property
    def has_violations(self) -> bool:
        return self.result is not None and not self.result.ok

    def rows(self) -> List[ReportLine]:
        if self.result is None:
            return []
        rows: List[ReportLine] = []
        for path, violations in self.result.violations.items():
            shown = str(Path(path).absolute())
            for violation in violations:
                rows.append(ReportLine(shown, violation.line_number, describe(violation)))
        return rows

    def lines(self) -> List[str]:
        if not self.has_violations:
            return [f"{OK_MARK} All package imports follow the specified package rules."]
        return [f"{ALERT} Import rule violations found:"] + [row.render() for row in self.rows()]

    def summary(self) -> str:
        count = self.result.file_count if self.result is not None else 0
        noun = "file" if count == 1 else "files"
        return f"Import rule violations detected in {count} {noun}."


def describe(violation: Violation) -> str:
    if isinstance(violation, FileOnSameLevelAsPackages):
        return (
            f'`class "{violation.class_name}" is on the same level as '
            f'"{violation.imported_package}" package. Move into a package`'
        )
    return f"`{violation.importing_package}` cannot import from `{violation.imported_package}`"


__all__ = ["ReportLine", "ReportVM", "describe"]
