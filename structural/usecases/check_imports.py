from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from structural.domain.checker import count_violations, find_violations
from structural.domain.entities import ImportRules, Violation
from structural.domain.ports import BaselinePort, RulesPort, SourcePort, UseCaseError
from structural.usecases.error_mapping import map_structural_error


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one rules check over the scanned tree."""

    violations: Mapping[Path, Sequence[Violation]]
    rules: ImportRules
    scanned: int = 0

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def file_count(self) -> int:
        return len(self.violations)

    @property
    def violation_count(self) -> int:
        return count_violations(self.violations)


@dataclass
class CheckImports:
    """Load rules and baseline, scan sources, and report import violations."""

    rules_port: RulesPort
    source_port: SourcePort
    baseline_port: Optional[BaselinePort] = None
    _log: logging.Logger = field(
        default_factory=lambda: logging.getLogger(__name__), init=False, repr=False
    )

    def __call__(self) -> CheckResult:
        try:
            rules = self.rules_port.load()
            self._log.info("Allowed import rules loaded: %s", rules.describe())
            ignored = self.baseline_port.load() if self.baseline_port is not None else {}
            units = self.source_port.scan()
            violations: Dict[Path, List[Violation]] = find_violations(units, rules, ignored)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_structural_error(exc, default_code="CHECK_FAILED") from exc

        result = CheckResult(violations=violations, rules=rules, scanned=len(units))
        self._log.info(
            "Checked %d files: %d violation(s) in %d file(s)",
            result.scanned,
            result.violation_count,
            result.file_count,
        )
        return result


__all__ = ["CheckImports", "CheckResult"]
