from __future__ import annotations

from dataclasses import dataclass

from structural.domain.checker import find_violations
from structural.domain.entities import BaselineData, baseline_id
from structural.domain.ports import BaselinePort, RulesPort, SourcePort, UseCaseError
from structural.usecases.error_mapping import map_structural_error


@dataclass
class GenerateBaseline:
    """Record every current violation so later checks ignore it."""

    rules_port: RulesPort
    source_port: SourcePort
    baseline_port: BaselinePort

    def __call__(self) -> BaselineData:
        try:
            rules = self.rules_port.load()
            violations = find_violations(self.source_port.scan(), rules, ignored={})
            baseline = BaselineData(
                tuple(
                    baseline_id(path.stem, violation)
                    for path, items in violations.items()
                    for violation in items
                )
            )
            self.baseline_port.save(baseline)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_structural_error(exc, default_code="BASELINE_FAILED") from exc
        return baseline


__all__ = ["GenerateBaseline"]
