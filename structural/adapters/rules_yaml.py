from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..domain.entities import ImportRules
from ..domain.errors import ConfigError
from ..domain.ports import RulesPort
from ..domain.rules import build_import_rules


class RulesDocument(BaseModel):
    """Top-level shape of ``structural.yml``; rule semantics live in the domain."""

    model_config = ConfigDict(extra="allow")

    packages: Optional[List[Any]] = Field(default=None, description="Local package names to check")
    rules: Any = Field(
        default=None, description="Arrow chains or per-package allow-lists"
    )


class RulesYaml(RulesPort):
    """Load import rules from a YAML file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._log = logging.getLogger(__name__)

    def load(self) -> ImportRules:
        if not self.path.is_file():
            raise ConfigError(
                f"Could not find config file: {self.path}", path=str(self.path), missing=True
            )
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            self._log.debug("YAML error in %s: %s", self.path, exc)
            raise ConfigError("Could not parse config file", path=str(self.path)) from exc

        if not isinstance(data, dict):
            raise ConfigError("Could not parse config file", path=str(self.path))

        try:
            document = RulesDocument.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(
                f"Invalid config file {self.path}: {exc.error_count()} error(s)",
                path=str(self.path),
            ) from exc

        payload: Dict[str, Any] = {"packages": document.packages}
        if document.rules is not None:
            payload["rules"] = document.rules
        rules = build_import_rules(payload)
        self._log.debug("Loaded %d checked packages from %s", len(rules.checked_packages), self.path)
        return rules


__all__ = ["RulesDocument", "RulesYaml"]
