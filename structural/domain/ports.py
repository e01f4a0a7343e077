from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from .entities import BaselineData, IgnoredViolations, ImportRules, SourceUnit


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


# ---- Ports (Hexagonal boundaries) ----
class RulesPort(Protocol):
    """Source of the import rules (YAML file in production)."""

    def load(self) -> ImportRules: ...


class SourcePort(Protocol):
    """Enumerates and parses the Python files to check."""

    def scan(self) -> List[SourceUnit]: ...


class BaselinePort(Protocol):
    """Persistence for accepted, pre-existing violations."""

    def load(self) -> IgnoredViolations: ...
    def save(self, baseline: BaselineData) -> None: ...
