"""Domain-level error types shared by adapters, use cases, and the sample app.

Adapters raise these instead of leaking parser or filesystem exceptions; the
use-case layer maps them onto ``UseCaseError`` codes.
"""
from __future__ import annotations

from typing import Optional


class StructuralError(Exception):
    """Base class for checker failures."""


class ConfigError(StructuralError):
    """The import rules file is missing or malformed."""

    def __init__(self, message: str, *, path: Optional[str] = None, missing: bool = False) -> None:
        super().__init__(message)
        self.path = path
        self.missing = missing


class BaselineError(StructuralError):
    """The baseline file exists but cannot be read."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class SourceParseError(StructuralError):
    """A scanned Python file failed to parse."""

    def __init__(self, message: str, *, path: str, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.path = path
        self.line = line


class ConstructionError(StructuralError):
    """A required collaborator was absent, or a back-reference was wired twice."""


__all__ = [
    "BaselineError",
    "ConfigError",
    "ConstructionError",
    "SourceParseError",
    "StructuralError",
]
