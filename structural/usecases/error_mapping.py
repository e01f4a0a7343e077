"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Any, Dict, Optional

from structural.domain.errors import (
    BaselineError,
    ConfigError,
    SourceParseError,
    StructuralError,
)
from structural.domain.ports import UseCaseError


def map_structural_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc (Exception): Failure raised by an adapter or domain function.
        default_code (str): Code used when the exception is not recognized.
        default_message (Optional[str]): Message used when ``exc`` has none.

    Returns:
        UseCaseError: Error carrying a stable code plus optional ``path``/``line`` meta.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ConfigError):
        code = "CONFIG_NOT_FOUND" if exc.missing else "CONFIG_INVALID"
        return UseCaseError(code, str(exc), meta=_path_meta(exc.path))
    if isinstance(exc, BaselineError):
        return UseCaseError("BASELINE_INVALID", str(exc), meta=_path_meta(exc.path))
    if isinstance(exc, SourceParseError):
        meta = _path_meta(exc.path)
        if exc.line is not None:
            meta["line"] = exc.line
        return UseCaseError("SOURCE_PARSE_FAILED", str(exc), meta=meta)
    if isinstance(exc, StructuralError):
        return UseCaseError(default_code, str(exc) or default_message or "Check failed.")

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _path_meta(path: Optional[str]) -> Dict[str, Any]:
    return {"path": path} if path else {}


__all__ = ["map_structural_error"]
