"""Root logger setup for the ``structural`` command line.

``STRUCTURAL_LOG_LEVEL`` (a level name or number) wins over everything;
otherwise a truthy ``STRUCTURAL_DEBUG`` selects DEBUG.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LEVEL_ENV = "STRUCTURAL_LOG_LEVEL"
DEBUG_ENV = "STRUCTURAL_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_TRUTHY = {"1", "true", "yes", "on"}


def _coerce_level(value: Optional[str], fallback: int) -> int:
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None) if text else None
    return candidate if isinstance(candidate, int) else fallback


def _env_level() -> Optional[int]:
    explicit = os.getenv(LEVEL_ENV)
    if explicit:
        return _coerce_level(explicit, logging.INFO)
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.WARNING) -> int:
    """Install the compact handler once and return the effective root level."""
    if isinstance(default_level, str):
        default_level = _coerce_level(default_level, logging.WARNING)
    env_level = _env_level()
    effective = env_level if env_level is not None else int(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_cli_verbosity(verbose: bool) -> int:
    """Apply ``-v`` (DEBUG) unless the environment already picked a level."""
    env_level = _env_level()
    if env_level is None:
        env_level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger().setLevel(env_level)
    return env_level


__all__ = ["configure_root", "apply_cli_verbosity"]
