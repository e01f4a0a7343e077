"""Interpretation of the rules document into :class:`ImportRules`.

Two rule syntaxes are accepted::

    packages:
      - local
      - remote
      - data
      - domain
      - ui

    # arrow chains, read pairwise
    rules:
      - data <- domain -> ui
      - local <- data

    # or an explicit allow-list per package
    rules:
      domain:
        - ui
        - data

An arrow points from the package being imported to the package allowed to
import it: ``a -> b`` lets ``b`` import from ``a`` and ``a <- b`` lets ``a``
import from ``b``.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping

from .entities import ImportRules
from .errors import ConfigError

_log = logging.getLogger(__name__)

_ARROW = re.compile(r"(<-|->)")


def build_import_rules(data: Mapping[str, Any]) -> ImportRules:
    """Build rules from an already-loaded mapping (YAML document)."""
    raw_packages = data.get("packages")
    checked = [item for item in raw_packages or [] if isinstance(item, str)]
    if "rules" not in data or data.get("rules") is None:
        raise ConfigError("No rules specified in config file")
    if not checked:
        raise ConfigError("No packages specified to check in config file")

    allowed: Dict[str, List[str]] = {}
    # each checked package may import from within itself
    for name in checked:
        _add_allowed(allowed, name, [name])

    raw_rules = data["rules"]
    if isinstance(raw_rules, list):
        for rule in raw_rules:
            if isinstance(rule, str):
                _apply_arrow_rule(allowed, rule)
    elif isinstance(raw_rules, Mapping):
        for key, value in raw_rules.items():
            if isinstance(key, str) and isinstance(value, list):
                _add_allowed(allowed, key, value)
    else:
        _log.warning("Invalid format in rules section: %r", type(raw_rules).__name__)

    return ImportRules(
        checked_packages=tuple(checked),
        allowed={name: tuple(targets) for name, targets in allowed.items()},
    )


def _apply_arrow_rule(allowed: Dict[str, List[str]], rule: str) -> None:
    parts = [part.strip() for part in _ARROW.split(rule)]
    # re.split with a capture group interleaves operands and arrows
    operands = parts[0::2]
    arrows = parts[1::2]
    for index, arrow in enumerate(arrows):
        source = operands[index]
        target = operands[index + 1]
        if not source or not target:
            _log.warning("Ignoring incomplete rule: %r", rule)
            continue
        if arrow == "->":
            _add_allowed(allowed, target, [source])
        else:
            _add_allowed(allowed, source, [target])


def _add_allowed(allowed: Dict[str, List[str]], key: str, values: Iterable[Any]) -> None:
    bucket = allowed.setdefault(key, [])
    for value in values:
        if isinstance(value, str) and value not in bucket:
            bucket.append(value)


__all__ = ["build_import_rules"]
