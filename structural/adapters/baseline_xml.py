from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from ..domain.entities import BaselineData, IgnoredViolations, group_baseline
from ..domain.errors import BaselineError
from ..domain.ports import BaselinePort

ROOT_TAG = "StructuralBaseline"
ISSUES_TAG = "CurrentIssues"
ID_TAG = "ID"


class BaselineXml(BaselinePort):
    """Baseline file of ignored violation IDs (XML)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._log = logging.getLogger(__name__)

    def load(self) -> IgnoredViolations:
        if not self.path.is_file():
            self._log.debug("No baseline at %s", self.path)
            return {}
        try:
            tree = ET.parse(self.path)
        except ET.ParseError as exc:
            raise BaselineError(f"Could not parse baseline file: {exc}", path=str(self.path)) from exc

        root = tree.getroot()
        if root.tag != ROOT_TAG:
            raise BaselineError(
                f"Unexpected baseline root element <{root.tag}>", path=str(self.path)
            )
        ids = [(node.text or "").strip() for node in root.iter(ID_TAG)]
        return group_baseline(item for item in ids if item)

    def save(self, baseline: BaselineData) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(to_xml(baseline))
        self._log.info("Wrote %d baseline entries to %s", len(baseline), self.path)


def to_xml(baseline: BaselineData) -> str:
    root = ET.Element(ROOT_TAG)
    issues = ET.SubElement(root, ISSUES_TAG)
    for violation_id in baseline.violations_to_ignore:
        ET.SubElement(issues, ID_TAG).text = violation_id
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" ?>\n' + body + "\n"


__all__ = ["BaselineXml", "to_xml"]
