# structural/app/main.py
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence, TextIO, Tuple

# ---- ViewModels ----
from ..viewmodels.report_vm import ReportVM

# ---- UseCases & Adapters ----
from ..usecases.check_imports import CheckImports, CheckResult
from ..usecases.generate_baseline import GenerateBaseline
from ..adapters.baseline_xml import BaselineXml
from ..adapters.rules_yaml import RulesYaml
from ..adapters.source_ast import DEFAULT_INCLUDE, PythonSourceScanner
from ..domain.entities import BaselineData
from ..domain.ports import UseCaseError
from ..utils import logging as logging_utils

DEFAULT_CONFIG_NAME = "structural.yml"
DEFAULT_BASELINE_NAME = "baseline.xml"

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


@dataclass
class CliSettings:
    """Resolved runtime settings: explicit flags, then environment, then defaults."""

    root: Path = Path(".")
    config_path: Optional[Path] = None
    baseline_path: Optional[Path] = None
    include: Tuple[str, ...] = DEFAULT_INCLUDE
    exclude: Tuple[str, ...] = ()
    verbose: bool = False

    @property
    def rules_file(self) -> Path:
        return self.config_path or self.root / DEFAULT_CONFIG_NAME

    @property
    def baseline_file(self) -> Path:
        return self.baseline_path or self.root / DEFAULT_BASELINE_NAME

    @classmethod
    def from_args(
        cls, args: argparse.Namespace, env: Optional[Mapping[str, str]] = None
    ) -> "CliSettings":
        env = os.environ if env is None else env
        root = Path(args.root or env.get("STRUCTURAL_ROOT") or ".")
        config = args.config or env.get("STRUCTURAL_CONFIG")
        baseline = args.baseline or env.get("STRUCTURAL_BASELINE")
        return cls(
            root=root,
            config_path=Path(config) if config else None,
            baseline_path=Path(baseline) if baseline else None,
            include=tuple(args.include or DEFAULT_INCLUDE),
            exclude=tuple(args.exclude or ()),
            verbose=bool(args.verbose),
        )


class App:
    """Bootstrap: wire adapters into use cases and render results via ReportVM."""

    def __init__(
        self,
        settings: CliSettings,
        *,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.settings = settings
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.report_vm = ReportVM()

        # ---- Adapters & UseCases (lazy init) ----
        self._rules: Optional[RulesYaml] = None
        self._scanner: Optional[PythonSourceScanner] = None
        self._baseline: Optional[BaselineXml] = None
        self.uc_check: Optional[CheckImports] = None
        self.uc_baseline: Optional[GenerateBaseline] = None

    def _ensure_adapters(self) -> None:
        if self._rules is not None:
            return
        self._rules = RulesYaml(self.settings.rules_file)
        self._scanner = PythonSourceScanner(
            self.settings.root,
            include=self.settings.include,
            exclude=self.settings.exclude,
        )
        self._baseline = BaselineXml(self.settings.baseline_file)
        self.uc_check = CheckImports(self._rules, self._scanner, self._baseline)
        self.uc_baseline = GenerateBaseline(self._rules, self._scanner, self._baseline)
        self._log.debug(
            "Wired adapters: rules=%s baseline=%s root=%s",
            self.settings.rules_file,
            self.settings.baseline_file,
            self.settings.root,
        )

    # ------------------------------------------------------------------
    def run_check(self) -> int:
        self._ensure_adapters()
        try:
            result: CheckResult = self.uc_check()
        except UseCaseError as err:
            return self._report_error(err)

        self.report_vm.apply_result(result)
        for line in self.report_vm.lines():
            print(line, file=self.out)
        if self.report_vm.has_violations:
            print(self.report_vm.summary(), file=self.err)
            return EXIT_VIOLATIONS
        return EXIT_OK

    def run_baseline(self) -> int:
        self._ensure_adapters()
        try:
            baseline: BaselineData = self.uc_baseline()
        except UseCaseError as err:
            return self._report_error(err)
        print(
            f"Baseline with {len(baseline)} entries written to {self.settings.baseline_file}",
            file=self.out,
        )
        return EXIT_OK

    def _report_error(self, err: UseCaseError) -> int:
        self._log.debug("Use case failed: code=%s meta=%s", err.code, err.meta)
        print(f"error [{err.code}]: {err.message}", file=self.err)
        return EXIT_ERROR


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structural",
        description="Check that Python packages only import from allowed sibling packages.",
    )
    parser.add_argument("--root", default=None, help="Source root to scan (default: .)")
    parser.add_argument("--config", default=None, help=f"Rules file (default: <root>/{DEFAULT_CONFIG_NAME})")
    parser.add_argument(
        "--baseline", default=None, help=f"Baseline file (default: <root>/{DEFAULT_BASELINE_NAME})"
    )
    parser.add_argument("--include", action="append", help="Glob of files to scan (repeatable)")
    parser.add_argument("--exclude", action="append", help="Glob of files to skip (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("check", help="Report import rule violations")
    sub.add_parser("baseline", help="Write all current violations to the baseline file")
    return parser


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for a checker run."""
    return _build_parser().parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = _parse_args(argv)
    logging_utils.configure_root()
    settings = CliSettings.from_args(args)
    logging_utils.apply_cli_verbosity(settings.verbose)
    app = App(settings)
    if args.command == "baseline":
        return app.run_baseline()
    return app.run_check()


if __name__ == "__main__":
    sys.exit(main())
