from __future__ import annotations

import logging

import pytest

from structural.domain.errors import ConfigError
from structural.domain.rules import build_import_rules


PACKAGES = ["local", "remote", "data", "domain", "ui"]


def test_every_checked_package_may_import_itself() -> None:
    rules = build_import_rules({"packages": PACKAGES, "rules": []})

    assert rules.checked_packages == tuple(PACKAGES)
    for name in PACKAGES:
        assert rules.allowed_for(name) == (name,)


def test_arrow_chain_is_read_pairwise() -> None:
    rules = build_import_rules(
        {"packages": PACKAGES, "rules": ["data <- domain -> ui", "local <- data"]}
    )

    # `data <- domain` lets data import domain; `domain -> ui` lets ui import domain
    assert rules.allowed_for("data") == ("data", "domain")
    assert rules.allowed_for("ui") == ("ui", "domain")
    assert rules.allowed_for("domain") == ("domain",)
    assert rules.allowed_for("local") == ("local", "data")


def test_forward_arrow_chain() -> None:
    rules = build_import_rules({"packages": PACKAGES, "rules": ["data -> domain -> ui"]})

    assert rules.allowed_for("domain") == ("domain", "data")
    assert rules.allowed_for("ui") == ("ui", "domain")
    assert rules.allowed_for("data") == ("data",)


def test_mapping_rules_merge_and_deduplicate() -> None:
    rules = build_import_rules(
        {
            "packages": PACKAGES,
            "rules": {
                "domain": ["ui", "data", "ui"],
                "data": ["local", "remote", 3],
            },
        }
    )

    assert rules.allowed_for("domain") == ("domain", "ui", "data")
    assert rules.allowed_for("data") == ("data", "local", "remote")


def test_mapping_rules_for_unchecked_package_are_kept() -> None:
    rules = build_import_rules({"packages": ["ui"], "rules": {"extra": ["ui"]}})

    assert rules.allowed_for("extra") == ("ui",)
    assert rules.allowed_for("missing") == ()


def test_missing_rules_section_raises() -> None:
    with pytest.raises(ConfigError, match="No rules specified in config file"):
        build_import_rules({"packages": PACKAGES})


def test_missing_packages_raises() -> None:
    with pytest.raises(ConfigError, match="No packages specified to check in config file"):
        build_import_rules({"rules": ["a -> b"]})


def test_non_string_packages_do_not_count() -> None:
    with pytest.raises(ConfigError, match="No packages"):
        build_import_rules({"packages": [1, None], "rules": []})


def test_invalid_rules_shape_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="structural.domain.rules"):
        rules = build_import_rules({"packages": ["data", "ui"], "rules": "data -> ui"})

    assert rules.allowed_for("ui") == ("ui",)
    assert any("Invalid format" in record.getMessage() for record in caplog.records)


def test_describe_lists_allowed_targets() -> None:
    rules = build_import_rules({"packages": ["data", "ui"], "rules": ["data -> ui"]})

    assert rules.describe() == "{data -> [data]; ui -> [ui, data]}"
