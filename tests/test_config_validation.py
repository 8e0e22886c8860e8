"""Tests for collect-all preference file validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from riskgate.config import _suggest_key, validate_preferences_file
from riskgate.constants.config import ALLOWED_CONFIG_KEYS
from riskgate.constants.validation import ALL_CFG_CODES, CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007
from riskgate.exceptions.validation import ValidationError, format_errors, sort_errors


def _write(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "riskgate.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in errors]


def test_valid_file_has_no_errors(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "default_label: main\n"
        "thresholds:\n"
        "  total: {action: break, active: true, threshold: 0.3}\n"
        "  vulnerability: {action: warn, active: false, threshold: 0}\n"
        "ignored_issues:\n"
        "  - {id: CVE-1, tag: HV1, reason: notRelevant}\n",
    )

    assert validate_preferences_file(tmp_path) == []


def test_missing_default_file_is_fine(tmp_path: Path) -> None:
    assert validate_preferences_file(tmp_path) == []


def test_missing_explicit_file(tmp_path: Path) -> None:
    errors = validate_preferences_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert _codes(errors) == [CFG001]


def test_invalid_yaml(tmp_path: Path) -> None:
    _write(tmp_path, "thresholds: {\n")

    assert _codes(validate_preferences_file(tmp_path)) == [CFG002]


def test_non_mapping(tmp_path: Path) -> None:
    _write(tmp_path, "just a string\n")

    assert _codes(validate_preferences_file(tmp_path)) == [CFG003]


def test_unknown_top_level_key_suggests_fix(tmp_path: Path) -> None:
    _write(tmp_path, "threshold: {}\n")

    errors = validate_preferences_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].field == "threshold"
    assert "thresholds" in errors[0].hint


def test_unknown_domain_suggests_fix(tmp_path: Path) -> None:
    _write(tmp_path, "thresholds:\n  licence: {action: warn, active: true, threshold: 0.5}\n")

    errors = validate_preferences_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].field == "thresholds.licence"
    assert "license" in errors[0].hint


def test_collects_every_threshold_problem(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "thresholds:\n"
        "  total: {action: explode, active: 1, threshold: 2.5}\n"
        "  author: {action: warn}\n",
    )

    errors = sort_errors(validate_preferences_file(tmp_path))

    assert sorted(_codes(errors)) == [CFG005, CFG005, CFG005, CFG006, CFG007]
    fields = {error.field for error in errors}
    assert {
        "thresholds.total.action",
        "thresholds.total.active",
        "thresholds.total.threshold",
        "thresholds.author.active",
        "thresholds.author.threshold",
    } == fields


def test_ignored_issue_problems(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "ignored_issues:\n"
        "  - {id: CVE-1, tag: 7, reason: because}\n"
        "  - nope\n",
    )

    errors = validate_preferences_file(tmp_path)

    assert sorted(_codes(errors)) == [CFG005, CFG005, CFG006]
    reason_error = next(error for error in errors if error.code == CFG006)
    assert "falsePositive" in reason_error.hint


def test_format_errors_is_stable(tmp_path: Path) -> None:
    _write(tmp_path, "colour: red\ndefault_label: 5\n")

    errors = validate_preferences_file(tmp_path)
    rendered = format_errors(list(reversed(errors)))

    assert rendered.splitlines()[0].startswith(f"[{CFG004}]")
    assert rendered.splitlines()[1].startswith(f"[{CFG005}]")
    assert rendered == format_errors(errors)


@pytest.mark.parametrize(
    ("key", "expected"),
    [("ignore_issues", "ignored_issues"), ("defaultlabel", "default_label"), ("zzz", "")],
)
def test_suggest_key(key: str, expected: str) -> None:
    hint = _suggest_key(key, ALLOWED_CONFIG_KEYS)

    assert (expected in hint) if expected else hint == ""


def test_codes_are_unique() -> None:
    assert len(set(ALL_CFG_CODES)) == len(ALL_CFG_CODES)


@pytest.mark.parametrize(
    ("yaml_content", "field"),
    [
        ("thresholds:\n  total: {action: [warn], active: true, threshold: 0.5}\n", "thresholds.total.action"),
        ("thresholds:\n  total: {action: {kind: warn}, active: true, threshold: 0.5}\n", "thresholds.total.action"),
        ("ignored_issues:\n  - {id: CVE-1, tag: HV1, reason: {x: 1}}\n", "ignored_issues[0].reason"),
        ("ignored_issues:\n  - {id: CVE-1, tag: HV1, reason: [other]}\n", "ignored_issues[0].reason"),
    ],
    ids=["action_list", "action_mapping", "reason_mapping", "reason_list"],
)
def test_non_string_enum_values_are_type_errors(tmp_path: Path, yaml_content: str, field: str) -> None:
    _write(tmp_path, yaml_content)

    errors = validate_preferences_file(tmp_path)

    assert _codes(errors) == [CFG005]
    assert errors[0].field == field


def test_duplicate_domain_spellings(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "thresholds:\n"
        "  malicious_code: {action: warn, active: true, threshold: 0.5}\n"
        "  maliciousCode: {action: break, active: true, threshold: 0.9}\n",
    )

    errors = validate_preferences_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].field == "thresholds.malicious_code"
    assert "maliciousCode" in errors[0].message
