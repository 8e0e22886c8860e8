"""Preference file validation for Riskgate."""

from __future__ import annotations

import difflib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from riskgate.config.loader import resolve_config_path, threshold_attribute
from riskgate.constants.config import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_IGNORED_ISSUE_KEYS,
    ALLOWED_THRESHOLD_KEYS,
)
from riskgate.constants.policy import MAX_CUTOFF, MIN_CUTOFF
from riskgate.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007
from riskgate.constants.wire import RISK_THRESHOLDS_FIELDS
from riskgate.exceptions.validation import ValidationError
from riskgate.model import Action, IgnoredReason


def validate_preferences_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a riskgate.yaml file and return every problem found.

    Never raises; ``load_preferences`` is the fail-fast counterpart.
    """
    path = resolve_config_path(root, config_path)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            return [ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")]
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}")]

    if raw is None:
        return []
    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    errors.extend(_unknown_keys(raw, ALLOWED_CONFIG_KEYS, path_str, prefix=""))

    if "default_label" in raw and raw["default_label"] is not None and not isinstance(raw["default_label"], str):
        errors.append(_type_error(path_str, "default_label", "a string", raw["default_label"]))

    if raw.get("thresholds") is not None:
        errors.extend(_validate_thresholds(raw["thresholds"], path_str))
    if raw.get("ignored_issues") is not None:
        errors.extend(_validate_ignored_issues(raw["ignored_issues"], path_str))
    return errors


def _suggest_key(key: str, allowed: Iterable[str]) -> str:
    """Return a 'did you mean' hint for a mistyped key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return f"did you mean `{matches[0]}`?" if matches else ""


def _unknown_keys(raw: dict[Any, Any], allowed: frozenset[str], path: str, *, prefix: str) -> list[ValidationError]:
    return [
        ValidationError(
            code=CFG004,
            path=path,
            field=f"{prefix}{key}",
            message=f"unknown key `{key}`",
            hint=_suggest_key(str(key), allowed),
        )
        for key in sorted(raw, key=str)
        if key not in allowed
    ]


def _type_error(path: str, field: str, expected: str, value: object) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path,
        field=field,
        message=f"`{field}` must be {expected}, got {type(value).__name__}",
    )


def _validate_thresholds(raw: Any, path: str) -> list[ValidationError]:
    if not isinstance(raw, dict):
        return [_type_error(path, "thresholds", "a mapping", raw)]

    errors: list[ValidationError] = []
    domain_keys = set(RISK_THRESHOLDS_FIELDS) | set(RISK_THRESHOLDS_FIELDS.values())
    seen: dict[str, str] = {}
    for key in sorted(raw, key=str):
        field = f"thresholds.{key}"
        attribute = threshold_attribute(str(key))
        if attribute is None:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path,
                    field=field,
                    message=f"unknown domain `{key}`",
                    hint=_suggest_key(str(key), domain_keys),
                )
            )
            continue
        if attribute in seen:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path,
                    field=field,
                    message=f"domain `{key}` duplicates `{seen[attribute]}`",
                    hint="keep only one spelling of each domain",
                )
            )
            continue
        seen[attribute] = str(key)
        errors.extend(_validate_threshold(raw[key], path, field))
    return errors


def _validate_threshold(raw: Any, path: str, field: str) -> list[ValidationError]:
    if not isinstance(raw, dict):
        return [_type_error(path, field, "a mapping", raw)]

    errors = _unknown_keys(raw, ALLOWED_THRESHOLD_KEYS, path, prefix=f"{field}.")
    for key in sorted(ALLOWED_THRESHOLD_KEYS - raw.keys()):
        errors.append(ValidationError(code=CFG005, path=path, field=f"{field}.{key}", message=f"missing `{key}`"))

    if "action" in raw and not isinstance(raw["action"], str):
        errors.append(_type_error(path, f"{field}.action", "a string", raw["action"]))
    elif "action" in raw and raw["action"] not in {action.label for action in Action}:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path,
                field=f"{field}.action",
                message="invalid value for `action`",
                hint=f"expected one of: {', '.join(action.label for action in Action)}; got: {raw['action']!r}",
            )
        )
    if "active" in raw and not isinstance(raw["active"], bool):
        errors.append(_type_error(path, f"{field}.active", "a boolean", raw["active"]))

    if "threshold" in raw:
        cutoff = raw["threshold"]
        if isinstance(cutoff, bool) or not isinstance(cutoff, int | float):
            errors.append(_type_error(path, f"{field}.threshold", "a number", cutoff))
        elif not MIN_CUTOFF <= cutoff <= MAX_CUTOFF:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path,
                    field=f"{field}.threshold",
                    message=f"`threshold` must be between {MIN_CUTOFF} and {MAX_CUTOFF}, got {cutoff}",
                )
            )
    return errors


def _validate_ignored_issues(raw: Any, path: str) -> list[ValidationError]:
    if not isinstance(raw, list):
        return [_type_error(path, "ignored_issues", "a list", raw)]

    errors: list[ValidationError] = []
    reasons = {reason.label for reason in IgnoredReason}
    for position, entry in enumerate(raw):
        field = f"ignored_issues[{position}]"
        if not isinstance(entry, dict):
            errors.append(_type_error(path, field, "a mapping", entry))
            continue
        errors.extend(_unknown_keys(entry, ALLOWED_IGNORED_ISSUE_KEYS, path, prefix=f"{field}."))
        for key in ("id", "tag"):
            if not isinstance(entry.get(key), str):
                errors.append(_type_error(path, f"{field}.{key}", "a string", entry.get(key)))
        if "reason" in entry and not isinstance(entry["reason"], str):
            errors.append(_type_error(path, f"{field}.reason", "a string", entry["reason"]))
        elif entry.get("reason") not in reasons:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path,
                    field=f"{field}.reason",
                    message="invalid value for `reason`",
                    hint=f"expected one of: {', '.join(sorted(reasons))}; got: {entry.get('reason')!r}",
                )
            )
    return errors
