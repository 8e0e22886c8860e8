"""Preference loading and normalization from ``riskgate.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from riskgate.codec import decode_ignored_issue, decode_threshold
from riskgate.constants.config import CONFIG_FILENAME
from riskgate.constants.wire import RISK_THRESHOLDS_FIELDS
from riskgate.exceptions import ConfigError, UnknownTaxonomyLabel, WireFormatError
from riskgate.model import CorePreferences, IgnoredIssue, RiskThresholds, Threshold

logger = logging.getLogger(__name__)


def load_preferences(root: Path, config_path: Path | None = None) -> CorePreferences:
    """Load project preferences from ``riskgate.yaml`` or an explicit path.

    Thresholds missing from the file are filled with inactive defaults, so the
    result always carries a threshold for every domain and the total.
    """
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CorePreferences()

    raw = read_config_mapping(path)

    default_label = raw.get("default_label")
    if default_label is not None and not isinstance(default_label, str):
        raise ConfigError("default_label must be a string")

    preferences = CorePreferences(
        default_label=default_label,
        thresholds=_build_thresholds(raw.get("thresholds")),
        ignored_issues=_build_ignored_issues(raw.get("ignored_issues")),
    )
    logger.debug("Loaded preferences from %s", path)
    return preferences


def resolve_config_path(root: Path, config_path: Path | None) -> Path:
    return config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)


def read_config_mapping(path: Path) -> dict[str, Any]:
    """Parse a YAML file that must hold a mapping; an empty file is an empty mapping."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def threshold_attribute(key: str) -> str | None:
    """Map a thresholds key, in snake_case or wire camelCase, to its attribute name."""
    if key in RISK_THRESHOLDS_FIELDS:
        return key
    for attribute, wire_name in RISK_THRESHOLDS_FIELDS.items():
        if wire_name == key:
            return attribute
    return None


def _build_thresholds(raw: Any) -> RiskThresholds:
    if raw is None:
        return RiskThresholds()
    if not isinstance(raw, dict):
        raise ConfigError("thresholds must be a mapping")

    values: dict[str, Threshold] = {}
    for key, value in raw.items():
        attribute = threshold_attribute(str(key))
        if attribute is None:
            raise ConfigError(f"thresholds has unknown domain {key!r}")
        if attribute in values:
            raise ConfigError(f"thresholds names domain {attribute!r} more than once (got {key!r})")
        try:
            values[attribute] = decode_threshold(value)
        except (WireFormatError, UnknownTaxonomyLabel) as exc:
            raise ConfigError(f"thresholds.{key}: {exc}") from exc
    return RiskThresholds(**values)


def _build_ignored_issues(raw: Any) -> tuple[IgnoredIssue, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError("ignored_issues must be a list")

    entries: list[IgnoredIssue] = []
    for position, value in enumerate(raw):
        try:
            entries.append(decode_ignored_issue(value))
        except (WireFormatError, UnknownTaxonomyLabel) as exc:
            raise ConfigError(f"ignored_issues[{position}]: {exc}") from exc
    return tuple(entries)
