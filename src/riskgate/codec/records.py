"""Decode and encode wire records.

Decoders accept canonical field names and their historical aliases.
Encoders emit canonical names only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from riskgate.codec.fields import (
    ensure_mapping,
    optional_count,
    optional_float,
    optional_str,
    require,
    require_bool,
    require_float,
    require_str,
)
from riskgate.constants.policy import MAX_CUTOFF, MIN_CUTOFF
from riskgate.constants.scoring import MAX_SCORE, MIN_SCORE
from riskgate.constants.wire import (
    DESCRIPTOR_TYPE_FIELDS,
    ISSUE_DOMAIN_FIELDS,
    ISSUE_SEVERITY_FIELDS,
    PROJECT_THRESHOLDS_FIELDS,
    RISK_SCORES_MALICIOUS_FIELDS,
    RISK_THRESHOLDS_FIELDS,
    SPECIFIER_REGISTRY_FIELDS,
    THRESHOLD_CUTOFF_FIELD,
)
from riskgate.exceptions import UnknownTaxonomyLabel, WireFormatError
from riskgate.model import (
    Action,
    DefaultLabel,
    IgnoredIssue,
    IgnoredReason,
    Issue,
    IssueImpacts,
    PackageDescriptor,
    PackageSpecifier,
    PackageType,
    ProjectThresholds,
    RiskDomain,
    RiskLevel,
    RiskScores,
    RiskThresholds,
    Setting,
    Threshold,
    UserProject,
    UserSettings,
)
from riskgate.types import JsonObject

logger = logging.getLogger(__name__)


def decode_issue(raw: object) -> Issue:
    data = ensure_mapping(raw, "issue")
    return Issue(
        title=require_str(data, "issue", "title"),
        description=require_str(data, "issue", "description"),
        severity=RiskLevel.parse(require(data, "issue", ISSUE_SEVERITY_FIELDS)),
        domain=RiskDomain.parse(require(data, "issue", ISSUE_DOMAIN_FIELDS)),
        tag=optional_str(data, "issue", "tag"),
        id=optional_str(data, "issue", "id"),
    )


def encode_issue(issue: Issue) -> JsonObject:
    return {
        "tag": issue.tag,
        "id": issue.id,
        "title": issue.title,
        "description": issue.description,
        "severity": issue.severity.label,
        "domain": issue.domain.label,
    }


def _score(data: Mapping[str, Any], names: tuple[str, ...] | str) -> float:
    value = optional_float(data, "risk_scores", names)
    # NaN fails both comparisons.
    if not MIN_SCORE <= value <= MAX_SCORE:
        name = names if isinstance(names, str) else names[0]
        raise WireFormatError("risk_scores", name, f"score {value} outside [0, 1]")
    return value


def decode_risk_scores(raw: object) -> RiskScores:
    """Decode per-domain scores; each one must lie in [0, 1]."""
    data = ensure_mapping(raw, "risk_scores")
    return RiskScores(
        total=_score(data, "total"),
        vulnerability=_score(data, "vulnerability"),
        malicious=_score(data, RISK_SCORES_MALICIOUS_FIELDS),
        author=_score(data, "author"),
        engineering=_score(data, "engineering"),
        license=_score(data, "license"),
    )


def encode_risk_scores(scores: RiskScores) -> JsonObject:
    return {
        "total": scores.total,
        "vulnerability": scores.vulnerability,
        RISK_SCORES_MALICIOUS_FIELDS[0]: scores.malicious,
        "author": scores.author,
        "engineering": scores.engineering,
        "license": scores.license,
    }


def decode_issue_impacts(raw: object) -> IssueImpacts:
    data = ensure_mapping(raw, "issue_impacts")
    return IssueImpacts(
        low=optional_count(data, "issue_impacts", "low"),
        medium=optional_count(data, "issue_impacts", "medium"),
        high=optional_count(data, "issue_impacts", "high"),
        critical=optional_count(data, "issue_impacts", "critical"),
    )


def encode_issue_impacts(impacts: IssueImpacts) -> JsonObject:
    return {
        "low": impacts.low,
        "medium": impacts.medium,
        "high": impacts.high,
        "critical": impacts.critical,
    }


def decode_threshold(raw: object) -> Threshold:
    data = ensure_mapping(raw, "threshold")
    cutoff = require_float(data, "threshold", THRESHOLD_CUTOFF_FIELD)
    if not MIN_CUTOFF <= cutoff <= MAX_CUTOFF:
        raise WireFormatError("threshold", THRESHOLD_CUTOFF_FIELD, f"cutoff {cutoff} outside [0, 1]")
    return Threshold(
        action=Action.parse(require(data, "threshold", "action")),
        active=require_bool(data, "threshold", "active"),
        cutoff=cutoff,
    )


def encode_threshold(threshold: Threshold) -> JsonObject:
    return {
        "action": threshold.action.label,
        "active": threshold.active,
        THRESHOLD_CUTOFF_FIELD: threshold.cutoff,
    }


def decode_risk_thresholds(raw: object) -> RiskThresholds:
    """Decode a full threshold set; every domain and the total are required."""
    data = ensure_mapping(raw, "risk_thresholds")
    values = {
        attribute: decode_threshold(require(data, "risk_thresholds", wire_name))
        for attribute, wire_name in RISK_THRESHOLDS_FIELDS.items()
    }
    return RiskThresholds(**values)


def encode_risk_thresholds(thresholds: RiskThresholds) -> JsonObject:
    return {
        wire_name: encode_threshold(getattr(thresholds, attribute))
        for attribute, wire_name in RISK_THRESHOLDS_FIELDS.items()
    }


def decode_project_thresholds(raw: object) -> ProjectThresholds:
    data = ensure_mapping(raw, "project_thresholds")
    return ProjectThresholds(
        **{name: require_float(data, "project_thresholds", name) for name in PROJECT_THRESHOLDS_FIELDS}
    )


def encode_project_thresholds(thresholds: ProjectThresholds) -> JsonObject:
    return {name: getattr(thresholds, name) for name in PROJECT_THRESHOLDS_FIELDS}


def decode_ignored_issue(raw: object) -> IgnoredIssue:
    data = ensure_mapping(raw, "ignored_issue")
    return IgnoredIssue(
        id=require_str(data, "ignored_issue", "id"),
        tag=require_str(data, "ignored_issue", "tag"),
        reason=IgnoredReason.parse(require(data, "ignored_issue", "reason")),
    )


def encode_ignored_issue(entry: IgnoredIssue) -> JsonObject:
    return {"id": entry.id, "tag": entry.tag, "reason": entry.reason.label}


def decode_package_descriptor(raw: object) -> PackageDescriptor:
    """Decode a descriptor; the ecosystem must be a canonical lowercase name."""
    data = ensure_mapping(raw, "package_descriptor")
    return PackageDescriptor(
        name=require_str(data, "package_descriptor", "name"),
        version=require_str(data, "package_descriptor", "version"),
        package_type=PackageType.from_wire(require(data, "package_descriptor", DESCRIPTOR_TYPE_FIELDS)),
    )


def encode_package_descriptor(descriptor: PackageDescriptor) -> JsonObject:
    return {
        "name": descriptor.name,
        "version": descriptor.version,
        DESCRIPTOR_TYPE_FIELDS[0]: descriptor.package_type.value,
    }


def decode_package_specifier(raw: object) -> PackageSpecifier:
    data = ensure_mapping(raw, "package_specifier")
    return PackageSpecifier(
        registry=require_str(data, "package_specifier", SPECIFIER_REGISTRY_FIELDS),
        name=require_str(data, "package_specifier", "name"),
        version=require_str(data, "package_specifier", "version"),
    )


def encode_package_specifier(specifier: PackageSpecifier) -> JsonObject:
    return {
        SPECIFIER_REGISTRY_FIELDS[0]: specifier.registry,
        "name": specifier.name,
        "version": specifier.version,
    }


def _decode_user_project(raw: Mapping[str, Any]) -> UserProject:
    thresholds = ensure_mapping(raw["thresholds"], "user_project.thresholds")
    return UserProject(thresholds={str(name): decode_threshold(value) for name, value in thresholds.items()})


def _decode_default_label(raw: Mapping[str, Any], project_id: str) -> DefaultLabel:
    labels: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise WireFormatError("setting", project_id, "neither a project nor a default label mapping")
        labels[key] = value
    return DefaultLabel(labels=labels)


def decode_setting(raw: object, project_id: str = "") -> Setting:
    """Decode the untagged setting union, trying the project shape first."""
    data = ensure_mapping(raw, "setting")
    if isinstance(data.get("thresholds"), Mapping):
        try:
            return _decode_user_project(data)
        except (WireFormatError, UnknownTaxonomyLabel) as exc:
            logger.debug("Setting for %r is not a project shape: %s", project_id, exc)
    return _decode_default_label(data, project_id)


def encode_setting(setting: Setting) -> JsonObject:
    if isinstance(setting, UserProject):
        return {"thresholds": {name: encode_threshold(value) for name, value in setting.thresholds.items()}}
    return dict(setting.labels)


def decode_user_settings(raw: object) -> UserSettings:
    data = ensure_mapping(raw, "user_settings")
    version = require(data, "user_settings", "version")
    if isinstance(version, bool) or not isinstance(version, int):
        raise WireFormatError("user_settings", "version", f"expected an integer, got {type(version).__name__}")
    projects = ensure_mapping(require(data, "user_settings", "projects"), "user_settings.projects")
    return UserSettings(
        version=version,
        projects={str(project_id): decode_setting(value, str(project_id)) for project_id, value in projects.items()},
    )


def encode_user_settings(settings: UserSettings) -> JsonObject:
    return {
        "version": settings.version,
        "projects": {project_id: encode_setting(setting) for project_id, setting in settings.projects.items()},
    }
