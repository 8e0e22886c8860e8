"""Core data models for Riskgate."""

from .issues import IgnoredIssue, Issue, IssueImpacts, IssueKey, IssuesListItem, RiskScores
from .package import (
    PackageDescriptor,
    PackageDescriptors,
    PackageDescriptorsOrPurls,
    PackageSpecifier,
    PackageType,
    Purls,
)
from .settings import (
    CorePreferences,
    DefaultLabel,
    ProjectThresholds,
    RiskThresholds,
    Setting,
    Threshold,
    UserProject,
    UserSettings,
)
from .taxonomy import Action, IgnoredReason, RiskDomain, RiskLevel, RiskType

__all__ = [
    "Action",
    "CorePreferences",
    "DefaultLabel",
    "IgnoredIssue",
    "IgnoredReason",
    "Issue",
    "IssueImpacts",
    "IssueKey",
    "IssuesListItem",
    "PackageDescriptor",
    "PackageDescriptors",
    "PackageDescriptorsOrPurls",
    "PackageSpecifier",
    "PackageType",
    "ProjectThresholds",
    "Purls",
    "RiskDomain",
    "RiskLevel",
    "RiskScores",
    "RiskThresholds",
    "RiskType",
    "Setting",
    "Threshold",
    "UserProject",
    "UserSettings",
]
