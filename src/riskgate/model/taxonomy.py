"""Closed enumerations for risk domains, types, levels, actions, and ignore reasons.

Every member's value is its canonical wire label. Parsing accepts the
canonical label or an entry of the matching alias table, matched exactly and
case-sensitively. Anything else raises :class:`UnknownTaxonomyLabel`.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Self

from riskgate.constants.policy import ACTION_RANK
from riskgate.constants.taxonomy import (
    ACTION_ALIASES,
    DOMAIN_TO_RISK_TYPE,
    IGNORED_REASON_ALIASES,
    RISK_DOMAIN_ALIASES,
    RISK_LEVEL_ALIASES,
    RISK_LEVEL_WEIGHTS,
    RISK_TYPE_ALIASES,
    RISK_TYPE_CODES,
)
from riskgate.exceptions import UnknownTaxonomyLabel


class _Label(Enum):
    """Enum whose values are wire labels."""

    @property
    def label(self) -> str:
        return str(self.value)

    @classmethod
    def _parse(cls, label: object, *, kind: str, aliases: dict[str, str]) -> Self:
        if isinstance(label, str):
            canonical = aliases.get(label, label)
            for member in cls:
                if member.value == canonical:
                    return member
        raise UnknownTaxonomyLabel(kind, label)


@total_ordering
class _DeclaredOrder(_Label):
    """Label enum ordered by member declaration."""

    def _position(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._position() < other._position()  # type: ignore[attr-defined]


class RiskType(_DeclaredOrder):
    """Display form of a risk domain, plus the aggregate total."""

    TOTAL = "totalRisk"
    VULNERABILITIES = "vulnerabilities"
    MALICIOUS = "maliciousCodeRisk"
    AUTHORS = "authorsRisk"
    ENGINEERING = "engineeringRisk"
    LICENSE = "licenseRisk"

    @property
    def code(self) -> str:
        """Fixed three-letter display code."""
        return RISK_TYPE_CODES[self.value]

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, label: object) -> RiskType:
        return cls._parse(label, kind="risk type", aliases=RISK_TYPE_ALIASES)


class RiskDomain(_DeclaredOrder):
    """One axis of supply-chain risk."""

    AUTHOR = "author"
    ENGINEERING = "engineering"
    MALICIOUS = "malicious_code"
    VULNERABILITIES = "vulnerability"
    LICENSE = "license"

    @property
    def risk_type(self) -> RiskType:
        return RiskType(DOMAIN_TO_RISK_TYPE[self.value])

    def __str__(self) -> str:
        return str(self.risk_type)

    @classmethod
    def parse(cls, label: object) -> RiskDomain:
        return cls._parse(label, kind="risk domain", aliases=RISK_DOMAIN_ALIASES)


class RiskLevel(_DeclaredOrder):
    """Issue severity, from informational to critical."""

    INFO = "info"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def weight(self) -> float:
        """Safety weight in [0, 1]; more severe levels weigh less."""
        return RISK_LEVEL_WEIGHTS[self.value]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label: object) -> RiskLevel:
        return cls._parse(label, kind="risk level", aliases=RISK_LEVEL_ALIASES)


class Action(_Label):
    """Remediation a caller takes when a package falls below a threshold."""

    NONE = "none"
    WARN = "warn"
    BREAK = "break"

    @property
    def rank(self) -> int:
        return ACTION_RANK[self.value]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label: object) -> Action:
        return cls._parse(label, kind="action", aliases=ACTION_ALIASES)


class IgnoredReason(_Label):
    """Why a user excluded an issue from scoring."""

    FALSE = "false"
    FALSE_POSITIVE = "falsePositive"
    NOT_RELEVANT = "notRelevant"
    OTHER = "other"

    @classmethod
    def parse(cls, label: object) -> IgnoredReason:
        return cls._parse(label, kind="ignored reason", aliases=IGNORED_REASON_ALIASES)


def domain_to_type(domain: RiskDomain) -> RiskType:
    return domain.risk_type


def level_weight(level: RiskLevel) -> float:
    return level.weight


def parse_domain(label: object) -> RiskDomain:
    return RiskDomain.parse(label)


def parse_risk_type(label: object) -> RiskType:
    return RiskType.parse(label)


def parse_level(label: object) -> RiskLevel:
    return RiskLevel.parse(label)


def parse_action(label: object) -> Action:
    return Action.parse(label)


def parse_ignored_reason(label: object) -> IgnoredReason:
    return IgnoredReason.parse(label)
