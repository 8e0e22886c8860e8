"""Wire field names and their accepted historical aliases.

Each tuple lists the canonical name first; the remaining entries are only
consulted while decoding.
"""

from __future__ import annotations

ISSUE_SEVERITY_FIELDS: tuple[str, ...] = ("severity", "risk_level")
ISSUE_DOMAIN_FIELDS: tuple[str, ...] = ("domain", "risk_domain")

RISK_SCORES_MALICIOUS_FIELDS: tuple[str, ...] = ("malicious_code", "malicious")

DESCRIPTOR_TYPE_FIELDS: tuple[str, ...] = ("type", "registry")
SPECIFIER_REGISTRY_FIELDS: tuple[str, ...] = ("registry", "type")

THRESHOLD_CUTOFF_FIELD: str = "threshold"

RISK_THRESHOLDS_FIELDS: dict[str, str] = {
    "total": "total",
    "author": "author",
    "engineering": "engineering",
    "license": "license",
    "malicious_code": "maliciousCode",
    "vulnerability": "vulnerability",
}

PROJECT_THRESHOLDS_FIELDS: tuple[str, ...] = (
    "author",
    "engineering",
    "license",
    "malicious",
    "total",
    "vulnerability",
)
