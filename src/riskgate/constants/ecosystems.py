"""Ecosystem names, registry aliases, and package-url mappings."""

from __future__ import annotations

PACKAGE_TYPE_ALIASES: dict[str, str] = {
    "python": "pypi",
    "ruby": "rubygems",
}

PACKAGE_TYPE_LANGUAGES: dict[str, str] = {
    "npm": "Javascript",
    "pypi": "Python",
    "maven": "Java",
    "rubygems": "Ruby",
    "nuget": ".NET",
    "cargo": "Rust",
    "golang": "Golang",
}

PURL_SCHEME: str = "pkg"

PURL_TYPES: dict[str, str] = {
    "npm": "npm",
    "pypi": "pypi",
    "maven": "maven",
    "rubygems": "gem",
    "nuget": "nuget",
    "cargo": "cargo",
    "golang": "golang",
}

# Ecosystems whose purl namespace is joined to the name with a colon instead of a slash.
PURL_COLON_NAMESPACE_TYPES: frozenset[str] = frozenset({"maven"})
