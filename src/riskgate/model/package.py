"""Package identity records."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass
from enum import Enum

from riskgate.constants.ecosystems import PACKAGE_TYPE_ALIASES, PACKAGE_TYPE_LANGUAGES, PURL_TYPES
from riskgate.exceptions import UnknownEcosystem


class PackageType(Enum):
    """Package ecosystem; each value is the canonical lowercase registry name."""

    NPM = "npm"
    PYPI = "pypi"
    MAVEN = "maven"
    RUBYGEMS = "rubygems"
    NUGET = "nuget"
    CARGO = "cargo"
    GOLANG = "golang"

    @property
    def language(self) -> str:
        return PACKAGE_TYPE_LANGUAGES[self.value]

    @property
    def purl_type(self) -> str:
        return PURL_TYPES[self.value]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, registry: object) -> PackageType:
        """Resolve a registry label case-insensitively, accepting known aliases."""
        if isinstance(registry, str):
            lowered = registry.lower()
            lowered = PACKAGE_TYPE_ALIASES.get(lowered, lowered)
            for member in cls:
                if member.value == lowered:
                    return member
        raise UnknownEcosystem(registry)

    @classmethod
    def from_wire(cls, label: object) -> PackageType:
        """Resolve the strict wire form used inside descriptors: canonical names only."""
        for member in cls:
            if member.value == label:
                return member
        raise UnknownEcosystem(label)

    @classmethod
    def from_purl_type(cls, purl_type: str) -> PackageType:
        lowered = purl_type.lower()
        for member in cls:
            if member.purl_type == lowered:
                return member
        raise UnknownEcosystem(purl_type)


@dataclass(frozen=True)
class PackageDescriptor:
    """Typed identity of a package within the system."""

    name: str
    version: str
    package_type: PackageType

    def __str__(self) -> str:
        return f"{self.package_type}:{self.name}@{self.version}"


@dataclass(frozen=True)
class PackageSpecifier:
    """Loosely-typed wire identity; ``registry`` is free text."""

    registry: str
    name: str
    version: str


@dataclass(frozen=True)
class PackageDescriptors:
    """Submission resolved as typed descriptors."""

    items: tuple[PackageDescriptor, ...] = ()


@dataclass(frozen=True)
class Purls:
    """Submission resolved as flat package-url strings."""

    items: tuple[str, ...] = ()


PackageDescriptorsOrPurls: TypeAlias = PackageDescriptors | Purls
