"""Tests for descriptor/specifier conversion and submission resolution."""

from __future__ import annotations

import pytest

from riskgate.exceptions import MalformedSubmission, UnknownEcosystem
from riskgate.identity import (
    descriptor_to_specifier,
    encode_submission,
    resolve_submission,
    specifier_to_descriptor,
)
from riskgate.model import PackageDescriptor, PackageDescriptors, PackageSpecifier, PackageType, Purls

DESCRIPTORS = [
    PackageDescriptor(name=name, version="1.0.0", package_type=package_type)
    for package_type, name in [
        (PackageType.NPM, "@types/node"),
        (PackageType.PYPI, "requests"),
        (PackageType.MAVEN, "org.apache.commons:commons-lang3"),
        (PackageType.RUBYGEMS, "rails"),
        (PackageType.NUGET, "Newtonsoft.Json"),
        (PackageType.CARGO, "serde"),
        (PackageType.GOLANG, "github.com/stretchr/testify"),
    ]
]


@pytest.mark.parametrize("descriptor", DESCRIPTORS, ids=lambda d: d.package_type.value)
def test_specifier_round_trip(descriptor: PackageDescriptor) -> None:
    specifier = descriptor_to_specifier(descriptor)

    assert specifier.registry == descriptor.package_type.value
    assert specifier_to_descriptor(specifier) == descriptor


@pytest.mark.parametrize(
    ("registry", "package_type"),
    [
        ("python", PackageType.PYPI),
        ("PyPI", PackageType.PYPI),
        ("ruby", PackageType.RUBYGEMS),
        ("RubyGems", PackageType.RUBYGEMS),
        ("NPM", PackageType.NPM),
    ],
)
def test_specifier_registry_aliases(registry: str, package_type: PackageType) -> None:
    descriptor = specifier_to_descriptor(PackageSpecifier(registry=registry, name="x", version="1"))

    assert descriptor.package_type is package_type


def test_unknown_registry_raises() -> None:
    with pytest.raises(UnknownEcosystem) as excinfo:
        specifier_to_descriptor(PackageSpecifier(registry="cpan", name="x", version="1"))

    assert excinfo.value.registry == "cpan"


def test_package_type_languages() -> None:
    assert PackageType.NUGET.language == ".NET"
    assert PackageType.PYPI.language == "Python"


class TestResolveSubmission:
    def test_descriptor_list(self) -> None:
        payload = [
            {"name": "a", "version": "1.0", "type": "npm"},
            {"name": "b", "version": "2.0", "registry": "pypi"},
        ]

        resolved = resolve_submission(payload)

        assert resolved == PackageDescriptors(
            items=(
                PackageDescriptor(name="a", version="1.0", package_type=PackageType.NPM),
                PackageDescriptor(name="b", version="2.0", package_type=PackageType.PYPI),
            )
        )

    def test_purl_list(self) -> None:
        resolved = resolve_submission(["pkg:npm/a@1.0", "pkg:pypi/b@2.0"])

        assert resolved == Purls(items=("pkg:npm/a@1.0", "pkg:pypi/b@2.0"))

    def test_empty_list_is_descriptors(self) -> None:
        resolved = resolve_submission([])

        assert isinstance(resolved, PackageDescriptors)
        assert resolved.items == ()

    @pytest.mark.parametrize(
        "payload",
        [
            [{"name": "a", "version": "1.0"}],
            [{"name": "a", "version": "1.0", "type": "cpan"}],
            [{"name": "a", "version": "1.0", "type": "npm"}, "pkg:npm/b@1.0"],
            ["pkg:npm/a@1.0", 3],
            {"name": "a", "version": "1.0", "type": "npm"},
            "pkg:npm/a@1.0",
            None,
        ],
        ids=["missing_type", "unknown_type", "mixed", "non_string", "mapping", "string", "none"],
    )
    def test_malformed(self, payload: object) -> None:
        with pytest.raises(MalformedSubmission) as excinfo:
            resolve_submission(payload)

        assert excinfo.value.payload == payload

    def test_descriptor_type_is_strict(self) -> None:
        with pytest.raises(MalformedSubmission):
            resolve_submission([{"name": "a", "version": "1.0", "type": "python"}])

    def test_encode_uses_canonical_type_key(self) -> None:
        encoded = encode_submission(resolve_submission([{"name": "a", "version": "1.0", "registry": "npm"}]))

        assert encoded == [{"name": "a", "version": "1.0", "type": "npm"}]

    def test_encode_purls_and_default(self) -> None:
        assert encode_submission(Purls(items=("pkg:cargo/serde@1.0",))) == ["pkg:cargo/serde@1.0"]
        assert encode_submission(PackageDescriptors()) == []
