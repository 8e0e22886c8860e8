"""Conversion between package descriptors and package-url strings.

Only the ``pkg:type/namespace/name@version`` core is handled. Qualifiers and
subpaths are dropped on parse and never emitted.
"""

from __future__ import annotations

from urllib.parse import quote, unquote

from riskgate.constants.ecosystems import PURL_COLON_NAMESPACE_TYPES, PURL_SCHEME
from riskgate.exceptions import MalformedSubmission
from riskgate.model import PackageDescriptor, PackageType


def _split_name(descriptor: PackageDescriptor) -> tuple[list[str], str]:
    if descriptor.package_type.value in PURL_COLON_NAMESPACE_TYPES and ":" in descriptor.name:
        namespace, _, name = descriptor.name.partition(":")
        return [namespace], name
    *namespace, name = descriptor.name.split("/")
    return namespace, name


def descriptor_to_purl(descriptor: PackageDescriptor) -> str:
    namespace, name = _split_name(descriptor)
    path = "/".join(quote(segment, safe="") for segment in (*namespace, name))
    return f"{PURL_SCHEME}:{descriptor.package_type.purl_type}/{path}@{quote(descriptor.version, safe='')}"


def purl_to_descriptor(purl: str) -> PackageDescriptor:
    """Parse a package-url into a descriptor; a version is required."""
    scheme, sep, remainder = purl.partition(":")
    if not sep or scheme != PURL_SCHEME:
        raise MalformedSubmission(purl)

    remainder = remainder.lstrip("/").split("#", 1)[0].split("?", 1)[0]
    purl_type, sep, path = remainder.partition("/")
    path, at, version = path.rpartition("@")
    if not sep or not at or not path or not version:
        raise MalformedSubmission(purl)

    package_type = PackageType.from_purl_type(purl_type)
    *namespace, name = (unquote(segment) for segment in path.strip("/").split("/"))
    if not name:
        raise MalformedSubmission(purl)

    joiner = ":" if package_type.value in PURL_COLON_NAMESPACE_TYPES else "/"
    full_name = joiner.join([*namespace, name]) if namespace else name
    return PackageDescriptor(name=full_name, version=unquote(version), package_type=package_type)
