"""Descriptor/specifier conversion and untagged submission resolution."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from riskgate.codec import decode_package_descriptor, encode_package_descriptor
from riskgate.exceptions import MalformedSubmission, UnknownEcosystem, WireFormatError
from riskgate.model import (
    PackageDescriptor,
    PackageDescriptors,
    PackageDescriptorsOrPurls,
    PackageSpecifier,
    PackageType,
    Purls,
)
from riskgate.types import JsonValue

logger = logging.getLogger(__name__)


def descriptor_to_specifier(descriptor: PackageDescriptor) -> PackageSpecifier:
    return PackageSpecifier(
        registry=descriptor.package_type.value,
        name=descriptor.name,
        version=descriptor.version,
    )


def specifier_to_descriptor(specifier: PackageSpecifier) -> PackageDescriptor:
    """Resolve a specifier's free-text registry; raises UnknownEcosystem if it matches no ecosystem."""
    return PackageDescriptor(
        name=specifier.name,
        version=specifier.version,
        package_type=PackageType.parse(specifier.registry),
    )


def _as_descriptors(items: Sequence[object]) -> PackageDescriptors | None:
    try:
        return PackageDescriptors(items=tuple(decode_package_descriptor(item) for item in items))
    except (WireFormatError, UnknownEcosystem) as exc:
        logger.debug("Submission is not a descriptor list: %s", exc)
        return None


def _as_purls(items: Sequence[object]) -> Purls | None:
    if all(isinstance(item, str) for item in items):
        return Purls(items=tuple(str(item) for item in items))
    return None


def resolve_submission(payload: object) -> PackageDescriptorsOrPurls:
    """Interpret an untagged payload as a descriptor list or a purl list.

    The descriptor shape is tried first, so an empty list resolves to an
    empty ``PackageDescriptors``. Raises MalformedSubmission when neither
    shape fits.
    """
    if not isinstance(payload, list | tuple):
        raise MalformedSubmission(payload)

    resolved = _as_descriptors(payload) or _as_purls(payload)
    if resolved is None:
        raise MalformedSubmission(payload)
    logger.debug("Resolved submission of %d entries as %s", len(payload), type(resolved).__name__)
    return resolved


def encode_submission(packages: PackageDescriptorsOrPurls) -> list[JsonValue]:
    if isinstance(packages, PackageDescriptors):
        return [encode_package_descriptor(descriptor) for descriptor in packages.items]
    return list(packages.items)
