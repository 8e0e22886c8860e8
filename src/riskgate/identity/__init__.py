"""Package identity normalization."""

from .normalize import descriptor_to_specifier, encode_submission, resolve_submission, specifier_to_descriptor
from .purl import descriptor_to_purl, purl_to_descriptor

__all__ = [
    "descriptor_to_purl",
    "descriptor_to_specifier",
    "encode_submission",
    "purl_to_descriptor",
    "resolve_submission",
    "specifier_to_descriptor",
]
