"""Field lookup and scalar coercion for wire records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from riskgate.exceptions import WireFormatError

_MISSING: Any = object()


def ensure_mapping(raw: object, record: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise WireFormatError(record, "", f"expected a mapping, got {type(raw).__name__}")
    return raw


def lookup(raw: Mapping[str, Any], names: tuple[str, ...] | str) -> Any:
    """Return the first present field among ``names``, canonical name first."""
    if isinstance(names, str):
        names = (names,)
    for name in names:
        if name in raw:
            return raw[name]
    return _MISSING


def _canonical(names: tuple[str, ...] | str) -> str:
    return names if isinstance(names, str) else names[0]


def require(raw: Mapping[str, Any], record: str, names: tuple[str, ...] | str) -> Any:
    value = lookup(raw, names)
    if value is _MISSING:
        raise WireFormatError(record, _canonical(names), "missing required field")
    return value


def require_str(raw: Mapping[str, Any], record: str, names: tuple[str, ...] | str) -> str:
    value = require(raw, record, names)
    if not isinstance(value, str):
        raise WireFormatError(record, _canonical(names), f"expected a string, got {type(value).__name__}")
    return value


def optional_str(raw: Mapping[str, Any], record: str, names: tuple[str, ...] | str) -> str | None:
    value = lookup(raw, names)
    if value is _MISSING or value is None:
        return None
    if not isinstance(value, str):
        raise WireFormatError(record, _canonical(names), f"expected a string, got {type(value).__name__}")
    return value


def require_bool(raw: Mapping[str, Any], record: str, names: tuple[str, ...] | str) -> bool:
    value = require(raw, record, names)
    if not isinstance(value, bool):
        raise WireFormatError(record, _canonical(names), f"expected a boolean, got {type(value).__name__}")
    return value


def _as_number(value: Any, record: str, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise WireFormatError(record, name, f"expected a number, got {type(value).__name__}")
    return float(value)


def require_float(raw: Mapping[str, Any], record: str, names: tuple[str, ...] | str) -> float:
    return _as_number(require(raw, record, names), record, _canonical(names))


def optional_float(
    raw: Mapping[str, Any],
    record: str,
    names: tuple[str, ...] | str,
    default: float = 0.0,
) -> float:
    value = lookup(raw, names)
    if value is _MISSING or value is None:
        return default
    return _as_number(value, record, _canonical(names))


def optional_count(raw: Mapping[str, Any], record: str, name: str) -> int:
    value = lookup(raw, name)
    if value is _MISSING or value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise WireFormatError(record, name, f"expected a non-negative integer, got {value!r}")
    return value
