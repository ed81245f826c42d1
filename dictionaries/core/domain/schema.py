# dictionaries/core/domain/schema.py
"""
dictionaries/core/domain/schema.py
==================================

Lightweight structural checks for decoded dictionary assets.

The aggregator treats asset content as opaque. These checks exist for
tooling (the `validate` CLI command, CI) and for strict loading, and only
look at structure:

- mapping values / sequence items have the declared type
- no empty strings
- a handful of per-asset sanity checks (positive magnitudes, ascending
  periods, duplicate words)
- cross-asset consistency (`top10` should open `top10k`)

Validation is done with plain Python checks; nothing here depends on
`jsonschema`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence

from .manifest import MANIFEST, AssetShape, AssetSpec
from .models import Dictionaries


# ---------------------------------------------------------------------------
# Public issue model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    """
    A single validation issue detected in an asset.

    Fields:
        path:
            Where the issue occurred, e.g. "periods.minute" or "top10k[42]".
        message:
            Human-readable description of the problem.
        level:
            "error" or "warning".
    """

    path: str
    message: str
    level: str = "error"  # "error" | "warning"

    @property
    def is_error(self) -> bool:
        return self.level == "error"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _issue(path: str, message: str, *, level: str = "error") -> SchemaIssue:
    if level not in {"error", "warning"}:
        level = "error"
    return SchemaIssue(path=path, message=message, level=level)


def _is_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes))


def _type_matches(value: Any, expected: type) -> bool:
    # bool is an int subclass; a JSON `true` is never a valid magnitude.
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def _check_leaf(path: str, value: Any, expected: type) -> List[SchemaIssue]:
    if not _type_matches(value, expected):
        return [
            _issue(
                path,
                f"Expected {expected.__name__}, got {type(value).__name__}.",
            )
        ]
    if isinstance(value, str) and not value:
        return [_issue(path, "Empty string.")]
    return []


def _check_duplicates(spec: AssetSpec, items: Sequence[Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    first_seen: Dict[Any, int] = {}
    for i, item in enumerate(items):
        try:
            if item in first_seen:
                issues.append(
                    _issue(
                        f"{spec.name}[{i}]",
                        f"Duplicate entry {item!r} (first at index {first_seen[item]}).",
                        level="warning",
                    )
                )
                continue
            first_seen[item] = i
        except TypeError:
            # Unhashable items are reported by the type check.
            continue
    return issues


def _validate_mapping(spec: AssetSpec, data: Mapping[Any, Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    for key, value in data.items():
        path = f"{spec.name}.{key}"

        if not _type_matches(key, spec.key_type):
            issues.append(
                _issue(path, f"Key must be {spec.key_type.__name__}, got {type(key).__name__}.")
            )
        elif isinstance(key, str) and not key.strip():
            issues.append(_issue(path, "Empty key."))

        if spec.nested:
            if not _is_sequence(value):
                issues.append(
                    _issue(path, f"Expected a sequence of {spec.value_type.__name__}.")
                )
                continue
            for i, item in enumerate(value):
                issues.extend(_check_leaf(f"{path}[{i}]", item, spec.value_type))
        else:
            issues.extend(_check_leaf(path, value, spec.value_type))

    return issues


def _validate_sequence(spec: AssetSpec, data: Sequence[Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    for i, item in enumerate(data):
        issues.extend(_check_leaf(f"{spec.name}[{i}]", item, spec.value_type))
    issues.extend(_check_duplicates(spec, data))
    return issues


# ---------------------------------------------------------------------------
# Per-asset extras
# ---------------------------------------------------------------------------


def _extra_named_numbers(data: Mapping[Any, Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    for key in data:
        if _type_matches(key, int) and key <= 0:
            issues.append(_issue(f"namedNumbers.{key}", "Magnitude must be positive."))
    return issues


def _extra_periods(data: Mapping[Any, Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    previous = None
    for name, seconds in data.items():
        if not _type_matches(seconds, int):
            continue
        if seconds <= 0:
            issues.append(_issue(f"periods.{name}", "Duration must be positive."))
        elif previous is not None and seconds <= previous:
            issues.append(
                _issue(
                    f"periods.{name}",
                    "Periods are not in ascending order of duration.",
                    level="warning",
                )
            )
        previous = seconds
    return issues


def _extra_character_sets(data: Mapping[Any, Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    for name, chars in data.items():
        if not isinstance(chars, str):
            continue
        if len(set(chars)) != len(chars):
            issues.append(
                _issue(
                    f"characterSets.{name}",
                    "Character set contains duplicate characters.",
                    level="warning",
                )
            )
    return issues


_EXTRA_CHECKS = {
    "namedNumbers": _extra_named_numbers,
    "periods": _extra_periods,
    "characterSets": _extra_character_sets,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_asset(spec: AssetSpec, data: Any) -> List[SchemaIssue]:
    """
    Validate one decoded asset against its declaration.

    `data` may be the raw decoded JSON (dict/list) or the frozen view held
    by `Dictionaries` (MappingProxyType/tuple).

    Returns:
        Issues sorted by (path, message); empty when the asset is clean.
    """
    if spec.shape is AssetShape.MAPPING:
        if not isinstance(data, Mapping):
            return [_issue(spec.name, "Top-level value must be an object (mapping).")]
        issues = _validate_mapping(spec, data)
    else:
        if not _is_sequence(data):
            return [_issue(spec.name, "Top-level value must be an array (sequence).")]
        issues = _validate_sequence(spec, data)

    extra = _EXTRA_CHECKS.get(spec.name)
    if extra is not None:
        issues.extend(extra(data))

    return sorted(issues, key=lambda i: (i.path, i.message))


def validate_dictionaries(dicts: Dictionaries) -> List[SchemaIssue]:
    """
    Validate every asset of a loaded namespace plus cross-asset consistency.
    """
    issues: List[SchemaIssue] = []
    for spec in MANIFEST:
        issues.extend(validate_asset(spec, dicts[spec.name]))

    top10 = tuple(dicts.top10)
    if tuple(dicts.top10k[: len(top10)]) != top10:
        issues.append(
            _issue(
                "top10",
                "top10 is not a prefix of top10k; the ranked lists disagree.",
                level="warning",
            )
        )

    return issues


def has_errors(issues: Sequence[SchemaIssue]) -> bool:
    return any(i.is_error for i in issues)


__all__ = ["SchemaIssue", "validate_asset", "validate_dictionaries", "has_errors"]
