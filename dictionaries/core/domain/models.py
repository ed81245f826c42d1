# dictionaries/core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence, Tuple

from .manifest import LOGICAL_NAMES, spec_for


@dataclass(frozen=True)
class Dictionaries:
    """
    The aggregated namespace: one read-only field per logical asset.

    Mappings are MappingProxyType views and sequences are tuples, so the
    content cannot be mutated through this object. Field access uses the
    Python attribute names; `dicts["namedNumbers"]` resolves a logical name.
    """

    named_numbers: Mapping[int, str]
    character_sets: Mapping[str, str]
    periods: Mapping[str, int]
    top10: Sequence[str]
    top10k: Sequence[str]
    patterns: Mapping[str, Sequence[str]]

    # The mapping fields are unhashable, so the namespace is too.
    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, name: str) -> Any:
        return getattr(self, spec_for(name).attribute)

    def __contains__(self, name: object) -> bool:
        return name in LOGICAL_NAMES

    @staticmethod
    def names() -> Tuple[str, ...]:
        return LOGICAL_NAMES

    def as_dict(self) -> Dict[str, Any]:
        """Plain dict keyed by logical name; values are the same objects as the fields."""
        return {name: self[name] for name in LOGICAL_NAMES}
