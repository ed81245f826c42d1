# dictionaries/core/domain/manifest.py
"""
Build-time manifest of the dictionary assets.

Every logical name maps to exactly one resource file and a declared shape.
The aggregator resolves resources through an asset source, so nothing here
depends on where the files actually live.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class AssetShape(str, Enum):
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass(frozen=True, slots=True)
class AssetSpec:
    """
    Declaration of a single asset.

    Fields:
        name:
            Logical name, e.g. "namedNumbers".
        resource:
            File name relative to the asset root, e.g. "named-numbers.json".
        attribute:
            Attribute name on `Dictionaries`.
        shape:
            Top-level JSON container: mapping (object) or sequence (array).
        key_type:
            Type mapping keys are coerced to. JSON object keys are always
            strings, so only non-str types trigger a conversion.
        value_type:
            Expected type of mapping values or sequence items. For nested
            assets this is the type of the inner items.
        nested:
            Mapping values are themselves sequences of `value_type`.
    """

    name: str
    resource: str
    attribute: str
    shape: AssetShape
    key_type: type = str
    value_type: type = str
    nested: bool = False


MANIFEST: Tuple[AssetSpec, ...] = (
    AssetSpec(
        name="namedNumbers",
        resource="named-numbers.json",
        attribute="named_numbers",
        shape=AssetShape.MAPPING,
        key_type=int,
    ),
    AssetSpec(
        name="characterSets",
        resource="character-sets.json",
        attribute="character_sets",
        shape=AssetShape.MAPPING,
    ),
    AssetSpec(
        name="periods",
        resource="periods.json",
        attribute="periods",
        shape=AssetShape.MAPPING,
        value_type=int,
    ),
    AssetSpec(
        name="top10",
        resource="top10.json",
        attribute="top10",
        shape=AssetShape.SEQUENCE,
    ),
    AssetSpec(
        name="top10k",
        resource="top10k.json",
        attribute="top10k",
        shape=AssetShape.SEQUENCE,
    ),
    AssetSpec(
        name="patterns",
        resource="patterns.json",
        attribute="patterns",
        shape=AssetShape.MAPPING,
        nested=True,
    ),
)

LOGICAL_NAMES: Tuple[str, ...] = tuple(spec.name for spec in MANIFEST)

_BY_NAME: Dict[str, AssetSpec] = {spec.name: spec for spec in MANIFEST}


def spec_for(name: str) -> AssetSpec:
    """
    Return the AssetSpec for a logical name.

    Raises:
        KeyError: if the name is not one of LOGICAL_NAMES.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(
            f"Unknown dictionary '{name}'. Expected one of: {', '.join(LOGICAL_NAMES)}"
        ) from None


__all__ = ["AssetShape", "AssetSpec", "MANIFEST", "LOGICAL_NAMES", "spec_for"]
