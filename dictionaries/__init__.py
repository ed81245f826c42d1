# dictionaries/__init__.py
"""
strength-dictionaries.

Static dictionary assets used by password-strength estimation, exposed as
one immutable namespace:

    namedNumbers   magnitude -> name ("million", "billion", ...)
    characterSets  set name -> characters
    periods        period name -> seconds
    top10          the ten most common passwords, most frequent first
    top10k         the extended frequency-ranked list
    patterns       pattern family -> keyboard rows / sequences
"""

from .api import get_dictionaries, load_dictionaries, reset_dictionaries
from .core.domain.exceptions import (
    AssetLoadFailure,
    DictionaryConfigError,
    DictionaryError,
    MalformedAssetError,
    MissingAssetError,
)
from .core.domain.manifest import LOGICAL_NAMES, MANIFEST
from .core.domain.models import Dictionaries

__version__ = "1.0.0"

__all__ = [
    "Dictionaries",
    "LOGICAL_NAMES",
    "MANIFEST",
    "get_dictionaries",
    "load_dictionaries",
    "reset_dictionaries",
    "DictionaryError",
    "AssetLoadFailure",
    "MissingAssetError",
    "MalformedAssetError",
    "DictionaryConfigError",
]
