# dictionaries/core/domain/exceptions.py
"""
Custom exception types for the dictionaries package.

Callers can distinguish between:

    - an asset that could not be located (MissingAssetError)
    - an asset that was found but could not be parsed (MalformedAssetError)
    - configuration problems (DictionaryConfigError)

Both asset errors derive from AssetLoadFailure, so a single handler covers
every way the aggregation can fail:

    try:
        dicts = load_dictionaries()
    except AssetLoadFailure as e:
        log.error("dictionaries_unavailable", asset=e.asset, reason=e.reason)
        raise
"""

from __future__ import annotations

from typing import Sequence


class DictionaryError(Exception):
    """Base class for all dictionary-related errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


# --- Load Errors ---


class AssetLoadFailure(DictionaryError):
    """
    Raised when one of the logical assets cannot be loaded.

    Loading is all-or-nothing: when this is raised no namespace has been
    produced.
    """

    def __init__(self, asset: str, reason: str) -> None:
        super().__init__(f"Failed to load dictionary asset '{asset}': {reason}")
        self.asset = asset
        self.reason = reason


class MissingAssetError(AssetLoadFailure):
    """Raised when the resource backing an asset does not exist."""

    def __init__(self, asset: str, location: str) -> None:
        super().__init__(asset, f"not found at {location}")
        self.location = location


class MalformedAssetError(AssetLoadFailure):
    """
    Raised when an asset exists but its content is unusable.

    Examples:
        - invalid JSON
        - a list where a mapping is declared
        - mapping keys that cannot be coerced to the declared key type
        - error-level schema issues while strict validation is on
    """

    def __init__(self, asset: str, detail: str, issues: Sequence[object] = ()) -> None:
        super().__init__(asset, f"malformed content ({detail})")
        self.detail = detail
        self.issues = tuple(issues)


# --- Configuration Errors ---


class DictionaryConfigError(DictionaryError):
    """
    Raised for configuration problems:
        - unknown asset source
        - directory source without a usable directory
    """


__all__ = [
    "DictionaryError",
    "AssetLoadFailure",
    "MissingAssetError",
    "MalformedAssetError",
    "DictionaryConfigError",
]
