# dictionaries/api.py
"""
dictionaries/api.py
-------------------

Public entrypoints.

    from dictionaries import get_dictionaries

    dicts = get_dictionaries()
    dicts.top10[0]                    # "123456"
    dicts["namedNumbers"][10**6]      # "million"

`get_dictionaries()` returns the process-wide instance held by the
container; every call yields the same object. `load_dictionaries()` is the
explicit initialisation function: it always reads the sources again and
returns a fresh, equal namespace, which callers can then pass around.
"""

from __future__ import annotations

from typing import Optional

from dictionaries.core.domain.models import Dictionaries
from dictionaries.core.ports.asset_source import IAssetSource
from dictionaries.core.use_cases.load_dictionaries import LoadDictionaries
from dictionaries.shared.container import container


def load_dictionaries(
    source: Optional[IAssetSource] = None,
    *,
    strict: Optional[bool] = None,
) -> Dictionaries:
    """
    Load all six assets and return them as one immutable namespace.

    Args:
        source: Where to read assets from. Defaults to the configured source
            (bundled package data unless DICTIONARIES_ASSET_SOURCE says otherwise).
        strict: Fail on error-level schema issues. Defaults to
            DICTIONARIES_STRICT_SCHEMA.

    Raises:
        AssetLoadFailure: if any asset is missing, unreadable or malformed.
        DictionaryConfigError: if the configured source is unusable.
    """
    if source is None:
        source = container.asset_source()
    if strict is None:
        strict = bool(container.config.STRICT_SCHEMA())
    return LoadDictionaries(source, strict=strict).execute()


def get_dictionaries() -> Dictionaries:
    """Return the shared namespace, loading it on first use."""
    return container.dictionaries()


def reset_dictionaries() -> None:
    """Drop the shared namespace; the next get_dictionaries() reloads."""
    container.dictionaries.reset()


__all__ = ["load_dictionaries", "get_dictionaries", "reset_dictionaries"]
