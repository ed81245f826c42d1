# dictionaries/core/ports/__init__.py
"""
Core Ports (Interfaces).

Protocols the infrastructure adapters implement so the aggregator can read
asset content without knowing where it is stored.
"""

from .asset_source import IAssetSource

__all__ = [
    "IAssetSource",
]
