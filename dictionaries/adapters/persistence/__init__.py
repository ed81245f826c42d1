# dictionaries/adapters/persistence/__init__.py
"""
Persistence Adapters.

Asset sources backed by storage:
- PackageAssetSource: JSON files bundled inside an importable package.
- DirectoryAssetSource: JSON files in a directory on disk.
"""

from .filesystem_source import DirectoryAssetSource
from .package_source import PackageAssetSource

__all__ = [
    "DirectoryAssetSource",
    "PackageAssetSource",
]
