# dictionaries/adapters/persistence/filesystem_source.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

import structlog

from dictionaries.core.domain.exceptions import DictionaryConfigError

logger = structlog.get_logger(__name__)


class DirectoryAssetSource:
    """
    Reads assets from a directory on disk.
    Standard layout: <base_dir>/named-numbers.json, <base_dir>/periods.json, ...
    """

    def __init__(self, base_dir: Union[str, Path, None]) -> None:
        if base_dir is None or not str(base_dir).strip():
            raise DictionaryConfigError(
                "Directory asset source requires a base directory (set DICTIONARIES_ASSET_DIR)."
            )
        base = Path(os.path.expandvars(os.path.expanduser(str(base_dir))))
        if not base.is_dir():
            raise DictionaryConfigError(f"Asset directory not found: {base}")
        self.base_dir = base.resolve()

    def _resolve(self, resource: str) -> Path:
        target = (self.base_dir / resource).resolve()
        try:
            target.relative_to(self.base_dir)
        except ValueError:
            raise FileNotFoundError(
                f"Resource '{resource}' resolves outside {self.base_dir}"
            ) from None
        return target

    def read_text(self, resource: str) -> str:
        path = self._resolve(resource)
        if not path.is_file():
            raise FileNotFoundError(str(path))
        logger.debug("directory_asset_read", path=str(path))
        with path.open("r", encoding="utf-8") as f:
            return f.read()

    def locate(self, resource: str) -> str:
        return str(self.base_dir / resource)

    def __repr__(self) -> str:
        return f"DirectoryAssetSource(base_dir={str(self.base_dir)!r})"
