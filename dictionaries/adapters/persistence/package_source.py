# dictionaries/adapters/persistence/package_source.py
from __future__ import annotations

import importlib
import importlib.resources as ir

import structlog

from dictionaries.core.domain.exceptions import DictionaryConfigError

logger = structlog.get_logger(__name__)

DEFAULT_PACKAGE = "dictionaries.data"


class PackageAssetSource:
    """
    Reads assets shipped inside an importable package.

    Works the same from a source checkout and from an installed wheel,
    since resolution goes through importlib.resources rather than paths
    relative to this file.
    """

    def __init__(self, package: str = DEFAULT_PACKAGE) -> None:
        try:
            module = importlib.import_module(package)
        except ImportError as exc:
            raise DictionaryConfigError(
                f"Asset package '{package}' cannot be imported: {exc}"
            ) from exc
        self.package = package
        self._root = ir.files(module)

    def read_text(self, resource: str) -> str:
        target = self._root / resource
        if not target.is_file():
            raise FileNotFoundError(self.locate(resource))
        logger.debug("package_asset_read", package=self.package, resource=resource)
        return target.read_text(encoding="utf-8")

    def locate(self, resource: str) -> str:
        return f"package:{self.package}/{resource}"

    def __repr__(self) -> str:
        return f"PackageAssetSource(package={self.package!r})"
