# dictionaries/core/use_cases/load_dictionaries.py
from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Dict, List, NoReturn, Optional, Sequence

import structlog

from dictionaries.core.domain.exceptions import (
    AssetLoadFailure,
    MalformedAssetError,
    MissingAssetError,
)
from dictionaries.core.domain.manifest import MANIFEST, AssetShape, AssetSpec
from dictionaries.core.domain.models import Dictionaries
from dictionaries.core.domain.schema import SchemaIssue, has_errors, validate_asset
from dictionaries.core.ports.asset_source import IAssetSource

logger = structlog.get_logger(__name__)


class LoadDictionaries:
    """
    Use Case: resolve every asset in the manifest and bind them into one
    immutable `Dictionaries` namespace.

    Loading is all-or-nothing. The first asset that cannot be read or
    decoded raises an AssetLoadFailure and nothing is returned.
    """

    def __init__(
        self,
        source: IAssetSource,
        strict: bool = False,
        manifest: Sequence[AssetSpec] = MANIFEST,
    ):
        self.source = source
        self.strict = strict
        self.manifest = tuple(manifest)

    def execute(self) -> Dictionaries:
        loaded: Dict[str, Any] = {}
        for spec in self.manifest:
            loaded[spec.attribute] = self._load_asset(spec)

        logger.info(
            "dictionaries_loaded",
            source=repr(self.source),
            assets=len(loaded),
            strict=self.strict,
        )
        return Dictionaries(**loaded)

    # ------------------------------------------------------------------
    # Per-asset pipeline: read -> decode -> shape -> keys -> validate -> freeze
    # ------------------------------------------------------------------

    def _load_asset(self, spec: AssetSpec) -> Any:
        text = self._read(spec)

        try:
            raw = json.loads(text)
        except ValueError as e:
            self._fail(spec, MalformedAssetError(spec.name, f"invalid JSON: {e}"), cause=e)
        except RecursionError as e:
            self._fail(spec, MalformedAssetError(spec.name, "JSON nested too deeply"), cause=e)

        data = self._check_shape(spec, raw)
        self._check_schema(spec, data)
        try:
            frozen = _freeze(spec, data)
        except RecursionError as e:
            self._fail(spec, MalformedAssetError(spec.name, "JSON nested too deeply"), cause=e)

        logger.debug(
            "dictionary_asset_loaded",
            asset=spec.name,
            resource=spec.resource,
            entries=len(frozen),
        )
        return frozen

    def _read(self, spec: AssetSpec) -> str:
        try:
            return self.source.read_text(spec.resource)
        except FileNotFoundError as e:
            self._fail(spec, MissingAssetError(spec.name, self.source.locate(spec.resource)), cause=e)
        except (OSError, UnicodeDecodeError) as e:
            self._fail(spec, AssetLoadFailure(spec.name, f"unreadable: {e}"), cause=e)

    def _check_shape(self, spec: AssetSpec, raw: Any) -> Any:
        if spec.shape is AssetShape.SEQUENCE:
            if not isinstance(raw, list):
                self._fail(
                    spec,
                    MalformedAssetError(
                        spec.name, f"expected a JSON array, got {type(raw).__name__}"
                    ),
                )
            return raw

        if not isinstance(raw, dict):
            self._fail(
                spec,
                MalformedAssetError(spec.name, f"expected a JSON object, got {type(raw).__name__}"),
            )
        if spec.key_type is str:
            return raw

        coerced: Dict[Any, Any] = {}
        raw_keys: Dict[Any, str] = {}
        for key, value in raw.items():
            try:
                new_key = spec.key_type(key)
            except (TypeError, ValueError) as e:
                self._fail(
                    spec,
                    MalformedAssetError(
                        spec.name, f"key {key!r} is not a valid {spec.key_type.__name__}"
                    ),
                    cause=e,
                )
            if new_key in raw_keys:
                self._fail(
                    spec,
                    MalformedAssetError(
                        spec.name,
                        f"keys {raw_keys[new_key]!r} and {key!r} both map to {new_key!r}",
                    ),
                )
            raw_keys[new_key] = key
            coerced[new_key] = value
        return coerced

    def _check_schema(self, spec: AssetSpec, data: Any) -> None:
        issues: List[SchemaIssue] = validate_asset(spec, data)
        if not issues:
            return

        for issue in issues:
            log = logger.error if issue.is_error else logger.warning
            log(
                "dictionary_schema_issue",
                asset=spec.name,
                path=issue.path,
                detail=issue.message,
            )

        if self.strict and has_errors(issues):
            errors = [i for i in issues if i.is_error]
            self._fail(
                spec,
                MalformedAssetError(
                    spec.name,
                    f"{len(errors)} schema error(s), first at {errors[0].path}: {errors[0].message}",
                    issues=errors,
                ),
            )

    def _fail(
        self, spec: AssetSpec, error: AssetLoadFailure, cause: Optional[BaseException] = None
    ) -> NoReturn:
        logger.error(
            "dictionary_asset_failed",
            asset=spec.name,
            location=self.source.locate(spec.resource),
            reason=error.reason,
        )
        raise error from cause


def _freeze(spec: AssetSpec, data: Any) -> Any:
    if spec.shape is AssetShape.SEQUENCE:
        return tuple(_freeze_value(v) for v in data)
    return MappingProxyType({k: _freeze_value(v) for k, v in data.items()})


def _freeze_value(value: Any) -> Any:
    # Lenient loads can carry arbitrary JSON inside an entry.
    if isinstance(value, list):
        return tuple(_freeze_value(v) for v in value)
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze_value(v) for k, v in value.items()})
    return value
