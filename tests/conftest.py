# tests/conftest.py
import json
import shutil
from pathlib import Path

import pytest
import structlog

import dictionaries.data
from dictionaries.adapters.persistence.filesystem_source import DirectoryAssetSource
from dictionaries.core.domain.manifest import MANIFEST
from dictionaries.shared.container import container

BUNDLED_DIR = Path(dictionaries.data.__file__).resolve().parent


@pytest.fixture(autouse=True)
def _isolate_shared_state():
    """Every test starts with no cached namespace, no source override and default logging."""
    container.dictionaries.reset()
    yield
    container.asset_source.reset_override()
    container.dictionaries.reset()
    structlog.reset_defaults()


@pytest.fixture
def bundled_raw():
    """The bundled assets as plain decoded JSON, keyed by logical name."""
    raw = {}
    for spec in MANIFEST:
        with open(BUNDLED_DIR / spec.resource, "r", encoding="utf-8") as f:
            raw[spec.name] = json.load(f)
    return raw


@pytest.fixture
def asset_dir(tmp_path):
    """A writable copy of the bundled assets."""
    target = tmp_path / "assets"
    target.mkdir()
    for spec in MANIFEST:
        shutil.copy(BUNDLED_DIR / spec.resource, target / spec.resource)
    return target


@pytest.fixture
def asset_source(asset_dir):
    return DirectoryAssetSource(asset_dir)


@pytest.fixture
def write_asset(asset_dir):
    """Overwrite one asset in `asset_dir` by logical name."""
    resources = {spec.name: spec.resource for spec in MANIFEST}

    def _write(name, content):
        path = asset_dir / resources[name]
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(content, f)
        return path

    return _write
