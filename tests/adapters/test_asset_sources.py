# tests/adapters/test_asset_sources.py
import pytest

from dictionaries.adapters.persistence import DirectoryAssetSource, PackageAssetSource
from dictionaries.core.domain.exceptions import DictionaryConfigError
from dictionaries.core.ports.asset_source import IAssetSource


class TestPackageAssetSource:
    def test_reads_bundled_resource(self):
        source = PackageAssetSource()
        text = source.read_text("top10.json")
        assert '"123456"' in text

    def test_missing_resource(self):
        source = PackageAssetSource()
        with pytest.raises(FileNotFoundError):
            source.read_text("top100.json")

    def test_locate(self):
        assert PackageAssetSource().locate("periods.json") == "package:dictionaries.data/periods.json"

    def test_unknown_package(self):
        with pytest.raises(DictionaryConfigError):
            PackageAssetSource("dictionaries.no_such_assets")

    def test_satisfies_port(self):
        assert isinstance(PackageAssetSource(), IAssetSource)


class TestDirectoryAssetSource:
    def test_reads_file(self, asset_dir):
        (asset_dir / "extra.json").write_text('["x"]', encoding="utf-8")
        assert DirectoryAssetSource(asset_dir).read_text("extra.json") == '["x"]'

    def test_accepts_string_path(self, asset_dir):
        source = DirectoryAssetSource(str(asset_dir))
        assert source.base_dir == asset_dir.resolve()

    def test_missing_file(self, asset_dir):
        with pytest.raises(FileNotFoundError):
            DirectoryAssetSource(asset_dir).read_text("nope.json")

    def test_resource_outside_base_dir(self, asset_dir):
        (asset_dir.parent / "secret.json").write_text("{}", encoding="utf-8")
        with pytest.raises(FileNotFoundError):
            DirectoryAssetSource(asset_dir).read_text("../secret.json")

    @pytest.mark.parametrize("base_dir", [None, "", "   "])
    def test_requires_base_dir(self, base_dir):
        with pytest.raises(DictionaryConfigError):
            DirectoryAssetSource(base_dir)

    def test_base_dir_must_exist(self, tmp_path):
        with pytest.raises(DictionaryConfigError) as exc_info:
            DirectoryAssetSource(tmp_path / "missing")
        assert "missing" in str(exc_info.value)

    def test_satisfies_port(self, asset_dir):
        assert isinstance(DirectoryAssetSource(asset_dir), IAssetSource)
