# tests/test_cli.py
import json

import pytest

from dictionaries.cli import EXIT_INVALID, EXIT_LOAD_FAILED, EXIT_OK, main


def test_list(capsys):
    assert main(["list"]) == EXIT_OK
    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == 6
    assert lines[0].split()[0] == "namedNumbers"
    assert lines[3].split() == ["top10", "top10.json", "sequence", "10"]


def test_show_limits_entries(capsys):
    assert main(["show", "top10", "--limit", "3"]) == EXIT_OK
    captured = capsys.readouterr()
    assert json.loads(captured.out) == ["123456", "password", "12345678"]
    assert "7 more" in captured.err


def test_show_mapping_with_int_keys(capsys):
    assert main(["show", "namedNumbers", "--limit", "2"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"100": "hundred", "1000": "thousand"}


def test_show_all_entries(capsys):
    assert main(["show", "patterns", "--limit", "0"]) == EXIT_OK
    shown = json.loads(capsys.readouterr().out)
    assert shown["digits"] == ["0123456789", "9876543210"]


def test_show_rejects_unknown_name():
    with pytest.raises(SystemExit) as exc_info:
        main(["show", "top100"])
    assert exc_info.value.code == 2


def test_validate_bundled(capsys):
    assert main(["validate"]) == EXIT_OK
    assert "OK: 6 assets valid." in capsys.readouterr().out


def test_validate_reports_errors(asset_dir, write_asset, capsys):
    write_asset("periods", {"second": 1, "minute": "sixty"})

    assert main(["--asset-dir", str(asset_dir), "validate"]) == EXIT_INVALID
    out = capsys.readouterr().out
    assert "[ERROR] periods.minute" in out


def test_validate_strict_fails_on_warnings(asset_dir, write_asset, capsys):
    write_asset("top10", ["123456", "123456"])

    assert main(["--asset-dir", str(asset_dir), "validate"]) == EXIT_OK
    assert main(["--asset-dir", str(asset_dir), "validate", "--strict"]) == EXIT_INVALID
    assert "[WARNING] top10[1]" in capsys.readouterr().out


def test_load_failure_exit_code(asset_dir, capsys):
    (asset_dir / "periods.json").unlink()

    assert main(["--asset-dir", str(asset_dir), "list"]) == EXIT_LOAD_FAILED
    err = capsys.readouterr().err
    assert "periods" in err
    # the loader reports the failure once; the CLI only prints the message
    assert err.count("dictionary_asset_failed") == 1
    assert "cli_load_failed" not in err
    assert err.count("Error: Failed to load dictionary asset 'periods'") == 1


def test_missing_asset_dir(tmp_path, capsys):
    assert main(["--asset-dir", str(tmp_path / "nowhere"), "list"]) == EXIT_LOAD_FAILED
    assert "Asset directory not found" in capsys.readouterr().err
