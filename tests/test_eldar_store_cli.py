import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "eldar_store.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("eldar_store", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_no_arguments_prints_help(cli, capsys):
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_seed_show_and_clear(cli, tmp_path, capsys):
    data_dir = str(tmp_path)
    assert cli.main(["--data-dir", data_dir, "--set-config", "https://x", "key1"]) == 0
    assert cli.main(["--data-dir", data_dir, "--seed-test", "--show"]) == 0
    out = capsys.readouterr().out
    assert "Username     : testuser" in out
    assert "test-access-token-123" not in out
    assert "Start page   : boards" in out

    assert cli.main(["--data-dir", data_dir, "--clear", "--show"]) == 0
    out = capsys.readouterr().out
    assert "No credentials found" in out
    assert "Start page   : login" in out


def test_corrupt_store_exits_non_zero(cli, tmp_path, capsys):
    db = tmp_path / "eldar" / "eldar.db"
    db.parent.mkdir()
    db.write_bytes(b"garbage" * 512)
    assert cli.main(["--data-dir", str(tmp_path), "--show"]) == 1
    assert "Could not open store" in capsys.readouterr().out
