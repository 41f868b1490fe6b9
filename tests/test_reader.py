import json
from pathlib import Path

import pytest

from cooklang_parser.reader import main


@pytest.fixture
def recipe_file(tmp_path: Path) -> Path:
    path = tmp_path / "easy_fries.cook"
    path.write_bytes("Fry @potatoes{3} in #deep fryer{}.\nSalt to taste.".encode())
    return path


def test_main_prints_listing(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(recipe_file)]) == 0
    out = capsys.readouterr().out
    assert "========= easy fries ========" in out
    assert "\t1. Fry potatoes in deep fryer." in out
    assert "\t2. Salt to taste." in out


def test_main_prints_json(recipe_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--json", str(recipe_file)]) == 0
    got = json.loads(capsys.readouterr().out)
    assert got["name"] == "easy fries"
    assert got["ingredients"][0]["qtyVal"] == 3.0


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.cook")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_main_ignores_unknown_log_level(
    recipe_file: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("COOKLANG_LOG_LEVEL", "loud")
    assert main([str(recipe_file)]) == 0
    assert "easy fries" in capsys.readouterr().out
