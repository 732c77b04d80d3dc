import json
from pathlib import Path

import pytest

from phrasecut.cli import main


@pytest.fixture
def model_path(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "model.json"
    path.write_text(json.dumps({"UW4": {"a": 10000}}), encoding="utf-8")
    return path


def test_cli_segments_positional_text(model_path: Path, capsys) -> None:
    exit_code = main(["--model", str(model_path), "  abcdeabcd  "])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "abcde\nabcd\n"


def test_cli_custom_delimiter(model_path: Path, capsys) -> None:
    exit_code = main(["--model", str(model_path), "--delimiter", "/", "abcdeabcd"])

    assert exit_code == 0
    assert capsys.readouterr().out == "abcde/abcd\n"


def test_cli_segments_input_file_to_output(model_path: Path, tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "in.txt"
    input_path.write_text("abcdeabcd\nxa\n", encoding="utf-8")
    output_path = tmp_path / "out" / "result.txt"

    exit_code = main([
        "--model", str(model_path),
        "--input", str(input_path),
        "--output", str(output_path),
        "--delimiter", " ",
        "--validate",
    ])

    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == "abcde abcd\nx a\n"


def test_cli_uses_config_models(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "models").mkdir()
    (tmp_path / "models" / "zh-hans.json").write_text(json.dumps({"BW2": {"AB": 1001}}), encoding="utf-8")
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("language: zh-hans\nbias_mode: zero\nmodels_dir: models\n", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "AB"])

    assert exit_code == 0
    assert capsys.readouterr().out == "A\nB\n"


def test_cli_reports_missing_model(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    exit_code = main(["--model", str(tmp_path / "missing.json"), "abc"])

    assert exit_code == 1
    assert "Model file not found" in capsys.readouterr().err


def test_cli_requires_text_or_input(model_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--model", str(model_path)])


def test_cli_default_language_model(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    exit_code = main(["--lang", "ja", "--delimiter", "|", "今日は天気です。"])

    out = capsys.readouterr().out.strip()
    assert exit_code == 0
    assert out.replace("|", "") == "今日は天気です。"
    assert "|" in out
