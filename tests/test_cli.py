# tests/test_cli.py
from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from namelistgen.cli import app
from namelistgen.core.errors import (
    EXIT_INVALID_INPUT,
    EXIT_INVALID_SEARCH_FOLDER,
    EXIT_TEMPLATE_NOT_FOUND,
)

runner = CliRunner()


def test_generate_command_writes_file(search_folder: Path, destination: Path):
    res = runner.invoke(
        app,
        [
            "generate",
            str(search_folder),
            str(destination),
            "--namespace",
            "Game",
            "--class-name",
            "Sounds",
            "--output-file-name",
            "SoundNames",
        ],
    )
    assert res.exit_code == 0, res.output
    out = destination / "SoundNames.cs"
    assert str(out) in res.stdout
    text = out.read_text(encoding="utf-8")
    assert "namespace Game" in text
    assert "bazbar" in text


def test_generate_dictionary_mode_case_insensitive(search_folder: Path, destination: Path):
    res = runner.invoke(
        app, ["generate", str(search_folder), str(destination), "--mode", "dictionary"]
    )
    assert res.exit_code == 0, res.output
    text = (destination / "FileNameList.cs").read_text(encoding="utf-8")
    assert '{"baz bar", "baz bar.png"},' in text


def test_generate_dry_run_prints_document(search_folder: Path, destination: Path):
    res = runner.invoke(app, ["generate", str(search_folder), str(destination), "--dry-run"])
    assert res.exit_code == 0, res.output
    assert 'public static readonly string foo = "foo.png";' in res.stdout
    assert list(destination.iterdir()) == []


def test_generate_uses_settings_from_env(monkeypatch, search_folder: Path, destination: Path):
    monkeypatch.setenv("NAMELIST_NAMESPACE", "FromEnv")
    monkeypatch.setenv("NAMELIST_OUTPUT_FILE_NAME", "EnvList")
    res = runner.invoke(app, ["generate", str(search_folder), str(destination)])
    assert res.exit_code == 0, res.output
    assert "namespace FromEnv" in (destination / "EnvList.cs").read_text(encoding="utf-8")


def test_generate_missing_template_exit_code(search_folder: Path, destination: Path, tmp_path: Path):
    res = runner.invoke(
        app,
        [
            "generate",
            str(search_folder),
            str(destination),
            "--template-dir",
            str(tmp_path / "nothing"),
        ],
    )
    assert res.exit_code == EXIT_TEMPLATE_NOT_FOUND
    assert list(destination.iterdir()) == []


def test_generate_invalid_input_exit_code(search_folder: Path, destination: Path):
    res = runner.invoke(
        app,
        ["generate", str(search_folder), str(destination), "--output-file-name", "a/b"],
    )
    assert res.exit_code == EXIT_INVALID_INPUT


def test_collect_command(monkeypatch, nested_folder: Path):
    monkeypatch.setenv("NAMELIST_LOG_LEVEL", "WARNING")
    res = runner.invoke(app, ["collect", str(nested_folder), "--sort"])
    assert res.exit_code == 0, res.output
    lines = [line for line in res.stdout.splitlines() if line.strip()]
    assert lines == [
        "bgm/main theme.ogg",
        "se/click.wav",
        "se/deep/hit.WAV",
        "title.png",
    ]


def test_collect_command_no_recursive_custom_ignore(monkeypatch, nested_folder: Path):
    monkeypatch.setenv("NAMELIST_LOG_LEVEL", "WARNING")
    res = runner.invoke(
        app,
        ["collect", str(nested_folder), "--no-recursive", "--ignore-ext", ".meta", "--ignore-ext", ".png"],
    )
    assert res.exit_code == 0, res.output
    lines = sorted(line for line in res.stdout.splitlines() if line.strip())
    assert lines == [".DS_Store", "Player.cs", "notes.txt"]


def test_collect_missing_folder(tmp_path: Path):
    res = runner.invoke(app, ["collect", str(tmp_path / "missing")])
    assert res.exit_code == EXIT_INVALID_SEARCH_FOLDER


def test_templates_command_lists_bundled_assets():
    res = runner.invoke(app, ["templates"])
    assert res.exit_code == 0, res.output
    assert "NameListsTemplate.txt\tok" in res.stdout
    assert "NameDictionaryTemplate.txt\tok" in res.stdout


def test_collect_recursive_flag_overrides_settings(monkeypatch, nested_folder: Path):
    monkeypatch.setenv("NAMELIST_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("NAMELIST_INCLUDE_SUBFOLDERS", "false")

    top = runner.invoke(app, ["collect", str(nested_folder)])
    assert top.exit_code == 0, top.output
    assert [line for line in top.stdout.splitlines() if line.strip()] == ["title.png"]

    res = runner.invoke(app, ["collect", str(nested_folder), "--recursive", "--sort"])
    assert res.exit_code == 0, res.output
    assert "se/deep/hit.WAV" in res.stdout.splitlines()


def test_generate_no_recursive_flag(search_folder: Path, destination: Path):
    (search_folder / "sub").mkdir()
    (search_folder / "sub" / "deep.png").write_text("x")

    res = runner.invoke(
        app, ["generate", str(search_folder), str(destination), "--no-recursive", "--dry-run"]
    )
    assert res.exit_code == 0, res.output
    assert "foo.png" in res.stdout
    assert "sub/deep.png" not in res.stdout
