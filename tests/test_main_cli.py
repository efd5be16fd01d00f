# tests/test_main_cli.py
"""
Tests for the bf-i18n command-line interface.
"""
import json
import sys

import pytest

import bf_i18n.main as cli


def run_main_with_args(args):
    argv_backup = sys.argv
    sys.argv = ["bf-i18n"] + args
    try:
        return cli.main()
    finally:
        sys.argv = argv_backup


def write_json(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def test_no_command_prints_help(capsys):
    assert run_main_with_args([]) == 1
    assert "usage" in capsys.readouterr().out


def test_invalid_mode_is_rejected():
    with pytest.raises(SystemExit):
        run_main_with_args(["convert", "in.json", "out.json", "--from-mode", "django"])


def test_convert_single_file(tmp_path, capsys):
    source = tmp_path / "en.json"
    target = tmp_path / "out.json"
    write_json(source, {"greeting": "Hello, %{name}!", "items": {"one": "One", "other": "%{count} items"}})

    code = run_main_with_args(["convert", str(source), str(target), "--from-mode", "rails", "--to-mode", "laravel"])

    assert code == 0
    assert json.loads(target.read_text(encoding="utf-8")) == {
        "greeting": "Hello, :name!",
        "items": "{1} One|[2,*] :count items",
    }
    assert "Conversion complete." in capsys.readouterr().out


def test_convert_directory(tmp_path):
    source = tmp_path / "src"
    source.mkdir()
    write_json(source / "en.json", {"greeting": "Hello, :name!"})
    write_json(source / "ja.json", {"greeting": "こんにちは、:name"})
    output = tmp_path / "out"

    code = run_main_with_args([
        "convert", str(source), str(output),
        "--from-mode", "laravel", "--to-mode", "rails", "--format", "yaml",
    ])

    assert code == 0
    assert (output / "en.yaml").exists()
    assert "%{name}" in (output / "ja.yaml").read_text(encoding="utf-8")


def test_convert_aborts_on_errors(tmp_path, capsys):
    source = tmp_path / "en.json"
    target = tmp_path / "out.json"
    write_json(source, {"broken": "{0 none|many"})

    code = run_main_with_args(["convert", str(source), str(target), "--from-mode", "laravel", "--to-mode", "rails"])

    assert code == 1
    assert not target.exists()
    out = capsys.readouterr().out
    assert "[ERROR] broken" in out
    assert "Conversion aborted due to errors." in out


def test_strict_fails_on_warnings(tmp_path, capsys):
    source = tmp_path / "en.json"
    write_json(source, {"items": {"one": "1", "few": "f", "other": "n"}})

    code = run_main_with_args([
        "convert", str(source), str(tmp_path / "out.json"),
        "--from-mode", "rails", "--to-mode", "laravel", "--check-only", "--strict",
    ])

    assert code == 1
    assert "Compatibility check failed due to warnings (strict mode)." in capsys.readouterr().out


def test_check_only_passes_without_writing(tmp_path, capsys):
    source = tmp_path / "en.json"
    target = tmp_path / "out.json"
    write_json(source, {"greeting": "Hi %{name}"})

    code = run_main_with_args([
        "convert", str(source), str(target), "--from-mode", "rails", "--to-mode", "laravel", "--check-only",
    ])

    assert code == 0
    assert not target.exists()
    assert "Compatibility check passed." in capsys.readouterr().out


def test_validate_directory(tmp_path, capsys):
    write_json(tmp_path / "en.json", {"a": "A", "b": "B"})
    write_json(tmp_path / "ja.json", {"a": "エー"})

    code = run_main_with_args(["validate", str(tmp_path), "--reference", "en"])

    assert code == 1
    assert 'Missing key "b" in locale "ja"' in capsys.readouterr().out


def test_validate_single_file(tmp_path):
    path = tmp_path / "all.json"
    write_json(path, {"en": {"a": "A"}, "ja": {"a": "エー"}})
    assert run_main_with_args(["validate", str(path), "--reference", "en"]) == 0


def test_parse_to_stdout(tmp_path, capsys):
    path = tmp_path / "en.yaml"
    path.write_text("hello: Hello\n", encoding="utf-8")

    assert run_main_with_args(["parse", str(path)]) == 0
    assert json.loads(capsys.readouterr().out) == {"hello": "Hello"}


def test_missing_input_reports_error(tmp_path, capsys):
    code = run_main_with_args(["parse", str(tmp_path / "nope.json")])
    assert code == 1
    assert "File not found" in capsys.readouterr().err
