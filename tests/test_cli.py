"""Tests for the tomlparse CLI."""

import json
import subprocess
import sys

import pytest

from tomlparse.cli import main, to_json
from tomlparse.config import Config
from tomlparse import parse


def test_version_flag():
    """tomlparse --version should print version string and exit 0."""
    result = subprocess.run(
        [sys.executable, "-m", "tomlparse", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "tomlparse" in result.stdout
    assert "0." in result.stdout


def test_help_flag():
    """tomlparse --help should print usage and exit 0."""
    result = subprocess.run(
        [sys.executable, "-m", "tomlparse", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "json" in result.stdout.lower()
    assert "FILE" in result.stdout


def test_stdin_to_json(run_tomlparse):
    result = run_tomlparse([], input_data='title = "demo"\n[owner]\nname = "Tom"\n')
    assert result.returncode == 0
    assert json.loads(result.stdout) == {"title": "demo", "owner": {"name": "Tom"}}


def test_empty_input(run_tomlparse):
    result = run_tomlparse([], input_data="")
    assert result.returncode == 0
    assert json.loads(result.stdout) == {}


def test_error_message_on_stdout(run_tomlparse):
    result = run_tomlparse([], input_data="[a]\n[a]\n")
    assert result.returncode == 1
    assert "Key overwrite" in result.stdout


def test_file_argument(run_tomlparse, toml_file):
    path = toml_file("[[servers]]\nip = '10.0.0.1'\n[[servers]]\nip = '10.0.0.2'\n")
    result = run_tomlparse([str(path)])
    assert result.returncode == 0
    assert json.loads(result.stdout) == {"servers": [{"ip": "10.0.0.1"}, {"ip": "10.0.0.2"}]}


def test_missing_file(run_tomlparse, tmp_path):
    result = run_tomlparse([str(tmp_path / "missing.toml")])
    assert result.returncode == 1
    assert "Invalid file path" in result.stdout


def test_compact_output(run_tomlparse):
    result = run_tomlparse(["--compact"], input_data="a = 1\nb = 2\n")
    assert result.returncode == 0
    assert result.stdout.strip() == '{"a": 1, "b": 2}'


def test_sort_keys(run_tomlparse):
    result = run_tomlparse(["--compact", "--sort-keys"], input_data="b = 1\na = 2\n")
    assert result.stdout.strip() == '{"a": 2, "b": 1}'


def test_config_file_sets_output(run_tomlparse):
    run_tomlparse.home.mkdir(parents=True)
    (run_tomlparse.home / "config.toml").write_text("[output]\nindent = 0\n", encoding="utf-8")
    result = run_tomlparse([], input_data="a = [1, 2]\n")
    assert result.stdout.strip() == '{"a": [1, 2]}'


def test_strict_arrays_flag(run_tomlparse):
    result = run_tomlparse(["--strict-arrays"], input_data="x = [1, 2.5]\n")
    assert result.returncode == 1
    assert "mixed" in result.stdout


def test_show_config(run_tomlparse):
    result = run_tomlparse(["--config", "--indent", "7"])
    assert result.returncode == 0
    assert "indent = 7" in result.stdout


def test_main_in_process(tomlparse_home, toml_file, capsys):
    path = toml_file("x = 1979-05-27\n")
    main([str(path), "--compact"])
    assert capsys.readouterr().out.strip() == '{"x": "1979-05-27"}'


def test_to_json_datetimes():
    doc = parse("d = 1979-05-27T07:32:00Z\nt = 07:32:00\nl = 1979-05-27T07:32:00")
    out = json.loads(to_json(doc, Config(output_indent=0)))
    assert out == {
        "d": "1979-05-27T07:32:00+00:00",
        "t": "07:32:00",
        "l": "1979-05-27T07:32:00",
    }


def test_to_json_unicode():
    doc = parse('name = "caf\\u00e9"')
    assert to_json(doc, Config(output_indent=0)) == '{"name": "café"}'
    assert "\\u00e9" in to_json(doc, Config(output_indent=0, output_ensure_ascii=True))


def test_infinite_float_is_an_error(run_tomlparse):
    result = run_tomlparse([], input_data="x = 1e999\n")
    assert result.returncode == 1
    assert "Infinity" not in result.stdout
    assert "JSON" in result.stdout


def test_to_json_rejects_nan():
    with pytest.raises(ValueError):
        to_json({"x": float("nan")}, Config())


def test_surrogate_escape_is_a_parse_error(run_tomlparse):
    result = run_tomlparse([], input_data='x = "\\uD800"\n')
    assert result.returncode == 1
    assert "Invalid unicode escape" in result.stdout
    assert "Traceback" not in result.stderr
