"""Shared test fixtures for tomlparse."""

import os
import subprocess
import sys

import pytest


@pytest.fixture
def tomlparse_home(tmp_path, monkeypatch):
    """Provide an isolated ~/.tomlparse/ directory for testing.

    Sets TOMLPARSE_HOME env var so config loading uses tmp_path.
    Does NOT create the directory.
    """
    home = tmp_path / ".tomlparse"
    monkeypatch.setenv("TOMLPARSE_HOME", str(home))
    return home


@pytest.fixture
def config_file(tomlparse_home):
    """Write arbitrary TOML content to the test config file.

    Returns a helper function. Call it with a TOML string.
    """
    def _write(content: str):
        tomlparse_home.mkdir(parents=True, exist_ok=True)
        config_path = tomlparse_home / "config.toml"
        config_path.write_text(content, encoding="utf-8")
        return config_path
    return _write


@pytest.fixture
def toml_file(tmp_path):
    """Write a TOML document to a temp file and return its path.

    Pass bytes to control the exact encoding (e.g. a leading BOM).
    """
    def _write(content, name="doc.toml"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def run_tomlparse(tmp_path):
    """Run tomlparse as a subprocess with isolated TOMLPARSE_HOME.

    Returns a callable: run_tomlparse(args, input_data=None)
    The callable has a .home attribute pointing to the settings dir.
    """
    tomlparse_home = tmp_path / ".tomlparse"

    def _run(args, input_data=None):
        env = os.environ.copy()
        env["TOMLPARSE_HOME"] = str(tomlparse_home)
        cmd = [sys.executable, "-m", "tomlparse"] + args
        return subprocess.run(
            cmd,
            input=input_data,
            capture_output=True,
            text=True,
            env=env,
            timeout=30,
        )

    _run.home = tomlparse_home
    return _run
