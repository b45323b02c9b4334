"""
Path resolution for the tomlparse settings directory.

The directory (~/.tomlparse/) holds the CLI config file. The
TOMLPARSE_HOME env var overrides it for testing and custom installs.
"""

import os
from pathlib import Path


def get_data_dir() -> Path:
    """Return the tomlparse settings directory.

    Checks TOMLPARSE_HOME first, then falls back to ~/.tomlparse/.
    """
    env_dir = os.environ.get("TOMLPARSE_HOME")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".tomlparse"


def get_config_path() -> Path:
    """Return the path to the config TOML file."""
    return get_data_dir() / "config.toml"
