"""
Configuration for the tomlparse command line tool.

Loads settings from ~/.tomlparse/config.toml (or TOMLPARSE_HOME/config.toml)
using tomlparse's own parser, falls back to defaults when the file doesn't
exist, and supports CLI flag overrides via Config.with_overrides().
"""

import dataclasses
import sys
from pathlib import Path
from typing import Optional

from ._paths import get_config_path
from .errors import TomlError


# Default configuration values
_DEFAULTS = {
    "output": {
        "indent": 2,
        "sort_keys": False,
        "ensure_ascii": False,
    },
    "parser": {
        "strict_arrays": False,
    },
}


@dataclasses.dataclass(frozen=True)
class Config:
    """Immutable configuration object."""

    output_indent: int = 2
    output_sort_keys: bool = False
    output_ensure_ascii: bool = False
    parser_strict_arrays: bool = False

    def with_overrides(self, **kwargs) -> "Config":
        """Return a new Config with specified fields overridden.

        Only applies overrides for non-None values, so CLI flags
        that weren't specified don't clobber config file values.
        """
        updates = {k: v for k, v in kwargs.items() if v is not None}
        return dataclasses.replace(self, **updates) if updates else self


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load config from TOML file, falling back to defaults.

    Args:
        config_path: Explicit path to config file. If None, uses
                     TOMLPARSE_HOME/config.toml or ~/.tomlparse/config.toml.

    Returns:
        Config dataclass with merged values.
    """
    path = config_path or get_config_path()

    if not path.is_file():
        return Config()

    from .loader import parse_file

    try:
        parsed = parse_file(path)
    except TomlError as e:
        _warn(f"Could not load config file {path}: {e}")
        return Config()

    return _build_config(parsed)


def _build_config(parsed: dict) -> Config:
    """Build a Config from a parsed TOML dict, using defaults for missing keys."""
    def _get(section: str, key: str, default):
        table = parsed.get(section, {})
        if not isinstance(table, dict):
            _warn(f"[{section}] should be a table, ignoring it")
            return default
        val = table.get(key, default)
        if isinstance(default, bool):
            if isinstance(val, str):
                return val.lower() in ("true", "1", "yes")
            return bool(val)
        if isinstance(default, int):
            try:
                return int(val)
            except (ValueError, TypeError):
                _warn(f"{section}.{key} should be an integer, got {val!r}")
                return default
        return val

    return Config(
        output_indent=_get("output", "indent", _DEFAULTS["output"]["indent"]),
        output_sort_keys=_get("output", "sort_keys", _DEFAULTS["output"]["sort_keys"]),
        output_ensure_ascii=_get("output", "ensure_ascii", _DEFAULTS["output"]["ensure_ascii"]),
        parser_strict_arrays=_get("parser", "strict_arrays", _DEFAULTS["parser"]["strict_arrays"]),
    )


def format_config(config: Config, config_path: Optional[Path] = None) -> str:
    """Format config for display (used by --config flag)."""
    path = config_path or get_config_path()
    lines = [
        f"Config file: {path}",
        f"  exists: {'yes' if path.is_file() else 'no'}",
        "",
        "[output]",
        f"  indent = {config.output_indent}",
        f"  sort_keys = {str(config.output_sort_keys).lower()}",
        f"  ensure_ascii = {str(config.output_ensure_ascii).lower()}",
        "",
        "[parser]",
        f"  strict_arrays = {str(config.parser_strict_arrays).lower()}",
    ]
    return "\n".join(lines)


def _warn(msg: str) -> None:
    """Print a warning to stderr."""
    print(f"tomlparse: config: {msg}", file=sys.stderr)
