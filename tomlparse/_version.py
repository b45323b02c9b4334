"""
Version information for tomlparse.

Format: MAJOR.MINOR.PATCH[-PHASE]
To bump the version, edit MAJOR, MINOR, PATCH below and the version
field in pyproject.toml.
"""

MAJOR = 0
MINOR = 3
PATCH = 0
PHASE = None  # None, "alpha", "beta", "rc1", ...
PROJECT_PHASE = "beta"  # Project-wide: "alpha", "beta", "stable"

__app_name__ = "tomlparse"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_display_version():
    """Return a human-friendly version string with project phase.

    Example: 'BETA 0.3.0' or '1.0.0'
    """
    base = get_base_version()
    if PROJECT_PHASE and PROJECT_PHASE != "stable":
        return f"{PROJECT_PHASE.upper()} {base}"
    return base


__version__ = get_base_version()
