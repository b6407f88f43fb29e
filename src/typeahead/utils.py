"""
Utility functions for the typeahead package.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/typeahead).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def clamp(value: int, lower: int, upper: int) -> int:
    """Saturate ``value`` into ``[lower, upper]``."""
    return max(lower, min(value, upper))


def parse_bool(raw: str) -> bool:
    """
    Parse an environment-style boolean.

    Args:
        raw: Text such as "true", "1", "no"

    Returns:
        The parsed boolean

    Raises:
        ValueError: If the text is not a recognised boolean
    """
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Not a boolean: {raw!r}")
