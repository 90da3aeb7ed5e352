"""Small helpers shared by alerting models."""

import copy
from typing import Any


def to_dash_case(name: str) -> str:
    """Convert a snake_case field name to the dash-case key used in configuration."""
    return name.replace('_', '-')


def is_empty_value(value: Any) -> bool:
    """Check whether a configuration value counts as unset for merging.

    Booleans are never empty: an explicitly set ``False`` is a real value.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def clone(value: Any) -> Any:
    """Return an independent copy of a configuration value."""
    return copy.deepcopy(value)
