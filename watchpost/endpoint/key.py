"""Unique keys for endpoints."""

_SEPARATOR_CHARACTERS = ' /_,.#+&'


def _sanitize(value: str) -> str:
    sanitized = value.strip().lower()
    for character in _SEPARATOR_CHARACTERS:
        sanitized = sanitized.replace(character, '-')
    return sanitized


def convert_group_and_name_to_key(group: str, name: str) -> str:
    """Convert an endpoint's group and name into a unique key.

    Examples:
        ``("Core", "Front End")`` -> ``"core_front-end"``
        ``("", "name")`` -> ``"_name"``
    """
    return f"{_sanitize(group)}_{_sanitize(name)}"
