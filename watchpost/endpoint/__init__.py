"""Endpoint identity and check results."""

from .key import convert_group_and_name_to_key
from .models import ConditionResult, Endpoint, Result

__all__ = [
    'ConditionResult',
    'Endpoint',
    'Result',
    'convert_group_and_name_to_key',
]
