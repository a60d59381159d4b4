"""
Placeholder Normalization

The raw dataset uses sentinel values such as ``-1`` and ``Unknown`` to mean
"no value". This module rewrites them to None, field by field. Matching is
exact: ``'-1.0'`` or ``' -1'`` are not sentinels.

Each rule is idempotent, so running the stage twice changes nothing.
"""

import logging
from collections.abc import Iterable
from typing import Any

from .models import WorkingRecord

logger = logging.getLogger(__name__)

EMPLOYEES_SUFFIX = ' employees'

# Sentinels per field (fields not listed here are left untouched)
FIELD_SENTINELS: dict[str, frozenset[Any]] = {
    'size': frozenset({'-1', 'Unknown'}),
    'founded': frozenset({'-1', -1}),
    'type_of_ownership': frozenset({'-1', 'Unknown'}),
    'industry': frozenset({'-1'}),
    'sector': frozenset({'-1'}),
    'competitors': frozenset({'-1'}),
    'rating': frozenset({'-1'}),
}


def _is_sentinel(value: Any, sentinels: frozenset[Any]) -> bool:
    # bool is an int subclass; True/False are never sentinels
    if isinstance(value, bool) or value is None:
        return False
    return value in sentinels


def normalize_size(size: Any) -> Any:
    """
    Normalize a company size value.

    Examples:
        >>> normalize_size("1001 to 5000 employees")
        '1001 to 5000'
        >>> normalize_size("Unknown") is None
        True
    """
    # Strip first so "Unknown employees" is caught by the sentinel check
    if isinstance(size, str) and size.endswith(EMPLOYEES_SUFFIX):
        size = size[:-len(EMPLOYEES_SUFFIX)]
    if _is_sentinel(size, FIELD_SENTINELS['size']):
        return None
    return size


def normalize_placeholder(field: str, value: Any) -> Any:
    """Return None when ``value`` is a sentinel for ``field``, else the value."""
    if field == 'size':
        return normalize_size(value)
    sentinels = FIELD_SENTINELS.get(field)
    if sentinels is not None and _is_sentinel(value, sentinels):
        return None
    return value


def apply_placeholders(records: Iterable[WorkingRecord]) -> dict[str, int]:
    """
    Normalize every field listed in ``FIELD_SENTINELS`` in place.

    Returns:
        Number of values set to None, per field
    """
    nulled = {field: 0 for field in FIELD_SENTINELS}
    for record in records:
        for field in FIELD_SENTINELS:
            value = record.get(field)
            normalized = normalize_placeholder(field, value)
            if normalized is None and value is not None:
                nulled[field] += 1
            record[field] = normalized
    return nulled
