"""
Final Projection and Type Coercion

The last pipeline step drops the raw columns superseded by derived fields
and tightens the remaining types:

- ``idx``: integer
- ``rating``: Decimal with one fractional digit (fits numeric(3,1))
- ``founded``: integer

A value that cannot be coerced means an earlier stage let bad data through.
That is not a per-row condition: the whole run fails with a
FinalizationError naming the row and the field.
"""

import logging
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from .models import CLEANED_FIELDS, FinalizationError, WorkingRecord

logger = logging.getLogger(__name__)

RATING_QUANTUM = Decimal('0.1')
# numeric(3,1): at most two integer digits
RATING_LIMIT = Decimal('100')


def _reject_separators(value: str) -> str:
    # Python accepts "1_993"; PostgreSQL casts do not
    if '_' in value:
        raise ValueError("digit separators are not allowed")
    return value.strip()


def strict_int(value: Any) -> int:
    """
    Convert ``value`` to int without truncating or guessing.

    Raises:
        ValueError: For booleans, non-integral numbers, separators or bad text
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("non-integral number")
        return int(value)
    if isinstance(value, Decimal):
        if value != value.to_integral_value():
            raise ValueError("non-integral number")
        return int(value)
    if isinstance(value, str):
        return int(_reject_separators(value))
    raise ValueError(f"unsupported type {type(value).__name__}")


def coerce_integer(idx: Any, field: str, value: Any, nullable: bool = True) -> Optional[int]:
    """Coerce ``value`` to int, raising FinalizationError on failure."""
    if value is None:
        if nullable:
            return None
        raise FinalizationError(idx, field, value, "value is required")
    try:
        return strict_int(value)
    except ValueError as e:
        raise FinalizationError(idx, field, value, str(e)) from e


def coerce_rating(idx: Any, value: Any) -> Optional[Decimal]:
    """
    Coerce a rating to a one-decimal Decimal.

    Empty strings are treated as missing before the cast.

    Examples:
        >>> coerce_rating(1, "3.8")
        Decimal('3.8')
        >>> coerce_rating(1, "") is None
        True
    """
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise FinalizationError(idx, 'rating', value, "boolean is not a number")
    try:
        rating = Decimal(_reject_separators(value) if isinstance(value, str) else str(value))
    except (InvalidOperation, ValueError) as e:
        raise FinalizationError(idx, 'rating', value, "not a number") from e

    if not rating.is_finite():
        raise FinalizationError(idx, 'rating', value, "not a finite number")

    # Checked before and after rounding: huge values overflow quantize,
    # and 99.96 only reaches the limit once rounded
    if abs(rating) >= RATING_LIMIT:
        raise FinalizationError(idx, 'rating', value, "out of range for numeric(3,1)")
    try:
        rating = rating.quantize(RATING_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise FinalizationError(idx, 'rating', value, "cannot round to one decimal") from e
    if abs(rating) >= RATING_LIMIT:
        raise FinalizationError(idx, 'rating', value, "out of range for numeric(3,1)")
    return rating


def finalize_record(record: WorkingRecord) -> dict[str, Any]:
    """Project a working record onto the cleaned schema with strict types."""
    idx = record.get('idx')
    cleaned = {field: record.get(field) for field in CLEANED_FIELDS}
    cleaned['idx'] = coerce_integer(idx, 'idx', idx, nullable=False)
    cleaned['rating'] = coerce_rating(idx, record.get('rating'))
    cleaned['founded'] = coerce_integer(idx, 'founded', record.get('founded'))
    return cleaned


def finalize_records(records: Iterable[WorkingRecord]) -> list[dict[str, Any]]:
    """
    Finalize every record, failing the whole batch on the first bad value.

    Raises:
        FinalizationError: If any value cannot be coerced
    """
    finalized = []
    for record in records:
        try:
            finalized.append(finalize_record(record))
        except FinalizationError as e:
            logger.error(
                "Finalization failed, aborting run",
                extra={'idx': e.idx, 'field': e.field, 'value': e.value, 'reason': e.reason}
            )
            raise
    return finalized
