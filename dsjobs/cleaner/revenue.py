"""
Revenue Bucketing

Maps the free-text ``revenue`` range to a one-letter ordinal code:
``A`` is the largest band, ``L`` the smallest. ``Z`` marks a revenue the
source explicitly reports as unknown, while None means the text was not
recognized at all. The two "no value" outcomes are kept distinct.

Bands are matched by prefix, from the highest to the lowest, so the raw
``"... (USD)"`` suffix never matters.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

from .models import WorkingRecord

logger = logging.getLogger(__name__)

# Ordered (prefix, code) rules - first match wins, highest band first
REVENUE_BANDS: tuple[tuple[str, str], ...] = (
    ('$10+ billion', 'A'),
    ('$5 to $10 billion', 'B'),
    ('$2 to $5 billion', 'C'),
    ('$1 to $2 billion', 'D'),
    ('$500 million to $1 billion', 'E'),
    ('$100 to $500 million', 'F'),
    ('$50 to $100 million', 'G'),
    ('$25 to $50 million', 'H'),
    ('$10 to $25 million', 'I'),
    ('$5 to $10 million', 'J'),
    ('$1 to $5 million', 'K'),
    ('Less than $1 million', 'L'),
)

UNKNOWN_REVENUE_CODE = 'Z'
UNKNOWN_REVENUE_PREFIX = 'Unknown'
REVENUE_PLACEHOLDER = '-1'

# Codes in descending revenue order
REVENUE_CODES: tuple[str, ...] = tuple(code for _, code in REVENUE_BANDS)


def classify_revenue(revenue: Any) -> Optional[str]:
    """
    Return the bucket code for a revenue range.

    Examples:
        >>> classify_revenue("$1 to $5 million (USD)")
        'K'
        >>> classify_revenue("Unknown / Non-Applicable")
        'Z'
        >>> classify_revenue("lots") is None
        True
    """
    if not isinstance(revenue, str):
        return None

    for prefix, code in REVENUE_BANDS:
        if revenue.startswith(prefix):
            return code

    if revenue.startswith(UNKNOWN_REVENUE_PREFIX) or revenue == REVENUE_PLACEHOLDER:
        return UNKNOWN_REVENUE_CODE

    return None


def revenue_rank(code: Optional[str]) -> Optional[int]:
    """
    Position of a code on the revenue scale (0 = largest band).

    ``Z`` and None are not part of the ordering and return None.
    """
    if code not in REVENUE_CODES:
        return None
    return REVENUE_CODES.index(code)


def apply_revenue_categories(records: Iterable[WorkingRecord]) -> dict[str, int]:
    """
    Set ``revenue_category`` on every record.

    Returns:
        Number of records per assigned code (None counted as 'unrecognized')
    """
    counts: dict[str, int] = {}
    for record in records:
        revenue = record.get('revenue')
        code = classify_revenue(revenue)
        if code is None and revenue is not None:
            logger.debug("Unrecognized revenue range", extra={'idx': record.get('idx'), 'revenue': revenue})
        record['revenue_category'] = code
        key = code or 'unrecognized'
        counts[key] = counts.get(key, 0) + 1
    return counts
