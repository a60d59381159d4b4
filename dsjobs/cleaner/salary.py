"""
Salary Estimate Parsing

Glassdoor salary estimates look like ``"$137K-$171K (Glassdoor est.)"`` or
``"$90K (Employer est.)"``. This module turns them into integer bounds in
base currency units (the raw text expresses thousands).

Matching is done with ordered alternatives: the range shape is tried first
and the single-value shape is only a fallback. Text without a digit, or with
digits but no ``K`` amount (hourly rates), yields no bounds.
"""

import logging
import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from .models import WorkingRecord

logger = logging.getLogger(__name__)

SALARY_UNIT = 1000

RANGE_PATTERN = re.compile(r'([0-9]+)\s*K\D+([0-9]+)\s*K')
SINGLE_PATTERN = re.compile(r'([0-9]+)\s*K')
DIGIT_PATTERN = re.compile(r'[0-9]')

SalaryBounds = tuple[Optional[int], Optional[int]]


def parse_salary_bounds(salary_estimate: Any) -> SalaryBounds:
    """
    Extract (min_salary, max_salary) from a salary estimate.

    Args:
        salary_estimate: Raw salary text

    Returns:
        Tuple of bounds in currency units, or (None, None) when the text
        cannot be parsed

    Examples:
        >>> parse_salary_bounds("$137K-$171K (Glassdoor est.)")
        (137000, 171000)
        >>> parse_salary_bounds("$90K (Employer est.)")
        (90000, 90000)
        >>> parse_salary_bounds("-1")
        (None, None)
    """
    if not isinstance(salary_estimate, str) or not DIGIT_PATTERN.search(salary_estimate):
        return None, None

    range_match = RANGE_PATTERN.search(salary_estimate)
    if range_match:
        low = int(range_match.group(1)) * SALARY_UNIT
        high = int(range_match.group(2)) * SALARY_UNIT
        if low > high:
            logger.warning(
                "min_salary > max_salary, swapping values",
                extra={'salary_estimate': salary_estimate, 'min_salary': low, 'max_salary': high}
            )
            low, high = high, low
        return low, high

    single_match = SINGLE_PATTERN.search(salary_estimate)
    if single_match:
        value = int(single_match.group(1)) * SALARY_UNIT
        return value, value

    logger.debug("Salary estimate has no K amount", extra={'salary_estimate': salary_estimate})
    return None, None


def average_salary(min_salary: Optional[int], max_salary: Optional[int]) -> Optional[int]:
    """
    Mean of both bounds rounded half-up, or None unless both are present.

    Examples:
        >>> average_salary(137000, 171000)
        154000
        >>> average_salary(None, 90000) is None
        True
    """
    if min_salary is None or max_salary is None:
        return None
    mean = (Decimal(min_salary) + Decimal(max_salary)) / 2
    return int(mean.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def apply_salaries(records: Iterable[WorkingRecord]) -> int:
    """
    Set ``min_salary``, ``max_salary`` and ``avg_salary`` on every record.

    Returns:
        Number of records that received salary bounds
    """
    parsed = 0
    for record in records:
        min_salary, max_salary = parse_salary_bounds(record.get('salary_estimate'))
        record['min_salary'] = min_salary
        record['max_salary'] = max_salary
        record['avg_salary'] = average_salary(min_salary, max_salary)
        if min_salary is not None:
            parsed += 1
    return parsed
