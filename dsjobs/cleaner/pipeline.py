"""
Job Posting Cleaning Pipeline

Runs the cleaning stages over one in-memory working set, in a fixed order.
Each stage reads and rewrites the whole set before the next one starts:

1. Remove exact duplicates (lowest idx wins)
2. Classify job titles into job families
3. Parse salary estimates
4. Sanitize company names
5. Split location and headquarters
6. Normalize placeholder values to None
7. Bucket revenue ranges
8. Project and coerce to the cleaned schema

The raw input is never mutated; the working set is built from copies.
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from dsjobs.common.job_family import extract_job_family

from .deduplicate import remove_duplicates
from .finalize import finalize_records, strict_int
from .location import apply_locations
from .models import RAW_FIELDS, CleaningError, FinalizationError, WorkingRecord
from .placeholders import apply_placeholders
from .revenue import apply_revenue_categories
from .salary import apply_salaries
from .text import apply_company_names

logger = logging.getLogger(__name__)

__all__ = [
    "CleaningError",
    "FinalizationError",
    "STAGES",
    "build_working_set",
    "clean_job_postings",
]


def build_working_set(raw_postings: Iterable[Mapping[str, Any]]) -> list[WorkingRecord]:
    """
    Copy raw postings into mutable working records.

    Missing raw fields are read as None and idx is converted to int, so
    duplicate resolution compares numbers, never text.

    Raises:
        CleaningError: If an idx is missing, not an integer or repeated
    """
    working: list[WorkingRecord] = []
    seen: set[Any] = set()
    for position, raw in enumerate(raw_postings):
        record = {field: raw.get(field) for field in RAW_FIELDS}
        if record['idx'] is None:
            raise CleaningError(f"Raw posting at position {position} has no idx")
        try:
            idx = strict_int(record['idx'])
        except ValueError as e:
            raise CleaningError(
                f"Raw posting at position {position} has a non-integer idx: {record['idx']!r}"
            ) from e
        record['idx'] = idx
        if idx in seen:
            raise CleaningError(f"Duplicate idx in raw postings: {idx!r}")
        seen.add(idx)
        working.append(record)
    return working


def assign_job_families(records: Iterable[WorkingRecord]) -> int:
    """Set ``simple_job`` from ``job_title``; returns how many were classified."""
    classified = 0
    for record in records:
        record['simple_job'] = extract_job_family(record.get('job_title'))
        if record['simple_job'] is not None:
            classified += 1
    return classified


# In-place stages run between deduplication and finalization, in order
STAGES: tuple[tuple[str, Callable[[list[WorkingRecord]], Any]], ...] = (
    ('job_family', assign_job_families),
    ('salary', apply_salaries),
    ('company_name', apply_company_names),
    ('location', apply_locations),
    ('placeholders', apply_placeholders),
    ('revenue', apply_revenue_categories),
)


def clean_job_postings(raw_postings: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """
    Turn raw job postings into cleaned, typed postings.

    Args:
        raw_postings: Raw postings (one mapping per row), each with a unique idx

    Returns:
        Cleaned postings with exactly the keys in ``CLEANED_FIELDS``, in the
        surviving input order

    Raises:
        CleaningError: If the input violates the idx precondition
        FinalizationError: If a value cannot be coerced to its output type

    Example:
        >>> cleaned = clean_job_postings([{
        ...     'idx': 0,
        ...     'job_title': 'Senior Data Scientist',
        ...     'salary_estimate': '$137K-$171K (Glassdoor est.)',
        ...     'rating': '3.1',
        ... }])
        >>> cleaned[0]['avg_salary']
        154000
    """
    start_time = datetime.now(timezone.utc)

    working = build_working_set(raw_postings)
    logger.info("Starting cleaning pipeline", extra={'raw_rows': len(working)})

    working = remove_duplicates(working)

    for name, stage in STAGES:
        result = stage(working)
        logger.info(f"Stage '{name}' completed", extra={'stage': name, 'result': result})

    cleaned = finalize_records(working)

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info(
        "Cleaning pipeline completed",
        extra={
            'raw_rows': len(raw_postings),
            'cleaned_rows': len(cleaned),
            'duration_seconds': duration,
        }
    )
    return cleaned
