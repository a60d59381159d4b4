"""
Record layouts and errors for the cleaner service.

Records travel through the pipeline as plain dictionaries. The tuples below
are the single source of truth for which keys a raw posting carries, which
keys the pipeline derives, and which keys (in which order) a cleaned posting
exposes to downstream consumers.
"""

from typing import Any

# Fields supplied by the loader (raw table columns)
RAW_FIELDS: tuple[str, ...] = (
    'idx',
    'job_title',
    'salary_estimate',
    'job_description',
    'rating',
    'company_name',
    'location',
    'headquarters',
    'size',
    'founded',
    'type_of_ownership',
    'industry',
    'sector',
    'revenue',
    'competitors',
)

# Everything except the identity column; used to detect exact duplicates
BUSINESS_FIELDS: tuple[str, ...] = tuple(f for f in RAW_FIELDS if f != 'idx')

# Fields added stage by stage
DERIVED_FIELDS: tuple[str, ...] = (
    'simple_job',
    'min_salary',
    'max_salary',
    'avg_salary',
    'location_city',
    'location_state',
    'headquarter_city',
    'headquarter_state',
    'headquarter_country',
    'revenue_category',
)

# Raw columns fully superseded by derived fields
SUPERSEDED_FIELDS: tuple[str, ...] = ('salary_estimate', 'location', 'headquarters')

# Output schema - keep stable, downstream consumers depend on it
CLEANED_FIELDS: tuple[str, ...] = tuple(
    f for f in RAW_FIELDS + DERIVED_FIELDS if f not in SUPERSEDED_FIELDS
)

WorkingRecord = dict[str, Any]


class CleaningError(Exception):
    """Raised when the cleaning run cannot complete."""
    pass


class FinalizationError(CleaningError):
    """Raised when a cleaned value cannot be coerced to its output type."""

    def __init__(self, idx: Any, field: str, value: Any, reason: str):
        self.idx = idx
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"Cannot finalize field '{field}' for idx={idx!r} (value={value!r}): {reason}"
        )
