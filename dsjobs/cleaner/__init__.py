"""
Cleaner Service

This service transforms the raw Glassdoor job postings table into a
clean, typed dataset that downstream reporting and analysis can rely on.

Key responsibilities:
- Read raw rows from the raw job postings table
- Remove exact duplicates, parse salaries, split locations
- Normalize placeholder values and bucket revenue ranges
- Replace the clean table contents in a single transaction
"""

from .pipeline import CleaningError, FinalizationError, clean_job_postings

__version__ = "0.1.0"

__all__ = ["CleaningError", "FinalizationError", "clean_job_postings"]
