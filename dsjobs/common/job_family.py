"""
Job Family Extraction Utility

This module provides a shared function to derive a coarse job family from a
job title. Used by the cleaner (to store ``simple_job``) and available to
reporting code that needs the same grouping.

The extraction uses simple case-insensitive keyword matching on the job
title. Rules are evaluated top to bottom and the first match wins, so
specific phrases ("data analyst") must stay ahead of broad ones ("analyst").
"""

from typing import Any, Optional

# Valid job families (None means "no rule matched")
VALID_JOB_FAMILIES = {'manager', 'analyst', 'data scientist', 'data engineer', 'ml'}

# Ordered (keyword, family) rules - order matters, first match wins
JOB_FAMILY_RULES: tuple[tuple[str, str], ...] = (
    ('manager', 'manager'),
    ('data analyst', 'analyst'),
    ('data scientist', 'data scientist'),
    ('data science', 'data scientist'),
    ('data engineer', 'data engineer'),
    ('machine learning', 'ml'),
    ('data analysis', 'analyst'),
    ('scientist', 'data scientist'),
    ('analyst', 'analyst'),
    ('data modeler', 'data engineer'),
    ('engineer', 'data engineer'),
)


def extract_job_family(job_title: Any) -> Optional[str]:
    """
    Extract the job family from a job title using keyword detection.

    Args:
        job_title: Job title string to analyze

    Returns:
        One of ``VALID_JOB_FAMILIES`` or None if no rule matches or the
        title is missing

    Examples:
        >>> extract_job_family("Senior Data Scientist")
        'data scientist'
        >>> extract_job_family("Data Analytics Manager")
        'manager'
        >>> extract_job_family("Machine Learning Engineer")
        'ml'
        >>> extract_job_family("Software Developer") is None
        True
    """
    if not job_title or not isinstance(job_title, str):
        return None

    job_title_lower = job_title.lower()

    for keyword, family in JOB_FAMILY_RULES:
        if keyword in job_title_lower:
            return family

    return None
