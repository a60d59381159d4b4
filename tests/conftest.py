"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import os
from typing import Optional

import pytest


@pytest.fixture(scope="session")
def database_url() -> Optional[str]:
    """
    Provide a database URL for integration tests.

    Only a dedicated test database is ever used: the integration tests
    delete and rewrite table contents.

    Scope: session (created once per test run)

    Returns:
        PostgreSQL connection URL, or None when not configured
    """
    return os.getenv("CLEANER_TEST_DATABASE_URL")


@pytest.fixture(scope="function")
def sample_raw_posting() -> dict:
    """
    Provide a sample raw Glassdoor posting for testing.

    Mirrors one row of the raw table, sentinels and line breaks included.

    Scope: function (created fresh for each test)

    Returns:
        dict: Sample raw posting
    """
    return {
        "idx": 0,
        "job_title": "Sr Data Scientist",
        "salary_estimate": "$137K-$171K (Glassdoor est.)",
        "job_description": "Description\n\nThe Senior Data Scientist is responsible for...",
        "rating": "3.1",
        "company_name": "Healthfirst\n3.1",
        "location": "New York, NY",
        "headquarters": "New York, NY",
        "size": "1001 to 5000 employees",
        "founded": 1993,
        "type_of_ownership": "Nonprofit Organization",
        "industry": "Insurance Carriers",
        "sector": "Insurance",
        "revenue": "Unknown / Non-Applicable",
        "competitors": "EmblemHealth, UnitedHealth Group, Aetna",
    }


@pytest.fixture(scope="function")
def sample_raw_batch(sample_raw_posting) -> list[dict]:
    """
    Provide a batch of raw postings for testing.

    Contains one exact duplicate of the first posting (idx 3) and a posting
    full of placeholders (idx 2).

    Scope: function (created fresh for each test)

    Returns:
        list[dict]: List of raw postings
    """
    return [
        sample_raw_posting,
        {
            **sample_raw_posting,
            "idx": 1,
            "job_title": "Data Analyst",
            "salary_estimate": "$90K (Employer est.)",
            "company_name": "Globex\r\nInc",
            "location": "California",
            "headquarters": "London, United Kingdom",
            "size": "51 to 200 employees",
            "revenue": "$1 to $5 million (USD)",
        },
        {
            **sample_raw_posting,
            "idx": 2,
            "job_title": "Software Developer",
            "salary_estimate": "-1",
            "rating": "-1",
            "company_name": "Initech",
            "location": "United States",
            "headquarters": "-1",
            "size": "-1",
            "founded": -1,
            "type_of_ownership": "Unknown",
            "industry": "-1",
            "sector": "-1",
            "revenue": "-1",
            "competitors": "-1",
        },
        {**sample_raw_posting, "idx": 3},
    ]


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
