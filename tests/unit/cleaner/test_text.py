"""Unit tests for company name sanitizing."""

import pytest

from dsjobs.cleaner.text import apply_company_names, sanitize_company_name


@pytest.mark.parametrize("company_name,expected", [
    ("Healthfirst\n3.1", "Healthfirst 3.1"),
    ("Acme\r\nCorp", "Acme Corp"),
    ("Acme\rCorp", "AcmeCorp"),
    ("Line\n\nBreaks", "Line  Breaks"),
    ("Tab\tKept", "Tab\tKept"),
    ("Plain", "Plain"),
    (None, None),
])
def test_sanitize_company_name(company_name, expected):
    assert sanitize_company_name(company_name) == expected


def test_sanitize_is_idempotent():
    once = sanitize_company_name("A\r\nB\nC")
    assert sanitize_company_name(once) == once


def test_apply_company_names():
    records = [
        {"idx": 0, "company_name": "Healthfirst\n3.1"},
        {"idx": 1, "company_name": "Initech"},
    ]

    changed = apply_company_names(records)

    assert changed == 1
    assert records[0]["company_name"] == "Healthfirst 3.1"
    assert records[1]["company_name"] == "Initech"
