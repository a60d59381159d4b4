"""Free-text cleanup helpers for the cleaner service."""

from collections.abc import Iterable
from typing import Any

from .models import WorkingRecord


def sanitize_company_name(company_name: Any) -> Any:
    """
    Remove embedded line breaks from a company name.

    Carriage returns are dropped and line feeds become a single space.
    Everything else, including other whitespace, is left as-is.

    Examples:
        >>> sanitize_company_name("Healthfirst\\n3.1")
        'Healthfirst 3.1'
        >>> sanitize_company_name("Acme\\r\\nCorp")
        'Acme Corp'
    """
    if not isinstance(company_name, str):
        return company_name
    return company_name.replace('\r', '').replace('\n', ' ')


def apply_company_names(records: Iterable[WorkingRecord]) -> int:
    """Sanitize ``company_name`` in place, returning how many values changed."""
    changed = 0
    for record in records:
        original = record.get('company_name')
        sanitized = sanitize_company_name(original)
        if sanitized != original:
            changed += 1
        record['company_name'] = sanitized
    return changed
