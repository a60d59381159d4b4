"""
Location and Headquarters Splitting

Postings carry two compound geographic fields:

- ``location``: "City, ST" where the job is based
- ``headquarters``: "City, ST" for US companies, "City, Country" otherwise

This module splits them into atomic city/state/country columns.

A handful of raw locations name only a state or a label ("California",
"Remote"). They are rewritten through a fixed correction table before the
split. This is a literal exception list, not a geocoder: any other single
token location is split as-is and simply ends up without a state.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

from .models import WorkingRecord

logger = logging.getLogger(__name__)

# Single-token locations and their "City, ST" rewrite.
# 'Texas' maps to Texas City, not the state itself; kept as-is.
LOCATION_REWRITES: dict[str, str] = {
    'California': 'California, CA',
    'New Jersey': 'New Jersey, NJ',
    'Remote': 'Remote, Remote',
    'Texas': 'Texas City, TX',
    'Utah': 'Utah, UT',
}

# Nationwide postings, left unsplit
NATIONWIDE_LOCATION = 'United States'

DEFAULT_COUNTRY = 'United States'
HEADQUARTERS_PLACEHOLDER = '-1'

# Known malformed country values and their replacement
COUNTRY_PATCHES: dict[str, str] = {
    '061': 'United States',
}

US_STATE_CODE_LENGTH = 2


def _split_part(text: str, position: int) -> str:
    """Return the 1-based comma-separated part, or '' when it does not exist."""
    parts = text.split(',')
    if position > len(parts):
        return ''
    return parts[position - 1]


def _none_if_empty(text: str) -> Optional[str]:
    return text if text else None


def canonicalize_location(location: Any) -> Any:
    """
    Apply the fixed single-token location rewrites.

    Examples:
        >>> canonicalize_location("California")
        'California, CA'
        >>> canonicalize_location("Austin, TX")
        'Austin, TX'
    """
    if not isinstance(location, str):
        return location
    return LOCATION_REWRITES.get(location, location)


def split_location(location: Any) -> tuple[Optional[str], Optional[str]]:
    """
    Split an (already canonical) location into (city, state).

    The city is the text before the first comma; the state is the trimmed
    text after it. "United States" and missing values give (None, None).

    Examples:
        >>> split_location("New York, NY")
        ('New York', 'NY')
        >>> split_location("United States")
        (None, None)
    """
    if not isinstance(location, str) or location == NATIONWIDE_LOCATION:
        return None, None

    city = _none_if_empty(_split_part(location, 1))
    state = _none_if_empty(_split_part(location, 2).strip())
    return city, state


def split_headquarters(headquarters: Any) -> tuple[Optional[str], Optional[str], Optional[str]]:
    """
    Split a headquarters value into (city, state, country).

    The part after the first comma is a US state code when it is exactly
    two characters long, a country name when longer, and defaults the
    country to "United States" when shorter (missing). A missing value takes
    the same default; only the "-1" placeholder leaves all three empty.

    Examples:
        >>> split_headquarters("New York, NY")
        ('New York', 'NY', None)
        >>> split_headquarters("London, United Kingdom")
        ('London', None, 'United Kingdom')
        >>> split_headquarters("-1")
        (None, None, None)
        >>> split_headquarters(None)
        (None, None, 'United States')
    """
    if headquarters == HEADQUARTERS_PLACEHOLDER:
        return None, None, None
    if not isinstance(headquarters, str):
        headquarters = ''

    city = _none_if_empty(_split_part(headquarters, 1).strip())
    second_part = _split_part(headquarters, 2).strip()

    state: Optional[str] = None
    country: Optional[str] = None
    if len(second_part) == US_STATE_CODE_LENGTH:
        state = second_part
    elif len(second_part) > US_STATE_CODE_LENGTH:
        country = second_part
    else:
        country = DEFAULT_COUNTRY

    if country in COUNTRY_PATCHES:
        logger.debug(
            "Patched malformed headquarters country",
            extra={'headquarters': headquarters, 'country': country}
        )
        country = COUNTRY_PATCHES[country]

    return city, state, country


def apply_locations(records: Iterable[WorkingRecord]) -> dict[str, int]:
    """
    Rewrite and split ``location`` and ``headquarters`` on every record.

    Returns:
        Counts of rewritten locations and of records with a state/country
    """
    stats = {'locations_rewritten': 0, 'location_states': 0, 'headquarter_countries': 0}

    for record in records:
        raw_location = record.get('location')
        location = canonicalize_location(raw_location)
        if location != raw_location:
            stats['locations_rewritten'] += 1
        record['location'] = location

        record['location_city'], record['location_state'] = split_location(location)
        if record['location_state'] is not None:
            stats['location_states'] += 1

        (
            record['headquarter_city'],
            record['headquarter_state'],
            record['headquarter_country'],
        ) = split_headquarters(record.get('headquarters'))
        if record['headquarter_country'] is not None:
            stats['headquarter_countries'] += 1

    return stats
