"""
Exact-Duplicate Removal

Two postings are duplicates when every business field (all raw fields except
``idx``) holds the same raw value. Values are compared before any
normalization, so ``'-1'`` and ``None`` are different, while two ``None``
values are equal.

From each duplicate group only the posting with the lowest ``idx`` survives.
Survivors are returned in their original order and are never modified.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from .models import BUSINESS_FIELDS, WorkingRecord

logger = logging.getLogger(__name__)


def business_key(record: WorkingRecord) -> tuple[Any, ...]:
    """
    Build the duplicate-detection key for a record.

    Examples:
        >>> business_key({'idx': 1, 'job_title': 'Data Scientist'})[0]
        'Data Scientist'
    """
    return tuple(record.get(field) for field in BUSINESS_FIELDS)


def remove_duplicates(records: Sequence[WorkingRecord]) -> list[WorkingRecord]:
    """
    Drop exact duplicates, keeping the lowest ``idx`` of each group.

    Needs the full working set: groups can only be formed with every row
    in view.

    Args:
        records: Working records, each carrying a unique ``idx``

    Returns:
        New list with the surviving records, in input order
    """
    keepers: dict[tuple[Any, ...], Any] = {}
    group_sizes: Counter = Counter()
    for record in records:
        key = business_key(record)
        group_sizes[key] += 1
        current = keepers.get(key)
        if current is None or record['idx'] < current:
            keepers[key] = record['idx']

    survivors = [record for record in records if keepers[business_key(record)] == record['idx']]

    removed = len(records) - len(survivors)
    logger.info(
        "Removed exact duplicates",
        extra={
            'input_rows': len(records),
            'duplicates_removed': removed,
            'duplicate_groups': sum(1 for size in group_sizes.values() if size > 1),
        }
    )
    return survivors
