"""
Monthly trend aggregation.

Buckets any collection of dated records into calendar-month counts. The
caller decides which records and which date field; this module knows
nothing about users, offers or redemptions.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Tuple

LABEL_FORMAT = '%b %Y'  # "Jan 2024"


@dataclass
class TrendSeries:
    """Parallel month labels and record counts, earliest month first."""
    labels: List[str] = field(default_factory=list)
    counts: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'labels': list(self.labels), 'counts': list(self.counts)}


def month_label(year: int, month: int) -> str:
    return date(year, month, 1).strftime(LABEL_FORMAT)


def compute_trend(records: Iterable, date_selector: Callable[[Any], date]) -> TrendSeries:
    """
    Count records per calendar month of the selected date.

    Only months that contain at least one record appear in the result;
    there is no zero filling between them. Records whose selected date is
    None are not counted.

    Args:
        records: Any iterable of records
        date_selector: Returns the date (or datetime) to bucket a record by

    Returns:
        TrendSeries sorted by (year, month) ascending
    """
    buckets: Dict[Tuple[int, int], int] = {}
    for record in records:
        when = date_selector(record)
        if when is None:
            continue
        key = (when.year, when.month)
        buckets[key] = buckets.get(key, 0) + 1

    months = sorted(buckets)
    return TrendSeries(
        labels=[month_label(year, month) for year, month in months],
        counts=[buckets[key] for key in months],
    )
