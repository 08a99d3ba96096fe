"""
Tests for monthly trend aggregation and metric resolution.

These run without a database: records are plain objects and the date
field is picked by the selector passed in.
"""
import pytest
from datetime import date, datetime
from types import SimpleNamespace

from rewards360.services.metrics import Metric
from rewards360.services.trends import TrendSeries, compute_trend, month_label


def _records(*dates):
    return [SimpleNamespace(when=d) for d in dates]


class TestComputeTrend:
    """Tests for compute_trend."""

    def test_empty_input_gives_empty_series(self):
        trend = compute_trend([], lambda r: r.when)
        assert trend.labels == []
        assert trend.counts == []

    def test_groups_by_calendar_month(self):
        records = _records(date(2024, 1, 5), date(2024, 1, 20), date(2024, 1, 31))
        trend = compute_trend(records, lambda r: r.when)

        assert trend.labels == ['Jan 2024']
        assert trend.counts == [3]

    def test_months_sorted_chronologically_not_alphabetically(self):
        """Apr sorts before Jan alphabetically; the series must not."""
        records = _records(date(2024, 4, 1), date(2024, 1, 15), date(2024, 4, 30))
        trend = compute_trend(records, lambda r: r.when)

        assert trend.labels == ['Jan 2024', 'Apr 2024']
        assert trend.counts == [1, 2]

    def test_same_month_different_years_are_separate_buckets(self):
        records = _records(date(2025, 3, 1), date(2023, 3, 1), date(2024, 3, 1), date(2024, 3, 9))
        trend = compute_trend(records, lambda r: r.when)

        assert trend.labels == ['Mar 2023', 'Mar 2024', 'Mar 2025']
        assert trend.counts == [1, 2, 1]

    def test_no_zero_filled_gaps(self):
        records = _records(date(2024, 1, 1), date(2024, 6, 1))
        trend = compute_trend(records, lambda r: r.when)

        assert trend.labels == ['Jan 2024', 'Jun 2024']
        assert 0 not in trend.counts

    def test_accepts_datetimes(self):
        records = _records(datetime(2023, 12, 31, 23, 59), datetime(2024, 1, 1, 0, 0))
        trend = compute_trend(records, lambda r: r.when)

        assert trend.labels == ['Dec 2023', 'Jan 2024']
        assert trend.counts == [1, 1]

    def test_labels_and_counts_same_length_and_unique(self):
        records = _records(*[date(2024, m, d) for m in (2, 5, 11) for d in (1, 14, 28)])
        trend = compute_trend(records, lambda r: r.when)

        assert len(trend.labels) == len(trend.counts) == 3
        assert len(set(trend.labels)) == len(trend.labels)
        assert sum(trend.counts) == 9

    def test_records_without_date_are_skipped(self):
        records = _records(None, date(2024, 2, 2))
        trend = compute_trend(records, lambda r: r.when)

        assert trend.labels == ['Feb 2024']
        assert trend.counts == [1]

    def test_to_dict(self):
        trend = TrendSeries(labels=['Jan 2024'], counts=[2])
        assert trend.to_dict() == {'labels': ['Jan 2024'], 'counts': [2]}

    def test_month_label_format(self):
        assert month_label(2024, 1) == 'Jan 2024'
        assert month_label(1999, 12) == 'Dec 1999'


class TestMetricResolve:
    """Tests for Metric.resolve."""

    @pytest.mark.parametrize('key,expected', [
        ('users', Metric.USERS),
        ('USERS', Metric.USERS),
        ('Offers', Metric.OFFERS),
        ('redemption', Metric.REDEMPTION),
        ('ReDeMpTiOn', Metric.REDEMPTION),
    ])
    def test_known_keys_case_insensitive(self, key, expected):
        assert Metric.resolve(key) is expected

    @pytest.mark.parametrize('key', ['bogus-metric', 'redemptions', '', ' users', 'unknown', None, 42])
    def test_everything_else_is_unknown(self, key):
        assert Metric.resolve(key) is Metric.UNKNOWN
