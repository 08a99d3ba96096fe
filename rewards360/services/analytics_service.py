"""
Analytics Service for Rewards360.

Provides the dashboard and reporting data:
- Headline KPIs (user/offer/redemption counts, redemption rate)
- Monthly trends per metric
- On-demand reports, each recorded in the report history
- Pass-through history listings

Redemption rate formula: redemptions / users × 100 (0 when there are no users)
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from ..models import Report
from ..repositories import (
    OfferRepository,
    RedemptionRepository,
    ReportRepository,
    UserRepository,
)
from ..utils.exceptions import DateParseError
from .metrics import Metric
from .trends import TrendSeries, compute_trend

logger = logging.getLogger(__name__)

REPORT_DATE_FORMAT = '%Y-%m-%d'


@dataclass
class KPISnapshot:
    """Headline counts for the whole dataset."""
    user_count: int = 0
    offer_count: int = 0
    redemption_count: int = 0
    redemption_rate: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'user_count': self.user_count,
            'offer_count': self.offer_count,
            'redemption_count': self.redemption_count,
            'redemption_rate': self.redemption_rate,
        }


@dataclass
class ReportResult:
    """Computed report payload. metric/start/end echo the request."""
    metric: str
    start: str
    end: str
    labels: List[str] = field(default_factory=list)
    values: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'metric': self.metric,
            'start': self.start,
            'end': self.end,
            'labels': list(self.labels),
            'values': list(self.values),
        }


def parse_report_date(value, field_name: str) -> date:
    """
    Parse a strict ISO calendar date (YYYY-MM-DD).

    Raises:
        DateParseError: If value is not a string in exactly that form or
            does not name a real calendar day
    """
    if not isinstance(value, str):
        raise DateParseError(field_name, value)
    try:
        parsed = datetime.strptime(value, REPORT_DATE_FORMAT).date()
    except ValueError:
        raise DateParseError(field_name, value) from None
    # strptime also accepts unpadded fields such as 2024-1-5
    if parsed.isoformat() != value:
        raise DateParseError(field_name, value)
    return parsed


class AnalyticsService:
    """
    KPIs, trends and reports over users, offers and redemptions.

    Usage:
        service = AnalyticsService()
        kpis = service.get_kpis()
        trend = service.get_trend('redemption')
        report = service.generate_report('redemption', '2024-01-01', '2024-01-31')

    Repositories default to the database-backed ones; pass any objects
    with the same methods to run against another store.
    """

    def __init__(
        self,
        users=None,
        offers=None,
        redemptions=None,
        reports=None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.users = users if users is not None else UserRepository()
        self.offers = offers if offers is not None else OfferRepository()
        self.redemptions = redemptions if redemptions is not None else RedemptionRepository()
        self.reports = reports if reports is not None else ReportRepository()
        self.clock = clock or datetime.utcnow

    # ==================== KPIs ====================

    def get_kpis(self) -> KPISnapshot:
        """
        Headline counts and redemption rate.

        Never raises: if any count fails the error is logged and an
        all-zero snapshot is returned so the dashboard keeps rendering.
        """
        try:
            user_count = int(self.users.count())
            offer_count = int(self.offers.count())
            redemption_count = int(self.redemptions.count())
        except Exception:
            logger.exception('Error while fetching KPIs')
            return KPISnapshot()

        rate = (redemption_count / user_count * 100) if user_count > 0 else 0.0

        return KPISnapshot(
            user_count=user_count,
            offer_count=offer_count,
            redemption_count=redemption_count,
            redemption_rate=float(rate),
        )

    # ==================== TRENDS ====================

    def get_trend(self, metric: str) -> TrendSeries:
        """Monthly record counts for a metric; unknown metrics give an empty series."""
        resolved = Metric.resolve(metric)

        if resolved is Metric.USERS:
            return compute_trend(self.users.find_all(), lambda u: u.created_at)
        if resolved is Metric.OFFERS:
            return compute_trend(self.offers.find_all(), lambda o: o.start_date)
        if resolved is Metric.REDEMPTION:
            return compute_trend(self.redemptions.find_all(), lambda r: r.date)
        return TrendSeries()

    # ==================== REPORTS ====================

    def generate_report(self, metric: str, start: str, end: str) -> ReportResult:
        """
        Generate a report and record it in the report history.

        Both dates are validated before anything is written. The history
        entry is written for every valid request, including unknown
        metrics and empty results.

        Note: the users and offers reports are whole-collection totals and
        do not look at the requested range. Only redemption reports are
        filtered by date.

        Args:
            metric: 'users', 'offers' or 'redemption' (case-insensitive)
            start: First day, YYYY-MM-DD
            end: Last day, YYYY-MM-DD (inclusive)

        Returns:
            ReportResult with parallel labels and values

        Raises:
            DateParseError: If start or end is not a valid ISO date
        """
        start_date = parse_report_date(start, 'start')
        end_date = parse_report_date(end, 'end')

        report = Report(
            metric=metric,
            date_range=f'{start} → {end}',
            generated_at=self.clock(),
        )
        self.reports.save(report)
        logger.info(f'Report generated: metric={metric} range={report.date_range} id={report.id}')

        resolved = Metric.resolve(metric)

        if resolved is Metric.USERS:
            return ReportResult(metric, start, end, ['Total Users'], [int(self.users.count())])

        if resolved is Metric.OFFERS:
            return ReportResult(metric, start, end, ['Total Offers'], [int(self.offers.count())])

        if resolved is Metric.REDEMPTION:
            redemptions = self.redemptions.find_by_date_between(start_date, end_date)
            return ReportResult(
                metric, start, end,
                labels=[r.date.isoformat() for r in redemptions],
                values=[r.cost_points for r in redemptions],
            )

        return ReportResult(metric, start, end)

    # ==================== HISTORY ====================

    def get_reports_history(self) -> List[Report]:
        return self.reports.find_all()

    def get_users_history(self) -> List:
        return self.users.find_all()

    def get_offers_history(self) -> List:
        return self.offers.find_all()

    def get_redemptions_history(self) -> List:
        return self.redemptions.find_all()
