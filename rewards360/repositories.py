"""
Repositories over the analytics record sets.

The analytics service only ever needs a narrow read interface per entity
(count, full scan, and for redemptions a date-range filter) plus an
append/list interface for the report history. Keeping that behind these
small classes lets the service be exercised against any object with the
same methods.

Usage:
    users = UserRepository()
    users.count()
    RedemptionRepository().find_by_date_between(date(2024, 1, 1), date(2024, 1, 31))
"""
from datetime import date
from typing import List

from sqlalchemy import func

from .extensions import db
from .models import User, Offer, Redemption, Report


class RecordRepository:
    """Read-only access to one model's rows."""

    model = None

    def count(self) -> int:
        return db.session.query(func.count(self.model.id)).scalar() or 0

    def find_all(self) -> List:
        return self.model.query.order_by(self.model.id).all()


class UserRepository(RecordRepository):
    model = User


class OfferRepository(RecordRepository):
    model = Offer


class RedemptionRepository(RecordRepository):
    model = Redemption

    def find_by_date_between(self, start: date, end: date) -> List[Redemption]:
        """Redemptions dated within [start, end], both ends inclusive."""
        return (
            Redemption.query
            .filter(Redemption.date >= start, Redemption.date <= end)
            .order_by(Redemption.id)
            .all()
        )


class ReportRepository:
    """Append-only store for generated report metadata."""

    def save(self, report: Report) -> Report:
        """Insert the report and commit so its id is assigned."""
        db.session.add(report)
        db.session.commit()
        return report

    def find_all(self) -> List[Report]:
        """All reports in insertion order."""
        return Report.query.order_by(Report.id).all()
