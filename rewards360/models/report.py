"""
Report model - audit trail of generated reports.

Rows are append-only: the analytics service inserts one per generated
report and nothing in this codebase updates or deletes them.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from ..extensions import db


class Report(db.Model):
    """Metadata about one report generation request."""
    __tablename__ = 'reports'

    id = Column(Integer, primary_key=True, autoincrement=True)
    metric = Column(String(100), nullable=False)  # As requested, not normalized
    date_range = Column(String(100), nullable=False)  # "2024-01-01 → 2024-01-31"
    generated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict:
        """Serialize report to dictionary."""
        return {
            'id': self.id,
            'metric': self.metric,
            'date_range': self.date_range,
            'generated_at': self.generated_at.isoformat() if self.generated_at else None,
        }

    def __repr__(self):
        return f'<Report {self.id} {self.metric}>'
