"""
Offer model - a reward that members can redeem points for.
"""
from sqlalchemy import Column, Integer, String, Date
from ..extensions import db


class Offer(db.Model):
    """Redeemable offer. Trended by the month it starts."""
    __tablename__ = 'offers'

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    cost_points = Column(Integer, default=0, nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=True)

    def to_dict(self) -> dict:
        """Serialize offer to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'cost_points': self.cost_points,
            'start_date': self.start_date.isoformat() if self.start_date else None,
            'end_date': self.end_date.isoformat() if self.end_date else None,
        }

    def __repr__(self):
        return f'<Offer {self.title}>'
