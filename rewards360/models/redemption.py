"""
Redemption model - a member spending points on an offer.
"""
from sqlalchemy import Column, Integer, Date, ForeignKey
from sqlalchemy.orm import relationship
from ..extensions import db


class Redemption(db.Model):
    """
    A single redemption.

    The date drives both the monthly trend and the range filter used by
    redemption reports; cost_points is the reported value.
    """
    __tablename__ = 'redemptions'

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True, index=True)
    offer_id = Column(Integer, ForeignKey('offers.id'), nullable=True, index=True)
    date = Column(Date, nullable=False, index=True)
    cost_points = Column(Integer, default=0, nullable=False)

    user = relationship('User', backref='redemptions')
    offer = relationship('Offer', backref='redemptions')

    def to_dict(self) -> dict:
        """Serialize redemption to dictionary."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'offer_id': self.offer_id,
            'date': self.date.isoformat() if self.date else None,
            'cost_points': self.cost_points,
        }

    def __repr__(self):
        return f'<Redemption {self.id} {self.date}>'
