"""
User model - a member of the rewards program.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from ..extensions import db


class User(db.Model):
    """Program member. Counted for KPIs and bucketed by signup month."""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=True)
    email = Column(String(200), unique=True, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def to_dict(self) -> dict:
        """Serialize user to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<User {self.id}>'
