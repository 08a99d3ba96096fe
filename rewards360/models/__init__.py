"""
Database models for Rewards360 analytics.

User, Offer and Redemption are read-only here; Report rows are written
only by the analytics service when a report is generated.
"""
from .user import User
from .offer import Offer
from .redemption import Redemption
from .report import Report

__all__ = [
    'User',
    'Offer',
    'Redemption',
    'Report',
]
