"""
Metric keys understood by trends and reports.
"""
from enum import Enum


class Metric(str, Enum):
    """Which record set a trend or report runs over."""
    USERS = 'users'
    OFFERS = 'offers'
    REDEMPTION = 'redemption'
    UNKNOWN = 'unknown'

    @classmethod
    def resolve(cls, key) -> 'Metric':
        """
        Case-insensitive lookup of a metric key.

        Anything that is not one of the three known keys (including the
        literal 'unknown' and non-strings) resolves to UNKNOWN.
        """
        if not isinstance(key, str):
            return cls.UNKNOWN
        normalized = key.lower()
        for metric in (cls.USERS, cls.OFFERS, cls.REDEMPTION):
            if metric.value == normalized:
                return metric
        return cls.UNKNOWN
