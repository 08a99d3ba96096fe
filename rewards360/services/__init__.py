"""
Analytics services for Rewards360.
"""
from .metrics import Metric
from .trends import TrendSeries, compute_trend
from .analytics_service import AnalyticsService, KPISnapshot, ReportResult

__all__ = [
    'Metric',
    'TrendSeries',
    'compute_trend',
    'AnalyticsService',
    'KPISnapshot',
    'ReportResult',
]
