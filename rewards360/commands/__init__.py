"""
CLI Commands for Rewards360.

Usage:
    flask analytics init-db                                   # Create tables
    flask analytics kpis                                      # Headline KPIs
    flask analytics trend redemption                          # Monthly series
    flask analytics report redemption 2024-01-01 2024-01-31   # Generate a report
    flask analytics history                                   # Generated reports
"""
from .analytics import init_app as init_analytics_commands


def init_app(app):
    """Register all CLI commands with the Flask app."""
    init_analytics_commands(app)
