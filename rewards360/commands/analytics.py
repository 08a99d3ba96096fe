"""
CLI Commands for analytics.

Reports generated from the command line are recorded in the report
history exactly like those generated through the API.
"""

import click
from flask.cli import with_appcontext
from ..extensions import db
from ..services.analytics_service import AnalyticsService
from ..utils.exceptions import DateParseError


@click.group('analytics')
def analytics_cli():
    """Analytics and reporting commands."""
    pass


@analytics_cli.command('init-db')
@with_appcontext
def init_db():
    """Create the analytics tables if they do not exist."""
    db.create_all()
    click.echo("Database tables created")


@analytics_cli.command('kpis')
@with_appcontext
def show_kpis():
    """Show headline KPIs."""
    kpis = AnalyticsService().get_kpis()

    click.echo(f"Users: {kpis.user_count}")
    click.echo(f"Offers: {kpis.offer_count}")
    click.echo(f"Redemptions: {kpis.redemption_count}")
    click.echo(f"Redemption rate: {kpis.redemption_rate:.2f}%")


@analytics_cli.command('trend')
@click.argument('metric')
@with_appcontext
def show_trend(metric):
    """Show monthly counts for METRIC (users, offers, redemption)."""
    trend = AnalyticsService().get_trend(metric)

    if not trend.labels:
        click.echo(f"No data for metric '{metric}'")
        return

    for label, count in zip(trend.labels, trend.counts):
        click.echo(f"  {label}: {count}")


@analytics_cli.command('report')
@click.argument('metric')
@click.argument('start')
@click.argument('end')
@with_appcontext
def generate_report(metric, start, end):
    """
    Generate a report for METRIC between START and END (YYYY-MM-DD).
    """
    try:
        result = AnalyticsService().generate_report(metric, start, end)
    except DateParseError as e:
        raise click.ClickException(e.message)

    click.echo(f"Report: {result.metric} ({result.start} → {result.end})")
    if not result.labels:
        click.echo("  (no rows)")
    for label, value in zip(result.labels, result.values):
        click.echo(f"  {label}: {value}")


@analytics_cli.command('history')
@with_appcontext
def show_history():
    """List every generated report."""
    reports = AnalyticsService().get_reports_history()

    if not reports:
        click.echo("No reports generated yet")
        return

    for report in reports:
        generated = report.generated_at.strftime('%Y-%m-%d %H:%M:%S') if report.generated_at else '-'
        click.echo(f"  #{report.id} {report.metric} [{report.date_range}] at {generated}")


def init_app(app):
    """Register analytics commands with the app."""
    app.cli.add_command(analytics_cli)
