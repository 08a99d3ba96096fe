"""
Analytics API endpoints for Rewards360.

Serves the admin dashboard: KPIs, monthly trends, report generation and
the raw history listings. All computation lives in AnalyticsService.
"""
import logging
from flask import Blueprint, request, jsonify

from ..services.analytics_service import AnalyticsService
from ..utils.errors import bad_request, ErrorCode

logger = logging.getLogger(__name__)

analytics_bp = Blueprint('analytics', __name__)


# ==================== DASHBOARD ====================

@analytics_bp.route('/kpis', methods=['GET'])
def get_kpis():
    """Headline counts and redemption rate."""
    return jsonify(AnalyticsService().get_kpis().to_dict())


@analytics_bp.route('/trends/<metric>', methods=['GET'])
def get_trend(metric):
    """
    Monthly counts for a metric.

    Path params:
        metric: 'users', 'offers' or 'redemption'. Anything else returns
            empty labels/counts.
    """
    return jsonify(AnalyticsService().get_trend(metric).to_dict())


# ==================== REPORTS ====================

@analytics_bp.route('/reports', methods=['POST'])
def generate_report():
    """
    Generate a report and record it in the history.

    Request body:
        {
            "metric": "redemption",
            "start": "2024-01-01",
            "end": "2024-01-31"
        }

    Returns 201 with the report payload, or 400 if the body is not a JSON
    object, a field is missing, metric is not a string or a date is
    malformed.
    """
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return bad_request('Request body must be a JSON object', ErrorCode.INVALID_REQUEST)

    for field in ('metric', 'start', 'end'):
        if data.get(field) is None:
            return bad_request(f'{field} is required', ErrorCode.MISSING_FIELD)

    if not isinstance(data['metric'], str):
        return bad_request('metric must be a string', ErrorCode.INVALID_FIELD)

    result = AnalyticsService().generate_report(data['metric'], data['start'], data['end'])
    return jsonify(result.to_dict()), 201


@analytics_bp.route('/reports', methods=['GET'])
def list_reports():
    """Every generated report, oldest first."""
    reports = AnalyticsService().get_reports_history()
    return jsonify({'reports': [r.to_dict() for r in reports]})


# ==================== HISTORY ====================

@analytics_bp.route('/history/users', methods=['GET'])
def users_history():
    users = AnalyticsService().get_users_history()
    return jsonify({'users': [u.to_dict() for u in users]})


@analytics_bp.route('/history/offers', methods=['GET'])
def offers_history():
    offers = AnalyticsService().get_offers_history()
    return jsonify({'offers': [o.to_dict() for o in offers]})


@analytics_bp.route('/history/redemptions', methods=['GET'])
def redemptions_history():
    redemptions = AnalyticsService().get_redemptions_history()
    return jsonify({'redemptions': [r.to_dict() for r in redemptions]})
