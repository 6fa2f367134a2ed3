from flask import Blueprint, jsonify, request
from flask_login import current_user

from .auth import admin_required
from .services.container import get_services
from .utils import parse_hours, parse_row_index

requests_bp = Blueprint('requests_bp', __name__, url_prefix='/api/requests')


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@requests_bp.route('/pending', methods=['GET'])
@admin_required
def get_pending():
    """Unresolved requests; each rowIndex is valid until the next approve/reject."""
    pending = get_services().requests.list_pending()
    return jsonify([r.to_dict() for r in pending])


@requests_bp.route('', methods=['GET'])
@admin_required
def get_all():
    records = get_services().requests.list()
    return jsonify([r.to_dict() for r in records])


@requests_bp.route('/approve', methods=['POST'])
@admin_required
def approve():
    data = _json_body()
    row_index = parse_row_index(data.get('rowIndex'))
    hours = parse_hours(data.get('hours'))

    get_services().lifecycle.approve(
        row_index, hours, current_user.display_name, request_id=data.get('requestId'))
    return jsonify(success=True)


@requests_bp.route('/reject', methods=['POST'])
@admin_required
def reject():
    data = _json_body()
    row_index = parse_row_index(data.get('rowIndex'))

    get_services().lifecycle.reject(row_index, request_id=data.get('requestId'))
    return jsonify(success=True)
