from flask import Blueprint, current_app, jsonify

from . import cache
from .auth import admin_required
from .services.container import get_services

members_bp = Blueprint('members_bp', __name__, url_prefix='/api/members')

MEMBERS_CACHE_KEY = 'members'


@members_bp.route('', methods=['GET'])
@admin_required
def get_all():
    """
    Member roster. Members rows are never written here and carry no offsets,
    so the list can be cached briefly.
    """
    payload = cache.get(MEMBERS_CACHE_KEY)
    if payload is None:
        payload = [m.to_dict() for m in get_services().members.list()]
        # An empty list may just mean the backend is down; don't pin it
        if payload:
            cache.set(MEMBERS_CACHE_KEY, payload, timeout=current_app.config.get('MEMBERS_CACHE_TIMEOUT', 60))
    return jsonify(payload)
