"""Role checks for the admin-only API."""
from functools import wraps

from flask_login import current_user

from ..errors import Unauthorized
from ..models import ADMIN_ROLE


def role_required(role_name):
    """
    Decorator to require a specific role for a route.

    The check runs before the view body, so a refused caller never causes a
    spreadsheet call.

    Usage:
        @role_required('admin')
        def admin_only():
            ...
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                raise Unauthorized('Please sign in.', authenticated=False)
            if not current_user.has_role(role_name):
                raise Unauthorized()
            return f(*args, **kwargs)
        return decorated_function
    return decorator


admin_required = role_required(ADMIN_ROLE)
