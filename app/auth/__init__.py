from .permissions import admin_required, role_required
