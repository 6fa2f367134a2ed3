"""Session-backed user built from the identity provider's payload."""
from flask_login import UserMixin, AnonymousUserMixin

ADMIN_ROLE = 'admin'


class SessionUser(UserMixin):
    """
    The signed-in caller as described by the identity provider.

    The provider stores ``{userId, role, name, email}`` in the session; nothing
    here is persisted by this application.
    """

    def __init__(self, user_id, role='user', name=None, email=None):
        self.id = str(user_id)
        self.role = role or 'user'
        self.name = name
        self.email = email

    @classmethod
    def from_identity(cls, identity):
        """Build a user from the session payload, or None when it is unusable."""
        if not isinstance(identity, dict) or not identity.get('userId'):
            return None
        return cls(
            identity['userId'],
            role=identity.get('role'),
            name=identity.get('name'),
            email=identity.get('email'),
        )

    def has_role(self, role_name):
        return self.role == role_name

    @property
    def display_name(self):
        """Name recorded in the approvedBy column."""
        return self.name or self.email or 'Admin'


class AnonymousUser(AnonymousUserMixin):
    """Caller with no identity; may only submit requests and list types."""
    role = None

    def has_role(self, role_name):
        return False
