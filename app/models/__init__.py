"""
Models package.

Records are plain dataclasses decoded from spreadsheet rows; the sheet has no
keys of its own, so ``row_index`` doubles as the record's address.
"""
from flask import session

from .achievement_type import AchievementType
from .request import Request
from .member import Member
from .user import SessionUser, AnonymousUser, ADMIN_ROLE

# Import Flask-Login loaders
from .. import login_manager


@login_manager.user_loader
def load_user(user_id):
    user = SessionUser.from_identity(session.get('identity'))
    if user and user.id == str(user_id):
        return user
    return None


@login_manager.request_loader
def load_user_from_request(request):
    return SessionUser.from_identity(session.get('identity'))


login_manager.anonymous_user = AnonymousUser
