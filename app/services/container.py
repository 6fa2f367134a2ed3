"""Wires the gateway, repositories and lifecycle service together once per app."""
from flask import current_app

from app.notifications import notify_owner
from app.services.repositories import AchievementTypeRepository, MemberRepository, RequestRepository
from app.services.request_service import RequestLifecycleService
from app.services.sheets import SheetsGateway
from app.services.storage import HttpObjectStore

EXTENSION_KEY = 'volunteer_hours'


class VolunteerServices:
    def __init__(self, gateway, upload, notify, config):
        self.gateway = gateway
        repo_options = dict(
            header_rows=config.get('SHEET_HEADER_ROWS', 1),
            strict_numbers=config.get('STRICT_NUMERIC_CELLS', False),
        )
        self.achievement_types = AchievementTypeRepository(
            gateway, config.get('SHEET_ACHIEVEMENT_TYPES', 'AchievementTypes'), **repo_options)
        self.requests = RequestRepository(gateway, config.get('SHEET_REQUESTS', 'Requests'), **repo_options)
        self.members = MemberRepository(gateway, config.get('SHEET_MEMBERS', 'Members'), **repo_options)
        self.lifecycle = RequestLifecycleService(self.requests, upload, notify)


def init_services(app, spreadsheet=None, upload=None, notify=None):
    """
    Build the services for ``app`` and store them in ``app.extensions``.

    Tests pass an in-memory ``spreadsheet`` and fake collaborators; in
    production the spreadsheet is opened from the configured credentials on
    first use.
    """
    if spreadsheet is not None:
        gateway = SheetsGateway(spreadsheet=spreadsheet)
    else:
        gateway = SheetsGateway.from_config(app.config)
    services = VolunteerServices(
        gateway,
        upload or HttpObjectStore.from_config(app.config),
        notify or notify_owner,
        app.config,
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services():
    return current_app.extensions[EXTENSION_KEY]
