import sys

import click
from flask.cli import with_appcontext

from app.errors import BackendUnavailable
from app.services.container import get_services


@click.command('check-sheets')
@with_appcontext
def check_sheets():
    """
    Checks the spreadsheet connection: resolves each sheet and counts its data rows.
    """
    services = get_services()
    gateway = services.gateway
    failed = False

    for repo in (services.members, services.requests, services.achievement_types):
        try:
            sheet_id = gateway.resolve_sheet_id(repo.sheet_name)
            rows = gateway.read_range(repo.data_range)
        except BackendUnavailable as e:
            click.echo(f"Error: {repo.sheet_name}: {e.message}")
            failed = True
            continue
        click.echo(f"{repo.sheet_name}: sheetId={sheet_id}, {len(rows)} data rows")

    if failed:
        sys.exit(1)
    click.echo("Spreadsheet connection OK.")
