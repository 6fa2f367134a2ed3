from app.services.sheets.codec import MEMBER_SCHEMA

from .base import SheetRepository


class MemberRepository(SheetRepository):
    """
    Members sheet, read-only.

    Total hours are kept up to date by hand in the sheet; this application
    never writes member rows.
    """
    schema = MEMBER_SCHEMA

    def add(self, record):
        raise NotImplementedError('Members are maintained directly in the sheet.')

    def delete_at(self, offset):
        raise NotImplementedError('Members are maintained directly in the sheet.')

    def update_fields_at(self, offset, fields):
        raise NotImplementedError('Members are maintained directly in the sheet.')
