from app.services.sheets.codec import REQUEST_SCHEMA

from .base import SheetRepository


class RequestRepository(SheetRepository):
    """Requests sheet: [universityId, description, hours, imageLink, date, approved, approvedBy, requestId]."""
    schema = REQUEST_SCHEMA
    id_field = 'request_id'

    def list_pending(self):
        """Requests not yet approved, with their offsets in the full sheet."""
        return [r for r in self.list() if r.is_pending]
