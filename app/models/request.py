"""Volunteer-hours request record."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Request:
    """
    A member's proof-of-activity submission.

    A request is Pending while ``approved`` is false. Approval sets the hours
    and the reviewer; rejection deletes the row, so there is no rejected state.
    ``row_index`` is the zero-based offset below the header and is only valid
    until the next row is added to or deleted from the sheet.
    """
    university_id: str = ''
    description: str = ''
    hours: float = 0.0
    image_link: str = ''
    date: str = ''
    approved: bool = False
    approved_by: str = ''
    request_id: str = ''
    row_index: Optional[int] = None

    @property
    def is_pending(self):
        return not self.approved

    def to_dict(self):
        """Convert request to dictionary for JSON serialization."""
        return {
            'rowIndex': self.row_index,
            'requestId': self.request_id,
            'universityId': self.university_id,
            'description': self.description,
            'hours': self.hours,
            'imageLink': self.image_link,
            'date': self.date,
            'approved': self.approved,
            'approvedBy': self.approved_by,
        }
