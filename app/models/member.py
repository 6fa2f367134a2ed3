"""Member record, read-only projection of the Members sheet."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Member:
    university_id: str = ''
    name: str = ''
    email: str = ''
    phone: str = ''
    committee: str = ''
    # Maintained by hand in the sheet, not summed from approved requests
    total_hours: float = 0.0
    achievements: str = ''
    row_index: Optional[int] = None

    def to_dict(self):
        return {
            'universityId': self.university_id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'committee': self.committee,
            'totalHours': self.total_hours,
            'achievements': self.achievements,
        }
