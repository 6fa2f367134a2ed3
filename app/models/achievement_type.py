"""Achievement type record: a named activity with its nominal hour value."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class AchievementType:
    name: str = ''
    hours: float = 0.0
    created_at: str = ''
    type_id: str = ''
    row_index: Optional[int] = None

    @property
    def id(self):
        """Synthetic key for UI lists; changes whenever a row above is deleted."""
        return f"type_{self.row_index}"

    def to_dict(self):
        """Convert achievement type to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'rowIndex': self.row_index,
            'typeId': self.type_id,
            'name': self.name,
            'hours': self.hours,
            'createdAt': self.created_at,
        }
