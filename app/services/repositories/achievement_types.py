from app.models import AchievementType
from app.services.sheets.codec import ACHIEVEMENT_TYPE_SCHEMA
from app.utils import utc_now_iso

from .base import SheetRepository


class AchievementTypeRepository(SheetRepository):
    """AchievementTypes sheet: [name, hours, createdAt, typeId]."""
    schema = ACHIEVEMENT_TYPE_SCHEMA
    id_field = 'type_id'

    def add_type(self, name, hours):
        return self.add(AchievementType(name=name, hours=hours, created_at=utc_now_iso()))
