from .base import SheetRepository
from .achievement_types import AchievementTypeRepository
from .hour_requests import RequestRepository
from .members import MemberRepository
