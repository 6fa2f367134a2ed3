from .gateway import SheetsGateway, load_service_account_info
from .codec import (
    RowSchema, Column, CellDecodeError, column_letter,
    ACHIEVEMENT_TYPE_SCHEMA, REQUEST_SCHEMA, MEMBER_SCHEMA,
)
