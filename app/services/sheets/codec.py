"""
Row codec: positional cell rows <-> record dataclasses.

Each sheet has a fixed column order declared once below as a ``RowSchema``.
Nothing else in the application indexes into a raw row.

Decoding rules for missing or odd cells:
  * text     -> ''
  * number   -> 0 (unparseable values are logged; strict mode rejects the row)
  * boolean  -> True only for a case-insensitive 'TRUE'

Cells are encoded as native values: numbers and booleans as JSON numbers and
booleans, text as strings. The gateway writes them unparsed, so text such as
"=HYPERLINK(...)", "0445" or "1/2" is stored exactly as given.
"""
from flask import current_app

from app.models import AchievementType, Member, Request
from app.utils import normalize_digits

TEXT = 'text'
NUMBER = 'number'
BOOLEAN = 'boolean'


class CellDecodeError(ValueError):
    def __init__(self, field, value):
        super().__init__(f"Cannot read {field!r} from cell value {value!r}")
        self.field = field
        self.value = value


def column_letter(col_index_1_based):
    # 1 -> A, 26 -> Z, 27 -> AA
    col = col_index_1_based
    letters = []
    while col > 0:
        col, rem = divmod(col - 1, 26)
        letters.append(chr(65 + rem))
    return ''.join(reversed(letters))


def parse_number(value):
    """Parse a cell as a float, accepting Arabic-Indic digits. Raises ValueError."""
    text = normalize_digits(str(value)).strip().replace('٫', '.')
    return float(text)


def cell_number(value):
    """Hours as a cell value; whole numbers go out as ints so the sheet shows 2, not 2.0."""
    number = float(value)
    if number.is_integer():
        return int(number)
    return number


class Column:
    def __init__(self, field, kind=TEXT, blank_zero=False):
        self.field = field
        self.kind = kind
        # Pending requests leave the hours cell empty instead of writing 0
        self.blank_zero = blank_zero

    def default(self):
        if self.kind == NUMBER:
            return 0.0
        if self.kind == BOOLEAN:
            return False
        return ''

    def decode(self, raw):
        if raw is None:
            return self.default()
        if self.kind == NUMBER:
            if str(raw).strip() == '':
                return 0.0
            try:
                return parse_number(raw)
            except ValueError:
                raise CellDecodeError(self.field, raw)
        if self.kind == BOOLEAN:
            return str(raw).strip().upper() == 'TRUE'
        return str(raw)

    def encode(self, value):
        if self.kind == NUMBER:
            if value in (None, '') or (self.blank_zero and not value):
                return ''
            return cell_number(value)
        if self.kind == BOOLEAN:
            return bool(value)
        return '' if value is None else str(value)


class RowSchema:
    """Declarative column layout for one sheet."""

    def __init__(self, record_class, columns):
        self.record_class = record_class
        self.columns = list(columns)
        self._positions = {col.field: idx for idx, col in enumerate(self.columns)}

    @property
    def width(self):
        return len(self.columns)

    @property
    def last_column(self):
        return column_letter(self.width)

    def position(self, field):
        """Zero-based column position of a field."""
        try:
            return self._positions[field]
        except KeyError:
            raise KeyError(f"{self.record_class.__name__} has no column {field!r}")

    def decode(self, row, row_index=None, strict=False, sheet_name=''):
        """
        Decode one raw row into a record.

        Args:
            row: list of cell values, possibly shorter than the schema.
            row_index: offset of the row below the header, stored on the record.
            strict: raise CellDecodeError instead of coercing bad numbers to 0.
            sheet_name: used in log messages only.
        """
        row = row or []
        values = {}
        for idx, col in enumerate(self.columns):
            raw = row[idx] if idx < len(row) else None
            try:
                values[col.field] = col.decode(raw)
            except CellDecodeError:
                if strict:
                    raise
                current_app.logger.warning(
                    f"Coercing unreadable {col.field} value {raw!r} to 0 "
                    f"(sheet {sheet_name or self.record_class.__name__}, row {row_index})"
                )
                values[col.field] = col.default()
        record = self.record_class(**values)
        record.row_index = row_index
        return record

    def encode(self, record):
        """Encode a full record as a row of cell values in column order."""
        return [col.encode(getattr(record, col.field)) for col in self.columns]

    def encode_fields(self, fields):
        """
        Encode a partial update as contiguous column runs.

        Returns a list of ``(first_position, [cells])`` so the caller writes only
        the columns it was given and leaves everything between them untouched.
        """
        cells = {}
        for field, value in fields.items():
            pos = self.position(field)
            cells[pos] = self.columns[pos].encode(value)

        runs = []
        for pos in sorted(cells):
            if runs and runs[-1][0] + len(runs[-1][1]) == pos:
                runs[-1][1].append(cells[pos])
            else:
                runs.append((pos, [cells[pos]]))
        return runs


ACHIEVEMENT_TYPE_SCHEMA = RowSchema(AchievementType, [
    Column('name'),
    Column('hours', NUMBER),
    Column('created_at'),
    Column('type_id'),
])

REQUEST_SCHEMA = RowSchema(Request, [
    Column('university_id'),
    Column('description'),
    Column('hours', NUMBER, blank_zero=True),
    Column('image_link'),
    Column('date'),
    Column('approved', BOOLEAN),
    Column('approved_by'),
    Column('request_id'),
])

MEMBER_SCHEMA = RowSchema(Member, [
    Column('university_id'),
    Column('name'),
    Column('email'),
    Column('phone'),
    Column('committee'),
    Column('total_hours', NUMBER),
    Column('achievements'),
])
