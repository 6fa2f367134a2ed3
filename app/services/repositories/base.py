"""Shared plumbing for the per-sheet repositories."""
import uuid

from flask import current_app

from app.errors import BackendUnavailable, RowNotFound, StaleRowIndex
from app.services.sheets.codec import CellDecodeError, column_letter


class SheetRepository:
    """
    Domain operations over one sheet of positional rows.

    Rows are addressed by offset: 0 is the first row below the header. Any
    add or delete shifts the offsets of the rows after it, so offsets handed
    out by ``list`` are only good until the next mutation.

    Read paths degrade to ``[]`` on backend failure; mutation paths return
    ``False`` and log, leaving the caller to pick the user-facing error.
    """
    schema = None
    # Column holding the stable id minted at creation, if the sheet has one
    id_field = None

    def __init__(self, gateway, sheet_name, header_rows=1, strict_numbers=False):
        self.gateway = gateway
        self.sheet_name = sheet_name
        self.header_rows = header_rows
        self.strict_numbers = strict_numbers

    @property
    def data_range(self):
        # e.g. "Requests!A2:H"
        return f"{self.sheet_name}!A{self.header_rows + 1}:{self.schema.last_column}"

    @property
    def append_range(self):
        return f"{self.sheet_name}!A:{self.schema.last_column}"

    def sheet_row_number(self, offset):
        """1-based A1 row number of the record at ``offset``."""
        return offset + self.header_rows + 1

    def _decode_rows(self, rows):
        records = []
        for offset, row in enumerate(rows):
            try:
                records.append(self.schema.decode(
                    row, row_index=offset, strict=self.strict_numbers, sheet_name=self.sheet_name))
            except CellDecodeError as e:
                current_app.logger.error(f"Skipping {self.sheet_name} row {offset}: {e}")
        return records

    def list(self):
        """All records in storage order (oldest first); [] if the backend is down."""
        try:
            rows = self.gateway.read_range(self.data_range)
        except BackendUnavailable as e:
            current_app.logger.warning(f"Error fetching {self.sheet_name}: {e}")
            return []
        return self._decode_rows(rows)

    def get_at(self, offset):
        """
        Read the single record at ``offset``.

        Returns None when the offset is past the last row. Backend failures
        propagate, since this is only used ahead of a mutation.
        """
        if offset < 0:
            return None
        n = self.sheet_row_number(offset)
        rows = self.gateway.read_range(f"{self.sheet_name}!A{n}:{self.schema.last_column}{n}")
        if not rows or not any(cell.strip() for cell in rows[0]):
            return None
        return self.schema.decode(rows[0], row_index=offset, sheet_name=self.sheet_name)

    def locate(self, offset, expected_id=None, stale_error=StaleRowIndex, missing_error=RowNotFound):
        """
        Re-read the row a caller wants to mutate and check it is still theirs.

        Raises:
            RowNotFound: nothing is stored at ``offset`` any more.
            StaleRowIndex: ``expected_id`` was given and the row holds another record.
        """
        record = self.get_at(offset)
        if record is None:
            raise missing_error()
        if expected_id and self.id_field and getattr(record, self.id_field) != expected_id:
            raise stale_error()
        return record

    def add(self, record):
        """Append a record as a new last row. Returns True on success."""
        if self.id_field and not getattr(record, self.id_field):
            setattr(record, self.id_field, uuid.uuid4().hex)
        try:
            self.gateway.append_row(self.append_range, self.schema.encode(record))
        except BackendUnavailable as e:
            current_app.logger.error(f"Error adding to {self.sheet_name}: {e}")
            return False
        return True

    def delete_at(self, offset):
        """Delete the row at ``offset``. Every later offset moves down by one."""
        try:
            sheet_id = self.gateway.resolve_sheet_id(self.sheet_name)
            self.gateway.delete_row(sheet_id, offset + self.header_rows)
        except BackendUnavailable as e:
            current_app.logger.error(f"Error deleting {self.sheet_name} row {offset}: {e}")
            return False
        return True

    def update_fields_at(self, offset, fields):
        """
        Overwrite only the given fields of the row at ``offset``.

        Columns not named in ``fields`` are never written, so manual notes kept
        in those cells survive. Non-adjacent columns go out as separate calls.
        """
        n = self.sheet_row_number(offset)
        try:
            for position, cells in self.schema.encode_fields(fields):
                start = column_letter(position + 1)
                end = column_letter(position + len(cells))
                if start == end:
                    range_spec = f"{self.sheet_name}!{start}{n}"
                else:
                    range_spec = f"{self.sheet_name}!{start}{n}:{end}{n}"
                self.gateway.update_cell_range(range_spec, [cells])
        except BackendUnavailable as e:
            current_app.logger.error(f"Error updating {self.sheet_name} row {offset}: {e}")
            return False
        return True
