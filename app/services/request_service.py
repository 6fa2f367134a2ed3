import math
import mimetypes

from flask import current_app

from app.errors import (
    ApprovedTwice, ApproveFailed, BackendUnavailable, MissingApprove, MissingReject, RejectAfterApproval,
    RejectFailed, StaleApprove, StaleReject, SubmitFailed, UploadFailed, ValidationFailed,
)
from app.models import Request
from app.notifications import dispatch_notification
from app.utils import normalize_digits, utc_now_iso

NEW_REQUEST_TITLE = 'New volunteer hours request'


class RequestLifecycleService:
    """
    Submission and resolution of volunteer-hours requests.

        submit()            approve(hours, reviewer)
    (none) ----> Pending -------------------------> Approved
                    |
                    | reject()
                    v
                 deleted (row removed)

    Row indexes are only valid until the next add or delete on the sheet;
    callers must reload the pending list after every mutation.
    """

    def __init__(self, requests, upload, notify=None):
        """
        Args:
            requests: RequestRepository for the Requests sheet.
            upload: callable(data, mime_type, suggested_name) -> public URL.
            notify: optional callable(title, body); failures never reach the caller.
        """
        self.requests = requests
        self.upload = upload
        self.notify = notify

    def submit(self, university_id, description, image_bytes, file_name, mime_type=None):
        """
        Upload the proof image, then append a Pending row.

        Nothing is written when the upload fails, so every stored request has
        a proof link.
        """
        university_id = normalize_digits((university_id or '').strip())
        description = (description or '').strip()
        if not university_id or not description:
            raise ValidationFailed('University ID and description are required.')
        if not image_bytes:
            raise ValidationFailed('A proof image is required.')

        mime_type = mime_type or mimetypes.guess_type(file_name or '')[0] or 'image/jpeg'
        try:
            image_link = self.upload(image_bytes, mime_type, file_name)
        except UploadFailed:
            raise
        except Exception as e:
            current_app.logger.error(f"Error uploading to storage: {e}")
            raise UploadFailed() from e
        if not image_link:
            raise UploadFailed()

        record = Request(
            university_id=university_id,
            description=description,
            hours=0,
            image_link=image_link,
            date=utc_now_iso(),
            approved=False,
        )
        if not self.requests.add(record):
            raise SubmitFailed()

        if self.notify:
            dispatch_notification(
                self.notify,
                NEW_REQUEST_TITLE,
                f"A new request was received from student {university_id}\nDescription: {description}",
            )
        return record

    def approve(self, row_index, hours, approved_by, request_id=None):
        """
        Approve the Pending request at ``row_index`` with ``hours``.

        Hours are written before the status columns. If the second write fails
        the row still reads as Pending and approving again repairs it.
        """
        if isinstance(hours, bool) or not isinstance(hours, (int, float)) \
                or not math.isfinite(hours) or hours <= 0:
            raise ValidationFailed('Hours must be a positive number.')

        try:
            record = self.requests.locate(
                row_index, request_id, stale_error=StaleApprove, missing_error=MissingApprove)
        except BackendUnavailable as e:
            raise ApproveFailed() from e
        if record.approved:
            raise ApprovedTwice()

        if not self.requests.update_fields_at(row_index, {'hours': hours}):
            raise ApproveFailed()
        if not self.requests.update_fields_at(row_index, {'approved': True, 'approved_by': approved_by}):
            raise ApproveFailed()

        current_app.logger.info(
            f"Request {record.request_id or row_index} from {record.university_id} "
            f"approved for {hours} hours by {approved_by}")
        return True

    def reject(self, row_index, request_id=None):
        """Reject the Pending request at ``row_index`` by deleting its row."""
        try:
            record = self.requests.locate(
                row_index, request_id, stale_error=StaleReject, missing_error=MissingReject)
        except BackendUnavailable as e:
            raise RejectFailed() from e
        if record.approved:
            raise RejectAfterApproval()

        if not self.requests.delete_at(row_index):
            raise RejectFailed()

        current_app.logger.info(f"Request {record.request_id or row_index} from {record.university_id} rejected")
        return True
