"""Error taxonomy for volunteer-hours operations.

Every error carries the HTTP status and the ``error`` kind string used in the
JSON failure body, so views can simply raise and let the handler registered by
``create_app`` render the response.
"""
from flask import jsonify


class VolunteerHoursError(Exception):
    status_code = 500
    kind = 'InternalError'
    default_message = 'An internal error occurred.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_response(self):
        body = jsonify(success=False, error=self.kind, message=self.message)
        return body, self.status_code


class Unauthorized(VolunteerHoursError):
    status_code = 403
    kind = 'Unauthorized'
    default_message = 'You are not authorized to perform this action.'

    def __init__(self, message=None, authenticated=True):
        super().__init__(message)
        # Anonymous callers get 401 so the client knows to sign in
        if not authenticated:
            self.status_code = 401


class ValidationFailed(VolunteerHoursError):
    status_code = 400
    kind = 'ValidationFailed'
    default_message = 'Invalid input.'


class BackendUnavailable(VolunteerHoursError):
    status_code = 503
    kind = 'BackendUnavailable'
    default_message = 'The spreadsheet backend is unavailable.'


class UploadFailed(VolunteerHoursError):
    status_code = 502
    kind = 'UploadFailed'
    default_message = 'Failed to upload image.'


class AddFailed(VolunteerHoursError):
    kind = 'AddFailed'
    default_message = 'Failed to add achievement type.'


class DeleteFailed(VolunteerHoursError):
    kind = 'DeleteFailed'
    default_message = 'Failed to delete achievement type.'


class SubmitFailed(VolunteerHoursError):
    kind = 'SubmitFailed'
    default_message = 'Failed to submit request.'


class ApproveFailed(VolunteerHoursError):
    kind = 'ApproveFailed'
    default_message = 'Failed to approve request.'


class RejectFailed(VolunteerHoursError):
    kind = 'RejectFailed'
    default_message = 'Failed to reject request.'


class RowNotFound(VolunteerHoursError):
    status_code = 404
    kind = 'RowNotFound'
    default_message = 'No record exists at that row index.'


class AlreadyResolved(VolunteerHoursError):
    status_code = 409
    kind = 'AlreadyResolved'
    default_message = 'This request has already been resolved.'


class StaleRowIndex(VolunteerHoursError):
    status_code = 409
    kind = 'StaleRowIndex'
    default_message = 'The list has changed since it was loaded. Refresh and try again.'


class StaleDelete(StaleRowIndex, DeleteFailed):
    pass


class StaleApprove(StaleRowIndex, ApproveFailed):
    pass


class StaleReject(StaleRowIndex, RejectFailed):
    pass


class MissingDelete(RowNotFound, DeleteFailed):
    pass


class MissingApprove(RowNotFound, ApproveFailed):
    pass


class MissingReject(RowNotFound, RejectFailed):
    pass


class ApprovedTwice(AlreadyResolved, ApproveFailed):
    pass


class RejectAfterApproval(AlreadyResolved, RejectFailed):
    pass


def register_error_handlers(app):
    @app.errorhandler(VolunteerHoursError)
    def handle_volunteer_hours_error(error):
        if error.status_code >= 500:
            app.logger.error(f"{error.kind}: {error.message}")
        return error.to_response()

    @app.errorhandler(413)
    def handle_too_large(error):
        return ValidationFailed('The uploaded file is too large.').to_response()
