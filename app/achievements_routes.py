from flask import Blueprint, current_app, jsonify, request

from .auth import admin_required
from .errors import AddFailed, BackendUnavailable, DeleteFailed, MissingDelete, StaleDelete, ValidationFailed
from .services.container import get_services
from .utils import decode_data_url, is_allowed_image, parse_hours, parse_row_index

achievements_bp = Blueprint('achievements_bp', __name__, url_prefix='/api/achievements')


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@achievements_bp.route('/types', methods=['GET'])
def get_types():
    """
    Public list of achievement types; empty when the sheet cannot be read.

    Always read fresh: ``rowIndex`` and ``id`` are offsets that any add or
    delete, from any worker or a manual sheet edit, shifts.
    """
    types = get_services().achievement_types.list()
    return jsonify([t.to_dict() for t in types])


@achievements_bp.route('/types', methods=['POST'])
@admin_required
def add_type():
    data = _json_body()
    name = (data.get('name') or '').strip()
    if not name:
        raise ValidationFailed('Name is required.')
    hours = parse_hours(data.get('hours'))

    if not get_services().achievement_types.add_type(name, hours):
        raise AddFailed()
    return jsonify(success=True)


@achievements_bp.route('/types/delete', methods=['POST'])
@admin_required
def delete_type():
    data = _json_body()
    row_index = parse_row_index(data.get('rowIndex'))
    repo = get_services().achievement_types

    # An empty offset is refused, so a repeated delete cannot take the next type
    try:
        repo.locate(row_index, data.get('typeId'), stale_error=StaleDelete, missing_error=MissingDelete)
    except BackendUnavailable as e:
        raise DeleteFailed() from e

    if not repo.delete_at(row_index):
        raise DeleteFailed()
    return jsonify(success=True)


@achievements_bp.route('/submit', methods=['POST'])
def submit():
    """
    Public submission of a volunteer-hours request.

    Accepts either multipart form data with an ``image`` file, or JSON with the
    image as a base64 data URL in ``imageBase64``.
    """
    if request.files:
        upload = request.files.get('image')
        if upload is None:
            raise ValidationFailed('A proof image is required.')
        university_id = request.form.get('universityId')
        description = request.form.get('description')
        file_name = request.form.get('fileName') or upload.filename
        image_bytes = upload.read()
        mime_type = upload.mimetype
    else:
        data = _json_body()
        university_id = data.get('universityId')
        description = data.get('description')
        file_name = data.get('fileName')
        if not data.get('imageBase64'):
            raise ValidationFailed('A proof image is required.')
        try:
            image_bytes, mime_type = decode_data_url(data['imageBase64'])
        except ValueError as e:
            raise ValidationFailed(str(e))

    if not file_name:
        raise ValidationFailed('File name is required.')
    if not is_allowed_image(file_name, current_app.config.get('ALLOWED_IMAGE_EXTENSIONS', set())):
        raise ValidationFailed('Only image files can be submitted as proof.')

    get_services().lifecycle.submit(university_id, description, image_bytes, file_name, mime_type=mime_type)
    return jsonify(success=True)
