from flask import Blueprint, current_app, jsonify, render_template_string, request, url_for
from realsnap.routes import public_base_url, wants_json
from realsnap.services import get_services
from realsnap.templates import INDEX_HTML, UPLOAD_OK_HTML

upload_bp = Blueprint('upload', __name__)


@upload_bp.route('/', methods=['GET'])
def index():
    """
    Upload form
    ---
    tags:
      - Upload
    produces:
      - text/html
    responses:
      200:
        description: HTML form posting to /api/upload
    """
    return render_template_string(INDEX_HTML)


@upload_bp.route('/api/upload', methods=['POST'])
def upload():
    """
    Record an uploaded image and issue its verification link
    ---
    tags:
      - Upload
    consumes:
      - multipart/form-data
    produces:
      - text/html
      - application/json
    parameters:
      - name: file
        in: formData
        type: file
        required: true
    responses:
      200:
        description: HTML page with the verification link and QR code
      201:
        description: Record created (when the client accepts application/json)
      400:
        description: No file received
      413:
        description: File too large
      500:
        description: The upload could not be recorded
    """
    file = request.files.get('file')
    content = file.read() if file else b''
    filename = file.filename if file else None

    services = get_services()
    record = services.issuer.issue(content, base_url=public_base_url(), filename=filename)

    services.qr.write_png(record.record_id, record.verify_ref)
    qr_png_url = url_for('verification.qr_png', record_id=record.record_id)
    content_url = url_for('verification.content', content_ref=record.content_ref)
    current_app.logger.info("Upload %s recorded as %s", filename or '<unnamed>', record.record_id)

    if wants_json():
        data = record.to_dict()
        data['qr_png_url'] = qr_png_url
        data['content_url'] = content_url
        return jsonify({"success": True, "data": data}), 201

    return render_template_string(
        UPLOAD_OK_HTML,
        record=record,
        qr_data_url=services.qr.data_url(record.verify_ref),
        qr_png_url=qr_png_url,
        content_url=content_url,
    )
