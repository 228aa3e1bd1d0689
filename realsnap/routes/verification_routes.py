"""
Verification Routes
The page a scanned QR code lands on, plus the stored original and QR image.
"""

from flask import Blueprint, current_app, render_template_string, send_from_directory
from realsnap.services import get_services
from realsnap.services.resolver import NotFound
from realsnap.templates import NOT_FOUND_HTML, VERIFIED_HTML

verification_bp = Blueprint('verification', __name__)


@verification_bp.route('/v/<record_id>', methods=['GET'])
def verify(record_id):
    """
    Verification page for a record
    ---
    tags:
      - Verification
    produces:
      - text/html
    parameters:
      - name: record_id
        in: path
        type: string
        required: true
    responses:
      200:
        description: Record found; shows hash, intake time and the original
      404:
        description: No record for this id
    """
    result = get_services().resolver.resolve(record_id)
    if isinstance(result, NotFound):
        current_app.logger.info("Verification requested for unknown id %s", record_id)
        return render_template_string(NOT_FOUND_HTML, record_id=record_id), 404

    return render_template_string(VERIFIED_HTML, view=result)


@verification_bp.route('/uploads/<content_ref>', methods=['GET'])
def content(content_ref):
    """
    Stored original content
    ---
    tags:
      - Verification
    parameters:
      - name: content_ref
        in: path
        type: string
        required: true
    responses:
      200:
        description: The exact bytes recorded at intake
      404:
        description: Unknown content reference
    """
    return send_from_directory(get_services().content_store.root, content_ref)


@verification_bp.route('/public/<record_id>.png', methods=['GET'])
def qr_png(record_id):
    """
    QR code PNG for a record's verification link
    ---
    tags:
      - Verification
    produces:
      - image/png
    parameters:
      - name: record_id
        in: path
        type: string
        required: true
    responses:
      200:
        description: PNG image
      404:
        description: No QR image for this id
    """
    qr = get_services().qr
    return send_from_directory(qr.output_dir, qr.png_name(record_id), mimetype='image/png')
