from flask import Blueprint, jsonify
from realsnap.routes.errors import error_response
from realsnap.services import get_services
from realsnap.services.resolver import NotFound

record_bp = Blueprint('records', __name__)


@record_bp.route('/api/records/<record_id>', methods=['GET'])
def get_record(record_id):
    """
    Get a record as JSON
    ---
    tags:
      - Records
    parameters:
      - name: record_id
        in: path
        type: string
        required: true
    responses:
      200:
        description: Record details
      404:
        description: Record not found
    """
    result = get_services().resolver.resolve(record_id)
    if isinstance(result, NotFound):
        return error_response(404, "RECORD_NOT_FOUND", "No record exists for this id.")

    data = result.record.to_dict()
    data['content_url'] = result.content_url
    return jsonify({
        "success": True,
        "data": data
    }), 200
