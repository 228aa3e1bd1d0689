"""
Maps errors to responses at the request boundary.
Expected client errors keep their message; everything else becomes a generic
500 while the cause goes to the log.
"""

from flask import current_app, jsonify, render_template_string, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from realsnap.errors import IntakeError, NoContentProvided
from realsnap.routes import wants_json
from realsnap.templates import ERROR_HTML


def error_response(status_code, error_code, message):
    if wants_json():
        return jsonify({
            "success": False,
            "error": message,
            "error_code": error_code,
            "message": message,
        }), status_code
    return render_template_string(ERROR_HTML, message=message), status_code


def register_error_handlers(app):
    @app.errorhandler(NoContentProvided)
    def no_content(error):
        return error_response(400, "NO_CONTENT_PROVIDED", "No file received.")

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(error):
        return error_response(413, "CONTENT_TOO_LARGE", "The uploaded file is too large.")

    @app.errorhandler(IntakeError)
    def intake_failed(error):
        current_app.logger.error("Intake failed: %s", error, exc_info=error.cause or error)
        return error_response(500, "INTAKE_FAILED", "The upload could not be recorded.")

    @app.errorhandler(Exception)
    def server_fault(error):
        if isinstance(error, HTTPException):
            return error
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response(500, "SERVER_FAULT", "Internal server error.")
