"""
RealSnap: Flask application
Upload an image -> SHA-256 + verification id -> link and QR code to a
verification page showing the stored original.
"""

from datetime import datetime, timezone
from flask import Flask, jsonify
from flasgger import Swagger
from realsnap.config import load_config
from realsnap.routes.errors import register_error_handlers
from realsnap.routes.record_routes import record_bp
from realsnap.routes.upload_routes import upload_bp
from realsnap.routes.verification_routes import verification_bp
from realsnap.services import Services, get_services
from realsnap.services.content_store import FileContentStore
from realsnap.services.proof_issuer import ProofIssuer
from realsnap.services.qr import QrRenderer
from realsnap.services.record_store import build_record_store
from realsnap.services.resolver import VerificationResolver


def create_app(config=None):
    app = Flask("realsnap")

    # Configuration: environment first, explicit overrides win
    app.config.update(load_config())
    if config:
        app.config.update(config)
    app.logger.setLevel(str(app.config["LOG_LEVEL"]).upper())

    # Services
    content_store = FileContentStore(app.config["UPLOAD_DIR"])
    record_store = build_record_store(app)
    app.extensions["realsnap"] = Services(
        content_store=content_store,
        record_store=record_store,
        issuer=ProofIssuer(content_store, record_store),
        resolver=VerificationResolver(record_store, content_url_prefix="/uploads"),
        qr=QrRenderer(app.config["QR_DIR"], box_size=app.config["QR_BOX_SIZE"]),
    )

    # Initialize Swagger
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec_1',
                "route": '/apispec_1.json',
                "rule_filter": lambda rule: True,  # all in
                "model_filter": lambda tag: True,  # all in
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs/"
    }
    Swagger(app, config=swagger_config)

    register_error_handlers(app)

    # Register Blueprints
    app.register_blueprint(upload_bp)
    app.register_blueprint(verification_bp)
    app.register_blueprint(record_bp)

    # --- Health check ---------------------------------------------------
    @app.route("/health")
    def health():
        """
        Health check endpoint
        ---
        tags:
          - Health
        responses:
          200:
            description: Service is healthy
          503:
            description: Record store or upload directory unavailable
        """
        services = get_services()
        try:
            services.record_store.check()
            services.content_store.check()
        except Exception as e:
            app.logger.warning("Health check failed: %s", e)
            return jsonify({
                "status": "unhealthy",
                "service": "realsnap",
                "error": str(e),
            }), 503

        return jsonify({
            "status": "healthy",
            "service": "realsnap",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {
                "record_store": "ok",
                "content_store": "ok",
            },
        }), 200

    return app


def main():
    app = create_app()
    app.logger.info(
        "RealSnap running on http://%s:%s (record store: %s)",
        app.config["HOST"], app.config["PORT"], app.config["RECORD_STORE"],
    )
    app.run(host=app.config["HOST"], port=app.config["PORT"])


if __name__ == '__main__':
    main()
