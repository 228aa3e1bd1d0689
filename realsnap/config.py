"""
Configuration read from the environment (and a .env file when present).
"""

import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_CONTENT_LENGTH = 20 * 1024 * 1024


def load_config():
    return {
        "HOST": os.getenv("HOST", "0.0.0.0"),
        "PORT": int(os.getenv("PORT", "3000")),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        # Base address used in verification links, e.g. https://realsnap.example
        # Falls back to the scheme and host of the upload request.
        "PUBLIC_BASE_URL": os.getenv("PUBLIC_BASE_URL"),
        "UPLOAD_DIR": os.getenv("UPLOAD_DIR", os.path.abspath("uploads")),
        "QR_DIR": os.getenv("QR_DIR", os.path.abspath("public")),
        "QR_BOX_SIZE": int(os.getenv("QR_BOX_SIZE", "8")),
        # json | sql
        "RECORD_STORE": os.getenv("RECORD_STORE", "json"),
        "RECORDS_FILE": os.getenv("RECORDS_FILE", os.path.abspath(os.path.join("data", "records.json"))),
        "SQLALCHEMY_DATABASE_URI": os.getenv("DATABASE_URL", "sqlite:///realsnap.db"),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "MAX_CONTENT_LENGTH": int(os.getenv("MAX_CONTENT_LENGTH", str(DEFAULT_MAX_CONTENT_LENGTH))),
    }
