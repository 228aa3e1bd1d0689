import os
from realsnap.app import create_app

DIGITS = b"0123456789"
DIGITS_SHA256 = "84d89877f0d4041efb6bf91a16f0248f2fd573e6af05c19f96bedb9f882f7882"


def make_app(tmpdir, **overrides):
    config = {
        "TESTING": True,
        "UPLOAD_DIR": os.path.join(tmpdir, "uploads"),
        "QR_DIR": os.path.join(tmpdir, "public"),
        "RECORD_STORE": "json",
        "RECORDS_FILE": os.path.join(tmpdir, "data", "records.json"),
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{os.path.join(tmpdir, 'records.db')}",
        "PUBLIC_BASE_URL": None,
    }
    config.update(overrides)
    return create_app(config)
