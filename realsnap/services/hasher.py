import hashlib


def hash_content(content):
    """SHA-256 of the given bytes as lowercase hex. Depends on the bytes only."""
    return hashlib.sha256(content).hexdigest()
