"""
Content Store
Keeps uploaded bytes on the local filesystem under a generated reference.
The reference is unrelated to the public record id.
"""

import logging
import os
import tempfile
import uuid
from werkzeug.utils import secure_filename
from realsnap.errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".bin"


class FileContentStore:
    def __init__(self, root):
        self.root = os.path.abspath(root)

    def store(self, content, filename=None):
        """Write content and return its reference. Raises StorageError on failure."""
        content_ref = f"{uuid.uuid4().hex}{self._extension(filename)}"
        target = os.path.join(self.root, content_ref)
        tmp_path = None
        try:
            os.makedirs(self.root, exist_ok=True)
            # Atomic write: temp file in the same directory, then rename
            fd, tmp_path = tempfile.mkstemp(dir=self.root, prefix=".upload-", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, target)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Could not write content to {self.root}: {e}") from e
        return content_ref

    def retrieve(self, content_ref):
        """Read stored bytes. Raises StorageError for unknown or malformed references."""
        try:
            with open(self.path_for(content_ref), "rb") as f:
                return f.read()
        except (OSError, ValueError) as e:
            raise StorageError(f"Could not read content {content_ref}: {e}") from e

    def discard(self, content_ref):
        """Remove stored content. Used to roll back a failed intake."""
        try:
            os.remove(self.path_for(content_ref))
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("Could not discard content %s: %s", content_ref, e)
            return False
        return True

    def path_for(self, content_ref):
        """Resolve a reference inside the store root, rejecting traversal."""
        if not content_ref or os.path.basename(content_ref) != content_ref or content_ref.startswith("."):
            raise ValueError(f"Invalid content reference: {content_ref}")
        return os.path.join(self.root, content_ref)

    def check(self):
        os.makedirs(self.root, exist_ok=True)
        if not os.access(self.root, os.W_OK):
            raise StorageError(f"Upload directory {self.root} is not writable")

    @staticmethod
    def _extension(filename):
        if not filename:
            return DEFAULT_EXTENSION
        ext = os.path.splitext(secure_filename(filename))[1].lower()
        return ext or DEFAULT_EXTENSION
