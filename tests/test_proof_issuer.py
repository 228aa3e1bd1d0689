import os
import tempfile
import unittest
import uuid
from realsnap.errors import DuplicateIdError, IntakeError, NoContentProvided, StorageError
from realsnap.services.content_store import FileContentStore
from realsnap.services.hasher import hash_content
from realsnap.services.proof_issuer import ProofIssuer
from realsnap.services.record_store import JsonRecordStore
from realsnap.services.resolver import NotFound, VerificationResolver, VerificationView
from tests.support import DIGITS, DIGITS_SHA256

BASE_URL = "https://realsnap.example"


class RejectingRecordStore:
    """Record store whose writes always fail."""

    def __init__(self, error):
        self.error = error

    def get(self, record_id):
        return None

    def put(self, record_id, record):
        raise self.error


class BrokenContentStore:
    def store(self, content, filename=None):
        raise StorageError("medium unavailable")


class TestProofIssuer(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.upload_dir = os.path.join(self._tmp.name, "uploads")
        self.content_store = FileContentStore(self.upload_dir)
        self.record_store = JsonRecordStore(os.path.join(self._tmp.name, "records.json"))
        self.issuer = ProofIssuer(self.content_store, self.record_store)
        self.resolver = VerificationResolver(self.record_store)

    def tearDown(self):
        self._tmp.cleanup()

    def stored_files(self):
        if not os.path.isdir(self.upload_dir):
            return []
        return os.listdir(self.upload_dir)

    def test_issue_records_hash_of_exact_bytes(self):
        record = self.issuer.issue(DIGITS, BASE_URL, "digits.txt")
        self.assertEqual(record.integrity_hash, DIGITS_SHA256)

        view = self.resolver.resolve(record.record_id)
        self.assertIsInstance(view, VerificationView)
        self.assertEqual(view.integrity_hash, DIGITS_SHA256)
        self.assertEqual(self.content_store.retrieve(view.record.content_ref), DIGITS)
        self.assertEqual(view.content_url, f"/uploads/{record.content_ref}")

    def test_round_trip_for_varied_payloads(self):
        payloads = [b"\x00", b"a" * 4096, bytes(range(256)), "é📷".encode("utf-8")]
        for payload in payloads:
            record = self.issuer.issue(payload, BASE_URL)
            view = self.resolver.resolve(record.record_id)
            self.assertEqual(view.integrity_hash, hash_content(payload))
            self.assertEqual(self.content_store.retrieve(view.record.content_ref), payload)

    def test_verify_ref_shape(self):
        record = self.issuer.issue(DIGITS, BASE_URL + "/")
        self.assertEqual(record.verify_ref, f"{BASE_URL}/v/{record.record_id}")
        uuid.UUID(record.record_id)

    def test_content_ref_is_not_the_id(self):
        record = self.issuer.issue(DIGITS, BASE_URL, "digits.txt")
        self.assertNotIn(record.record_id, record.content_ref)

    def test_identical_content_gets_distinct_records(self):
        first = self.issuer.issue(DIGITS, BASE_URL)
        second = self.issuer.issue(DIGITS, BASE_URL)
        self.assertNotEqual(first.record_id, second.record_id)
        self.assertNotEqual(first.content_ref, second.content_ref)
        self.assertEqual(len(self.record_store), 2)

    def test_empty_content_rejected_before_anything_is_written(self):
        for content in (b"", None):
            with self.assertRaises(NoContentProvided):
                self.issuer.issue(content, BASE_URL)
        self.assertEqual(len(self.record_store), 0)
        self.assertEqual(self.stored_files(), [])

    def test_storage_failure_creates_no_record(self):
        issuer = ProofIssuer(BrokenContentStore(), self.record_store)
        with self.assertRaises(IntakeError) as ctx:
            issuer.issue(DIGITS, BASE_URL)
        self.assertIsInstance(ctx.exception.cause, StorageError)
        self.assertEqual(len(self.record_store), 0)

    def test_record_failure_discards_content(self):
        issuer = ProofIssuer(self.content_store, RejectingRecordStore(OSError("disk full")))
        with self.assertRaises(IntakeError) as ctx:
            issuer.issue(DIGITS, BASE_URL, "digits.txt")
        self.assertIsInstance(ctx.exception.cause, OSError)
        self.assertEqual(self.stored_files(), [])

    def test_duplicate_id_surfaces_as_intake_error(self):
        issuer = ProofIssuer(self.content_store, RejectingRecordStore(DuplicateIdError("x")))
        with self.assertRaises(IntakeError) as ctx:
            issuer.issue(DIGITS, BASE_URL)
        self.assertIsInstance(ctx.exception.cause, DuplicateIdError)
        self.assertEqual(self.stored_files(), [])


class TestVerificationResolver(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.record_store = JsonRecordStore(os.path.join(self._tmp.name, "records.json"))

    def tearDown(self):
        self._tmp.cleanup()

    def test_never_issued_id_is_not_found(self):
        record_id = str(uuid.uuid4())
        result = VerificationResolver(self.record_store).resolve(record_id)
        self.assertEqual(result, NotFound(record_id))

    def test_content_url_prefix(self):
        issuer = ProofIssuer(FileContentStore(os.path.join(self._tmp.name, "u")), self.record_store)
        record = issuer.issue(DIGITS, BASE_URL, "a.png")
        view = VerificationResolver(self.record_store, content_url_prefix="/files/").resolve(record.record_id)
        self.assertEqual(view.content_url, f"/files/{record.content_ref}")


if __name__ == '__main__':
    unittest.main()
