from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase

from drivers.blobs import BlobStash


class BlobStashTests(SimpleTestCase):
    def setUp(self):
        self.stash = BlobStash()

    def test_stash_returns_handle_and_keeps_bytes(self):
        upload = SimpleUploadedFile("mvr.pdf", b"%PDF-1.4 motor vehicle record", content_type="application/pdf")

        handle = self.stash.stash(upload)

        self.assertEqual(handle.name, "mvr.pdf")
        self.assertEqual(handle.size, len(b"%PDF-1.4 motor vehicle record"))
        self.assertEqual(handle.content_type, "application/pdf")
        self.assertTrue(handle.key.startswith("dqf-blob:"))
        self.assertEqual(self.stash.read(handle), b"%PDF-1.4 motor vehicle record")

    def test_each_stash_gets_its_own_key(self):
        a = self.stash.stash(SimpleUploadedFile("a.pdf", b"a"))
        b = self.stash.stash(SimpleUploadedFile("a.pdf", b"a"))
        self.assertNotEqual(a.key, b.key)

    def test_release_drops_bytes(self):
        handle = self.stash.stash(SimpleUploadedFile("a.pdf", b"abc"))
        self.stash.release(handle)
        self.assertIsNone(self.stash.read(handle))

    def test_release_and_read_tolerate_missing_handle(self):
        self.stash.release(None)
        self.assertIsNone(self.stash.read(None))
