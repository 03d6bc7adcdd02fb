"""Tests for KYC document storage."""

import base64

import pytest

from sellerdesk.features.profile.storage import (
    InvalidDocumentError,
    LocalDocumentStorage,
    StorageError,
    decode_payload,
)

PDF_BYTES = b"%PDF-1.4 test document"
PDF_B64 = base64.b64encode(PDF_BYTES).decode()


@pytest.fixture
def storage(tmp_path) -> LocalDocumentStorage:
    return LocalDocumentStorage(root_dir=tmp_path, base_url="/uploads/documents", max_bytes=1024)


class TestDecodePayload:
    """Tests for decode_payload."""

    def test_plain_base64(self):
        content, extension = decode_payload(PDF_B64)

        assert content == PDF_BYTES
        assert extension == ".bin"

    def test_data_uri_sets_extension(self):
        content, extension = decode_payload(f"data:application/pdf;base64,{PDF_B64}")

        assert content == PDF_BYTES
        assert extension == ".pdf"

    def test_invalid_base64_rejected(self):
        with pytest.raises(InvalidDocumentError, match="not valid base64"):
            decode_payload("not base64 at all!!")

    def test_empty_payload_rejected(self):
        with pytest.raises(InvalidDocumentError):
            decode_payload("")


class TestLocalDocumentStorage:
    """Tests for LocalDocumentStorage."""

    def test_save_writes_under_seller_and_type(self, storage, tmp_path):
        url = storage.save(7, "pan", f"data:image/png;base64,{PDF_B64}")

        assert url.startswith("/uploads/documents/7/pan/")
        assert url.endswith(".png")
        stored = tmp_path / url.removeprefix("/uploads/documents/")
        assert stored.read_bytes() == PDF_BYTES

    def test_unknown_document_type_rejected(self, storage):
        with pytest.raises(InvalidDocumentError, match="Unknown document type"):
            storage.save(7, "passport", PDF_B64)

    def test_traversal_document_type_rejected(self, storage):
        with pytest.raises(InvalidDocumentError):
            storage.save(7, "../../etc", PDF_B64)

    def test_oversized_document_rejected(self, storage):
        payload = base64.b64encode(b"x" * 2048).decode()

        with pytest.raises(InvalidDocumentError, match="byte limit"):
            storage.save(7, "gst", payload)

    def test_resolve_path_rejects_traversal(self, storage):
        with pytest.raises(StorageError, match="Path traversal"):
            storage.resolve_path("../outside.pdf")

    def test_delete_removes_saved_document(self, storage):
        url = storage.save(7, "aadhar", PDF_B64)

        assert storage.delete(url) is True
        assert storage.delete(url) is False

    def test_delete_ignores_foreign_urls(self, storage):
        assert storage.delete("https://elsewhere.example.com/doc.pdf") is False

    def test_delete_rejects_traversal_url(self, storage):
        with pytest.raises(StorageError):
            storage.delete("/uploads/documents/../../etc/passwd")
