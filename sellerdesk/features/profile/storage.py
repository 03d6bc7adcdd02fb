"""KYC document storage providers.

Documents arrive as base64 text (optionally wrapped in a ``data:`` URI) and
are stored under ``<root>/<seller_id>/<type>/<uuid><ext>``. The returned URL
is what gets recorded on the seller profile.

All paths are validated to stay within the storage root.
"""

from __future__ import annotations

import base64
import binascii
import re
import uuid
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

from sellerdesk.core.config import get_settings
from sellerdesk.core.exceptions import BadRequestError, SellerDeskError
from sellerdesk.features.auth.models import DOCUMENT_TYPES

logger = structlog.get_logger()

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(;[\w=.-]+)*;base64,", re.I)

EXTENSIONS_BY_MIME = {
    "application/pdf": ".pdf",
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
}
DEFAULT_EXTENSION = ".bin"


class StorageError(SellerDeskError):
    """Document could not be written to or removed from storage."""

    default_code = "STORAGE_ERROR"
    default_message = "Document storage failed"


class InvalidDocumentError(BadRequestError):
    """Uploaded payload is not an acceptable document."""


def decode_payload(payload: str) -> tuple[bytes, str]:
    """Decode a base64 or ``data:`` URI payload.

    Args:
        payload: Base64 text, optionally prefixed with a data URI header.

    Returns:
        Tuple of (raw_bytes, file_extension).

    Raises:
        InvalidDocumentError: If the payload is empty or not valid base64.
    """
    extension = DEFAULT_EXTENSION
    match = DATA_URI_PATTERN.match(payload)
    if match:
        mime = (match.group("mime") or "").lower()
        extension = EXTENSIONS_BY_MIME.get(mime, DEFAULT_EXTENSION)
        payload = payload[match.end() :]

    try:
        content = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidDocumentError("File is not valid base64") from e

    if not content:
        raise InvalidDocumentError("File is empty")
    return content, extension


class DocumentStorage(ABC):
    """Abstract base class for document storage.

    Remote object stores implement the same two operations.
    """

    @abstractmethod
    def save(self, seller_id: int, document_type: str, payload: str) -> str:
        """Store a document.

        Args:
            seller_id: Owning seller.
            document_type: One of aadhar, pan, gst.
            payload: Base64 or data URI encoded file.

        Returns:
            Public URL of the stored document.

        Raises:
            InvalidDocumentError: If the type or payload is rejected.
            StorageError: If the write fails.
        """

    @abstractmethod
    def delete(self, url: str) -> bool:
        """Remove a previously stored document.

        Args:
            url: URL returned by :meth:`save`.

        Returns:
            True if deleted, False if it was not found here.
        """


class LocalDocumentStorage(DocumentStorage):
    """Local filesystem storage provider for development and single-node deployments."""

    def __init__(
        self,
        root_dir: Path | str | None = None,
        base_url: str | None = None,
        max_bytes: int | None = None,
    ) -> None:
        """Initialize with root directory and public URL prefix.

        Args:
            root_dir: Root directory for documents. Defaults to Settings value.
            base_url: URL prefix documents are served under. Defaults to Settings value.
            max_bytes: Maximum decoded document size. Defaults to Settings value.
        """
        settings = get_settings()
        self.root_dir = Path(root_dir or settings.documents_storage_root).resolve()
        self.base_url = (base_url or settings.documents_base_url).rstrip("/")
        self.max_bytes = max_bytes if max_bytes is not None else settings.documents_max_bytes

    def resolve_path(self, relative_path: str) -> Path:
        """Resolve a storage-relative path, refusing anything outside the root.

        Raises:
            StorageError: If path traversal attempt detected.
        """
        full_path = (self.root_dir / relative_path).resolve()
        try:
            full_path.relative_to(self.root_dir)
        except ValueError:
            logger.warning(
                "profile.path_traversal_attempt",
                relative_path=relative_path,
                root_dir=str(self.root_dir),
            )
            raise StorageError(f"Path traversal attempt: {relative_path}") from None
        return full_path

    def save(self, seller_id: int, document_type: str, payload: str) -> str:
        if document_type not in DOCUMENT_TYPES:
            raise InvalidDocumentError(f"Unknown document type: {document_type}")

        content, extension = decode_payload(payload)
        if len(content) > self.max_bytes:
            raise InvalidDocumentError(f"File exceeds the {self.max_bytes} byte limit")

        relative_path = f"{seller_id}/{document_type}/{uuid.uuid4().hex}{extension}"
        dest_path = self.resolve_path(relative_path)
        try:
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            dest_path.write_bytes(content)
        except OSError as e:
            raise StorageError(f"Failed to store document: {e}") from e

        logger.info(
            "profile.document_saved",
            document_type=document_type,
            relative_path=relative_path,
            size_bytes=len(content),
        )
        return f"{self.base_url}/{relative_path}"

    def delete(self, url: str) -> bool:
        prefix = f"{self.base_url}/"
        if not url.startswith(prefix):
            return False

        full_path = self.resolve_path(url[len(prefix) :])
        if not full_path.is_file():
            return False

        full_path.unlink()
        logger.info("profile.document_deleted", url=url)
        return True


def get_document_storage() -> DocumentStorage:
    """FastAPI dependency returning the configured document storage."""
    return LocalDocumentStorage()
