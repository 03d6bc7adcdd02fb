"""Service layer for seller profile, onboarding and KYC documents."""

import asyncio

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.exceptions import NotFoundError
from sellerdesk.core.logging import get_logger
from sellerdesk.features.auth.models import Seller
from sellerdesk.features.auth.schemas import SellerResponse
from sellerdesk.features.profile.schemas import DocumentUpload, ProfileUpdate
from sellerdesk.features.profile.storage import DocumentStorage, StorageError

logger = get_logger(__name__)


class ProfileService:
    """Updates the calling seller's own account."""

    async def update_profile(
        self,
        db: AsyncSession,
        seller_id: int,
        profile_update: ProfileUpdate,
    ) -> SellerResponse:
        """Apply a partial update to the seller's profile.

        Args:
            db: Database session.
            seller_id: Calling seller.
            profile_update: Fields to change.

        Returns:
            The updated seller.

        Raises:
            NotFoundError: If the account no longer exists.
        """
        seller = await self._get_seller(db, seller_id)

        changes: list[str] = []
        for field in sorted(profile_update.model_fields_set):
            value = getattr(profile_update, field)
            if value is None:
                continue
            if isinstance(value, BaseModel):
                # Nested blocks are replaced whole, unsent keys fall back to ""
                value = value.model_dump()
            setattr(seller, field, value)
            changes.append(field)

        await db.flush()
        await db.refresh(seller)

        logger.info(
            "profile.profile_updated",
            fields=changes,
            onboarding_step=seller.onboarding_step,
        )
        return SellerResponse.model_validate(seller)

    async def upload_document(
        self,
        db: AsyncSession,
        seller_id: int,
        upload: DocumentUpload,
        storage: DocumentStorage,
    ) -> str:
        """Store a KYC document and record its URL on the profile.

        The profile change is committed here rather than by the request
        session, so storage only changes alongside a durable row: the new
        file is removed if the commit fails, and a previously uploaded
        document of the same type is removed once it succeeds.

        Returns:
            URL of the stored document.

        Raises:
            NotFoundError: If the account no longer exists.
            InvalidDocumentError: If the payload is rejected.
        """
        seller = await self._get_seller(db, seller_id)

        # File IO runs off the event loop
        url = await asyncio.to_thread(storage.save, seller_id, upload.type, upload.file)
        previous = seller.documents.get(upload.type, "")
        # Reassign so the JSONB change is detected
        seller.documents = {**seller.documents, upload.type: url}
        try:
            await db.commit()
        except Exception:
            await self._discard(storage, url)
            raise

        if previous:
            await self._discard(storage, previous)

        logger.info("profile.document_uploaded", document_type=upload.type)
        return url

    async def _discard(self, storage: DocumentStorage, url: str) -> None:
        """Remove a stored file; failures are logged since the row is already settled."""
        try:
            await asyncio.to_thread(storage.delete, url)
        except (OSError, StorageError):
            logger.warning("profile.document_cleanup_failed", url=url, exc_info=True)

    async def _get_seller(self, db: AsyncSession, seller_id: int) -> Seller:
        seller = await db.get(Seller, seller_id)
        if seller is None:
            raise NotFoundError("User not found")
        return seller
