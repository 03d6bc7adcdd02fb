"""Service layer for seller registration and login."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from sellerdesk.core.logging import get_logger
from sellerdesk.core.security import create_access_token, hash_password, verify_password
from sellerdesk.features.auth.models import Seller
from sellerdesk.features.auth.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    SellerResponse,
)

logger = get_logger(__name__)


class AuthService:
    """Creates seller accounts and exchanges credentials for tokens."""

    async def register(self, db: AsyncSession, request: RegisterRequest) -> AuthResponse:
        """Create a seller account and issue its first token.

        Args:
            db: Database session.
            request: Registration details.

        Returns:
            Token and the new seller profile.

        Raises:
            ConflictError: If the email is already registered.
        """
        existing = await db.execute(select(Seller.id).where(Seller.email == request.email))
        if existing.scalar_one_or_none() is not None:
            raise ConflictError("User already exists")

        seller = Seller(
            name=request.name,
            email=request.email,
            password_hash=hash_password(request.password),
            city=request.city,
        )
        db.add(seller)
        try:
            await db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            raise ConflictError("User already exists") from e
        await db.refresh(seller)

        logger.info("auth.seller_registered", seller_id=seller.id)

        return AuthResponse(
            message="User created successfully",
            token=create_access_token(seller.id, seller.email, seller.role),
            seller=SellerResponse.model_validate(seller),
        )

    async def login(self, db: AsyncSession, request: LoginRequest) -> AuthResponse:
        """Verify credentials and issue a token.

        Raises:
            AuthenticationError: INVALID_CREDENTIALS for an unknown email or a
                wrong password (deliberately indistinguishable).
        """
        result = await db.execute(select(Seller).where(Seller.email == request.email))
        seller = result.scalar_one_or_none()

        if seller is None or not verify_password(request.password, seller.password_hash):
            logger.info("auth.login_failed")
            raise AuthenticationError("Invalid email or password", code="INVALID_CREDENTIALS")

        logger.info("auth.login_succeeded", seller_id=seller.id)

        return AuthResponse(
            message="Login successful",
            token=create_access_token(seller.id, seller.email, seller.role),
            seller=SellerResponse.model_validate(seller),
        )

    async def get_seller(self, db: AsyncSession, seller_id: int) -> Seller:
        """Load the seller row behind a verified token.

        Raises:
            NotFoundError: If the account no longer exists.
        """
        seller = await db.get(Seller, seller_id)
        if seller is None:
            raise NotFoundError("User not found")
        return seller
