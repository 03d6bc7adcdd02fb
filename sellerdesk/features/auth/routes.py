"""API routes for seller authentication."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from sellerdesk.core.database import get_db
from sellerdesk.core.security import CurrentSeller
from sellerdesk.features.auth.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    SellerResponse,
)
from sellerdesk.features.auth.service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a seller account",
    description="""
Create a seller account and return a bearer token.

**Errors**:
- 409 if the email is already registered
- 422 if name, email, password (6-72 chars) or city is missing or invalid
""",
)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Register a new seller."""
    return await AuthService().register(db=db, request=request)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Exchange credentials for a token",
    description="Returns 401 INVALID_CREDENTIALS for an unknown email or wrong password.",
)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Log a seller in."""
    return await AuthService().login(db=db, request=request)


@router.get(
    "/me",
    response_model=SellerResponse,
    summary="Get the calling seller",
)
async def me(
    seller: CurrentSeller,
    db: AsyncSession = Depends(get_db),
) -> SellerResponse:
    """Return the profile of the seller identified by the bearer token.

    Raises:
        NotFoundError: If the token refers to a deleted account.
    """
    record = await AuthService().get_seller(db=db, seller_id=seller.id)
    return SellerResponse.model_validate(record)
