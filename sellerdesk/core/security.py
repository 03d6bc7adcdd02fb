"""Bearer-token authentication and password hashing.

Tokens are HS256 JWTs whose ``sub`` claim is the seller id. The id extracted
here is the only thing that scopes store queries; handlers never accept an
owner id from the request body.
"""

from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from sellerdesk.core.config import get_settings
from sellerdesk.core.exceptions import AuthenticationError
from sellerdesk.core.logging import get_logger, seller_id_ctx

logger = get_logger(__name__)

# auto_error=False so a missing header reaches our own 401 instead of FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


class TokenSeller(BaseModel):
    """Seller identity extracted from a verified bearer token."""

    id: int
    email: str
    role: str = "seller"


# =============================================================================
# Passwords
# =============================================================================


def hash_password(password: str) -> str:
    """Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password (at most 72 bytes once UTF-8 encoded).

    Returns:
        bcrypt hash as text.
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


# =============================================================================
# Tokens
# =============================================================================


def create_access_token(
    seller_id: int,
    email: str,
    role: str = "seller",
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    """Issue a signed access token for a seller.

    Args:
        seller_id: Seller primary key, stored as the ``sub`` claim.
        email: Seller email.
        role: Seller role.
        expires_delta: Lifetime override (defaults to settings).
        now: Issue time override, for tests.

    Returns:
        Encoded JWT.
    """
    settings = get_settings()
    issued_at = now or datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.jwt_expire_minutes)
    claims: dict[str, Any] = {
        "sub": str(seller_id),
        "email": email,
        "role": role,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + lifetime).timestamp()),
    }
    token: str = jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return token


def decode_access_token(token: str) -> TokenSeller:
    """Verify a token and return the seller it identifies.

    Args:
        token: Encoded JWT.

    Returns:
        Seller identity from the token claims.

    Raises:
        AuthenticationError: INVALID_TOKEN if the token is malformed, has a bad
            signature, is expired, or lacks a usable subject.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        logger.info("auth.token_expired")
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN") from e
    except JWTError as e:
        logger.info("auth.token_rejected", reason=str(e))
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN") from e

    subject = payload.get("sub")
    email = payload.get("email")
    if not subject or not str(subject).isdigit() or not email:
        logger.info("auth.token_missing_claims")
        raise AuthenticationError("Invalid token", code="INVALID_TOKEN")

    return TokenSeller(id=int(subject), email=email, role=payload.get("role", "seller"))


# =============================================================================
# Dependencies
# =============================================================================


async def get_current_seller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenSeller:
    """Dependency that resolves the calling seller from the Authorization header.

    Raises:
        AuthenticationError: UNAUTHORIZED when no bearer token is sent,
            INVALID_TOKEN when it fails verification.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided", code="UNAUTHORIZED")

    seller = decode_access_token(credentials.credentials)
    seller_id_ctx.set(seller.id)
    return seller


CurrentSeller = Annotated[TokenSeller, Depends(get_current_seller)]
