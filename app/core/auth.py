"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing (pbkdf2_sha256; bcrypt hashes from older databases still verify)
- JWT token creation/verification
- FastAPI dependency for admin-only routes
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings

# Password hashing. New hashes use the first scheme; bcrypt is accepted for
# verification and flagged for upgrade on the next successful login.
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")

# Bearer token extractor. auto_error is off so a missing header gets our own 401.
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password, leaving values that are already hashes untouched."""
    if is_password_hash(password):
        return password
    return pwd_context.hash(password)


def is_password_hash(value: str) -> bool:
    return bool(value) and pwd_context.identify(value, required=False) is not None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised or malformed hash
        return False


def password_needs_rehash(hashed_password: str) -> bool:
    return pwd_context.needs_update(hashed_password)


def create_access_token(admin_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token carrying the admin's id."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode = {"id": str(admin_id), "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """
    Decode and verify JWT token.

    Raises jose.ExpiredSignatureError for expired tokens and JWTError for
    anything else that fails verification.
    """
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """
    FastAPI dependency - Get current authenticated admin (password removed).

    Usage:
        @router.put("/")
        async def route(admin: dict = Depends(get_current_admin)):
            return admin
    """
    # Imported here to keep app.core free of service-level imports at load time
    from app.services.mongo_service import AdminUserService

    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authorized, no token")

    try:
        payload = decode_token(credentials.credentials)
    except ExpiredSignatureError:
        raise _unauthorized("Token expired. Please login again.")
    except JWTError:
        raise _unauthorized("Not authorized, token failed")

    admin_id = payload.get("id")
    if not admin_id:
        raise _unauthorized("Not authorized, token failed")

    admin = AdminUserService().get_public(admin_id)
    if not admin:
        raise _unauthorized("User not found")

    return admin
