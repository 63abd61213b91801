"""
Admin Routes

POST /admin/login - Login and get JWT token (5 attempts / 15 min)
POST /admin/register - Create the first admin account
PUT /admin/reset-password - Reset an admin's password
GET /admin/me - Get current admin info
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pymongo.errors import DuplicateKeyError

from app.core.auth import (
    create_access_token,
    get_current_admin,
    password_needs_rehash,
    verify_password,
)
from app.core.rate_limit import LOGIN_LIMIT, MODERATE_LIMIT, limiter
from app.schemas.schemas import (
    AdminUserOut, LoginRequest, MessageResponse, RegisterRequest, ResetPasswordRequest, TokenResponse
)
from app.services.mongo_service import AdminUserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

# Same delay for unknown user and wrong password
FAILED_LOGIN_DELAY = 0.1


def _token_response(admin: dict) -> TokenResponse:
    admin_id = str(admin["_id"])
    return TokenResponse(
        token=create_access_token(admin_id),
        user=AdminUserOut(id=admin_id, username=admin["username"], email=admin["email"]),
    )


@router.post("/login", response_model=TokenResponse)
@limiter.limit(LOGIN_LIMIT)
async def login(request: Request, data: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    if not data.username.strip() or not data.password.strip():
        raise HTTPException(status_code=400, detail="Please provide username and password")

    if len(data.username) > 100 or len(data.password) > 200:
        raise HTTPException(status_code=400, detail="Invalid input length")

    service = AdminUserService()
    admin = service.get_by_username(data.username)

    if not admin or not verify_password(data.password, admin.get("password", "")):
        await asyncio.sleep(FAILED_LOGIN_DELAY)
        logger.warning("Failed admin login for %r", data.username.strip().lower())
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if password_needs_rehash(admin["password"]):
        service.set_password(admin["_id"], data.password)
        logger.info("Upgraded password hash for admin %s", admin["username"])

    return _token_response(admin)


@router.post("/register", response_model=TokenResponse, status_code=201)
@limiter.limit(MODERATE_LIMIT)
async def register(request: Request, data: RegisterRequest):
    """
    Create the admin account.

    Only allowed while no admin exists; after that registration is closed.
    """
    service = AdminUserService()

    if service.count() > 0:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin registration is disabled. An admin account already exists.",
        )

    if service.find_existing(data.username, data.email):
        raise HTTPException(status_code=400, detail="Admin user already exists")

    try:
        admin = service.create(data.username, data.email, data.password)
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Admin user already exists")

    logger.info("Registered admin %s", admin["username"])
    return _token_response(admin)


@router.put("/reset-password", response_model=MessageResponse)
@limiter.limit(MODERATE_LIMIT)
async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    admin: dict = Depends(get_current_admin),
):
    """Reset an admin's password. The new hash is read back and verified."""
    if not data.username or not data.new_password:
        raise HTTPException(status_code=400, detail="Please provide username and new password")

    if len(data.new_password) < 6:
        raise HTTPException(status_code=400, detail="Password must be at least 6 characters long")

    service = AdminUserService()
    target = service.get_by_username(data.username)
    if not target:
        raise HTTPException(status_code=404, detail="Admin user not found")

    service.set_password(target["_id"], data.new_password)

    saved = service.get_by_id(str(target["_id"]))
    if not saved or not verify_password(data.new_password, saved["password"]):
        logger.error("Password was not saved correctly after reset for %s", target["username"])
        raise HTTPException(status_code=500, detail="Password reset failed. Please try again.")

    logger.info("Admin %s reset the password of %s", admin["username"], target["username"])
    return MessageResponse(message="Password reset successfully")


@router.get("/me")
async def get_me(admin: dict = Depends(get_current_admin)):
    """Get current authenticated admin's info."""
    return {"success": True, "data": admin}
