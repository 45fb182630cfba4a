"""
Admin authentication API endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.services.auth_service import AuthService
from evoting.schemas.auth import (
    AdminLoginRequest,
    ChangeCredentialsRequest,
    TokenResponse,
)
from evoting.schemas.election import OkResponse


router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def admin_login(
    request: AdminLoginRequest,
    db: AsyncSession = Depends(get_db)
) -> TokenResponse:
    """
    Log in as admin and get an access token.
    """
    auth_service = AuthService(db)
    token, expires_in = await auth_service.login(request.admin_id, request.password)

    return TokenResponse(
        access_token=token,
        token_type="bearer",
        expires_in=expires_in
    )


@router.post("/change-credentials", response_model=OkResponse)
async def change_credentials(
    request: ChangeCredentialsRequest,
    db: AsyncSession = Depends(get_db)
) -> OkResponse:
    """
    Change the admin password. The old password must verify.
    """
    auth_service = AuthService(db)
    await auth_service.change_credentials(
        admin_id=request.admin_id,
        old_password=request.old_password,
        new_password=request.new_password
    )
    return OkResponse(message="Credentials updated")
