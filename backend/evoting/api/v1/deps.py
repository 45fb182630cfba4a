"""
API dependencies for admin authentication.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.core.exceptions import UnauthorizedError
from evoting.models.admin import Admin
from evoting.services.auth_service import AuthService


security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Optional[Admin]:
    """
    Get the admin identified by the bearer token of this request.
    Returns None if no valid token is provided.
    """
    if not credentials:
        return None

    auth_service = AuthService(db)
    return await auth_service.get_admin_from_token(credentials.credentials)


async def require_admin(
    current_admin: Optional[Admin] = Depends(get_current_admin)
) -> Admin:
    """
    Require a valid admin token.
    """
    if not current_admin:
        raise UnauthorizedError("Authentication required")
    return current_admin
