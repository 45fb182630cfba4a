"""
Authentication service for the shared admin credential.
"""
from datetime import timedelta
from typing import Optional, Tuple

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import func, select

from evoting.core.config import settings
from evoting.core.exceptions import UnauthorizedError, ValidationError
from evoting.core.security import create_access_token, decode_token, hash_password, verify_password
from evoting.models.admin import Admin


class AuthService:
    """Service for admin authentication operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_admin(self, admin_id: str) -> Optional[Admin]:
        return await self.db.get(Admin, admin_id)

    async def _authenticate(self, admin_id: str, password: str) -> Optional[Admin]:
        admin = await self.get_admin(admin_id)
        if not admin or not verify_password(password, admin.password_hash):
            return None
        return admin

    async def login(self, admin_id: str, password: str) -> Tuple[str, int]:
        """
        Verify admin credentials and issue an access token.

        Returns:
            Tuple of (access_token, expires_in_seconds)
        """
        admin = await self._authenticate(admin_id, password)
        if not admin:
            logger.warning("Failed admin login for '{}'", admin_id)
            raise UnauthorizedError("Invalid credentials")

        expires_in = settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60
        token = create_access_token(
            {"sub": admin.admin_id, "role": "admin"},
            expires_delta=timedelta(seconds=expires_in)
        )

        logger.info("Admin '{}' logged in", admin.admin_id)
        return token, expires_in

    async def change_credentials(
        self,
        admin_id: str,
        old_password: str,
        new_password: str
    ) -> Admin:
        """Replace the admin password after verifying the old one."""
        admin = await self._authenticate(admin_id, old_password)
        if not admin:
            logger.warning("Credential change rejected for '{}'", admin_id)
            raise UnauthorizedError("Invalid old password")

        if not new_password:
            raise ValidationError("New password is required")

        admin.password_hash = hash_password(new_password)
        await self.db.commit()

        logger.info("Admin '{}' changed credentials", admin.admin_id)
        return admin

    async def get_admin_from_token(self, token: str) -> Optional[Admin]:
        """Resolve a bearer token to an existing admin, or None."""
        payload = decode_token(token)
        if not payload or payload.get("type") != "access":
            return None

        admin_id = payload.get("sub")
        if not admin_id:
            return None

        return await self.get_admin(admin_id)

    async def ensure_default_admin(self) -> None:
        """Seed the configured admin when no admin exists yet."""
        result = await self.db.execute(select(func.count()).select_from(Admin))
        if result.scalar_one() > 0:
            return

        self.db.add(Admin(
            admin_id=settings.DEFAULT_ADMIN_ID,
            password_hash=hash_password(settings.DEFAULT_ADMIN_PASSWORD),
        ))
        await self.db.commit()
        logger.info("Seeded default admin '{}'", settings.DEFAULT_ADMIN_ID)
