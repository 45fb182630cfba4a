"""
Voter registration service.
"""
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from evoting.core.cnic import normalize_cnic
from evoting.core.exceptions import ConflictError, NotFoundError, ValidationError
from evoting.models.voter import Voter


class VoterService:
    """Service for voter registration and login."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_voter(self, cnic: str) -> Optional[Voter]:
        """Look up a voter by CNIC in either spelling."""
        result = await self.db.execute(
            select(Voter).where(Voter.cnic == normalize_cnic(cnic))
        )
        return result.scalar_one_or_none()

    async def register_voter(
        self,
        name: str,
        cnic: str,
        father_name: Optional[str] = None,
        address: Optional[str] = None,
        profile_pic_name: Optional[str] = None
    ) -> Voter:
        """
        Register a voter.

        Uniqueness is enforced by the ``voters.cnic`` unique index; a
        concurrent duplicate surfaces as an IntegrityError and is reported
        as a conflict.
        """
        if not (name or "").strip():
            raise ValidationError("Name is required")
        normalized = normalize_cnic(cnic)

        voter = Voter(
            cnic=normalized,
            name=name.strip(),
            father_name=father_name,
            address=address,
            profile_pic_name=profile_pic_name,
        )
        self.db.add(voter)

        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Registration rejected, CNIC {} already registered", normalized)
            raise ConflictError("CNIC already registered")

        await self.db.refresh(voter)
        logger.info("Voter {} registered", voter.cnic)
        return voter

    async def login(self, cnic: str) -> Voter:
        """Confirm a voter is registered."""
        voter = await self.get_voter(cnic)
        if not voter:
            raise NotFoundError("CNIC not registered")
        return voter
