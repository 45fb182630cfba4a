"""
Voter registration Pydantic schemas.
"""
from typing import Optional
from pydantic import BaseModel, Field


class VoterRegisterRequest(BaseModel):
    """Request to register a voter."""

    name: str = Field(..., max_length=200, description="Voter's full name")
    father_name: Optional[str] = Field(None, max_length=200, description="Father's name")
    cnic: str = Field(
        ...,
        description="National identifier, 13 digits with or without hyphens"
    )
    address: Optional[str] = Field(None, max_length=500, description="Postal address")
    profile_pic_name: Optional[str] = Field(None, max_length=500, description="Stored profile picture reference")


class VoterLoginRequest(BaseModel):
    """Request to log in as a voter."""

    cnic: str = Field(..., description="National identifier")


class VoterResponse(BaseModel):
    """Normalised CNIC of a registered voter."""

    cnic: str = Field(..., description="CNIC in grouped 12345-1234567-1 form")
