"""
Election and roster Pydantic schemas.
"""
from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class ElectionCreate(BaseModel):
    """Schema for creating an election."""

    name: str = Field(..., max_length=200, description="Election name")


class ElectionUpdate(BaseModel):
    """Schema for renaming an election."""

    name: str = Field(..., max_length=200, description="New election name")


class ElectionResponse(BaseModel):
    """Schema for a single election."""

    id: int
    name: str
    status: str
    created_at: datetime
    started_at: Optional[datetime]
    ended_at: Optional[datetime]

    class Config:
        from_attributes = True


class ElectionListResponse(ElectionResponse):
    """Schema for election list entries, with roster and vote counts."""

    party_count: int = 0
    candidate_count: int = 0
    vote_count: int = 0


class PartyCreate(BaseModel):
    """Schema for adding a party to an election."""

    party_code: str = Field(..., max_length=50, description="Short party code, e.g. P1")
    name: str = Field(..., max_length=200, description="Party name")
    symbol_path: Optional[str] = Field(None, max_length=500, description="Stored symbol asset reference")


class PartyResponse(BaseModel):
    """Schema for a roster party."""

    id: int
    election_id: int
    party_code: str
    name: str
    symbol_path: Optional[str]

    class Config:
        from_attributes = True


class CandidateCreate(BaseModel):
    """Schema for adding a candidate to an election."""

    party_code: str = Field(..., max_length=50, description="Code of the candidate's party")
    name: str = Field(..., max_length=200, description="Candidate name")
    photo_path: Optional[str] = Field(None, max_length=500, description="Stored photo asset reference")


class CandidateResponse(BaseModel):
    """Schema for a roster candidate."""

    id: int
    election_id: int
    party_code: str
    name: str
    photo_path: Optional[str]

    class Config:
        from_attributes = True


class RosterResponse(BaseModel):
    """Active parties and candidates of an election."""

    election_id: int
    parties: List[PartyResponse]
    candidates: List[CandidateResponse]


class CreatedResponse(BaseModel):
    """Identifier of a newly created row."""

    id: int


class OkResponse(BaseModel):
    """Acknowledgement for operations without a payload."""

    ok: bool = True
    message: Optional[str] = None
