"""
Tally-related Pydantic schemas.
"""
from typing import Optional, List
from pydantic import BaseModel, Field


class CandidateResult(BaseModel):
    """Result for a single candidate."""

    candidate_id: int = Field(..., description="Candidate ID")
    party: Optional[str] = Field(None, description="Party name, absent if no party matches")
    party_code: str = Field(..., description="Party code")
    name: str = Field(..., description="Candidate name")
    vote_count: int = Field(..., description="Number of votes received")


class TallyResultResponse(BaseModel):
    """Complete results of an ended election."""

    election_id: int = Field(..., description="Election ID")
    election_name: str = Field(..., description="Election name")
    status: str = Field(..., description="Election status")
    total_votes: int = Field(..., description="Total votes cast")
    candidates: List[CandidateResult] = Field(..., description="Results by candidate, highest first")
