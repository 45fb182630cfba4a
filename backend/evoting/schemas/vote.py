"""
Vote-related Pydantic schemas.
"""
from pydantic import BaseModel, Field


class VoteCastRequest(BaseModel):
    """Request to cast a vote."""

    cnic: str = Field(..., description="Voter's national identifier")
    election_id: int = Field(..., description="Election to vote in")
    party_code: str = Field(..., description="Code of the chosen candidate's party")
    candidate_id: int = Field(..., description="Chosen candidate")


class VoteCastResponse(BaseModel):
    """Acknowledgement of a recorded vote. No receipt is issued."""

    ok: bool = True


class VoteStatusResponse(BaseModel):
    """Whether a voter has voted in an election."""

    election_id: int
    has_voted: bool
