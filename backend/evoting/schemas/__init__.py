"""
Pydantic schemas for request/response validation.
"""
from evoting.schemas.auth import (
    AdminLoginRequest,
    ChangeCredentialsRequest,
    TokenResponse,
)
from evoting.schemas.election import (
    ElectionCreate,
    ElectionUpdate,
    ElectionResponse,
    ElectionListResponse,
    PartyCreate,
    PartyResponse,
    CandidateCreate,
    CandidateResponse,
    RosterResponse,
    CreatedResponse,
    OkResponse,
)
from evoting.schemas.voter import (
    VoterRegisterRequest,
    VoterLoginRequest,
    VoterResponse,
)
from evoting.schemas.vote import (
    VoteCastRequest,
    VoteCastResponse,
    VoteStatusResponse,
)
from evoting.schemas.tally import (
    CandidateResult,
    TallyResultResponse,
)

__all__ = [
    # Auth
    "AdminLoginRequest",
    "ChangeCredentialsRequest",
    "TokenResponse",
    # Election and roster
    "ElectionCreate",
    "ElectionUpdate",
    "ElectionResponse",
    "ElectionListResponse",
    "PartyCreate",
    "PartyResponse",
    "CandidateCreate",
    "CandidateResponse",
    "RosterResponse",
    "CreatedResponse",
    "OkResponse",
    # Voter
    "VoterRegisterRequest",
    "VoterLoginRequest",
    "VoterResponse",
    # Vote
    "VoteCastRequest",
    "VoteCastResponse",
    "VoteStatusResponse",
    # Tally
    "CandidateResult",
    "TallyResultResponse",
]
