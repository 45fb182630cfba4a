"""
API v1 router configuration.
"""
from fastapi import APIRouter

from evoting.api.v1.endpoints import auth, elections, roster, voters, votes, tally


api_router = APIRouter()

api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"]
)

api_router.include_router(
    elections.router,
    prefix="/elections",
    tags=["Elections"]
)

api_router.include_router(
    roster.router,
    tags=["Roster"]
)

api_router.include_router(
    voters.router,
    prefix="/voters",
    tags=["Voters"]
)

api_router.include_router(
    votes.router,
    prefix="/votes",
    tags=["Voting"]
)

api_router.include_router(
    tally.router,
    prefix="/tally",
    tags=["Tally"]
)
