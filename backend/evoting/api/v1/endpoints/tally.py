"""
Results API endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from evoting.core.database import get_db
from evoting.services.tally_service import TallyService
from evoting.schemas.tally import CandidateResult, TallyResultResponse


router = APIRouter()


@router.get("/{election_id}", response_model=TallyResultResponse)
async def get_results(
    election_id: int,
    db: AsyncSession = Depends(get_db)
) -> TallyResultResponse:
    """
    Get the results of an ended election.
    Results are withheld (403) until the election has ended.
    """
    tally_service = TallyService(db)
    results = await tally_service.get_results(election_id)

    return TallyResultResponse(
        election_id=results["election_id"],
        election_name=results["election_name"],
        status=results["status"],
        total_votes=results["total_votes"],
        candidates=[CandidateResult(**c) for c in results["candidates"]]
    )
