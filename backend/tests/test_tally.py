"""
Tests for election results.
"""
import pytest
from httpx import AsyncClient

from evoting.core.exceptions import ForbiddenError, NotFoundError
from evoting.models.election import Candidate, Party
from evoting.models.voter import Voter
from evoting.services.election_service import ElectionService
from evoting.services.roster_service import RosterService
from evoting.services.tally_service import TallyService
from evoting.services.vote_service import VoteService


async def _register(db, count: int) -> list:
    cnics = [f"{10000 + i}-0000000-{i % 10}" for i in range(count)]
    db.add_all([Voter(cnic=c, name=f"Voter {i}") for i, c in enumerate(cnics)])
    await db.commit()
    return cnics


class TestTallyService:
    """Test cases for TallyService."""

    @pytest.mark.asyncio
    async def test_results_before_end_forbidden(self, test_db, test_election, running_election):
        """Test results are withheld for CREATED and RUNNING elections."""
        service = TallyService(test_db)
        with pytest.raises(ForbiddenError):
            await service.get_results(test_election["id"])
        with pytest.raises(ForbiddenError):
            await service.get_results(running_election["id"])

    @pytest.mark.asyncio
    async def test_results_unknown_election(self, test_db):
        """Test results for a missing election."""
        with pytest.raises(NotFoundError):
            await TallyService(test_db).get_results(9999)

    @pytest.mark.asyncio
    async def test_results_counts_and_order(self, test_db, running_election):
        """Test every active candidate appears once, highest count first."""
        election_id = running_election["id"]
        ann_id = running_election["candidates"]["Ann"]
        bob_id = running_election["candidates"]["Bob"]

        votes = VoteService(test_db)
        cnics = await _register(test_db, 3)
        await votes.cast_vote(cnics[0], election_id, "P2", bob_id)
        await votes.cast_vote(cnics[1], election_id, "P2", bob_id)
        await votes.cast_vote(cnics[2], election_id, "P1", ann_id)

        await ElectionService(test_db).stop_election(election_id)
        results = await TallyService(test_db).get_results(election_id)

        assert results["total_votes"] == 3
        assert [(c["party"], c["name"], c["vote_count"]) for c in results["candidates"]] == [
            ("Beta", "Bob", 2),
            ("Alpha", "Ann", 1),
        ]
        assert sum(c["vote_count"] for c in results["candidates"]) == results["total_votes"]

    @pytest.mark.asyncio
    async def test_results_include_zero_vote_candidates(self, test_db, running_election):
        """Test candidates without votes are listed with zero."""
        await ElectionService(test_db).stop_election(running_election["id"])
        results = await TallyService(test_db).get_results(running_election["id"])

        assert {c["name"]: c["vote_count"] for c in results["candidates"]} == {"Ann": 0, "Bob": 0}
        assert results["total_votes"] == 0

    @pytest.mark.asyncio
    async def test_results_candidate_without_party(self, test_db, running_election):
        """Test a candidate with no matching party is listed with no party name."""
        test_db.add(Candidate(election_id=running_election["id"], party_code="ZZ", name="Orphan"))
        await test_db.commit()

        await ElectionService(test_db).stop_election(running_election["id"])
        results = await TallyService(test_db).get_results(running_election["id"])

        orphan = next(c for c in results["candidates"] if c["name"] == "Orphan")
        assert orphan["party"] is None
        assert orphan["vote_count"] == 0

    @pytest.mark.asyncio
    async def test_results_retired_party_keeps_name(self, test_db, running_election):
        """Test a candidate whose party row is retired still shows the party name."""
        test_db.add_all([
            Party(election_id=running_election["id"], party_code="P3", name="Gamma", active=False),
            Candidate(election_id=running_election["id"], party_code="P3", name="Cleo"),
        ])
        await test_db.commit()

        await ElectionService(test_db).stop_election(running_election["id"])
        results = await TallyService(test_db).get_results(running_election["id"])

        cleo = next(c for c in results["candidates"] if c["name"] == "Cleo")
        assert cleo["party"] == "Gamma"
        assert cleo["party_code"] == "P3"

    @pytest.mark.asyncio
    async def test_results_skip_retired_party_candidates(self, test_db, running_election):
        """Test retiring a party drops its candidates from the results."""
        roster = RosterService(test_db)
        parties, _ = await roster.get_roster(running_election["id"])
        beta = next(p for p in parties if p.party_code == "P2")
        await roster.remove_party(beta.id)

        await ElectionService(test_db).stop_election(running_election["id"])
        results = await TallyService(test_db).get_results(running_election["id"])

        assert [c["name"] for c in results["candidates"]] == ["Ann"]

    @pytest.mark.asyncio
    async def test_results_skip_retired_candidates(self, test_db, running_election):
        """Test retired candidates are left out of the results."""
        await RosterService(test_db).remove_candidate(running_election["candidates"]["Bob"])
        await ElectionService(test_db).stop_election(running_election["id"])

        results = await TallyService(test_db).get_results(running_election["id"])
        assert [c["name"] for c in results["candidates"]] == ["Ann"]


class TestTallyEndpoints:
    """Test cases for the results API endpoint."""

    @pytest.mark.asyncio
    async def test_results_forbidden_while_running(self, client: AsyncClient, running_election):
        """Test results are not published while voting is open."""
        response = await client.get(f"/api/v1/tally/{running_election['id']}")

        assert response.status_code == 403
        assert response.json()["code"] == "forbidden"

    @pytest.mark.asyncio
    async def test_results_missing_election(self, client: AsyncClient):
        """Test results of an unknown election."""
        response = await client.get("/api/v1/tally/9999")
        assert response.status_code == 404
