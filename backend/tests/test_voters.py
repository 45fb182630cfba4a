"""
Tests for voter registration and CNIC handling.
"""
import pytest
from httpx import AsyncClient

from evoting.core.cnic import is_valid_cnic, normalize_cnic
from evoting.core.exceptions import ConflictError, NotFoundError, ValidationError
from evoting.services.voter_service import VoterService


class TestCnic:
    """Test cases for CNIC normalisation."""

    @pytest.mark.parametrize("raw", ["1234512345671", "12345-1234567-1", " 12345-1234567-1 "])
    def test_normalize(self, raw):
        """Test both spellings normalise to the grouped form."""
        assert normalize_cnic(raw) == "12345-1234567-1"

    @pytest.mark.parametrize("raw", ["", "123", "12345-12345671", "123451234567a", "12345_1234567_1", "12345123456712"])
    def test_invalid(self, raw):
        """Test malformed identifiers are rejected."""
        assert is_valid_cnic(raw) is False
        with pytest.raises(ValidationError):
            normalize_cnic(raw)


class TestVoterService:
    """Test cases for VoterService."""

    @pytest.mark.asyncio
    async def test_register(self, test_db):
        """Test registration stores the normalised CNIC."""
        voter = await VoterService(test_db).register_voter(
            name="Ayesha Khan",
            cnic="1234512345671",
            father_name="Imran Khan",
            address="House 1, Street 2",
            profile_pic_name="ayesha.png",
        )

        assert voter.cnic == "12345-1234567-1"
        assert voter.profile_pic_name == "ayesha.png"

    @pytest.mark.asyncio
    async def test_register_twice_either_spelling(self, test_db):
        """Test the same identifier cannot register twice in any spelling."""
        service = VoterService(test_db)
        await service.register_voter(name="First", cnic="1234512345671")

        with pytest.raises(ConflictError):
            await service.register_voter(name="Second", cnic="12345-1234567-1")
        with pytest.raises(ConflictError):
            await service.register_voter(name="Third", cnic="1234512345671")

    @pytest.mark.asyncio
    async def test_register_validation(self, test_db):
        """Test required fields."""
        service = VoterService(test_db)
        with pytest.raises(ValidationError):
            await service.register_voter(name="", cnic="1234512345671")
        with pytest.raises(ValidationError):
            await service.register_voter(name="Someone", cnic="12-34")

    @pytest.mark.asyncio
    async def test_login(self, test_db, test_voter):
        """Test login by either spelling."""
        voter = await VoterService(test_db).login("1234512345671")
        assert voter.cnic == test_voter

    @pytest.mark.asyncio
    async def test_login_unregistered(self, test_db):
        """Test login with an unknown CNIC."""
        with pytest.raises(NotFoundError):
            await VoterService(test_db).login("99999-9999999-9")


class TestVoterEndpoints:
    """Test cases for voter API endpoints."""

    @pytest.mark.asyncio
    async def test_register_and_login(self, client: AsyncClient):
        """Test the registration flow."""
        response = await client.post("/api/v1/voters/register", json={
            "name": "Ayesha Khan",
            "father_name": "Imran Khan",
            "cnic": "1234512345671",
            "address": "House 1, Street 2",
        })
        assert response.status_code == 201
        assert response.json() == {"cnic": "12345-1234567-1"}

        response = await client.post("/api/v1/voters/register", json={
            "name": "Impostor",
            "cnic": "12345-1234567-1",
        })
        assert response.status_code == 409

        response = await client.post("/api/v1/voters/login", json={"cnic": "12345-1234567-1"})
        assert response.status_code == 200
        assert response.json()["cnic"] == "12345-1234567-1"

    @pytest.mark.asyncio
    async def test_login_unregistered(self, client: AsyncClient):
        """Test login for an unknown voter."""
        response = await client.post("/api/v1/voters/login", json={"cnic": "1111111111111"})

        assert response.status_code == 404
        assert response.json()["detail"] == "CNIC not registered"

    @pytest.mark.asyncio
    async def test_register_malformed_cnic(self, client: AsyncClient):
        """Test registration with a malformed CNIC."""
        response = await client.post("/api/v1/voters/register", json={
            "name": "Someone",
            "cnic": "12345",
        })

        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"
