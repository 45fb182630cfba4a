"""
Authentication-related Pydantic schemas.
"""
from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    """Admin login credentials."""

    admin_id: str = Field(..., description="Admin identifier")
    password: str = Field(..., description="Admin password")


class ChangeCredentialsRequest(BaseModel):
    """Request to change the admin password."""

    admin_id: str = Field(..., description="Admin identifier")
    old_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="Replacement password")


class TokenResponse(BaseModel):
    """Response containing an access token."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration in seconds")
