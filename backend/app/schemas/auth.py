"""Auth Schemas — token request/response at the API boundary.

Invariants:
    - apiKey is required and non-empty (presence check only, no trimming)
"""

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Token exchange request carrying the static API key."""
    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(min_length=1, alias="apiKey")


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
