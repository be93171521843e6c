"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request fields are optional at this layer so that missing values reach the
domain validators and produce their exact error messages. Unknown fields
are rejected with 422. Responses are
serialized with camelCase aliases.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.entities import Account, CredentialGrant, LoginRequest, RegistrationRequest


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestBody(BaseModel):
    """Base model for request bodies; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class RegisterBody(RequestBody):
    """Request model for account registration."""

    email: str | None = Field(None, examples=["user@example.com"])
    password: str | None = Field(None, description="Password (8 to 128 characters)")
    name: str | None = Field(None, description="Display name (min 2 characters)")

    def to_domain(self) -> RegistrationRequest:
        return RegistrationRequest(email=self.email, password=self.password, name=self.name)


class LoginBody(RequestBody):
    """Request model for login."""

    email: str | None = Field(None, examples=["user@example.com"])
    password: str | None = None

    def to_domain(self) -> LoginRequest:
        return LoginRequest(email=self.email, password=self.password)


class AccountResponse(CamelModel):
    """Response model for a created account."""

    id: str
    email: str
    name: str
    created_at: datetime
    is_email_verified: bool

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            email=account.email,
            name=account.name,
            created_at=account.created_at,
            is_email_verified=account.is_email_verified,
        )


class CredentialGrantResponse(CamelModel):
    """Response model for a successful login."""

    access_token: str
    refresh_token: str
    id_token: str
    expires_in: int = Field(..., description="Token lifetime in seconds")
    token_type: str = "Bearer"

    @classmethod
    def from_grant(cls, grant: CredentialGrant) -> "CredentialGrantResponse":
        return cls(
            access_token=grant.access_token,
            refresh_token=grant.refresh_token,
            id_token=grant.id_token,
            expires_in=grant.expires_in,
            token_type=grant.token_type,
        )


class EmailResponse(BaseModel):
    """Response model for an email lookup."""

    success: bool = True
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
