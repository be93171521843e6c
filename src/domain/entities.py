"""
Domain entities - Accounts, credential grants and request payloads.

Plain dataclasses with no framework dependencies.
"""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_TOKEN_TYPE = "Bearer"


@dataclass(frozen=True)
class Account:
    """Identity provider account, immutable once created."""

    id: str
    email: str
    name: str
    created_at: datetime
    is_email_verified: bool = True


@dataclass(frozen=True)
class CredentialGrant:
    """Tokens issued on a successful authentication. Never persisted."""

    access_token: str
    refresh_token: str
    id_token: str
    expires_in: int
    token_type: str = DEFAULT_TOKEN_TYPE

    def __post_init__(self) -> None:
        if not self.token_type:
            object.__setattr__(self, "token_type", DEFAULT_TOKEN_TYPE)


@dataclass(frozen=True)
class RegistrationRequest:
    """Registration input. Fields may be missing until validated."""

    email: str | None = None
    password: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class LoginRequest:
    """Login input. Fields may be missing until validated."""

    email: str | None = None
    password: str | None = None
