"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Identity provider test doubles
- Sample accounts and credential grants
"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from src.domain.entities import Account, CredentialGrant
from src.domain.ports import IdentityProvider


@pytest.fixture
def identity_provider() -> Mock:
    """Mock identity provider constrained to the port interface."""
    return Mock(spec=IdentityProvider)


@pytest.fixture
def account() -> Account:
    """Account as returned by the identity provider."""
    return Account(
        id="sub-1",
        email="john@example.com",
        name="John Doe",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        is_email_verified=True,
    )


@pytest.fixture
def grant() -> CredentialGrant:
    """Credential grant as returned by the identity provider."""
    return CredentialGrant(
        access_token="access-token",
        refresh_token="refresh-token",
        id_token="id-token",
        expires_in=3600,
        token_type="Bearer",
    )
