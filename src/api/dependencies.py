"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the identity provider adapter and the account use cases into routes.
"""

from fastapi import Depends, Request

from src.domain.accounts import Authenticate, CreateAccount, GetEmailBySubject
from src.domain.ports import IdentityProvider


def get_identity_provider(request: Request) -> IdentityProvider:
    """
    Get identity provider from app state.

    The provider is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.identity_provider


def get_create_account(
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> CreateAccount:
    """Create the account registration use case."""
    return CreateAccount(identity_provider=identity_provider)


def get_authenticate(
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> Authenticate:
    """Create the login use case."""
    return Authenticate(identity_provider=identity_provider)


def get_email_by_subject(
    identity_provider: IdentityProvider = Depends(get_identity_provider),
) -> GetEmailBySubject:
    """Create the email lookup use case."""
    return GetEmailBySubject(identity_provider=identity_provider)
