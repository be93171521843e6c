"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation rules, error translation and use
cases of the account service. It defines its own port interface for the
identity provider, ensuring true hexagonal architecture decoupling.
"""

from .accounts import Authenticate, CreateAccount, GetEmailBySubject
from .entities import Account, CredentialGrant, LoginRequest, RegistrationRequest
from .exceptions import (
    AccountNotFound,
    AuthenticationFailed,
    AuthError,
    IdentityProviderError,
    InvalidRequest,
    ProviderError,
)
from .ports import IdentityProvider, ProviderErrorCode
from .translation import translate

__all__ = [
    "Account",
    "AccountNotFound",
    "Authenticate",
    "AuthenticationFailed",
    "AuthError",
    "CreateAccount",
    "CredentialGrant",
    "GetEmailBySubject",
    "IdentityProvider",
    "IdentityProviderError",
    "InvalidRequest",
    "LoginRequest",
    "ProviderError",
    "ProviderErrorCode",
    "RegistrationRequest",
    "translate",
]
