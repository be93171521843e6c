"""
Domain exceptions - Semantic error types for account operations.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
The message of every AuthError is the stable domain message that
callers see.
"""

from .ports import ProviderErrorCode


class AuthError(Exception):
    """Base class for account domain errors."""

    pass


class InvalidRequest(AuthError):
    """Input failed shape validation before reaching the identity provider."""

    pass


class IdentityProviderError(AuthError):
    """Identity provider rejected the request (translated message)."""

    pass


class AccountNotFound(IdentityProviderError):
    """No account exists for the requested subject."""

    pass


class AuthenticationFailed(AuthError):
    """Identity provider returned no credential payload."""

    pass


class ProviderError(Exception):
    """
    Failure reported by an identity provider adapter.

    Raised only by gateway adapters. The use cases switch on ``code``
    and never inspect the raw provider payload.

    Attributes:
        code: Known provider error code, or UNKNOWN
        raw_code: Code exactly as reported by the provider
        message: Provider supplied message (may be empty)
    """

    def __init__(self, raw_code: str, message: str = "") -> None:
        super().__init__(message or raw_code)
        self.code = ProviderErrorCode.from_raw(raw_code)
        self.raw_code = raw_code
        self.message = message
