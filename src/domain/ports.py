"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interface (port) that the domain requires
from the identity provider. Adapters implement this protocol.
"""

from enum import Enum
from typing import Protocol

from .entities import Account, CredentialGrant


class ProviderErrorCode(str, Enum):
    """
    Error codes an identity provider adapter may report.

    Values are the Cognito exception names. Any code not listed here
    is reported as UNKNOWN.
    """

    USERNAME_EXISTS = "UsernameExistsException"
    INVALID_PASSWORD = "InvalidPasswordException"
    NOT_AUTHORIZED = "NotAuthorizedException"
    USER_NOT_CONFIRMED = "UserNotConfirmedException"
    USER_NOT_FOUND = "UserNotFoundException"
    TOO_MANY_REQUESTS = "TooManyRequestsException"
    INVALID_PARAMETER = "InvalidParameterException"
    RESOURCE_NOT_FOUND = "ResourceNotFoundException"
    UNKNOWN = "Unknown"

    @classmethod
    def from_raw(cls, raw_code: str | None) -> "ProviderErrorCode":
        """Map a raw provider code onto the closed set of known codes."""
        try:
            return cls(raw_code)
        except ValueError:
            return cls.UNKNOWN


class IdentityProvider(Protocol):
    """Port interface for the external identity provider."""

    def create_account(self, email: str, password: str, name: str) -> Account:
        """
        Create a confirmed account with a permanent password.

        Args:
            email: Account email, also used as the provider username
            password: Permanent password
            name: Display name

        Returns:
            The created Account

        Raises:
            ProviderError: If the provider rejects the request
        """
        ...

    def authenticate(self, email: str, password: str) -> CredentialGrant | None:
        """
        Exchange email and password for a credential grant.

        Returns:
            CredentialGrant, or None when the provider answered without a
            credential payload (e.g. a pending challenge)

        Raises:
            ProviderError: If the provider rejects the request
        """
        ...

    def find_by_subject(self, subject: str) -> Account | None:
        """
        Look up an account by its provider subject identifier.

        Returns:
            The Account, or None if no account matches

        Raises:
            ProviderError: If the provider rejects the request
        """
        ...
