"""
Account use cases - Create account, authenticate, look up email.

Each use case follows the same single-shot flow:

    validate -> call identity provider once -> return domain value
                                            -> or translate and raise

No retries happen at this layer and no state is held between calls.
Provider failures arrive as ProviderError and leave as
IdentityProviderError carrying the translated domain message.

Note: GetEmailBySubject treats provider "not found" conditions as an
empty result, while CreateAccount and Authenticate raise on them.
"""

from dataclasses import dataclass, replace

from .entities import Account, CredentialGrant, LoginRequest, RegistrationRequest
from .exceptions import (
    AccountNotFound,
    AuthenticationFailed,
    IdentityProviderError,
    ProviderError,
)
from .ports import IdentityProvider, ProviderErrorCode
from .translation import ACCOUNT_NOT_FOUND, AUTHENTICATION_FAILED, translate
from .validation import validate_login, validate_registration, validate_subject

# Provider codes that a lookup reports as "no such account"
LOOKUP_NOT_FOUND_CODES = frozenset(
    {ProviderErrorCode.USER_NOT_FOUND, ProviderErrorCode.RESOURCE_NOT_FOUND}
)


@dataclass
class CreateAccount:
    """Register a new, already-verified account with the identity provider."""

    identity_provider: IdentityProvider

    def execute(self, request: RegistrationRequest) -> Account:
        """
        Validate the request and create the account.

        Returns:
            The created Account with is_email_verified forced to True

        Raises:
            InvalidRequest: If the request fails validation
            IdentityProviderError: If the provider rejects the request
        """
        validate_registration(request)
        try:
            account = self.identity_provider.create_account(
                request.email, request.password, request.name
            )
        except ProviderError as exc:
            raise IdentityProviderError(translate(exc)) from exc
        return replace(account, is_email_verified=True)


@dataclass
class Authenticate:
    """Exchange email and password for a credential grant."""

    identity_provider: IdentityProvider

    def execute(self, request: LoginRequest) -> CredentialGrant:
        """
        Validate the request and authenticate against the provider.

        Raises:
            InvalidRequest: If the request fails validation
            AuthenticationFailed: If the provider returned no credentials
            IdentityProviderError: If the provider rejects the request
        """
        validate_login(request)
        try:
            grant = self.identity_provider.authenticate(request.email, request.password)
        except ProviderError as exc:
            raise IdentityProviderError(translate(exc)) from exc
        if grant is None:
            raise AuthenticationFailed(AUTHENTICATION_FAILED)
        return grant


@dataclass
class GetEmailBySubject:
    """Resolve an account's email from its provider subject identifier."""

    identity_provider: IdentityProvider

    def execute(self, subject: str | None) -> str:
        """
        Look up the email of the account identified by subject.

        Raises:
            InvalidRequest: If subject is missing or empty
            AccountNotFound: If no account matches the subject
            IdentityProviderError: If the provider rejects the request
        """
        validate_subject(subject)
        account = self._find(subject)
        if account is None:
            raise AccountNotFound(ACCOUNT_NOT_FOUND)
        return account.email

    def _find(self, subject: str) -> Account | None:
        try:
            return self.identity_provider.find_by_subject(subject)
        except ProviderError as exc:
            if exc.code in LOOKUP_NOT_FOUND_CODES:
                return None
            raise IdentityProviderError(translate(exc)) from exc
