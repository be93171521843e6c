"""
Unit tests for the Cognito identity provider adapter.

Uses botocore's Stubber so every Cognito call is checked against the
real service model without network access.
"""

import base64
import hashlib
import hmac
import logging
from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any

import boto3
import pytest
from botocore.stub import Stubber

from src.adapters.cognito import CognitoIdentityProvider, secret_hash
from src.config.settings import Settings
from src.domain.entities import Account, CredentialGrant
from src.domain.exceptions import ProviderError
from src.domain.ports import IdentityProvider, ProviderErrorCode

POOL_ID = "us-east-1_TestPool"
CLIENT_ID = "test-client-id"
CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def client() -> Any:
    """Real boto3 Cognito client with dummy credentials."""
    return boto3.client(
        "cognito-idp",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(client: Any) -> Generator[Stubber, None, None]:
    """Activated stubber that asserts all queued responses were used."""
    with Stubber(client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def provider(client: Any) -> CognitoIdentityProvider:
    """Adapter for an app client without a secret."""
    return CognitoIdentityProvider(client=client, user_pool_id=POOL_ID, client_id=CLIENT_ID)


def queue_create_user(stubber: Stubber, user: dict[str, Any]) -> None:
    """Queue the three admin calls of a successful account creation."""
    stubber.add_response(
        "admin_create_user",
        {"User": user},
        {
            "UserPoolId": POOL_ID,
            "Username": "john@example.com",
            "UserAttributes": [
                {"Name": "email", "Value": "john@example.com"},
                {"Name": "name", "Value": "John Doe"},
                {"Name": "email_verified", "Value": "true"},
            ],
            "MessageAction": "SUPPRESS",
            "TemporaryPassword": "SecurePass123!",
        },
    )
    stubber.add_response(
        "admin_set_user_password",
        {},
        {
            "UserPoolId": POOL_ID,
            "Username": "john@example.com",
            "Password": "SecurePass123!",
            "Permanent": True,
        },
    )
    stubber.add_response(
        "admin_update_user_attributes",
        {},
        {
            "UserPoolId": POOL_ID,
            "Username": "john@example.com",
            "UserAttributes": [{"Name": "email_verified", "Value": "true"}],
        },
    )


class TestProtocol:
    """Tests for IdentityProvider protocol compliance."""

    def test_implements_identity_provider_protocol(self, provider: CognitoIdentityProvider) -> None:
        """CognitoIdentityProvider satisfies the IdentityProvider protocol."""

        def accepts_identity_provider(p: IdentityProvider) -> None:
            pass

        accepts_identity_provider(provider)

    def test_no_explicit_inheritance(self) -> None:
        """CognitoIdentityProvider uses structural subtyping, not inheritance."""
        assert CognitoIdentityProvider.__bases__ == (object,)

    def test_from_settings(self, client: Any) -> None:
        """Adapter is configured from Settings."""
        settings = Settings(
            aws_region="eu-west-1",
            cognito_user_pool_id=POOL_ID,
            cognito_client_id=CLIENT_ID,
            cognito_client_secret="secret",
        )

        provider = CognitoIdentityProvider.from_settings(settings, client=client)

        assert provider._user_pool_id == POOL_ID
        assert provider._client_id == CLIENT_ID
        assert provider._client_secret == "secret"
        assert provider._client is client


class TestSecretHash:
    """Tests for SECRET_HASH computation."""

    def test_secret_hash_matches_hmac(self) -> None:
        """SECRET_HASH is base64(HMAC-SHA256(secret, username + client id))."""
        expected = base64.b64encode(
            hmac.new(b"secret", b"john@example.comclient", hashlib.sha256).digest()
        ).decode()

        assert secret_hash("john@example.com", "client", "secret") == expected


class TestCreateAccount:
    """Tests for create_account."""

    def test_create_account_returns_account(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """Account uses the sub attribute and creation date from Cognito."""
        queue_create_user(
            stubber,
            {
                "Username": "john@example.com",
                "Attributes": [{"Name": "sub", "Value": "sub-1"}],
                "UserCreateDate": CREATED_AT,
            },
        )

        account = provider.create_account("john@example.com", "SecurePass123!", "John Doe")

        assert account == Account(
            id="sub-1",
            email="john@example.com",
            name="John Doe",
            created_at=CREATED_AT,
            is_email_verified=True,
        )

    def test_create_account_falls_back_to_username(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """Without a sub attribute the Cognito username is the id."""
        queue_create_user(stubber, {"Username": "generated-username"})

        account = provider.create_account("john@example.com", "SecurePass123!", "John Doe")

        assert account.id == "generated-username"
        assert account.created_at.tzinfo is not None

    def test_create_account_duplicate(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """UsernameExistsException becomes a ProviderError."""
        stubber.add_client_error(
            "admin_create_user",
            service_error_code="UsernameExistsException",
            service_message="User account already exists",
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.create_account("john@example.com", "SecurePass123!", "John Doe")

        assert exc_info.value.code is ProviderErrorCode.USERNAME_EXISTS
        assert exc_info.value.message == "User account already exists"

    def test_create_account_weak_password_on_set_password(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """Failures in the follow-up calls are reported too."""
        stubber.add_response("admin_create_user", {"User": {"Username": "john@example.com"}})
        stubber.add_client_error(
            "admin_set_user_password",
            service_error_code="InvalidPasswordException",
            service_message="Password did not conform with policy",
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.create_account("john@example.com", "SecurePass123!", "John Doe")

        assert exc_info.value.code is ProviderErrorCode.INVALID_PASSWORD

    def test_create_account_logs_failure(
        self,
        provider: CognitoIdentityProvider,
        stubber: Stubber,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Provider failures are logged at WARNING without the password."""
        stubber.add_client_error(
            "admin_create_user",
            service_error_code="UsernameExistsException",
            service_message="User account already exists",
        )

        with caplog.at_level(logging.WARNING), pytest.raises(ProviderError):
            provider.create_account("john@example.com", "SecurePass123!", "John Doe")

        assert "UsernameExistsException" in caplog.text
        assert "SecurePass123!" not in caplog.text


class TestAuthenticate:
    """Tests for authenticate."""

    def test_authenticate_returns_grant(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """AuthenticationResult is mapped onto a CredentialGrant."""
        stubber.add_response(
            "admin_initiate_auth",
            {
                "AuthenticationResult": {
                    "AccessToken": "access",
                    "RefreshToken": "refresh",
                    "IdToken": "id",
                    "ExpiresIn": 3600,
                    "TokenType": "Bearer",
                }
            },
            {
                "UserPoolId": POOL_ID,
                "ClientId": CLIENT_ID,
                "AuthFlow": "ADMIN_USER_PASSWORD_AUTH",
                "AuthParameters": {"USERNAME": "john@example.com", "PASSWORD": "SecurePass123!"},
            },
        )

        grant = provider.authenticate("john@example.com", "SecurePass123!")

        assert grant == CredentialGrant("access", "refresh", "id", 3600, "Bearer")

    def test_authenticate_sends_secret_hash(self, client: Any, stubber: Stubber) -> None:
        """SECRET_HASH is sent when the app client has a secret."""
        provider = CognitoIdentityProvider(
            client=client, user_pool_id=POOL_ID, client_id=CLIENT_ID, client_secret="secret"
        )
        stubber.add_response(
            "admin_initiate_auth",
            {"AuthenticationResult": {"AccessToken": "access", "ExpiresIn": 3600}},
            {
                "UserPoolId": POOL_ID,
                "ClientId": CLIENT_ID,
                "AuthFlow": "ADMIN_USER_PASSWORD_AUTH",
                "AuthParameters": {
                    "USERNAME": "john@example.com",
                    "PASSWORD": "SecurePass123!",
                    "SECRET_HASH": secret_hash("john@example.com", CLIENT_ID, "secret"),
                },
            },
        )

        grant = provider.authenticate("john@example.com", "SecurePass123!")

        assert grant is not None
        assert grant.token_type == "Bearer"

    def test_authenticate_challenge_returns_none(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """A challenge response carries no credentials."""
        stubber.add_response(
            "admin_initiate_auth",
            {"ChallengeName": "NEW_PASSWORD_REQUIRED", "Session": "s" * 20},
        )

        assert provider.authenticate("john@example.com", "SecurePass123!") is None

    def test_authenticate_bad_credentials(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """NotAuthorizedException becomes a ProviderError."""
        stubber.add_client_error(
            "admin_initiate_auth",
            service_error_code="NotAuthorizedException",
            service_message="Incorrect username or password.",
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.authenticate("john@example.com", "WrongPass123!")

        assert exc_info.value.code is ProviderErrorCode.NOT_AUTHORIZED


class TestFindBySubject:
    """Tests for find_by_subject."""

    def test_find_by_subject_returns_account(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """Matching user attributes are mapped onto an Account."""
        stubber.add_response(
            "list_users",
            {
                "Users": [
                    {
                        "Username": "john@example.com",
                        "Attributes": [
                            {"Name": "sub", "Value": "sub-1"},
                            {"Name": "email", "Value": "john@example.com"},
                            {"Name": "name", "Value": "John Doe"},
                            {"Name": "email_verified", "Value": "false"},
                        ],
                        "UserCreateDate": CREATED_AT,
                    }
                ]
            },
            {"UserPoolId": POOL_ID, "Filter": 'sub = "sub-1"', "Limit": 1},
        )

        account = provider.find_by_subject("sub-1")

        assert account == Account(
            id="sub-1",
            email="john@example.com",
            name="John Doe",
            created_at=CREATED_AT,
            is_email_verified=False,
        )

    def test_find_by_subject_no_match(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """An empty user list means no account."""
        stubber.add_response("list_users", {"Users": []})

        assert provider.find_by_subject("sub-1") is None

    def test_find_by_subject_user_not_found(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """UserNotFoundException is swallowed into an empty result."""
        stubber.add_client_error("list_users", service_error_code="UserNotFoundException")

        assert provider.find_by_subject("sub-1") is None

    def test_find_by_subject_other_error(
        self, provider: CognitoIdentityProvider, stubber: Stubber
    ) -> None:
        """Other failures are raised as ProviderError."""
        stubber.add_client_error(
            "list_users",
            service_error_code="ResourceNotFoundException",
            service_message="User pool does not exist.",
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.find_by_subject("sub-1")

        assert exc_info.value.code is ProviderErrorCode.RESOURCE_NOT_FOUND
