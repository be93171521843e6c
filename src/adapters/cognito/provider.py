"""
Cognito identity provider adapter - Implements IdentityProvider protocol.

This module provides the AWS Cognito implementation of the domain's
identity provider port using the boto3 ``cognito-idp`` client. Every
botocore ClientError is converted to a domain ProviderError so that
no boto3 types cross into the domain layer.
"""

import base64
import hashlib
import hmac
import logging
from datetime import datetime, timezone
from typing import Any

import boto3
from botocore.exceptions import ClientError

from src.config.settings import Settings
from src.domain.entities import Account, CredentialGrant
from src.domain.exceptions import ProviderError
from src.domain.ports import ProviderErrorCode

logger = logging.getLogger(__name__)

AUTH_FLOW = "ADMIN_USER_PASSWORD_AUTH"


def create_cognito_client(settings: Settings) -> Any:
    """Create the boto3 Cognito client for the configured region."""
    return boto3.client("cognito-idp", region_name=settings.aws_region)


def secret_hash(username: str, client_id: str, client_secret: str) -> str:
    """
    Compute the Cognito SECRET_HASH for an app client with a secret.

    base64(HMAC-SHA256(key=client_secret, msg=username + client_id))
    """
    message = f"{username}{client_id}".encode("utf-8")
    key = client_secret.encode("utf-8")
    digest = hmac.new(key, message, digestmod=hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def _attribute(attributes: list[dict[str, str]], name: str) -> str | None:
    for attribute in attributes:
        if attribute.get("Name") == name:
            return attribute.get("Value")
    return None


def _to_provider_error(error: ClientError) -> ProviderError:
    details = error.response.get("Error", {})
    return ProviderError(details.get("Code", ""), details.get("Message", ""))


class CognitoIdentityProvider:
    """
    Implements IdentityProvider protocol against a Cognito user pool.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The boto3 client is injected so one client is shared per process.
    """

    def __init__(
        self,
        client: Any,
        user_pool_id: str,
        client_id: str,
        client_secret: str | None = None,
    ) -> None:
        self._client = client
        self._user_pool_id = user_pool_id
        self._client_id = client_id
        self._client_secret = client_secret

    @classmethod
    def from_settings(cls, settings: Settings, client: Any = None) -> "CognitoIdentityProvider":
        """Build the adapter from application settings."""
        return cls(
            client=client if client is not None else create_cognito_client(settings),
            user_pool_id=settings.cognito_user_pool_id,
            client_id=settings.cognito_client_id,
            client_secret=settings.cognito_client_secret,
        )

    def create_account(self, email: str, password: str, name: str) -> Account:
        """
        Create a confirmed Cognito user with a permanent password.

        Three admin calls, in order:
        1. AdminCreateUser with the password as temporary password and
           the invitation message suppressed
        2. AdminSetUserPassword to make the password permanent
        3. AdminUpdateUserAttributes to mark the email as verified

        Raises:
            ProviderError: If any Cognito call fails
        """
        logger.debug("Creating Cognito user in pool %s", self._user_pool_id)
        try:
            response = self._client.admin_create_user(
                UserPoolId=self._user_pool_id,
                Username=email,
                UserAttributes=[
                    {"Name": "email", "Value": email},
                    {"Name": "name", "Value": name},
                    {"Name": "email_verified", "Value": "true"},
                ],
                MessageAction="SUPPRESS",
                TemporaryPassword=password,
            )
            self._client.admin_set_user_password(
                UserPoolId=self._user_pool_id,
                Username=email,
                Password=password,
                Permanent=True,
            )
            self._client.admin_update_user_attributes(
                UserPoolId=self._user_pool_id,
                Username=email,
                UserAttributes=[{"Name": "email_verified", "Value": "true"}],
            )
        except ClientError as exc:
            raise self._failure("create_account", exc) from exc

        user = response.get("User", {})
        attributes = user.get("Attributes", [])
        return Account(
            id=_attribute(attributes, "sub") or user.get("Username") or email,
            email=email,
            name=name,
            created_at=user.get("UserCreateDate") or datetime.now(timezone.utc),
            is_email_verified=True,
        )

    def authenticate(self, email: str, password: str) -> CredentialGrant | None:
        """
        Authenticate with the admin username/password flow.

        Returns None when Cognito answers with a challenge instead of an
        AuthenticationResult.

        Raises:
            ProviderError: If Cognito rejects the credentials
        """
        auth_parameters = {"USERNAME": email, "PASSWORD": password}
        if self._client_secret:
            auth_parameters["SECRET_HASH"] = secret_hash(
                email, self._client_id, self._client_secret
            )

        try:
            response = self._client.admin_initiate_auth(
                UserPoolId=self._user_pool_id,
                ClientId=self._client_id,
                AuthFlow=AUTH_FLOW,
                AuthParameters=auth_parameters,
            )
        except ClientError as exc:
            raise self._failure("authenticate", exc) from exc

        result = response.get("AuthenticationResult")
        if not result:
            logger.info(
                "Cognito returned no authentication result (challenge: %s)",
                response.get("ChallengeName"),
            )
            return None

        return CredentialGrant(
            access_token=result.get("AccessToken", ""),
            refresh_token=result.get("RefreshToken", ""),
            id_token=result.get("IdToken", ""),
            expires_in=result.get("ExpiresIn", 0),
            token_type=result.get("TokenType") or "Bearer",
        )

    def find_by_subject(self, subject: str) -> Account | None:
        """
        Find a user by its ``sub`` attribute.

        Returns None when no user matches or Cognito reports the user as
        not found.

        Raises:
            ProviderError: For any other Cognito failure
        """
        logger.debug(
            "Looking up Cognito user by sub %s in pool %s", subject, self._user_pool_id
        )
        try:
            response = self._client.list_users(
                UserPoolId=self._user_pool_id,
                Filter=f'sub = "{subject}"',
                Limit=1,
            )
        except ClientError as exc:
            error = _to_provider_error(exc)
            if error.code == ProviderErrorCode.USER_NOT_FOUND:
                return None
            raise self._failure("find_by_subject", exc) from exc

        users = response.get("Users", [])
        if not users:
            logger.debug("No Cognito user matches sub %s", subject)
            return None

        user = users[0]
        attributes = user.get("Attributes", [])
        return Account(
            id=_attribute(attributes, "sub") or subject,
            email=_attribute(attributes, "email") or "",
            name=_attribute(attributes, "name") or "",
            created_at=user.get("UserCreateDate") or datetime.now(timezone.utc),
            is_email_verified=_attribute(attributes, "email_verified") == "true",
        )

    def _failure(self, operation: str, error: ClientError) -> ProviderError:
        provider_error = _to_provider_error(error)
        logger.warning(
            "Cognito %s failed: %s", operation, provider_error.raw_code or "unknown code"
        )
        return provider_error
