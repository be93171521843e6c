"""Identity provider adapters - AWS Cognito implementation."""

from .provider import CognitoIdentityProvider, create_cognito_client, secret_hash

__all__ = ["CognitoIdentityProvider", "create_cognito_client", "secret_hash"]
