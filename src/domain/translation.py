"""
Error translator - Provider error codes to domain error messages.

The mapping is total: every provider code lands on exactly one
message, with unrecognized codes falling through to a catch-all that
carries the provider's own message.
"""

from .exceptions import ProviderError
from .ports import ProviderErrorCode

ACCOUNT_EXISTS = "account already exists"
WEAK_PASSWORD = "password does not meet security requirements"
INVALID_CREDENTIALS = "invalid credentials"
ACCOUNT_NOT_CONFIRMED = "account not confirmed"
ACCOUNT_NOT_FOUND = "account not found"
TOO_MANY_ATTEMPTS = "too many attempts, try again later"
INVALID_PARAMETERS = "invalid parameters"
RESOURCE_NOT_FOUND = "resource not found"
AUTHENTICATION_FAILED = "authentication failed"

UNKNOWN_PROVIDER_ERROR = "provider error: {message}"
UNKNOWN_MESSAGE_FALLBACK = "unknown error"

MESSAGES: dict[ProviderErrorCode, str] = {
    ProviderErrorCode.USERNAME_EXISTS: ACCOUNT_EXISTS,
    ProviderErrorCode.INVALID_PASSWORD: WEAK_PASSWORD,
    ProviderErrorCode.NOT_AUTHORIZED: INVALID_CREDENTIALS,
    ProviderErrorCode.USER_NOT_CONFIRMED: ACCOUNT_NOT_CONFIRMED,
    ProviderErrorCode.USER_NOT_FOUND: ACCOUNT_NOT_FOUND,
    ProviderErrorCode.TOO_MANY_REQUESTS: TOO_MANY_ATTEMPTS,
    ProviderErrorCode.INVALID_PARAMETER: INVALID_PARAMETERS,
    ProviderErrorCode.RESOURCE_NOT_FOUND: RESOURCE_NOT_FOUND,
}


def translate(error: ProviderError) -> str:
    """
    Translate a provider error into its domain error message.

    Args:
        error: Error raised by an identity provider adapter

    Returns:
        Stable domain message for the error's code
    """
    try:
        return MESSAGES[error.code]
    except KeyError:
        return UNKNOWN_PROVIDER_ERROR.format(
            message=error.message or UNKNOWN_MESSAGE_FALLBACK
        )
