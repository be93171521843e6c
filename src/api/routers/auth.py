"""
Auth routes.

Defines the registration and login endpoints.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_authenticate, get_create_account
from src.api.errors import to_http_exception
from src.api.models import (
    AccountResponse,
    CredentialGrantResponse,
    ErrorResponse,
    LoginBody,
    RegisterBody,
)
from src.domain.accounts import Authenticate, CreateAccount
from src.domain.exceptions import AuthError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Account already exists"},
        500: {"model": ErrorResponse, "description": "Identity provider error"},
    },
    summary="Register a new account",
    description="Create an account in the identity provider with a permanent "
    "password and an automatically verified email.",
)
def register(
    request_data: RegisterBody,
    use_case: CreateAccount = Depends(get_create_account),
) -> AccountResponse:
    """
    Register a new account.

    - **email**: Account email address
    - **password**: Password (8 to 128 characters)
    - **name**: Display name (at least 2 characters)
    """
    try:
        account = use_case.execute(request_data.to_domain())
    except AuthError as exc:
        raise to_http_exception(exc) from None
    return AccountResponse.from_account(account)


@router.post(
    "/login",
    response_model=CredentialGrantResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or credentials"},
        401: {"model": ErrorResponse, "description": "Account not found"},
        429: {"model": ErrorResponse, "description": "Too many attempts"},
        500: {"model": ErrorResponse, "description": "Identity provider error"},
    },
    summary="Log in",
    description="Authenticate with email and password and receive access, "
    "refresh and identity tokens.",
)
def login(
    request_data: LoginBody,
    use_case: Authenticate = Depends(get_authenticate),
) -> CredentialGrantResponse:
    """Authenticate and return the credential grant."""
    try:
        grant = use_case.execute(request_data.to_domain())
    except AuthError as exc:
        raise to_http_exception(exc) from None
    return CredentialGrantResponse.from_grant(grant)
