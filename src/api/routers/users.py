"""
User routes.

Defines the email lookup endpoint.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_email_by_subject
from src.api.errors import to_http_exception
from src.api.models import EmailResponse, ErrorResponse
from src.domain.accounts import GetEmailBySubject
from src.domain.exceptions import AuthError

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/{subject}/email",
    response_model=EmailResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid subject"},
        401: {"model": ErrorResponse, "description": "Account not found"},
        429: {"model": ErrorResponse, "description": "Too many attempts"},
        500: {"model": ErrorResponse, "description": "Identity provider error"},
    },
    summary="Get account email",
    description="Resolve the email address of the account identified by "
    "its identity provider subject.",
)
def get_email(
    subject: str,
    use_case: GetEmailBySubject = Depends(get_email_by_subject),
) -> EmailResponse:
    """Return the email of the account with the given subject."""
    try:
        email = use_case.execute(subject)
    except AuthError as exc:
        raise to_http_exception(exc) from None
    return EmailResponse(email=email)
