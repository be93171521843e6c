"""
API routers package.

Contains the account registration, login and user lookup routes.
"""

from src.api.routers.auth import router as auth_router
from src.api.routers.users import router as users_router

__all__ = ["auth_router", "users_router"]
