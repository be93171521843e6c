"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.cognito import CognitoIdentityProvider
from src.api.routers import auth_router, users_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Account registration and login backed by AWS Cognito",
    },
    {
        "name": "users",
        "description": "Account lookups by identity provider subject",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Builds the Cognito identity provider once on startup and stores it
    in app state for dependency injection.
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info(
        "Using Cognito user pool %s in %s",
        settings.cognito_user_pool_id or "<unset>",
        settings.aws_region,
    )
    if not (settings.cognito_user_pool_id and settings.cognito_client_id):
        logger.warning("Cognito user pool or client id not configured")

    app.state.identity_provider = CognitoIdentityProvider.from_settings(settings)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="cognito-auth",
    description="Account API over AWS Cognito - register, log in and look up account emails",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(auth_router)
app.include_router(users_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
