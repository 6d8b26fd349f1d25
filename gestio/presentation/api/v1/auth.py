"""Authentication endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Response

from gestio.core.dependencies import get_auth_provider, get_current_identity
from gestio.domain.entities import Identity
from gestio.domain.interfaces import AuthProvider
from gestio.presentation.schemas import (
    ErrorResponseSchema,
    SessionSchema,
    SignInSchema,
    SignUpSchema,
    UserSchema,
)

logger = structlog.get_logger(__name__)

auth_router = APIRouter(
    prefix="/auth",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Authentication failed"},
    },
)


@auth_router.post(
    "/sign-in",
    response_model=SessionSchema,
    summary="Sign In",
)
async def sign_in(
    request: SignInSchema,
    auth: Annotated[AuthProvider, Depends(get_auth_provider)],
) -> SessionSchema:
    session = await auth.sign_in(request.email, request.password)
    return SessionSchema.model_validate(session)


@auth_router.post(
    "/sign-up",
    response_model=UserSchema,
    status_code=201,
    summary="Sign Up",
)
async def sign_up(
    request: SignUpSchema,
    auth: Annotated[AuthProvider, Depends(get_auth_provider)],
) -> UserSchema:
    user = await auth.sign_up(request.email, request.password, request.full_name)
    return UserSchema.model_validate(user)


@auth_router.post(
    "/sign-out",
    status_code=204,
    summary="Sign Out",
)
async def sign_out(
    identity: Annotated[Identity, Depends(get_current_identity)],
    auth: Annotated[AuthProvider, Depends(get_auth_provider)],
) -> Response:
    await auth.sign_out()
    return Response(status_code=204)


@auth_router.get(
    "/me",
    response_model=UserSchema,
    summary="Current User",
)
async def me(
    identity: Annotated[Identity, Depends(get_current_identity)],
) -> UserSchema:
    return UserSchema.model_validate(identity)
