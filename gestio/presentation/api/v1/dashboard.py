"""Dashboard statistics endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gestio.application.repositories import DashboardStatsRepository
from gestio.core.dependencies import get_dashboard_repository
from gestio.domain.exceptions import StoreError
from gestio.presentation.schemas import DashboardStatsSchema, ErrorResponseSchema

dashboard_router = APIRouter(
    prefix="/dashboard",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Not authenticated"},
        502: {"model": ErrorResponseSchema, "description": "Record store error"},
    },
)


@dashboard_router.get(
    "/stats",
    response_model=DashboardStatsSchema,
    summary="Dashboard Statistics",
    description="""
    Headline figures: total liquidity (income minus expenses, no
    currency conversion), aggregate budget execution percentage, and
    active/pending logistics process counts.
    """,
)
async def dashboard_stats(
    repo: Annotated[DashboardStatsRepository, Depends(get_dashboard_repository)],
) -> DashboardStatsSchema:
    stats = await repo.refresh()
    if repo.error is not None:
        raise StoreError(repo.error)
    return DashboardStatsSchema.model_validate(stats)
