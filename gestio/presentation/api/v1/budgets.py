"""Budget API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from gestio.application.repositories import BudgetRepository
from gestio.core.dependencies import get_budget_repository, get_preferences_store
from gestio.core.preferences import PreferencesStore
from gestio.domain.entities import Budget
from gestio.service.aggregation import (
    ALL,
    BudgetStatus,
    budget_execution_percentage,
    budget_percentage,
    budget_status,
    budgets_over_threshold,
    filter_budgets,
    progress_level,
    remaining_amount,
)
from gestio.presentation.schemas import (
    BudgetAlertsResponseSchema,
    BudgetCreateSchema,
    BudgetListResponseSchema,
    BudgetResponseSchema,
    BudgetUpdateSchema,
    ErrorResponseSchema,
)

from .results import listed, unwrap

budget_router = APIRouter(
    prefix="/budgets",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Not authenticated"},
        502: {"model": ErrorResponseSchema, "description": "Record store error"},
    },
)


def to_schema(budget: Budget) -> BudgetResponseSchema:
    percentage = budget_percentage(budget)
    return BudgetResponseSchema(
        id=budget.id,
        name=budget.name,
        total_amount=budget.total_amount,
        spent_amount=budget.spent_amount,
        currency_code=budget.currency_code,
        start_date=budget.start_date,
        end_date=budget.end_date,
        created_by=budget.created_by,
        created_at=budget.created_at,
        percentage=percentage,
        remaining_amount=remaining_amount(budget),
        status=budget_status(budget),
        progress_level=progress_level(percentage),
    )


@budget_router.get(
    "",
    response_model=BudgetListResponseSchema,
    summary="List Budgets",
)
async def list_budgets(
    repo: Annotated[BudgetRepository, Depends(get_budget_repository)],
    status: Annotated[BudgetStatus | None, Query(description="Execution status")] = None,
    currency: Annotated[str | None, Query(max_length=3)] = None,
) -> BudgetListResponseSchema:
    """
    List budgets, newest first.

    `execution_percentage` covers the filtered budgets.
    """
    budgets = filter_budgets(
        await listed(repo),
        status=status or ALL,
        currency=currency or ALL,
    )
    return BudgetListResponseSchema(
        budgets=[to_schema(b) for b in budgets],
        execution_percentage=budget_execution_percentage(budgets),
    )


@budget_router.get(
    "/alerts",
    response_model=BudgetAlertsResponseSchema,
    summary="Budgets Over Alert Threshold",
)
async def budget_alerts(
    repo: Annotated[BudgetRepository, Depends(get_budget_repository)],
    preferences_store: Annotated[PreferencesStore, Depends(get_preferences_store)],
) -> BudgetAlertsResponseSchema:
    preferences = preferences_store.load()
    budgets = budgets_over_threshold(await listed(repo), preferences)
    return BudgetAlertsResponseSchema(
        enabled=preferences.budget_alerts,
        threshold=preferences.budget_threshold,
        budgets=[to_schema(b) for b in budgets],
    )


@budget_router.post(
    "",
    response_model=BudgetResponseSchema,
    status_code=201,
    summary="Create Budget",
    responses={400: {"model": ErrorResponseSchema, "description": "Invalid budget"}},
)
async def create_budget(
    request: BudgetCreateSchema,
    repo: Annotated[BudgetRepository, Depends(get_budget_repository)],
) -> BudgetResponseSchema:
    """Create a budget. Spending always starts at zero."""
    result = await repo.create(request.model_dump(exclude_none=True))
    return to_schema(unwrap(result, repo.entity_name))


@budget_router.patch(
    "/{budget_id}",
    response_model=BudgetResponseSchema,
    summary="Update Budget",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid budget"},
        404: {"model": ErrorResponseSchema, "description": "Not found or not permitted"},
    },
)
async def update_budget(
    budget_id: str,
    request: BudgetUpdateSchema,
    repo: Annotated[BudgetRepository, Depends(get_budget_repository)],
) -> BudgetResponseSchema:
    result = await repo.update(budget_id, request.model_dump(exclude_unset=True))
    return to_schema(unwrap(result, repo.entity_name, budget_id))


@budget_router.delete(
    "/{budget_id}",
    status_code=204,
    summary="Delete Budget",
)
async def delete_budget(
    budget_id: str,
    repo: Annotated[BudgetRepository, Depends(get_budget_repository)],
) -> Response:
    unwrap(await repo.delete(budget_id), repo.entity_name, budget_id)
    return Response(status_code=204)
