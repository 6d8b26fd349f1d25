"""Transaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from gestio.application.repositories import TransactionRepository
from gestio.core.dependencies import get_record_store, get_transaction_repository
from gestio.domain.entities import TransactionType
from gestio.domain.interfaces import RecordStoreClient
from gestio.service.aggregation import (
    ALL,
    aggregation_settings,
    filter_transactions,
    total_by_type,
    total_liquidity,
    unique_currency_codes,
)
from gestio.presentation.schemas import (
    ErrorResponseSchema,
    TransactionCreateSchema,
    TransactionListResponseSchema,
    TransactionResponseSchema,
    TransactionUpdateSchema,
)

from .results import listed, unwrap

transaction_router = APIRouter(
    prefix="/transactions",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Not authenticated"},
        502: {"model": ErrorResponseSchema, "description": "Record store error"},
    },
)


@transaction_router.get(
    "",
    response_model=TransactionListResponseSchema,
    summary="List Recent Transactions",
)
async def list_transactions(
    store: Annotated[RecordStoreClient, Depends(get_record_store)],
    limit: Annotated[
        int,
        Query(
            ge=1,
            le=aggregation_settings.export_transaction_limit,
            description="Maximum number of transactions to return",
        ),
    ] = aggregation_settings.default_transaction_limit,
    search: Annotated[str | None, Query(description="Description contains")] = None,
    type_: Annotated[TransactionType | None, Query(alias="type")] = None,
    currency: Annotated[str | None, Query(max_length=3)] = None,
) -> TransactionListResponseSchema:
    """
    List the most recent transactions, newest first.

    Filters apply to the fetched page; totals cover the filtered rows.
    """
    repo = TransactionRepository(store, limit=limit)
    transactions = filter_transactions(
        await listed(repo),
        search=search,
        type_=type_ or ALL,
        currency=currency or ALL,
    )
    income, expense = total_by_type(transactions)
    return TransactionListResponseSchema(
        transactions=[TransactionResponseSchema.model_validate(t) for t in transactions],
        total_liquidity=total_liquidity(transactions),
        total_income=income,
        total_expense=expense,
        currencies=unique_currency_codes(transactions),
    )


@transaction_router.post(
    "",
    response_model=TransactionResponseSchema,
    status_code=201,
    summary="Record Transaction",
    responses={400: {"model": ErrorResponseSchema, "description": "Invalid transaction"}},
)
async def create_transaction(
    request: TransactionCreateSchema,
    repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> TransactionResponseSchema:
    result = await repo.create(request.model_dump(exclude_none=True))
    return TransactionResponseSchema.model_validate(unwrap(result, repo.entity_name))


@transaction_router.patch(
    "/{transaction_id}",
    response_model=TransactionResponseSchema,
    summary="Update Transaction",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid transaction"},
        404: {"model": ErrorResponseSchema, "description": "Not found or not permitted"},
    },
)
async def update_transaction(
    transaction_id: str,
    request: TransactionUpdateSchema,
    repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> TransactionResponseSchema:
    result = await repo.update(transaction_id, request.model_dump(exclude_unset=True))
    return TransactionResponseSchema.model_validate(
        unwrap(result, repo.entity_name, transaction_id)
    )


@transaction_router.delete(
    "/{transaction_id}",
    status_code=204,
    summary="Delete Transaction",
)
async def delete_transaction(
    transaction_id: str,
    repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
) -> Response:
    unwrap(await repo.delete(transaction_id), repo.entity_name, transaction_id)
    return Response(status_code=204)
