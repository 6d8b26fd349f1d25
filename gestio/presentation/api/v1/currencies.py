"""Currency reference data endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gestio.application.repositories import CurrencyRepository
from gestio.core.dependencies import get_currency_repository
from gestio.presentation.schemas import (
    CurrencyListResponseSchema,
    CurrencyResponseSchema,
)

from .results import listed

currency_router = APIRouter(prefix="/currencies")


@currency_router.get(
    "",
    response_model=CurrencyListResponseSchema,
    summary="List Currencies",
)
async def list_currencies(
    repo: Annotated[CurrencyRepository, Depends(get_currency_repository)],
) -> CurrencyListResponseSchema:
    return CurrencyListResponseSchema(
        currencies=[CurrencyResponseSchema.model_validate(c) for c in await listed(repo)]
    )
