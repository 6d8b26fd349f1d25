"""Logistics process API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from gestio.application.repositories import LogisticsRepository
from gestio.core.dependencies import get_logistics_repository
from gestio.service.aggregation import (
    active_process_count,
    filter_processes,
    group_by_status,
    pending_process_count,
    process_status_counts,
)
from gestio.presentation.schemas import (
    ErrorResponseSchema,
    LogisticsBoardResponseSchema,
    LogisticsCreateSchema,
    LogisticsListResponseSchema,
    LogisticsResponseSchema,
    LogisticsUpdateSchema,
)

from .results import listed, unwrap

logistics_router = APIRouter(
    prefix="/logistics",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Not authenticated"},
        502: {"model": ErrorResponseSchema, "description": "Record store error"},
    },
)


@logistics_router.get(
    "",
    response_model=LogisticsListResponseSchema,
    summary="List Logistics Processes",
)
async def list_processes(
    repo: Annotated[LogisticsRepository, Depends(get_logistics_repository)],
    search: Annotated[str | None, Query(description="Name contains")] = None,
) -> LogisticsListResponseSchema:
    processes = filter_processes(await listed(repo), search=search)
    return LogisticsListResponseSchema(
        processes=[LogisticsResponseSchema.model_validate(p) for p in processes],
        active=active_process_count(processes),
        pending=pending_process_count(processes),
    )


@logistics_router.get(
    "/board",
    response_model=LogisticsBoardResponseSchema,
    summary="Kanban Board",
    description="Processes grouped by status, one column per status.",
)
async def process_board(
    repo: Annotated[LogisticsRepository, Depends(get_logistics_repository)],
    search: Annotated[str | None, Query(description="Name contains")] = None,
) -> LogisticsBoardResponseSchema:
    processes = filter_processes(await listed(repo), search=search)
    return LogisticsBoardResponseSchema(
        columns={
            status: [LogisticsResponseSchema.model_validate(p) for p in column]
            for status, column in group_by_status(processes).items()
        },
        counts=process_status_counts(processes),
    )


@logistics_router.post(
    "",
    response_model=LogisticsResponseSchema,
    status_code=201,
    summary="Create Logistics Process",
    responses={400: {"model": ErrorResponseSchema, "description": "Invalid process"}},
)
async def create_process(
    request: LogisticsCreateSchema,
    repo: Annotated[LogisticsRepository, Depends(get_logistics_repository)],
) -> LogisticsResponseSchema:
    result = await repo.create(request.model_dump(exclude_none=True))
    return LogisticsResponseSchema.model_validate(unwrap(result, repo.entity_name))


@logistics_router.patch(
    "/{process_id}",
    response_model=LogisticsResponseSchema,
    summary="Update Logistics Process",
    description="Partial update. Moving a card between columns sends only `status`.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid process"},
        404: {"model": ErrorResponseSchema, "description": "Not found or not permitted"},
    },
)
async def update_process(
    process_id: str,
    request: LogisticsUpdateSchema,
    repo: Annotated[LogisticsRepository, Depends(get_logistics_repository)],
) -> LogisticsResponseSchema:
    result = await repo.update(process_id, request.model_dump(exclude_unset=True))
    return LogisticsResponseSchema.model_validate(
        unwrap(result, repo.entity_name, process_id)
    )


@logistics_router.delete(
    "/{process_id}",
    status_code=204,
    summary="Delete Logistics Process",
)
async def delete_process(
    process_id: str,
    repo: Annotated[LogisticsRepository, Depends(get_logistics_repository)],
) -> Response:
    unwrap(await repo.delete(process_id), repo.entity_name, process_id)
    return Response(status_code=204)
