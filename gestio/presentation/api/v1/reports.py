"""Report endpoints: analytics charts and export data."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gestio.application.services import ReportService
from gestio.core.dependencies import get_preferences_store, get_report_service
from gestio.core.preferences import PreferencesStore
from gestio.presentation.schemas import (
    AnalyticsResponseSchema,
    ErrorResponseSchema,
    ExportResponseSchema,
)

report_router = APIRouter(
    prefix="/reports",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Not authenticated"},
        502: {"model": ErrorResponseSchema, "description": "Record store error"},
    },
)


@report_router.get(
    "/analytics",
    response_model=AnalyticsResponseSchema,
    summary="Analytics Charts",
)
async def analytics(
    service: Annotated[ReportService, Depends(get_report_service)],
) -> AnalyticsResponseSchema:
    """Daily income/expense series, budget distribution and process status mix."""
    return AnalyticsResponseSchema.model_validate(await service.analytics())


@report_router.get(
    "/export",
    response_model=ExportResponseSchema,
    summary="Export Data",
    description="Tabular rows for the PDF and spreadsheet writers.",
)
async def export(
    service: Annotated[ReportService, Depends(get_report_service)],
    preferences_store: Annotated[PreferencesStore, Depends(get_preferences_store)],
) -> ExportResponseSchema:
    bundle = await service.export_bundle(preferences_store.load())
    return ExportResponseSchema.model_validate(bundle)
