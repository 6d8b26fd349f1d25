"""User preference endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gestio.core.dependencies import get_preferences_store
from gestio.core.preferences import PreferencesStore, UserPreferences
from gestio.presentation.schemas import PreferencesUpdateSchema

preferences_router = APIRouter(prefix="/settings/preferences")


@preferences_router.get("", response_model=UserPreferences, summary="Get Preferences")
async def get_preferences(
    store: Annotated[PreferencesStore, Depends(get_preferences_store)],
) -> UserPreferences:
    return store.load()


@preferences_router.put("", response_model=UserPreferences, summary="Update Preferences")
async def update_preferences(
    request: PreferencesUpdateSchema,
    store: Annotated[PreferencesStore, Depends(get_preferences_store)],
) -> UserPreferences:
    """Merge the given fields into the saved preferences."""
    preferences = store.load().updated(**request.model_dump(exclude_none=True))
    store.save(preferences)
    return preferences


@preferences_router.delete("", response_model=UserPreferences, summary="Reset Preferences")
async def reset_preferences(
    store: Annotated[PreferencesStore, Depends(get_preferences_store)],
) -> UserPreferences:
    return store.reset()
