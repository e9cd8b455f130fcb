"""Read-only catalog endpoints."""

from fastapi import APIRouter

from storyworld.core.catalog import SETTINGS, THEMES

from ..models.responses import CatalogResponse, SettingResponse, ThemeResponse

router = APIRouter()


@router.get("/", response_model=CatalogResponse, summary="List settings and themes")
async def get_catalog():
    return CatalogResponse(
        settings=[SettingResponse.from_setting(s) for s in SETTINGS],
        themes=[ThemeResponse.from_theme(t) for t in THEMES],
    )


@router.get("/settings", response_model=list[SettingResponse], summary="List story settings")
async def list_settings():
    return [SettingResponse.from_setting(s) for s in SETTINGS]


@router.get("/themes", response_model=list[ThemeResponse], summary="List story themes")
async def list_themes():
    return [ThemeResponse.from_theme(t) for t in THEMES]
