from __future__ import annotations

from fastapi import APIRouter

from authwidget.settings import widget_config

router = APIRouter()


@router.get("/config")
async def get_config():
    return widget_config()


@router.get("/health")
async def health_check():
    return {"status": "ok"}
