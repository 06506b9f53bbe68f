from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from authwidget.oauth import filter_oauth_params
from authwidget.settings import widget_config

router = APIRouter()


class OAuthParamsRequest(BaseModel):
    options: dict[str, Any] = {}
    config: dict[str, Any] | None = None


@router.post("/api/oauth/params")
async def oauth_params(body: OAuthParamsRequest):
    config = body.config if body.config is not None else widget_config()
    return filter_oauth_params(body.options, config)
