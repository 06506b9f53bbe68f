from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from authwidget.settings import env_truthy, widget_config
from authwidget.transport import ApiError, request_json

router = APIRouter()


@router.post("/api/authn")
async def primary_auth(body: dict[str, Any], http_request: Request):
    if not env_truthy("AUTHWIDGET_ENABLE_AUTHN", default=True):
        raise HTTPException(status_code=403, detail={"code": "feature_disabled", "message": "Sign-in is disabled"})
    base_url = widget_config().get("baseUrl")
    if not base_url:
        raise HTTPException(
            status_code=503,
            detail={"code": "not_configured", "message": "AUTHWIDGET_BASE_URL is not configured"},
        )

    url = f"{base_url.rstrip('/')}/api/v1/authn"
    try:
        return await request_json(
            "POST",
            url,
            json=body,
            transport=getattr(http_request.app.state, "http_transport", None),
        )
    except ApiError as e:
        # Connection failures have no upstream status; report them as a bad gateway.
        return JSONResponse(status_code=e.status or 502, content=e.body)
