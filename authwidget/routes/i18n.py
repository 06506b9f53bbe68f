from __future__ import annotations

from fastapi import APIRouter, Query, Request

from authwidget.i18n import expand_languages, parse_accept_language
from authwidget.settings import widget_config

router = APIRouter()


@router.get("/api/i18n/languages")
async def get_languages(http_request: Request, lang: list[str] = Query(default=[])):
    # Explicit ?lang= first, then the configured widget language, then the browser's list.
    requested = [t.strip() for t in lang if t.strip()]
    configured = widget_config().get("language")
    if configured:
        requested.append(configured)
    requested.extend(parse_accept_language(http_request.headers.get("accept-language")))
    return {"languages": expand_languages(requested)}
