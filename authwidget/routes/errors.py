from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from authwidget.errors import transform_error_response

router = APIRouter()


class RawFailure(BaseModel):
    status: int
    responseJSON: Any = None
    responseText: str | None = None


@router.post("/api/errors/normalize")
async def normalize_failure(body: RawFailure):
    failure = body.model_dump(exclude_none=True)
    return transform_error_response(failure)["responseJSON"]
