from __future__ import annotations

from typing import Any

import httpx

from authwidget.errors import transform_error_response
from authwidget.logger import logger


class ApiError(Exception):
    """A failed request; `failure["responseJSON"]` is already normalized."""

    def __init__(self, failure: dict[str, Any]):
        self.failure = failure
        super().__init__(self.error_summary)

    @property
    def status(self) -> int:
        return int(self.failure.get("status") or 0)

    @property
    def body(self) -> dict[str, Any]:
        return self.failure["responseJSON"]

    @property
    def error_summary(self) -> str:
        return self.body["errorSummary"]

    @property
    def error_code(self) -> str | None:
        return self.body.get("errorCode")

    @property
    def error_causes(self) -> list[dict[str, Any]] | None:
        return self.body.get("errorCauses")


def failure_from_response(resp: httpx.Response) -> dict[str, Any]:
    failure: dict[str, Any] = {"status": resp.status_code, "responseText": resp.text}
    content_type = resp.headers.get("content-type", "")
    if "json" in content_type.lower():
        try:
            failure["responseJSON"] = resp.json()
        except ValueError:
            pass
    return failure


async def request_json(
    method: str,
    url: str,
    *,
    json: Any = None,
    headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float = 10.0,
) -> Any:
    """
    Send a JSON request and return the decoded response body.

    Non-2xx answers and connection failures raise ApiError carrying the normalized
    {errorSummary, errorCauses?} body; a connection failure reports status 0.
    """
    request_headers = {"Accept": "application/json"}
    request_headers.update(headers or {})
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.request(method, url, json=json, headers=request_headers)
    except httpx.TransportError as e:
        logger.info("request %s %s failed: %s", method, url, e)
        raise ApiError(transform_error_response({"status": 0})) from e

    if not resp.is_success:
        failure = transform_error_response(failure_from_response(resp))
        logger.info("request %s %s returned %s", method, url, resp.status_code)
        raise ApiError(failure)

    if not resp.content:
        return None
    return resp.json()
