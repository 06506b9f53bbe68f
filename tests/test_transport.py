import asyncio

import httpx
import pytest

from authwidget.errors import NETWORK_ERROR
from authwidget.transport import ApiError, failure_from_response, request_json


def _run(coro):
    return asyncio.run(coro)


def test_request_json_returns_body_on_success():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["accept"] == "application/json"
        return httpx.Response(200, json={"status": "SUCCESS"})

    body = _run(request_json("POST", "https://org.test/api/v1/authn", json={}, transport=httpx.MockTransport(handler)))
    assert body == {"status": "SUCCESS"}


def test_request_json_empty_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(204))
    assert _run(request_json("DELETE", "https://org.test/api/v1/sessions/me", transport=transport)) is None


def test_request_json_raises_normalized_error():
    payload = {
        "errorCode": "E0000017",
        "errorSummary": "Reset failed upstream",
        "errorCauses": [{"errorSummary": "Password requirements were not met"}],
    }
    transport = httpx.MockTransport(lambda request: httpx.Response(403, json=payload))
    with pytest.raises(ApiError) as excinfo:
        _run(request_json("POST", "https://org.test/api/v1/authn", json={}, transport=transport))
    err = excinfo.value
    assert err.status == 403
    assert err.error_code == "E0000017"
    assert err.error_summary == "Password reset failed"
    assert err.error_causes is None
    assert str(err) == "Password reset failed"


def test_request_json_network_failure_is_status_zero():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiError) as excinfo:
        _run(request_json("GET", "https://org.test/", transport=httpx.MockTransport(handler)))
    assert excinfo.value.status == 0
    assert excinfo.value.error_summary == NETWORK_ERROR


def test_failure_from_response_non_json_body():
    resp = httpx.Response(502, text="Bad Gateway", headers={"content-type": "text/plain"})
    assert failure_from_response(resp) == {"status": 502, "responseText": "Bad Gateway"}


def test_failure_from_response_json_body():
    resp = httpx.Response(400, json={"errorSummary": "nope"})
    failure = failure_from_response(resp)
    assert failure["status"] == 400
    assert failure["responseJSON"] == {"errorSummary": "nope"}
