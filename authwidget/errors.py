from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any

NETWORK_ERROR = "Unable to connect to the server. Please check your network connection."
INTERNAL_ERROR = "There was an unexpected internal error. Please try again."

# Error codes whose messages replace whatever the server put in errorSummary/errorCauses.
ERROR_CODES: MappingProxyType[str, str] = MappingProxyType(
    {
        "E0000004": "Sign in failed!",
        "E0000011": "Invalid token provided",
        "E0000017": "Password reset failed",
        "E0000047": "You exceeded the maximum number of requests. Try again in a while.",
        "E0000064": "Your password has expired.",
        "E0000069": "Your account is locked because of too many authentication attempts.",
        "E0000080": "The password does not meet the complexity requirements of the current password policy.",
        "E0000207": "Incorrect username or password.",
    }
)


def _parse_response_text(text: Any) -> dict[str, Any]:
    if not isinstance(text, (str, bytes, bytearray)) or not text:
        return {}
    try:
        data = json.loads(text)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def transform_error_response(failure: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize a failed request record in place.

    `failure` is the transport's raw record: {"status": int, "responseJSON"?: dict,
    "responseText"?: str}. Afterwards `failure["responseJSON"]` always holds
    {"errorSummary": str, "errorCauses"?: list}. Returns `failure`.
    """
    if failure.get("status") == 0:
        failure["responseJSON"] = {"errorSummary": NETWORK_ERROR}
        return failure

    body = failure.get("responseJSON")
    if body is None:
        body = _parse_response_text(failure.get("responseText"))
    elif not isinstance(body, dict):
        body = {}

    causes = body.get("errorCauses")
    if isinstance(causes, list) and causes:
        first = causes[0]
        if isinstance(first, dict) and first.get("errorSummary"):
            body["errorSummary"] = first["errorSummary"]

    code = body.get("errorCode")
    if isinstance(code, str) and code in ERROR_CODES:
        body["errorSummary"] = ERROR_CODES[code]
        body.pop("errorCauses", None)

    if not body.get("errorSummary"):
        body["errorSummary"] = INTERNAL_ERROR

    failure["responseJSON"] = body
    return failure


def error_body(
    detail: Any,
    *,
    status_code: int | None = None,
    default_code: str = "http_error",
) -> dict[str, Any]:
    """
    Build the widget error shape from a FastAPI/Starlette exception "detail".

    Shape:
      {"errorCode": str, "errorSummary": str, "errorCauses": list, "status": int|None}
    """
    if isinstance(detail, dict):
        code = str(detail.get("code") or default_code)
        summary = str(detail.get("message") or detail.get("detail") or INTERNAL_ERROR)
        causes = detail.get("causes") if isinstance(detail.get("causes"), list) else []
    elif isinstance(detail, list):
        code = default_code
        summary = "Validation error"
        causes = [{"errorSummary": str(d.get("msg") if isinstance(d, dict) else d)} for d in detail]
    elif detail is None:
        code, summary, causes = default_code, INTERNAL_ERROR, []
    else:
        code, summary, causes = default_code, str(detail), []
    return {"errorCode": code, "errorSummary": summary, "errorCauses": causes, "status": status_code}
