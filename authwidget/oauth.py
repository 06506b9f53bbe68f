from __future__ import annotations

from typing import Any

# Widget options that live at the top level of the config; everything else is an authParams field.
TOP_LEVEL_KEYS = frozenset(
    {
        "baseUrl",
        "clientId",
        "redirectUri",
        "authorizeUrl",
        "issuer",
        "oAuthTimeout",
        "language",
        "logo",
        "brandName",
    }
)

# Order matters: "token" is appended before "id_token".
TOKEN_FLAGS: dict[str, str] = {
    "getAccessToken": "token",
    "getIdToken": "id_token",
}


def filter_oauth_params(options: dict[str, Any] | None, config: dict[str, Any]) -> dict[str, Any]:
    """
    Merge per-call options over the widget config into the final authorize parameters.

    - top-level widget keys (TOP_LEVEL_KEYS) override the config directly
    - getAccessToken/getIdToken append "token"/"id_token" to authParams.responseType
    - any other option overrides the same-named authParams field
    Neither argument is mutated.
    """
    options = options or {}
    merged = dict(config)

    base_params = config.get("authParams")
    auth_params = dict(base_params) if isinstance(base_params, dict) else {}
    has_auth_params = isinstance(base_params, dict)

    base_type = auth_params.get("responseType")
    # A bare string ("id_token") is a single response type.
    response_type = [base_type] if isinstance(base_type, str) else list(base_type or [])
    changed = False
    for flag, value in TOKEN_FLAGS.items():
        if options.get(flag) and value not in response_type:
            response_type.append(value)
            changed = True
    if changed or isinstance(base_type, list):
        auth_params["responseType"] = response_type
        has_auth_params = True

    for key, value in options.items():
        if key in TOP_LEVEL_KEYS:
            merged[key] = value
        elif key in TOKEN_FLAGS:
            continue
        elif key == "authParams" and isinstance(value, dict):
            auth_params.update(value)
            has_auth_params = True
        else:
            auth_params[key] = value
            has_auth_params = True

    if has_auth_params:
        merged["authParams"] = auth_params
    return merged
