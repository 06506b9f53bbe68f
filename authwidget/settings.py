from __future__ import annotations

import os
from typing import Any

from authwidget.i18n import to_lower
from authwidget.logger import debug_message


def env_truthy(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_list(name: str) -> list[str]:
    return [v.strip() for v in (os.environ.get(name) or "").split(",") if v.strip()]


def _env_int(name: str) -> int | None:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        debug_message(
            f"""
            {name}={raw!r} is not an integer and will be ignored.
            """
        )
        return None


def widget_config() -> dict[str, Any]:
    """
    Base widget configuration read from AUTHWIDGET_* environment variables.

    Unset values are left out so per-call options merge cleanly over it.
    """
    config: dict[str, Any] = {}
    for key, env in (
        ("baseUrl", "AUTHWIDGET_BASE_URL"),
        ("clientId", "AUTHWIDGET_CLIENT_ID"),
        ("redirectUri", "AUTHWIDGET_REDIRECT_URI"),
        ("language", "AUTHWIDGET_LANGUAGE"),
    ):
        value = (os.environ.get(env) or "").strip()
        if value:
            config[key] = value

    timeout = _env_int("AUTHWIDGET_OAUTH_TIMEOUT")
    if timeout is not None:
        config["oAuthTimeout"] = timeout

    auth_params: dict[str, Any] = {}
    response_type = to_lower(env_list("AUTHWIDGET_RESPONSE_TYPE"))
    if response_type:
        auth_params["responseType"] = list(dict.fromkeys(response_type))
    scopes = env_list("AUTHWIDGET_SCOPES")
    if scopes:
        auth_params["scopes"] = scopes
    if auth_params:
        config["authParams"] = auth_params

    return config


def warn_if_unconfigured() -> None:
    """Warn once at startup when the widget has no org to talk to."""
    if "baseUrl" not in widget_config():
        debug_message(
            """
            AUTHWIDGET_BASE_URL is not set.
            Sign-in requests will be rejected until it points at your org.
            """
        )
