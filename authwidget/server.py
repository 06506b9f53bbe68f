from __future__ import annotations

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from authwidget.errors import error_body
from authwidget.logger import configure_logging, logger
from authwidget.routes.authn import router as authn_router
from authwidget.routes.base import router as base_router
from authwidget.routes.errors import router as errors_router
from authwidget.routes.i18n import router as i18n_router
from authwidget.routes.oauth import router as oauth_router
from authwidget.settings import warn_if_unconfigured


def create_app(transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    configure_logging()
    warn_if_unconfigured()
    app = FastAPI()
    # Outbound transport for the sign-in proxy; None means the real network.
    app.state.http_transport = transport

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(_request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.detail, status_code=exc.status_code))

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(_request, exc: RequestValidationError):
        err = error_body(exc.errors(), status_code=422, default_code="validation_error")
        return JSONResponse(status_code=422, content=err)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(_request, exc: Exception):
        logger.exception("unhandled error: %s", exc)
        err = error_body(None, status_code=500, default_code="internal_error")
        return JSONResponse(status_code=500, content=err)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(base_router)
    app.include_router(i18n_router)
    app.include_router(errors_router)
    app.include_router(oauth_router)
    app.include_router(authn_router)

    return app
