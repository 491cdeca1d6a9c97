"""
The Bloglist FastAPI app: routers, error bodies and the health probe.

Architecture:
- All routes live under /api (see web/router.py)
- Error bodies are always {"error": "<message>"}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist.__version__ import __version__
from bloglist.helpers.logging_helper import sanitize_exception_message
from bloglist.interfaces.api import web


# ----------------------------------------------------------------------
#  App lifecycle
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(_app_instance: FastAPI):
    """start.py starts the Application before uvicorn; shutdown stops it here."""
    from bloglist.app import application

    logging.info("[API] Serving requests")

    try:
        yield
    finally:
        logging.info("[API] Stopping")
        application.stop()


# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
api_app = FastAPI(title="Bloglist", version=__version__, lifespan=lifespan)


@api_app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@api_app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return JSONResponse(status_code=400, content={"error": "; ".join(messages) or "invalid request"})


@api_app.exception_handler(Exception)
async def exception_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=500, content={"error": sanitize_exception_message(exc, "internal server error")})


api_app.include_router(web.router)


@api_app.get("/api/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "version": __version__}
