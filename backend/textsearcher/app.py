"""FastAPI application setup for textsearcher."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from textsearcher import __version__
from textsearcher.api.dependencies import get_app_settings
from textsearcher.api.routes_admin import router as admin_router
from textsearcher.api.routes_search import router as search_router
from textsearcher.core.logging import configure_logging
from textsearcher.core.metrics import REQUEST_COUNT

configure_logging(get_app_settings())

app = FastAPI(
    title="textsearcher",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(RequestValidationError)
async def count_rejected_request(request: Request, exc: RequestValidationError):
    endpoint = request.url.path.strip("/") or "root"
    REQUEST_COUNT.labels(endpoint=endpoint, method=request.method, status="422").inc()
    return await request_validation_exception_handler(request, exc)


app.include_router(search_router, prefix="", tags=["search"])
app.include_router(admin_router, prefix="", tags=["admin"])
