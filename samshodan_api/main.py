"""
Samshodan Blog API

FastAPI backend serving the marketing site's blog posts.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from samshodan_api.config import get_settings
from samshodan_api.middleware import (
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    configure_logging,
)
from samshodan_api.routers import blog
from samshodan_api.services.http_client import close_shared_client
from samshodan_api.services.post_repository import get_repository

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: load posts on startup, close clients on shutdown."""
    get_repository()
    yield
    await close_shared_client()


app = FastAPI(
    title="Samshodan Blog API",
    description="Blog posts, listing filters and rendered content for the Samshodan site",
    version=VERSION,
    lifespan=lifespan,
)

# Request ID wraps the security headers middleware
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

# Routers
app.include_router(blog.router, prefix="/api")


def _check_config() -> str:
    """Verify the content source is configured. Returns 'ok' or 'fail'."""
    s = get_settings()
    if not s.use_file_source:
        return "ok"
    return "ok" if Path(s.content_dir).is_dir() else "fail"


def _run_health_checks() -> dict[str, Any]:
    """Run all health checks, returning the full response body."""
    config_status = _check_config()
    content_status = "ok" if len(get_repository()) > 0 else "fail"

    checks = {"config": config_status, "content": content_status}
    failed = [k for k, v in checks.items() if v != "ok"]

    if not failed:
        overall = "ok"
    elif content_status == "ok":
        # Content directory missing but the fallback posts are being served
        overall = "degraded"
        logger.warning("Health check degraded, failed: %s", ", ".join(failed))
    else:
        overall = "unhealthy"
        logger.error("Health check failed: %s", ", ".join(failed))

    return {
        "status": overall,
        "service": "samshodan-blog-api",
        "version": VERSION,
        "checks": checks,
    }


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Health check verifying the blog content is available."""
    result = _run_health_checks()
    status_code = 200 if result["status"] in ("ok", "degraded") else 503
    return JSONResponse(content=result, status_code=status_code)
