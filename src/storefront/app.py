"""FastAPI application factory with an async lifespan owning the CMS client."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api.v1.router import v1_router
from storefront.config import get_settings
from storefront.schemas.jsonapi import JSONAPIError, JSONAPIErrorResponse
from storefront.services.cms_client import CmsClient
from storefront.services.errors import CmsApiError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the shared CMS client on startup and close it on shutdown.

    One ``httpx.AsyncClient`` (and its connection pool) is shared by every
    request; handlers receive the ``CmsClient`` through
    ``storefront.api.deps.get_cms_client``.
    """
    settings = get_settings()

    http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
    )
    app.state.cms_client = CmsClient.from_settings(settings, http_client=http_client)
    logger.info(
        "CMS client ready for tenant %s at %s",
        settings.tenant_id,
        settings.cms_base_url,
    )

    yield

    await http_client.aclose()


async def cms_api_error_handler(request: Request, exc: CmsApiError) -> JSONResponse:
    """Report an upstream CMS failure as a 502 JSON:API error document."""
    logger.warning("Upstream CMS error on %s: %s", request.url.path, exc)
    body = JSONAPIErrorResponse(
        errors=[
            JSONAPIError(
                status="502",
                title="Upstream CMS error",
                detail=f"CMS responded with status {exc.status_code}",
            )
        ]
    )
    return JSONResponse(status_code=502, content=body.model_dump(exclude_none=True))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn storefront.app:create_app --factory
    """
    settings = get_settings()

    app = FastAPI(
        title="Course Storefront Content API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    app.add_exception_handler(CmsApiError, cms_api_error_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app
