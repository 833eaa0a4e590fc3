"""Shared FastAPI dependencies."""

from fastapi import Request

from storefront.services.cms_client import CmsClient


async def get_cms_client(request: Request) -> CmsClient:
    """Return the CmsClient stored on app state.

    The client is built once during the application lifespan and stored
    on ``request.app.state.cms_client``. Tests replace it with
    ``app.dependency_overrides``.
    """
    return request.app.state.cms_client
