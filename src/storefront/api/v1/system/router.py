"""System router providing a health check."""

from fastapi import APIRouter, Depends

from storefront.api.deps import get_cms_client
from storefront.schemas.jsonapi import JSONAPIResource, JSONAPISingleResponse
from storefront.services.cms_client import CmsClient

router = APIRouter()


@router.get("/health", response_model=JSONAPISingleResponse)
async def health_check(cms: CmsClient = Depends(get_cms_client)) -> JSONAPISingleResponse:
    """Return process health and the tenant this instance serves.

    Does not call the CMS; upstream failures surface on content endpoints.
    """
    return JSONAPISingleResponse(
        data=JSONAPIResource(
            type="system-health",
            id="current",
            attributes={
                "status": "healthy",
                "tenant": cms.config.tenant_id,
            },
        )
    )
