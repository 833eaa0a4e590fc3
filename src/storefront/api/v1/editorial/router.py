"""Blog, event, FAQ and testimonial endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_cms_client
from storefront.api.v1.resources import list_response, single_response
from storefront.schemas.jsonapi import JSONAPIListResponse, JSONAPISingleResponse
from storefront.services.cms_client import CmsClient

blog_router = APIRouter()
events_router = APIRouter()
faqs_router = APIRouter()
testimonials_router = APIRouter()


@blog_router.get("")
async def list_blog_posts(cms: CmsClient = Depends(get_cms_client)) -> JSONAPIListResponse:
    return list_response("blog-posts", await cms.get_blog_posts())


@blog_router.get("/{slug}")
async def get_blog_post(
    slug: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPISingleResponse:
    return single_response("blog-posts", await cms.get_blog_post(slug), "Blog post")


@events_router.get("")
async def list_events(cms: CmsClient = Depends(get_cms_client)) -> JSONAPIListResponse:
    """List events from today onwards."""
    return list_response("events", await cms.get_events())


@events_router.get("/{slug}")
async def get_event(
    slug: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPISingleResponse:
    return single_response("events", await cms.get_event(slug), "Event")


@faqs_router.get("")
async def list_faqs(
    category: str | None = Query(default=None),
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPIListResponse:
    return list_response("faqs", await cms.get_faqs(category))


@testimonials_router.get("")
async def list_testimonials(
    course_id: str | None = Query(default=None),
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPIListResponse:
    return list_response("testimonials", await cms.get_testimonials(course_id))
