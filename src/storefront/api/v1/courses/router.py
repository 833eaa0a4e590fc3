"""Course and schedule endpoints returning JSON:API responses."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from storefront.api.deps import get_cms_client
from storefront.api.v1.resources import list_response, single_response
from storefront.schemas.jsonapi import JSONAPIListResponse, JSONAPISingleResponse
from storefront.schemas.query import PageParams, QueryParams
from storefront.services.cms_client import CmsClient

router = APIRouter()
schedules_router = APIRouter()


@router.get("")
async def list_courses(
    category: str | None = Query(default=None),
    q: str | None = Query(default=None, min_length=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPIListResponse:
    """List the brand's courses, optionally by category slug or title search."""
    if q is not None:
        courses = await cms.search_courses(q, limit=limit or 10)
    elif category is not None:
        courses = await cms.get_courses_by_category(category)
    else:
        params = QueryParams(page=PageParams(limit=limit)) if limit else None
        courses = await cms.get_courses(params)
    return list_response("courses", courses)


@router.get("/id/{course_id}")
async def get_course_by_id(
    course_id: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPISingleResponse:
    """Get a single course by CMS UUID."""
    return single_response("courses", await cms.get_course_by_id(course_id), "Course")


@router.get("/{course_id}/schedules")
async def list_course_schedules(
    course_id: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPIListResponse:
    """List upcoming runs of one course."""
    return list_response("course-schedules", await cms.get_schedules(course_id))


@router.get("/{slug}")
async def get_course(
    slug: str,
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPISingleResponse:
    """Get a single course by slug."""
    return single_response("courses", await cms.get_course(slug), "Course")


@schedules_router.get("/upcoming")
async def list_upcoming_schedules(
    limit: int = Query(default=10, ge=1, le=100),
    cms: CmsClient = Depends(get_cms_client),
) -> JSONAPIListResponse:
    """List upcoming course runs across the brand's catalogue."""
    return list_response(
        "course-schedules", await cms.get_upcoming_schedules(limit=limit)
    )
