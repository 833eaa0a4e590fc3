"""Async client facade for the CMS JSON:API.

Each public method issues exactly one GET against the CMS, resolves the
response's relationship graph and returns mapped domain entities. Brand
scoping and date floors are applied here, at query construction time:
the fixed filters are merged *after* caller filters, so a caller cannot
widen or redirect a query to another tenant by reusing the tenant key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict

from storefront.config import Settings
from storefront.schemas.course import Course, CourseSchedule
from storefront.schemas.editorial import BlogPost, Event, Faq, Testimonial
from storefront.schemas.jsonapi import Collection, Document, Resource
from storefront.schemas.learning_path import LearningPath
from storefront.schemas.query import FilterCondition, PageParams, QueryParams
from storefront.schemas.taxonomy import Category
from storefront.schemas.trainer import Trainer
from storefront.services import mappers
from storefront.services.errors import CmsApiError, is_not_found, raise_for_status
from storefront.services.query_encoder import build_url
from storefront.services.resolver import IncludedIndex

logger = logging.getLogger(__name__)

E = TypeVar("E")

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
BRAND_KEY = "field_brand.id"
COURSE_BRAND_KEY = "field_course.field_brand.id"


@dataclass(frozen=True)
class ContentType:
    """How one CMS bundle is queried and mapped.

    Attributes:
        path: Path below ``/jsonapi``.
        mapper: ``(resource, included) -> entity``.
        tenant_key: Filter path pinned to the configured tenant, or ``None``
            for content shared across brands.
        include: Relationships always requested for the mapper.
        default_sort: Sort used when the caller gives none.
        date_field: Field that receives the "today or later" floor.
    """

    path: str
    mapper: Callable[..., Any]
    tenant_key: str | None = None
    include: tuple[str, ...] = ()
    default_sort: tuple[str, ...] = ()
    date_field: str | None = None


COURSES = ContentType(
    "/node/course",
    mappers.map_course,
    tenant_key=BRAND_KEY,
    include=("field_category", "field_trainer", "field_image"),
    default_sort=("-created",),
)
SCHEDULES = ContentType(
    "/node/course_schedule",
    mappers.map_schedule,
    tenant_key=COURSE_BRAND_KEY,
    include=("field_location", "field_instructor"),
    default_sort=("field_start_date",),
    date_field="field_start_date",
)
TRAINERS = ContentType("/node/trainer", mappers.map_trainer, default_sort=("title",))
BLOG_POSTS = ContentType(
    "/node/blog",
    mappers.map_blog_post,
    tenant_key=BRAND_KEY,
    default_sort=("-created",),
)
EVENTS = ContentType(
    "/node/event",
    mappers.map_event,
    tenant_key=BRAND_KEY,
    default_sort=("field_event_date",),
    date_field="field_event_date",
)
LEARNING_PATHS = ContentType(
    "/node/learning_path",
    mappers.map_learning_path,
    tenant_key=BRAND_KEY,
    include=("field_courses",),
    default_sort=("title",),
)
FAQS = ContentType("/node/faq", mappers.map_faq, default_sort=("field_order",))
TESTIMONIALS = ContentType("/node/testimonial", mappers.map_testimonial)
CATEGORIES = ContentType(
    "/taxonomy_term/course_category", mappers.map_category, default_sort=("name",)
)


class CmsClientConfig(BaseModel):
    """Connection settings for one brand's view of the CMS."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    tenant_id: str
    api_key: str | None = None
    cache_ttl: int = 300

    @classmethod
    def from_settings(cls, settings: Settings) -> CmsClientConfig:
        return cls(
            base_url=settings.cms_base_url,
            tenant_id=settings.tenant_id,
            api_key=settings.cms_api_key,
            cache_ttl=settings.cache_ttl,
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CmsClient:
    """Read-only JSON:API client scoped to a single tenant.

    Args:
        config: Base URL, tenant id, optional API key and cache hint.
        http_client: Shared ``httpx.AsyncClient``. When omitted the client
            creates and owns one, closed by ``aclose()``.
        clock: Returns the current time; used for date floors.
        timeout: Transport timeout in seconds for an owned http client.
    """

    def __init__(
        self,
        config: CmsClientConfig,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], datetime] = _utcnow,
        timeout: float = 10.0,
    ) -> None:
        self.config = config
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> CmsClient:
        """Build a client from application settings."""
        return cls(
            CmsClientConfig.from_settings(settings),
            http_client=http_client,
            timeout=settings.http_timeout_seconds,
        )

    async def __aenter__(self) -> CmsClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": JSONAPI_MEDIA_TYPE}
        if self.config.api_key:
            headers["X-Api-Key"] = self.config.api_key
        return headers

    async def _fetch(self, path: str, params: QueryParams | None = None) -> Any:
        """GET ``path`` and return the decoded JSON body.

        Raises:
            CmsApiError: On any non-2xx status.
            httpx.HTTPError: On transport failure (propagated unchanged).
        """
        url = build_url(self.config.base_url, path, params)
        response = await self._http.get(
            url,
            headers=self._headers(),
            extensions={"revalidate": self.config.cache_ttl},
        )
        logger.debug("GET %s -> %d", path, response.status_code)
        if not response.is_success:
            logger.warning(
                "CMS request failed: GET %s -> %d", path, response.status_code
            )
        raise_for_status(response)
        return response.json()

    def today(self) -> str:
        """Current UTC date as ``YYYY-MM-DD``."""
        return self._clock().astimezone(timezone.utc).date().isoformat()

    def _scoped_query(
        self,
        content_type: ContentType,
        params: QueryParams | None,
        *,
        date_floor: bool = True,
    ) -> QueryParams:
        """Merge the content type's fixed filters over caller params.

        Fixed filters are removed from the caller's dict and re-added at the
        end, so they overwrite any caller value under the same key and are
        emitted after every caller filter. The CMS parses brackets the PHP
        way, where a later ``filter[key]`` replaces earlier
        ``filter[key][...]`` entries smuggled in through caller keys.
        """
        params = params or QueryParams()

        filters = dict(params.filter)
        if date_floor and content_type.date_field:
            filters.pop(content_type.date_field, None)
            filters[content_type.date_field] = FilterCondition(
                operator=">=", value=self.today()
            )
        if content_type.tenant_key:
            filters.pop(content_type.tenant_key, None)
            filters[content_type.tenant_key] = self.config.tenant_id

        include = list(dict.fromkeys([*content_type.include, *params.include]))
        sort = params.sort if params.sort is not None else list(content_type.default_sort)

        return params.model_copy(
            update={"filter": filters, "include": include, "sort": sort}
        )

    # ------------------------------------------------------------------
    # Generic operations
    # ------------------------------------------------------------------

    async def _collect(
        self,
        content_type: ContentType,
        mapper: Callable[[Resource, IncludedIndex], E],
        query: QueryParams,
    ) -> list[E]:
        payload = await self._fetch(content_type.path, query)
        collection = Collection.model_validate(payload)
        index = IncludedIndex(collection.included)
        return [mapper(resource, index) for resource in collection.data]

    async def list_entities(
        self,
        content_type: ContentType,
        params: QueryParams | None = None,
    ) -> list[Any]:
        """List a content type with tenant scoping and date floor applied.

        Returns:
            Mapped entities in response order; possibly empty, never None.
        """
        query = self._scoped_query(content_type, params)
        return await self._collect(content_type, content_type.mapper, query)

    async def get_by_slug(
        self,
        content_type: ContentType,
        slug: str,
        include: tuple[str, ...] = (),
    ) -> Any | None:
        """Return the first entity with ``field_slug == slug``, or None.

        No date floor applies, so past events remain addressable.
        """
        params = QueryParams(filter={"field_slug": slug}, include=list(include))
        query = self._scoped_query(content_type, params, date_floor=False)
        try:
            entities = await self._collect(content_type, content_type.mapper, query)
        except CmsApiError as exc:
            if is_not_found(exc):
                return None
            raise
        return entities[0] if entities else None

    async def get_by_id(
        self,
        content_type: ContentType,
        resource_id: str,
    ) -> Any | None:
        """Fetch ``{path}/{id}`` directly; a 404 yields None.

        Raises:
            CmsApiError: For any non-2xx status other than 404.
        """
        params = QueryParams(include=list(content_type.include))
        try:
            payload = await self._fetch(f"{content_type.path}/{resource_id}", params)
        except CmsApiError as exc:
            if is_not_found(exc):
                logger.debug("%s/%s not found", content_type.path, resource_id)
                return None
            raise
        document = Document.model_validate(payload)
        return content_type.mapper(document.data, IncludedIndex(document.included))

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    async def get_courses(self, params: QueryParams | None = None) -> list[Course]:
        return await self.list_entities(COURSES, params)

    async def get_course(self, slug: str) -> Course | None:
        """Course detail by slug, with related courses inlined."""
        return await self.get_by_slug(COURSES, slug, include=("field_related_courses",))

    async def get_course_by_id(self, course_id: str) -> Course | None:
        return await self.get_by_id(COURSES, course_id)

    async def get_courses_by_category(self, category_slug: str) -> list[Course]:
        return await self.get_courses(
            QueryParams(filter={"field_category.field_slug": category_slug})
        )

    async def search_courses(self, query: str, limit: int = 10) -> list[Course]:
        """Courses whose title contains ``query``."""
        return await self.get_courses(
            QueryParams(
                filter={"title": FilterCondition(operator="CONTAINS", value=query)},
                page=PageParams(limit=limit),
            )
        )

    # ------------------------------------------------------------------
    # Schedules
    # ------------------------------------------------------------------

    async def get_schedules(self, course_id: str) -> list[CourseSchedule]:
        """Upcoming runs of one course, earliest first."""
        return await self.list_entities(
            SCHEDULES, QueryParams(filter={"field_course.id": course_id})
        )

    async def get_upcoming_schedules(
        self,
        limit: int = 10,
        params: QueryParams | None = None,
    ) -> list[CourseSchedule]:
        """Upcoming runs across the brand's catalogue, earliest first."""
        params = params or QueryParams()
        params = params.model_copy(
            update={
                "include": ["field_course", *params.include],
                "page": params.page or PageParams(limit=limit),
            }
        )
        return await self.list_entities(SCHEDULES, params)

    # ------------------------------------------------------------------
    # Trainers
    # ------------------------------------------------------------------

    async def get_trainers(self) -> list[Trainer]:
        return await self.list_entities(TRAINERS)

    async def get_trainer(self, slug: str) -> Trainer | None:
        return await self.get_by_slug(TRAINERS, slug)

    # ------------------------------------------------------------------
    # Blog
    # ------------------------------------------------------------------

    async def get_blog_posts(self, params: QueryParams | None = None) -> list[BlogPost]:
        return await self.list_entities(BLOG_POSTS, params)

    async def get_blog_post(self, slug: str) -> BlogPost | None:
        return await self.get_by_slug(BLOG_POSTS, slug)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def get_events(self, params: QueryParams | None = None) -> list[Event]:
        """Events from today onwards, earliest first unless sorted otherwise."""
        return await self.list_entities(EVENTS, params)

    async def get_event(self, slug: str) -> Event | None:
        return await self.get_by_slug(EVENTS, slug)

    # ------------------------------------------------------------------
    # Learning paths
    # ------------------------------------------------------------------

    async def get_learning_paths(self) -> list[LearningPath]:
        return await self.list_entities(LEARNING_PATHS)

    async def get_learning_path(self, slug: str) -> LearningPath | None:
        return await self.get_by_slug(LEARNING_PATHS, slug)

    # ------------------------------------------------------------------
    # Shared content
    # ------------------------------------------------------------------

    async def get_faqs(self, category: str | None = None) -> list[Faq]:
        params = QueryParams(filter={"field_category": category} if category else {})
        return await self.list_entities(FAQS, params)

    async def get_testimonials(self, course_id: str | None = None) -> list[Testimonial]:
        params = QueryParams(
            filter={"field_course.id": course_id} if course_id else {},
            page=PageParams(limit=10),
        )
        return await self.list_entities(TESTIMONIALS, params)

    async def get_categories(self) -> list[Category]:
        return await self.list_entities(CATEGORIES)
