"""Tests for the content read API."""

import asyncio

import httpx
import pytest
from conftest import TENANT, TODAY, make_resource
from fastapi.testclient import TestClient

from storefront.api.deps import get_cms_client
from storefront.app import create_app
from storefront.services.cms_client import CmsClient, CmsClientConfig


@pytest.fixture
def api(cms_server):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(cms_server.handler))
    client = CmsClient(
        CmsClientConfig(base_url="https://cms.test", tenant_id=TENANT),
        http_client=http_client,
        clock=lambda: TODAY,
    )
    app = create_app()
    app.dependency_overrides[get_cms_client] = lambda: client
    yield TestClient(app)
    asyncio.run(http_client.aclose())


def test_health_reports_tenant(api):
    response = api.get("/api/v1/system/health")

    assert response.status_code == 200
    assert response.json()["data"]["attributes"] == {"status": "healthy", "tenant": TENANT}


def test_list_courses_returns_jsonapi_envelope(api, cms_server):
    cms_server.add(
        "/node/course",
        {"data": [make_resource("node--course", "c-1", {"title": "Azure", "field_slug": "azure"})]},
    )

    response = api.get("/api/v1/courses")

    assert response.status_code == 200
    body = response.json()
    assert body["meta"] == {"count": 1}
    resource = body["data"][0]
    assert resource["type"] == "courses"
    assert resource["id"] == "c-1"
    assert resource["attributes"]["slug"] == "azure"
    assert resource["attributes"]["level"] == "intermediate"
    assert resource["attributes"]["categories"] == []


def test_course_search_query_param(api, cms_server):
    api.get("/api/v1/courses", params={"q": "python", "limit": 3})

    params = cms_server.last_params
    assert params["filter[title][value]"] == "python"
    assert params["page[limit]"] == "3"


def test_missing_course_is_404(api):
    response = api.get("/api/v1/courses/does-not-exist")

    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found"


def test_missing_course_by_id_is_404(api, cms_server):
    cms_server.add("/node/course/x", "Not Found", status=404)

    assert api.get("/api/v1/courses/id/x").status_code == 404


def test_upstream_error_is_502_not_404(api, cms_server):
    cms_server.add("/node/course/x", "boom", status=500)

    response = api.get("/api/v1/courses/id/x")

    assert response.status_code == 502
    error = response.json()["errors"][0]
    assert error["status"] == "502"
    assert "500" in error["detail"]


def test_course_schedules_route(api, cms_server):
    response = api.get("/api/v1/courses/c-1/schedules")

    assert response.status_code == 200
    assert response.json()["data"] == []
    assert cms_server.last_params["filter[field_course.id]"] == "c-1"
    assert cms_server.last_params["filter[field_start_date][value]"] == "2024-01-10"


def test_upcoming_schedules_route(api, cms_server):
    api.get("/api/v1/schedules/upcoming", params={"limit": 4})
    assert cms_server.last_params["page[limit]"] == "4"


def test_editorial_and_catalog_routes(api, cms_server):
    for path, cms_path in [
        ("/api/v1/blog", "/jsonapi/node/blog"),
        ("/api/v1/events", "/jsonapi/node/event"),
        ("/api/v1/faqs", "/jsonapi/node/faq"),
        ("/api/v1/testimonials", "/jsonapi/node/testimonial"),
        ("/api/v1/trainers", "/jsonapi/node/trainer"),
        ("/api/v1/categories", "/jsonapi/taxonomy_term/course_category"),
        ("/api/v1/learning-paths", "/jsonapi/node/learning_path"),
    ]:
        response = api.get(path)
        assert response.status_code == 200, path
        assert cms_server.last_request.url.path == cms_path


def test_event_detail_found(api, cms_server):
    cms_server.add(
        "/node/event",
        {"data": [make_resource("node--event", "e-1", {"title": "Open day", "field_event_type": "meetup"})]},
    )

    response = api.get("/api/v1/events/open-day")

    assert response.status_code == 200
    assert response.json()["data"]["attributes"]["type"] == "meetup"
