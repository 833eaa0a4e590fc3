"""Pytest configuration and fixtures."""

import asyncio
from datetime import datetime, timezone

import httpx
import pytest

from storefront.services.cms_client import CmsClient, CmsClientConfig

CMS_BASE_URL = "https://cms.test"
TENANT = "itmasters"
TODAY = datetime(2024, 1, 10, 15, 30, tzinfo=timezone.utc)


class FakeCmsServer:
    """In-memory stand-in for the CMS, served through ``httpx.MockTransport``.

    Routes are keyed by URL path. A route's payload may be a dict or a
    callable taking the ``httpx.Request`` and returning a dict. Unknown
    paths answer with an empty collection.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[str, tuple[int, object]] = {}

    def add(self, path, payload=None, status=200):
        self.routes[f"/jsonapi{path}"] = (status, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, payload = self.routes.get(request.url.path, (200, {"data": []}))
        if callable(payload):
            payload = payload(request)
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.last_request.url.params.multi_items())


def make_resource(type_, id_, attributes=None, relationships=None):
    """Build a raw JSON:API resource dict."""
    resource = {"type": type_, "id": id_, "attributes": attributes or {}}
    if relationships is not None:
        resource["relationships"] = relationships
    return resource


def rel(*refs, many=None):
    """Build a relationship dict. ``many`` forces to-many linkage."""
    data = [{"type": t, "id": i} for t, i in refs]
    if many is None:
        many = len(refs) != 1
    return {"data": data if many else data[0]}


@pytest.fixture
def cms_server():
    return FakeCmsServer()


@pytest.fixture
def cms_client(cms_server):
    """CmsClient for tenant ``itmasters`` with the clock fixed at 2024-01-10."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(cms_server.handler))
    yield CmsClient(
        CmsClientConfig(base_url=CMS_BASE_URL, tenant_id=TENANT),
        http_client=http_client,
        clock=lambda: TODAY,
    )
    asyncio.run(http_client.aclose())
