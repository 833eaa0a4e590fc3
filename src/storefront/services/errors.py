"""Translate non-success CMS responses into typed errors."""

from __future__ import annotations

import httpx


class CmsApiError(Exception):
    """Raised when the CMS answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the CMS.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"CMS API error ({status_code}): {body}")


def raise_for_status(response: httpx.Response) -> None:
    """Raise ``CmsApiError`` unless ``response`` carries a 2xx status."""
    if not response.is_success:
        raise CmsApiError(response.status_code, response.text)


def is_not_found(exc: BaseException) -> bool:
    """Return True for the 404 that single-entity lookups turn into ``None``."""
    return isinstance(exc, CmsApiError) and exc.status_code == 404
