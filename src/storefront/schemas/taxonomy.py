"""Category and location entities."""

from __future__ import annotations

from storefront.schemas.base import Entity


class Category(Entity):
    """A ``course_category`` taxonomy term."""

    name: str = ""
    slug: str = ""
    description: str | None = None
    parent_id: str | None = None


class Location(Entity):
    """A training venue.

    ``type`` is normally one of ``classroom``, ``online`` or ``hybrid`` but
    is carried verbatim from the CMS.
    """

    name: str = ""
    city: str = ""
    address: str | None = None
    type: str = "classroom"
