"""Relationship resolution against a response's ``included`` array.

All lookups are scoped to a single response: relationship chains are
followed hop by hop through the same ``included`` set, and a reference the
server did not inline simply resolves to nothing. Nothing in this module
raises on missing or malformed linkage.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from storefront.schemas.jsonapi import Relationship, Resource, ResourceRef

logger = logging.getLogger(__name__)

# Drupal's synthetic root for taxonomy parents.
VIRTUAL_ID = "virtual"


class IncludedIndex:
    """``(type, id) -> Resource`` lookup built once per response.

    Behaves like a first-match linear scan over ``included``: when the same
    key appears twice, the first occurrence wins.
    """

    def __init__(self, resources: Iterable[Resource] = ()) -> None:
        self._by_key: dict[tuple[str, str], Resource] = {}
        for resource in resources:
            self._by_key.setdefault(resource.key, resource)

    def __len__(self) -> int:
        return len(self._by_key)

    def get(self, ref: ResourceRef) -> Resource | None:
        resource = self._by_key.get(ref.key)
        if resource is None:
            logger.debug("Unresolved reference %s:%s", ref.type, ref.id)
        return resource


Included = IncludedIndex | Iterable[Resource] | None


def as_index(included: Included) -> IncludedIndex:
    """Normalise an ``included`` argument into an ``IncludedIndex``."""
    if isinstance(included, IncludedIndex):
        return included
    return IncludedIndex(included or ())


def resolve_one(relationship: Relationship | None, included: Included) -> Resource | None:
    """Resolve a to-one relationship.

    Returns ``None`` for a missing relationship, ``null`` linkage, to-many
    linkage or a reference absent from ``included``.
    """
    if relationship is None or not isinstance(relationship.data, ResourceRef):
        return None
    return as_index(included).get(relationship.data)


def resolve_many(relationship: Relationship | None, included: Included) -> list[Resource]:
    """Resolve a to-many relationship, keeping relationship order.

    Unmatched references are dropped; the rest of the collection survives.
    """
    if relationship is None or not isinstance(relationship.data, list):
        return []
    index = as_index(included)
    resolved = (index.get(ref) for ref in relationship.data)
    return [resource for resource in resolved if resource is not None]


def related_id(relationship: Relationship | None) -> str | None:
    """Return the raw target id of a relationship without resolving it.

    Only to-one linkage has a single id; to-many linkage is reported as
    absent, as is Drupal's ``virtual`` root id.
    """
    if relationship is None:
        return None
    data = relationship.data
    if data is None or isinstance(data, list):
        return None
    if data.id == VIRTUAL_ID:
        return None
    return data.id


def resolve_media_url(relationship: Relationship | None, included: Included) -> str | None:
    """Resolve an image field through its media entity to a file URL.

    Hop one resolves the media entity. If the media entity links a file via
    its ``field_media_image`` relationship, hop two resolves that file and
    reads ``uri.url``. Otherwise a ``field_media_image`` attribute carrying a
    ``url`` is used directly. Any gap yields ``None``.
    """
    index = as_index(included)
    media = resolve_one(relationship, index)
    if media is None:
        return None

    file_rel = media.relationship("field_media_image")
    if file_rel is not None and isinstance(file_rel.data, ResourceRef):
        file = index.get(file_rel.data)
        if file is None:
            return None
        uri = file.attributes.get("uri")
        url = uri.get("url") if isinstance(uri, dict) else None
        return url if isinstance(url, str) and url else None

    media_image = media.attributes.get("field_media_image")
    if isinstance(media_image, dict):
        url = media_image.get("url")
        if isinstance(url, str) and url:
            return url
    return None
