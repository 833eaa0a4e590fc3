"""JSON:API document models using Pydantic v2.

Two families live here:

* Wire-level models for documents *received* from the CMS
  (``Resource``, ``Relationship``, ``ResourceRef``, ``Document``,
  ``Collection``). Parsing is deliberately lenient: the CMS is externally
  controlled, so malformed relationship linkage or attribute bags are
  normalised away instead of failing the whole document.
* Response envelopes for documents *served* by the content read API
  (``JSONAPIResource``, ``JSONAPISingleResponse``, ``JSONAPIListResponse``,
  ``JSONAPIErrorResponse``).

Reference: https://jsonapi.org/format/
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def _is_ref(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and isinstance(value.get("type"), str)
        and isinstance(value.get("id"), str)
    )


def _mapping_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None


# ---------------------------------------------------------------------------
# Wire-level models (CMS responses)
# ---------------------------------------------------------------------------


class ResourceRef(BaseModel):
    """Resource identifier object: the ``(type, id)`` composite key."""

    type: str
    id: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.type, self.id)


class Relationship(BaseModel):
    """A named relationship; cardinality is given by the shape of ``data``.

    ``data`` is a single ``ResourceRef`` (to-one), a list (to-many) or
    ``None`` (empty to-one). Malformed identifier objects are dropped.
    """

    data: ResourceRef | list[ResourceRef] | None = None
    links: dict[str, Any] | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _drop_malformed_refs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [ref for ref in value if _is_ref(ref)]
        if _is_ref(value):
            return value
        return None

    @field_validator("links", mode="before")
    @classmethod
    def _links_mapping(cls, value: Any) -> Any:
        return _mapping_or_none(value)


class Resource(BaseModel):
    """A single resource object from a CMS response."""

    type: str
    id: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Relationship] | None = None
    links: dict[str, Any] | None = None

    @field_validator("attributes", mode="before")
    @classmethod
    def _attributes_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    @field_validator("relationships", mode="before")
    @classmethod
    def _relationships_mapping(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return None
        return {name: rel for name, rel in value.items() if isinstance(rel, dict)}

    @field_validator("links", mode="before")
    @classmethod
    def _links_mapping(cls, value: Any) -> Any:
        return _mapping_or_none(value)

    @property
    def key(self) -> tuple[str, str]:
        return (self.type, self.id)

    def relationship(self, name: str) -> Relationship | None:
        """Return the named relationship, or ``None`` when not present."""
        if not self.relationships:
            return None
        return self.relationships.get(name)


def _drop_malformed_resources(value: Any) -> Any:
    if not isinstance(value, list):
        return []
    return [item for item in value if _is_ref(item)]


class Document(BaseModel):
    """A CMS response carrying a single primary resource."""

    data: Resource
    included: list[Resource] = Field(default_factory=list)
    links: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None

    @field_validator("included", mode="before")
    @classmethod
    def _included_list(cls, value: Any) -> Any:
        return _drop_malformed_resources(value)

    @field_validator("links", "meta", mode="before")
    @classmethod
    def _object_members(cls, value: Any) -> Any:
        return _mapping_or_none(value)


class Collection(BaseModel):
    """A CMS response carrying a list of primary resources."""

    data: list[Resource] = Field(default_factory=list)
    included: list[Resource] = Field(default_factory=list)
    links: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None

    @field_validator("data", "included", mode="before")
    @classmethod
    def _resource_list(cls, value: Any) -> Any:
        return _drop_malformed_resources(value)

    @field_validator("links", "meta", mode="before")
    @classmethod
    def _object_members(cls, value: Any) -> Any:
        return _mapping_or_none(value)


# ---------------------------------------------------------------------------
# Response envelopes (content read API)
# ---------------------------------------------------------------------------


class JSONAPIResource(BaseModel):
    """A single JSON:API resource object with type, id, and attributes."""

    type: str
    id: str
    attributes: dict[str, Any]
    relationships: dict[str, Any] | None = None


class JSONAPISingleResponse(BaseModel):
    """JSON:API response envelope containing a single resource."""

    data: JSONAPIResource


class JSONAPIListResponse(BaseModel):
    """JSON:API response envelope containing a list of resources."""

    data: list[JSONAPIResource]
    meta: dict[str, Any] | None = None
    links: dict[str, Any] | None = None


class JSONAPIError(BaseModel):
    """A single JSON:API error object."""

    status: str
    title: str
    detail: str | None = None
    source: dict[str, str] | None = None


class JSONAPIErrorResponse(BaseModel):
    """JSON:API response envelope containing a list of errors."""

    errors: list[JSONAPIError]
