"""Helpers turning domain entities into JSON:API response envelopes."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import HTTPException

from storefront.schemas.base import Entity
from storefront.schemas.jsonapi import (
    JSONAPIListResponse,
    JSONAPIResource,
    JSONAPISingleResponse,
)


def entity_resource(resource_type: str, entity: Entity) -> JSONAPIResource:
    """Build a JSON:API resource object from a domain entity."""
    return JSONAPIResource(
        type=resource_type,
        id=entity.id,
        attributes=entity.model_dump(mode="json", exclude={"id"}),
    )


def single_response(
    resource_type: str,
    entity: Entity | None,
    label: str,
) -> JSONAPISingleResponse:
    """Wrap one entity, mapping a missing entity to a 404."""
    if entity is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return JSONAPISingleResponse(data=entity_resource(resource_type, entity))


def list_response(resource_type: str, entities: Sequence[Entity]) -> JSONAPIListResponse:
    return JSONAPIListResponse(
        data=[entity_resource(resource_type, e) for e in entities],
        meta={"count": len(entities)},
    )
