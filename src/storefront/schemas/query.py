"""Pydantic v2 models describing a JSON:API query.

A ``QueryParams`` instance has five independent, optional facets: filter,
include, sort, page and sparse fieldsets. The facade merges its own fixed
filters into caller-supplied params before encoding; see
``storefront.services.query_encoder`` for the wire grammar.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

FilterOperator = Literal[
    "=",
    "!=",
    ">",
    "<",
    ">=",
    "<=",
    "IN",
    "NOT IN",
    "CONTAINS",
    "STARTS_WITH",
]


class FilterCondition(BaseModel):
    """An explicit ``{operator, value}`` filter condition."""

    operator: FilterOperator
    value: str | list[str]


FilterValue = str | list[str] | FilterCondition


class PageParams(BaseModel):
    """Offset pagination. Zero values are treated as "not set"."""

    limit: int | None = None
    offset: int | None = None


class QueryParams(BaseModel):
    """Structured description of a JSON:API collection query.

    Filter keys are field paths and may traverse relationships with dots,
    e.g. ``field_category.field_slug``. Sort entries prefixed with ``-`` are
    descending. ``sort=None`` means "use the endpoint default", while an
    explicit empty list disables sorting.
    """

    filter: dict[str, FilterValue] = Field(default_factory=dict)
    include: list[str] = Field(default_factory=list)
    sort: list[str] | None = None
    page: PageParams | None = None
    fields: dict[str, list[str]] = Field(default_factory=dict)
