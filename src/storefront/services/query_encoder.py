"""Encode ``QueryParams`` into a JSON:API query string.

The encoder emits ``(key, value)`` pairs in a stable order and leaves
percent-encoding to the transport (httpx). No facet is validated against a
schema: field names and values are passed through verbatim.

Grammar::

    filter[key]=value                          equality shorthand
    filter[key][operator]=OP                   explicit condition
    filter[key][value]=value                   scalar condition value
    filter[key][value][0]=a&...[1]=b           list condition value
    include=rel_a,rel_b
    sort=-created,title
    page[limit]=10&page[offset]=20
    fields[node--course]=title,field_slug
"""

from __future__ import annotations

import httpx

from storefront.schemas.query import FilterCondition, FilterValue, QueryParams


def _encode_filter(key: str, value: FilterValue) -> list[tuple[str, str]]:
    if isinstance(value, str):
        return [(f"filter[{key}]", value)]

    if isinstance(value, FilterCondition):
        operator, operand = value.operator, value.value
    else:
        operator, operand = "IN", value

    pairs = [(f"filter[{key}][operator]", operator)]
    if isinstance(operand, list):
        pairs.extend(
            (f"filter[{key}][value][{i}]", item) for i, item in enumerate(operand)
        )
    else:
        pairs.append((f"filter[{key}][value]", operand))
    return pairs


def encode_query(params: QueryParams | None) -> list[tuple[str, str]]:
    """Encode query params into ordered ``(key, value)`` pairs.

    Args:
        params: The query description. ``None`` encodes to no parameters.

    Returns:
        A list of query pairs suitable for ``httpx`` ``params=``.
    """
    if params is None:
        return []

    pairs: list[tuple[str, str]] = []

    for key, value in params.filter.items():
        pairs.extend(_encode_filter(key, value))

    if params.include:
        pairs.append(("include", ",".join(params.include)))

    if params.sort:
        pairs.append(("sort", ",".join(params.sort)))

    if params.page is not None:
        if params.page.limit:
            pairs.append(("page[limit]", str(params.page.limit)))
        if params.page.offset:
            pairs.append(("page[offset]", str(params.page.offset)))

    for resource_type, field_names in params.fields.items():
        pairs.append((f"fields[{resource_type}]", ",".join(field_names)))

    return pairs


def build_url(base_url: str, path: str, params: QueryParams | None = None) -> str:
    """Build the absolute JSON:API URL for ``path`` with an encoded query.

    Args:
        base_url: CMS origin, with or without a trailing slash.
        path: Path below ``/jsonapi``, e.g. ``/node/course``.
        params: Optional query description.

    Returns:
        The fully encoded URL string.
    """
    url = httpx.URL(
        f"{base_url.rstrip('/')}/jsonapi{path}", params=encode_query(params)
    )
    return str(url)
