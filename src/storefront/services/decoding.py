"""Declarative decoding of an untyped attribute bag into typed values.

Each entity declares a schema: a mapping of output field name to a
``FieldSpec`` naming the source attribute(s), the semantic kind and, for
enumerations, the default. ``decode_attributes`` applies the shared
defaulting policy:

================== ============================== ===========================
kind               present and usable             missing or wrong-typed
================== ============================== ===========================
TEXT               str verbatim, numbers as str   ``""``
OPTIONAL_TEXT      non-empty text                 ``None``
NUMBER             int/float, numeric strings     ``0``
OPTIONAL_NUMBER    non-zero number                ``None``
RICH_TEXT          ``{"value": str}`` -> value    ``""``
OPTIONAL_RICH_TEXT ``{"value": str}`` -> value    ``None`` if attribute absent
ENUM               raw string, no membership test per-field default
STRING_LIST        strings from a list            ``[]``
LINK               str or ``{"uri"|"url": str}``  ``None``
================== ============================== ===========================

Decoding never raises.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from typing import Any, NamedTuple


class FieldKind(enum.Enum):
    TEXT = "text"
    OPTIONAL_TEXT = "optional_text"
    NUMBER = "number"
    OPTIONAL_NUMBER = "optional_number"
    RICH_TEXT = "rich_text"
    OPTIONAL_RICH_TEXT = "optional_rich_text"
    ENUM = "enum"
    STRING_LIST = "string_list"
    LINK = "link"


class FieldSpec(NamedTuple):
    """One entry of an entity's attribute schema.

    ``source`` may be a tuple of attribute names; the first one present with
    a non-null value is decoded.
    """

    source: str | tuple[str, ...]
    kind: FieldKind = FieldKind.TEXT
    default: Any = None


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return str(int(value)) if value.is_integer() else str(value)
    return None


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _rich_text(value: Any) -> str | None:
    if isinstance(value, dict):
        inner = value.get("value")
        if isinstance(inner, str):
            return inner
    return None


def _link(value: Any) -> str | None:
    if isinstance(value, dict):
        value = value.get("uri", value.get("url"))
    text = _as_text(value)
    return text or None


def _lookup(attributes: Mapping[str, Any], source: str | tuple[str, ...]) -> Any:
    names = (source,) if isinstance(source, str) else source
    for name in names:
        value = attributes.get(name)
        if value is not None:
            return value
    return None


def decode_value(value: Any, field_spec: FieldSpec) -> Any:
    """Decode one raw attribute value according to ``field_spec``."""
    kind = field_spec.kind

    if kind is FieldKind.TEXT:
        return _as_text(value) or ""
    if kind is FieldKind.OPTIONAL_TEXT:
        return _as_text(value) or None
    if kind is FieldKind.NUMBER:
        number = _as_number(value)
        return 0 if number is None else number
    if kind is FieldKind.OPTIONAL_NUMBER:
        return _as_number(value) or None
    if kind is FieldKind.RICH_TEXT:
        return _rich_text(value) or ""
    if kind is FieldKind.OPTIONAL_RICH_TEXT:
        if value is None:
            return None
        return _rich_text(value) or ""
    if kind is FieldKind.ENUM:
        if value is None:
            return field_spec.default
        text = _as_text(value)
        return field_spec.default if text is None else text
    if kind is FieldKind.STRING_LIST:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]
    if kind is FieldKind.LINK:
        return _link(value)
    return field_spec.default


def decode_attributes(
    attributes: Mapping[str, Any] | None,
    schema: Mapping[str, FieldSpec],
) -> dict[str, Any]:
    """Decode an attribute bag into a dict keyed by output field name.

    Args:
        attributes: The resource's raw ``attributes``; ``None`` is treated
            as an empty bag.
        schema: Output field name to ``FieldSpec``.

    Returns:
        A new dict with one entry per schema field.
    """
    attributes = attributes if isinstance(attributes, Mapping) else {}
    return {
        name: decode_value(_lookup(attributes, field_spec.source), field_spec)
        for name, field_spec in schema.items()
    }
