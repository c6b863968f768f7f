"""JSON shape classification.

A parsed JSON document is one of six shapes. Decoders branch on the
shape tag instead of probing Python types inline.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Any


class JsonShape(StrEnum):
    """Dynamic shape of a parsed JSON value."""

    STRING = "string"
    OBJECT = "object"
    NULL = "null"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"


def classify(value: Any) -> JsonShape:
    """Return the :class:`JsonShape` of a value produced by ``json.loads``.

    ``bool`` is checked before numbers since it subclasses ``int``.
    ``Decimal`` covers integers parsed with ``parse_int=Decimal``.

    Raises:
        TypeError: If *value* is not a JSON-compatible Python value.
    """
    if value is None:
        return JsonShape.NULL
    if isinstance(value, str):
        return JsonShape.STRING
    if isinstance(value, bool):
        return JsonShape.BOOLEAN
    if isinstance(value, int | float | Decimal):
        return JsonShape.NUMBER
    if isinstance(value, dict):
        return JsonShape.OBJECT
    if isinstance(value, list | tuple):
        return JsonShape.ARRAY
    msg = f"Not a JSON value: {type(value).__name__}"
    raise TypeError(msg)
