"""NullString: a nullable string that treats blank input as null.

Two states: Null and Present(value). Every constructor and decoder in
this module collapses Present("") into Null; the raw constructor
``NullString(value, valid)`` is the one path that stores its arguments
verbatim.

Encoders write the zero value for Null: ``b""`` as text, ``""`` as
JSON, and NULL in the database.

INVARIANT: A NullString never changes after construction. Decoding
returns a new instance.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, ValidationError
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from nullstr.domain.shapes import JsonShape, classify
from nullstr.domain.structured import StructuredNullString
from nullstr.errors import DecodeError, ScanError, UnsupportedShapeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NullString:
    """A string that may be null.

    Attributes:
        value: The raw text. Empty when null.
        valid: Whether the value is present.
    """

    value: str = ""
    valid: bool = False

    # --- Construction ---

    @classmethod
    def new(cls, value: str, valid: bool) -> NullString:
        """Store *value* and *valid* verbatim, without normalization."""
        return cls(value, valid)

    @classmethod
    def null(cls) -> NullString:
        return cls("", False)

    @classmethod
    def from_string(cls, value: str) -> NullString:
        """Create a NullString that is null if *value* is blank."""
        return cls(value, value != "")

    @classmethod
    def from_optional(cls, value: str | None) -> NullString:
        """Create a NullString that is null if *value* is None or blank."""
        if value is None:
            return cls.null()
        return cls.from_string(value)

    @classmethod
    def from_structured(cls, structured: StructuredNullString) -> NullString:
        """Convert the structured-null form, honoring its ``Valid`` flag.

        Blank text is Null regardless of the flag. JSON decoding of the
        object form ignores the flag entirely, see :meth:`from_json_value`.
        """
        return cls(structured.string, structured.valid and structured.string != "")

    # --- JSON ---

    @classmethod
    def from_json(cls, data: str | bytes | bytearray, *, strict: bool = False) -> NullString:
        """Decode JSON text.

        Accepts a JSON string, the structured-null object, or ``null``.
        Blank strings decode to Null. Numbers, booleans and arrays decode
        to Null unless *strict* is on (see :meth:`from_json_value`).
        Integers of any length and arrays nested past the parser's
        recursion limit are still numbers and arrays.

        Raises:
            DecodeError: If *data* is not valid JSON or the object form has
                wrong field types.
        """
        try:
            parsed = json.loads(data, parse_int=Decimal)
        except RecursionError as exc:
            if not _is_bracketed(data):
                msg = "JSON nested too deeply to decode into NullString"
                raise DecodeError(msg, code="invalid_json", detail={"input": _preview(data)}) from exc
            parsed = []
        except ValueError as exc:
            msg = f"Invalid JSON for NullString: {exc}"
            raise DecodeError(msg, code="invalid_json", detail={"input": _preview(data)}) from exc
        return cls.from_json_value(parsed, strict=strict)

    @classmethod
    def from_json_value(cls, obj: Any, *, strict: bool = False) -> NullString:
        """Decode an already-parsed JSON value.

        When *strict* is off, unsupported shapes are absorbed into Null;
        when on, they raise :class:`UnsupportedShapeError`.

        The object arm reads only ``String``; validity is re-derived from
        the text, so ``{"String": "", "Valid": true}`` decodes to Null.
        """
        try:
            shape = classify(obj)
        except TypeError as exc:
            raise DecodeError(str(exc), code="invalid_json") from exc

        match shape:
            case JsonShape.STRING:
                text = obj
            case JsonShape.OBJECT:
                text = _decode_structured(obj).string
            case JsonShape.NULL:
                return cls.null()
            case _:
                if strict:
                    msg = f"Cannot decode JSON {shape} into NullString"
                    raise UnsupportedShapeError(msg, detail={"shape": str(shape)})
                logger.debug("Absorbed unsupported JSON %s into null NullString", shape)
                text = ""
        return cls.from_string(text)

    def to_json(self) -> str:
        """Encode as a JSON string of the text form (``""`` when null)."""
        return json.dumps(str(self), ensure_ascii=False)

    def to_structured(self) -> StructuredNullString:
        return StructuredNullString(String=self.value, Valid=self.valid)

    # --- Text ---

    def marshal_text(self) -> bytes:
        """Encode to UTF-8 bytes. Null encodes to ``b""``."""
        if not self.valid:
            return b""
        return self.value.encode("utf-8")

    @classmethod
    def unmarshal_text(cls, data: bytes | bytearray | str) -> NullString:
        """Decode text. Blank input yields Null; never raises.

        Bytes that are not valid UTF-8 are decoded with replacement
        characters.
        """
        if isinstance(data, bytes | bytearray):
            data = bytes(data).decode("utf-8", errors="replace")
        return cls.from_string(data)

    # --- Database ---

    @classmethod
    def scan(cls, src: Any) -> NullString:
        """Build a NullString from a value returned by a database driver.

        NULL maps to Null. Text, bytes, numbers, booleans and timestamps
        are converted to their string form.

        Raises:
            ScanError: If *src* has no string form or is undecodable bytes.
        """
        if src is None:
            return cls.null()
        if isinstance(src, NullString):
            return src
        if isinstance(src, str):
            return cls.from_string(src)
        if isinstance(src, bytes | bytearray | memoryview):
            try:
                return cls.from_string(bytes(src).decode("utf-8"))
            except UnicodeDecodeError as exc:
                msg = f"Cannot scan non-UTF-8 bytes into NullString: {exc}"
                raise ScanError(msg, detail={"length": len(bytes(src))}) from exc
        if isinstance(src, bool):
            return cls.from_string("true" if src else "false")
        if isinstance(src, float):
            return cls.from_string(_format_float(src))
        if isinstance(src, int | Decimal):
            return cls.from_string(str(src))
        if isinstance(src, datetime | date):
            return cls.from_string(src.isoformat())
        msg = f"Cannot scan {type(src).__name__} into NullString"
        raise ScanError(msg, detail={"type": type(src).__name__})

    def db_value(self) -> str | None:
        """Return the value to store: None (NULL) for Null or blank text."""
        if self.is_zero():
            return None
        return self.value

    # --- Accessors ---

    def pointer(self) -> str | None:
        """Return the value, or None if this NullString is null."""
        if not self.valid:
            return None
        return self.value

    def is_zero(self) -> bool:
        """Return True for null or empty strings."""
        return not self.valid or self.value == ""

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.value if self.valid else ""

    # --- Pydantic ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "anyOf": [
                {"type": "string"},
                {"type": "null"},
                {
                    "type": "object",
                    "properties": {
                        "String": {"type": "string"},
                        "Valid": {"type": "boolean"},
                    },
                },
            ]
        }

    @classmethod
    def _coerce(cls, value: Any) -> NullString:
        if isinstance(value, NullString):
            return value
        if isinstance(value, bytes | bytearray):
            return cls.unmarshal_text(value)
        return cls.from_json_value(value)


def _decode_structured(obj: dict[str, Any]) -> StructuredNullString:
    try:
        return StructuredNullString.model_validate(obj)
    except ValidationError as exc:
        msg = f"Object does not match the structured-null form: {exc.error_count()} error(s)"
        detail = {"errors": exc.errors(include_url=False, include_input=False)}
        raise DecodeError(msg, code="structured_mismatch", detail=detail) from exc


def _is_bracketed(data: str | bytes | bytearray) -> bool:
    if isinstance(data, bytes | bytearray):
        data = bytes(data).decode("utf-8", errors="replace")
    stripped = data.strip()
    return stripped.startswith("[") and stripped.endswith("]")


def _format_float(value: float) -> str:
    """Shortest round-trip form; exponent notation below 1e-4 or from 1e6.

    ``42.0`` is ``"42"``, ``1234567.0`` is ``"1.234567e+06"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    digits = Decimal(repr(value)).normalize().as_tuple()
    ndigits = len(digits.digits)
    exponent = ndigits + int(digits.exponent) - 1
    if exponent < -4 or exponent >= 6:
        return f"{value:.{ndigits - 1}e}"
    return f"{value:.{max(ndigits - exponent - 1, 0)}f}"


def _preview(data: str | bytes | bytearray, limit: int = 80) -> str:
    if isinstance(data, bytes | bytearray):
        data = bytes(data).decode("utf-8", errors="replace")
    return data if len(data) <= limit else f"{data[:limit]}..."
