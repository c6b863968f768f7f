"""nullstr: a nullable string that treats blank input as null.

Bridges three serialization boundaries: JSON, plain text, and SQL NULL.
Empty strings and null are the same state everywhere, and every encoder
writes the zero value (``""`` / ``b""`` / NULL) for null.
"""

from nullstr.domain.shapes import JsonShape
from nullstr.domain.string import NullString
from nullstr.domain.structured import StructuredNullString
from nullstr.errors import DecodeError, NullStringError, ScanError, UnsupportedShapeError

__all__ = [
    "DecodeError",
    "JsonShape",
    "NullString",
    "NullStringError",
    "ScanError",
    "StructuredNullString",
    "UnsupportedShapeError",
]
