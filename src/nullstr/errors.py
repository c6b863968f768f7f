"""Exception hierarchy for nullstr.

Every error carries the same ``code`` / ``message`` / ``detail`` triple so
callers can render failures uniformly regardless of which boundary raised.

INVARIANT: Only the JSON and database boundaries raise. Text encoding and
text decoding are infallible.
"""

from __future__ import annotations

from typing import Any


class NullStringError(Exception):
    """Base class for all nullstr errors.

    Attributes:
        code: Machine-readable error code (e.g. ``"structured_mismatch"``).
        message: Human-readable description.
        detail: Extra context about the failing input.
    """

    code: str = "nullstring_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.detail: dict[str, Any] = dict(detail or {})

    def to_dict(self) -> dict[str, Any]:
        """Return the error as a plain ``{code, message, detail}`` payload."""
        return {"code": self.code, "message": self.message, "detail": self.detail}


class DecodeError(NullStringError, ValueError):
    """JSON input could not be decoded into a NullString."""

    code = "decode_error"


class UnsupportedShapeError(DecodeError):
    """Strict mode rejected a JSON number, boolean, or array."""

    code = "unsupported_shape"


class ScanError(NullStringError, TypeError):
    """A database driver handed back a value with no string form."""

    code = "scan_error"
