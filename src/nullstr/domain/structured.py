"""Structured-null wire form: ``{"String": "...", "Valid": true}``.

The object shape carries an explicit value field and an explicit
validity flag. Field names match case-insensitively, unknown keys are
ignored, and a missing or ``null`` field keeps its zero value. Field
types are strict: ``String`` must be a JSON string and ``Valid`` a JSON
boolean.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

# Lowercased wire key -> field alias.
_FIELD_KEYS: dict[str, str] = {
    "string": "String",
    "valid": "Valid",
}


class StructuredNullString(BaseModel):
    """Object form of a nullable string."""

    model_config = {"frozen": True, "strict": True, "populate_by_name": True}

    string: str = Field(default="", alias="String")
    valid: bool = Field(default=False, alias="Valid")

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        folded: dict[str, Any] = {}
        for key, val in data.items():
            alias = _FIELD_KEYS.get(str(key).lower())
            if alias is None or val is None:
                continue
            folded[alias] = val
        return folded

    def to_wire(self) -> dict[str, Any]:
        """Return the ``{"String": ..., "Valid": ...}`` dict."""
        return self.model_dump(by_alias=True)
