"""SQLAlchemy column type for NullString."""

from nullstr.infrastructure.database.types import NullStringType

__all__ = ["NullStringType"]
