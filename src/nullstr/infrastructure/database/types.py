"""SQLAlchemy ``TypeDecorator`` storing NullString in a text column.

Bind side: Null and blank text are written as SQL NULL, any other
value as its text. Plain ``str`` and ``None`` parameters are accepted
and normalized the same way.

Result side: SQL NULL reads back as Null (never ``None``), text as
Present(text).
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from nullstr.domain.string import NullString


class NullStringType(TypeDecorator[NullString]):
    """Text column holding a :class:`NullString`.

    Usage::

        people = Table(
            "people",
            metadata,
            Column("id", Integer, primary_key=True),
            Column("nickname", NullStringType()),
        )

    Comparisons bind through the same rule, so ``column == ""`` and
    ``column == NullString.null()`` compile to ``= NULL`` and match no
    rows. Select null values with ``column.is_(None)``.
    """

    impl = Text
    cache_ok = True

    @property
    def python_type(self) -> type[NullString]:
        return NullString

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            value = NullString.from_string(value)
        if not isinstance(value, NullString):
            msg = f"NullStringType cannot bind {type(value).__name__}"
            raise TypeError(msg)
        return value.db_value()

    def process_result_value(self, value: Any, dialect: Dialect) -> NullString:
        return NullString.scan(value)
